import logging

from language_translator_lib.constants import DEFAULT_LOG_LEVEL


def prepare_logger(logger_name: str, level: str = DEFAULT_LOG_LEVEL):
    logger = logging.getLogger(logger_name)
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger

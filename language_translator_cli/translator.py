"""
Language Translator command-line interface.

A small utility for quick checks against a running service: translate a
text, identify its language, or list models and identifiable languages.
Results are printed as JSON.

Credentials are taken from the command line or from the
``LANGUAGE_TRANSLATOR_USERNAME`` / ``LANGUAGE_TRANSLATOR_PASSWORD`` /
``LANGUAGE_TRANSLATOR_TOKEN`` environment variables.

>>> language-translator translate "this is a test" --source en --target es

>>> echo "this is an important test" | language-translator identify

>>> language-translator list-models --source en
"""

import argparse
import json
import os
import sys

from language_translator_lib import LanguageTranslatorV3
from language_translator_lib.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_SERVICE_URL,
    ENV_PASSWORD,
    ENV_TOKEN,
    ENV_USERNAME,
)
from language_translator_lib.utils.logger import prepare_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Call the Language Translator v3 service."
    )
    parser.add_argument("--url", default=DEFAULT_SERVICE_URL, help="Service URL.")
    parser.add_argument(
        "--version", default=DEFAULT_API_VERSION, help="API version date."
    )
    parser.add_argument("--username", default=os.getenv(ENV_USERNAME))
    parser.add_argument("--password", default=os.getenv(ENV_PASSWORD))
    parser.add_argument("--token", default=os.getenv(ENV_TOKEN))
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level of the client."
    )

    sub = parser.add_subparsers(dest="command", required=True)

    translate = sub.add_parser("translate", help="Translate a text.")
    translate.add_argument("text", nargs="?", help="Text (defaults to STDIN).")
    translate.add_argument("--source")
    translate.add_argument("--target")
    translate.add_argument("--model-id")

    identify = sub.add_parser("identify", help="Identify the language of a text.")
    identify.add_argument("text", nargs="?", help="Text (defaults to STDIN).")

    list_models = sub.add_parser("list-models", help="List translation models.")
    list_models.add_argument("--source")
    list_models.add_argument("--target")
    list_models.add_argument(
        "--default-models",
        action="store_true",
        default=None,
        help="Only list the default models.",
    )

    sub.add_parser("list-languages", help="List identifiable languages.")
    return parser


def _text(args) -> str:
    return args.text if args.text is not None else sys.stdin.read().strip()


def run_command(client: LanguageTranslatorV3, args):
    if args.command == "translate":
        future = client.translate(
            {
                "text": _text(args),
                "source": args.source,
                "target": args.target,
                "model_id": args.model_id,
            }
        )
    elif args.command == "identify":
        future = client.identify({"text": _text(args)})
    elif args.command == "list-models":
        future = client.list_models(
            {
                "source": args.source,
                "target": args.target,
                "default_models": args.default_models,
            }
        )
    else:
        future = client.list_identifiable_languages()
    return future.result()


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = prepare_logger("language_translator_cli", level=args.log_level)
    with LanguageTranslatorV3(
        url=args.url,
        version=args.version,
        username=args.username,
        password=args.password,
        token=args.token,
        logger=logger,
    ) as client:
        result = run_command(client, args)

    sys.stdout.write(json.dumps(result, indent=2, ensure_ascii=False) + "\n")


if __name__ == "__main__":
    main()

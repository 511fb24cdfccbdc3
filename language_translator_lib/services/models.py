from language_translator_lib.services.service_interface import BaseServiceInterface


class ModelsService(BaseServiceInterface):
    """
    Service wrapper for translation models.

    Covers listing, creating (multipart upload of a forced glossary and/or a
    parallel corpus), fetching and deleting models.
    """

    operations = ("list_models", "create_model", "delete_model", "get_model")

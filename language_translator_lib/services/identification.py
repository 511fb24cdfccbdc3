from language_translator_lib.services.service_interface import BaseServiceInterface


class IdentificationService(BaseServiceInterface):
    """
    Service wrapper for language identification.

    ``list_identifiable_languages`` lists the languages the service can
    detect; ``identify`` sends raw ``text/plain`` input and returns the
    detected languages ranked by confidence.
    """

    operations = ("list_identifiable_languages", "identify")

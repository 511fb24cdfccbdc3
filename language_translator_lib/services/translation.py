"""
Service wrapper for the text translation resource.

The ``translate`` operation posts a JSON body validated (optionally) by
:class:`~language_translator_lib.data_models.translation.TranslateTextModel`.
All binding and error handling is inherited from
:class:`BaseServiceInterface`.
"""

from language_translator_lib.services.service_interface import BaseServiceInterface


class TranslationService(BaseServiceInterface):
    operations = ("translate",)

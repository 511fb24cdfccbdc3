import abc
import json

from language_translator_lib import LanguageTranslatorV3


class BaseEndpointTest(abc.ABC):
    payload = None
    payload_model = None

    def __init__(self, client: LanguageTranslatorV3):
        self._client = client

    @abc.abstractmethod
    def client_method(self):
        pass

    def run(self):
        print(f"Running {self.client_method().__name__}")
        if self.payload:
            print("- " * 50)
            print(" =========== payload =========== ")
            print(json.dumps(self.payload, indent=2, ensure_ascii=False))
            return self.client_method()(self.payload_model(**self.payload)).result()
        return self.client_method()().result()

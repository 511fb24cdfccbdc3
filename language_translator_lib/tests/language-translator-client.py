import os
import json

from language_translator_lib import LanguageTranslatorV3
from language_translator_lib.constants import ENV_PASSWORD, ENV_TOKEN, ENV_USERNAME
from language_translator_lib.tests.builtin_identification import (
    IdentifyTextTest,
    ListIdentifiableLanguagesTest,
)
from language_translator_lib.tests.builtin_translation import (
    ListDefaultModelsTest,
    ListModelsTest,
    TranslateTextTest,
)


def prepare_tests(client: LanguageTranslatorV3):
    return [
        ListModelsTest(client=client),
        ListDefaultModelsTest(client=client),
        TranslateTextTest(client=client),
        ListIdentifiableLanguagesTest(client=client),
        IdentifyTextTest(client=client),
    ]


def main():
    client = LanguageTranslatorV3(
        username=os.getenv(ENV_USERNAME),
        password=os.getenv(ENV_PASSWORD),
        token=os.getenv(ENV_TOKEN),
        timeout=40,
    )

    with client:
        for test in prepare_tests(client):
            print("--" * 50)
            test_result = test.run()
            print(" =========== response =========== ")
            print(json.dumps(test_result, indent=1, ensure_ascii=False))


if __name__ == "__main__":
    main()

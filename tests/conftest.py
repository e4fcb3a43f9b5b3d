import re

import pytest

from stringaudit.annotator import annotate
from stringaudit.bias import TermListBiasChecker
from stringaudit.config import Settings
from stringaudit.registry import Registry
from stringaudit.spelling import WordListDictionary


@pytest.fixture
def settings():
    return Settings(placeholder_regex=re.compile(r"\{\w+\}"))


@pytest.fixture
def registry():
    return Registry(
        dictionaries={"en-GB": WordListDictionary(["hello", "world", "save", "file", "files"])},
        bias_checker=TermListBiasChecker(),
    )


@pytest.fixture
def annotated(settings, registry):
    def build(values, key="key"):
        return {
            locale: annotate(key, locale, value, settings, registry)
            for locale, value in values.items()
        }

    return build

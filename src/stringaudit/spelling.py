import logging
import re
from collections.abc import Iterable, Mapping
from typing import Protocol

logger = logging.getLogger(__name__)

# Marks an empty expansion slot; never added to a dictionary
EXPANSION_PLACEHOLDER = "**PLACEHOLDER**"

word_regex = re.compile(r"[^\W\d_]+(?:['’-][^\W\d_]+)*")


class Dictionary(Protocol):
    def correct(self, word: str) -> bool: ...

    def add(self, word: str) -> None: ...


class WordListDictionary:
    def __init__(self, words: Iterable[str] = ()) -> None:
        self.words: set[str] = set()
        for word in words:
            self.add(word)

    def add(self, word: str) -> None:
        word = word.strip()
        if word:
            self.words.add(word)

    def correct(self, word: str) -> bool:
        if word in self.words:
            return True
        # "Hello" at the start of a sentence is fine when "hello" is known
        return word[:1].isupper() and word.lower() in self.words


def spellcheck(dictionary: Dictionary, text: str) -> tuple[str, ...]:
    typos: dict[str, None] = {}
    for word in word_regex.findall(text):
        if not dictionary.correct(word):
            typos[word] = None
    return tuple(typos)


def expansion_words(expansion: Mapping[str, Iterable[str]], locale: str) -> list[str]:
    return [
        word
        for word in [*expansion.get("global", ()), *expansion.get(locale, ())]
        if word != EXPANSION_PLACEHOLDER
    ]


def build_dictionaries(
    word_lists: Mapping[str, Iterable[str]],
    activated: Mapping[str, bool],
    expansion: Mapping[str, Iterable[str]] | None = None,
) -> dict[str, Dictionary]:
    expansion = expansion or {}
    dictionaries: dict[str, Dictionary] = {}
    for locale, active in sorted(activated.items()):
        if not active:
            continue
        if locale not in word_lists:
            logger.warning(f"No word list for activated dictionary {locale}")
            continue
        dictionary = WordListDictionary(word_lists[locale])
        for word in expansion_words(expansion, locale):
            dictionary.add(word)
        dictionaries[locale] = dictionary
    logger.debug(f"Loaded {len(dictionaries)} dictionaries")
    return dictionaries


def seed_dictionary_expansion(
    expansion: Mapping[str, list[str]] | None, locales: Iterable[str]
) -> dict[str, list[str]]:
    """Give every dictionary locale and ``global`` an expansion slot."""
    expansion = expansion or {}
    seeded = {
        locale: [EXPANSION_PLACEHOLDER] for locale in locales if locale not in expansion
    }
    if "global" not in expansion:
        seeded["global"] = [EXPANSION_PLACEHOLDER]
    return {**seeded, **{k: list(v) for k, v in expansion.items()}}

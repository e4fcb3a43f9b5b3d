from stringaudit.spelling import (
    EXPANSION_PLACEHOLDER,
    WordListDictionary,
    build_dictionaries,
    seed_dictionary_expansion,
    spellcheck,
)


def test_spellcheck_reports_each_typo_once():
    dictionary = WordListDictionary(["hello", "world"])
    assert spellcheck(dictionary, "Hello wrold, wrold and world") == ("wrold", "and")


def test_capitalised_known_word_is_correct():
    dictionary = WordListDictionary(["hello"])
    assert dictionary.correct("Hello")
    assert not dictionary.correct("hELLO")


def test_apostrophes_and_digits():
    dictionary = WordListDictionary(["don't", "files"])
    assert spellcheck(dictionary, "don't 42 files") == ()


def test_build_dictionaries_applies_expansion():
    dictionaries = build_dictionaries(
        {"en-GB": ["hello"], "de-DE": ["hallo"]},
        {"en-GB": True, "de-DE": False, "cs-CZ": True},
        {"global": ["Acme", EXPANSION_PLACEHOLDER], "en-GB": ["Zorg"]},
    )
    assert sorted(dictionaries) == ["en-GB"]
    assert spellcheck(dictionaries["en-GB"], "Hello Acme Zorg") == ()
    assert not dictionaries["en-GB"].correct(EXPANSION_PLACEHOLDER)


def test_seed_dictionary_expansion():
    seeded = seed_dictionary_expansion({"en-GB": ["Acme"]}, ["en-GB", "cs-CZ"])
    assert seeded == {
        "cs-CZ": [EXPANSION_PLACEHOLDER],
        "global": [EXPANSION_PLACEHOLDER],
        "en-GB": ["Acme"],
    }
    assert seed_dictionary_expansion(None, []) == {"global": [EXPANSION_PLACEHOLDER]}

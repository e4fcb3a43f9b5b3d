from stringaudit.classes import StyleFinding
from stringaudit.style import ENGLISH_RULES, GERMAN_RULES, RuleBasedChecker, check_style


def test_weasel_word():
    checker = RuleBasedChecker(ENGLISH_RULES)
    assert checker.check("This is very good", {}) == [
        StyleFinding(8, 4, '"very" is a weasel word')
    ]


def test_rules_can_be_switched_off():
    checker = RuleBasedChecker(ENGLISH_RULES)
    assert checker.check("This is very good", {"weasel": False}) == []


def test_eprime_is_off_unless_enabled():
    checker = RuleBasedChecker(ENGLISH_RULES)
    findings = checker.check("It is ready", {"eprime": True})
    assert [x.reason for x in findings] == ['"is" is a form of \'to be\'']


def test_passive_voice():
    checker = RuleBasedChecker(ENGLISH_RULES)
    assert checker.check("The file was deleted.", {}) == [
        StyleFinding(9, 11, '"was deleted" may be passive voice')
    ]


def test_sentence_openers():
    checker = RuleBasedChecker(ENGLISH_RULES)
    findings = checker.check("So we start. There is more.", {})
    assert [(x.index, x.offset) for x in findings] == [(0, 2), (13, 8)]


def test_repeated_word():
    checker = RuleBasedChecker(ENGLISH_RULES)
    assert [x.reason for x in checker.check("Save the the file", {})] == [
        '"the the" is repeated'
    ]


def test_german_wordy_phrase():
    checker = RuleBasedChecker(GERMAN_RULES)
    findings = checker.check("Wir sprechen in Bezug auf die Datei", {})
    assert [x.reason for x in findings] == ['"in Bezug auf" ist umständlich']


def test_unregistered_locale_has_no_issues():
    checkers = {"en-GB": RuleBasedChecker(ENGLISH_RULES)}
    assert check_style("This is very good", "fr-FR", checkers, {}) == ()


def test_checker_is_picked_by_locale_with_its_settings():
    class Recorder:
        def __init__(self):
            self.calls = []

        def check(self, text, settings):
            self.calls.append((text, settings))
            return [StyleFinding(0, 1, "x")]

    recorder = Recorder()
    settings = {"xx-XX": {"rule": True}}
    assert check_style("text", "xx-XX", {"xx-XX": recorder}, settings) == (
        StyleFinding(0, 1, "x"),
    )
    assert recorder.calls == [("text", {"rule": True})]

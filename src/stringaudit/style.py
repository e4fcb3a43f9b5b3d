"""Prose style checks, registered per locale.

A checker is anything with ``check(text, settings) -> list[StyleFinding]``
where ``settings`` switches named rules on and off. Locales without an
entry in the table are not style checked at all.
"""
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol

from stringaudit.classes import StyleFinding


class StyleChecker(Protocol):
    def check(
        self, text: str, settings: Mapping[str, bool]
    ) -> list[StyleFinding]: ...


@dataclass(frozen=True)
class Rule:
    regex: re.Pattern[str]
    message: str
    default: bool = True


def words(items: Iterable[str]) -> re.Pattern[str]:
    alternatives = "|".join(
        re.escape(x).replace(r"\ ", r"\s+")
        for x in sorted(items, key=len, reverse=True)
    )
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)


# Matches at the start of the text or of a sentence
def sentence_start(pattern: str) -> re.Pattern[str]:
    return re.compile(rf"(?:^|(?<=[.!?] )){pattern}\b", re.IGNORECASE | re.MULTILINE)


class RuleBasedChecker:
    def __init__(self, rules: Mapping[str, Rule]) -> None:
        self.rules = dict(rules)

    def check(self, text: str, settings: Mapping[str, bool]) -> list[StyleFinding]:
        findings = []
        for name, rule in self.rules.items():
            if not settings.get(name, rule.default):
                continue
            for match in rule.regex.finditer(text):
                findings.append(
                    StyleFinding(
                        match.start(),
                        match.end() - match.start(),
                        rule.message.format(match=match.group(0)),
                    )
                )
        return sorted(findings, key=lambda x: (x.index, x.offset, x.reason))


ENGLISH_RULES = {
    "passive": Rule(
        re.compile(
            r"\b(?:am|are|were|being|is|been|was|be)\s+"
            r"(?:\w+ed|built|chosen|done|found|given|known|made|seen|sent|shown|taken|written)\b",
            re.IGNORECASE,
        ),
        '"{match}" may be passive voice',
    ),
    "illusion": Rule(
        re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE),
        '"{match}" is repeated',
    ),
    "so": Rule(sentence_start("so"), '"{match}" adds no meaning'),
    "thereIs": Rule(
        sentence_start(r"there\s+(?:is|are)"),
        '"{match}" is unnecessary verbiage',
    ),
    "weasel": Rule(
        words(
            [
                "clearly", "completely", "exceedingly", "excellent", "extremely",
                "fairly", "few", "huge", "interestingly", "largely", "many",
                "mostly", "quite", "relatively", "remarkably", "several",
                "significantly", "substantially", "surprisingly", "tiny", "various",
                "vast", "very",
            ]
        ),
        '"{match}" is a weasel word',
    ),
    "adverb": Rule(
        words(
            [
                "absolutely", "actually", "basically", "certainly", "definitely",
                "easily", "entirely", "literally", "really", "simply", "suddenly",
                "totally", "truly", "usually",
            ]
        ),
        '"{match}" can weaken meaning',
    ),
    "tooWordy": Rule(
        words(
            [
                "a number of", "at this point in time", "due to the fact that",
                "has the ability to", "in order to", "in the event that",
                "is able to", "prior to", "subsequent to", "with regard to",
                "in spite of the fact that", "for the purpose of",
            ]
        ),
        '"{match}" is wordy or unneeded',
    ),
    "cliches": Rule(
        words(
            [
                "at the end of the day", "best of breed", "game changer",
                "in a nutshell", "low-hanging fruit", "think outside the box",
                "move the needle", "take it to the next level",
            ]
        ),
        '"{match}" is a cliche',
    ),
    "eprime": Rule(
        words(
            [
                "am", "are", "aren't", "be", "been", "being", "is", "isn't",
                "was", "wasn't", "were", "weren't", "i'm", "you're", "we're",
                "they're", "he's", "she's", "it's", "there's",
            ]
        ),
        '"{match}" is a form of \'to be\'',
        default=False,
    ),
}

GERMAN_RULES = {
    "passive": Rule(
        re.compile(r"\b(?:wird|werden|wurde|wurden)\s+(?:\w+\s+)?ge\w+(?:t|en)\b", re.IGNORECASE),
        '"{match}" ist möglicherweise Passiv',
    ),
    "weasel": Rule(
        words(
            [
                "einige", "eigentlich", "extrem", "relativ", "sehr", "viele",
                "wirklich", "ziemlich", "äußerst", "überaus",
            ]
        ),
        '"{match}" ist ein Füllwort',
    ),
    "tooWordy": Rule(
        words(
            [
                "aufgrund der Tatsache, dass", "im Rahmen von", "in Bezug auf",
                "zum Zwecke", "zum jetzigen Zeitpunkt", "in der Lage sein",
            ]
        ),
        '"{match}" ist umständlich',
    ),
}

STYLE_CHECKERS: dict[str, StyleChecker] = {
    "en-GB": RuleBasedChecker(ENGLISH_RULES),
    "de-DE": RuleBasedChecker(GERMAN_RULES),
}


def check_style(
    text: str,
    locale: str,
    checkers: Mapping[str, StyleChecker],
    settings: Mapping[str, Mapping[str, bool]],
) -> tuple[StyleFinding, ...]:
    checker = checkers.get(locale)
    if checker is None:
        return ()
    return tuple(checker.check(text, settings.get(locale, {})))

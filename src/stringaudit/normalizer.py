import re
from collections.abc import Mapping
from typing import Any

from stringaudit.classes import Plural, Scalar, TranslationValue
from stringaudit.markup import strip_markup

PLACEHOLDER_SENTINEL = "XXX"

# Idiomatic numbers that are never meant to be a dynamic value
DYNAMIC_IGNORE = frozenset({"24/7", "7/24"})

number_regex = re.compile(r"\d+(?:(?:[.,/]+\s*|\s+)\d+)*")
tag_regex = re.compile(r"<(?:.|\n)*?>")


def parse_value(raw: Any) -> TranslationValue:
    if isinstance(raw, (Scalar, Plural)):
        return raw
    if isinstance(raw, str):
        return Scalar(raw)
    if isinstance(raw, Mapping) and raw and all(
        isinstance(k, str) and isinstance(v, str) for k, v in raw.items()
    ):
        return Plural(tuple(raw.items()))
    # Unknown shapes are audited as an empty value
    return Scalar("")


def comparison_text(value: TranslationValue) -> str:
    if isinstance(value, Plural):
        return ",".join(text for _, text in value.forms).strip()
    return value.text.strip()


def strip_for_comparison(
    raw: str, placeholder_regex: re.Pattern[str]
) -> tuple[str, tuple[str, ...]]:
    placeholders = tuple(m.group(0) for m in placeholder_regex.finditer(raw))
    interpolated = placeholder_regex.sub(PLACEHOLDER_SENTINEL, raw)
    return strip_markup(interpolated), placeholders


def spellcheck_text(raw: str, placeholder_regex: re.Pattern[str]) -> str:
    return placeholder_regex.sub("", tag_regex.sub(" ", raw))


def detect_dynamic_numbers(raw: str) -> tuple[str, ...]:
    return tuple(
        m.group(0)
        for m in number_regex.finditer(raw)
        if m.group(0) not in DYNAMIC_IGNORE
    )

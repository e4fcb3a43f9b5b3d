import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import replace

from stringaudit.classes import (
    Annotation,
    CharType,
    CollectionDefinition,
    CollectionReport,
    KeyReport,
    MarkupVerdict,
)
from stringaudit.config import Settings, compile_regex
from stringaudit.length import has_inconsistent_length, max_expansion_ratio

logger = logging.getLogger(__name__)

# Numbers are written differently across languages
FIRST_CHAR_IGNORED = frozenset({CharType.DIGIT})
LAST_CHAR_IGNORED = frozenset({CharType.DIGIT, CharType.UNCATEGORIZED})


def last_char_exceptions(
    annotations: Mapping[str, Annotation], settings: Settings
) -> frozenset[str]:
    exceptions = set(settings.sentence_punctuation_free_locales)
    baseline = annotations.get(settings.baseline_locale)
    if baseline is not None and baseline.last_char_type is CharType.QUESTION_MARK:
        exceptions.update(settings.question_mark_free_locales)
    return frozenset(exceptions)


def has_mixed_char_types(types: Iterable[CharType], ignored: frozenset[CharType]) -> bool:
    return len({x for x in types if x not in ignored}) > 1


def locales_with(
    annotations: Mapping[str, Annotation], check: Callable[[Annotation], bool]
) -> tuple[str, ...]:
    return tuple(sorted(locale for locale, x in annotations.items() if check(x)))


def aggregate_key(
    key: str,
    annotations: Mapping[str, Annotation],
    settings: Settings,
    ratio_limit: Callable[[int], float] = max_expansion_ratio,
) -> KeyReport:
    baseline = annotations.get(settings.baseline_locale)
    report = KeyReport(
        key,
        baseline=baseline.text if baseline is not None else None,
        translated=tuple(sorted(annotations)),
    )
    # A single translation has nothing to disagree with
    if len(annotations) < 2:
        return report

    exceptions = last_char_exceptions(annotations, settings)
    placeholder_sets = {tuple(sorted(x.placeholders)) for x in annotations.values()}
    return replace(
        report,
        placeholders=len(placeholder_sets) > 1,
        first_char_type=has_mixed_char_types(
            (x.first_char_type for x in annotations.values()), FIRST_CHAR_IGNORED
        ),
        last_char_type=has_mixed_char_types(
            (
                x.last_char_type
                for locale, x in annotations.items()
                if locale not in exceptions
            ),
            LAST_CHAR_IGNORED,
        ),
        tags=any(x.markup is MarkupVerdict.NOT_ALLOWED for x in annotations.values()),
        length=has_inconsistent_length(
            (x.text for x in annotations.values()),
            len(baseline.text) if baseline is not None else 0,
            ratio_limit,
        ),
        dynamic_numbers=any(x.dynamic_numbers for x in annotations.values()),
        typos=locales_with(annotations, lambda x: x.has_typos),
        style_issues=locales_with(annotations, lambda x: len(x.style_issues) > 0),
        bias_issues=locales_with(annotations, lambda x: len(x.bias_issues) > 0),
    )


def collection_keys(definition: CollectionDefinition, keys: Iterable[str]) -> tuple[str, ...]:
    regex = compile_regex(
        definition.regex, definition.flags, what=f"collection {definition.name!r}"
    )
    # keys may come as common-continents-eu instead of common.continents.eu
    return tuple(key for key in sorted(keys) if regex.search(key.replace("-", ".")))


def casing_drift(slices: Sequence[Mapping[str, Annotation]]) -> tuple[str, ...]:
    if len(slices) < 2:
        return ()
    drift = []
    for locale in slices[0]:
        first_chars = [
            x[locale].text[0] for x in slices if locale in x and x[locale].text
        ]
        if len({ch == ch.upper() for ch in first_chars}) > 1:
            drift.append(locale)
    return tuple(sorted(drift))


def aggregate_collection(
    definition: CollectionDefinition,
    annotations: Mapping[str, Mapping[str, Annotation]],
) -> CollectionReport:
    keys = collection_keys(definition, annotations)
    drift = casing_drift([annotations[key] for key in keys])
    logger.debug(
        f"Collection {definition.name}: {len(keys)} keys, {len(drift)} locales with mixed casing"
    )
    return CollectionReport(
        definition.name, definition.regex, definition.flags, keys, drift
    )

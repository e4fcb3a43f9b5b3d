import logging
from typing import Any

from stringaudit.chartype import classify
from stringaudit.classes import UNSUPPORTED_LANGUAGE, Annotation
from stringaudit.config import Settings
from stringaudit.markup import strip_markup, validate_markup
from stringaudit.normalizer import (
    comparison_text,
    detect_dynamic_numbers,
    parse_value,
    spellcheck_text,
    strip_for_comparison,
)
from stringaudit.registry import Registry
from stringaudit.spelling import spellcheck
from stringaudit.style import check_style

logger = logging.getLogger(__name__)


def annotate(
    key: str, locale: str, raw: Any, settings: Settings, registry: Registry
) -> Annotation:
    value = parse_value(raw)
    text = comparison_text(value)
    stripped, placeholders = strip_for_comparison(text, settings.placeholder_regex)
    plain = strip_markup(text)

    bias_issues: tuple[str, ...] = ()
    if locale == settings.baseline_locale and registry.bias_checker is not None:
        bias_issues = tuple(registry.bias_checker.check(plain))

    dictionary = registry.dictionaries.get(locale)
    if dictionary is None:
        typos: tuple[str, ...] | str = UNSUPPORTED_LANGUAGE
    else:
        typos = spellcheck(dictionary, spellcheck_text(text, settings.placeholder_regex))

    annotation = Annotation(
        value=value,
        text=text,
        placeholders=placeholders,
        first_char_type=classify(stripped[:1]),
        last_char_type=classify(stripped[-1:]),
        markup=validate_markup(text),
        dynamic_numbers=detect_dynamic_numbers(text),
        style_issues=check_style(
            plain, locale, registry.style_checkers, settings.style_settings
        ),
        bias_issues=bias_issues,
        typos=typos,
    )
    logger.debug(f"Annotated {key} ({locale})")
    return annotation

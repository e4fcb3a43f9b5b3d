import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import yaml

from stringaudit.classes import CollectionDefinition

logger = logging.getLogger(__name__)

DEFAULT_BASELINE_LOCALE = "en-GB"
DEFAULT_PLACEHOLDER_REGEX = r"__\w+__"

DEFAULT_SPELLCHECKING_DICT_SUPPORT: dict[str, bool] = {
    "bg-BG": False,
    "cs-CZ": True,
    "da-DK": False,
    "de-DE": False,
    "el-GR": False,
    "en-GB": True,
    "es-ES": False,
    "fr-FR": False,
    "he-IL": False,
    "hu-HU": False,
    "it-IT": False,
    "lt-LT": False,
    "nb-NO": False,
    "nl-NL": False,
    "pl-PL": False,
    "pt-PT": False,
    "ro-RO": False,
    "ru-RU": False,
    "sk-SK": True,
    "sr-RS": False,
    "sv-SE": False,
    "tr-TR": False,
    "uk-UA": False,
    "vi-VN": False,
}

DEFAULT_STYLE_SETTINGS: dict[str, dict[str, bool]] = {
    "de-DE": {
        "tooWordy": True,
        "weasel": True,
    },
    "en-GB": {
        "adverb": True,
        "cliches": True,
        "eprime": False,
        "illusion": True,
        "passive": True,
        "so": True,
        "thereIs": True,
        "tooWordy": True,
        "weasel": True,
    },
}

# Thai has no sentence ending punctuation
DEFAULT_SENTENCE_PUNCTUATION_FREE_LOCALES = ("th-TH",)
# Japanese questions usually don't end with a question mark
DEFAULT_QUESTION_MARK_FREE_LOCALES = ("ja-JP",)

REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": 0,
    "g": 0,
    "y": 0,
}


class ConfigError(ValueError):
    pass


def compile_regex(pattern: Any, flags: str = "", *, what: str) -> re.Pattern[str]:
    if not isinstance(pattern, str) or not pattern:
        raise ConfigError(f"{what}: expected a non-empty pattern, got {pattern!r}")
    value = 0
    for flag in flags or "":
        if flag not in REGEX_FLAGS:
            raise ConfigError(f"{what}: unsupported regex flag {flag!r}")
        value |= REGEX_FLAGS[flag]
    try:
        return re.compile(pattern, value)
    except re.error as ex:
        raise ConfigError(f"{what}: invalid pattern {pattern!r}: {ex}") from ex


def _mapping(config: Mapping[str, Any], name: str) -> Mapping[str, Any] | None:
    value = config.get(name)
    if value is not None and not isinstance(value, Mapping):
        raise ConfigError(f"{name}: expected a mapping, got {type(value).__name__}")
    return value


def _string_list(value: Any, what: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(x, str) for x in value):
        return tuple(value)
    raise ConfigError(f"{what}: expected a string or a list of strings, got {value!r}")


def _style_settings(
    overrides: Mapping[str, Any],
) -> Mapping[str, Mapping[str, bool]]:
    merged = {**DEFAULT_STYLE_SETTINGS, **overrides}
    for locale, rules in merged.items():
        if rules is not None and not isinstance(rules, Mapping):
            raise ConfigError(f"style_settings.{locale}: expected a mapping, got {rules!r}")
    return MappingProxyType(
        {locale: MappingProxyType(dict(rules or {})) for locale, rules in merged.items()}
    )


def _workers(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ConfigError(f"workers: expected an integer, got {value!r}")
    try:
        return int(value)
    except ValueError as ex:
        raise ConfigError(f"workers: expected an integer, got {value!r}") from ex


@dataclass(frozen=True)
class Settings:
    baseline_locale: str = DEFAULT_BASELINE_LOCALE
    placeholder_regex: re.Pattern[str] = field(
        default_factory=lambda: re.compile(DEFAULT_PLACEHOLDER_REGEX)
    )
    style_settings: Mapping[str, Mapping[str, bool]] = field(
        default_factory=lambda: _style_settings({})
    )
    spellchecking: Mapping[str, bool] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_SPELLCHECKING_DICT_SUPPORT))
    )
    dictionaries: Mapping[str, str] = field(default_factory=dict)
    dicts_expansion: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    insensitiveness_allow: tuple[str, ...] = ()
    collections: tuple[CollectionDefinition, ...] = ()
    sentence_punctuation_free_locales: tuple[str, ...] = DEFAULT_SENTENCE_PUNCTUATION_FREE_LOCALES
    question_mark_free_locales: tuple[str, ...] = DEFAULT_QUESTION_MARK_FREE_LOCALES
    workers: int = 1

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None) -> "Settings":
        config = config or {}
        placeholder_regex = compile_regex(
            config.get("placeholder_regex", DEFAULT_PLACEHOLDER_REGEX),
            what="placeholder_regex",
        )
        if placeholder_regex.fullmatch(""):
            raise ConfigError("placeholder_regex: pattern must not match an empty string")

        collections = []
        for raw in config.get("collections") or []:
            if not isinstance(raw, Mapping) or "name" not in raw:
                raise ConfigError(f"collections: invalid collection definition {raw!r}")
            collection = CollectionDefinition(
                str(raw["name"]), raw.get("regex"), raw.get("flags") or ""
            )
            # compiled here only to validate it
            compile_regex(
                collection.regex,
                collection.flags,
                what=f"collection {collection.name!r}",
            )
            collections.append(collection)

        # Overrides replace the built-in tables per locale
        style_settings = _style_settings(_mapping(config, "style_settings") or {})
        spellchecking = MappingProxyType(
            {
                **DEFAULT_SPELLCHECKING_DICT_SUPPORT,
                **(_mapping(config, "spellchecking") or {}),
            }
        )
        expansion = _mapping(config, "dicts_expansion") or {}
        insensitiveness = _mapping(config, "insensitiveness") or {}
        return cls(
            baseline_locale=config.get("baseline_locale", DEFAULT_BASELINE_LOCALE),
            placeholder_regex=placeholder_regex,
            style_settings=style_settings,
            spellchecking=spellchecking,
            dictionaries=dict(_mapping(config, "dictionaries") or {}),
            dicts_expansion={
                k: _string_list(v, f"dicts_expansion.{k}") for k, v in expansion.items()
            },
            insensitiveness_allow=_string_list(
                insensitiveness.get("allow"), "insensitiveness.allow"
            ),
            collections=tuple(collections),
            sentence_punctuation_free_locales=_string_list(
                config.get(
                    "sentence_punctuation_free_locales",
                    DEFAULT_SENTENCE_PUNCTUATION_FREE_LOCALES,
                ),
                "sentence_punctuation_free_locales",
            ),
            question_mark_free_locales=_string_list(
                config.get("question_mark_free_locales", DEFAULT_QUESTION_MARK_FREE_LOCALES),
                "question_mark_free_locales",
            ),
            workers=_workers(config.get("workers", 1)),
        )


def load_config(path: str) -> dict[str, Any]:
    config: dict[str, Any] = {}
    try:
        with open(path, "r") as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        logger.error(f"Config file {path} not found, using defaults.")
    if not isinstance(config, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return config

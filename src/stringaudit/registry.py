from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from stringaudit.bias import BiasChecker, TermListBiasChecker
from stringaudit.config import Settings
from stringaudit.length import max_expansion_ratio
from stringaudit.spelling import Dictionary, build_dictionaries
from stringaudit.style import STYLE_CHECKERS, StyleChecker


@dataclass(frozen=True)
class Registry:
    """Read-only collaborators shared by every annotation of a run."""

    dictionaries: Mapping[str, Dictionary] = field(default_factory=dict)
    style_checkers: Mapping[str, StyleChecker] = field(
        default_factory=lambda: MappingProxyType(STYLE_CHECKERS)
    )
    bias_checker: BiasChecker | None = None
    max_expansion_ratio: Callable[[int], float] = max_expansion_ratio


def build_registry(
    settings: Settings,
    word_lists: Mapping[str, Iterable[str]] | None = None,
) -> Registry:
    dictionaries = build_dictionaries(
        word_lists or {}, settings.spellchecking, settings.dicts_expansion
    )
    return Registry(
        dictionaries=MappingProxyType(dictionaries),
        style_checkers=MappingProxyType(dict(STYLE_CHECKERS)),
        bias_checker=TermListBiasChecker(allow=settings.insensitiveness_allow),
    )

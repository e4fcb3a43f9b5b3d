from collections.abc import Iterable, Mapping
from typing import Protocol

from stringaudit.style import words


class BiasChecker(Protocol):
    def check(self, text: str) -> list[str]: ...


# term -> suggested replacements
DEFAULT_TERMS: dict[str, tuple[str, ...]] = {
    "blacklist": ("denylist", "blocklist"),
    "whitelist": ("allowlist", "safelist"),
    "master": ("primary", "main"),
    "slave": ("replica", "secondary"),
    "guys": ("folks", "everyone"),
    "manpower": ("workforce", "staff"),
    "sanity check": ("confidence check", "quick check"),
    "dummy": ("placeholder", "sample"),
    "crazy": ("unexpected", "surprising"),
    "insane": ("extreme", "wild"),
    "lame": ("boring", "dull"),
    "cripple": ("disable", "impair"),
    "chairman": ("chairperson", "chair"),
    "mankind": ("humankind", "humanity"),
}


def normalize_term(term: str) -> str:
    return " ".join(term.lower().split())


class TermListBiasChecker:
    def __init__(
        self,
        terms: Mapping[str, Iterable[str]] | None = None,
        allow: Iterable[str] = (),
    ) -> None:
        allowed = {normalize_term(x) for x in allow}
        self.terms = {
            normalize_term(term): tuple(replacements)
            for term, replacements in (terms if terms is not None else DEFAULT_TERMS).items()
            if normalize_term(term) not in allowed
        }
        self.regex = words(self.terms) if self.terms else None

    def check(self, text: str) -> list[str]:
        if self.regex is None:
            return []
        messages = []
        for match in self.regex.finditer(text):
            term = normalize_term(match.group(0))
            suggestions = ", ".join(f"`{x}`" for x in self.terms[term])
            messages.append(f"`{match.group(0)}` may be insensitive, use {suggestions} instead")
        return messages

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

UNSUPPORTED_LANGUAGE = "unsupported language"


class CharType(str, Enum):
    COLON = "colon"
    DOT = "dot"
    COMMA = "comma"
    UNDERSCORE = "underscore"
    SPACE = "space"
    EXCLAMATION_MARK = "exclamation mark"
    QUESTION_MARK = "question mark"
    LINE_BREAK = "line break"
    DIGIT = "digit"
    LETTER = "letter"
    UNCATEGORIZED = "uncategorized"


class MarkupVerdict(str, Enum):
    ALLOWED = "allowed"
    NOT_ALLOWED = "not allowed"


@dataclass(frozen=True)
class Scalar:
    text: str


@dataclass(frozen=True)
class Plural:
    # (category, text) pairs in the order the catalog lists them
    forms: tuple[tuple[str, str], ...]


TranslationValue = Scalar | Plural


@dataclass(frozen=True)
class StyleFinding:
    index: int
    offset: int
    reason: str


@dataclass(frozen=True)
class Annotation:
    value: TranslationValue
    text: str
    placeholders: tuple[str, ...]
    first_char_type: CharType
    last_char_type: CharType
    markup: MarkupVerdict
    dynamic_numbers: tuple[str, ...]
    style_issues: tuple[StyleFinding, ...]
    bias_issues: tuple[str, ...]
    # either the unrecognized words or UNSUPPORTED_LANGUAGE
    typos: tuple[str, ...] | str

    @property
    def has_typos(self) -> bool:
        return not isinstance(self.typos, str) and len(self.typos) > 0

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.value, Plural):
            content: Any = dict(self.value.forms)
        else:
            content = self.value.text
        return {
            "content": content,
            "placeholders": list(self.placeholders),
            "firstCharType": self.first_char_type.value,
            "lastCharType": self.last_char_type.value,
            "tags": self.markup.value,
            "dynamic": list(self.dynamic_numbers),
            "styleIssues": [
                {"index": x.index, "offset": x.offset, "reason": x.reason}
                for x in self.style_issues
            ],
            "insensitiveness": list(self.bias_issues),
            "typos": self.typos if isinstance(self.typos, str) else list(self.typos),
        }


@dataclass(frozen=True)
class KeyReport:
    key: str
    baseline: str | None = None
    translated: tuple[str, ...] = ()
    placeholders: bool = False
    first_char_type: bool = False
    last_char_type: bool = False
    tags: bool = False
    length: bool = False
    dynamic_numbers: bool = False
    typos: tuple[str, ...] = ()
    style_issues: tuple[str, ...] = ()
    bias_issues: tuple[str, ...] = ()

    @property
    def count(self) -> int:
        return len(self.translated)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "baseline": self.baseline,
            "count": self.count,
            "translated": list(self.translated),
            "inconsistencies": {
                "placeholders": self.placeholders,
                "firstCharType": self.first_char_type,
                "lastCharType": self.last_char_type,
                "tags": self.tags,
                "length": self.length,
                "dynamic": self.dynamic_numbers,
                "typos": list(self.typos),
                "styleIssues": list(self.style_issues),
                "insensitiveness": list(self.bias_issues),
            },
        }


@dataclass(frozen=True)
class CollectionDefinition:
    name: str
    regex: str
    flags: str = ""


@dataclass(frozen=True)
class CollectionReport:
    name: str
    regex: str
    flags: str
    keys: tuple[str, ...]
    first_char_casing: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "regex": self.regex,
            "regexFlags": self.flags,
            "keys": list(self.keys),
            "inconsistencies": {"firstCharCasing": list(self.first_char_casing)},
        }


@dataclass(frozen=True)
class AuditResult:
    annotations: dict[str, dict[str, Annotation]]
    key_reports: dict[str, KeyReport]
    collection_reports: dict[str, CollectionReport]
    locales: tuple[str, ...] = field(default=())

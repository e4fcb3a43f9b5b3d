import unicodedata

from stringaudit.classes import CharType

# Checked before the generic digit/letter predicates. "¿" and "¡" open a
# Spanish sentence, so they count as part of the text rather than punctuation.
CHAR_TYPES: dict[str, CharType] = {
    ":": CharType.COLON,
    "：": CharType.COLON,
    ".": CharType.DOT,
    "。": CharType.DOT,
    "…": CharType.DOT,
    ",": CharType.COMMA,
    "_": CharType.UNDERSCORE,
    " ": CharType.SPACE,
    "¿": CharType.LETTER,
    "¡": CharType.LETTER,
    "!": CharType.EXCLAMATION_MARK,
    "！": CharType.EXCLAMATION_MARK,
    "?": CharType.QUESTION_MARK,
    ";": CharType.QUESTION_MARK,  # Greek question mark after NFC
    "\u037e": CharType.QUESTION_MARK,
    "؟": CharType.QUESTION_MARK,
    "？": CharType.QUESTION_MARK,
    "\n": CharType.LINE_BREAK,
}


def classify(char: str | None) -> CharType:
    if not char:
        return CharType.UNCATEGORIZED
    char = char[0]
    if char in CHAR_TYPES:
        return CHAR_TYPES[char]
    if unicodedata.category(char) == "Nd":
        return CharType.DIGIT
    if char.isalpha():
        return CharType.LETTER
    return CharType.UNCATEGORIZED

import pytest

from stringaudit.chartype import classify
from stringaudit.classes import CharType


@pytest.mark.parametrize(
    "char,expected",
    [
        (".", CharType.DOT),
        ("。", CharType.DOT),
        ("…", CharType.DOT),
        (":", CharType.COLON),
        ("：", CharType.COLON),
        (",", CharType.COMMA),
        ("_", CharType.UNDERSCORE),
        (" ", CharType.SPACE),
        ("!", CharType.EXCLAMATION_MARK),
        ("！", CharType.EXCLAMATION_MARK),
        ("?", CharType.QUESTION_MARK),
        ("؟", CharType.QUESTION_MARK),
        ("？", CharType.QUESTION_MARK),
        (";", CharType.QUESTION_MARK),
        ("\n", CharType.LINE_BREAK),
        ("1", CharType.DIGIT),
        ("٣", CharType.DIGIT),
        ("A", CharType.LETTER),
        ("ž", CharType.LETTER),
        ("本", CharType.LETTER),
        ("¿", CharType.LETTER),
        ("¡", CharType.LETTER),
        ("★", CharType.UNCATEGORIZED),
        (")", CharType.UNCATEGORIZED),
    ],
)
def test_classify(char, expected):
    assert classify(char) is expected


@pytest.mark.parametrize("char", ["", None])
def test_classify_missing_char(char):
    assert classify(char) is CharType.UNCATEGORIZED

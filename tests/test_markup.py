import pytest

from stringaudit.classes import MarkupVerdict
from stringaudit.markup import sanitize, strip_markup, validate_markup


@pytest.mark.parametrize(
    "html,expected",
    [
        ("<strong>x</strong>", MarkupVerdict.ALLOWED),
        ("plain text", MarkupVerdict.ALLOWED),
        ('Read <a href="/terms" target="_blank">terms</a><br/>now', MarkupVerdict.ALLOWED),
        ('<span class="x"><em>a</em> <i>b</i></span>', MarkupVerdict.ALLOWED),
        ("<div>x</div>", MarkupVerdict.NOT_ALLOWED),
        ("<b>x</b>", MarkupVerdict.NOT_ALLOWED),
        ("<ul><li>x</li></ul>", MarkupVerdict.NOT_ALLOWED),
        ("<p>x", MarkupVerdict.NOT_ALLOWED),
    ],
)
def test_validate_markup(html, expected):
    assert validate_markup(html) is expected


def test_sanitize_keeps_text_of_removed_tags():
    assert sanitize("<div>a <b>b</b></div>", frozenset({"b"})) == "a <b>b</b>"


def test_strip_markup():
    assert strip_markup('Hi <a href="#">there</a>!<br>') == "Hi there!"
    assert strip_markup("a<script>alert(1)</script>b") == "ab"
    assert strip_markup("Tom &amp; Jerry") == "Tom & Jerry"

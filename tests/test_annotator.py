from stringaudit.annotator import annotate
from stringaudit.classes import UNSUPPORTED_LANGUAGE, CharType, MarkupVerdict, Plural
from stringaudit.registry import Registry


def test_annotate_scalar(settings, registry):
    annotation = annotate(
        "greeting", "en-GB", " <strong>Hello</strong> {name}, 3 new filez! ", settings, registry
    )
    assert annotation.text == "<strong>Hello</strong> {name}, 3 new filez!"
    assert annotation.placeholders == ("{name}",)
    assert annotation.first_char_type is CharType.LETTER
    assert annotation.last_char_type is CharType.EXCLAMATION_MARK
    assert annotation.markup is MarkupVerdict.ALLOWED
    assert annotation.dynamic_numbers == ("3",)
    assert annotation.typos == ("new", "filez")
    assert annotation.bias_issues == ()


def test_placeholder_boundaries_use_sentinel(settings, registry):
    annotation = annotate("k", "de-DE", "{count}", settings, registry)
    assert annotation.first_char_type is CharType.LETTER
    assert annotation.last_char_type is CharType.LETTER


def test_plural_value(settings, registry):
    annotation = annotate(
        "files", "en-GB", {"one": "One file", "other": "{count} files"}, settings, registry
    )
    assert isinstance(annotation.value, Plural)
    assert annotation.text == "One file,{count} files"
    assert annotation.placeholders == ("{count}",)
    assert annotation.to_dict()["content"] == {"one": "One file", "other": "{count} files"}


def test_unsupported_language(settings, registry):
    annotation = annotate("k", "fr-FR", "Bonjour", settings, registry)
    assert annotation.typos == UNSUPPORTED_LANGUAGE
    assert not annotation.has_typos


def test_bias_only_for_baseline(settings, registry):
    en = annotate("k", "en-GB", "Add to blacklist", settings, registry)
    de = annotate("k", "de-DE", "Add to blacklist", settings, registry)
    assert len(en.bias_issues) == 1
    assert de.bias_issues == ()


def test_style_issues_use_plain_text(settings, registry):
    annotation = annotate("k", "en-GB", "<em>very</em> good", settings, registry)
    assert [x.reason for x in annotation.style_issues] == ['"very" is a weasel word']
    assert annotate("k", "fr-FR", "very good", settings, registry).style_issues == ()


def test_disallowed_markup(settings, registry):
    annotation = annotate("k", "en-GB", "<div>Hello</div>", settings, registry)
    assert annotation.markup is MarkupVerdict.NOT_ALLOWED
    assert annotation.first_char_type is CharType.LETTER


def test_invalid_value_is_empty(settings):
    annotation = annotate("k", "en-GB", 42, settings, Registry())
    assert annotation.text == ""
    assert annotation.first_char_type is CharType.UNCATEGORIZED
    assert annotation.placeholders == ()

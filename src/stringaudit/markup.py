from html.parser import HTMLParser

from stringaudit.classes import MarkupVerdict

# Found in the catalog and rejected so far: ul, li, ol, div, b, p
ALLOWED_TAGS = frozenset({"br", "a", "strong", "em", "i", "span"})

# Text inside these is dropped together with the tag
NON_TEXT_TAGS = frozenset({"script", "style", "textarea", "option", "noscript"})


class Sanitizer(HTMLParser):
    def __init__(self, allowed_tags: frozenset[str] | None) -> None:
        super().__init__(convert_charrefs=True)
        self.allowed_tags = allowed_tags
        self.parts: list[str] = []
        self._skipping = 0

    def is_allowed(self, tag: str) -> bool:
        return self.allowed_tags is None or tag in self.allowed_tags

    def handle_starttag(self, tag, attrs):
        if self.is_allowed(tag):
            self.parts.append(self.get_starttag_text() or "")
        elif tag in NON_TEXT_TAGS:
            self._skipping += 1

    def handle_startendtag(self, tag, attrs):
        if self.is_allowed(tag):
            self.parts.append(self.get_starttag_text() or "")

    def handle_endtag(self, tag):
        if self.is_allowed(tag):
            self.parts.append(f"</{tag}>")
        elif tag in NON_TEXT_TAGS and self._skipping:
            self._skipping -= 1

    def handle_data(self, data):
        if not self._skipping:
            self.parts.append(data)


def sanitize(html: str, allowed_tags: frozenset[str] | None = None) -> str:
    """Remove every tag not in ``allowed_tags`` but keep its text.

    ``None`` keeps every tag; attributes of kept tags are never touched.
    """
    sanitizer = Sanitizer(allowed_tags)
    sanitizer.feed(html)
    sanitizer.close()
    return "".join(sanitizer.parts)


def strip_markup(html: str) -> str:
    return sanitize(html, frozenset())


def validate_markup(html: str) -> MarkupVerdict:
    # Both passes only differ in the tags they drop, so any difference means
    # a tag outside the allow-list was present.
    if sanitize(html) == sanitize(html, ALLOWED_TAGS):
        return MarkupVerdict.ALLOWED
    return MarkupVerdict.NOT_ALLOWED

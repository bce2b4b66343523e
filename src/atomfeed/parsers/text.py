"""Text resolution for leaf elements.

A leaf's payload is read in one of two ways, chosen once from its ``type``
attribute: plain accumulation of character data, or verbatim
re-serialization of the inline XHTML markup it contains.
"""

from xml.sax.saxutils import escape, quoteattr

from atomfeed.exceptions import TruncatedDocumentError
from atomfeed.models.common import ContentModel, content_model_for
from atomfeed.parsers.cursor import ElementEnd, ElementStart, Text, XmlCursor


def read_text(cursor: XmlCursor, attributes: dict[str, str], tag: str = "text") -> str:
    """Resolve the payload of the leaf element that was just started.

    With whitespace trimming on, each text run is stripped before it is
    joined, so ``Hello <b>world</b> again`` resolves to ``Helloworldagain``.

    Args:
        cursor: Cursor positioned right after the leaf's start tag.
        attributes: Attributes of the leaf's start tag.
        tag: Name of the leaf, used in error messages.

    Returns:
        The resolved text; an empty string for an empty element.

    Raises:
        TruncatedDocumentError: When the input ends inside the element.
    """
    if content_model_for(attributes.get("type")) is ContentModel.XHTML:
        return _read_markup(cursor, tag)
    return _read_plain(cursor, tag)


def _read_plain(cursor: XmlCursor, tag: str) -> str:
    parts: list[str] = []
    depth = 1
    while True:
        event = cursor.next_event()
        if event is None:
            raise TruncatedDocumentError(tag)
        if isinstance(event, Text):
            parts.append(event.content)
        elif isinstance(event, ElementStart):
            depth += 1
        elif isinstance(event, ElementEnd):
            depth -= 1
            if depth == 0:
                return "".join(parts)


def _read_markup(cursor: XmlCursor, tag: str) -> str:
    parts: list[str] = []
    depth = 1
    # A start tag stays open until we know whether the element has content.
    pending_open = False
    while True:
        event = cursor.next_event()
        if event is None:
            raise TruncatedDocumentError(tag)
        if isinstance(event, ElementEnd):
            depth -= 1
            if depth == 0:
                return "".join(parts)
            if pending_open:
                parts.append("/>")
                pending_open = False
            else:
                parts.append(f"</{event.name}>")
            continue

        if pending_open:
            parts.append(">")
            pending_open = False
        if isinstance(event, ElementStart):
            depth += 1
            parts.append(f"<{event.name}")
            for name, value in event.attributes.items():
                parts.append(f" {name}={quoteattr(value)}")
            pending_open = True
        elif isinstance(event, Text):
            parts.append(escape(event.content))

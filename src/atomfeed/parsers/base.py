"""Element builder interface using Protocol."""

from collections.abc import Iterator
from typing import Protocol, TypeVar

import structlog

from atomfeed.exceptions import TruncatedDocumentError
from atomfeed.parsers.cursor import ElementEnd, ElementStart, XmlCursor

logger = structlog.get_logger()

T_co = TypeVar("T_co", covariant=True)


class ElementBuilder(Protocol[T_co]):
    """Builds one entity from the subtree of the element just started."""

    def build(self, cursor: XmlCursor, attributes: dict[str, str]) -> T_co:
        """Consume the element's content through its end tag.

        Args:
            cursor: Cursor positioned right after the element's start tag.
            attributes: Attributes of the element's start tag.

        Returns:
            The fully populated entity.

        Raises:
            AtomError: When the subtree is malformed or truncated.
        """
        ...


def iter_children(cursor: XmlCursor, tag: str) -> Iterator[tuple[str, dict[str, str]]]:
    """Yield ``(name, attributes)`` for each direct child element of ``tag``.

    The consumer must read each yielded child through its end tag (with a
    nested builder, the text resolver or ``cursor.skip_element``) before
    asking for the next one. Character data directly inside ``tag`` is
    ignored. Iteration stops at the end tag of ``tag``.

    Raises:
        TruncatedDocumentError: When the input ends before the end tag.
    """
    while True:
        event = cursor.next_event()
        if event is None:
            raise TruncatedDocumentError(tag)
        if isinstance(event, ElementStart):
            yield event.name, event.attributes
        elif isinstance(event, ElementEnd):
            return


def skip_unknown(cursor: XmlCursor, parent: str, child: str) -> None:
    """Consume an unrecognized child element and everything inside it."""
    cursor.skip_element(child)
    logger.debug("Skipped unrecognized element", parent=parent, element=child)

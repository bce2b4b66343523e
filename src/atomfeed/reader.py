"""Entry point: read an Atom document into a Feed.

Checks the outermost element before handing the cursor to the feed builder.
"""

import io
from typing import IO

from atomfeed.config.settings import Settings
from atomfeed.config.settings import settings as default_settings
from atomfeed.exceptions import AtomError, InvalidRootElementError, TruncatedDocumentError
from atomfeed.models.feed import Feed
from atomfeed.parsers.cursor import ElementStart, XmlCursor
from atomfeed.parsers.feed import FeedBuilder
from atomfeed.utils.logger import get_logger

logger = get_logger(__name__)

ROOT_TAG = "feed"


def read_feed(
    stream: IO[bytes] | IO[str] | bytes | bytearray,
    *,
    settings: Settings | None = None,
) -> Feed:
    """Read one Atom document from a stream.

    Reading stops once the end tag of the root has been seen; input
    after it is never interpreted.

    Args:
        stream: Readable binary or text stream, or raw bytes.
        settings: Reader settings. Defaults to the global settings.

    Returns:
        The fully populated Feed.

    Raises:
        MalformedMarkupError: When the input is not well-formed XML.
        InvalidRootElementError: When the outermost element is not ``feed``.
        TruncatedDocumentError: When the input ends before the document does.
    """
    settings = settings or default_settings
    if isinstance(stream, (bytes, bytearray)):
        stream = io.BytesIO(stream)

    cursor = XmlCursor(
        stream,
        chunk_size=settings.read_chunk_size,
        trim_text=settings.trim_text,
    )
    logger.debug("Reading feed", chunk_size=settings.read_chunk_size)

    try:
        feed = _read_root(cursor)
    except AtomError as e:
        logger.debug("Feed reading failed", kind=e.kind.value, error=str(e))
        raise

    logger.info(
        "Feed read",
        feed_id=feed.id,
        entries=len(feed.entries),
        links=len(feed.links),
    )
    return feed


def parse_feed(text: str | bytes, *, settings: Settings | None = None) -> Feed:
    """Parse an Atom document held in memory.

    Args:
        text: The document as a string or raw bytes.
        settings: Reader settings. Defaults to the global settings.

    Returns:
        The fully populated Feed.
    """
    if isinstance(text, str):
        return read_feed(io.StringIO(text), settings=settings)
    return read_feed(text, settings=settings)


def _read_root(cursor: XmlCursor) -> Feed:
    while True:
        event = cursor.next_event()
        if event is None:
            raise TruncatedDocumentError()
        if isinstance(event, ElementStart):
            if event.name != ROOT_TAG:
                raise InvalidRootElementError(event.name, ROOT_TAG)
            return FeedBuilder().build(cursor, event.attributes)

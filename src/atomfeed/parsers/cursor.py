"""Forward-only XML event cursor.

Wraps the incremental expat reader from defusedxml and turns its SAX
callbacks into a pull-style sequence of structural events.
"""

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import IO
from xml.sax import SAXParseException
from xml.sax.handler import ContentHandler
from xml.sax.xmlreader import AttributesImpl

from defusedxml import DefusedXmlException
from defusedxml.expatreader import create_parser

from atomfeed.exceptions import MalformedMarkupError, TruncatedDocumentError

DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class ElementStart:
    """Start tag with its raw qualified name and attributes."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ElementEnd:
    """End tag, also emitted right after the start of a self-closing element."""

    name: str


@dataclass(frozen=True)
class Text:
    """Character data between two tags, entity references resolved."""

    content: str


Event = ElementStart | ElementEnd | Text


class _EventCollector(ContentHandler):
    """Buffers SAX callbacks as events, coalescing adjacent character data."""

    def __init__(self, events: deque[Event], trim_text: bool):
        super().__init__()
        self._events = events
        self._trim_text = trim_text
        self._text: list[str] = []

    def startElement(self, name: str, attrs: AttributesImpl) -> None:
        self._flush_text()
        self._events.append(ElementStart(name, dict(attrs.items())))

    def endElement(self, name: str) -> None:
        self._flush_text()
        self._events.append(ElementEnd(name))

    def characters(self, content: str) -> None:
        self._text.append(content)

    def _flush_text(self) -> None:
        if not self._text:
            return
        content = "".join(self._text)
        self._text.clear()
        if self._trim_text:
            content = content.strip()
        if content:
            self._events.append(Text(content))


class XmlCursor:
    """Single-pass source of structural events for one document.

    Input is read lazily in chunks of ``chunk_size``. Reaching the end of
    the stream never finalizes the tokenizer, so an unfinished document
    shows up as end-of-stream (``None``) rather than as a markup error.
    """

    def __init__(
        self,
        stream: IO[bytes] | IO[str],
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        trim_text: bool = True,
    ):
        """Initialize the cursor.

        Args:
            stream: Readable binary or text stream holding one document.
            chunk_size: Number of bytes (or characters) per read.
            trim_text: Strip text events and drop whitespace-only ones.
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._stream = stream
        self._chunk_size = chunk_size
        self._events: deque[Event] = deque()
        self._parser = create_parser()
        self._parser.setContentHandler(_EventCollector(self._events, trim_text))
        self._exhausted = False
        self._error: MalformedMarkupError | None = None

    def next_event(self) -> Event | None:
        """Return the next event, or None once the input is used up.

        Raises:
            MalformedMarkupError: When the tokenizer rejects the input.
        """
        while not self._events:
            if self._error is not None:
                raise self._error
            if self._exhausted:
                return None
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                self._exhausted = True
                self._flush()
                continue
            self._tokenize(self._parser.feed, chunk)
        return self._events.popleft()

    def skip_element(self, name: str) -> None:
        """Consume events through the end tag of the element just started.

        Raises:
            TruncatedDocumentError: When the input ends inside the element.
        """
        depth = 1
        while depth:
            event = self.next_event()
            if event is None:
                raise TruncatedDocumentError(name)
            if isinstance(event, ElementStart):
                depth += 1
            elif isinstance(event, ElementEnd):
                depth -= 1

    def _flush(self) -> None:
        # Newer expat releases may hold back complete tokens until more
        # input arrives; the document itself is left unfinalized.
        flush = getattr(self._parser, "flush", None)
        if flush is not None:
            self._tokenize(flush)

    def _tokenize(self, step: Callable[..., None], *args: bytes | str) -> None:
        # Events tokenized before a failure are still delivered first.
        try:
            step(*args)
        except SAXParseException as e:
            self._error = MalformedMarkupError(
                e.getMessage(), e.getLineNumber(), e.getColumnNumber()
            )
            self._error.__cause__ = e
        except DefusedXmlException as e:
            self._error = MalformedMarkupError(str(e))
            self._error.__cause__ = e

"""Custom exceptions for atomfeed.

Every failure raised while reading a document belongs to one of three kinds,
so callers can tell broken markup from a non-Atom document from input that
ended too early.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    MALFORMED_MARKUP = "malformed_markup"
    INVALID_ROOT_ELEMENT = "invalid_root_element"
    TRUNCATED_DOCUMENT = "truncated_document"


class AtomError(Exception):
    """Base exception class for all atomfeed errors.

    Attributes:
        kind: The failure kind, one of ErrorKind.
    """

    kind: ErrorKind


class MalformedMarkupError(AtomError):
    """Raised when the tokenizer reports invalid XML.

    Attributes:
        line: Line number reported by the tokenizer, if known.
        column: Column number reported by the tokenizer, if known.
    """

    kind = ErrorKind.MALFORMED_MARKUP

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(f"Malformed markup: {message}")


class InvalidRootElementError(AtomError):
    """Raised when the outermost element is not the Atom root.

    Attributes:
        tag: The name of the element found instead.
    """

    kind = ErrorKind.INVALID_ROOT_ELEMENT

    def __init__(self, tag: str, expected: str = "feed"):
        self.tag = tag
        self.expected = expected
        super().__init__(f"Invalid root element <{tag}>, expected <{expected}>")


class TruncatedDocumentError(AtomError):
    """Raised when the input ends before the document is complete.

    Attributes:
        element: The element still awaiting its end tag, or None when
            no element was seen at all.
    """

    kind = ErrorKind.TRUNCATED_DOCUMENT

    def __init__(self, element: str | None = None):
        self.element = element
        if element is None:
            message = "Document ended before any element was found"
        else:
            message = f"Document ended before </{element}>"
        super().__init__(message)

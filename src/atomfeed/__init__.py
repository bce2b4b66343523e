"""
atomfeed

Reads Atom Syndication Format documents into typed models.

Example
-------
from atomfeed import read_feed

with open("feed.xml", "rb") as f:
    feed = read_feed(f)

for entry in feed.entries:
    print(entry.updated, entry.title)
"""

from atomfeed.exceptions import (
    AtomError,
    ErrorKind,
    InvalidRootElementError,
    MalformedMarkupError,
    TruncatedDocumentError,
)
from atomfeed.models import (
    Category,
    Content,
    ContentModel,
    Entry,
    Feed,
    Generator,
    Link,
    Person,
    Source,
)
from atomfeed.reader import parse_feed, read_feed

__all__ = [
    "read_feed",
    "parse_feed",
    "Feed",
    "Entry",
    "Source",
    "Content",
    "ContentModel",
    "Person",
    "Category",
    "Link",
    "Generator",
    "AtomError",
    "ErrorKind",
    "MalformedMarkupError",
    "InvalidRootElementError",
    "TruncatedDocumentError",
]

"""Parsers package."""

from atomfeed.parsers.base import ElementBuilder, iter_children
from atomfeed.parsers.common import (
    CategoryBuilder,
    GeneratorBuilder,
    LinkBuilder,
    PersonBuilder,
)
from atomfeed.parsers.cursor import ElementEnd, ElementStart, Text, XmlCursor
from atomfeed.parsers.entry import ContentBuilder, EntryBuilder, SourceBuilder
from atomfeed.parsers.feed import FeedBuilder
from atomfeed.parsers.text import read_text

__all__ = [
    "ElementBuilder",
    "iter_children",
    "XmlCursor",
    "ElementStart",
    "ElementEnd",
    "Text",
    "read_text",
    "FeedBuilder",
    "EntryBuilder",
    "SourceBuilder",
    "ContentBuilder",
    "PersonBuilder",
    "CategoryBuilder",
    "LinkBuilder",
    "GeneratorBuilder",
]

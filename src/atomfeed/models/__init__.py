"""Models package."""

from atomfeed.models.common import Category, ContentModel, Generator, Link, Person
from atomfeed.models.entry import Content, Entry, Source
from atomfeed.models.feed import Feed

__all__ = [
    "ContentModel",
    "Feed",
    "Entry",
    "Source",
    "Content",
    "Person",
    "Category",
    "Link",
    "Generator",
]

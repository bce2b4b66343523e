"""Builders for entry, content and source elements."""

from atomfeed.models.common import Category, Link, Person
from atomfeed.models.entry import Content, Entry, Source
from atomfeed.parsers.base import ElementBuilder, iter_children, skip_unknown
from atomfeed.parsers.common import (
    CategoryBuilder,
    LinkBuilder,
    PersonBuilder,
    read_feed_metadata,
)
from atomfeed.parsers.cursor import XmlCursor
from atomfeed.parsers.text import read_text

_ENTRY_TEXT_FIELDS = frozenset({"id", "title", "updated", "published", "rights", "summary"})


class ContentBuilder:
    """Builds Content; ``type`` selects how the element text is resolved."""

    tag = "content"

    def build(self, cursor: XmlCursor, attributes: dict[str, str]) -> Content:
        return Content(
            src=attributes.get("src"),
            content_type=attributes.get("type"),
            value=read_text(cursor, attributes, self.tag),
        )


class SourceBuilder:
    """Builds the metadata of the feed an entry originated from."""

    tag = "source"

    def build(self, cursor: XmlCursor, attributes: dict[str, str]) -> Source:
        source = Source()
        for child, child_attrs in iter_children(cursor, self.tag):
            if not read_feed_metadata(source, cursor, child, child_attrs):
                skip_unknown(cursor, self.tag, child)
        return source


_authors: ElementBuilder[Person] = PersonBuilder("author")
_contributors: ElementBuilder[Person] = PersonBuilder("contributor")
_categories: ElementBuilder[Category] = CategoryBuilder()
_links: ElementBuilder[Link] = LinkBuilder()
_content: ElementBuilder[Content] = ContentBuilder()
_source: ElementBuilder[Source] = SourceBuilder()


class EntryBuilder:
    """Builds an Entry from an ``entry`` element."""

    tag = "entry"

    def build(self, cursor: XmlCursor, attributes: dict[str, str]) -> Entry:
        entry = Entry()
        for child, child_attrs in iter_children(cursor, self.tag):
            if child in _ENTRY_TEXT_FIELDS:
                setattr(entry, child, read_text(cursor, child_attrs, child))
            elif child == "author":
                entry.authors.append(_authors.build(cursor, child_attrs))
            elif child == "contributor":
                entry.contributors.append(_contributors.build(cursor, child_attrs))
            elif child == "category":
                entry.categories.append(_categories.build(cursor, child_attrs))
            elif child == "link":
                entry.links.append(_links.build(cursor, child_attrs))
            elif child == "content":
                entry.content = _content.build(cursor, child_attrs)
            elif child == "source":
                entry.source = _source.build(cursor, child_attrs)
            else:
                skip_unknown(cursor, self.tag, child)
        return entry

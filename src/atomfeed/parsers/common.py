"""Builders for person, category, link and generator elements.

Also holds the metadata dispatch shared by the feed and source builders.
"""

from atomfeed.models.common import Category, Generator, Link, Person
from atomfeed.models.entry import Source
from atomfeed.models.feed import Feed
from atomfeed.parsers.base import ElementBuilder, iter_children, skip_unknown
from atomfeed.parsers.cursor import XmlCursor
from atomfeed.parsers.text import read_text


class PersonBuilder:
    """Builds a Person from an ``author`` or ``contributor`` element."""

    def __init__(self, tag: str = "author"):
        self.tag = tag

    def build(self, cursor: XmlCursor, attributes: dict[str, str]) -> Person:
        person = Person()
        for child, child_attrs in iter_children(cursor, self.tag):
            if child == "name":
                person.name = read_text(cursor, child_attrs, child)
            elif child == "uri":
                person.uri = read_text(cursor, child_attrs, child)
            elif child == "email":
                person.email = read_text(cursor, child_attrs, child)
            else:
                skip_unknown(cursor, self.tag, child)
        return person


class CategoryBuilder:
    """Builds a Category from the attributes of a ``category`` element."""

    tag = "category"

    def build(self, cursor: XmlCursor, attributes: dict[str, str]) -> Category:
        category = Category(
            term=attributes.get("term", ""),
            scheme=attributes.get("scheme"),
            label=attributes.get("label"),
        )
        cursor.skip_element(self.tag)
        return category


class LinkBuilder:
    """Builds a Link from the attributes of a ``link`` element."""

    tag = "link"

    def build(self, cursor: XmlCursor, attributes: dict[str, str]) -> Link:
        link = Link(
            href=attributes.get("href", ""),
            rel=attributes.get("rel"),
            mime_type=attributes.get("type"),
            hreflang=attributes.get("hreflang"),
            title=attributes.get("title"),
            length=attributes.get("length"),
        )
        cursor.skip_element(self.tag)
        return link


class GeneratorBuilder:
    """Builds a Generator; the element text is the generator name."""

    tag = "generator"

    def build(self, cursor: XmlCursor, attributes: dict[str, str]) -> Generator:
        return Generator(
            value=read_text(cursor, {}, self.tag),
            uri=attributes.get("uri"),
            version=attributes.get("version"),
        )


_FEED_TEXT_FIELDS = frozenset({"id", "title", "updated", "icon", "logo", "rights", "subtitle"})

_authors: ElementBuilder[Person] = PersonBuilder("author")
_contributors: ElementBuilder[Person] = PersonBuilder("contributor")
_categories: ElementBuilder[Category] = CategoryBuilder()
_links: ElementBuilder[Link] = LinkBuilder()
_generators: ElementBuilder[Generator] = GeneratorBuilder()


def read_feed_metadata(
    target: Feed | Source, cursor: XmlCursor, child: str, attributes: dict[str, str]
) -> bool:
    """Read a metadata child shared by ``feed`` and ``source`` into ``target``.

    Returns:
        True when ``child`` was recognized and consumed, False otherwise
        (the cursor is left untouched).
    """
    if child in _FEED_TEXT_FIELDS:
        setattr(target, child, read_text(cursor, attributes, child))
    elif child == "author":
        target.authors.append(_authors.build(cursor, attributes))
    elif child == "contributor":
        target.contributors.append(_contributors.build(cursor, attributes))
    elif child == "category":
        target.categories.append(_categories.build(cursor, attributes))
    elif child == "link":
        target.links.append(_links.build(cursor, attributes))
    elif child == "generator":
        target.generator = _generators.build(cursor, attributes)
    else:
        return False
    return True

"""Feed data model."""

from typing import IO

from pydantic import BaseModel, Field

from atomfeed.models.common import Category, Generator, Link, Person
from atomfeed.models.entry import Entry


class Feed(BaseModel):
    """An Atom feed document.

    Built by the reader; every field may be read and reassigned freely
    afterwards.
    """

    title: str = Field(default="", description="Human-readable title")
    id: str = Field(default="", description="Permanent, universally unique IRI")
    updated: str = Field(default="", description="Last significant modification")
    authors: list[Person] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    contributors: list[Person] = Field(default_factory=list)
    generator: Generator | None = Field(default=None)
    icon: str | None = Field(default=None, description="Small identifying image IRI")
    links: list[Link] = Field(default_factory=list)
    logo: str | None = Field(default=None, description="Larger identifying image IRI")
    rights: str | None = Field(default=None)
    subtitle: str | None = Field(default=None)
    entries: list[Entry] = Field(default_factory=list)

    @classmethod
    def read_from(cls, stream: IO[bytes] | IO[str]) -> "Feed":
        """Read a feed from a binary or text stream."""
        from atomfeed.reader import read_feed

        return read_feed(stream)

    @classmethod
    def from_string(cls, text: str | bytes) -> "Feed":
        """Parse a feed held in memory."""
        from atomfeed.reader import parse_feed

        return parse_feed(text)

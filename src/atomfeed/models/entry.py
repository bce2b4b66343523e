"""Entry data models."""

from pydantic import BaseModel, Field, computed_field

from atomfeed.models.common import (
    Category,
    ContentModel,
    Generator,
    Link,
    Person,
    content_model_for,
)


class Content(BaseModel):
    """Content of an entry, either inline or referenced by ``src``."""

    value: str | None = Field(default=None, description="Resolved text or markup")
    src: str | None = Field(default=None, description="IRI of out-of-line content")
    content_type: str | None = Field(default=None, description="Raw type attribute")

    @computed_field
    @property
    def content_model(self) -> ContentModel:
        """How ``value`` was extracted, derived from ``content_type``."""
        return content_model_for(self.content_type)


class Source(BaseModel):
    """Metadata of the feed an entry was copied from (atom:source)."""

    title: str | None = None
    id: str | None = None
    updated: str | None = None
    authors: list[Person] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    contributors: list[Person] = Field(default_factory=list)
    generator: Generator | None = None
    icon: str | None = None
    links: list[Link] = Field(default_factory=list)
    logo: str | None = None
    rights: str | None = None
    subtitle: str | None = None


class Entry(BaseModel):
    """A single Atom entry.

    Required text fields default to an empty string; optional ones stay
    None until their element is seen.
    """

    title: str = Field(default="", description="Human-readable title")
    id: str = Field(default="", description="Permanent, universally unique IRI")
    updated: str = Field(default="", description="Last significant modification")
    authors: list[Person] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    contributors: list[Person] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)
    published: str | None = Field(default=None, description="Initial publication time")
    rights: str | None = Field(default=None)
    source: Source | None = Field(default=None)
    summary: str | None = Field(default=None)
    content: Content | None = Field(default=None)

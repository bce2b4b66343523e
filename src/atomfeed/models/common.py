"""Shared Atom constructs: content models, people, categories, links and generators."""

from enum import Enum

from pydantic import BaseModel, Field


class ContentModel(str, Enum):
    """How the payload of a text construct is represented."""

    TEXT = "text"
    HTML = "html"
    XHTML = "xhtml"


def content_model_for(type_attr: str | None) -> ContentModel:
    """Map a raw ``type`` attribute to its content model.

    Absent or unknown values (including non-markup MIME types) are plain text.
    """
    if type_attr is None:
        return ContentModel.TEXT
    value = type_attr.strip().lower()
    if value == "xhtml":
        return ContentModel.XHTML
    if "html" in value:
        return ContentModel.HTML
    return ContentModel.TEXT


class Person(BaseModel):
    """A person, corporation or similar entity (atom:author, atom:contributor)."""

    name: str = Field(default="", description="Human-readable name")
    uri: str | None = Field(default=None, description="IRI associated with the person")
    email: str | None = Field(default=None, description="E-mail address")


class Category(BaseModel):
    """A category assigned to a feed or entry."""

    term: str = Field(default="", description="Category identifier")
    scheme: str | None = Field(default=None, description="Categorization scheme IRI")
    label: str | None = Field(default=None, description="Human-readable label")


class Link(BaseModel):
    """A reference from a feed or entry to a Web resource."""

    href: str = Field(default="", description="Link target IRI")
    rel: str | None = Field(default=None, description="Link relation type")
    mime_type: str | None = Field(default=None, description="Advisory media type")
    hreflang: str | None = Field(default=None, description="Language of the resource")
    title: str | None = Field(default=None, description="Human-readable title")
    length: str | None = Field(default=None, description="Advisory length in octets")


class Generator(BaseModel):
    """The software agent used to generate a feed."""

    value: str = Field(default="", description="Human-readable generator name")
    uri: str | None = Field(default=None)
    version: str | None = Field(default=None)

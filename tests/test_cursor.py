"""Tests for the XML event cursor."""

import io

import pytest

from atomfeed.exceptions import MalformedMarkupError, TruncatedDocumentError
from atomfeed.parsers.cursor import ElementEnd, ElementStart, Text, XmlCursor


def _events(xml, **kwargs):
    stream = io.BytesIO(xml) if isinstance(xml, bytes) else io.StringIO(xml)
    cursor = XmlCursor(stream, **kwargs)
    events = []
    while (event := cursor.next_event()) is not None:
        events.append(event)
    return events


class TestEvents:
    """Tests for event shapes."""

    def test_self_closing_element_expands_to_start_and_end(self):
        assert _events("<a><b x='1'/></a>") == [
            ElementStart("a", {}),
            ElementStart("b", {"x": "1"}),
            ElementEnd("b"),
            ElementEnd("a"),
        ]

    def test_whitespace_is_trimmed_and_dropped(self):
        assert _events("<a>\n  <b>  hi  </b>\n</a>") == [
            ElementStart("a"),
            ElementStart("b"),
            Text("hi"),
            ElementEnd("b"),
            ElementEnd("a"),
        ]

    def test_whitespace_kept_when_trimming_disabled(self):
        assert _events("<a> <b> hi </b></a>", trim_text=False) == [
            ElementStart("a"),
            Text(" "),
            ElementStart("b"),
            Text(" hi "),
            ElementEnd("b"),
            ElementEnd("a"),
        ]

    def test_entities_and_character_references_resolved(self):
        assert _events("<a>x &amp; &#65;&lt;</a>")[1] == Text("x & A<")

    def test_cdata_reported_as_text(self):
        assert _events("<a><![CDATA[<b>raw</b>]]></a>")[1] == Text("<b>raw</b>")

    def test_text_split_across_chunks_is_coalesced(self):
        events = _events("<a>hello world</a>", chunk_size=2)
        assert events == [ElementStart("a"), Text("hello world"), ElementEnd("a")]

    def test_prefixed_names_kept_verbatim(self):
        events = _events('<a><foo:ext foo:attr="v"/></a>')
        assert events[1] == ElementStart("foo:ext", {"foo:attr": "v"})

    def test_declared_encoding_honored_for_bytes(self):
        xml = '<?xml version="1.0" encoding="ISO-8859-1"?><a>caf\xe9</a>'.encode("latin-1")
        assert _events(xml)[1] == Text("caf\xe9")

    def test_unfinished_document_ends_without_error(self):
        assert _events("<a><b>") == [ElementStart("a"), ElementStart("b")]

    def test_empty_input_has_no_events(self):
        assert _events(b"") == []


class TestErrors:
    """Tests for tokenizer failures."""

    def test_mismatched_tag_raises_after_earlier_events(self):
        cursor = XmlCursor(io.StringIO("<a><b></a>"))
        assert cursor.next_event() == ElementStart("a")
        assert cursor.next_event() == ElementStart("b")
        with pytest.raises(MalformedMarkupError) as exc_info:
            cursor.next_event()
        assert exc_info.value.line == 1

    def test_error_is_sticky(self):
        cursor = XmlCursor(io.StringIO("<a>&bogus;</a>"))
        with pytest.raises(MalformedMarkupError):
            while cursor.next_event() is not None:
                pass
        with pytest.raises(MalformedMarkupError):
            cursor.next_event()

    def test_entity_declarations_refused(self):
        xml = '<!DOCTYPE a [<!ENTITY x "y">]><a>&x;</a>'
        with pytest.raises(MalformedMarkupError):
            _events(xml)

    def test_chunk_size_must_be_positive(self):
        with pytest.raises(ValueError):
            XmlCursor(io.StringIO("<a/>"), chunk_size=0)


class TestSkipElement:
    """Tests for skipping subtrees."""

    def test_skips_nested_subtree(self):
        cursor = XmlCursor(io.StringIO("<a><x><y><z/>t</y></x><b/></a>"))
        assert cursor.next_event() == ElementStart("a")
        assert cursor.next_event() == ElementStart("x")
        cursor.skip_element("x")
        assert cursor.next_event() == ElementStart("b")

    def test_truncated_subtree_raises(self):
        cursor = XmlCursor(io.StringIO("<a><x><y>"))
        cursor.next_event()
        cursor.next_event()
        with pytest.raises(TruncatedDocumentError) as exc_info:
            cursor.skip_element("x")
        assert exc_info.value.element == "x"

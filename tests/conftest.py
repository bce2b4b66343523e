"""Test configuration and fixtures."""

import pytest

from atomfeed.config.settings import Settings


@pytest.fixture
def small_chunk_settings():
    """Settings that force the reader to pull tiny chunks."""
    return Settings(read_chunk_size=7)


@pytest.fixture
def minimal_feed_xml():
    """Smallest useful Atom document."""
    return (
        "<feed><title>T</title><id>urn:1</id>"
        "<updated>2020-01-01T00:00:00Z</updated></feed>"
    )


@pytest.fixture
def sample_feed_xml():
    """Atom feed exercising every recognized element."""
    return """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xmlns:ext="http://example.org/ext">
  <title type="text">dive into mark</title>
  <subtitle type="html">A &lt;em&gt;lot&lt;/em&gt; of effort went into making this effortless</subtitle>
  <updated>2005-07-31T12:29:29Z</updated>
  <id>tag:example.org,2003:3</id>
  <link rel="alternate" type="text/html" hreflang="en" href="http://example.org/"/>
  <link rel="self" type="application/atom+xml" href="http://example.org/feed.atom"
        title="Self" length="1234"/>
  <rights>Copyright (c) 2003, Mark Pilgrim</rights>
  <icon>http://example.org/icon.png</icon>
  <logo>http://example.org/logo.png</logo>
  <generator uri="http://www.example.com/" version="1.0">Example Toolkit</generator>
  <author>
    <name>Mark Pilgrim</name>
    <uri>http://example.org/</uri>
    <email>f8dy@example.com</email>
  </author>
  <contributor><name>Sam Ruby</name></contributor>
  <category term="technology" scheme="http://example.org/cats" label="Technology"/>
  <ext:meta><ext:nested>ignored</ext:nested></ext:meta>
  <entry>
    <title>Atom draft-07 snapshot</title>
    <link rel="alternate" type="text/html" href="http://example.org/2005/04/02/atom"/>
    <link rel="enclosure" type="audio/mpeg" length="1337"
          href="http://example.org/audio/ph34r_my_podcast.mp3"/>
    <id>tag:example.org,2003:3.2397</id>
    <updated>2005-07-31T12:29:29Z</updated>
    <published>2003-12-13T08:29:29-04:00</published>
    <author>
      <name>Mark Pilgrim</name>
    </author>
    <contributor>
      <name>Sam Ruby</name>
    </contributor>
    <contributor>
      <name>Joe Gregorio</name>
    </contributor>
    <category term="draft"/>
    <summary>Snapshot &amp; notes</summary>
    <rights>CC-BY</rights>
    <source>
      <id>tag:other.example.org,2004:1</id>
      <title>Original Feed</title>
      <updated>2004-01-01T00:00:00Z</updated>
      <author><name>Someone Else</name></author>
      <link href="http://other.example.org/"/>
      <generator>Other Toolkit</generator>
    </source>
    <content type="xhtml" xml:lang="en" xml:base="http://diveintomark.org/">
      <div xmlns="http://www.w3.org/1999/xhtml"><p><i>[Update: The Atom draft is finished.]</i></p></div>
    </content>
  </entry>
  <entry>
    <id>tag:example.org,2003:3.2398</id>
    <title>Second</title>
    <updated>2005-08-01T00:00:00Z</updated>
    <content type="html">&lt;p&gt;Hello&lt;/p&gt;</content>
  </entry>
</feed>
"""

"""Builder for the ``feed`` root element."""

from atomfeed.models.entry import Entry
from atomfeed.models.feed import Feed
from atomfeed.parsers.base import ElementBuilder, iter_children, skip_unknown
from atomfeed.parsers.common import read_feed_metadata
from atomfeed.parsers.cursor import XmlCursor
from atomfeed.parsers.entry import EntryBuilder

_entries: ElementBuilder[Entry] = EntryBuilder()


class FeedBuilder:
    """Builds a Feed, including its entries, from the ``feed`` element."""

    tag = "feed"

    def build(self, cursor: XmlCursor, attributes: dict[str, str]) -> Feed:
        feed = Feed()
        for child, child_attrs in iter_children(cursor, self.tag):
            if child == "entry":
                feed.entries.append(_entries.build(cursor, child_attrs))
            elif not read_feed_metadata(feed, cursor, child, child_attrs):
                skip_unknown(cursor, self.tag, child)
        return feed

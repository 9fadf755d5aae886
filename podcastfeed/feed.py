import logging
import re
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Iterable, Optional

from feedgen.feed import FeedGenerator

from podcastfeed.config import FeedConfig
from podcastfeed.errors import FeedBuildError, URLParseError
from podcastfeed.structs import FeedDocument, FeedItem, PodcastEntry, PublisherInfo
from podcastfeed.urls import URLResolver

logger = logging.getLogger(__name__)

# Characters XML 1.0 does not allow in text, lone surrogates included
_XML_ILLEGAL = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def xml_text(value: Optional[str]) -> Optional[str]:
    """Drop characters that cannot appear in an XML document; blank results become None."""
    if value is None:
        return None
    cleaned = _XML_ILLEGAL.sub("", value)
    return cleaned if cleaned.strip() else None


def format_rfc2822(moment: datetime) -> str:
    """Format a datetime as an RFC 2822 date, e.g. 'Fri, 01 Jan 2021 00:00:00 +0000'."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return format_datetime(moment.astimezone(timezone.utc))


class FeedAssembler:
    def __init__(self, config: FeedConfig, base_url: str):
        self.config = config
        self.resolver = URLResolver(base_url)

    def build(self, entries: Iterable[PodcastEntry]) -> FeedDocument:
        """
        Build the feed document for `entries`, keeping their order.

        Entries whose item cannot be built are logged and left out. Missing
        channel title or description raises FeedBuildError.
        """
        title = self._require("title", self.config.title)
        description = self._require("description", self.config.description)

        items = []
        for entry in entries:
            try:
                items.append(self.build_item(entry))
            except (URLParseError, FeedBuildError) as e:
                logger.warning(f"Leaving {entry.filename!r} out of the feed: {e}")

        return FeedDocument(
            title=title,
            description=description,
            link=self.resolver.base_url,
            publisher=self._publisher(),
            items=tuple(items),
        )

    def build_item(self, entry: PodcastEntry) -> FeedItem:
        if not entry.filename:
            raise FeedBuildError("guid")
        if xml_text(entry.filename) != entry.filename:
            raise FeedBuildError("guid", f"{entry.filename!r} is not valid XML text")
        enclosure_url = self.resolver.resolve(entry.filename)
        title = xml_text(entry.title) or entry.filename

        return FeedItem(
            title=title,
            description=xml_text(entry.comment),
            guid=entry.filename,
            enclosure_url=enclosure_url,
            length_bytes=entry.size_bytes,
            published_at=format_rfc2822(entry.modified_at),
            author=xml_text(entry.artist),
        )

    def _publisher(self) -> Optional[PublisherInfo]:
        author = (xml_text(self.config.author) or "").strip()
        if not author:
            logger.debug("No author configured, omitting publisher block")
            return None
        return PublisherInfo(name=author)

    @staticmethod
    def _require(field: str, value: Optional[str]) -> str:
        cleaned = xml_text(value)
        if cleaned is None:
            raise FeedBuildError(f"channel {field}")
        return cleaned


def build_feed(config: FeedConfig, entries: Iterable[PodcastEntry], base_url: str) -> FeedDocument:
    return FeedAssembler(config, base_url).build(entries)


def render_feed(document: FeedDocument) -> bytes:
    """Serialize a FeedDocument to RSS 2.0 XML with the iTunes podcast extension."""
    fg = FeedGenerator()
    fg.load_extension('podcast')

    fg.id(document.link)
    fg.title(document.title)
    fg.description(document.description)
    fg.link(href=document.link, rel='alternate')
    if document.publisher:
        fg.podcast.itunes_author(document.publisher.name)

    for item in document.items:
        fe = fg.add_entry(order='append')
        fe.guid(item.guid, permalink=False)
        fe.title(item.title)
        if item.description:
            fe.description(item.description)
        fe.enclosure(item.enclosure_url, str(item.length_bytes), item.mime_type)
        fe.pubDate(item.published_at)
        if item.author:
            fe.podcast.itunes_author(item.author)

    return fg.rss_str(pretty=True)

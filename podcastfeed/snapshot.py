import logging
from dataclasses import dataclass, field
from typing import Optional

from podcastfeed.config import FeedConfig, ServerConfig
from podcastfeed.feed import FeedAssembler, render_feed
from podcastfeed.scanner import DirectoryScanner
from podcastfeed.structs import FeedDocument, PodcastEntry
from podcastfeed.urls import validate_base_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PodcastSnapshot:
    """Entries and config captured once at startup and shared read-only by every request."""

    config: FeedConfig
    base_url: str
    entries: tuple[PodcastEntry, ...] = ()
    filenames: frozenset[str] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "filenames", frozenset(entry.filename for entry in self.entries))

    def feed(self) -> FeedDocument:
        return FeedAssembler(self.config, self.base_url).build(self.entries)

    def feed_xml(self) -> bytes:
        return render_feed(self.feed())


def build_snapshot(server_config: ServerConfig, feed_config: FeedConfig, scanner: Optional[DirectoryScanner] = None) -> PodcastSnapshot:
    """
    Validate the base URL and scan the podcast directory.

    Raises URLParseError for a bad base URL and FeedBuildError for a blank
    channel title or description, both before touching the filesystem, and
    PodcastIOError when the directory cannot be read.
    """
    base_url = validate_base_url(server_config.base_url)
    FeedAssembler(feed_config, base_url).build(())
    scanner = scanner or DirectoryScanner()
    entries = scanner.scan(server_config.podcast_dir, sort=server_config.sort_entries)
    logger.info(f"Loaded {len(entries)} episodes from {server_config.podcast_dir}")
    return PodcastSnapshot(config=feed_config, base_url=base_url, entries=tuple(entries))

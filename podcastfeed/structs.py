from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

AUDIO_MIME_TYPE = "audio/mpeg"


@dataclass(frozen=True)
class TagData:
    artist: Optional[str] = None
    title: Optional[str] = None
    comments: tuple[str, ...] = ()


@dataclass(frozen=True)
class PodcastEntry:
    filename: str
    title: str
    modified_at: datetime
    size_bytes: int = 0
    artist: Optional[str] = None
    comment: Optional[str] = None


@dataclass(frozen=True)
class PublisherInfo:
    name: str


@dataclass(frozen=True)
class FeedItem:
    title: str
    guid: str
    enclosure_url: str
    length_bytes: int
    published_at: str
    description: Optional[str] = None
    author: Optional[str] = None
    mime_type: str = AUDIO_MIME_TYPE


@dataclass(frozen=True)
class FeedDocument:
    title: str
    description: str
    link: str
    publisher: Optional[PublisherInfo] = None
    items: tuple[FeedItem, ...] = field(default_factory=tuple)

"""
Shared fixtures for podcastfeed tests.

Audio fixtures are tiny files carrying real ID3 tags, see tests/helpers.py.
"""

from datetime import datetime, timezone

import pytest

from podcastfeed.config import FeedConfig
from podcastfeed.structs import PodcastEntry
from tests.helpers import write_tagged_mp3

ENV_VARS = [
    "PODCAST_FEED_TITLE",
    "PODCAST_FEED_DESCRIPTION",
    "PODCAST_FEED_AUTHOR",
    "PODCAST_DIR",
    "PODCAST_BASE_URL",
    "PODCAST_HOST",
    "PODCAST_PORT",
    "PODCAST_SORT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove feed settings from the environment; values set during a test are undone afterwards."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def missing_env_file(tmp_path):
    return str(tmp_path / "missing.env")


@pytest.fixture
def podcast_dir(tmp_path):
    directory = tmp_path / "podcasts"
    directory.mkdir()
    write_tagged_mp3(directory / "episode1.mp3", title="Bar", artist="Foo", comments=["First note"])
    (directory / "corrupt.mp3").write_bytes(b"this is not an mp3 file")
    return directory


@pytest.fixture
def feed_config():
    return FeedConfig(title="Test Feed", description="Episodes for testing", author="Tester")


@pytest.fixture
def new_year():
    return datetime(2021, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def make_entry(new_year):
    def _make(filename, title=None, artist=None, comment=None, size_bytes=100):
        return PodcastEntry(
            filename=filename,
            title=title or filename,
            artist=artist,
            comment=comment,
            modified_at=new_year,
            size_bytes=size_bytes,
        )

    return _make

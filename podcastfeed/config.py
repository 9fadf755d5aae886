import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_TITLE = "Podcasts"
DEFAULT_DESCRIPTION = "Audio files from a local directory"
DEFAULT_AUTHOR = "Unknown"

DEFAULT_PODCAST_DIR = "podcasts"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_BASE_URL = f"http://{DEFAULT_HOST}:{DEFAULT_PORT}/"


@dataclass(frozen=True)
class FeedConfig:
    """Channel-level presentation data, fixed for the process lifetime."""

    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    author: str = DEFAULT_AUTHOR


@dataclass(frozen=True)
class ServerConfig:
    podcast_dir: str = DEFAULT_PODCAST_DIR
    base_url: str = DEFAULT_BASE_URL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    sort_entries: bool = False


def _load_env(env_file: Optional[str]) -> None:
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()


def _env(name: str, default: str) -> str:
    # Blank values count as unset
    value = os.getenv(name, "").strip()
    return value or default


def _env_flag(name: str) -> bool:
    return _env(name, "false").lower() in ("1", "true", "yes", "on")


def load_feed_config(env_file: Optional[str] = None, **overrides) -> FeedConfig:
    """
    Load feed presentation settings from the environment.

    Reads PODCAST_FEED_TITLE, PODCAST_FEED_DESCRIPTION and PODCAST_FEED_AUTHOR,
    after loading `env_file` (or a discovered .env) into the environment.
    Keyword overrides that are not None win over environment values.
    """
    _load_env(env_file)

    values = {
        "title": _env("PODCAST_FEED_TITLE", DEFAULT_TITLE),
        "description": _env("PODCAST_FEED_DESCRIPTION", DEFAULT_DESCRIPTION),
        "author": _env("PODCAST_FEED_AUTHOR", DEFAULT_AUTHOR),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return FeedConfig(**values)


def load_server_config(env_file: Optional[str] = None, **overrides) -> ServerConfig:
    """Load the directory, base URL and bind address; a bad PODCAST_PORT raises ValueError."""
    _load_env(env_file)

    port = _env("PODCAST_PORT", str(DEFAULT_PORT))
    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"PODCAST_PORT must be an integer, got: {port}")

    values = {
        "podcast_dir": _env("PODCAST_DIR", DEFAULT_PODCAST_DIR),
        "base_url": _env("PODCAST_BASE_URL", DEFAULT_BASE_URL),
        "host": _env("PODCAST_HOST", DEFAULT_HOST),
        "port": port_number,
        "sort_entries": _env_flag("PODCAST_SORT"),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ServerConfig(**values)

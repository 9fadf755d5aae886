from typing import Optional


class PodcastFeedError(Exception):
    """Base class for every error raised while building a podcast feed."""


class PodcastIOError(PodcastFeedError):
    """A filesystem read failed where no fallback exists."""

    def __init__(self, path: str, cause: Optional[BaseException] = None, detail: str = ""):
        self.path = path
        self.cause = cause
        reason = detail or (str(cause) if cause else "I/O error")
        super().__init__(f"{path}: {reason}")


class TagReadError(PodcastFeedError):
    """Embedded tag metadata could not be read from a file."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not read tags from {path}: {cause}")


class URLParseError(PodcastFeedError):
    """A base URL or a join against it is malformed."""

    def __init__(self, value: str, detail: str):
        self.value = value
        self.detail = detail
        super().__init__(f"Invalid URL {value!r}: {detail}")


class FeedBuildError(PodcastFeedError):
    """A required field is missing while building the channel or an item."""

    def __init__(self, field: str, detail: str = "missing required value"):
        self.field = field
        self.detail = detail
        super().__init__(f"Cannot build feed, {field}: {detail}")


def io_error(path, exc: OSError) -> PodcastIOError:
    return PodcastIOError(str(path), cause=exc)


def tag_error(path, exc: Exception) -> TagReadError:
    return TagReadError(str(path), cause=exc)

from urllib.parse import quote, urljoin, urlsplit

from podcastfeed.errors import URLParseError

PODCASTS_SEGMENT = "/podcasts/"

# Characters left as-is in a path segment besides the unreserved set.
# ':' is excluded so a filename can never be read as a scheme.
_SEGMENT_SAFE = "!$&'()*+,;=@"


def _has_control_chars(value: str) -> bool:
    return any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value)


def validate_base_url(base_url: str) -> str:
    """Check that `base_url` is an absolute http(s) URL and return it unchanged."""
    if not base_url or _has_control_chars(base_url) or base_url != base_url.strip():
        raise URLParseError(base_url, "empty or contains whitespace/control characters")

    try:
        parts = urlsplit(base_url)
        parts.port  # raises ValueError for a malformed port
    except ValueError as e:
        raise URLParseError(base_url, str(e)) from e

    if parts.scheme not in ("http", "https"):
        raise URLParseError(base_url, "missing http or https scheme")
    if not parts.hostname:
        raise URLParseError(base_url, "missing host")
    return base_url


def _encode_filename(filename: str) -> str:
    if not filename or filename in (".", ".."):
        raise URLParseError(filename, "not a file name")
    if "/" in filename or "\\" in filename:
        raise URLParseError(filename, "contains a path separator")
    if _has_control_chars(filename):
        raise URLParseError(filename, "contains control characters")
    try:
        return quote(filename, safe=_SEGMENT_SAFE)
    except UnicodeEncodeError as e:
        raise URLParseError(filename, "not valid UTF-8") from e


class URLResolver:
    """Resolves enclosure URLs against a validated base URL."""

    def __init__(self, base_url: str, segment: str = PODCASTS_SEGMENT):
        self.base_url = validate_base_url(base_url)
        self.segment = segment
        self._directory_url = urljoin(self.base_url, segment)

    def resolve(self, filename: str) -> str:
        """Join the base URL with the segment, then with the encoded filename."""
        return urljoin(self._directory_url, _encode_filename(filename))


def resolve_enclosure_url(base_url: str, filename: str, segment: str = PODCASTS_SEGMENT) -> str:
    return URLResolver(base_url, segment).resolve(filename)

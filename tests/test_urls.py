import pytest

from podcastfeed.errors import URLParseError
from podcastfeed.urls import URLResolver, resolve_enclosure_url, validate_base_url


@pytest.mark.parametrize(
    "base_url, expected",
    [
        ("http://host/", "http://host/podcasts/episode1.mp3"),
        ("http://host", "http://host/podcasts/episode1.mp3"),
        ("https://example.com:8443/", "https://example.com:8443/podcasts/episode1.mp3"),
    ],
)
def test_resolves_against_base(base_url, expected):
    assert resolve_enclosure_url(base_url, "episode1.mp3") == expected


def test_special_characters_are_percent_encoded():
    resolver = URLResolver("http://host/")

    assert resolver.resolve("my episode #1?.mp3") == "http://host/podcasts/my%20episode%20%231%3F.mp3"
    assert resolver.resolve("a:b.mp3") == "http://host/podcasts/a%3Ab.mp3"
    assert resolver.resolve("café.mp3") == "http://host/podcasts/caf%C3%A9.mp3"


@pytest.mark.parametrize(
    "filename",
    ["", ".", "..", "dir/file.mp3", "back\\slash.mp3", "line\nbreak.mp3", "bad\udcff.mp3"],
)
def test_unjoinable_filenames_raise(filename):
    resolver = URLResolver("http://host/")

    with pytest.raises(URLParseError):
        resolver.resolve(filename)


@pytest.mark.parametrize(
    "base_url",
    ["", "host/podcasts", "//host/", "ftp://host/", "http://", "http://host:notaport/", " http://host/", "http://[::1/"],
)
def test_invalid_base_urls_raise(base_url):
    with pytest.raises(URLParseError) as exc_info:
        validate_base_url(base_url)

    assert exc_info.value.value == base_url


def test_resolver_validates_base_on_construction():
    with pytest.raises(URLParseError):
        URLResolver("not a url")

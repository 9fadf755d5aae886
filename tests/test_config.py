import pytest

from podcastfeed.config import (
    DEFAULT_AUTHOR,
    DEFAULT_BASE_URL,
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    FeedConfig,
    ServerConfig,
    load_feed_config,
    load_server_config,
)


def test_feed_config_defaults(missing_env_file):
    config = load_feed_config(missing_env_file)

    assert config == FeedConfig(DEFAULT_TITLE, DEFAULT_DESCRIPTION, DEFAULT_AUTHOR)


def test_feed_config_from_environment(monkeypatch, missing_env_file):
    monkeypatch.setenv("PODCAST_FEED_TITLE", "My Show")
    monkeypatch.setenv("PODCAST_FEED_AUTHOR", "   ")

    config = load_feed_config(missing_env_file)

    assert config.title == "My Show"
    assert config.description == DEFAULT_DESCRIPTION
    assert config.author == DEFAULT_AUTHOR


def test_overrides_win_over_environment(monkeypatch, missing_env_file):
    monkeypatch.setenv("PODCAST_FEED_TITLE", "From Env")

    config = load_feed_config(missing_env_file, title="From CLI", author=None)

    assert config.title == "From CLI"
    assert config.author == DEFAULT_AUTHOR


def test_env_file_is_loaded(tmp_path):
    env_file = tmp_path / "feed.env"
    env_file.write_text("PODCAST_FEED_TITLE=From File\nPODCAST_PORT=9001\n")

    assert load_feed_config(str(env_file)).title == "From File"
    assert load_server_config(str(env_file)).port == 9001


def test_server_config_defaults(missing_env_file):
    config = load_server_config(missing_env_file)

    assert config == ServerConfig()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.podcast_dir == "podcasts"
    assert config.sort_entries is False


def test_server_config_from_environment(monkeypatch, missing_env_file):
    monkeypatch.setenv("PODCAST_DIR", "/srv/audio")
    monkeypatch.setenv("PODCAST_BASE_URL", "https://pods.example.com/")
    monkeypatch.setenv("PODCAST_PORT", "8080")
    monkeypatch.setenv("PODCAST_SORT", "yes")

    config = load_server_config(missing_env_file)

    assert config.podcast_dir == "/srv/audio"
    assert config.base_url == "https://pods.example.com/"
    assert config.port == 8080
    assert config.sort_entries is True


def test_invalid_port_raises(monkeypatch, missing_env_file):
    monkeypatch.setenv("PODCAST_PORT", "eighty")

    with pytest.raises(ValueError, match="PODCAST_PORT"):
        load_server_config(missing_env_file)

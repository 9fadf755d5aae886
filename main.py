import logging
from typing import Optional

import typer

from podcastfeed.errors import PodcastFeedError


app = typer.Typer()


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_snapshot(
    podcast_dir: Optional[str],
    base_url: Optional[str],
    title: Optional[str],
    description: Optional[str],
    author: Optional[str],
    sort: Optional[bool],
    env_file: Optional[str],
    host: Optional[str] = None,
    port: Optional[int] = None,
):
    from podcastfeed.config import load_feed_config, load_server_config
    from podcastfeed.snapshot import build_snapshot

    try:
        server_config = load_server_config(
            env_file, podcast_dir=podcast_dir, base_url=base_url, host=host, port=port, sort_entries=sort
        )
        feed_config = load_feed_config(env_file, title=title, description=description, author=author)
        return server_config, build_snapshot(server_config, feed_config)
    except (PodcastFeedError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def serve(
    podcast_dir: Optional[str] = typer.Option(None, "--dir", help="Directory of audio files."),
    base_url: Optional[str] = typer.Option(None, help="Public URL the feed is reached at."),
    host: Optional[str] = typer.Option(None, help="Address to bind."),
    port: Optional[int] = typer.Option(None, help="Port to bind."),
    title: Optional[str] = typer.Option(None, help="Feed title."),
    description: Optional[str] = typer.Option(None, help="Feed description."),
    author: Optional[str] = typer.Option(None, help="Feed author."),
    sort: Optional[bool] = typer.Option(None, "--sort/--no-sort", help="Order episodes by filename."),
    env_file: Optional[str] = typer.Option(None, help="Path to a .env file."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Scan the podcast directory once and serve its feed and audio files over HTTP."""
    from podcastfeed.server import serve as serve_http

    _setup_logging(verbose)
    server_config, snapshot = _load_snapshot(
        podcast_dir, base_url, title, description, author, sort, env_file, host=host, port=port
    )
    serve_http(snapshot, server_config)


@app.command()
def feed(
    podcast_dir: Optional[str] = typer.Option(None, "--dir", help="Directory of audio files."),
    base_url: Optional[str] = typer.Option(None, help="Public URL the feed is reached at."),
    title: Optional[str] = typer.Option(None, help="Feed title."),
    description: Optional[str] = typer.Option(None, help="Feed description."),
    author: Optional[str] = typer.Option(None, help="Feed author."),
    sort: Optional[bool] = typer.Option(None, "--sort/--no-sort", help="Order episodes by filename."),
    env_file: Optional[str] = typer.Option(None, help="Path to a .env file."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Print the RSS feed for the podcast directory to stdout."""
    _setup_logging(verbose)
    _, snapshot = _load_snapshot(podcast_dir, base_url, title, description, author, sort, env_file)
    typer.echo(snapshot.feed_xml().decode("utf-8"), nl=False)


@app.command("list")
def list_entries(
    podcast_dir: Optional[str] = typer.Option(None, "--dir", help="Directory of audio files."),
    sort: Optional[bool] = typer.Option(None, "--sort/--no-sort", help="Order episodes by filename."),
    env_file: Optional[str] = typer.Option(None, help="Path to a .env file."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """List the episodes found in the podcast directory."""
    _setup_logging(verbose)
    _, snapshot = _load_snapshot(podcast_dir, None, None, None, None, sort, env_file)
    for entry in snapshot.entries:
        artist = entry.artist or "-"
        typer.echo(f"{entry.filename}\t{entry.title}\t{artist}\t{entry.size_bytes}")


if __name__ == "__main__":
    app()

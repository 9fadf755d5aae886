import logging
from functools import partial
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import unquote, urlsplit

from podcastfeed.config import ServerConfig
from podcastfeed.snapshot import PodcastSnapshot
from podcastfeed.urls import PODCASTS_SEGMENT

logger = logging.getLogger(__name__)

FEED_PATHS = ("/", "/feed.xml")
RSS_CONTENT_TYPE = "application/rss+xml; charset=utf-8"


class PodcastRequestHandler(SimpleHTTPRequestHandler):
    """Serves the feed at / and /feed.xml and the scanned audio files under /podcasts/."""

    extensions_map = {**SimpleHTTPRequestHandler.extensions_map, ".mp3": "audio/mpeg"}

    def __init__(self, *args, snapshot: PodcastSnapshot, directory: str, **kwargs):
        self.snapshot = snapshot
        super().__init__(*args, directory=directory, **kwargs)

    def do_GET(self):
        self._dispatch(head_only=False)

    def do_HEAD(self):
        self._dispatch(head_only=True)

    def _dispatch(self, head_only: bool):
        path = urlsplit(self.path).path
        if path in FEED_PATHS:
            self._send_feed(head_only)
            return

        if path.startswith(PODCASTS_SEGMENT):
            filename = unquote(path[len(PODCASTS_SEGMENT):])
            if filename in self.snapshot.filenames:
                # Hand the bare filename to the static file machinery
                self.path = "/" + path[len(PODCASTS_SEGMENT):]
                if head_only:
                    super().do_HEAD()
                else:
                    super().do_GET()
                return

        self.send_error(HTTPStatus.NOT_FOUND, "Not found")

    def _send_feed(self, head_only: bool):
        body = self.snapshot.feed_xml()
        self.send_response(HTTPStatus.OK)
        self.send_header("Content-Type", RSS_CONTENT_TYPE)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if not head_only:
            self.wfile.write(body)

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)


def create_server(snapshot: PodcastSnapshot, server_config: ServerConfig) -> ThreadingHTTPServer:
    handler = partial(PodcastRequestHandler, snapshot=snapshot, directory=server_config.podcast_dir)
    return ThreadingHTTPServer((server_config.host, server_config.port), handler)


def serve(snapshot: PodcastSnapshot, server_config: ServerConfig):
    server = create_server(snapshot, server_config)
    logger.info(f"Serving podcasts at http://{server_config.host}:{server_config.port}")
    logger.info(f"Add this to your podcast app: {snapshot.base_url.rstrip('/')}/feed.xml")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    finally:
        server.server_close()

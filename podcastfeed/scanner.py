import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from podcastfeed.errors import PodcastIOError, TagReadError, io_error
from podcastfeed.structs import PodcastEntry
from podcastfeed.tags import TagExtractor

logger = logging.getLogger(__name__)

COMMENT_SEPARATOR = "\n"


def filename_for(path: Union[str, Path]) -> str:
    """Return the base name of `path`; a path without one is a caller error."""
    name = Path(path).name
    if not name:
        raise PodcastIOError(str(path), detail="path has no file name")
    return name


class DirectoryScanner:
    def __init__(self, extractor: Optional[TagExtractor] = None):
        self.extractor = extractor or TagExtractor()

    def scan(self, directory: Union[str, Path], sort: bool = False) -> list[PodcastEntry]:
        """
        Build one PodcastEntry per regular file directly inside `directory`.

        Entries come out in filesystem enumeration order unless `sort` is set,
        in which case they are ordered by filename. An unreadable directory
        raises PodcastIOError; a single bad directory entry is skipped.
        """
        try:
            with os.scandir(directory) as it:
                paths = [Path(dir_entry.path) for dir_entry in it if self._is_regular_file(dir_entry)]
        except OSError as e:
            raise io_error(directory, e) from e

        entries = [self.entry_from_path(path) for path in paths]
        if sort:
            entries.sort(key=lambda entry: entry.filename)

        logger.debug(f"Scanned {len(entries)} files in {directory}")
        return entries

    @staticmethod
    def _is_regular_file(dir_entry: os.DirEntry) -> bool:
        try:
            if dir_entry.is_file():
                return True
        except OSError as e:
            logger.debug(f"Skipping {dir_entry.path}: {e}")
            return False
        logger.debug(f"Skipping {dir_entry.path}: not a regular file")
        return False

    def entry_from_path(self, path: Union[str, Path]) -> PodcastEntry:
        """Build the entry for one file, degrading fields that cannot be read."""
        filename = filename_for(path)

        try:
            tags = self.extractor.read(path)
        except TagReadError as e:
            logger.warning(f"Using filename as title for {filename}: {e}")
            artist, title, comment = None, filename, None
        else:
            artist = tags.artist
            title = tags.title or filename
            comment = COMMENT_SEPARATOR.join(tags.comments) if tags.comments else None

        modified_at, size_bytes = self._stat(path)

        return PodcastEntry(
            filename=filename,
            title=title,
            artist=artist,
            comment=comment,
            modified_at=modified_at,
            size_bytes=size_bytes,
        )

    @staticmethod
    def _stat(path: Union[str, Path]) -> tuple[datetime, int]:
        # Modification time and size fall back independently
        try:
            modified_at = datetime.fromtimestamp(os.path.getmtime(path), tz=timezone.utc)
        except (OSError, OverflowError, ValueError) as e:
            logger.warning(f"Could not read modification time of {path}, using now: {e}")
            modified_at = datetime.now(timezone.utc)

        try:
            size_bytes = os.path.getsize(path)
        except OSError as e:
            logger.warning(f"Could not read size of {path}, using 0: {e}")
            size_bytes = 0

        return modified_at, size_bytes

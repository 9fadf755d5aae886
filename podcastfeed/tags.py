from pathlib import Path
from typing import Optional, Union

from mutagen import MutagenError
from mutagen.id3 import ID3

from podcastfeed.errors import tag_error
from podcastfeed.structs import TagData


class TagExtractor:
    """Reads ID3 metadata embedded in a single audio file."""

    def read(self, path: Union[str, Path]) -> TagData:
        """
        Read artist, title and comments from the file's ID3 tag.

        Raises TagReadError when the file has no tag, the tag is corrupt, or the
        file cannot be opened. No partial result is returned on failure.
        """
        try:
            tags = ID3(path)
        except (MutagenError, OSError, ValueError) as e:
            raise tag_error(path, e) from e

        comments = []
        for frame in tags.getall("COMM"):
            comments.extend(text for text in map(str, frame.text) if text)

        return TagData(
            artist=self._first_text(tags, "TPE1"),
            title=self._first_text(tags, "TIT2"),
            comments=tuple(comments),
        )

    @staticmethod
    def _first_text(tags: ID3, frame_id: str) -> Optional[str]:
        frame = tags.get(frame_id)
        if frame is None or not frame.text:
            return None
        return str(frame.text[0]) or None

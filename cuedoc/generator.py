"""Cue sheet generator writing canonical text from a :class:`Cuesheet`.

The generator never modifies the document it is given. Output is
canonical rather than a copy of the original input: disc tags come first,
then CATALOG and CDTEXTFILE, then the FILE blocks, and within each track the
tags, ISRC, FLAGS, gaps and indices in that order.
"""

import logging
from collections.abc import Iterator
from enum import Enum
from typing import Any, TextIO

from .exceptions import UnparseError
from .format_mappings import FILE_TYPE_KEYWORDS, TRACK_FLAG_KEYWORDS, TRACK_TYPE_KEYWORDS
from .grammar import quote_if_needed
from .models import Cuesheet, File, Index, Tags, Track

logger = logging.getLogger(__name__)


def _keyword(table: dict[Any, str], value: Any, what: str) -> str:
    try:
        keyword = table.get(value)
    except TypeError:
        keyword = None
    if keyword is None:
        name = value.name if isinstance(value, Enum) else value
        raise UnparseError(f"Unknown {what}: '{name}'")
    return keyword


class CueGenerator:
    """Serializer from the structured document to cue sheet text."""

    def generate(self, cuesheet: Cuesheet) -> str:
        """Generate the whole cue sheet as one string.

        Raises:
            UnparseError: If the document holds a type or flag with no keyword
        """
        return "".join(self.iter_lines(cuesheet))

    def write(self, cuesheet: Cuesheet, output: TextIO) -> None:
        """Write the cue sheet to ``output`` line by line.

        Lines written before an :class:`UnparseError` stay written; the caller
        must treat that output as invalid.
        """
        count = 0
        for line in self.iter_lines(cuesheet):
            output.write(line)
            count += 1
        logger.info(f"Wrote cue sheet: {count} lines, {cuesheet.get_track_count()} tracks")

    def iter_lines(self, cuesheet: Cuesheet) -> Iterator[str]:
        """Yield the cue sheet lines, each ending with a newline."""
        yield from self._tag_lines(cuesheet.tags)

        if cuesheet.catalog:
            yield f"CATALOG {cuesheet.catalog}\n"

        if cuesheet.cd_text_file:
            yield f"CDTEXTFILE {quote_if_needed(cuesheet.cd_text_file)}\n"

        for file_ref in cuesheet.files:
            yield from self._file_lines(file_ref)

    def _tag_lines(self, tags: Tags) -> Iterator[str]:
        for tag in tags.comment_tags:
            yield f"REM {tag.name} {quote_if_needed(tag.value)}\n"

        if tags.title is not None:
            yield f"TITLE {quote_if_needed(tags.title)}\n"
        if tags.performer is not None:
            yield f"PERFORMER {quote_if_needed(tags.performer)}\n"
        if tags.songwriter is not None:
            yield f"SONGWRITER {quote_if_needed(tags.songwriter)}\n"

    def _file_lines(self, file_ref: File) -> Iterator[str]:
        file_type = _keyword(FILE_TYPE_KEYWORDS, file_ref.type, "file type")
        # The FILE grammar only accepts a quoted path.
        yield f'FILE "{file_ref.path}" {file_type}\n'

        for track in file_ref.tracks:
            yield from self._track_lines(track)

    def _track_lines(self, track: Track) -> Iterator[str]:
        track_type = _keyword(TRACK_TYPE_KEYWORDS, track.type, "track type")
        yield f"TRACK {track.number:02d} {track_type}\n"

        yield from self._tag_lines(track.tags)

        if track.isrc is not None:
            yield f"ISRC {track.isrc}\n"

        flags = [_keyword(TRACK_FLAG_KEYWORDS, flag, "track flag") for flag in track.flags]
        if flags:
            yield f"FLAGS {' '.join(flags)}\n"

        if not track.pregap.is_zero():
            yield f"PREGAP {track.pregap}\n"
        if not track.postgap.is_zero():
            yield f"POSTGAP {track.postgap}\n"

        for index in track.indices:
            yield self._index_line(index)

    def _index_line(self, index: Index) -> str:
        return f"INDEX {index.number:02d} {index.position}\n"

"""Cue sheet parser building a :class:`Cuesheet` document from text.

Example usage:
    >>> from cuedoc.parser import CueParser
    >>> parser = CueParser()

    # Parse from string
    >>> cue_content = '''
    ... FILE "audio.wav" WAVE
    ...   TRACK 01 AUDIO
    ...     TITLE "First Track"
    ...     INDEX 01 00:00:00
    ... '''
    >>> cuesheet = parser.parse(cue_content)

    # Parse from file
    >>> cuesheet = parser.parse_file("disc.cue")

The parser makes one forward pass. "Current file" is always the last FILE
appended and "current track" the last TRACK of that file; nothing else is
remembered between lines. The first error stops the pass.
"""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from .exceptions import CueSyntaxError
from .format_mappings import get_file_type, get_track_flag, get_track_type
from .grammar import parse_int, parse_msf, parse_optionally_quoted, parse_optionally_quoted_lenient, split_quoted
from .models import Cuesheet, File, Index, Tags, Track
from .reader import DEFAULT_MAX_FILE_SIZE, read_text_file

_TAG_NAME_PATTERN = re.compile(r"[A-Z]+")


class CueParser:
    """Line parser for cue sheets."""

    # Command keyword -> handler method.
    COMMANDS = {
        "CATALOG": "_handle_catalog",
        "CDTEXTFILE": "_handle_cdtextfile",
        "FILE": "_handle_file",
        "FLAGS": "_handle_flags",
        "INDEX": "_handle_index",
        "ISRC": "_handle_isrc",
        "PERFORMER": "_handle_performer",
        "POSTGAP": "_handle_postgap",
        "PREGAP": "_handle_pregap",
        "REM": "_handle_rem",
        "SONGWRITER": "_handle_songwriter",
        "TITLE": "_handle_title",
        "TRACK": "_handle_track",
    }

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize the parser.

        Args:
            logger: Optional logger instance for debug output
        """
        self.logger = logger or logging.getLogger(__name__)
        self.reset()

    def reset(self) -> None:
        """Reset parser state for a new cue sheet."""
        self.cuesheet = Cuesheet()
        self.line_number = 0

    def parse_file(
        self, file_path: str | Path, encoding: str = "utf-8", max_size: int = DEFAULT_MAX_FILE_SIZE
    ) -> Cuesheet:
        """Parse a cue sheet from disk.

        Args:
            file_path: Path to the cue file
            encoding: Text encoding, or ``"auto"`` to detect it
            max_size: Largest accepted file size in bytes

        Raises:
            CueFileError: If the file cannot be read
            CueSyntaxError: If the content cannot be parsed
        """
        self.logger.debug(f"Parsing cue file: {file_path}")
        return self.parse(read_text_file(file_path, encoding=encoding, max_size=max_size))

    def parse(self, content: str | Iterable[str]) -> Cuesheet:
        """Parse cue sheet content.

        Args:
            content: Whole cue sheet as a string, or an iterable of lines

        Returns:
            Parsed Cuesheet

        Raises:
            CueSyntaxError: On the first line that cannot be parsed
        """
        # Only "\n" ends a line; a trailing "\r" is stripped with the other whitespace.
        lines = content.split("\n") if isinstance(content, str) else content
        return self.parse_lines(lines)

    def parse_lines(self, lines: Iterable[str]) -> Cuesheet:
        """Parse an iterable of lines, numbered from 1."""
        self.reset()

        for line_number, line in enumerate(lines, 1):
            self.line_number = line_number
            try:
                self._parse_line(line)
            except CueSyntaxError as e:
                error = CueSyntaxError(e.reason, line_number=line_number)
                self.logger.error(f"Cue sheet parsing failed: {error}")
                raise error from e

        cuesheet = self.cuesheet
        self.logger.info(
            f"Successfully parsed cue sheet: {len(cuesheet.files)} files, {cuesheet.get_track_count()} tracks"
        )
        return cuesheet

    def _parse_line(self, line: str) -> None:
        """Parse and apply a single line."""
        line = line.strip()
        if not line:
            return

        parts = line.split(None, 1)
        command = parts[0]
        rest = parts[1].strip() if len(parts) > 1 else ""

        handler_name = self.COMMANDS.get(command.upper())
        if handler_name is None:
            raise CueSyntaxError(f"Invalid command: '{command}'")

        getattr(self, handler_name)(rest)

    # Context resolution

    def _current_file(self) -> File:
        if not self.cuesheet.files:
            raise CueSyntaxError("No files (yet) in this cuesheet")
        return self.cuesheet.files[-1]

    def _current_track(self) -> Track:
        file_ref = self._current_file()
        if not file_ref.tracks:
            raise CueSyntaxError(f"No tracks (yet) in FILE block of '{file_ref.path}'")
        return file_ref.tracks[-1]

    def _current_tags(self) -> Tags:
        """Tags of the current track, or the disc's tags when there is none."""
        try:
            return self._current_track().tags
        except CueSyntaxError:
            return self.cuesheet.tags

    # Command handlers

    def _handle_catalog(self, rest: str) -> None:
        self.cuesheet.catalog = rest

    def _handle_cdtextfile(self, rest: str) -> None:
        self.cuesheet.cd_text_file = parse_optionally_quoted(rest)

    def _handle_file(self, rest: str) -> None:
        """Handle FILE command: a quoted path followed by a type keyword."""
        if not rest.startswith('"'):
            raise CueSyntaxError(f"FILE path must be quoted: '{rest}'")

        path, trailing = split_quoted(rest)
        type_keyword = trailing.strip()
        file_type = get_file_type(type_keyword)
        if file_type is None:
            raise CueSyntaxError(f"Unknown file type: '{type_keyword}'")

        self.cuesheet.files.append(File(path=path, type=file_type))
        self.logger.debug(f"Line {self.line_number}: FILE '{path}' {type_keyword}")

    def _handle_track(self, rest: str) -> None:
        """Handle TRACK command: a number followed by a type keyword."""
        file_ref = self._current_file()

        number_text, type_keyword = _split_first(rest)
        number = parse_int(number_text)
        track_type = get_track_type(type_keyword)
        if track_type is None:
            raise CueSyntaxError(f"Unknown track type: '{type_keyword}'")

        file_ref.tracks.append(Track(number=number, type=track_type))
        self.logger.debug(f"Line {self.line_number}: TRACK {number} {type_keyword}")

    def _handle_index(self, rest: str) -> None:
        track = self._current_track()

        number_text, position_text = _split_first(rest)
        number = parse_int(number_text)
        position = parse_msf(position_text)
        track.indices.append(Index(number=number, position=position))

    def _handle_isrc(self, rest: str) -> None:
        self._current_track().isrc = rest

    def _handle_flags(self, rest: str) -> None:
        track = self._current_track()

        flags = []
        for keyword in rest.split():
            flag = get_track_flag(keyword)
            if flag is None:
                raise CueSyntaxError(f"Unknown flag: '{keyword}'")
            flags.append(flag)
        track.flags.extend(flags)

    def _handle_pregap(self, rest: str) -> None:
        gap = parse_msf(rest)
        self._current_track().pregap = gap

    def _handle_postgap(self, rest: str) -> None:
        gap = parse_msf(rest)
        self._current_track().postgap = gap

    def _handle_performer(self, rest: str) -> None:
        self._current_tags().performer = parse_optionally_quoted(rest)

    def _handle_title(self, rest: str) -> None:
        self._current_tags().title = parse_optionally_quoted(rest)

    def _handle_songwriter(self, rest: str) -> None:
        self._current_tags().songwriter = parse_optionally_quoted(rest)

    def _handle_rem(self, rest: str) -> None:
        """Handle REM command.

        ``REM <NAME> <value>`` with an all-uppercase name is stored as a comment
        tag; every other REM line is an ordinary comment and is dropped. A
        badly quoted value is kept as written rather than failing the parse.
        """
        name, value = _split_first(rest)
        if not value or not _TAG_NAME_PATTERN.fullmatch(name):
            self.logger.debug(f"Line {self.line_number}: dropping comment")
            return

        self._current_tags().add_comment(name, parse_optionally_quoted_lenient(value))


def _split_first(text: str) -> tuple[str, str]:
    """Split ``text`` once on whitespace; the second part may be empty."""
    parts = text.split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()

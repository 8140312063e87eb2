"""Data models for the structured cue sheet document."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Numbers and timecode components are 32-bit signed integers.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class FileType(Enum):
    """Storage format of a FILE entry."""

    WAVE = "WAVE"
    MP3 = "MP3"
    AIFF = "AIFF"
    BINARY = "BINARY"
    MOTOROLA = "MOTOROLA"


class TrackType(Enum):
    """Data mode of a TRACK entry."""

    AUDIO = "AUDIO"
    CDG = "CDG"
    MODE1_2048 = "MODE1_2048"
    MODE1_2352 = "MODE1_2352"
    MODE2_2336 = "MODE2_2336"
    MODE2_2352 = "MODE2_2352"
    CDI_2336 = "CDI_2336"
    CDI_2352 = "CDI_2352"


class TrackFlag(Enum):
    """Sub-code flags of a track."""

    DCP = "DCP"
    FOUR_CH = "4CH"
    PRE = "PRE"


@dataclass(frozen=True)
class MSF:
    """A minute:second:frame timecode.

    No bounds are enforced; negative or out-of-range components are carried
    as given.
    """

    minute: int = 0
    second: int = 0
    frame: int = 0

    def is_zero(self) -> bool:
        """Return True for 00:00:00, which marks an unset gap."""
        return self.minute == 0 and self.second == 0 and self.frame == 0

    def __str__(self) -> str:
        """String representation in MM:SS:FF format."""
        return f"{self.minute:02d}:{self.second:02d}:{self.frame:02d}"

    def to_dict(self) -> dict[str, Any]:
        return {"minute": self.minute, "second": self.second, "frame": self.frame}


@dataclass
class CommentTag:
    """A ``REM <NAME> <value>`` tag."""

    name: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass
class Tags:
    """CD-TEXT style tags attached to the disc or to a track.

    ``None`` means the tag was never set; an empty string is a tag that was
    set to an empty value.
    """

    title: str | None = None
    performer: str | None = None
    songwriter: str | None = None
    comment_tags: list[CommentTag] = field(default_factory=list)

    def add_comment(self, name: str, value: str) -> None:
        """Append a comment tag, keeping earlier tags with the same name."""
        self.comment_tags.append(CommentTag(name=name, value=value))

    def get_comments(self, name: str) -> list[str]:
        """Return the values of all comment tags called ``name``, in order."""
        return [tag.value for tag in self.comment_tags if tag.name == name]

    def is_empty(self) -> bool:
        return self.title is None and self.performer is None and self.songwriter is None and not self.comment_tags

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for name in ("title", "performer", "songwriter"):
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        if self.comment_tags:
            result["comment_tags"] = [tag.to_dict() for tag in self.comment_tags]
        return result


@dataclass
class Index:
    """An INDEX point inside a track."""

    number: int
    position: MSF = field(default_factory=MSF)

    def to_dict(self) -> dict[str, Any]:
        return {"number": self.number, "position": self.position.to_dict()}


@dataclass
class Track:
    """Represents a single TRACK block."""

    number: int
    type: TrackType
    tags: Tags = field(default_factory=Tags)
    isrc: str | None = None
    flags: list[TrackFlag] = field(default_factory=list)
    pregap: MSF = field(default_factory=MSF)
    postgap: MSF = field(default_factory=MSF)
    indices: list[Index] = field(default_factory=list)

    def get_index(self, number: int) -> Index | None:
        """Return the first index with the given number, or None."""
        for index in self.indices:
            if index.number == number:
                return index
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert track to dictionary for serialization.

        Returns:
            Dictionary representation of track
        """
        result: dict[str, Any] = {"number": self.number, "type": _enum_value(self.type)}
        if not self.tags.is_empty():
            result["tags"] = self.tags.to_dict()
        if self.isrc is not None:
            result["isrc"] = self.isrc
        if self.flags:
            result["flags"] = [_enum_value(flag) for flag in self.flags]
        if not self.pregap.is_zero():
            result["pregap"] = self.pregap.to_dict()
        if not self.postgap.is_zero():
            result["postgap"] = self.postgap.to_dict()
        if self.indices:
            result["indices"] = [index.to_dict() for index in self.indices]
        return result


@dataclass
class File:
    """Represents a FILE block and the tracks it contains."""

    path: str
    type: FileType
    tracks: list[Track] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"path": self.path, "type": _enum_value(self.type)}
        if self.tracks:
            result["tracks"] = [track.to_dict() for track in self.tracks]
        return result


@dataclass
class Cuesheet:
    """Represents a complete cue sheet."""

    catalog: str = ""
    cd_text_file: str | None = None
    tags: Tags = field(default_factory=Tags)
    files: list[File] = field(default_factory=list)

    def get_all_tracks(self) -> list[Track]:
        """Get all tracks from all files.

        Returns:
            List of all tracks in disc order
        """
        tracks = []
        for file_ref in self.files:
            tracks.extend(file_ref.tracks)
        return tracks

    def get_track_count(self) -> int:
        """Get total number of tracks."""
        return len(self.get_all_tracks())

    def to_dict(self) -> dict[str, Any]:
        """Convert the cue sheet to a dictionary.

        Absent optional values, zero gaps and empty lists are omitted so the
        result stays close to what a reader would write by hand.
        """
        result: dict[str, Any] = {}
        if self.catalog:
            result["catalog"] = self.catalog
        if self.cd_text_file is not None:
            result["cd_text_file"] = self.cd_text_file
        if not self.tags.is_empty():
            result["tags"] = self.tags.to_dict()
        if self.files:
            result["files"] = [f.to_dict() for f in self.files]
        return result


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value

"""Keyword tables mapping cue sheet spellings to document enums and back."""

from .models import FileType, TrackFlag, TrackType

# Keywords written by the generator.
FILE_TYPE_KEYWORDS: dict[FileType, str] = {
    FileType.WAVE: "WAVE",
    FileType.MP3: "MP3",
    FileType.AIFF: "AIFF",
    FileType.BINARY: "BINARY",
    FileType.MOTOROLA: "MOTOROLA",
}

TRACK_TYPE_KEYWORDS: dict[TrackType, str] = {
    TrackType.AUDIO: "AUDIO",
    TrackType.CDG: "CDG",
    TrackType.MODE1_2048: "MODE1/2048",
    TrackType.MODE1_2352: "MODE1/2352",
    TrackType.MODE2_2336: "MODE2/2336",
    TrackType.MODE2_2352: "MODE2/2352",
    TrackType.CDI_2336: "CDI/2336",
    TrackType.CDI_2352: "CDI/2352",
}

TRACK_FLAG_KEYWORDS: dict[TrackFlag, str] = {
    TrackFlag.DCP: "DCP",
    TrackFlag.FOUR_CH: "4CH",
    TrackFlag.PRE: "PRE",
}

# Keywords accepted by the parser: the inverse of the tables above.
FILE_TYPES: dict[str, FileType] = {keyword: file_type for file_type, keyword in FILE_TYPE_KEYWORDS.items()}
TRACK_FLAGS: dict[str, TrackFlag] = {keyword: flag for flag, keyword in TRACK_FLAG_KEYWORDS.items()}
TRACK_TYPES: dict[str, TrackType] = {keyword: track_type for track_type, keyword in TRACK_TYPE_KEYWORDS.items()}

# The parser reads CD-i modes with an underscore while the generator writes a
# slash, so CDI tracks do not survive a text round trip unchanged.
# TODO: accept both spellings once downstream tools agree on the slash form.
del TRACK_TYPES["CDI/2336"], TRACK_TYPES["CDI/2352"]
TRACK_TYPES["CDI_2336"] = TrackType.CDI_2336
TRACK_TYPES["CDI_2352"] = TrackType.CDI_2352


def get_file_type(keyword: str) -> FileType | None:
    """Return the file type spelled ``keyword``, or None if unknown."""
    return FILE_TYPES.get(keyword)


def get_track_type(keyword: str) -> TrackType | None:
    """Return the track type spelled ``keyword``, or None if unknown."""
    return TRACK_TYPES.get(keyword)


def get_track_flag(keyword: str) -> TrackFlag | None:
    """Return the flag spelled ``keyword``, or None if unknown."""
    return TRACK_FLAGS.get(keyword)

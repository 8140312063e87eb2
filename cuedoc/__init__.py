"""Cue sheet parsing and generation with a structured document model."""

__version__ = "1.0.0"

# Exception exports
from .exceptions import CueError, CueFileError, CueSyntaxError, DocumentFormatError, UnparseError

# Generator exports
from .generator import CueGenerator

# Model exports
from .models import MSF, CommentTag, Cuesheet, File, FileType, Index, Tags, Track, TrackFlag, TrackType

# Parser exports
from .parser import CueParser

# Transport exports
from .serialization import cuesheet_from_dict, cuesheet_from_json, cuesheet_to_json

__all__ = [
    # Exceptions
    "CueError",
    "CueFileError",
    "CueSyntaxError",
    "DocumentFormatError",
    "UnparseError",
    # Models
    "MSF",
    "CommentTag",
    "Cuesheet",
    "File",
    "FileType",
    "Index",
    "Tags",
    "Track",
    "TrackFlag",
    "TrackType",
    # Parser
    "CueParser",
    # Generator
    "CueGenerator",
    # Transport
    "cuesheet_from_dict",
    "cuesheet_from_json",
    "cuesheet_to_json",
    # Convenience functions
    "parse_cuesheet",
    "generate_cuesheet",
]


def parse_cuesheet(content) -> Cuesheet:
    """Parse cue sheet text (a string or an iterable of lines)."""
    return CueParser().parse(content)


def generate_cuesheet(cuesheet: Cuesheet) -> str:
    """Generate canonical cue sheet text for a document."""
    return CueGenerator().generate(cuesheet)

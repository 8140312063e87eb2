"""Reading cue sheets and documents from disk."""

import logging
from pathlib import Path

import chardet

from .exceptions import CueFileError

logger = logging.getLogger(__name__)

# Cue sheets are small text files; anything larger is not one.
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB

AUTO_ENCODING = "auto"


def detect_encoding(raw_data: bytes) -> str:
    """Guess the text encoding of ``raw_data``, falling back to UTF-8."""
    detected = chardet.detect(raw_data)
    encoding = detected["encoding"] or "utf-8"
    logger.debug(f"Detected encoding {encoding} (confidence {detected.get('confidence')})")
    return encoding


def read_text_file(
    file_path: str | Path, encoding: str = "utf-8", max_size: int = DEFAULT_MAX_FILE_SIZE
) -> str:
    """Read a text file for conversion.

    Args:
        file_path: Path to the file
        encoding: Text encoding, or ``"auto"`` to detect it
        max_size: Largest accepted file size in bytes

    Returns:
        Decoded file content

    Raises:
        CueFileError: If the file is missing, too large, unreadable or cannot
            be decoded
    """
    path = Path(file_path)
    if not path.is_file():
        raise CueFileError(f"File not found: {file_path}")

    try:
        file_size = path.stat().st_size
        if file_size > max_size:
            logger.warning(f"File rejected - too large: {file_size} bytes")
            raise CueFileError(f"File too large: {file_size} bytes (max {max_size} bytes)")

        logger.debug(f"Reading file: {file_path} ({file_size} bytes)")
        raw_data = path.read_bytes()
    except OSError as e:
        raise CueFileError(f"Failed to read file: {e}") from e

    if encoding == AUTO_ENCODING:
        encoding = detect_encoding(raw_data)

    try:
        return raw_data.decode(encoding)
    except UnicodeDecodeError as e:
        raise CueFileError(f"Encoding error: {e}") from e
    except LookupError as e:
        raise CueFileError(f"Unknown encoding: {encoding}") from e

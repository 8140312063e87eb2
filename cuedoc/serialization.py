"""JSON transport for the structured cue sheet document."""

import json
import logging
from typing import Any

from pydantic import ValidationError

from .exceptions import DocumentFormatError
from .models import Cuesheet
from .schema import CuesheetDocument

logger = logging.getLogger(__name__)


def cuesheet_to_json(cuesheet: Cuesheet, pretty: bool = False) -> str:
    """Encode a cue sheet as JSON.

    Args:
        cuesheet: Document to encode
        pretty: Indent the output instead of writing a single line

    Returns:
        JSON text ending with a newline
    """
    if pretty:
        text = json.dumps(cuesheet.to_dict(), indent=2, ensure_ascii=False)
    else:
        text = json.dumps(cuesheet.to_dict(), separators=(",", ":"), ensure_ascii=False)
    return text + "\n"


def cuesheet_from_dict(data: Any) -> Cuesheet:
    """Build a cue sheet from the dictionary form produced by ``Cuesheet.to_dict``.

    Raises:
        DocumentFormatError: If the structure, a field type or a number range
            is wrong
    """
    try:
        document = CuesheetDocument.model_validate(data)
    except ValidationError as e:
        raise DocumentFormatError(_describe(e)) from e
    return document.build()


def cuesheet_from_json(text: str) -> Cuesheet:
    """Decode a cue sheet from JSON text.

    Raises:
        DocumentFormatError: If the text is not valid JSON or does not describe
            a cue sheet
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentFormatError(f"Invalid JSON document: {e}") from e

    cuesheet = cuesheet_from_dict(data)
    logger.debug(f"Decoded document: {len(cuesheet.files)} files, {cuesheet.get_track_count()} tracks")
    return cuesheet


def _describe(error: ValidationError) -> str:
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "document"
        problems.append(f"{location}: {detail['msg']}")
    return "Invalid document: " + "; ".join(problems)

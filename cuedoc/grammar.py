"""Value grammars shared by the parser: quoted strings, integers and MSF times.

All functions here are pure. Failures raise :class:`CueSyntaxError` without a
line number; the parser attaches it.
"""

import re

from .exceptions import CueSyntaxError
from .models import INT32_MAX, INT32_MIN, MSF

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer.

    Raises:
        CueSyntaxError: If ``text`` is not an optionally signed run of digits,
            or the value does not fit in 32 bits
    """
    if not _INT_PATTERN.fullmatch(text):
        raise CueSyntaxError(f"Could not parse '{text}' as an int")
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise CueSyntaxError(f"Could not parse '{text}' as an int")
    return value


def parse_msf(text: str) -> MSF:
    """Parse an ``M:S:F`` timecode without range checks.

    Args:
        text: Timecode such as ``03:45:12``

    Returns:
        MSF instance

    Raises:
        CueSyntaxError: If there are not exactly three integer parts
    """
    parts = text.split(":")
    if len(parts) != 3:
        raise CueSyntaxError(f"Could not parse '{text}' as an MSF")
    minute, second, frame = (parse_int(part) for part in parts)
    return MSF(minute=minute, second=second, frame=frame)


def split_quoted(text: str) -> tuple[str, str]:
    """Split a leading quoted string from the rest of ``text``.

    A quote preceded by a backslash does not close the string, and the
    backslash stays in the value.

    Returns:
        Tuple of (text between the quotes, text after the closing quote)

    Raises:
        CueSyntaxError: If ``text`` has no closing quote
    """
    if not text.startswith('"'):
        raise CueSyntaxError(f"Expected a quoted string in: '{text}'")

    for i in range(1, len(text)):
        if text[i] == '"' and text[i - 1] != "\\":
            return text[1:i], text[i + 1 :]

    raise CueSyntaxError(f"Couldn't find a closing quote in: '{text}'")


def parse_optionally_quoted(text: str) -> str:
    """Parse a value that is either fully quoted or taken verbatim.

    Raises:
        CueSyntaxError: On a missing closing quote or text after the quotes
    """
    if not text.startswith('"'):
        return text

    value, trailing = split_quoted(text)
    if trailing:
        raise CueSyntaxError(f"Trailing garbage after quoted string: '{trailing}'")
    return value


def parse_optionally_quoted_lenient(text: str) -> str:
    """Like :func:`parse_optionally_quoted`, but never raises.

    On any quoting error the raw text is returned unchanged.
    """
    try:
        return parse_optionally_quoted(text)
    except CueSyntaxError:
        return text


def quote_if_needed(value: str) -> str:
    """Wrap ``value`` in double quotes if it is empty or contains a space.

    Embedded quotes are not escaped.
    """
    if not value or " " in value:
        return f'"{value}"'
    return value

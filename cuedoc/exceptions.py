"""Exception classes for cue sheet conversion."""

# Process exit codes, shared with the command line front end.
EX_USAGE = 64
EX_SOFTWARE = 70
EX_OSERR = 71
EX_SYNTAX = 111
EX_DOCUMENT = 112


class CueError(Exception):
    """Base exception for all cue sheet errors."""

    exit_code = EX_SOFTWARE


class CueSyntaxError(CueError):
    """Raised when a cue sheet line cannot be parsed.

    Handlers raise it without a line number; the parser re-raises it with the
    line number filled in and the message prefixed with ``Error on line N:``.
    """

    exit_code = EX_SYNTAX

    def __init__(self, reason: str, line_number: int | None = None) -> None:
        self.reason = reason
        self.line_number = line_number
        if line_number is None:
            super().__init__(reason)
        else:
            super().__init__(f"Error on line {line_number}: {reason}")


class UnparseError(CueError):
    """Raised when a document holds a value that has no cue sheet keyword."""

    exit_code = EX_SYNTAX


class DocumentFormatError(CueError):
    """Raised when a structured document cannot be decoded."""

    exit_code = EX_DOCUMENT


class CueFileError(CueError):
    """Raised when an input file cannot be read."""

    exit_code = EX_OSERR

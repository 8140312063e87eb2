"""Command line converter between cue sheets and JSON documents."""

import argparse
import sys
from collections.abc import Sequence

import structlog
from dotenv import load_dotenv

from . import __version__
from .config import LOG_FORMATS, ConverterConfig
from .exceptions import EX_SOFTWARE, EX_USAGE, CueError
from .generator import CueGenerator
from .parser import CueParser
from .reader import read_text_file
from .serialization import cuesheet_from_json, cuesheet_to_json
from .structured_logging import configure_structured_logging

logger = structlog.get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser exiting with EX_USAGE on bad arguments."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EX_USAGE, f"{self.prog}: error: {message}\n")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="cuedoc",
        description="Convert CD cue sheets to and from structured JSON documents.",
    )
    parser.add_argument("path", help="Cue sheet to convert, or a JSON document with --to-cue")
    parser.add_argument(
        "--to-cue",
        dest="to_cue",
        action="store_true",
        help="Convert a JSON document back to a cue sheet",
    )
    parser.add_argument(
        "--pretty",
        dest="pretty",
        action="store_true",
        default=None,
        help="Indent the JSON document (default: single line)",
    )
    parser.add_argument(
        "--compact",
        dest="pretty",
        action="store_false",
        help="Write the JSON document on a single line",
    )
    parser.add_argument("--encoding", help="Input text encoding, or 'auto' to detect it (default: utf-8)")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (default: WARNING)")
    parser.add_argument("--log-format", dest="log_format", choices=LOG_FORMATS, help="Log output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _apply_args(config: ConverterConfig, args: argparse.Namespace) -> ConverterConfig:
    if args.pretty is not None:
        config.pretty = args.pretty
    if args.encoding:
        config.encoding = args.encoding
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format
    return config


def cue_to_document(path: str, config: ConverterConfig) -> str:
    """Parse the cue sheet at ``path`` and return its JSON document."""
    cuesheet = CueParser().parse_file(path, encoding=config.encoding, max_size=config.max_file_size_bytes)
    return cuesheet_to_json(cuesheet, pretty=config.pretty)


def document_to_cue(path: str, config: ConverterConfig, output) -> None:
    """Decode the JSON document at ``path`` and write its cue sheet to ``output``."""
    text = read_text_file(path, encoding=config.encoding, max_size=config.max_file_size_bytes)
    CueGenerator().write(cuesheet_from_json(text), output)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter.

    Returns:
        Process exit code
    """
    load_dotenv()

    args = build_arg_parser().parse_args(argv)

    try:
        config = _apply_args(ConverterConfig.from_env(), args)
    except ValueError as e:
        print(f"cuedoc: invalid configuration: {e}", file=sys.stderr)
        return EX_USAGE

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"cuedoc: {error}", file=sys.stderr)
        return EX_USAGE

    configure_structured_logging(config)
    direction = "document-to-cue" if args.to_cue else "cue-to-document"
    logger.info("Starting conversion", path=args.path, direction=direction)

    try:
        if args.to_cue:
            document_to_cue(args.path, config, sys.stdout)
        else:
            sys.stdout.write(cue_to_document(args.path, config))
    except CueError as e:
        logger.error("Conversion failed", path=args.path, error=str(e), error_type=type(e).__name__)
        print(f"cuedoc: {e}", file=sys.stderr)
        return e.exit_code
    except Exception as e:
        logger.exception("Unexpected error during conversion", path=args.path)
        print(f"cuedoc: unexpected error: {e}", file=sys.stderr)
        return EX_SOFTWARE

    logger.info("Conversion complete", path=args.path, direction=direction)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
asciir package init.
Exports the conversion and table functions and the command-line entry point.
"""

import argparse
import datetime
import json
import logging
import os
import sys
from typing import List, Optional

from .converter import ConversionResult, convert
from .exceptions import (
    AsciirError,
    ConversionError,
    MultiCharacterError,
    NotAsciiError,
    OutOfRangeError,
)
from .numeral import NumeralBase
from .runner import run
from .table import print_table, render_table

__version__ = "0.1.0"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.datetime.now().isoformat(),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        # Add extra structured data
        extra = getattr(record, "asciir_extra", {})
        if extra:
            log_entry.update(extra)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "WARNING") -> None:
    """
    Setup basic logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    use_json = os.environ.get("ASCIIR_LOG_JSON", "false").lower() == "true"
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    if use_json:
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        root.addHandler(handler)
    else:
        logging.basicConfig(level=getattr(logging, level.upper()))


def _default_log_level() -> str:
    level = os.environ.get("ASCIIR_LOG_LEVEL", "WARNING").upper()
    return level if level in LOG_LEVELS else "WARNING"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciir", description="Print ASCII table/values"
    )
    parser.add_argument(
        "values", metavar="VAL", nargs="*", help="Character(s) or codepoint(s)"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-b", "--binary", action="store_true", help="Show codepoints in binary"
    )
    mode.add_argument(
        "-x", "--hex", action="store_true", help="Show codepoints in hexadecimal"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=_default_log_level(),
        help="Logging level (default: $ASCIIR_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)

    base = NumeralBase.from_flags(binary=args.binary, hexadecimal=args.hex)
    try:
        run(args.values, base)
    except AsciirError as e:
        logging.getLogger(__name__).debug(f"run failed: {e!r}")
        print(e, file=sys.stderr)
        return 1
    return 0


__all__ = [
    "AsciirError",
    "ConversionError",
    "ConversionResult",
    "MultiCharacterError",
    "NotAsciiError",
    "NumeralBase",
    "OutOfRangeError",
    "convert",
    "main",
    "print_table",
    "render_table",
    "run",
    "setup_logging",
]

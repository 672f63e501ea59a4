"""
Centralized logging utilities for asciir.

Provides standardized logging functions so conversions and table rendering
are logged with a consistent format across modules. Structured fields go in
``asciir_extra`` for the JSON formatter.
"""

import logging

from ..exceptions import ConversionError


def log_conversion(
    logger: logging.Logger, token: str, codepoint: int, character: str
) -> None:
    """Log a successful conversion with consistent format."""
    logger.debug(
        f"Converted {token!r} -> codepoint {codepoint} ({character!r})",
        extra={"asciir_extra": {"token": token, "codepoint": codepoint}},
    )


def log_conversion_error(logger: logging.Logger, error: ConversionError) -> None:
    """Log a rejected token, including the error context."""
    logger.debug(
        f"Rejected {error.token!r}: {error}",
        extra={"asciir_extra": dict(error.context)},
    )


def log_table_render(logger: logging.Logger, base_name: str, rows: int) -> None:
    """Log table generation with consistent format."""
    logger.info(
        f"Rendered {base_name.lower()} table with {rows} rows",
        extra={"asciir_extra": {"base": base_name, "rows": rows}},
    )

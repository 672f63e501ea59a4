"""
Reference table of the printable ASCII range.

Codepoints 33 through 127 are listed in five side-by-side columns that read
top to bottom, so the linear range is transposed before being cut into rows.
"""

import logging
import sys
from typing import List, Optional, Sequence, TextIO, TypeVar

from .numeral import NumeralBase
from .utils.logging_utils import log_table_render

logger = logging.getLogger(__name__)

T = TypeVar("T")

TABLE_START = 33
TABLE_END = 127
TABLE_COLUMNS = 5
TABLE_ROWS = 19
DEL = 127
COLUMN_SEPARATOR = "  "


def transpose(values: Sequence[T], width: int, height: int) -> List[T]:
    """
    Transpose ``values`` laid out as ``height`` rows of ``width`` items.

    The result has ``width`` rows of ``height`` items, so item ``k`` of the
    output is input row ``k % height``, column ``k // height``.
    """
    if len(values) != width * height:
        raise ValueError(
            f"Cannot transpose {len(values)} values as {height}x{width} grid"
        )
    out: List[T] = []
    for col in range(width):
        for row in range(height):
            out.append(values[row * width + col])
    return out


def table_entry(codepoint: int, base: NumeralBase) -> str:
    glyph = "DEL" if codepoint == DEL else chr(codepoint)
    return f"{base.format_codepoint(codepoint)}: {glyph}"


def render_table(base: NumeralBase = NumeralBase.DECIMAL) -> List[str]:
    """Build the 19 display rows of the 33-127 table for ``base``."""
    codepoints = list(range(TABLE_START, TABLE_END + 1))
    # Read the range as 5 rows of 19 so each output column runs top to bottom
    ordered = transpose(codepoints, width=TABLE_ROWS, height=TABLE_COLUMNS)
    entries = [table_entry(cp, base) for cp in ordered]
    rows = [
        COLUMN_SEPARATOR.join(entries[i : i + TABLE_COLUMNS])
        for i in range(0, len(entries), TABLE_COLUMNS)
    ]
    log_table_render(logger, base.name, len(rows))
    return rows


def print_table(
    base: NumeralBase = NumeralBase.DECIMAL, stream: Optional[TextIO] = None
) -> None:
    """Write the table to ``stream`` (stdout by default)."""
    print("\n".join(render_table(base)), file=stream or sys.stdout)

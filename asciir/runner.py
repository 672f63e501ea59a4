"""
Dispatch input values to the converter or print the reference table.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO

from .converter import ConversionResult, convert
from .exceptions import ConversionError
from .numeral import NumeralBase
from .table import print_table
from .utils.logging_utils import log_conversion_error

logger = logging.getLogger(__name__)


def format_result(token: str, result: ConversionResult, base: NumeralBase) -> str:
    """
    Format a conversion as ``"<token> = <other side>"``.

    A character input shows its codepoint in ``base``; a numeric input shows
    the character.
    """
    if token == result.character:
        show = base.format_codepoint(result.codepoint)
    else:
        show = result.character
    return f"{token:>3} = {show}"


def run(
    tokens: Iterable[str],
    base: NumeralBase = NumeralBase.DECIMAL,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> None:
    """
    Convert each token in order, or print the table when there are none.

    Failed tokens are reported on ``stderr`` and do not stop the batch.
    """
    out = stdout or sys.stdout
    err = stderr or sys.stderr
    values = list(tokens)
    if not values:
        print_table(base, out)
        return

    for token in values:
        try:
            result = convert(token, base)
        except ConversionError as e:
            log_conversion_error(logger, e)
            print(e.message, file=err)
            continue
        print(format_result(token, result, base), file=out)

"""
Conversion between ASCII characters and their numeric codepoints.

A token is first read as an unsigned 8-bit number in the selected base. If
that fails, it is treated as a literal character instead.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .exceptions import MultiCharacterError, NotAsciiError, OutOfRangeError
from .numeral import NumeralBase
from .utils.logging_utils import log_conversion

logger = logging.getLogger(__name__)

FIRST_PRINTABLE = 33
LAST_PRINTABLE = 126
ASCII_MAX = 127
BYTE_MAX = 255


@dataclass(frozen=True)
class ConversionResult:
    """A codepoint paired with its ASCII character."""

    codepoint: int
    character: str


def parse_codepoint(token: str, base: NumeralBase) -> Optional[int]:
    """
    Parse ``token`` as an unsigned 8-bit integer in ``base``.

    Accepts an optional leading ``+`` followed by digits of the base, the same
    syntax as an unsigned byte parse. Returns None when the token is not a
    number or does not fit in a byte.
    """
    digits = token[1:] if token.startswith("+") else token
    if not digits or any(ch not in base.digits for ch in digits):
        return None
    # A byte is at most 8 significant digits in any supported base
    digits = digits.lstrip("0") or "0"
    if len(digits) > 8:
        return None
    value = int(digits, base.radix)
    if value > BYTE_MAX:
        return None
    return value


def convert(token: str, base: NumeralBase = NumeralBase.DECIMAL) -> ConversionResult:
    """
    Convert a single token to a codepoint/character pair.

    Args:
        token: A number in ``base`` or a single character
        base: Radix used to read numeric tokens

    Returns:
        The converted pair

    Raises:
        OutOfRangeError: numeric token outside 33-126
        NotAsciiError: single character above 127
        MultiCharacterError: anything else that is not exactly one character
    """
    codepoint = parse_codepoint(token, base)
    if codepoint is not None:
        if not FIRST_PRINTABLE <= codepoint <= LAST_PRINTABLE:
            raise OutOfRangeError(token, codepoint, base=base.name)
        result = ConversionResult(codepoint, chr(codepoint))
    elif len(token) == 1:
        # Literal characters skip the printable check; controls are accepted.
        if ord(token) > ASCII_MAX:
            raise NotAsciiError(token, base=base.name)
        result = ConversionResult(ord(token), token)
    else:
        raise MultiCharacterError(token, base=base.name)

    log_conversion(logger, token, result.codepoint, result.character)
    return result

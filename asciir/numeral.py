"""
Numeral bases used to read and display codepoints.
"""

from enum import Enum


class NumeralBase(Enum):
    """Radix selected on the command line; decimal unless told otherwise."""

    BINARY = 2
    DECIMAL = 10
    HEXADECIMAL = 16

    @property
    def radix(self) -> int:
        return self.value

    @property
    def digits(self) -> str:
        """Characters accepted as digits in this base (lowercase and upper)."""
        return _DIGITS[self]

    def format_codepoint(self, codepoint: int) -> str:
        """
        Format a codepoint as the fixed-width field used in tables and output.

        Binary is 7 zero-padded digits, decimal is right-aligned to width 3,
        hexadecimal is 2 zero-padded lowercase digits.
        """
        return format(codepoint, _FIELD_FORMATS[self])

    @classmethod
    def from_flags(
        cls, binary: bool = False, hexadecimal: bool = False
    ) -> "NumeralBase":
        """Map the mutually exclusive CLI switches onto a base."""
        if binary and hexadecimal:
            raise ValueError("binary and hexadecimal are mutually exclusive")
        if binary:
            return cls.BINARY
        if hexadecimal:
            return cls.HEXADECIMAL
        return cls.DECIMAL


_FIELD_FORMATS = {
    NumeralBase.BINARY: "07b",
    NumeralBase.DECIMAL: "3d",
    NumeralBase.HEXADECIMAL: "02x",
}

_DIGITS = {
    NumeralBase.BINARY: "01",
    NumeralBase.DECIMAL: "0123456789",
    NumeralBase.HEXADECIMAL: "0123456789abcdefABCDEF",
}

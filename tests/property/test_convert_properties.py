import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from asciir.converter import convert, parse_codepoint
from asciir.exceptions import (
    ConversionError,
    MultiCharacterError,
    NotAsciiError,
    OutOfRangeError,
)
from asciir.numeral import NumeralBase

printable = st.integers(min_value=33, max_value=126)
out_of_range = st.integers(min_value=0, max_value=32) | st.integers(
    min_value=127, max_value=255
)
bases = st.sampled_from(list(NumeralBase))


@pytest.mark.property
class TestConvertProperties:
    """Property-based tests for the converter."""

    @given(printable)
    def test_printable_decimal_round_trip(self, n):
        result = convert(str(n))
        assert result.codepoint == n
        assert result.character == chr(n)
        assert convert(result.character).codepoint == n

    @given(out_of_range)
    def test_out_of_range_decimal(self, n):
        with pytest.raises(OutOfRangeError):
            convert(str(n))

    @given(printable, bases)
    def test_formatted_codepoint_converts_back(self, n, base):
        token = base.format_codepoint(n).strip()
        assert convert(token, base).codepoint == n

    @given(st.characters(min_codepoint=128))
    def test_non_ascii_character(self, ch):
        with pytest.raises(NotAsciiError):
            convert(ch)

    @given(st.text(min_size=2, max_size=20), bases)
    def test_multi_character(self, token, base):
        assume(parse_codepoint(token, base) is None)
        with pytest.raises(MultiCharacterError):
            convert(token, base)

    @given(st.text(max_size=10), bases)
    @settings(max_examples=200)
    def test_every_input_converts_or_raises_conversion_error(self, token, base):
        try:
            result = convert(token, base)
        except ConversionError:
            return
        assert 0 <= result.codepoint <= 127
        assert result.character == chr(result.codepoint)

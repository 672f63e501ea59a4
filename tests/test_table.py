import pytest

from asciir.numeral import NumeralBase
from asciir.table import print_table, render_table, table_entry, transpose


def test_transpose_small_grid():
    # Two rows of three
    assert transpose([0, 1, 2, 3, 4, 5], 3, 2) == [0, 3, 1, 4, 2, 5]


def test_transpose_order_of_table():
    values = list(range(33, 128))
    out = transpose(values, 19, 5)
    assert out[:10] == [33, 52, 71, 90, 109, 34, 53, 72, 91, 110]
    assert out[-1] == 127
    assert sorted(out) == values


def test_transpose_size_mismatch():
    with pytest.raises(ValueError):
        transpose([1, 2, 3], 2, 2)


def test_decimal_table_matches_expected(expected_table):
    assert render_table() == expected_table.rstrip("\n").split("\n")


def test_decimal_table_shape():
    table = render_table(NumeralBase.DECIMAL)
    assert len(table) == 19
    assert table[0].startswith(" 33: !")
    assert table[0].endswith("109: m")
    assert table[-1].endswith("127: DEL")


def test_hexadecimal_table():
    table = render_table(NumeralBase.HEXADECIMAL)
    assert len(table) == 19
    assert table[0] == "21: !  34: 4  47: G  5a: Z  6d: m"
    assert table[-1] == "33: 3  46: F  59: Y  6c: l  7f: DEL"


def test_binary_table():
    table = render_table(NumeralBase.BINARY)
    assert len(table) == 19
    assert table[0].startswith("0100001: !")
    assert table[-1].endswith("1111111: DEL")


def test_table_entry():
    assert table_entry(65, NumeralBase.DECIMAL) == " 65: A"
    assert table_entry(127, NumeralBase.HEXADECIMAL) == "7f: DEL"


def test_print_table(capsys, expected_table):
    print_table()
    captured = capsys.readouterr()
    assert captured.out == expected_table
    assert captured.err == ""

"""Bit helpers and truth-table rendering."""

from logic_minimizer import QuineMcCluskey, format_truth_table
from logic_minimizer.truth_tables import (
    bits_to_minterm,
    break_column_string,
    index_to_bit_string,
    minterm_to_bits,
)


def test_minterm_bits_msb_first():
    assert minterm_to_bits(5, 3) == (1, 0, 1)
    assert minterm_to_bits(1, 4) == (0, 0, 0, 1)
    assert bits_to_minterm((1, 0, 1)) == 5
    assert bits_to_minterm(()) == 0


def test_index_to_bit_string():
    assert index_to_bit_string(6, 4) == "0110"
    assert index_to_bit_string(0, 0) == ""


def test_break_column_string_function():
    assert break_column_string("10-", "-") == ([0], [1], [2])
    assert break_column_string("", "-") == ([], [], [])


def test_format_truth_table():
    fn = QuineMcCluskey(2, minterms=[1], dontcares=[2])
    lines = format_truth_table(fn).splitlines()

    assert lines[0] == "  Row | A B | F"
    assert lines[2] == "    0 | 0 0 | 0"
    assert lines[3] == "    1 | 0 1 | 1"
    assert lines[4] == "    2 | 1 0 | -"
    assert len(lines) == 6


def test_format_truth_table_pads_long_names():
    fn = QuineMcCluskey(1, columnstring="01", vars=["in"])
    lines = format_truth_table(fn, output_name="out").splitlines()

    assert lines[0] == "  Row | in | out"
    assert lines[3] == "    1 |  1 | 1"

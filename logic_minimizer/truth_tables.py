"""
Truth-table representations of a boolean function and conversions between them.

A function of `width` inputs has 2**width rows. Row i is the input
combination whose binary value is i, with the first variable as the MSB:

    width = 3, row 5 -> A=1, B=0, C=1

The output column can be held either as term lists (the rows that are 1 or
the rows that are 0, plus the rows that are don't-cares) or as a column
string with one character per row, row 0 first:

    minterms [1, 3, 5]           -> "01010100"
    maxterms [0, 2], dontcares [3] -> "010-"
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class TermKind(Enum):
    MINTERMS = "minterms"
    MAXTERMS = "maxterms"


@dataclass(frozen=True)
class Terms:
    """Term-list form: the rows of one term family plus optional don't-cares."""

    kind: TermKind
    indices: tuple[int, ...]
    dontcares: Optional[tuple[int, ...]] = None

    @property
    def default_bit(self) -> str:
        """Symbol of the rows not named by `indices`."""
        return '0' if self.kind is TermKind.MINTERMS else '1'

    @property
    def set_bit(self) -> str:
        """Symbol of the rows named by `indices`."""
        return '1' if self.kind is TermKind.MINTERMS else '0'


@dataclass(frozen=True)
class ColumnString:
    """Column-string form: one output symbol per row, row 0 first."""

    value: str


def terms_to_column_list(width: int, terms: Terms, dc: str) -> list[str]:
    """
    Expand term lists into the output column.

    Every row starts at the family's default symbol, the listed terms are
    overwritten with the set symbol, then the don't-cares with `dc`.
    """
    column = [terms.default_bit] * (1 << width)

    for index in terms.indices:
        column[index] = terms.set_bit

    for index in terms.dontcares or ():
        column[index] = dc

    return column


def break_column_string(
    columnstring: str,
    dc: str
) -> tuple[list[int], list[int], list[int]]:
    """
    Split a column string into (minterms, maxterms, dontcares).

    Each list is in ascending row order.
    """
    minterms, maxterms, dontcares = [], [], []

    for index, symbol in enumerate(columnstring):
        if symbol == '1':
            minterms.append(index)
        if symbol == '0':
            maxterms.append(index)
        if symbol == dc:
            dontcares.append(index)

    logger.debug(
        "Broke column string %r into %d minterms, %d maxterms, %d don't-cares",
        columnstring, len(minterms), len(maxterms), len(dontcares)
    )
    return minterms, maxterms, dontcares


def minterm_to_bits(minterm: int, width: int) -> tuple[int, ...]:
    """Convert a row index to its bits, first variable (MSB) first."""
    return tuple((minterm >> (width - 1 - i)) & 1 for i in range(width))


def bits_to_minterm(bits) -> int:
    """Convert a sequence of bits, MSB first, back to a row index."""
    minterm = 0
    for bit in bits:
        minterm = (minterm << 1) | bit
    return minterm


def index_to_bit_string(index: int, width: int) -> str:
    """Row index as a `width` character string of '0'/'1'."""
    return "".join(str(bit) for bit in minterm_to_bits(index, width))


def format_truth_table(model, output_name: str = "F") -> str:
    """
    Render a validated model as a truth table, one line per row.

    Args:
        model: Any Minimizer instance
        output_name: Heading of the output column
    """
    width = model.width
    names = list(model.vars[:width])
    column = model.to_column_list()

    header = f"{'Row':>5} | {' '.join(names)} | {output_name}"
    lines = [header, "-" * len(header)]

    for index, symbol in enumerate(column):
        bits = " ".join(
            str(bit).rjust(len(name))
            for bit, name in zip(minterm_to_bits(index, width), names)
        )
        lines.append(f"{index:>5} | {bits} | {symbol}")

    return "\n".join(lines)

"""
Verification of covers against the function they were computed for.

Ensures a cover produces the specified output on every row that is not a
don't-care.
"""

import logging

from .minimizer import Minimizer
from .algorithm.quine_mccluskey import Implicant
from .truth_tables import TermKind

logger = logging.getLogger(__name__)


def evaluate_cover(implicants: list[Implicant], row: int) -> bool:
    """True when any term of the cover covers the row."""
    return any(impl.covers(row) for impl in implicants)


def verify_cover(model: Minimizer, cover: list[str]) -> tuple[bool, list[str]]:
    """
    Verify that a cover reproduces the model's output column.

    For a minterm function the cover must cover exactly the 1 rows; for a
    maxterm function exactly the 0 rows. Don't-care rows may go either way.

    Args:
        model: The validated function
        cover: Bit patterns as returned by get_covers()

    Returns:
        Tuple of (all_correct, list of error messages)
    """
    implicants = [Implicant.from_pattern(p, model.dc) for p in cover]
    target = '1' if model.active_family is TermKind.MINTERMS else '0'
    errors = []

    for row, symbol in enumerate(model.to_column_list()):
        if symbol == model.dc:
            continue

        actual = evaluate_cover(implicants, row)
        expected = symbol == target

        if actual != expected:
            errors.append(
                f"Row {row}: expected {'covered' if expected else 'uncovered'}, "
                f"got {'covered' if actual else 'uncovered'}"
            )

    if errors:
        logger.debug("Cover %s failed on %d row(s)", cover, len(errors))
    return len(errors) == 0, errors

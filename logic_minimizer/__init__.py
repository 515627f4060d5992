"""Boolean function representations, validation and Quine-McCluskey minimization."""

from .errors import (
    MinimizerError,
    InvalidWidth,
    ConflictingTermFamilies,
    RedundantColumnStringInputs,
    ColumnStringTooShort,
    ColumnStringTooLong,
    MissingTermFamily,
    DontCareTermOverlap,
    TermOutOfRange,
    InvalidDontCareSymbol,
    InvalidColumnStringSymbol,
    InsufficientVariableNames,
)
from .truth_tables import TermKind, Terms, ColumnString, format_truth_table
from .minimizer import Minimizer, extract_algorithm
from .algorithm.quine_mccluskey import Implicant, QuineMcCluskey, quine_mccluskey
from .verify import verify_cover

__all__ = [
    "MinimizerError",
    "InvalidWidth",
    "ConflictingTermFamilies",
    "RedundantColumnStringInputs",
    "ColumnStringTooShort",
    "ColumnStringTooLong",
    "MissingTermFamily",
    "DontCareTermOverlap",
    "TermOutOfRange",
    "InvalidDontCareSymbol",
    "InvalidColumnStringSymbol",
    "InsufficientVariableNames",
    "TermKind",
    "Terms",
    "ColumnString",
    "format_truth_table",
    "Minimizer",
    "extract_algorithm",
    "Implicant",
    "QuineMcCluskey",
    "quine_mccluskey",
    "verify_cover",
]
__version__ = "0.1.0"

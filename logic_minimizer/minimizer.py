"""
Base class for boolean function minimizers.

A minimizer is built from a width and exactly one description of the output
column: either a term list (minterms or maxterms, optionally with
don't-cares) or a column string. The inputs are checked on construction;
afterwards either representation can be produced on demand, and the covers
computed by the concrete subclass are cached until cleared.

Subclasses implement `generate_covers()`:

    class Espresso(Minimizer):
        def generate_covers(self):
            ...

    fn = Espresso(4, minterms=[1, 8, 9, 14, 15], dontcares=[2, 3, 11, 12])
    fn.get_covers()
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from .config import ALGORITHM_NAMESPACE, DEFAULT_DC, DEFAULT_VARS
from .errors import (
    ColumnStringTooLong,
    ColumnStringTooShort,
    ConflictingTermFamilies,
    DontCareTermOverlap,
    InsufficientVariableNames,
    InvalidColumnStringSymbol,
    InvalidDontCareSymbol,
    InvalidWidth,
    MissingTermFamily,
    RedundantColumnStringInputs,
    TermOutOfRange,
)
from .truth_tables import (
    ColumnString,
    TermKind,
    Terms,
    break_column_string,
    index_to_bit_string,
    terms_to_column_list,
)

logger = logging.getLogger(__name__)

Covers = list[list[str]]

_UNSET = object()


def extract_algorithm(cls: type, namespace: str = ALGORITHM_NAMESPACE) -> str:
    """
    Algorithm name of a minimizer class.

    Inside the algorithm namespace the package prefix is dropped, as is a
    module named after its class, so
    logic_minimizer.algorithm.quine_mccluskey.QuineMcCluskey is reported as
    "QuineMcCluskey". Remaining dots become dashes; classes outside the
    namespace keep their whole dotted path.
    """
    path = f"{cls.__module__}."
    if not path.startswith(namespace):
        return f"{path}{cls.__qualname__}".replace(".", "-")

    modules = [m for m in path[len(namespace):].split(".") if m]
    if modules and modules[-1].replace("_", "") == cls.__name__.lower():
        modules.pop()
    return "-".join(modules + cls.__qualname__.split("."))


def _as_tuple(terms: Optional[Sequence[int]]) -> Optional[tuple[int, ...]]:
    return None if terms is None else tuple(terms)


def _copy(terms: Optional[tuple[int, ...]]) -> Optional[list[int]]:
    return None if terms is None else list(terms)


class Minimizer(ABC):
    """
    A boolean function of `width` inputs, plus a cache for its covers.

    Args:
        width: Number of input variables
        minterms: Rows where the function is 1
        maxterms: Rows where the function is 0
        dontcares: Rows whose value is unconstrained
        columnstring: The whole output column, row 0 first
        dc: Don't-care character of the column string
        algorithm: Name override; derived from the class otherwise
        vars: Variable names, first (MSB) input first

    Raises:
        MinimizerError: The inputs do not describe exactly one function
    """

    def __init__(
        self,
        width: int,
        *,
        minterms: Optional[Sequence[int]] = None,
        maxterms: Optional[Sequence[int]] = None,
        dontcares: Optional[Sequence[int]] = None,
        columnstring: Optional[str] = None,
        dc: str = DEFAULT_DC,
        algorithm: Optional[str] = None,
        vars: Optional[Sequence[str]] = None,
    ):
        if isinstance(width, bool) or not isinstance(width, int) or width < 0:
            raise InvalidWidth(width)

        self._width = width
        self._minterms = _as_tuple(minterms)
        self._maxterms = _as_tuple(maxterms)
        self._dontcares = _as_tuple(dontcares)
        self._columnstring = columnstring
        self._dc = dc
        self.vars: list[str] = list(vars) if vars is not None else list(DEFAULT_VARS)
        self.algorithm = algorithm if algorithm is not None else extract_algorithm(type(self))

        self._derived_columnstring: Optional[str] = None
        self._covers = _UNSET

        self.catch_errors()
        self.representation: Union[Terms, ColumnString] = self._build_representation()

    # -- inputs ------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def dc(self) -> str:
        return self._dc

    @property
    def minterms(self) -> Optional[list[int]]:
        return _copy(self._minterms)

    @property
    def maxterms(self) -> Optional[list[int]]:
        return _copy(self._maxterms)

    @property
    def dontcares(self) -> Optional[list[int]]:
        return _copy(self._dontcares)

    @property
    def columnstring(self) -> str:
        """The column string as given, or built from the term lists."""
        if self._columnstring is not None:
            return self._columnstring
        if self._derived_columnstring is None:
            self._derived_columnstring = self.to_column_string()
        return self._derived_columnstring

    def has_minterms(self) -> bool:
        return self._minterms is not None

    def has_maxterms(self) -> bool:
        return self._maxterms is not None

    def has_dontcares(self) -> bool:
        return self._dontcares is not None

    def has_columnstring(self) -> bool:
        """True only when the column string was supplied by the caller."""
        return self._columnstring is not None

    # -- validation --------------------------------------------------------

    def catch_errors(self) -> bool:
        """
        Check that the inputs describe one function of `width` inputs.

        Rules are applied in a fixed order and the first violation is
        raised. Returns True when every rule holds.
        """
        w = self._width
        last_idx = (1 << w) - 1

        if self.has_minterms() and self.has_maxterms():
            raise ConflictingTermFamilies()

        if self.has_columnstring():
            if self.has_minterms() or self.has_maxterms() or self.has_dontcares():
                raise RedundantColumnStringInputs()

            cl = last_idx + 1 - len(self._columnstring)
            if cl > 0:
                raise ColumnStringTooShort(by=cl)
            if cl < 0:
                raise ColumnStringTooLong(by=-cl)
        else:
            if self.has_minterms():
                terms = self._minterms
            elif self.has_maxterms():
                terms = self._maxterms
            else:
                raise MissingTermFamily()

            if self.has_dontcares():
                overlap = set(self._dontcares) & set(terms)
                if overlap:
                    raise DontCareTermOverlap(sorted(overlap))
                terms = terms + self._dontcares

            # Can those terms be expressed in 'width' bits?
            outside = {t for t in terms if t > last_idx or t < 0}
            if outside:
                raise TermOutOfRange(sorted(outside), w)

        if len(self._dc) != 1 or self._dc in ('0', '1'):
            raise InvalidDontCareSymbol(self._dc)

        if self.has_columnstring():
            stray = [
                i for i, ch in enumerate(self._columnstring)
                if ch not in ('0', '1', self._dc)
            ]
            if stray:
                raise InvalidColumnStringSymbol(stray, self._dc)

        if len(self.vars) < w:
            raise InsufficientVariableNames(len(self.vars), w)

        logger.debug("Validated %s of width %d", self.algorithm, w)
        return True

    def _build_representation(self) -> Union[Terms, ColumnString]:
        if self.has_columnstring():
            return ColumnString(self._columnstring)

        if self.has_minterms():
            kind, indices = TermKind.MINTERMS, self._minterms
        else:
            kind, indices = TermKind.MAXTERMS, self._maxterms

        dontcares = tuple(self._dontcares) if self.has_dontcares() else None
        return Terms(kind=kind, indices=tuple(indices), dontcares=dontcares)

    # -- conversion --------------------------------------------------------

    @property
    def active_family(self) -> TermKind:
        """Term family the function is stated in; a column string counts as minterms."""
        if isinstance(self.representation, Terms):
            return self.representation.kind
        return TermKind.MINTERMS

    def canonical_terms(self) -> tuple[list[int], list[int]]:
        """
        The active family's rows and the don't-care rows, each sorted and
        without duplicates.
        """
        rep = self.representation
        if isinstance(rep, Terms):
            return sorted(set(rep.indices)), sorted(set(rep.dontcares or ()))

        minterms, _, dontcares = break_column_string(rep.value, self._dc)
        return minterms, dontcares

    def to_column_list(self) -> list[str]:
        """
        The output column as a list; position 0 is row 0.
        """
        rep = self.representation
        if isinstance(rep, ColumnString):
            return list(rep.value)
        return terms_to_column_list(self._width, rep, self._dc)

    def to_column_string(self) -> str:
        return "".join(self.to_column_list())

    def break_column_string(self) -> tuple[list[int], list[int], list[int]]:
        """
        (minterms, maxterms, dontcares) lists of the column string, usable
        as constructor arguments.
        """
        return break_column_string(self.columnstring, self._dc)

    def _bit_strings(self, kind: TermKind) -> Optional[list[str]]:
        rep = self.representation
        if isinstance(rep, Terms):
            if rep.kind is not kind:
                return None
            indices = sorted(set(rep.indices))
        else:
            minterms, maxterms, _ = break_column_string(rep.value, self._dc)
            indices = minterms if kind is TermKind.MINTERMS else maxterms

        return [index_to_bit_string(i, self._width) for i in indices]

    @property
    def min_bits(self) -> Optional[list[str]]:
        """Minterms as bit strings, or None for a maxterm function."""
        return self._bit_strings(TermKind.MINTERMS)

    @property
    def max_bits(self) -> Optional[list[str]]:
        """Maxterms as bit strings, or None for a minterm function."""
        return self._bit_strings(TermKind.MAXTERMS)

    def has_min_bits(self) -> bool:
        return self.active_family is TermKind.MINTERMS

    def minmax_bit_terms(self) -> list[str]:
        """Bit strings of whichever term family is active."""
        return self.min_bits if self.has_min_bits() else self.max_bits

    # -- covers ------------------------------------------------------------

    @abstractmethod
    def generate_covers(self) -> Covers:
        """Compute the covers of the function."""

    def get_covers(self) -> Covers:
        """Covers of the function, computed on first call."""
        if self._covers is _UNSET:
            logger.debug("Generating covers with %s", self.algorithm)
            self._covers = self.generate_covers()
        # Callers receive copies of the cached covers
        return [list(cover) for cover in self._covers]

    def has_covers(self) -> bool:
        return self._covers is not _UNSET

    def clear_covers(self) -> None:
        """Drop cached covers; the next get_covers() recomputes them."""
        self._covers = _UNSET

    def __repr__(self):
        return (
            f"{type(self).__name__}(width={self._width}, "
            f"columnstring={self.columnstring!r})"
        )

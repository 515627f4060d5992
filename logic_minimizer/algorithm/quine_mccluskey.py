"""
Quine-McCluskey minimization with exact covering by MaxSAT.

Prime implicants are generated by repeatedly merging implicants that differ
in a single variable. The minimum-cost subset of primes covering every
active term is then found with weighted MaxSAT (RC2), and every subset with
that optimal cost is returned as one cover.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pysat.examples.rc2 import RC2
from pysat.formula import WCNF

from ..minimizer import Covers, Minimizer
from ..truth_tables import TermKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Implicant:
    """
    A product (or sum) term over `width` variables.

    An implicant is represented by its mask and value:
    - mask: which bit positions matter (1 = matters, 0 = eliminated)
    - value: the required bit values for positions that matter

    For 3 variables (A, B, C):
    - Bit 2 = A (MSB)
    - Bit 1 = B
    - Bit 0 = C (LSB)
    """

    mask: int
    value: int
    width: int

    @property
    def num_literals(self) -> int:
        return bin(self.mask).count('1')

    def covers(self, minterm: int) -> bool:
        """Check if this implicant covers a given row."""
        return (minterm & self.mask) == (self.value & self.mask)

    def to_pattern(self, dc: str = '-') -> str:
        """Bit pattern, MSB first, with `dc` at eliminated positions."""
        chars = []
        for i in range(self.width):
            bit = 1 << (self.width - 1 - i)
            if self.mask & bit:
                chars.append('1' if self.value & bit else '0')
            else:
                chars.append(dc)
        return "".join(chars)

    @classmethod
    def from_pattern(cls, pattern: str, dc: str = '-') -> "Implicant":
        mask = value = 0
        for ch in pattern:
            mask <<= 1
            value <<= 1
            if ch != dc:
                mask |= 1
                value |= int(ch)
        return cls(mask=mask, value=value, width=len(pattern))

    def __repr__(self):
        return f"Implicant({self.to_pattern()})"


def try_merge(impl1: Implicant, impl2: Implicant) -> Optional[Implicant]:
    """
    Try to merge two implicants differing in exactly one variable.

    Two implicants can merge if:
    1. They have the same mask
    2. They differ in exactly one bit position (within the mask)

    Returns new implicant with one less literal, or None if can't merge.
    """
    if impl1.mask != impl2.mask:
        return None

    diff = (impl1.value ^ impl2.value) & impl1.mask

    if bin(diff).count('1') != 1:
        return None

    new_mask = impl1.mask & ~diff
    new_value = impl1.value & new_mask

    return Implicant(mask=new_mask, value=new_value, width=impl1.width)


def quine_mccluskey(
    on_set: set[int],
    dc_set: set[int] = None,
    n_vars: int = 4
) -> list[Implicant]:
    """
    Run Quine-McCluskey algorithm to find all prime implicants.

    Args:
        on_set: Rows the terms must cover
        dc_set: Don't-care rows (can be used for expansion)
        n_vars: Number of input variables

    Returns:
        Prime implicants that cover at least one on-set row, ordered by
        pattern
    """
    if dc_set is None:
        dc_set = set()

    full_mask = (1 << n_vars) - 1

    current = {}
    for m in on_set | dc_set:
        impl = Implicant(mask=full_mask, value=m, width=n_vars)
        current[(impl.mask, impl.value)] = impl

    prime_implicants = []

    while current:
        next_gen = {}
        used = set()

        impl_list = list(current.values())

        for i, impl1 in enumerate(impl_list):
            for j in range(i + 1, len(impl_list)):
                impl2 = impl_list[j]
                merged = try_merge(impl1, impl2)
                if merged:
                    key = (merged.mask, merged.value)
                    if key not in next_gen:
                        next_gen[key] = merged
                    used.add((impl1.mask, impl1.value))
                    used.add((impl2.mask, impl2.value))

        for key, impl in current.items():
            if key not in used:
                # Primes made only of don't-cares are never needed
                if any(impl.covers(m) for m in on_set):
                    prime_implicants.append(impl)

        current = next_gen

    logger.debug("Found %d prime implicants over %d variables", len(prime_implicants), n_vars)
    return sorted(prime_implicants, key=lambda p: p.to_pattern())


def term_cost(impl: Implicant) -> int:
    """Literals of the term plus one input to the output gate."""
    return impl.num_literals + 1


def greedy_cover(primes: list[Implicant], on_set: set[int]) -> list[Implicant]:
    """
    Greedy set cover: repeatedly take the prime with the most newly covered
    rows per unit of cost.
    """
    uncovered = set(on_set)
    selected = []

    while uncovered:
        best_impl = None
        best_ratio = -1
        best_covers = set()

        for impl in primes:
            if impl in selected:
                continue

            covers = {m for m in uncovered if impl.covers(m)}
            if not covers:
                continue

            ratio = len(covers) / term_cost(impl)
            if ratio > best_ratio:
                best_ratio = ratio
                best_impl = impl
                best_covers = covers

        if best_impl is None:
            raise RuntimeError(f"Cannot cover: {sorted(uncovered)[:5]}...")

        selected.append(best_impl)
        uncovered -= best_covers

    return selected


def maxsat_covers(primes: list[Implicant], on_set: set[int]) -> list[list[Implicant]]:
    """
    Every minimum-cost selection of primes covering the on-set.

    Formulates the covering problem as weighted MaxSAT where:
    - Hard clauses: every on-set row must be covered
    - Soft clauses: penalize each selected prime by its term cost
    """
    if not on_set:
        return [[]]

    wcnf = WCNF()

    # Variable mapping: prime index -> SAT variable (1-indexed)
    impl_vars = {i: i + 1 for i in range(len(primes))}

    for minterm in sorted(on_set):
        covering = [impl_vars[i] for i, impl in enumerate(primes) if impl.covers(minterm)]
        if not covering:
            raise RuntimeError(f"No implicant covers {minterm}")
        wcnf.append(covering)

    for i, impl in enumerate(primes):
        wcnf.append([-impl_vars[i]], weight=term_cost(impl))

    solutions = []
    with RC2(wcnf) as solver:
        best_cost = None
        for model in solver.enumerate():
            if best_cost is None:
                best_cost = solver.cost
            elif solver.cost > best_cost:
                break
            solutions.append([impl for i, impl in enumerate(primes) if impl_vars[i] in model])

    if not solutions:
        raise RuntimeError("MaxSAT solver found no solution")

    logger.debug("Found %d optimal cover(s) of cost %d", len(solutions), best_cost)
    return solutions


class QuineMcCluskey(Minimizer):
    """
    Minimizer that returns every minimum-cost cover of prime implicants.

    Minterm functions are covered with product terms (sum of products);
    maxterm functions are covered with sum terms (product of sums).

    Args:
        method: "maxsat" for all optimal covers, "greedy" for one fast cover
        Remaining arguments as for Minimizer.
    """

    METHODS = ("maxsat", "greedy")

    def __init__(self, width: int, *, method: str = "maxsat", **kwargs):
        if method not in self.METHODS:
            raise ValueError(f"Unknown covering method {method!r}, expected one of {self.METHODS}")
        self.method = method
        super().__init__(width, **kwargs)

    def prime_implicants(self) -> list[Implicant]:
        terms, dontcares = self.canonical_terms()
        return quine_mccluskey(set(terms), set(dontcares), n_vars=self.width)

    def generate_covers(self) -> Covers:
        terms, _ = self.canonical_terms()
        on_set = set(terms)
        primes = self.prime_implicants()

        if self.method == "greedy":
            solutions = [greedy_cover(primes, on_set)]
        else:
            solutions = maxsat_covers(primes, on_set)

        return sorted(
            sorted(impl.to_pattern(self.dc) for impl in cover)
            for cover in solutions
        )

    def to_expression(self, cover: list[str]) -> str:
        """
        Render one cover with the minimizer's variable names.

        Product terms are written AB'C and joined with " + "; sum terms are
        written (A' + B + C) and concatenated.
        """
        names = self.vars[:self.width]
        sop = self.active_family is TermKind.MINTERMS

        if not cover:
            return "0" if sop else "1"

        terms = []
        for pattern in cover:
            literals = []
            for name, ch in zip(names, pattern):
                if ch == self.dc:
                    continue
                # A sum term is false only on its row: a 0 bit is the plain variable
                complemented = (ch == '0') if sop else (ch == '1')
                literals.append(f"{name}'" if complemented else name)

            if sop:
                terms.append("".join(literals) if literals else "1")
            elif literals:
                terms.append("(" + " + ".join(literals) + ")")
            else:
                terms.append("0")

        return " + ".join(terms) if sop else "".join(terms)

    def solve(self) -> str:
        """Expression of the first cover."""
        return self.to_expression(self.get_covers()[0])

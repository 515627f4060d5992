"""Prime implicants and minimum covers."""

import pytest

from logic_minimizer import Implicant, QuineMcCluskey, quine_mccluskey, verify_cover
from logic_minimizer.algorithm.quine_mccluskey import greedy_cover, try_merge


def patterns(primes):
    return [p.to_pattern() for p in primes]


def test_try_merge():
    merged = try_merge(Implicant(0b111, 0b001, 3), Implicant(0b111, 0b011, 3))
    assert merged.to_pattern() == "0-1"
    assert try_merge(Implicant(0b111, 0b011, 3), Implicant(0b111, 0b101, 3)) is None
    assert try_merge(Implicant(0b011, 0b001, 3), Implicant(0b111, 0b001, 3)) is None


def test_implicant_pattern():
    impl = Implicant.from_pattern("1-0")
    assert (impl.mask, impl.value, impl.width) == (0b101, 0b100, 3)
    assert impl.num_literals == 2
    assert impl.covers(0b100) and impl.covers(0b110)
    assert not impl.covers(0b101)


def test_prime_implicants():
    assert patterns(quine_mccluskey({1, 3, 5}, n_vars=3)) == ["-01", "0-1"]
    assert patterns(quine_mccluskey(set(range(16)), n_vars=4)) == ["----"]


def test_dontcare_only_primes_are_dropped():
    assert patterns(quine_mccluskey({0}, {1, 3}, n_vars=2)) == ["0-"]


def test_essential_primes():
    fn = QuineMcCluskey(3, minterms=[1, 3, 5])
    assert fn.get_covers() == [["-01", "0-1"]]
    assert fn.solve() == "B'C + A'C"


def test_cyclic_function_has_two_covers():
    fn = QuineMcCluskey(3, minterms=[0, 1, 2, 5, 6, 7])
    covers = fn.get_covers()

    assert covers == [["-01", "0-0", "11-"], ["-10", "00-", "1-1"]]
    for cover in covers:
        assert verify_cover(fn, cover) == (True, [])


def test_greedy_method_returns_one_valid_cover():
    fn = QuineMcCluskey(3, minterms=[0, 1, 2, 5, 6, 7], method="greedy")
    covers = fn.get_covers()

    assert len(covers) == 1
    assert verify_cover(fn, covers[0])[0]


def test_greedy_cover_on_primes():
    primes = quine_mccluskey({1, 3, 5}, n_vars=3)
    assert sorted(patterns(greedy_cover(primes, {1, 3, 5}))) == ["-01", "0-1"]


def test_unknown_method():
    with pytest.raises(ValueError):
        QuineMcCluskey(2, minterms=[1], method="espresso")


def test_dontcares_enlarge_terms():
    fn = QuineMcCluskey(2, minterms=[1], dontcares=[3])
    assert fn.get_covers() == [["-1"]]
    assert fn.solve() == "B"


def test_larger_function_with_dontcares():
    fn = QuineMcCluskey(4, minterms=[1, 8, 9, 14, 15], dontcares=[2, 3, 11, 12])
    for cover in fn.get_covers():
        assert verify_cover(fn, cover) == (True, [])


def test_maxterms_give_product_of_sums():
    fn = QuineMcCluskey(2, maxterms=[0, 2], dontcares=[3])
    assert fn.get_covers() == [["-0"]]
    assert fn.solve() == "(B)"


def test_maxterm_sum_terms():
    fn = QuineMcCluskey(3, maxterms=[1, 3, 5])
    assert fn.solve() == "(B + C')(A + C')"


def test_column_string_input_is_minimized_as_minterms():
    fn = QuineMcCluskey(2, columnstring="0-1-")
    assert fn.get_covers() == [["1-"]]
    assert fn.solve() == "A"


def test_patterns_use_the_dont_care_character():
    fn = QuineMcCluskey(2, columnstring="1*0*", dc="*")
    assert fn.get_covers() == [["0*"]]
    assert fn.solve() == "A'"


def test_constant_functions():
    assert QuineMcCluskey(2, minterms=[0, 1, 2, 3]).solve() == "1"
    assert QuineMcCluskey(2, minterms=[]).solve() == "0"
    assert QuineMcCluskey(2, maxterms=[]).solve() == "1"
    assert QuineMcCluskey(2, maxterms=[0, 1, 2, 3]).solve() == "0"


def test_width_zero():
    fn = QuineMcCluskey(0, minterms=[0])
    assert fn.get_covers() == [[""]]
    assert fn.solve() == "1"


def test_custom_variable_names():
    fn = QuineMcCluskey(3, minterms=[1, 3, 5], vars=["x", "y", "z"])
    assert fn.solve() == "y'z + x'z"

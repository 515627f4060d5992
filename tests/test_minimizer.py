"""Covers cache and algorithm naming of the Minimizer base class."""

import pytest

from logic_minimizer import Minimizer, QuineMcCluskey, extract_algorithm


class CountingMinimizer(Minimizer):
    def __init__(self, *args, **kwargs):
        self.calls = 0
        super().__init__(*args, **kwargs)

    def generate_covers(self):
        self.calls += 1
        return [["1-"]]


def test_minimizer_is_abstract():
    with pytest.raises(TypeError):
        Minimizer(2, minterms=[1])


def test_covers_computed_once():
    fn = CountingMinimizer(2, minterms=[2, 3])
    assert not fn.has_covers()

    first = fn.get_covers()
    second = fn.get_covers()

    assert first == [["1-"]]
    assert second == first
    assert fn.calls == 1
    assert fn.has_covers()


def test_changing_returned_covers_leaves_cache_intact():
    fn = CountingMinimizer(2, minterms=[2, 3])
    covers = fn.get_covers()
    covers.append(["junk"])
    covers[0].append("0-")

    assert fn.get_covers() == [["1-"]]
    assert fn.calls == 1


def test_clear_covers_forces_recompute():
    fn = CountingMinimizer(2, minterms=[2, 3])
    fn.get_covers()
    fn.clear_covers()

    assert not fn.has_covers()
    assert fn.calls == 1

    fn.get_covers()
    assert fn.calls == 2


def test_construction_does_not_compute_covers():
    fn = CountingMinimizer(2, columnstring="0011")
    assert fn.calls == 0


def test_algorithm_name_of_bundled_minimizer():
    assert extract_algorithm(QuineMcCluskey) == "QuineMcCluskey"
    assert QuineMcCluskey(1, minterms=[1]).algorithm == "QuineMcCluskey"


def test_algorithm_name_inside_namespace():
    named_module = type("Espresso", (), {"__module__": "logic_minimizer.algorithm.espresso"})
    other_module = type("Fast", (), {"__module__": "logic_minimizer.algorithm.espresso"})
    package = type("Petrick", (), {"__module__": "logic_minimizer.algorithm"})

    assert extract_algorithm(named_module) == "Espresso"
    assert extract_algorithm(other_module) == "espresso-Fast"
    assert extract_algorithm(package) == "Petrick"


def test_algorithm_name_outside_namespace_keeps_full_path():
    outside = type("Petrick", (), {"__module__": "vendor.logic_minimizer.algorithm.petrick"})
    assert extract_algorithm(outside) == "vendor-logic_minimizer-algorithm-petrick-Petrick"


def test_algorithm_name_with_custom_namespace():
    cls = type("Espresso", (), {"__module__": "algorithm.espresso_heuristic"})
    assert extract_algorithm(cls, namespace="algorithm.") == "espresso_heuristic-Espresso"


def test_algorithm_override():
    fn = CountingMinimizer(2, minterms=[1], algorithm="Counting")
    assert fn.algorithm == "Counting"


def test_vars_default_and_override():
    assert CountingMinimizer(2, minterms=[1]).vars[:3] == ["A", "B", "C"]
    assert CountingMinimizer(2, minterms=[1], vars=("x", "y")).vars == ["x", "y"]


def test_repr_shows_column():
    fn = CountingMinimizer(2, maxterms=[0])
    assert repr(fn) == "CountingMinimizer(width=2, columnstring='0111')"

"""Shared fixtures for the mod2_lstar test suite."""

import numpy as np
import pytest

from mod2_lstar.conversion.suba import SUBA
from mod2_lstar.core.multiplicity_automaton import MultiplicityAutomaton


@pytest.fixture
def parity_ma():
    """Size 2 over {a, b}: value 1 iff the word has an even number of a's."""
    return MultiplicityAutomaton(
        ["a", "b"],
        [1, 0],
        {"a": [[0, 1], [1, 0]], "b": [[1, 0], [0, 1]]}
    )


@pytest.fixture
def trivial_ma():
    """Size 1 over {a}: value 1 on every word."""
    return MultiplicityAutomaton(["a"], [1], [[[1]]])


@pytest.fixture
def all_ones_ab():
    """Size 1 over {a, b}: value 1 on every word."""
    return MultiplicityAutomaton(["a", "b"], [1], [[[1]], [[1]]])


@pytest.fixture
def zero_ma():
    """Size 1 over {a}: value 0 on every word."""
    return MultiplicityAutomaton(["a"], [0], [[[1]]])


@pytest.fixture
def nonempty_ma():
    """Size 2 over {a}: value 0 on the empty word, 1 on every other word."""
    return MultiplicityAutomaton(["a"], [0, 1], [[[0, 1], [0, 1]]])


@pytest.fixture
def example_suba():
    """Two states over {a}, final state 2, transitions (1,a,2) and (2,a,2)."""
    return SUBA(2, ["a"], [2], [(1, "a", 2), (2, "a", 2)])


@pytest.fixture
def example_suba_text():
    return "\n".join([
        "// number of states",
        "2",
        "// alphabet",
        "1",
        "a",
        "",
        "// final states",
        "2",
        "// transitions",
        "2",
        "1 a 2",
        "2 a 2",
        "",
    ])


@pytest.fixture
def parity_ma_text():
    return "\n".join([
        "2",
        "a b",
        "2",
        "1 0",
        "// letter a",
        "0 1",
        "1 0",
        "// letter b",
        "1 0",
        "0 1",
    ])


@pytest.fixture
def random_ma():
    """Factory for uniformly random mod-2 MAs."""
    def make(rng: np.random.Generator, alphabet, size: int) -> MultiplicityAutomaton:
        gamma = rng.integers(0, 2, size=size)
        mu = rng.integers(0, 2, size=(len(alphabet), size, size))
        return MultiplicityAutomaton(alphabet, gamma, mu)
    return make

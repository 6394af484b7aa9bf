"""
Unambiguous finite automaton (UFA) and its mod-2 multiplicity automaton.

The mod-2 MA of a UFA counts accepting runs modulo 2: γ is the
characteristic vector of the final states and μ_a is the adjacency
matrix of the a-transitions. For an unambiguous automaton the count is
0 or 1, so the MA computes exactly the recognized language.
"""

from typing import Dict, Iterable, List, Set, Tuple

import numpy as np

from mod2_lstar.core.multiplicity_automaton import MultiplicityAutomaton


class UFA:
    """Finite automaton with states 1..n and initial state 1."""

    def __init__(self,
                 num_states: int,
                 alphabet: Iterable[str],
                 transitions: Iterable[Tuple[int, str, int]],
                 final_states: Iterable[int]):
        self.num_states = num_states
        self.alphabet: List[str] = list(alphabet)
        self.transitions: Set[Tuple[int, str, int]] = set(transitions)
        self.final_states: Set[int] = set(final_states)

        # state → symbol → successors
        self.delta: Dict[int, Dict[str, List[int]]] = {}
        for p_start, letter, p_end in sorted(self.transitions):
            self.delta.setdefault(p_start, {}).setdefault(letter, []).append(p_end)

    def accepting_runs(self, word: str) -> int:
        """Number of runs on word from state 1 that end in a final state."""
        runs = {1: 1}
        for symbol in word:
            next_runs: Dict[int, int] = {}
            for state, count in runs.items():
                for target in self.delta.get(state, {}).get(symbol, []):
                    next_runs[target] = next_runs.get(target, 0) + count
            runs = next_runs
        return sum(count for state, count in runs.items() if state in self.final_states)

    def accepts(self, word: str) -> bool:
        return self.accepting_runs(word) > 0

    def to_multiplicity_automaton(self) -> MultiplicityAutomaton:
        """
        Reinterpret the UFA as a mod-2 MA of size r = num_states.

        γ[i] = 1 iff state i+1 is final; μ_a[i][j] = 1 iff (i+1, a, j+1) ∈ Δ'.
        """
        r = self.num_states
        char_to_idx = {a: i for i, a in enumerate(self.alphabet)}

        gamma = np.zeros(r, dtype=np.int64)
        for state in self.final_states:
            gamma[state - 1] = 1

        mu = np.zeros((len(self.alphabet), r, r), dtype=np.int64)
        for p_start, letter, p_end in self.transitions:
            mu[char_to_idx[letter], p_start - 1, p_end - 1] = 1

        return MultiplicityAutomaton(self.alphabet, gamma, mu)

    def __str__(self) -> str:
        return (f"UFA(|Q|={self.num_states}, |Σ|={len(self.alphabet)}, "
                f"|F|={len(self.final_states)}, |Δ|={len(self.transitions)})")


def ufa_to_mod2_ma(ufa: UFA) -> MultiplicityAutomaton:
    return ufa.to_multiplicity_automaton()

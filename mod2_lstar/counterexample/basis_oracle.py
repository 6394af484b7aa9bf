"""
Exact equivalence oracle by basis construction (Thon and Jaeger, Algorithm 1).

Target (γ_f, μ_f) of size r and hypothesis (γ_h, μ_h) of size l are joined
into a combined automaton of size r+l with block-diagonal weights

    | μ_f(a)    0   |
    |   0    μ_h(a) |

and output vector [γ_f; γ_h]. For every word s the vector μ(s)·γ holds
f(s) at index 0 and h(s) at index r, so v[0] + v[r] is the XOR of the two
functions. A basis of span{μ(s)·γ : s ∈ Σ*} is grown breadth first; the
automata are equivalent iff every basis vector has v[0] + v[r] = 0.
"""

import time
from collections import deque
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from mod2_lstar.core.gf2 import GF2Basis, matmul, mod2
from mod2_lstar.core.multiplicity_automaton import MultiplicityAutomaton
from .base_oracle import EquivalenceOracle


def combined_automaton(target: MultiplicityAutomaton,
                       hypothesis: MultiplicityAutomaton) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the XOR automaton of target and hypothesis.

    Returns:
        (gamma, mu): stacked output vector of length r+l and
        block-diagonal weight matrices of shape (|Σ|, r+l, r+l)
    """
    r, l = target.size, hypothesis.size
    gamma = np.concatenate([target.gamma, hypothesis.gamma])

    mu = np.zeros((len(target.alphabet), r + l, r + l), dtype=np.int64)
    mu[:, :r, :r] = target.mu
    mu[:, r:, r:] = hypothesis.mu
    return gamma, mu


class BasisEquivalenceOracle(EquivalenceOracle):
    """
    Whitebox equivalence oracle over the target's weight matrices.

    Explores vectors in FIFO order, so the returned counterexample is a
    shortest one reachable by this traversal, though not necessarily a
    globally shortest distinguishing word.
    """

    def __init__(self, ma_oracle, alphabet: List[str], **kwargs):
        super().__init__(ma_oracle, alphabet, **kwargs)

        # Basis-specific statistics
        self.vectors_explored = 0
        self.last_basis_size = 0

    def find_counterexample(self, hypothesis: MultiplicityAutomaton,
                            iteration: int) -> Optional[str]:
        self._check_alphabet(hypothesis)
        start_time = time.time()
        self.total_queries += 1

        target = self.ma_oracle.target
        r = target.size
        gamma, mu = combined_automaton(target, hypothesis)

        basis = GF2Basis(r + hypothesis.size)
        worklist = deque([(gamma, "")])

        while worklist:
            v, s = worklist.popleft()
            self.vectors_explored += 1

            if not basis.is_independent(v):
                continue

            if mod2(v[0] + v[r]) == 1:
                self.counterexamples_found += 1
                self.last_basis_size = len(basis)
                self.total_time += time.time() - start_time
                return s

            basis.add(v, s)
            for idx, symbol in enumerate(self.alphabet):
                worklist.append((matmul(mu[idx], v), symbol + s))

        self.last_basis_size = len(basis)
        self.total_time += time.time() - start_time
        return None

    def get_statistics(self) -> Dict[str, Any]:
        stats = super().get_statistics()
        stats.update({
            'vectors_explored': self.vectors_explored,
            'last_basis_size': self.last_basis_size,
        })
        return stats

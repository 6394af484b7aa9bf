"""
Hankel sub-table for learning multiplicity automata (Beimel et al., 2000).

Maintains ordered index sets X (rows) and Y (experiments) of equal length
l, with F(x, y) = MQ(x·y). X[0] = Y[0] = ε, and the l x l matrix
[F(x_i, y_j)] is kept invertible over GF(2) so that the vectors F_x
are linearly independent.
"""

from typing import Dict, List, Optional, Tuple

import numpy as np

from .gf2 import Singular, identity, matmul, mod2, solve_linear_system
from .multiplicity_automaton import MultiplicityAutomaton


class HankelTable:
    """Index sets X, Y of a mod-2 MA learner and the hypothesis they induce."""

    def __init__(self, alphabet: List[str], teacher):
        """
        Initialize table with X = Y = [ε].

        Args:
            alphabet: Input alphabet Σ
            teacher: Oracle providing membership queries
        """
        self.X: List[str] = [""]
        self.Y: List[str] = [""]
        self.A = list(alphabet)
        self.teacher = teacher

        # Statistics for analysis
        self.query_count = 0
        self.singular_rows = 0

    @property
    def size(self) -> int:
        """Current l = |X| = |Y|."""
        return len(self.X)

    def _query(self, words: List[str]) -> List[int]:
        self.query_count += len(words)
        return self.teacher.membership_queries(words)

    def basis_matrix(self) -> np.ndarray:
        """
        l x l matrix whose i-th column is F_{x_i} restricted to Y.

        Entry [j][i] = MQ(x_i·y_j).
        """
        return self._basis_matrix(self._query)

    def _basis_matrix(self, query) -> np.ndarray:
        l = self.size
        values = query([x + y for x in self.X for y in self.Y])
        return np.asarray(values, dtype=np.int64).reshape(l, l).T

    def build_hypothesis(self) -> MultiplicityAutomaton:
        """
        Construct the hypothesis automaton of size l.

        γ_h = [MQ(x_i)]. Row i of μ_σ holds the coefficients expressing
        F_{x_i·σ} (restricted to Y) in terms of F_{x_1}, ..., F_{x_l}.
        A singular system leaves the row at zero; a later counterexample
        corrects the hypothesis.
        """
        l = self.size
        gamma = self._query(list(self.X))
        F = self.basis_matrix()

        mu = np.zeros((len(self.A), l, l), dtype=np.int64)
        for c, sigma in enumerate(self.A):
            for i, x in enumerate(self.X):
                constants = self._query([x + sigma + y for y in self.Y])
                result = solve_linear_system(F, constants)
                if isinstance(result, Singular):
                    self.singular_rows += 1
                    continue
                mu[c, i] = result.solution

        return MultiplicityAutomaton(self.A, gamma, mu)

    def find_decomposition(self, counterexample: str,
                           hypothesis: MultiplicityAutomaton) -> Optional[Tuple[str, str, str]]:
        """
        Split a counterexample z into (w, σ, y) with w·σ a prefix of z and y ∈ Y.

        Walks prefixes of increasing length and returns the first triple
        where MQ(w·σ·y) differs from Σ_k μ_h(w)[0][k] · MQ(x_k·σ·y).

        Returns:
            (w, σ, y) or None if no prefix and experiment disagree
        """
        l = self.size
        u = identity(l)
        for i, sigma in enumerate(counterexample):
            w = counterexample[:i]
            if i > 0:
                u = matmul(u, hypothesis.weight_matrix(counterexample[i - 1]))
            coefficients = mod2(u[0])

            for y in self.Y:
                left = self._query([w + sigma + y])[0]
                column = self._query([x + sigma + y for x in self.X])
                right = mod2(int(np.dot(coefficients, column)))
                if left != right:
                    return w, sigma, y

        return None

    def add_counterexample(self, counterexample: str):
        """Absorb a counterexample as both a row and an experiment."""
        self.X.append(counterexample)
        self.Y.append(counterexample)

    def extend(self, w: str, experiment: str):
        """Add w to X and σ·y to Y."""
        self.X.append(w)
        self.Y.append(experiment)

    def get_statistics(self) -> Dict[str, int]:
        return {
            "rows": len(self.X),
            "experiments": len(self.Y),
            "membership_queries": self.query_count,
            "singular_rows": self.singular_rows,
        }

    def __str__(self) -> str:
        lines = ["Hankel Table:"]
        lines.append(f"  l = {self.size}")

        if self.size <= 10:
            # Display only, kept out of query_count
            values = self._basis_matrix(self.teacher.membership_queries).T
            header = " ".join(f"{y or 'ε':>4}" for y in self.Y)
            lines.append(f"  {'':>6} {header}")
            for x, row in zip(self.X, values):
                lines.append(f"  {x or 'ε':>6} " + " ".join(f"{int(v):>4}" for v in row))

        return "\n".join(lines)

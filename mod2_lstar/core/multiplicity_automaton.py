"""
Multiplicity automaton over GF(2).

A mod-2 multiplicity automaton of size r is a pair (γ, {μ_a}) where γ is
an r-dimensional output vector and μ_a is an r x r weight matrix per
alphabet symbol. The function it computes on w = a1...an is

    f(w) = e1ᵀ · μ_{a1} · ... · μ_{an} · γ  (mod 2)
"""

from typing import Dict, List, Mapping, Sequence, Union

import numpy as np

from .gf2 import identity, matmul, mod2


class MultiplicityAutomaton:
    """Immutable bundle of alphabet, output vector and weight matrices."""

    def __init__(self,
                 alphabet: Sequence[str],
                 gamma: Sequence,
                 mu: Union[Mapping[str, Sequence], Sequence]):
        """
        Initialize automaton.

        Args:
            alphabet: Ordered alphabet; symbol indices follow this order
            gamma: Output vector of length r
            mu: Mapping symbol → r x r matrix, or sequence of matrices in alphabet order
        """
        self.alphabet: List[str] = list(alphabet)
        self.char_to_idx: Dict[str, int] = {a: i for i, a in enumerate(self.alphabet)}
        if len(self.char_to_idx) != len(self.alphabet):
            raise ValueError(f"Alphabet has duplicate symbols: {self.alphabet}")

        self.gamma = mod2(np.asarray(gamma, dtype=float).reshape(-1))
        r = self.gamma.shape[0]
        if r == 0:
            raise ValueError("Automaton must have at least one state")

        if isinstance(mu, Mapping):
            missing = [a for a in self.alphabet if a not in mu]
            if missing:
                raise ValueError(f"No weight matrix for symbols {missing}")
            matrices = [mu[a] for a in self.alphabet]
        else:
            matrices = list(mu)
        if len(matrices) != len(self.alphabet):
            raise ValueError(
                f"Expected {len(self.alphabet)} weight matrices, got {len(matrices)}"
            )

        self.mu = np.zeros((len(self.alphabet), r, r), dtype=np.int64)
        for idx, matrix in enumerate(matrices):
            matrix = np.asarray(matrix, dtype=float)
            if matrix.shape != (r, r):
                raise ValueError(
                    f"Weight matrix for '{self.alphabet[idx]}' has shape {matrix.shape}, expected {(r, r)}"
                )
            self.mu[idx] = mod2(matrix)

        self.gamma.setflags(write=False)
        self.mu.setflags(write=False)

    @property
    def size(self) -> int:
        """Number of states r."""
        return self.gamma.shape[0]

    def weight_matrix(self, symbol: str) -> np.ndarray:
        """μ_a for a single symbol."""
        return self.mu[self._index(symbol)]

    def weight(self, word: str) -> np.ndarray:
        """
        μ(word) accumulated left to right from the identity.

        Reduced mod 2 after every multiplication, so entries stay in {0, 1}.
        """
        current = identity(self.size)
        for symbol in word:
            current = matmul(current, self.mu[self._index(symbol)])
        return current

    def evaluate(self, word: str) -> int:
        """Value of the automaton on word (a membership query)."""
        return mod2(self.weight(word)[0] @ self.gamma)

    def state_vector(self, word: str) -> np.ndarray:
        """μ(word)·γ as a column vector."""
        return matmul(self.weight(word), self.gamma)

    def _index(self, symbol: str) -> int:
        try:
            return self.char_to_idx[symbol]
        except KeyError:
            raise ValueError(f"Symbol '{symbol}' is not in the alphabet {self.alphabet}") from None

    def __len__(self) -> int:
        return self.size

    def __eq__(self, other) -> bool:
        if not isinstance(other, MultiplicityAutomaton):
            return NotImplemented
        return (self.alphabet == other.alphabet
                and np.array_equal(self.gamma, other.gamma)
                and np.array_equal(self.mu, other.mu))

    __hash__ = None

    def __str__(self) -> str:
        return f"MultiplicityAutomaton(r={self.size}, |Σ|={len(self.alphabet)})"

    def to_dot(self) -> str:
        """
        Generate Graphviz DOT representation.

        Edge i → j carries symbol a when μ_a[i][j] = 1; states with
        γ = 1 are drawn as double circles.
        """
        lines = ["digraph MA {", "    rankdir=LR;", "    node [shape=circle];"]

        for i in range(self.size):
            if self.gamma[i]:
                lines.append(f'    "{i}" [shape=doublecircle];')

        lines.append('    __start__ [shape=none, label=""];')
        lines.append('    __start__ -> "0";')

        for i in range(self.size):
            targets = {}
            for idx, symbol in enumerate(self.alphabet):
                for j in np.nonzero(self.mu[idx][i])[0]:
                    targets.setdefault(int(j), []).append(symbol)
            for j, symbols in targets.items():
                label = ",".join(symbols)
                lines.append(f'    "{i}" -> "{j}" [label="{label}"];')

        lines.append("}")
        return "\n".join(lines)

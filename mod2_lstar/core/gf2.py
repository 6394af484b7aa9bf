"""
Exact linear algebra over GF(2).

Values are held in ordinary numpy integer arrays and normalized through
mod2 wherever they take part in a decision. Elimination uses XOR on rows,
so no floating point tolerance is ever involved.
"""

from dataclasses import dataclass
from typing import List, Sequence, Union

import numpy as np


ArrayLike = Union[np.ndarray, Sequence]


def mod2(x):
    """
    Round to the nearest integer (halves round up) and reduce modulo 2.

    Returns an int for scalar input and an int64 array otherwise.
    """
    rounded = np.floor(np.asarray(x, dtype=float) + 0.5).astype(np.int64)
    result = np.mod(rounded, 2)
    if result.ndim == 0:
        return int(result)
    return result


def identity(n: int) -> np.ndarray:
    """n x n identity matrix over GF(2)."""
    return np.eye(n, dtype=np.int64)


def matmul(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Matrix (or matrix-vector) product reduced modulo 2."""
    return np.mod(np.asarray(a, dtype=np.int64) @ np.asarray(b, dtype=np.int64), 2)


@dataclass(frozen=True)
class Solved:
    """Unique solution of a GF(2) linear system."""
    solution: np.ndarray


@dataclass(frozen=True)
class Singular:
    """Coefficient matrix has GF(2) rank below its order."""
    rank: int


def _eliminate(m: np.ndarray, num_pivot_cols: int) -> int:
    """
    Reduce m in place to reduced row-echelon form over GF(2).

    Only the first num_pivot_cols columns are used as pivot columns.
    For each column the first row holding a 1 (the largest mod-2 entry)
    is swapped into pivot position and cleared from every other row.

    Returns:
        Number of pivots found (the rank of the pivot columns)
    """
    num_rows = m.shape[0]
    row = 0
    for col in range(num_pivot_cols):
        if row >= num_rows:
            break
        candidates = np.nonzero(m[row:, col])[0]
        if candidates.size == 0:
            continue
        pivot = row + int(candidates[0])
        if pivot != row:
            m[[row, pivot]] = m[[pivot, row]]
        others = np.nonzero(m[:, col])[0]
        others = others[others != row]
        m[others] ^= m[row]
        row += 1
    return row


def solve_linear_system(A: ArrayLike, b: ArrayLike) -> Union[Solved, Singular]:
    """
    Solve A·x = b over GF(2) by Gauss-Jordan elimination.

    Args:
        A: n x n coefficient matrix
        b: Right-hand side of length n

    Returns:
        Solved(x) when A is invertible over GF(2), Singular(rank) otherwise.
        Callers decide how to treat the singular case.
    """
    A = mod2(np.atleast_2d(np.asarray(A, dtype=float)))
    b = mod2(np.asarray(b, dtype=float).reshape(-1))
    n = A.shape[0]
    if A.shape != (n, n) or b.shape[0] != n:
        raise ValueError(
            f"Expected a square system, got A of shape {A.shape} and b of length {b.shape[0]}"
        )
    if n == 0:
        return Solved(np.zeros(0, dtype=np.int64))

    augmented = np.concatenate([A, b[:, None]], axis=1)
    rank = _eliminate(augmented, n)
    if rank < n:
        return Singular(rank)
    return Solved(augmented[:, n].copy())


def is_linearly_independent(w: ArrayLike, basis: Sequence[ArrayLike]) -> bool:
    """
    Test whether w lies outside span(basis) over GF(2).

    Builds the augmented matrix [basis | w] (basis vectors as columns),
    reduces it, then inspects the bottom-most row with a 1 in the last
    column: w is independent iff that row has no 1 among the basis columns.
    The zero vector is dependent on every basis, the empty one included.
    """
    w = mod2(np.asarray(w, dtype=float).reshape(-1))
    size_b = len(basis)
    columns = [mod2(np.asarray(v, dtype=float).reshape(-1)) for v in basis] + [w]
    for v in columns:
        if v.shape != w.shape:
            raise ValueError(f"Vector of length {v.shape[0]} does not match length {w.shape[0]}")
    m = np.column_stack(columns)

    _eliminate(m, size_b + 1)

    ones = np.nonzero(m[:, size_b])[0]
    if ones.size == 0:
        return False
    index = int(ones[-1])
    return not m[index, :size_b].any()


class GF2Basis:
    """
    Incrementally grown set of linearly independent GF(2) vectors.

    Each vector is stored with the word that produced it, so a search
    over reachable vectors can report which string led where.
    """

    def __init__(self, dimension: int):
        self.dimension = dimension
        self.vectors: List[np.ndarray] = []
        self.words: List[str] = []

    def is_independent(self, v: ArrayLike) -> bool:
        return is_linearly_independent(v, self.vectors)

    def add(self, v: ArrayLike, word: str = ""):
        v = mod2(np.asarray(v, dtype=float).reshape(-1))
        if v.shape[0] != self.dimension:
            raise ValueError(f"Expected vector of length {self.dimension}, got {v.shape[0]}")
        if len(self.vectors) >= self.dimension:
            raise ValueError("Basis is already full")
        self.vectors.append(v)
        self.words.append(word)

    def __len__(self) -> int:
        return len(self.vectors)

    def __str__(self) -> str:
        return f"GF2Basis(dimension={self.dimension}, size={len(self)})"

"""Text rendering of learned automata and learner state."""

from typing import List

from mod2_lstar.core.gf2 import mod2


EMPTY_WORD = "ε"


def format_result(hypothesis) -> str:
    """
    Render γ and every μ of a learned automaton.

    Every value is passed through mod2 before display.
    """
    lines = ["Learned mod-2-MA", "----------------"]
    lines.append("y: " + " ".join(str(mod2(v)) for v in hypothesis.gamma))
    lines.append("")
    lines.append("Set of u:")
    lines.append("")
    for symbol, matrix in zip(hypothesis.alphabet, hypothesis.mu):
        lines.append(f"Letter {symbol}")
        for row in matrix:
            lines.append(" ".join(str(mod2(v)) for v in row))
        lines.append("")
    return "\n".join(lines)


def format_index_sets(X: List[str], Y: List[str]) -> str:
    """Render l, X and Y; the empty word is shown as ε."""
    return "\n".join([
        f"l = {len(X)}",
        "X: " + " ".join(x or EMPTY_WORD for x in X),
        "Y: " + " ".join(y or EMPTY_WORD for y in Y),
        "",
    ])

"""
Error taxonomy for mod-2 multiplicity automaton learning.

Three failure kinds are kept apart so callers can tell "fix your input"
from "this target could not be learned" from "the learned result did not
pass the statistical recheck".
"""

from typing import Optional


class Mod2MAError(Exception):
    """Base class for every error raised by mod2_lstar."""
    pass


class InvalidInputError(Mod2MAError, ValueError):
    """Raised when an automaton description fails validation."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(f"Invalid input: {message}")


class LearningFailed(Mod2MAError, RuntimeError):
    """
    Raised when the learning loop hits an algorithmic invariant violation.

    Attributes:
        reason: "no_decomposition" or "size_exceeded"
        counterexample: Counterexample being processed when the run failed
        size: Size l of the hypothesis at failure
    """

    NO_DECOMPOSITION = "no_decomposition"
    SIZE_EXCEEDED = "size_exceeded"

    def __init__(self, reason: str, message: str,
                 counterexample: Optional[str] = None, size: int = 0):
        self.reason = reason
        self.counterexample = counterexample
        self.size = size
        super().__init__(f"Algorithm failed: {message}")


class VerificationFailed(Mod2MAError):
    """Raised when the learned automaton disagrees with the target on a sampled word."""

    def __init__(self, word: str, target_value: int, hypothesis_value: int):
        self.word = word
        self.target_value = target_value
        self.hypothesis_value = hypothesis_value
        super().__init__(
            f"Learned result did not pass verification: target gives {target_value} "
            f"but hypothesis gives {hypothesis_value} on '{word}'"
        )

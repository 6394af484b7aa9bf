"""
Abstract base class for equivalence oracles.

An equivalence oracle compares a hypothesis automaton against the target
behind a membership oracle and either certifies equivalence (None) or
returns a word on which the two disagree.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from mod2_lstar.core.multiplicity_automaton import MultiplicityAutomaton


class EquivalenceOracle(ABC):
    """Common interface and statistics for equivalence oracles."""

    def __init__(self, ma_oracle, alphabet: List[str], **kwargs):
        """
        Initialize the equivalence oracle.

        Args:
            ma_oracle: Membership oracle over the target
            alphabet: Input alphabet
            **kwargs: Additional oracle-specific parameters
        """
        self.ma_oracle = ma_oracle
        self.alphabet = list(alphabet)

        # Statistics tracking
        self.total_queries = 0
        self.counterexamples_found = 0
        self.total_time = 0.0

    @abstractmethod
    def find_counterexample(self,
                            hypothesis: MultiplicityAutomaton,
                            iteration: int) -> Optional[str]:
        """
        Find a word on which hypothesis and target disagree.

        Args:
            hypothesis: Current hypothesis automaton
            iteration: Current learning iteration number

        Returns:
            Counterexample string or None if no disagreement was found
        """
        pass

    def _check_alphabet(self, hypothesis: MultiplicityAutomaton):
        if hypothesis.alphabet != self.alphabet:
            raise ValueError(
                f"Hypothesis alphabet {hypothesis.alphabet} does not match target alphabet {self.alphabet}"
            )

    def get_statistics(self) -> Dict[str, Any]:
        return {
            'type': self.__class__.__name__,
            'total_queries': self.total_queries,
            'counterexamples_found': self.counterexamples_found,
            'total_time': self.total_time,
            'avg_time_per_query': self.total_time / max(1, self.total_queries)
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(alphabet_size={len(self.alphabet)})"

"""
Teacher for mod-2 multiplicity automaton learning.

Holds the target behind a membership oracle and delegates equivalence
queries to a configurable equivalence oracle. The learner never touches
the target directly.
"""

import time
from typing import Dict, List, Optional

import numpy as np

from mod2_lstar.core.multiplicity_automaton import MultiplicityAutomaton
from mod2_lstar.counterexample.basis_oracle import BasisEquivalenceOracle
from mod2_lstar.counterexample.random_oracle import RandomSamplingOracle
from .ma_oracle import MAOracle


class Teacher:
    """
    Teacher answering membership and equivalence queries about a target MA.
    """

    def __init__(self, target: MultiplicityAutomaton,
                 oracle_type: str = "basis",
                 oracle_params: Optional[Dict] = None,
                 cache_size: int = 100000):
        """
        Initialize teacher.

        Args:
            target: Target automaton, fixed for the run
            oracle_type: "basis" (exact) or "random" (sampling)
            oracle_params: Oracle-specific parameters
            cache_size: Membership query cache bound
        """
        self.target = target
        self.alphabet = target.alphabet
        self.oracle_type = oracle_type

        self.ma_oracle = MAOracle(target, cache_size=cache_size)
        self.equivalence_oracle = self._create_equivalence_oracle(
            oracle_type, oracle_params or {}
        )

        # Statistics
        self.hypotheses_proposed = 0
        self.counterexamples = []
        self.iteration = 0

    @property
    def target_size(self) -> int:
        return self.target.size

    def membership_queries(self, words: List[str]) -> List[int]:
        """Batch membership queries."""
        return self.ma_oracle.membership_queries(words)

    def classify_word(self, word: str) -> int:
        """Single membership query."""
        return self.ma_oracle.classify_word(word)

    def equivalence_query(self, hypothesis: MultiplicityAutomaton,
                          iteration: Optional[int] = None) -> Optional[str]:
        """
        Equivalence query delegated to the configured oracle.

        Args:
            hypothesis: Learner's proposed automaton
            iteration: Current learning iteration

        Returns:
            Counterexample or None if equivalent
        """
        self.iteration = iteration if iteration is not None else self.iteration + 1
        self.hypotheses_proposed += 1

        start_time = time.time()
        counterexample = self.equivalence_oracle.find_counterexample(hypothesis, self.iteration)

        if counterexample is not None:
            ce_time = time.time() - start_time
            print(f"  Counterexample found: '{counterexample}' "
                  f"(length {len(counterexample)}, time: {ce_time:.2f}s)")
            self.counterexamples.append((counterexample, ce_time))
            return counterexample

        print(f"  No counterexample found (time: {time.time() - start_time:.2f}s)")
        return None

    def get_statistics(self) -> Dict:
        oracle_stats = self.ma_oracle.get_statistics()
        stats = {
            'iterations': self.iteration,
            'oracle_type': self.oracle_type,
            'target_size': self.target_size,
            'hypotheses_proposed': self.hypotheses_proposed,
            'counterexamples': len(self.counterexamples),
            'membership_queries': oracle_stats['total_queries'],
            'evaluations': oracle_stats['evaluations'],
            'equivalence_queries': self.equivalence_oracle.total_queries,
            'oracle_specific': self.equivalence_oracle.get_statistics(),
        }

        if self.counterexamples:
            ce_lengths = [len(ce) for ce, _ in self.counterexamples]
            stats['avg_ce_length'] = float(np.mean(ce_lengths))
            stats['min_ce_length'] = min(ce_lengths)
            stats['max_ce_length'] = max(ce_lengths)

        return stats

    def _create_equivalence_oracle(self, oracle_type: str, params: Dict):
        """
        Factory method for creating equivalence oracles.

        Raises:
            ValueError: If oracle_type is unknown
        """
        oracle_constructors = {
            "basis": BasisEquivalenceOracle,
            "random": RandomSamplingOracle,
        }

        if oracle_type not in oracle_constructors:
            raise ValueError(
                f"Unknown oracle type: {oracle_type}. "
                f"Available types: {list(oracle_constructors.keys())}"
            )

        return oracle_constructors[oracle_type](self.ma_oracle, self.alphabet, **params)

"""
Random-sampling comparison of target and hypothesis.

Used as an alternative (probabilistic) equivalence oracle and as the
conformance recheck run after learning has converged: draw random words
and compare both automata on each. Finding no mismatch is evidence, not
proof, of equivalence.
"""

import time
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from mod2_lstar.core.multiplicity_automaton import MultiplicityAutomaton
from .base_oracle import EquivalenceOracle


def random_word(alphabet: Sequence[str], length: int,
                rng: Optional[np.random.Generator] = None) -> str:
    """Word of the given length with symbols drawn uniformly from alphabet."""
    if rng is None:
        rng = np.random.default_rng()
    if length <= 0:
        return ""
    return "".join(rng.choice(list(alphabet), size=length))


def conformance_check(target: MultiplicityAutomaton,
                      hypothesis: MultiplicityAutomaton,
                      num_samples: int = 20,
                      min_length: int = 1,
                      max_length: int = 100,
                      rng: Optional[np.random.Generator] = None) -> Optional[str]:
    """
    Compare target and hypothesis on random words.

    Args:
        target: Target automaton
        hypothesis: Learned automaton
        num_samples: Number of words to draw
        min_length: Minimum word length
        max_length: Maximum word length (inclusive)
        rng: Random generator (fresh unseeded one if None)

    Returns:
        First word on which the two disagree, or None
    """
    if rng is None:
        rng = np.random.default_rng()
    for _ in range(num_samples):
        length = int(rng.integers(min_length, max_length + 1))
        word = random_word(target.alphabet, length, rng)
        if target.evaluate(word) != hypothesis.evaluate(word):
            return word
    return None


class RandomSamplingOracle(EquivalenceOracle):
    """
    Blackbox equivalence oracle drawing words with uniform length and symbols.

    Only uses membership queries on the target, so it can miss
    disagreements; the learner then converges on an approximation.
    """

    def __init__(self, ma_oracle, alphabet: List[str],
                 num_samples: int = 1000,
                 min_length: int = 0,
                 max_length: int = 30,
                 seed: Optional[int] = None,
                 **kwargs):
        """
        Initialize sampling oracle.

        Args:
            ma_oracle: Membership oracle over the target
            alphabet: Input alphabet
            num_samples: Words drawn per equivalence query
            min_length: Minimum word length
            max_length: Maximum word length (inclusive)
            seed: Seed for the random generator
        """
        super().__init__(ma_oracle, alphabet, **kwargs)
        self.num_samples = num_samples
        self.min_length = min_length
        self.max_length = max_length
        self.rng = np.random.default_rng(seed)

        self.total_samples = 0

    def find_counterexample(self, hypothesis: MultiplicityAutomaton,
                            iteration: int) -> Optional[str]:
        self._check_alphabet(hypothesis)
        start_time = time.time()
        self.total_queries += 1

        for _ in range(self.num_samples):
            length = int(self.rng.integers(self.min_length, self.max_length + 1))
            word = random_word(self.alphabet, length, self.rng)
            self.total_samples += 1

            if hypothesis.evaluate(word) != self.ma_oracle.classify_word(word):
                self.counterexamples_found += 1
                self.total_time += time.time() - start_time
                return word

        self.total_time += time.time() - start_time
        return None

    def get_statistics(self) -> Dict[str, Any]:
        stats = super().get_statistics()
        stats['total_samples'] = self.total_samples
        return stats

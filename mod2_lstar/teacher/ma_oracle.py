"""
Membership oracle over a target multiplicity automaton.

Every learning step issues many overlapping queries (x·y, x·σ·y for all
index pairs), so answers are cached with LRU eviction.
"""

from collections import OrderedDict
from typing import Dict, List

from mod2_lstar.core.multiplicity_automaton import MultiplicityAutomaton


class MAOracle:
    """
    Oracle interface for learning a mod-2 multiplicity automaton.

    Answers membership queries by evaluating the target; the target's
    matrices stay reachable for the basis equivalence oracle.
    """

    def __init__(self, target: MultiplicityAutomaton, cache_size: int = 100000):
        """
        Initialize oracle.

        Args:
            target: Target automaton (fixed for the run)
            cache_size: Maximum cached queries
        """
        self.target = target
        self.alphabet = target.alphabet
        self.char_to_idx = dict(target.char_to_idx)

        self.cache = OrderedDict()
        self.cache_size = cache_size

        # Statistics
        self.query_count = 0
        self.cache_hits = 0
        self.evaluations = 0

    @property
    def size(self) -> int:
        return self.target.size

    def membership_queries(self, words: List[str]) -> List[int]:
        """
        Batch membership queries with caching.

        Args:
            words: Strings over the alphabet

        Returns:
            Bit value of the target on each word
        """
        results = []
        for word in words:
            self.query_count += 1

            if word in self.cache:
                self.cache_hits += 1
                self.cache.move_to_end(word)
                results.append(self.cache[word])
                continue

            value = self.target.evaluate(word)
            self.evaluations += 1
            self._add_to_cache(word, value)
            results.append(value)

        return results

    def classify_word(self, word: str) -> int:
        """Single membership query."""
        return self.membership_queries([word])[0]

    def _add_to_cache(self, word: str, value: int):
        self.cache[word] = value
        if len(self.cache) > self.cache_size:
            self.cache.popitem(last=False)

    def get_statistics(self) -> Dict:
        return {
            'total_queries': self.query_count,
            'cache_hits': self.cache_hits,
            'evaluations': self.evaluations,
            'cache_hit_rate': self.cache_hits / max(1, self.query_count),
            'cache_size': len(self.cache),
            'target_size': self.size,
        }

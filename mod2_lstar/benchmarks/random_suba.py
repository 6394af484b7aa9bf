"""
Random SUBA generation for benchmarking.

Generated automata are valid inputs for the SUBA→UFA conversion. They are
not guaranteed to be strongly unambiguous; the derived mod-2 MA is a
well-defined learning target either way.
"""

import random
from typing import List, Optional

from mod2_lstar.conversion.suba import SUBA


class RandomSUBAGenerator:
    """Generate random SUBAs over an alphabet of configurable size."""

    def __init__(self, alphabet_size: int = 2):
        """
        Initialize generator with specified alphabet size.

        Args:
            alphabet_size: Number of symbols, at most 26 ('a', 'b', ...)
        """
        if not 1 <= alphabet_size <= 26:
            raise ValueError(f"alphabet_size must be between 1 and 26, got {alphabet_size}")
        self.alphabet_size = alphabet_size
        self.alphabet: List[str] = [chr(ord('a') + i) for i in range(alphabet_size)]

    def generate(self, num_states: int,
                 final_ratio: float = 0.3,
                 transitions_per_symbol: int = 1,
                 seed: Optional[int] = None) -> SUBA:
        """
        Generate a random SUBA.

        Args:
            num_states: Number of states Q
            final_ratio: Fraction of states marked final (at least one)
            transitions_per_symbol: Outgoing transitions per state and symbol
            seed: Random seed for reproducibility

        Returns:
            Random SUBA instance
        """
        rng = random.Random(seed)
        states = list(range(1, num_states + 1))

        num_final = max(1, int(num_states * final_ratio))
        final_states = sorted(rng.sample(states, num_final))

        fan_out = max(1, min(transitions_per_symbol, num_states))
        transitions = []
        for state in states:
            for symbol in self.alphabet:
                for target in sorted(rng.sample(states, fan_out)):
                    transitions.append((state, symbol, target))

        self._ensure_reachability(states, transitions, rng)

        return SUBA(num_states, self.alphabet, final_states, transitions)

    def _ensure_reachability(self, states: List[int], transitions: list, rng: random.Random):
        """Give each state unreachable from state 1 an incoming edge from the reachable part."""
        reachable = self._reachable(transitions)
        for state in states:
            if state in reachable:
                continue
            # state is unreachable, so (source, symbol, state) is a new transition
            source = rng.choice(sorted(reachable))
            symbol = rng.choice(self.alphabet)
            transitions.append((source, symbol, state))
            reachable = self._reachable(transitions)

    @staticmethod
    def _reachable(transitions: list) -> set:
        reachable = {1}
        frontier = [1]
        while frontier:
            current = frontier.pop()
            for p_start, _, p_end in transitions:
                if p_start == current and p_end not in reachable:
                    reachable.add(p_end)
                    frontier.append(p_end)
        return reachable

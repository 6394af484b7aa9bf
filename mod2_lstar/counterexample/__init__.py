"""Equivalence oracle implementations for mod-2 MA learning."""

from .base_oracle import EquivalenceOracle
from .basis_oracle import BasisEquivalenceOracle, combined_automaton
from .random_oracle import RandomSamplingOracle, conformance_check, random_word

__all__ = [
    'EquivalenceOracle',
    'BasisEquivalenceOracle',
    'RandomSamplingOracle',
    'combined_automaton',
    'conformance_check',
    'random_word'
]

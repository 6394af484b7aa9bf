"""Core components for mod-2 multiplicity automaton learning."""

from .gf2 import GF2Basis, Singular, Solved, is_linearly_independent, mod2, solve_linear_system
from .multiplicity_automaton import MultiplicityAutomaton
from .hankel_table import HankelTable
from .learner import LearningResult, Mod2MALearner, learn, learn_suba

__all__ = [
    "GF2Basis",
    "Singular",
    "Solved",
    "is_linearly_independent",
    "mod2",
    "solve_linear_system",
    "MultiplicityAutomaton",
    "HankelTable",
    "LearningResult",
    "Mod2MALearner",
    "learn",
    "learn_suba",
]

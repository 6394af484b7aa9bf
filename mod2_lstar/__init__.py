"""
Mod-2 multiplicity automaton learning

Exact learning of functions computed by multiplicity automata over GF(2)
from membership and equivalence queries, together with the conversion of
strongly unambiguous Büchi automata into such targets.
"""

from .core.learner import LearningResult, Mod2MALearner, learn, learn_suba
from .core.multiplicity_automaton import MultiplicityAutomaton
from .conversion.suba import SUBA
from .conversion.ufa import UFA
from .teacher.teacher import Teacher

__version__ = "0.1.0"
__all__ = [
    "LearningResult",
    "Mod2MALearner",
    "MultiplicityAutomaton",
    "SUBA",
    "Teacher",
    "UFA",
    "learn",
    "learn_suba",
]

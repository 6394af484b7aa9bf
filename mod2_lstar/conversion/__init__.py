"""Converters from SUBA to UFA to mod-2 multiplicity automaton."""

from .suba import END_MARKER, SUBA, suba_to_ufa, triple_index
from .ufa import UFA, ufa_to_mod2_ma

__all__ = ["END_MARKER", "SUBA", "UFA", "suba_to_ufa", "triple_index", "ufa_to_mod2_ma"]

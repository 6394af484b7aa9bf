"""Input readers and text output for automaton descriptions."""

from .display import format_index_sets, format_result
from .readers import (
    parse_multiplicity_automaton,
    parse_suba,
    read_multiplicity_automaton,
    read_suba,
)

__all__ = [
    "format_index_sets",
    "format_result",
    "parse_multiplicity_automaton",
    "parse_suba",
    "read_multiplicity_automaton",
    "read_suba",
]

"""
Strongly unambiguous Büchi automaton (SUBA) and its UFA construction.

Following Bousquet and Löding, a SUBA (Q, Σ, Δ, F) with initial state 1 is
turned into an unambiguous finite automaton (Q', Σ ∪ {$}, Δ', F') where
Q' = Q ∪ (Q x Q x {0,1}) and Δ' contains
- every transition of Δ,
- (q, $, (q,q,0)) for every q ∈ Q,
- ((q,p,i), a, (q,p',i')) for every (p,a,p') ∈ Δ, with i' = 1 if p' ∈ F else i,
and F' = {(q,q,1) : q ∈ Q}.

A word u$v is accepted iff v leads from the state reached by u back to
itself through a final state, i.e. the UFA recognizes u·v^ω.
"""

from typing import Iterable, List, Set, Tuple

from mod2_lstar.errors import InvalidInputError
from .ufa import UFA


END_MARKER = "$"

Transition = Tuple[int, str, int]


def triple_index(q: int, p: int, i: int, num_states: int) -> int:
    """
    1-based UFA state index of the triple (q, p, i).

    The first num_states indices are the SUBA states; the triples fill
    num_states+1 .. num_states + 2·num_states² without collisions.
    """
    return 2 * num_states * q + 2 * p - num_states - 1 + i


class SUBA:
    """SUBA with states 1..Q, validated on construction."""

    def __init__(self,
                 num_states: int,
                 alphabet: Iterable[str],
                 final_states: Iterable[int],
                 transitions: Iterable[Transition]):
        """
        Initialize and validate SUBA.

        Args:
            num_states: Number of states Q (states are 1..Q, state 1 is initial)
            alphabet: Alphabet symbols, single characters other than '$'
            final_states: Final states F, 1-based, no duplicates
            transitions: Triples (from-state, symbol, to-state)

        Raises:
            InvalidInputError: If any validation check fails
        """
        self.num_states = num_states
        self.alphabet: List[str] = list(alphabet)
        final_list = list(final_states)
        self.transitions: List[Transition] = [tuple(t) for t in transitions]

        self._validate_states()
        self._validate_alphabet()
        self.final_states: Set[int] = self._validate_final_states(final_list)
        self._validate_transitions()

    def _validate_states(self):
        if not isinstance(self.num_states, int) or self.num_states < 1:
            raise InvalidInputError(f"number of states must be at least 1, got {self.num_states}")

    def _validate_alphabet(self):
        if not self.alphabet:
            raise InvalidInputError("alphabet must contain at least one character")
        for letter in self.alphabet:
            if not isinstance(letter, str) or len(letter) != 1 or letter == END_MARKER:
                raise InvalidInputError(f"invalid character in the alphabet: '{letter}'")
        if len(set(self.alphabet)) != len(self.alphabet):
            raise InvalidInputError("duplicate character in the alphabet")

    def _validate_final_states(self, final_list: List[int]) -> Set[int]:
        finals = set()
        for state in final_list:
            if not 1 <= state <= self.num_states or state in finals:
                raise InvalidInputError(f"invalid or duplicate final state {state}")
            finals.add(state)
        return finals

    def _validate_transitions(self):
        max_transitions = len(self.alphabet) * self.num_states * self.num_states
        if not 1 <= len(self.transitions) <= max_transitions:
            raise InvalidInputError(
                f"invalid number of transitions {len(self.transitions)} "
                f"(expected between 1 and {max_transitions})"
            )
        for p_start, letter, p_end in self.transitions:
            if letter not in self.alphabet:
                raise InvalidInputError(f"invalid transition ({p_start}, {letter}, {p_end}): unknown symbol")
            if not (1 <= p_start <= self.num_states and 1 <= p_end <= self.num_states):
                raise InvalidInputError(f"invalid transition ({p_start}, {letter}, {p_end}): state out of range")

    @property
    def ufa_size(self) -> int:
        """Q' = Q + 2·Q²."""
        return self.num_states + 2 * self.num_states * self.num_states

    def to_ufa(self) -> UFA:
        """Build the UFA over Σ ∪ {$} recognizing the derived language."""
        Q = self.num_states
        transitions = set()

        for p_start, letter, p_end in self.transitions:
            transitions.add((p_start, letter, p_end))

            for q in range(1, Q + 1):
                if p_end in self.final_states:
                    # ((q,p,0),a,(q,p',1)) and ((q,p,1),a,(q,p',1))
                    transitions.add((triple_index(q, p_start, 0, Q), letter, triple_index(q, p_end, 1, Q)))
                    transitions.add((triple_index(q, p_start, 1, Q), letter, triple_index(q, p_end, 1, Q)))
                else:
                    # ((q,p,i),a,(q,p',i))
                    transitions.add((triple_index(q, p_start, 0, Q), letter, triple_index(q, p_end, 0, Q)))
                    transitions.add((triple_index(q, p_start, 1, Q), letter, triple_index(q, p_end, 1, Q)))

        final_states = set()
        for q in range(1, Q + 1):
            transitions.add((q, END_MARKER, triple_index(q, q, 0, Q)))
            final_states.add(triple_index(q, q, 1, Q))

        return UFA(
            num_states=self.ufa_size,
            alphabet=self.alphabet + [END_MARKER],
            transitions=transitions,
            final_states=final_states
        )

    def __str__(self) -> str:
        return (f"SUBA(|Q|={self.num_states}, |Σ|={len(self.alphabet)}, "
                f"|F|={len(self.final_states)}, |Δ|={len(self.transitions)})")


def suba_to_ufa(suba: SUBA) -> UFA:
    return suba.to_ufa()

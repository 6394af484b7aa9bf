"""
Readers for automaton description files.

Both formats are line oriented and order sensitive. Values on a line are
separated by whitespace. Lines starting with '//' are comments and, like
blank lines, may appear anywhere a value line is expected.

SUBA description:
    <number of states Q>
    <alphabet size>
    <alphabet symbols>
    <final states>
    <number of transitions>
    <from-state> <symbol> <to-state>     (one line per transition)

Multiplicity automaton description:
    <alphabet size>
    <alphabet symbols>
    <size r>
    <γ: r integers>
    <μ_a: r lines of r integers>         (one grid per symbol, in alphabet order)
"""

from pathlib import Path
from typing import Iterator, List, Tuple, Union

from mod2_lstar.conversion.suba import END_MARKER, SUBA
from mod2_lstar.core.multiplicity_automaton import MultiplicityAutomaton
from mod2_lstar.errors import InvalidInputError


COMMENT_MARKER = "//"


class _LineReader:
    """Iterates over value lines, skipping comments and blank lines."""

    def __init__(self, text: str):
        self._lines: Iterator[Tuple[int, str]] = iter(enumerate(text.splitlines(), start=1))
        self.line_number = 0

    def next_tokens(self, what: str) -> List[str]:
        for number, line in self._lines:
            self.line_number = number
            stripped = line.strip()
            if not stripped or stripped.startswith(COMMENT_MARKER):
                continue
            return stripped.split()
        raise InvalidInputError(f"unexpected end of input while reading {what}")

    def next_int(self, what: str) -> int:
        tokens = self.next_tokens(what)
        if len(tokens) != 1:
            raise InvalidInputError(f"expected a single integer for {what}", self.line_number)
        return self._to_int(tokens[0], what)

    def next_ints(self, what: str, count: int) -> List[int]:
        tokens = self.next_tokens(what)
        if len(tokens) > count:
            raise InvalidInputError(f"{what} exceeds the specified size {count}", self.line_number)
        if len(tokens) < count:
            raise InvalidInputError(f"{what} has fewer than {count} values", self.line_number)
        return [self._to_int(token, what) for token in tokens]

    def next_symbols(self, count: int) -> List[str]:
        tokens = self.next_tokens("the alphabet")
        if len(tokens) > count:
            raise InvalidInputError("alphabet size exceeds the specified size", self.line_number)
        if len(tokens) < count:
            raise InvalidInputError("alphabet has fewer characters than the specified size", self.line_number)
        for letter in tokens:
            if len(letter) != 1:
                raise InvalidInputError(f"invalid character in the alphabet: '{letter}'", self.line_number)
        if len(set(tokens)) != len(tokens):
            raise InvalidInputError("duplicate character in the alphabet", self.line_number)
        return tokens

    def ensure_exhausted(self, message: str):
        for number, line in self._lines:
            stripped = line.strip()
            if stripped and not stripped.startswith(COMMENT_MARKER):
                raise InvalidInputError(message, number)

    def _to_int(self, token: str, what: str) -> int:
        try:
            return int(token)
        except ValueError:
            raise InvalidInputError(f"'{token}' is not an integer in {what}", self.line_number) from None


def parse_suba(text: str) -> SUBA:
    """
    Parse a SUBA description.

    Raises:
        InvalidInputError: On any malformed count, symbol, state or line
    """
    reader = _LineReader(text)

    num_states = reader.next_int("the number of states")
    if num_states < 1:
        raise InvalidInputError(f"number of states must be at least 1, got {num_states}", reader.line_number)

    alphabet_size = reader.next_int("the alphabet size")
    if alphabet_size < 1:
        raise InvalidInputError(f"alphabet size must be at least 1, got {alphabet_size}", reader.line_number)
    alphabet = reader.next_symbols(alphabet_size)
    if END_MARKER in alphabet:
        raise InvalidInputError(f"invalid character in the alphabet: '{END_MARKER}'", reader.line_number)

    final_tokens = reader.next_tokens("the final states")
    final_states = [reader._to_int(token, "the final states") for token in final_tokens]
    seen = set()
    for state in final_states:
        if not 1 <= state <= num_states or state in seen:
            raise InvalidInputError(f"invalid or duplicate final state {state}", reader.line_number)
        seen.add(state)

    num_transitions = reader.next_int("the number of transitions")
    max_transitions = alphabet_size * num_states * num_states
    if not 1 <= num_transitions <= max_transitions:
        raise InvalidInputError(
            f"invalid number of transitions {num_transitions} (expected between 1 and {max_transitions})",
            reader.line_number
        )

    transitions = []
    for _ in range(num_transitions):
        tokens = reader.next_tokens("a transition")
        if len(tokens) != 3 or len(tokens[1]) != 1:
            raise InvalidInputError("invalid transition, expected '<state> <symbol> <state>'", reader.line_number)
        p_start = reader._to_int(tokens[0], "a transition")
        p_end = reader._to_int(tokens[2], "a transition")
        if tokens[1] not in alphabet:
            raise InvalidInputError(f"invalid transition: unknown symbol '{tokens[1]}'", reader.line_number)
        if not (1 <= p_start <= num_states and 1 <= p_end <= num_states):
            raise InvalidInputError("invalid transition: state out of range", reader.line_number)
        transitions.append((p_start, tokens[1], p_end))

    reader.ensure_exhausted("more transitions inputted than specified")

    return SUBA(num_states, alphabet, final_states, transitions)


def parse_multiplicity_automaton(text: str) -> MultiplicityAutomaton:
    """
    Parse a multiplicity automaton description.

    Raises:
        InvalidInputError: On any malformed count, symbol or line
    """
    reader = _LineReader(text)

    alphabet_size = reader.next_int("the alphabet size")
    if alphabet_size < 1:
        raise InvalidInputError(f"alphabet size must be at least 1, got {alphabet_size}", reader.line_number)
    alphabet = reader.next_symbols(alphabet_size)

    r = reader.next_int("the size of the target function")
    if r < 1:
        raise InvalidInputError(f"size of the target function must be at least 1, got {r}", reader.line_number)

    gamma = reader.next_ints("γ", r)

    mu = []
    for symbol in alphabet:
        matrix = [reader.next_ints(f"μ row for '{symbol}'", r) for _ in range(r)]
        mu.append(matrix)

    reader.ensure_exhausted("μ size exceeds the specified size")

    return MultiplicityAutomaton(alphabet, gamma, mu)


def _read_text(path: Union[str, Path]) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError:
        raise InvalidInputError("file is not valid UTF-8 text") from None


def read_suba(path: Union[str, Path]) -> SUBA:
    return parse_suba(_read_text(path))


def read_multiplicity_automaton(path: Union[str, Path]) -> MultiplicityAutomaton:
    return parse_multiplicity_automaton(_read_text(path))

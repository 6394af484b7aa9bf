"""
Tests for the SUBA and multiplicity automaton description readers
"""

import pytest

from mod2_lstar.errors import InvalidInputError
from mod2_lstar.formats.readers import (
    parse_multiplicity_automaton,
    parse_suba,
    read_multiplicity_automaton,
    read_suba,
)


def suba_text(*lines):
    return "\n".join(lines) + "\n"


class TestParseSUBA:
    def test_example(self, example_suba_text, example_suba):
        suba = parse_suba(example_suba_text)
        assert suba.num_states == example_suba.num_states
        assert suba.alphabet == ["a"]
        assert suba.final_states == {2}
        assert suba.transitions == [(1, "a", 2), (2, "a", 2)]

    def test_without_comments(self):
        suba = parse_suba(suba_text("2", "2", "a b", "1 2", "3", "1 a 2", "2 b 1", "2 a 2"))
        assert suba.alphabet == ["a", "b"]
        assert suba.final_states == {1, 2}
        assert len(suba.transitions) == 3

    def test_trailing_comments_and_blank_lines(self):
        text = suba_text("1", "1", "a", "1", "1", "1 a 1", "", "// end", "   ")
        assert parse_suba(text).num_states == 1

    def test_windows_line_endings(self):
        text = "1\r\n1\r\na\r\n1\r\n1\r\n1 a 1\r\n"
        assert parse_suba(text).transitions == [(1, "a", 1)]

    def test_alphabet_size_exceeded(self):
        with pytest.raises(InvalidInputError, match="alphabet size exceeds the specified size"):
            parse_suba(suba_text("1", "1", "a b", "1", "1", "1 a 1"))

    def test_alphabet_too_short(self):
        with pytest.raises(InvalidInputError, match="fewer characters"):
            parse_suba(suba_text("1", "2", "a", "1", "1", "1 a 1"))

    def test_duplicate_alphabet_symbol(self):
        with pytest.raises(InvalidInputError, match="duplicate character"):
            parse_suba(suba_text("1", "2", "a a", "1", "1", "1 a 1"))

    def test_end_marker_in_alphabet(self):
        with pytest.raises(InvalidInputError, match="invalid character"):
            parse_suba(suba_text("1", "1", "$", "1", "1", "1 $ 1"))

    def test_multi_character_symbol(self):
        with pytest.raises(InvalidInputError, match="invalid character"):
            parse_suba(suba_text("1", "1", "ab", "1", "1", "1 ab 1"))

    def test_duplicate_final_state(self):
        with pytest.raises(InvalidInputError, match="invalid or duplicate final state"):
            parse_suba(suba_text("2", "1", "a", "2 2", "1", "1 a 2"))

    def test_final_state_out_of_range(self):
        with pytest.raises(InvalidInputError, match="invalid or duplicate final state"):
            parse_suba(suba_text("2", "1", "a", "3", "1", "1 a 2"))

    @pytest.mark.parametrize("count", ["0", "5", "-1"])
    def test_invalid_transition_count(self, count):
        # max is |Σ|·Q² = 4
        with pytest.raises(InvalidInputError, match="invalid number of transitions"):
            parse_suba(suba_text("2", "1", "a", "2", count, "1 a 2"))

    def test_more_transitions_than_specified(self):
        with pytest.raises(InvalidInputError, match="more transitions inputted than specified"):
            parse_suba(suba_text("2", "1", "a", "2", "1", "1 a 2", "2 a 2"))

    def test_fewer_transitions_than_specified(self):
        with pytest.raises(InvalidInputError, match="unexpected end of input"):
            parse_suba(suba_text("2", "1", "a", "2", "2", "1 a 2"))

    def test_transition_unknown_symbol(self):
        with pytest.raises(InvalidInputError, match="unknown symbol"):
            parse_suba(suba_text("2", "1", "a", "2", "1", "1 b 2"))

    def test_transition_state_out_of_range(self):
        with pytest.raises(InvalidInputError, match="state out of range"):
            parse_suba(suba_text("2", "1", "a", "2", "1", "1 a 3"))

    def test_malformed_transition(self):
        with pytest.raises(InvalidInputError, match="invalid transition"):
            parse_suba(suba_text("2", "1", "a", "2", "1", "1 a"))

    def test_non_integer(self):
        with pytest.raises(InvalidInputError, match="not an integer"):
            parse_suba(suba_text("two", "1", "a", "2", "1", "1 a 2"))

    def test_zero_states(self):
        with pytest.raises(InvalidInputError):
            parse_suba(suba_text("0", "1", "a", "1", "1", "1 a 1"))

    def test_empty_input(self):
        with pytest.raises(InvalidInputError, match="unexpected end of input"):
            parse_suba("// nothing here\n")

    def test_line_number_reported(self):
        with pytest.raises(InvalidInputError) as excinfo:
            parse_suba(suba_text("// header", "2", "1", "a", "2 2", "1", "1 a 2"))
        assert excinfo.value.line_number == 5
        assert "(line 5)" in str(excinfo.value)


class TestParseMultiplicityAutomaton:
    def test_parity(self, parity_ma_text, parity_ma):
        assert parse_multiplicity_automaton(parity_ma_text) == parity_ma

    def test_values_normalized(self):
        ma = parse_multiplicity_automaton("1\na\n1\n3\n-1\n")
        assert ma.gamma.tolist() == [1]
        assert ma.mu[0].tolist() == [[1]]

    def test_trailing_line(self, parity_ma_text):
        with pytest.raises(InvalidInputError, match="μ size exceeds the specified size"):
            parse_multiplicity_automaton(parity_ma_text + "\n1 1\n")

    def test_row_too_long(self):
        with pytest.raises(InvalidInputError, match="exceeds the specified size"):
            parse_multiplicity_automaton("1\na\n2\n1 0\n1 0 1\n0 1\n")

    def test_row_too_short(self):
        with pytest.raises(InvalidInputError, match="fewer than 2 values"):
            parse_multiplicity_automaton("1\na\n2\n1 0\n1\n0 1\n")

    def test_gamma_too_long(self):
        with pytest.raises(InvalidInputError, match="exceeds the specified size"):
            parse_multiplicity_automaton("1\na\n1\n1 0\n1\n")

    def test_missing_matrix(self):
        with pytest.raises(InvalidInputError, match="unexpected end of input"):
            parse_multiplicity_automaton("2\na b\n1\n1\n1\n")

    def test_zero_size(self):
        with pytest.raises(InvalidInputError):
            parse_multiplicity_automaton("1\na\n0\n")

    def test_alphabet_size_exceeded(self):
        with pytest.raises(InvalidInputError, match="alphabet size exceeds"):
            parse_multiplicity_automaton("1\na b\n1\n1\n1\n1\n")


class TestReadFiles:
    def test_read_suba(self, tmp_path, example_suba_text):
        path = tmp_path / "SUBA_input1.txt"
        path.write_text(example_suba_text, encoding="utf-8")
        suba = read_suba(path)
        assert suba.final_states == {2}

    def test_read_multiplicity_automaton(self, tmp_path, parity_ma_text, parity_ma):
        path = tmp_path / "input1.txt"
        path.write_text(parity_ma_text, encoding="utf-8")
        assert read_multiplicity_automaton(str(path)) == parity_ma

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_suba(tmp_path / "missing.txt")

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"1\n\xff\xfe\n")
        with pytest.raises(InvalidInputError, match="not valid UTF-8"):
            read_multiplicity_automaton(path)
        with pytest.raises(InvalidInputError, match="not valid UTF-8"):
            read_suba(path)

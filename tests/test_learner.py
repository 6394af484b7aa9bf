"""
Tests for the mod-2 MA learning loop
"""

import itertools

import numpy as np
import pytest

from mod2_lstar.config import LearnerConfig, OracleType
from mod2_lstar.core.learner import LearningResult, Mod2MALearner, learn, learn_suba
from mod2_lstar.core.multiplicity_automaton import MultiplicityAutomaton
from mod2_lstar.counterexample.basis_oracle import BasisEquivalenceOracle
from mod2_lstar.errors import LearningFailed, VerificationFailed
from mod2_lstar.teacher.ma_oracle import MAOracle
from mod2_lstar.teacher.teacher import Teacher


def words_up_to(alphabet, max_length):
    for length in range(max_length + 1):
        for letters in itertools.product(alphabet, repeat=length):
            yield "".join(letters)


def assert_equivalent(target, hypothesis):
    oracle = BasisEquivalenceOracle(MAOracle(target), target.alphabet)
    assert oracle.find_counterexample(hypothesis, 0) is None


class UndersizedTeacher(Teacher):
    """Teacher that reports a target size of 1."""

    @property
    def target_size(self) -> int:
        return 1


class AgreeingCounterexampleTeacher(Teacher):
    """Teacher whose equivalence query returns a word the hypothesis gets right."""

    def equivalence_query(self, hypothesis, iteration=None):
        return "b"


class TestMod2MALearner:
    def test_trivial(self, trivial_ma):
        learner = Mod2MALearner(Teacher(trivial_ma))
        hypothesis = learner.run()
        assert hypothesis.size == 1
        assert learner.iterations == 1
        assert learner.counterexamples == []
        assert hypothesis == trivial_ma

    def test_parity(self, parity_ma):
        learner = Mod2MALearner(Teacher(parity_ma))
        hypothesis = learner.run()
        assert hypothesis.size == 2
        assert learner.counterexamples == ["aa"]
        assert learner.iterations == 2
        assert learner.table.X == ["", "a"]
        assert learner.table.Y == ["", "a"]
        assert hypothesis == parity_ma

    def test_zero_target(self, zero_ma):
        learner = Mod2MALearner(Teacher(zero_ma))
        hypothesis = learner.run()
        assert hypothesis.size == 1
        assert hypothesis.gamma.tolist() == [0]
        assert learner.counterexamples == []

    def test_bootstrap_on_empty_word_zero(self, nonempty_ma):
        learner = Mod2MALearner(Teacher(nonempty_ma))
        hypothesis = learner.run()
        assert learner.counterexamples == ["a"]
        assert learner.table.X == ["", "a"]
        assert hypothesis == nonempty_ma

    def test_convergence_bound(self, random_ma):
        rng = np.random.default_rng(9)
        for size in (1, 2, 3, 4):
            for _ in range(5):
                target = random_ma(rng, ["a", "b"], size)
                learner = Mod2MALearner(Teacher(target))
                hypothesis = learner.run()
                assert hypothesis.size <= size
                assert learner.iterations <= size
                assert len(learner.table.X) == len(learner.table.Y)
                assert learner.table.X[0] == learner.table.Y[0] == ""
                assert_equivalent(target, hypothesis)

    def test_size_exceeded(self, parity_ma):
        learner = Mod2MALearner(UndersizedTeacher(parity_ma))
        with pytest.raises(LearningFailed) as excinfo:
            learner.run()
        assert excinfo.value.reason == LearningFailed.SIZE_EXCEEDED
        assert excinfo.value.counterexample == "aa"
        assert str(excinfo.value).startswith("Algorithm failed: ")

    def test_no_decomposition(self, parity_ma):
        learner = Mod2MALearner(AgreeingCounterexampleTeacher(parity_ma))
        with pytest.raises(LearningFailed) as excinfo:
            learner.run()
        assert excinfo.value.reason == LearningFailed.NO_DECOMPOSITION
        assert excinfo.value.counterexample == "b"

    def test_progress_output(self, parity_ma, capsys):
        Mod2MALearner(Teacher(parity_ma)).run()
        out = capsys.readouterr().out
        assert "Iteration 1: constructed hypothesis of size 1" in out
        assert "Iteration 2: constructed hypothesis of size 2" in out
        assert "Exact mod-2-MA learned in 2 iterations" in out
        assert "X: " not in out

    def test_verbose_output(self, parity_ma, capsys):
        Mod2MALearner(Teacher(parity_ma), verbose=True).run()
        out = capsys.readouterr().out
        assert "Results after individual queries" in out
        assert "l = 1\nX: ε\nY: ε" in out
        assert "l = 2\nX: ε a\nY: ε a" in out

    def test_statistics(self, parity_ma, capsys):
        learner = Mod2MALearner(Teacher(parity_ma))
        learner.run()
        stats = learner.get_statistics()
        assert stats['iterations'] == 2
        assert stats['final_size'] == 2
        assert stats['target_size'] == 2
        assert stats['counterexamples'] == 1
        assert stats['counterexample_lengths'] == [2]
        assert stats['table_stats']['singular_rows'] == 0
        assert set(stats['time_breakdown']) == {'hypothesis', 'equivalence', 'other'}

        learner.print_summary()
        assert "Mod-2-MA Learning Summary" in capsys.readouterr().out


class TestLearn:
    def test_result(self, parity_ma):
        result = learn(parity_ma, LearnerConfig(seed=0))
        assert isinstance(result, LearningResult)
        assert result.size == 2
        assert result.X == ["", "a"]
        assert result.Y == ["", "a"]
        assert result.hypothesis == parity_ma
        assert result.statistics['teacher']['equivalence_queries'] == 2

    def test_trivial_passes_recheck(self, trivial_ma):
        result = learn(trivial_ma)
        assert result.size == 1

    def test_verification_failed(self, nonempty_ma):
        # A sampling oracle with no samples accepts the zero hypothesis
        config = LearnerConfig(oracle_type=OracleType.RANDOM, random_samples=0, seed=0)
        with pytest.raises(VerificationFailed) as excinfo:
            learn(nonempty_ma, config)
        assert excinfo.value.target_value == 1
        assert excinfo.value.hypothesis_value == 0
        assert len(excinfo.value.word) >= 1

    def test_random_oracle(self, parity_ma):
        config = LearnerConfig(oracle_type=OracleType.RANDOM, random_samples=500,
                               random_max_length=10, seed=4)
        result = learn(parity_ma, config)
        assert result.hypothesis == parity_ma


class TestLearnSUBA:
    def test_example(self, example_suba):
        result = learn_suba(example_suba, LearnerConfig(seed=1))
        target = example_suba.to_ufa().to_multiplicity_automaton()

        assert result.size <= target.size
        assert_equivalent(target, result.hypothesis)
        for word in words_up_to(["a", "$"], 5):
            assert result.hypothesis.evaluate(word) == target.evaluate(word)

    @pytest.mark.parametrize("word, expected", [
        ("", 0),
        ("$", 0),
        ("a$", 0),
        ("a$a", 1),
        ("aaa$aa", 1),
        ("$aaa", 0),
    ])
    def test_example_values(self, example_suba, word, expected):
        result = learn_suba(example_suba, LearnerConfig(seed=2))
        assert result.hypothesis.evaluate(word) == expected

    def test_two_letter_suba(self):
        from mod2_lstar.conversion.suba import SUBA
        suba = SUBA(2, ["a", "b"], [2], [(1, "a", 2), (2, "b", 1), (2, "a", 2)])
        result = learn_suba(suba)
        target = suba.to_ufa().to_multiplicity_automaton()
        assert result.hypothesis.alphabet == ["a", "b", "$"]
        assert_equivalent(target, result.hypothesis)

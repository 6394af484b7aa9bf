"""
Exact learning of mod-2 multiplicity automata from queries.

Follows Beimel, Bergadano, Bshouty, Kushilevitz and Varricchio (2000),
in Angluin's exact learning model: build a hypothesis from the index sets
X and Y, ask an equivalence query, decompose the counterexample into
(w, σ, y), extend X by w and Y by σ·y, and repeat. Each refinement grows
the hypothesis by one state, so a target of size r is learned within r
iterations or the run fails.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from mod2_lstar.config import LearnerConfig
from mod2_lstar.counterexample.random_oracle import conformance_check
from mod2_lstar.errors import LearningFailed, VerificationFailed
from mod2_lstar.formats.display import format_index_sets
from mod2_lstar.teacher.teacher import Teacher
from .hankel_table import HankelTable
from .multiplicity_automaton import MultiplicityAutomaton


@dataclass
class LearningResult:
    """Learned automaton together with the index sets that produced it."""
    hypothesis: MultiplicityAutomaton
    X: List[str]
    Y: List[str]
    statistics: Dict[str, Any] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return self.hypothesis.size


class Mod2MALearner:
    """Learning loop for mod-2 multiplicity automata."""

    def __init__(self, teacher, verbose: bool = False):
        """
        Initialize learner.

        Args:
            teacher: Oracle providing membership/equivalence queries
            verbose: Print X and Y every iteration
        """
        self.teacher = teacher
        self.alphabet = teacher.alphabet
        self.verbose = verbose
        self.start_time = time.time()

        self.table = HankelTable(self.alphabet, teacher)
        self.hypothesis: Optional[MultiplicityAutomaton] = None

        # Statistics
        self.iterations = 0
        self.counterexamples: List[str] = []
        self.hypothesis_times: List[float] = []
        self.equivalence_times: List[float] = []

    def run(self) -> MultiplicityAutomaton:
        """
        Execute the learning loop.

        Returns:
            Hypothesis equivalent to the target

        Raises:
            LearningFailed: If a counterexample cannot be decomposed or the
                hypothesis would outgrow the target
        """
        self.start_time = time.time()
        target_size = self.teacher.target_size

        if self.teacher.classify_word("") == 0:
            self._bootstrap()

        if self.verbose:
            print("Results after individual queries")
            print("--------------------------------")

        while True:
            self.iterations += 1
            if self.verbose:
                print(format_index_sets(self.table.X, self.table.Y))

            hypothesis = self._build_hypothesis()
            print(f"Iteration {self.iterations}: "
                  f"constructed hypothesis of size {hypothesis.size}")

            counterexample = self._equivalence_query(hypothesis)
            if counterexample is None:
                print(f"Exact mod-2-MA learned in {self.iterations} iterations")
                self.hypothesis = hypothesis
                return hypothesis

            self.counterexamples.append(counterexample)
            decomposition = self.table.find_decomposition(counterexample, hypothesis)
            if decomposition is None:
                raise LearningFailed(
                    LearningFailed.NO_DECOMPOSITION,
                    f"didn't find a suitable omega, sigma, and y for counterexample '{counterexample}'",
                    counterexample=counterexample,
                    size=self.table.size
                )

            if self.table.size >= target_size:
                raise LearningFailed(
                    LearningFailed.SIZE_EXCEEDED,
                    f"size of the hypothesis exceeds that of the target function ({target_size})",
                    counterexample=counterexample,
                    size=self.table.size
                )

            w, sigma, y = decomposition
            self.table.extend(w, sigma + y)

    def _bootstrap(self):
        """
        Handle MQ(ε) = 0.

        With X = Y = [ε] the 1 x 1 matrix [0] is singular, so one
        equivalence query is spent on the degenerate hypothesis and its
        counterexample z joins both X and Y, giving [[0, 1], [1, f(zz)]].
        """
        hypothesis = self._build_hypothesis()
        counterexample = self._equivalence_query(hypothesis)
        if counterexample is not None:
            self.counterexamples.append(counterexample)
            self.table.add_counterexample(counterexample)

    def _build_hypothesis(self) -> MultiplicityAutomaton:
        start = time.time()
        hypothesis = self.table.build_hypothesis()
        self.hypothesis_times.append(time.time() - start)
        return hypothesis

    def _equivalence_query(self, hypothesis: MultiplicityAutomaton) -> Optional[str]:
        start = time.time()
        counterexample = self.teacher.equivalence_query(hypothesis, iteration=self.iterations)
        self.equivalence_times.append(time.time() - start)
        return counterexample

    def get_statistics(self) -> Dict[str, Any]:
        total_time = time.time() - self.start_time
        stats = {
            "iterations": self.iterations,
            "total_time": total_time,
            "final_size": self.table.size,
            "target_size": self.teacher.target_size,
            "counterexamples": len(self.counterexamples),
            "counterexample_lengths": [len(ce) for ce in self.counterexamples],
            "avg_ce_length": sum(len(ce) for ce in self.counterexamples) / max(1, len(self.counterexamples)),
            "table_stats": self.table.get_statistics(),
        }

        hypothesis_total = sum(self.hypothesis_times)
        equivalence_total = sum(self.equivalence_times)
        stats["time_breakdown"] = {
            "hypothesis": hypothesis_total,
            "equivalence": equivalence_total,
            "other": total_time - hypothesis_total - equivalence_total
        }
        return stats

    def print_summary(self):
        stats = self.get_statistics()

        print("\n" + "=" * 50)
        print("Mod-2-MA Learning Summary")
        print("=" * 50)

        print(f"Iterations: {stats['iterations']}")
        print(f"Total time: {stats['total_time']:.2f}s")
        print(f"Hypothesis size: {stats['final_size']} (target size: {stats['target_size']})")

        print(f"\nCounterexamples: {stats['counterexamples']}")
        print(f"Average CE length: {stats['avg_ce_length']:.1f}")

        table_stats = stats['table_stats']
        print(f"\nTable statistics:")
        print(f"  |X| = |Y| = {table_stats['rows']}")
        print(f"  Membership queries: {table_stats['membership_queries']}")
        print(f"  Singular rows: {table_stats['singular_rows']}")

        print("=" * 50)


def learn(target: MultiplicityAutomaton, config: Optional[LearnerConfig] = None) -> LearningResult:
    """
    Learn target, then recheck the result on random words.

    Args:
        target: Target automaton
        config: Run configuration (defaults if None)

    Returns:
        LearningResult with the learned automaton

    Raises:
        LearningFailed: On an algorithmic invariant violation
        VerificationFailed: If the recheck finds a mismatch
    """
    config = config or LearnerConfig()
    teacher = Teacher(target,
                      oracle_type=config.oracle_type.value,
                      oracle_params=config.oracle_params(),
                      cache_size=config.cache_size)

    learner = Mod2MALearner(teacher, verbose=config.verbose)
    hypothesis = learner.run()
    learner.print_summary()

    rng = np.random.default_rng(config.recheck_seed())
    mismatch = conformance_check(target, hypothesis,
                                 num_samples=config.recheck_samples,
                                 min_length=config.recheck_min_length,
                                 max_length=config.recheck_max_length,
                                 rng=rng)
    if mismatch is not None:
        raise VerificationFailed(mismatch, target.evaluate(mismatch), hypothesis.evaluate(mismatch))

    statistics = learner.get_statistics()
    statistics["teacher"] = teacher.get_statistics()
    return LearningResult(hypothesis, list(learner.table.X), list(learner.table.Y), statistics)


def learn_suba(suba, config: Optional[LearnerConfig] = None) -> LearningResult:
    """Convert a SUBA to its UFA, reinterpret it as a mod-2 MA and learn it."""
    target = suba.to_ufa().to_multiplicity_automaton()
    return learn(target, config)

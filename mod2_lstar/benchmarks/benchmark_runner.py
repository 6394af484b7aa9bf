"""
Benchmark runner for mod-2 MA learning.

Learns a series of targets, recording query complexity and outcome for
each. Failures are recorded in the metrics instead of being raised, so
one bad target does not abort a suite.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional

from mod2_lstar.config import LearnerConfig
from mod2_lstar.core.learner import learn
from mod2_lstar.core.multiplicity_automaton import MultiplicityAutomaton
from mod2_lstar.errors import LearningFailed, VerificationFailed
from .metrics import BenchmarkResults, LearningMetrics, MetricsCollector
from .random_suba import RandomSUBAGenerator


class BenchmarkRunner:
    """Runs learning benchmarks and collects their metrics."""

    def __init__(self, config: Optional[LearnerConfig] = None,
                 output_dir: str = "benchmark_results"):
        """
        Initialize runner.

        Args:
            config: Learner configuration applied to every run
            output_dir: Directory for saved results
        """
        self.config = config or LearnerConfig()
        self.output_dir = Path(output_dir)
        self.results = BenchmarkResults()

    def run_target(self, name: str, target: MultiplicityAutomaton) -> LearningMetrics:
        """Learn one target and record its metrics under name."""
        print(f"\n{'=' * 60}")
        print(f"Target: {name} (r = {target.size})")
        print(f"{'=' * 60}")

        collector = MetricsCollector()
        collector.start_run(target_size=target.size)

        try:
            result = learn(target, self.config)
        except LearningFailed as e:
            print(f"  Learning failed: {e}")
            collector.end_run(successful=False, failure_reason=e.reason)
        except VerificationFailed as e:
            print(f"  Verification failed: {e}")
            collector.end_run(successful=False, failure_reason="verification_failed")
        else:
            collector.record_from_statistics(result.statistics)
            collector.record_verification(True)
            collector.end_run(successful=True)

        metrics = collector.get_metrics()
        self.results.add_result(name, metrics)
        return metrics

    def run_suba_suite(self, sizes: List[int], count: int = 3,
                       alphabet_size: int = 2,
                       seed: Optional[int] = None) -> BenchmarkResults:
        """
        Learn random SUBA-derived targets.

        Args:
            sizes: SUBA state counts Q to benchmark
            count: Random SUBAs per size
            alphabet_size: Alphabet size (without '$')
            seed: Base seed; run i of size Q uses seed + 1000·Q + i

        Returns:
            Accumulated benchmark results
        """
        generator = RandomSUBAGenerator(alphabet_size)
        for num_states in sizes:
            for i in range(count):
                run_seed = None if seed is None else seed + 1000 * num_states + i
                suba = generator.generate(num_states, seed=run_seed)
                target = suba.to_ufa().to_multiplicity_automaton()
                self.run_target(f"suba_q{num_states}_{i}", target)
        return self.results

    def save_results(self, results: Optional[BenchmarkResults] = None) -> Dict[str, Path]:
        """Write JSON, CSV, the configuration and a plot to output_dir."""
        results = results or self.results
        self.output_dir.mkdir(parents=True, exist_ok=True)

        paths = {
            'json': self.output_dir / "results.json",
            'csv': self.output_dir / "results.csv",
            'config': self.output_dir / "config.json",
            'plot': self.output_dir / "query_complexity.png",
        }
        results.save_to_json(paths['json'])
        results.export_to_csv(paths['csv'])
        with open(paths['config'], 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)
        results.plot_query_complexity(paths['plot'])

        print(f"\nResults saved to {self.output_dir}")
        return paths

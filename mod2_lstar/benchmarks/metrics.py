"""
Metrics collection and storage for benchmarking mod-2 MA learning.

Tracks query complexity, counterexamples and outcome of individual
learning runs, and aggregates them across targets of different sizes.
"""

import json
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns


@dataclass
class LearningMetrics:
    """Metrics collected during a single learning run."""

    # Timing metrics
    total_time: float = 0.0
    equivalence_query_time: float = 0.0
    hypothesis_time: float = 0.0

    # Query counts
    membership_queries: int = 0
    evaluations: int = 0
    equivalence_queries: int = 0
    counterexamples_found: int = 0

    # Counterexample statistics
    counterexample_lengths: List[int] = field(default_factory=list)

    # Automaton sizes
    target_size: int = 0
    hypothesis_size: int = 0

    iterations: int = 0
    singular_rows: int = 0

    # Outcome
    learning_successful: bool = False
    verification_passed: bool = False
    failure_reason: Optional[str] = None

    @property
    def avg_counterexample_length(self) -> float:
        if not self.counterexample_lengths:
            return 0.0
        return sum(self.counterexample_lengths) / len(self.counterexample_lengths)

    @property
    def queries_per_state(self) -> float:
        """Membership queries per state of the learned automaton."""
        if self.hypothesis_size == 0:
            return 0.0
        return self.membership_queries / self.hypothesis_size


class MetricsCollector:
    """Collects metrics during a learning run."""

    def __init__(self):
        self.metrics = LearningMetrics()
        self._start_time = None

    def start_run(self, target_size: int = 0):
        self._start_time = time.time()
        self.metrics = LearningMetrics(target_size=target_size)

    def end_run(self, successful: bool = True, failure_reason: Optional[str] = None):
        if self._start_time:
            self.metrics.total_time = time.time() - self._start_time
        self.metrics.learning_successful = successful
        self.metrics.failure_reason = failure_reason

    def record_verification(self, passed: bool):
        self.metrics.verification_passed = passed

    def record_from_statistics(self, stats: Dict[str, Any]):
        """
        Copy the statistics reported by a learner (and its teacher).

        Args:
            stats: Output of Mod2MALearner.get_statistics(), optionally with
                the teacher's statistics under 'teacher'
        """
        self.metrics.iterations = stats.get('iterations', 0)
        self.metrics.hypothesis_size = stats.get('final_size', 0)
        self.metrics.target_size = stats.get('target_size', self.metrics.target_size)

        breakdown = stats.get('time_breakdown', {})
        self.metrics.hypothesis_time = breakdown.get('hypothesis', 0.0)
        self.metrics.equivalence_query_time = breakdown.get('equivalence', 0.0)

        table_stats = stats.get('table_stats', {})
        self.metrics.singular_rows = table_stats.get('singular_rows', 0)

        for length in stats.get('counterexample_lengths', []):
            self.metrics.counterexamples_found += 1
            self.metrics.counterexample_lengths.append(length)

        teacher_stats = stats.get('teacher', {})
        self.metrics.membership_queries = teacher_stats.get(
            'membership_queries', table_stats.get('membership_queries', 0)
        )
        self.metrics.evaluations = teacher_stats.get('evaluations', 0)
        self.metrics.equivalence_queries = teacher_stats.get('equivalence_queries', 0)

    def get_metrics(self) -> LearningMetrics:
        return self.metrics


@dataclass
class BenchmarkResults:
    """Stores and analyzes results from multiple learning runs."""

    results: Dict[str, List[LearningMetrics]] = field(default_factory=dict)
    # Structure: {target_name: [metrics1, metrics2, ...]}

    def add_result(self, target_name: str, metrics: LearningMetrics):
        self.results.setdefault(target_name, []).append(metrics)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert results to a pandas DataFrame for analysis."""
        data = []
        for target_name, metrics_list in self.results.items():
            for i, metrics in enumerate(metrics_list):
                data.append({
                    'target': target_name,
                    'run': i,
                    'target_size': metrics.target_size,
                    'hypothesis_size': metrics.hypothesis_size,
                    'total_time': metrics.total_time,
                    'membership_queries': metrics.membership_queries,
                    'evaluations': metrics.evaluations,
                    'equivalence_queries': metrics.equivalence_queries,
                    'counterexamples': metrics.counterexamples_found,
                    'avg_counterexample_length': metrics.avg_counterexample_length,
                    'queries_per_state': metrics.queries_per_state,
                    'iterations': metrics.iterations,
                    'singular_rows': metrics.singular_rows,
                    'learning_successful': metrics.learning_successful,
                    'verification_passed': metrics.verification_passed,
                    'failure_reason': metrics.failure_reason,
                })
        return pd.DataFrame(data)

    def summary(self) -> pd.DataFrame:
        """Mean complexity figures grouped by target size."""
        df = self.to_dataframe()
        if df.empty:
            return df
        return df.groupby('target_size').agg({
            'hypothesis_size': 'mean',
            'membership_queries': 'mean',
            'equivalence_queries': 'mean',
            'total_time': 'mean',
            'learning_successful': 'mean',
        }).round(3)

    def plot_query_complexity(self, save_path: Optional[Path] = None):
        """Plot membership queries and learned size against target size."""
        df = self.to_dataframe()

        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

        sns.scatterplot(data=df, x='target_size', y='membership_queries',
                        hue='learning_successful', s=80, ax=ax1)
        ax1.set_xlabel('Target Size (r)')
        ax1.set_ylabel('Membership Queries')
        ax1.set_title('Query Complexity by Target Size')

        sns.scatterplot(data=df, x='target_size', y='hypothesis_size',
                        hue='learning_successful', s=80, ax=ax2)
        ax2.set_xlabel('Target Size (r)')
        ax2.set_ylabel('Learned Size (l)')
        ax2.set_title('Learned Size vs Target Size')

        plt.tight_layout()
        if save_path:
            plt.savefig(save_path)
        plt.close(fig)

    def export_to_csv(self, path: Path):
        self.to_dataframe().to_csv(path, index=False)

    def save_to_json(self, path: Path):
        """Save raw results to JSON file."""
        serializable_results = {
            target_name: [asdict(m) for m in metrics_list]
            for target_name, metrics_list in self.results.items()
        }
        with open(path, 'w') as f:
            json.dump(serializable_results, f, indent=2)

    def print_summary(self):
        print("\n" + "=" * 70)
        print("BENCHMARK RESULTS SUMMARY")
        print("=" * 70)

        summary = self.summary()
        if summary.empty:
            print("No results")
            return
        summary.columns = [
            'Avg Learned Size',
            'Avg MQs',
            'Avg EQs',
            'Avg Time (s)',
            'Success Rate'
        ]
        print(summary.to_string())
        print("=" * 70)

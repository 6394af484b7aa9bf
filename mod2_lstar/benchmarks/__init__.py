"""
Benchmarking framework for mod-2 multiplicity automaton learning.
"""

from .benchmark_runner import BenchmarkRunner
from .metrics import BenchmarkResults, LearningMetrics, MetricsCollector
from .random_suba import RandomSUBAGenerator

__all__ = [
    "BenchmarkRunner",
    "BenchmarkResults",
    "LearningMetrics",
    "MetricsCollector",
    "RandomSUBAGenerator"
]

#!/usr/bin/env python
"""
Benchmark entry point: learn random SUBA-derived targets of several sizes.

Usage:
    mod2-lstar-benchmark --sizes 1 2 3 --count 3
    mod2-lstar-benchmark --sizes 2 --alphabet-size 3 --seed 42 --output-dir results
"""

import argparse
import sys

from mod2_lstar.benchmarks.benchmark_runner import BenchmarkRunner
from mod2_lstar.config import LearnerConfig, OracleType


def print_header():
    print("=" * 70)
    print("Mod-2-MA Learning Benchmark")
    print("=" * 70)


def main(argv=None) -> int:
    """Main entry point with command line interface."""
    parser = argparse.ArgumentParser(
        description="Mod-2-MA Learning Benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--sizes',
        nargs='+',
        type=int,
        default=[1, 2, 3],
        help='SUBA state counts to benchmark (default: 1 2 3)'
    )

    parser.add_argument(
        '--count',
        type=int,
        default=3,
        help='Random SUBAs per size (default: 3)'
    )

    parser.add_argument(
        '--alphabet-size',
        type=int,
        default=2,
        help='Alphabet size without the end marker (default: 2)'
    )

    parser.add_argument(
        '--oracle',
        choices=[t.value for t in OracleType],
        default=OracleType.BASIS.value,
        help='Equivalence oracle (default: basis)'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Base random seed'
    )

    parser.add_argument(
        '--output-dir',
        default='benchmark_results',
        help='Directory for results (default: benchmark_results)'
    )

    args = parser.parse_args(argv)

    print_header()
    config = LearnerConfig(oracle_type=OracleType(args.oracle), seed=args.seed)
    runner = BenchmarkRunner(config, output_dir=args.output_dir)

    results = runner.run_suba_suite(args.sizes, count=args.count,
                                    alphabet_size=args.alphabet_size, seed=args.seed)
    results.print_summary()
    runner.save_results(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())

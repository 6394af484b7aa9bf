#!/usr/bin/env python
"""
Command-line entry point for learning a mod-2 multiplicity automaton.

Usage:
    mod2-lstar SUBA_input1.txt
    mod2-lstar SUBA_input1.txt -v
    mod2-lstar input1.txt --format ma --seed 7
"""

import argparse
import sys
from pathlib import Path

from mod2_lstar.config import LearnerConfig, OracleType
from mod2_lstar.core.learner import learn
from mod2_lstar.errors import InvalidInputError, LearningFailed, VerificationFailed
from mod2_lstar.formats.display import format_result
from mod2_lstar.formats.readers import read_multiplicity_automaton, read_suba


EXIT_LEARNING_FAILED = 1
EXIT_INVALID_INPUT = 2
EXIT_VERIFICATION_FAILED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Learn a mod-2 multiplicity automaton from membership and equivalence queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Learn the mod-2-MA derived from a SUBA description
  %(prog)s SUBA_input1.txt

  # Learn a mod-2-MA given directly, printing X and Y every iteration
  %(prog)s input1.txt --format ma -v
        """
    )

    parser.add_argument(
        'input',
        type=Path,
        help='Automaton description file'
    )

    parser.add_argument(
        '--format',
        choices=['suba', 'ma'],
        default='suba',
        help='Input description format (default: suba)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Display X and Y as they are constructed'
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
        help='Random seed for sampling'
    )

    parser.add_argument(
        '--dot',
        type=Path,
        default=None,
        help='Write the learned automaton as Graphviz DOT to this path'
    )

    return parser


def main(argv=None) -> int:
    """Main entry point with command line interface."""
    args = build_parser().parse_args(argv)

    config = LearnerConfig(
        oracle_type=OracleType(args.oracle),
        verbose=args.verbose,
        seed=args.seed
    )

    try:
        if args.format == 'suba':
            suba = read_suba(args.input)
            print(f"Loaded {suba}")
            target = suba.to_ufa().to_multiplicity_automaton()
        else:
            target = read_multiplicity_automaton(args.input)
        print(f"Target: {target}\n")

        result = learn(target, config)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except LearningFailed as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_LEARNING_FAILED
    except VerificationFailed as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VERIFICATION_FAILED
    except OSError as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print()
    print(format_result(result.hypothesis))

    if args.dot is not None:
        args.dot.write_text(result.hypothesis.to_dot() + "\n", encoding="utf-8")
        print(f"DOT written to {args.dot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Configuration for learning runs.

Collects the equivalence-oracle choice, the conformance recheck constants
and the sampling parameters in one serializable place.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


# Stream index of the conformance recheck under a run seed
RECHECK_STREAM = 1


class OracleType(Enum):
    """Available equivalence oracles."""
    BASIS = "basis"
    RANDOM = "random"


@dataclass
class LearnerConfig:
    """Configuration for a single learning run."""

    oracle_type: OracleType = OracleType.BASIS

    # Report X and Y every iteration
    verbose: bool = False

    # Conformance recheck after convergence
    recheck_samples: int = 20
    recheck_min_length: int = 1
    recheck_max_length: int = 100

    # Random sampling oracle parameters
    random_samples: int = 1000
    random_max_length: int = 30

    # Base seed; the sampling oracle and the recheck draw from separate streams
    seed: Optional[int] = None

    # Membership query cache bound
    cache_size: int = 100000

    def oracle_params(self) -> Dict[str, Any]:
        """Parameters forwarded to the teacher's oracle factory."""
        if self.oracle_type == OracleType.RANDOM:
            return {
                'num_samples': self.random_samples,
                'max_length': self.random_max_length,
                'seed': self.seed,
            }
        return {}

    def recheck_seed(self) -> Optional[List[int]]:
        """Seed for the conformance recheck generator, independent of the oracle's stream."""
        if self.seed is None:
            return None
        return [self.seed, RECHECK_STREAM]

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        result = {
            'oracle_type': self.oracle_type.value,
            'verbose': self.verbose,
            'recheck_samples': self.recheck_samples,
            'recheck_min_length': self.recheck_min_length,
            'recheck_max_length': self.recheck_max_length,
            'seed': self.seed,
            'cache_size': self.cache_size,
        }
        if self.oracle_type == OracleType.RANDOM:
            result.update({
                'random_samples': self.random_samples,
                'random_max_length': self.random_max_length,
            })
        return result


def get_default_config() -> LearnerConfig:
    return LearnerConfig()

"""Teacher components for mod-2 MA learning."""

from .ma_oracle import MAOracle
from .teacher import Teacher

__all__ = ["MAOracle", "Teacher"]

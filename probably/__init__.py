"""probably: continuous distributions by numerical integration.

This package models a continuous random variable by a density function on a
bounded support and answers probability, expectation and variance queries
with fixed-step Riemann sums.
"""

try:
    from probably._version import version as __version__
except ImportError:
    __version__ = "0.1.0"

from .core.approx import approx_equals
from .core.relation import (
    Between,
    EqualTo,
    GreaterOrEqual,
    GreaterThan,
    LessOrEqual,
    LessThan,
)
from .distributions.continuous import Continuous, probability

__all__ = [
    "approx_equals",
    "Between",
    "EqualTo",
    "GreaterOrEqual",
    "GreaterThan",
    "LessOrEqual",
    "LessThan",
    "Continuous",
    "probability",
]

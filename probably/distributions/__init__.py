"""Distribution implementations for probably.

This module contains the numerically integrated continuous distribution.
"""

from .continuous import Continuous, probability

__all__ = [
    "Continuous",
    "probability",
]

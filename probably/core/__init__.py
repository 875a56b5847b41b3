"""Core module for probably.

This module contains the numeric building blocks shared by the
distributions: relations and their intervals, the Riemann integrator and
approximate float comparison.
"""

from .approx import APPROX_TOLERANCE, approx_equals
from .integration import DEFAULT_STEP_SIZE, riemann_sum
from .relation import (
    Between,
    EqualTo,
    GreaterOrEqual,
    GreaterThan,
    Interval,
    LessOrEqual,
    LessThan,
    Relation,
    relation_for,
    to_interval,
)

__all__ = [
    "APPROX_TOLERANCE",
    "approx_equals",
    "DEFAULT_STEP_SIZE",
    "riemann_sum",
    "Between",
    "EqualTo",
    "GreaterOrEqual",
    "GreaterThan",
    "Interval",
    "LessOrEqual",
    "LessThan",
    "Relation",
    "relation_for",
    "to_interval",
]

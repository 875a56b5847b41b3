"""Query relations and their mapping to numeric intervals.

A relation describes the event whose probability is requested, e.g.
``LessThan(0.5)`` for ``P(X < 0.5)``.  :func:`to_interval` turns a relation
into the concrete ``[lower, upper)`` range to integrate over, clipped to the
support of the distribution.

Example
-------
>>> to_interval(LessThan(0.5), 0.0, 1.0)
Interval(lower=0.0, upper=0.5)
>>> to_interval(Between(-3.0, 0.25), 0.0, 1.0)
Interval(lower=0.0, upper=0.25)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Union


class Interval(NamedTuple):
    """Half-open numeric range ``[lower, upper)``."""

    lower: float
    upper: float


# ---------------------------------------------------------------------------
# Relation variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LessThan:
    """The event ``X < value``."""

    value: float


@dataclass(frozen=True)
class LessOrEqual:
    """The event ``X <= value``."""

    value: float


@dataclass(frozen=True)
class GreaterThan:
    """The event ``X > value``."""

    value: float


@dataclass(frozen=True)
class GreaterOrEqual:
    """The event ``X >= value``."""

    value: float


@dataclass(frozen=True)
class Between:
    """The event ``lower <= X < upper``."""

    lower: float
    upper: float


@dataclass(frozen=True)
class EqualTo:
    """The event ``X == value``."""

    value: float


Relation = Union[LessThan, LessOrEqual, GreaterThan, GreaterOrEqual, Between, EqualTo]


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def to_interval(relation: Relation, min: float, max: float) -> Interval:
    """Map *relation* onto an interval inside the support ``[min, max)``.

    Endpoints outside the support are clipped, never rejected.  A relation
    whose lower endpoint ends up above its upper one yields an empty
    interval.  ``EqualTo(x)`` maps to the degenerate interval ``[x, x)``.

    Raises
    ------
    TypeError
        If *relation* is not one of the relation variants.
    """
    if isinstance(relation, (LessThan, LessOrEqual)):
        lower, upper = min, relation.value
    elif isinstance(relation, (GreaterThan, GreaterOrEqual)):
        lower, upper = relation.value, max
    elif isinstance(relation, Between):
        lower, upper = relation.lower, relation.upper
    elif isinstance(relation, EqualTo):
        return Interval(relation.value, relation.value)
    else:
        raise TypeError(
            f"Expected a relation, got {type(relation).__name__}"
        )

    if lower < min:
        lower = min
    if upper > max:
        upper = max
    return Interval(lower, upper)


_COMPARISONS = {
    "lt": LessThan,
    "le": LessOrEqual,
    "gt": GreaterThan,
    "ge": GreaterOrEqual,
    "eq": EqualTo,
}


def relation_for(comparison: str, threshold: float) -> Relation:
    """Build a relation from a comparison name and a threshold.

    Parameters
    ----------
    comparison : str
        One of "lt" (X < threshold), "le" (X <= threshold),
        "gt" (X > threshold), "ge" (X >= threshold) or "eq" (X == threshold).
    threshold : float
        The value compared against.

    Raises
    ------
    ValueError
        For an unknown *comparison*.
    """
    try:
        variant = _COMPARISONS[comparison]
    except KeyError:
        raise ValueError(
            f"Unknown comparison '{comparison}'. Use 'gt', 'ge', 'lt', 'le', or 'eq'."
        ) from None
    return variant(threshold)

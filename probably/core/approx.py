"""Tolerance-based comparison of floating point values."""

from __future__ import annotations

# Absolute tolerance used when checking that a density integrates to 1
APPROX_TOLERANCE = 1e-3


def approx_equals(a: float, b: float) -> bool:
    """Return ``True`` if *a* and *b* are within :data:`APPROX_TOLERANCE`.

    The comparison is strict (``abs(a - b) < 0.001``) and symmetric but not
    transitive: ``0.0 ~ 0.0006`` and ``0.0006 ~ 0.0012`` hold while
    ``0.0 ~ 0.0012`` does not.  NaN is never approximately equal to anything.

    Examples
    --------
    >>> approx_equals(1.0, 1.0009)
    True
    >>> approx_equals(1.0, 1.002)
    False
    """
    return abs(a - b) < APPROX_TOLERANCE

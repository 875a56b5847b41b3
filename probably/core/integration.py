"""Fixed-step Riemann sums over a half-open interval."""

from __future__ import annotations

import logging
from typing import Callable

from .relation import Interval

logger = logging.getLogger(__name__)

# Default sampling interval for continuous distributions
DEFAULT_STEP_SIZE = 0.01


def riemann_sum(
    interval: Interval,
    function: Callable[[float], float],
    step: float,
    support_min: float,
    support_max: float,
) -> float:
    """Approximate the integral of *function* over *interval*.

    Samples start at ``interval.lower`` and advance by *step* while
    ``x <= min(support_max, interval.upper)``, so the sample at the clipped
    upper bound is included.  Each sample contributes ``function(x) * step``;
    samples below *support_min* contribute zero without evaluating
    *function*, which keeps the grid anchored at ``interval.lower``.

    The grid is built by repeated addition and drifts accordingly.  A
    non-positive *step* never terminates; NaN returned by *function*
    propagates into the result.

    Parameters
    ----------
    interval : Interval
        ``(lower, upper)`` bounds of the sum.
    function : callable
        Scalar function ``float -> float``.
    step : float
        Width of each rectangle and spacing of the samples.
    support_min, support_max : float
        Support of the distribution the sum is taken over.

    Returns
    -------
    float
        The accumulated sum.  An empty interval gives ``0.0``.
    """
    upper = min(support_max, interval.upper)
    logger.debug(
        "riemann_sum over [%g, %g] with step %g", interval.lower, upper, step
    )

    total = 0.0
    x = interval.lower
    while x <= upper:
        value = function(x) if x >= support_min else 0.0
        total += value * step
        x += step
    return total

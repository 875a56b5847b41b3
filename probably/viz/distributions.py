"""Distribution visualization utilities.

Provides ``plot_distribution`` for density/CDF plots of one or more
:class:`~probably.distributions.continuous.Continuous` distributions, with
the region selected by a relation shaded and its probability in the legend.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from probably.core.relation import EqualTo, Relation, to_interval

# ---------------------------------------------------------------------------
# Colorblind-safe palette (Wong 2011)
# ---------------------------------------------------------------------------
COLORBLIND_SAFE_PALETTE: List[str] = [
    "#0072B2",  # blue
    "#E69F00",  # orange
    "#009E73",  # green
    "#CC79A7",  # pink
    "#56B4E9",  # sky blue
    "#D55E00",  # vermilion
    "#F0E442",  # yellow
    "#000000",  # black
]


def _get_color(index: int) -> str:
    """Return a color from the colorblind-safe palette (wraps around)."""
    return COLORBLIND_SAFE_PALETTE[index % len(COLORBLIND_SAFE_PALETTE)]


def _x_range_for_dist(dist: Any) -> Tuple[float, float]:
    """Support of the distribution padded by 5% on each side."""
    lo, hi = float(dist.min), float(dist.max)
    pad = max((hi - lo) * 0.05, 1e-6)
    return lo - pad, hi + pad


# ---------------------------------------------------------------------------
# plot_distribution
# ---------------------------------------------------------------------------


def plot_distribution(
    dists: Any,
    labels: Optional[Union[str, Sequence[str]]] = None,
    relation: Optional[Relation] = None,
    *,
    kind: str = "pdf",
    title: Optional[str] = None,
    xlabel: Optional[str] = None,
    ylabel: Optional[str] = None,
    n_points: int = 200,
    ax: Optional[Any] = None,
    figsize: Tuple[float, float] = (8, 5),
    save_path: Optional[str] = None,
) -> Any:
    """Plot one or more distributions, optionally shading a relation.

    Parameters
    ----------
    dists : Continuous or list of Continuous
        Each distribution must expose ``min``, ``max``, ``pdf(x)``,
        ``cdf(x)`` and ``distribution(relation)``.
    labels : str or list of str, optional
        Legend labels for each distribution.  Defaults to ``repr(dist)``.
    relation : Relation, optional
        Event to highlight.  On a PDF axis the area under the density is
        shaded; on a CDF axis the interval bounds are marked.  The
        integrated probability is appended to each legend label.
    kind : ``"pdf"`` | ``"cdf"``
        Which curve to draw.
    title, xlabel, ylabel : str, optional
        Axis labels / title.
    n_points : int
        Number of evaluation points for the curve.  Each CDF point costs a
        full Riemann sum.
    ax : matplotlib Axes, optional
        Pre-existing axes to draw on.
    figsize : tuple
        Figure size when creating a new matplotlib figure.
    save_path : str, optional
        If given, save the figure to this path.

    Returns
    -------
    matplotlib Figure, or *ax* when axes were supplied.

    Raises
    ------
    ValueError
        If *kind* is not ``"pdf"`` or ``"cdf"``.
    """
    if kind not in ("pdf", "cdf"):
        raise ValueError(f"Unknown kind '{kind}'. Use 'pdf' or 'cdf'.")

    # Normalise inputs to lists
    if not isinstance(dists, (list, tuple)):
        dists = [dists]
    if labels is None:
        labels = [repr(d) for d in dists]
    elif isinstance(labels, str):
        labels = [labels]
    if len(labels) < len(dists):
        labels = list(labels) + [repr(d) for d in dists[len(labels):]]

    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    created_fig = False
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
        created_fig = True
    else:
        fig = ax.figure

    for idx, (dist, label) in enumerate(zip(dists, labels)):
        color = _get_color(idx)
        x_lo, x_hi = _x_range_for_dist(dist)
        xs = np.linspace(x_lo, x_hi, n_points)

        if relation is not None:
            label = f"{label} (P = {dist.distribution(relation):.3f})"

        ys = dist.pdf(xs) if kind == "pdf" else dist.cdf(xs)
        ax.plot(xs, ys, color=color, label=label, linewidth=1.5)

        if relation is not None:
            _mark_relation_mpl(ax, dist, relation, xs, ys, color, shade=kind == "pdf")

    ax.legend(frameon=False)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    default_ylabel = "Density" if kind == "pdf" else "Cumulative probability"
    ax.set_ylabel(ylabel or default_ylabel)
    ax.set_xlabel(xlabel or "x")
    if title:
        ax.set_title(title)

    fig.tight_layout()

    if save_path is not None:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if created_fig:
        return fig
    return ax


def _mark_relation_mpl(ax, dist, relation, xs, ys, color, shade):
    """Shade (PDF) or bracket (CDF) the interval selected by *relation*."""
    if isinstance(relation, EqualTo):
        ax.axvline(relation.value, color=color, linestyle="--", linewidth=1, alpha=0.8)
        return

    lower, upper = to_interval(relation, dist.min, dist.max)
    if lower >= upper:
        return
    if shade:
        mask = (xs >= lower) & (xs <= upper)
        ax.fill_between(xs[mask], ys[mask], alpha=0.25, color=color, linewidth=0)
    else:
        for edge in (lower, upper):
            ax.axvline(edge, color=color, linestyle=":", linewidth=0.8, alpha=0.5)

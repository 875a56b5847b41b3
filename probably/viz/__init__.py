"""Plotting helpers for probably distributions."""

from .distributions import plot_distribution

__all__ = ["plot_distribution"]

"""Tests for probably.distributions.continuous."""

import dataclasses
import logging
import math

import numpy as np
import pytest
from scipy import stats

from probably.core.approx import approx_equals
from probably.core.relation import (
    Between,
    EqualTo,
    GreaterOrEqual,
    GreaterThan,
    LessOrEqual,
    LessThan,
)
from probably.distributions.continuous import Continuous, probability


# ------------------------------------------------------------------ helpers --


def _uniform(step_size=0.01):
    return Continuous(0.0, 1.0, lambda x: 1.0, step_size=step_size)


def _beta22():
    # Beta(2, 2): vanishes at both ends, mean 0.5, variance 0.05
    return Continuous(0.0, 1.0, lambda x: 6 * x * (1 - x))


# ---------------------------------------------------------------- Uniform --


class TestUniform:
    """Uniform distribution on [0, 1) with step 0.01.

    The grid is built by repeated addition of 0.01, so whether the sample at
    the upper bound lands inside is decided by drift; tolerances allow for
    one extra step.
    """

    def test_less_than_half(self):
        assert _uniform().distribution(LessThan(0.5)) == pytest.approx(0.5, abs=0.011)

    def test_greater_than_half(self):
        assert _uniform().distribution(GreaterThan(0.5)) == pytest.approx(0.5, abs=0.011)

    def test_mean(self):
        assert _uniform().expected(lambda x: x) == pytest.approx(0.5, abs=0.011)

    def test_variance(self):
        assert _uniform().variance(lambda x: x) == pytest.approx(1 / 12, abs=0.005)

    def test_identity_is_default_transform(self):
        d = _uniform()
        assert d.expected() == d.expected(lambda x: x)
        assert d.variance() == d.variance(lambda x: x)
        assert d.mean() == d.expected()


# ---------------------------------------------------------- Beta(2, 2) --


class TestQueries:
    def test_total_probability_is_one(self):
        d = _beta22()
        assert approx_equals(d.distribution(LessThan(d.max)), 1.0)
        assert d.is_normalized()

    def test_probability_of_is_exactly_zero(self):
        d = _beta22()
        for x in [-1.0, 0.0, 0.5, 0.999, 1.0, 42.0, math.inf, math.nan]:
            assert d.probability_of(x) == 0

    def test_equal_to_is_zero(self):
        assert _beta22().distribution(EqualTo(0.5)) == 0.0

    def test_reversed_between_is_zero(self):
        d = Continuous(0.0, 10.0, lambda x: 0.1)
        assert d.distribution(Between(5.0, 3.0)) == 0.0

    def test_outside_support(self):
        d = _beta22()
        assert d.distribution(LessThan(-1.0)) == 0.0
        assert d.distribution(GreaterThan(2.0)) == 0.0
        assert d.distribution(LessThan(5.0)) == d.distribution(LessThan(1.0))

    def test_monotone_cdf(self):
        d = _beta22()
        thresholds = np.linspace(-0.5, 1.5, 21)
        values = [d.distribution(LessThan(t)) for t in thresholds]
        assert np.all(np.diff(values) >= 0)

    def test_less_than_matches_between_from_min(self):
        d = _beta22()
        for c in [0.1, 0.37, 0.5, 0.9]:
            assert approx_equals(
                d.distribution(LessThan(c)), d.distribution(Between(d.min, c))
            )
            assert d.distribution(LessThan(c)) == d.distribution(Between(-5.0, c))

    def test_non_strict_relations_match_strict(self):
        d = _beta22()
        assert d.distribution(LessOrEqual(0.3)) == d.distribution(LessThan(0.3))
        assert d.distribution(GreaterOrEqual(0.3)) == d.distribution(GreaterThan(0.3))

    def test_symmetric_density(self):
        d = _beta22()
        assert d.distribution(LessThan(0.5)) == pytest.approx(0.5, abs=0.01)

    def test_mean(self):
        assert _beta22().mean() == pytest.approx(0.5, abs=1e-3)

    def test_variance(self):
        d = _beta22()
        assert d.variance() == pytest.approx(0.05, abs=1e-3)
        assert d.std() == pytest.approx(math.sqrt(0.05), abs=1e-2)

    def test_second_moment(self):
        # E[X^2] = Var + mean^2 = 0.3
        assert _beta22().expected(lambda x: x ** 2) == pytest.approx(0.3, abs=1e-3)

    def test_variance_centres_with_transform(self):
        # The transform is used for both the centre and the deviation, giving
        # Var(2X) = 4 * 0.05, not E[(X - E[2X])^2] = 0.3
        d = _beta22()
        assert d.variance(lambda x: 2 * x) == pytest.approx(0.2, abs=4e-3)

    def test_unknown_relation_raises(self):
        with pytest.raises(TypeError):
            _beta22().distribution("X < 0.5")

    def test_nan_density_propagates(self):
        d = Continuous(0.0, 1.0, lambda x: math.nan)
        assert math.isnan(d.distribution(LessThan(0.5)))
        assert math.isnan(d.expected())

    def test_malformed_density_not_rejected(self):
        d = Continuous(0.0, 1.0, lambda x: 2.0)
        assert not d.is_normalized()
        assert d.total_probability() == pytest.approx(2.0, abs=0.03)


# ------------------------------------------------------------- step size --


class TestStepSize:
    def test_exact_sum_for_binary_step(self):
        # samples at 0, .125, .25, .375 and .5 of f(x) = 2x
        d = Continuous(0.0, 1.0, lambda x: 2 * x, step_size=0.125)
        assert d.distribution(LessThan(0.5)) == pytest.approx(0.3125)

    def test_halving_step_shrinks_error(self):
        d = Continuous(0.0, 1.0, lambda x: 2 * x)
        steps = [0.125, 0.0625, 0.03125, 0.015625]
        errors = [
            abs(d.with_step_size(h).distribution(LessThan(0.5)) - 0.25) for h in steps
        ]
        assert all(b < a for a, b in zip(errors, errors[1:]))
        assert errors[-1] < 0.01

    def test_with_step_size_returns_copy(self):
        d = _uniform()
        finer = d.with_step_size(0.005)
        assert finer.step_size == 0.005
        assert d.step_size == 0.01
        assert finer.function is d.function
        assert (finer.min, finer.max) == (d.min, d.max)


# ---------------------------------------------------------- conveniences --


class TestConveniences:
    def test_pdf_scalar(self):
        assert _beta22().pdf(0.5) == pytest.approx(1.5)
        assert isinstance(_beta22().pdf(0.5), float)

    def test_pdf_zero_outside_support(self):
        np.testing.assert_allclose(
            _uniform().pdf(np.array([-0.5, 0.0, 0.5, 1.0, 2.0])),
            [0.0, 1.0, 1.0, 0.0, 0.0],
        )

    def test_cdf_matches_distribution(self):
        d = _beta22()
        assert d.cdf(0.3) == d.distribution(LessThan(0.3))

    def test_cdf_array_shape(self):
        xs = np.linspace(0.0, 1.0, 6).reshape(2, 3)
        assert _beta22().cdf(xs).shape == (2, 3)

    def test_probability_helper(self):
        d = _beta22()
        assert probability(d, 0.4, "lt") == d.distribution(LessThan(0.4))
        assert probability(d, 0.4) == d.distribution(GreaterThan(0.4))
        assert probability(d, 0.4, "eq") == 0.0

    def test_probability_helper_unknown_comparison(self):
        with pytest.raises(ValueError, match="Unknown comparison"):
            probability(_beta22(), 0.4, "ne")

    def test_immutable(self):
        d = _uniform()
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.step_size = 0.1

    def test_repr(self):
        r = repr(_uniform())
        assert "Continuous" in r
        assert "function" not in r

    def test_logs_construction(self, caplog):
        caplog.set_level(logging.DEBUG, logger="probably")
        _uniform()
        assert any(
            r.name == "probably.distributions.continuous" for r in caplog.records
        )


# ------------------------------------------------------------------ scipy --


class TestFromScipy:
    def test_beta_matches_closed_form(self):
        d = Continuous.from_scipy(stats.beta(2, 2))
        assert (d.min, d.max) == (0.0, 1.0)
        assert d.mean() == pytest.approx(_beta22().mean())
        assert d.variance() == pytest.approx(_beta22().variance())

    def test_truncated_normal(self):
        d = Continuous.from_scipy(stats.norm(0, 1), -8.0, 8.0)
        assert d.is_normalized()
        assert d.mean() == pytest.approx(0.0, abs=1e-3)
        assert d.variance() == pytest.approx(1.0, abs=1e-3)

    def test_cdf_matches_scipy(self):
        d = Continuous.from_scipy(stats.norm(0, 1), -8.0, 8.0)
        for x in [-1.5, 0.0, 1.0]:
            assert d.cdf(x) == pytest.approx(stats.norm.cdf(x), abs=3e-3)

    def test_unbounded_support_raises(self):
        with pytest.raises(ValueError, match="bounded support"):
            Continuous.from_scipy(stats.norm(0, 1))

    def test_step_size_passed_through(self):
        d = Continuous.from_scipy(stats.uniform(0, 1), step_size=0.05)
        assert d.step_size == 0.05

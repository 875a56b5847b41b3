"""Example usage of the probably package.

This example demonstrates the core features of the probably package including:
- Defining a continuous distribution from a density function
- Probability queries with relations
- Expectation and variance of transformed variables
- Wrapping a scipy.stats distribution
"""

from probably import (
    Continuous, LessThan, GreaterThan, Between, EqualTo,
    approx_equals, probability,
)
from scipy import stats


def density_example():
    """Demonstrate a hand-written density."""
    print("=" * 60)
    print("Density Function Example")
    print("=" * 60)

    # Beta(2, 2) density on [0, 1)
    d = Continuous(0.0, 1.0, lambda x: 6 * x * (1 - x))
    print(f"\n   Integrates to 1: {approx_equals(d.total_probability(), 1.0)}")
    print(f"   P(X < 0.25):        {d.distribution(LessThan(0.25)):.4f}")
    print(f"   P(X > 0.75):        {d.distribution(GreaterThan(0.75)):.4f}")
    print(f"   P(0.25 <= X < 0.75): {d.distribution(Between(0.25, 0.75)):.4f}")
    print(f"   P(X == 0.5):        {d.distribution(EqualTo(0.5)):.4f}")
    print(f"   P(X > 0.5) via helper: {probability(d, 0.5, 'gt'):.4f}")


def moments_example():
    """Demonstrate expectation and variance."""
    print("\n" + "=" * 60)
    print("Moments Example")
    print("=" * 60)

    uniform = Continuous(0.0, 1.0, lambda x: 1.0)
    print(f"\n   E[X]:    {uniform.expected():.4f}")
    print(f"   Var[X]:  {uniform.variance():.4f}  (exact 1/12 = {1 / 12:.4f})")
    print(f"   E[X^2]:  {uniform.expected(lambda x: x ** 2):.4f}")
    print(f"   Var[2X]: {uniform.variance(lambda x: 2 * x):.4f}")


def scipy_example():
    """Demonstrate wrapping a scipy.stats distribution."""
    print("\n" + "=" * 60)
    print("scipy.stats Example")
    print("=" * 60)

    normal = Continuous.from_scipy(stats.norm(0, 1), -8.0, 8.0)
    print(f"\n   P(X < 1.96): {normal.cdf(1.96):.4f}  (scipy: {stats.norm.cdf(1.96):.4f})")
    for step in (0.1, 0.05, 0.025):
        p = normal.with_step_size(step).distribution(Between(-1.0, 1.0))
        print(f"   step {step:<6} P(-1 <= X < 1) = {p:.4f}")


def main():
    density_example()
    moments_example()
    scipy_example()


if __name__ == "__main__":
    main()

"""
Units & Diagnostic Measures
===========================

Functions:
- nats_to_bits: Logarithm base conversion
- to_units: Convert a nats value to "nats" or "bits"
- strategy_entropy: Shannon entropy of a phenotype distribution
- simplex_deviation: |sum(x) - 1| for a raw optimizer vector
- optimality_gap: Certificate of how far a strategy is from the optimum

Biological Interpretation:
    With proportional bet-hedging and a lethal wrong phenotype the cue
    value equals the entropy of the environment distribution, which is
    why results are often quoted in bits.
"""

import numpy as np

from .growth import expected_payoffs

LN2 = float(np.log(2.0))


def nats_to_bits(x):
    """Convert nats to bits (divide by ln 2)"""
    return x / LN2


def to_units(x, units: str = "nats"):
    """
    Express a value computed in nats in the requested units.

    Args:
        x: Scalar or array in nats
        units: "nats" or "bits"
    """
    if units == "nats":
        return x
    elif units == "bits":
        return nats_to_bits(x)
    raise ValueError(f"Unknown units '{units}' (expected 'nats' or 'bits')")


def strategy_entropy(strategy: np.ndarray, units: str = "nats") -> float:
    """
    Shannon entropy H = -Σ p log p of a probability vector.

    Zero entries contribute 0. A pure strategy has H = 0; the uniform
    strategy over n phenotypes has H = log n.
    """
    p = np.asarray(strategy, dtype=float)
    nz = p[p > 0]
    h = float(-np.sum(nz * np.log(nz)))
    return float(to_units(h, units))


def simplex_deviation(raw_strategy: np.ndarray) -> float:
    """How far a raw vector's sum is from 1"""
    return float(abs(np.sum(raw_strategy) - 1.0))


def optimality_gap(strategy: np.ndarray, env_dist: np.ndarray, payoff: np.ndarray) -> float:
    """
    Frank-Wolfe gap of a strategy for the blind growth-rate problem.

        g[p] = Σ_e env[e] · payoff[p, e] / m[e],   m = strategy @ payoff
        gap  = max_p g[p] - Σ_p strategy[p] · g[p]

    The growth rate is concave in the strategy, so the gap bounds how
    many nats the strategy is below the optimum on the simplex. It is 0
    exactly at the optimum.

    Returns:
        Gap in nats (inf or nan if some possible environment has
        non-positive expected payoff)
    """
    x = np.asarray(strategy, dtype=float)
    env = np.asarray(env_dist, dtype=float)
    R = np.asarray(payoff, dtype=float)
    m = expected_payoffs(x, R)
    with np.errstate(divide="ignore", invalid="ignore"):
        w = np.where(env == 0.0, 0.0, env / m)
        g = R @ w
        return float(np.max(g) - x @ g)

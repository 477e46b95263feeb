"""
Soft simplex penalty for the strategy search.

The optimizer only knows box bounds [0, 1] per phenotype, so nothing stops
the raw vector from summing past 1. Instead of projecting back onto the
simplex, the excess is charged against the growth rate.
"""

import numpy as np

from .growth import uncued_growth_rate


def simplex_violation(raw_strategy: np.ndarray) -> float:
    """
    Penalty magnitude for a raw strategy vector.

    Returns:
        sum - 1 if the sum exceeds 1, -sum if the sum is negative, else 0
    """
    total = float(np.sum(raw_strategy))
    if total > 1.0:
        return total - 1.0
    elif total < 0.0:
        return -total
    return 0.0


def penalized_objective(
    raw_strategy: np.ndarray,
    env_dist: np.ndarray,
    payoff: np.ndarray,
    floor: float = 0.0
) -> float:
    """
    Growth rate of the raw vector minus the simplex penalty.

    Args:
        raw_strategy: Optimizer iterate (may be off the simplex)
        env_dist: Environment probabilities
        payoff: Payoff matrix (phenotypes x environments)
        floor: Passed through to uncued_growth_rate

    Returns:
        uncued_growth_rate(raw) - (sum - 1)  if sum > 1
        uncued_growth_rate(raw) + sum        if sum < 0
        uncued_growth_rate(raw)              otherwise
    """
    return uncued_growth_rate(raw_strategy, env_dist, payoff, floor) - simplex_violation(raw_strategy)

"""
Cue-Benefit Estimation
======================

The fitness value of a perfect environmental cue:

    ΔG = r_cue - r_blind

where r_blind is the growth rate of the optimal bet-hedging strategy and
r_cue the growth rate of an organism that always knows the environment.

Functions:
- cue_benefit: (ΔG, r_blind, strategy) for one scenario
- sweep_environment_probability: cue_benefit over envDist = [p, 1 - p]

Every call is a pure function of its inputs; sweeps return their results
instead of storing them anywhere.
"""

from typing import NamedTuple, Optional, Sequence

import numpy as np
import pandas as pd

from .config import OptimizerSettings
from .growth import cued_growth_rate, uncued_growth_rate
from .metrics import optimality_gap, simplex_deviation, to_units
from .optimizer import optimize_strategy, search_strategy
from .scenarios import two_environment


class CueBenefitResult(NamedTuple):
    """Cue value, blind growth rate and optimal blind strategy (nats)"""
    benefit: float
    uncued_growth: float
    strategy: np.ndarray


def cue_benefit(
    env_dist: np.ndarray,
    payoff: np.ndarray,
    settings: Optional[OptimizerSettings] = None
) -> CueBenefitResult:
    """
    Fitness value of a perfect cue for one scenario.

    Args:
        env_dist: Environment probabilities, shape (n_environments,)
        payoff: Payoff matrix, shape (n_phenotypes, n_environments)
        settings: Optimizer settings

    Returns:
        CueBenefitResult(benefit, uncued_growth, strategy), unpackable
        as a plain tuple

    Example:
        >>> benefit, r_blind, x = cue_benefit([0.5, 0.5], [[1, 0], [0, 1]])
        >>> benefit / np.log(2)    # one bit of information
        1.0...
    """
    strategy = optimize_strategy(env_dist, payoff, settings)
    uncued = uncued_growth_rate(strategy, env_dist, payoff)
    cued = cued_growth_rate(env_dist, payoff)
    return CueBenefitResult(cued - uncued, uncued, strategy)


def sweep_environment_probability(
    payoff: np.ndarray,
    probs: Sequence[float],
    settings: Optional[OptimizerSettings] = None,
    units: str = "nats"
) -> pd.DataFrame:
    """
    Cue benefit across a grid of two-environment distributions.

    Each p in `probs` is evaluated independently with envDist = [p, 1 - p].

    Args:
        payoff: Two-column payoff matrix
        probs: Probabilities of environment 0
        settings: Optimizer settings
        units: "nats" or "bits" for the growth columns

    Returns:
        DataFrame with one row per p: p, benefit, uncued_growth,
        cued_growth, strategy_<k> for every phenotype, optimality_gap,
        simplex_deviation (raw penalized iterate), converged (scipy status),
        verified (gap <= settings.GAP_TOL), n_iter
    """
    R = np.asarray(payoff, dtype=float)
    if R.ndim != 2 or R.shape[1] != 2:
        raise ValueError("Probability sweep needs a payoff matrix with 2 environments")
    if settings is None:
        settings = OptimizerSettings()

    rows = []
    for p in probs:
        env = two_environment(float(p))
        strategy, report = search_strategy(env, R, settings)
        uncued = uncued_growth_rate(strategy, env, R)
        cued = cued_growth_rate(env, R)

        rec = {
            "p": float(p),
            "benefit": float(to_units(cued - uncued, units)),
            "uncued_growth": float(to_units(uncued, units)),
            "cued_growth": float(to_units(cued, units)),
        }
        for k, xk in enumerate(strategy):
            rec[f"strategy_{k}"] = float(xk)
        gap = optimality_gap(strategy, env, R)
        rec["optimality_gap"] = gap
        rec["simplex_deviation"] = simplex_deviation(report.raw_x)
        rec["converged"] = report.converged
        rec["verified"] = bool(gap <= settings.GAP_TOL)
        rec["n_iter"] = report.n_iter
        rows.append(rec)

    return pd.DataFrame(rows)

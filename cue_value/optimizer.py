"""
Optimal Bet-Hedging Strategy Search
===================================

Finds the phenotype distribution that maximizes long-run log-growth
without environmental information.

Functions:
- maximize: Opaque bounded local maximizer (objective, bounds, start, max_iter)
- maximize_with_report: Same, plus convergence diagnostics
- scale_free_growth: Growth of x / sum(x), used to polish the penalized result
- optimize_strategy: Optimal blind strategy for one scenario

Numerical Notes:
- Search runs on box bounds [0, 1]; the simplex is enforced softly by
  penalty.penalized_objective and exactly by renormalizing the result
- The penalized search is followed by a scale-free polish from its
  renormalized best point (see search_strategy)
- Start point is always the uniform distribution, so the result is
  deterministic but only a local optimum
- When several strategies are co-optimal the one returned depends on the
  optimizer trajectory, not on any rule
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.optimize import minimize

from .config import OptimizerSettings
from .growth import uncued_growth_rate
from .penalty import penalized_objective


@dataclass
class OptimizerReport:
    """Best point of a local search with its convergence diagnostics"""
    x: np.ndarray
    value: float
    converged: bool
    n_iter: int
    message: str
    raw_x: Optional[np.ndarray] = None


def maximize_with_report(
    objective: Callable[[np.ndarray], float],
    bounds: Sequence[Tuple[float, float]],
    start: np.ndarray,
    max_iter: int = 100,
    method: str = "L-BFGS-B"
) -> OptimizerReport:
    """
    Maximize a scalar objective under box bounds.

    The objective is negated and handed to scipy.optimize.minimize.
    No gradient is supplied, so the method approximates it by finite
    differences; tolerances are left at scipy defaults.

    Args:
        objective: f(x) -> float to maximize
        bounds: (low, high) per component
        start: Initial point
        max_iter: Iteration cap
        method: Any bounded scipy method

    Returns:
        OptimizerReport; hitting the iteration cap is reported through
        `converged`, never raised
    """
    x0 = np.asarray(start, dtype=float)
    res = minimize(
        lambda x: -objective(x),
        x0,
        method=method,
        bounds=list(bounds),
        options={"maxiter": max_iter},
    )
    return OptimizerReport(
        x=np.asarray(res.x, dtype=float),
        value=float(-res.fun),
        converged=bool(res.success),
        n_iter=int(getattr(res, "nit", 0)),
        message=str(res.message),
    )


def maximize(
    objective: Callable[[np.ndarray], float],
    bounds: Sequence[Tuple[float, float]],
    start: np.ndarray,
    max_iter: int = 100
) -> np.ndarray:
    """Best point found by a bounded local search (see maximize_with_report)"""
    return maximize_with_report(objective, bounds, start, max_iter).x


def uniform_strategy(n_phenotypes: int) -> np.ndarray:
    return np.full(n_phenotypes, 1.0 / n_phenotypes)


def normalize(raw: np.ndarray) -> np.ndarray:
    """Rescale a non-negative vector so it sums to 1"""
    raw = np.asarray(raw, dtype=float)
    return raw / raw.sum()


def scale_free_growth(
    raw: np.ndarray,
    env_dist: np.ndarray,
    payoff: np.ndarray,
    floor: float = 0.0
) -> float:
    """
    Growth rate of raw / sum(raw).

    Constant along rays from the origin, so it is smooth where the
    penalized objective has its kink at sum = 1.
    """
    raw = np.asarray(raw, dtype=float)
    total = max(float(raw.sum()), np.finfo(float).tiny)
    return uncued_growth_rate(raw / total, env_dist, payoff, floor)


def search_strategy(
    env_dist: np.ndarray,
    payoff: np.ndarray,
    settings: Optional[OptimizerSettings] = None
) -> Tuple[np.ndarray, OptimizerReport]:
    """
    Run the strategy search and return (normalized strategy, report).

    Stage 1 maximizes penalty.penalized_objective from the uniform start.
    Its optimum in the scale direction sits exactly on the penalty kink
    (sum = 1), where finite-difference gradients are one-sided and the
    quasi-Newton search can stop short along the simplex. With
    settings.POLISH, stage 2 restarts the same bounded search from the
    renormalized stage-1 point on scale_free_growth.

    The report carries the raw stage-1 iterate (`raw_x`), the iteration
    count of both stages, and the final stage's scipy status.
    """
    if settings is None:
        settings = OptimizerSettings()

    env = np.asarray(env_dist, dtype=float)
    R = np.asarray(payoff, dtype=float)
    n = R.shape[0]

    bounds: List[Tuple[float, float]] = [
        (settings.LOWER_BOUND, settings.UPPER_BOUND)
    ] * n

    report = maximize_with_report(
        lambda x: penalized_objective(x, env, R, settings.PAYOFF_FLOOR),
        bounds,
        uniform_strategy(n),
        max_iter=settings.MAX_ITER,
        method=settings.METHOD,
    )
    report.raw_x = report.x
    if not settings.POLISH:
        return normalize(report.x), report

    polished = maximize_with_report(
        lambda x: scale_free_growth(x, env, R, settings.PAYOFF_FLOOR),
        bounds,
        normalize(report.x),
        max_iter=settings.MAX_ITER,
        method=settings.METHOD,
    )
    polished.raw_x = report.x
    polished.n_iter += report.n_iter
    return normalize(polished.x), polished


def optimize_strategy(
    env_dist: np.ndarray,
    payoff: np.ndarray,
    settings: Optional[OptimizerSettings] = None
) -> np.ndarray:
    """
    Optimal blind bet-hedging strategy for one scenario.

    Args:
        env_dist: Environment probabilities, shape (n_environments,)
        payoff: Payoff matrix, shape (n_phenotypes, n_environments)
        settings: Optimizer settings (defaults: L-BFGS-B, 100 iterations)

    Returns:
        Phenotype probabilities summing to 1

    Example:
        >>> optimize_strategy([0.3, 0.7], [[1, 0], [0, 1]])
        array([0.3, 0.7])   # proportional bet-hedging
    """
    strategy, _ = search_strategy(env_dist, payoff, settings)
    return strategy

"""
Scenario Construction
=====================

Payoff matrices and environment distributions for cue-value experiments.
Rows are phenotypes, columns are environments.

Functions:
- two_environment: envDist = [p, 1 - p]
- probability_grid: Sweep grid for p
- symmetric_payoff: Risky specialist vs. safe generalist
- germination_payoff: Germinate vs. stay dormant (good/bad years)
- proportional_payoff: One phenotype per environment, lethal otherwise
- dominant_payoff: A single phenotype is best everywhere
- scale_columns: Multiply each environment's payoffs by a constant
- collapse_states: Reduce a fine-grained model to coarse groups
- get_scenario: Payoff matrix by preset name
"""

from typing import Optional, Sequence

import numpy as np


def two_environment(p: float) -> np.ndarray:
    """Environment distribution [p, 1 - p]"""
    return np.array([p, 1.0 - p], dtype=float)


def probability_grid(p_min: float = 0.001, p_max: float = 1.0, n_points: int = 21) -> np.ndarray:
    """
    Grid of probabilities for the first environment.

    Returns:
        np.linspace(p_min, p_max, n_points)
    """
    if n_points < 1:
        raise ValueError("n_points must be >= 1")
    return np.linspace(p_min, p_max, n_points)


def symmetric_payoff(high: float = 5.0, low: float = 1.0, safe: float = 2.0) -> np.ndarray:
    """
    Specialist earns `high` in environment 0 and `low` in environment 1;
    generalist earns `safe` in both.
    """
    return np.array([[high, low], [safe, safe]], dtype=float)


def germination_payoff(yield_good: float = 10.0, survival: float = 0.8) -> np.ndarray:
    """
    Annual-plant seed bank with good and bad years.

    - germinate: `yield_good` seeds in a good year, 0 in a bad year
    - dormant: `survival` in either year (seed decay in the soil)
    """
    return np.array(
        [[yield_good, 0.0],
         [survival, survival]],
        dtype=float,
    )


def proportional_payoff(n_environments: int = 2, payoff: float = 1.0) -> np.ndarray:
    """
    One specialist per environment that earns `payoff` there and nothing
    anywhere else. The optimal blind strategy matches envDist exactly.
    """
    return payoff * np.eye(n_environments, dtype=float)


def dominant_payoff() -> np.ndarray:
    """Phenotype 0 is at least as good as phenotype 1 in every environment"""
    return np.array([[3.0, 4.0], [1.0, 2.0]], dtype=float)


def scale_columns(payoff: np.ndarray, factors: Sequence[float]) -> np.ndarray:
    """
    Multiply column e of the payoff matrix by factors[e].

    Rescaling a column adds log(factor) to every strategy's growth in that
    environment, so it changes the cued growth rate but not which blind
    strategy is optimal.
    """
    R = np.asarray(payoff, dtype=float)
    f = np.asarray(factors, dtype=float)
    if f.shape != (R.shape[1],):
        raise ValueError(
            f"Need one factor per environment ({R.shape[1]}), got {f.size}"
        )
    return R * f[None, :]


def collapse_states(
    env_dist: np.ndarray,
    payoff: np.ndarray,
    groups: Sequence[int],
    n_groups: Optional[int] = None
):
    """
    Collapse fine-grained environmental states into coarse groups.

    Probabilities are summed within each group; payoffs are averaged with
    the within-group probabilities as weights. Used to turn multi-stage
    models (e.g. many emergence-timing states) into a small matrix that
    the single-decision cued growth rate applies to.

    Args:
        env_dist: Fine-grained probabilities, shape (n_states,)
        payoff: Fine-grained payoff matrix, shape (n_phenotypes, n_states)
        groups: Group index for each state
        n_groups: Number of groups (default: max(groups) + 1)

    Returns:
        (coarse_env_dist, coarse_payoff)
    """
    env = np.asarray(env_dist, dtype=float)
    R = np.asarray(payoff, dtype=float)
    g = np.asarray(groups, dtype=int)
    if g.shape != env.shape or R.shape[1] != env.size:
        raise ValueError("groups, env_dist and payoff columns must have equal length")
    if n_groups is None:
        n_groups = int(g.max()) + 1

    coarse_env = np.bincount(g, weights=env, minlength=n_groups)
    coarse_R = np.zeros((R.shape[0], n_groups), dtype=float)
    for k in range(n_groups):
        m = g == k
        w = env[m]
        if w.sum() > 0:
            coarse_R[:, k] = (R[:, m] * w).sum(axis=1) / w.sum()
        elif m.any():
            coarse_R[:, k] = R[:, m].mean(axis=1)
    return coarse_env, coarse_R


SCENARIOS = {
    "symmetric": symmetric_payoff,
    "germination": germination_payoff,
    "proportional": proportional_payoff,
    "dominant": dominant_payoff,
}


def get_scenario(name: str) -> np.ndarray:
    """Default two-environment payoff matrix for a named scenario"""
    if name not in SCENARIOS:
        raise ValueError(f"Unknown scenario '{name}' (choices: {sorted(SCENARIOS)})")
    return SCENARIOS[name]()

"""
Growth-Rate Evaluation
======================

Expected log-growth of a population in a fluctuating environment.

Functions:
- expected_payoffs: Per-environment payoff of a mixed phenotype strategy
- uncued_growth_rate: Long-run growth of a blind bet-hedger
- best_phenotypes: Best phenotype per environment (first row wins ties)
- cued_growth_rate: Long-run growth when the environment is known in advance

Biological Interpretation:
- Growth is multiplicative across generations, so the long-run rate is
  the expectation of the log payoff (Kelly criterion)
- Rates are in nats; divide by ln(2) for bits

Conventions:
    payoff[p, e] is the payoff of phenotype p in environment e.
    Environments with probability exactly 0 contribute nothing (0·log 0 = 0).
    A non-positive expected payoff in a possible environment gives -inf
    (or nan); nothing is raised.
"""

import numpy as np


def expected_payoffs(strategy: np.ndarray, payoff: np.ndarray) -> np.ndarray:
    """
    Expected payoff in each environment for a mixed strategy.

    Args:
        strategy: Phenotype probabilities, shape (n_phenotypes,)
        payoff: Payoff matrix, shape (n_phenotypes, n_environments)

    Returns:
        Array of shape (n_environments,): Σ_p strategy[p]·payoff[p, e]
    """
    x = np.asarray(strategy, dtype=float)
    R = np.asarray(payoff, dtype=float)
    return x @ R


def _expected_log(env_dist: np.ndarray, values: np.ndarray, floor: float = 0.0) -> float:
    env = np.asarray(env_dist, dtype=float)
    if floor > 0:
        values = np.maximum(values, floor)
    with np.errstate(divide="ignore", invalid="ignore"):
        logs = np.log(values)
        # impossible environments drop out even when their log is -inf
        terms = np.where(env == 0.0, 0.0, env * logs)
    return float(np.sum(terms))


def uncued_growth_rate(
    strategy: np.ndarray,
    env_dist: np.ndarray,
    payoff: np.ndarray,
    floor: float = 0.0
) -> float:
    """
    Long-run log-growth rate of a bet-hedging strategy without a cue.

        r = Σ_e env[e] · log( Σ_p strategy[p] · payoff[p, e] )

    Args:
        strategy: Phenotype probabilities (not checked to sum to 1)
        env_dist: Environment probabilities (not checked to sum to 1)
        payoff: Payoff matrix (phenotypes x environments)
        floor: If > 0, expected payoffs are raised to at least this value
            before taking logs. Only the strategy search uses it, so that
            lethal corners give a large finite loss instead of -inf.

    Returns:
        Growth rate in nats per generation

    Example:
        >>> uncued_growth_rate([0.1, 0.9], [0.1, 0.9], [[100, 0], [1, 1]])
        0.1440...   # 0.1·log(10.9) + 0.9·log(0.9)
    """
    return _expected_log(env_dist, expected_payoffs(strategy, payoff), floor)


def best_phenotypes(payoff: np.ndarray) -> np.ndarray:
    """
    Index of the highest-payoff phenotype for each environment.

    Ties go to the phenotype listed first (lowest row index).

    Returns:
        Integer array of shape (n_environments,)
    """
    R = np.asarray(payoff, dtype=float)
    return np.argmax(R, axis=0)


def cued_growth_rate(env_dist: np.ndarray, payoff: np.ndarray) -> float:
    """
    Long-run log-growth rate with a perfect cue.

    The organism learns the environment before committing and always
    develops the best phenotype for it:

        r_cue = Σ_e env[e] · log( payoff[best(e), e] )

    Note:
        Only meaningful for life cycles with a single decision point.
        Multi-stage cycles must be collapsed to an equivalent matrix by
        the caller (see scenarios.collapse_states).
    """
    R = np.asarray(payoff, dtype=float)
    best = best_phenotypes(R)
    cols = np.arange(R.shape[1])
    return _expected_log(env_dist, R[best, cols])

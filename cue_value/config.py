"""
Configuration & Presets for Cue-Value Experiments
==================================================

This module defines the optimizer, sweep and scenario parameters used
when estimating the fitness value of environmental cues.

Biological Interpretation:
- Environments: discrete states of the world with occurrence probabilities
- Phenotypes: alternative developmental outcomes an organism can commit to
- Bet-hedging: a probability distribution over phenotypes (no cue)
- Cue: perfect knowledge of the environment before commitment
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

# ============================================================================
# Optimizer Settings
# ============================================================================

@dataclass
class OptimizerSettings:
    """
    Parameters of the bounded local search for the optimal strategy.

    Numerical Interpretation:
    - Quasi-Newton search on the penalized log-growth objective
    - Box bounds keep every phenotype probability in [0, 1]
    - Gradient is approximated numerically by the optimizer
    """

    METHOD: str = "L-BFGS-B"
    """scipy.optimize.minimize method

    Must support box bounds; limited-memory BFGS is the default
    """

    MAX_ITER: int = 100
    """Iteration cap for the local search

    Reaching it is not an error: the best iterate is returned
    """

    LOWER_BOUND: float = 0.0
    """Lower bound for each phenotype probability"""

    UPPER_BOUND: float = 1.0
    """Upper bound for each phenotype probability"""

    PAYOFF_FLOOR: float = 1e-300
    """Smallest expected payoff the search objective takes the log of

    Keeps lethal corners of the search space finite (log ≈ -690)
    so the line search can back away from them
    """

    POLISH: bool = True
    """Restart from the renormalized penalized optimum on the scale-free
    growth rate

    The penalized optimum lies on the kink at sum = 1, where the
    quasi-Newton search can stall short of the optimum
    """

    GAP_TOL: float = 1e-4
    """Optimality gap (nats) above which a sweep point is flagged

    See metrics.optimality_gap
    """


# ============================================================================
# Sweep Settings
# ============================================================================

@dataclass
class SweepSettings:
    """
    Grid over the probability of the first environment in a
    two-environment scenario.

    Each grid point p yields envDist = [p, 1 - p].
    """

    P_MIN: float = 0.001
    """Smallest probability of environment 0

    Kept slightly above 0 so the first environment is never impossible
    """

    P_MAX: float = 1.0
    """Largest probability of environment 0"""

    N_POINTS: int = 21
    """Number of grid points (inclusive of both ends)"""

    UNITS: str = "nats"
    """Reporting units for growth rates: "nats" or "bits" """


# ============================================================================
# Experiment Configuration
# ============================================================================

@dataclass
class ExperimentConfig:
    """
    Complete experiment configuration combining all parameter groups.
    """

    scenario: str = "symmetric"

    optimizer: OptimizerSettings = None
    sweep: SweepSettings = None

    def __post_init__(self):
        """Initialize parameter groups with defaults if not provided."""
        if self.optimizer is None:
            self.optimizer = OptimizerSettings()
        if self.sweep is None:
            self.sweep = SweepSettings()


# ============================================================================
# Experimental Presets
# ============================================================================

def config_symmetric() -> ExperimentConfig:
    """
    Symmetric two-phenotype scenario: payoff [[5, 1], [2, 2]].

    A risky specialist against a safe generalist; the cue is worth
    most where the two environments are about equally likely.
    """
    return ExperimentConfig(scenario="symmetric")


def config_germination() -> ExperimentConfig:
    """
    Seed germination (germinate vs. stay dormant) in good/bad years.

    Germinating seeds die in bad years, dormant seeds survive with a
    small loss, so the optimum germination fraction tracks p.
    """
    return ExperimentConfig(
        scenario="germination",
        sweep=SweepSettings(P_MIN=0.05, P_MAX=0.95, N_POINTS=19),
    )


def config_proportional() -> ExperimentConfig:
    """
    Proportional bet-hedging with a lethal non-optimal phenotype.

    Reported in bits, where the cue value equals the entropy of the
    environment distribution.
    """
    return ExperimentConfig(
        scenario="proportional",
        sweep=SweepSettings(P_MIN=0.05, P_MAX=0.95, N_POINTS=19, UNITS="bits"),
    )


def config_dominant() -> ExperimentConfig:
    """
    One phenotype dominates in every environment: the cue is worthless.
    """
    return ExperimentConfig(scenario="dominant")


PRESETS = {
    "symmetric": config_symmetric,
    "germination": config_germination,
    "proportional": config_proportional,
    "dominant": config_dominant,
}


# ============================================================================
# Parameter Validation
# ============================================================================

def validate_config(config: ExperimentConfig) -> Tuple[bool, str]:
    """
    Check configuration for numerical consistency.

    Returns:
        (is_valid, error_message)
    """
    errors = []

    opt = config.optimizer
    if opt.MAX_ITER <= 0:
        errors.append("MAX_ITER must be positive")
    if not (opt.LOWER_BOUND < opt.UPPER_BOUND):
        errors.append("LOWER_BOUND must be < UPPER_BOUND")
    if opt.LOWER_BOUND < 0:
        errors.append("LOWER_BOUND must be non-negative")
    if opt.PAYOFF_FLOOR < 0:
        errors.append("PAYOFF_FLOOR must be non-negative")
    if opt.GAP_TOL <= 0:
        errors.append("GAP_TOL must be positive")

    sw = config.sweep
    if not (0.0 <= sw.P_MIN <= sw.P_MAX <= 1.0):
        errors.append("Sweep range must satisfy 0 <= P_MIN <= P_MAX <= 1")
    if sw.N_POINTS < 1:
        errors.append("N_POINTS must be >= 1")
    if sw.UNITS not in ("nats", "bits"):
        errors.append("UNITS must be 'nats' or 'bits'")

    if config.scenario not in PRESETS:
        errors.append(f"Unknown scenario '{config.scenario}'")

    if errors:
        return False, "; ".join(errors)
    return True, "OK"


def validate_scenario(env_dist, payoff, atol: float = 1e-9) -> Tuple[bool, str]:
    """
    Opt-in sanity check for a single scenario.

    The estimator itself never calls this: malformed inputs flow through
    the growth-rate arithmetic and come back as non-finite numbers.

    Returns:
        (is_valid, error_message)
    """
    env = np.asarray(env_dist, dtype=float)
    R = np.asarray(payoff, dtype=float)
    errors = []

    if R.ndim != 2:
        errors.append("Payoff matrix must be 2-D (phenotypes x environments)")
    elif env.shape != (R.shape[1],):
        errors.append(
            f"Environment distribution has length {env.size}, "
            f"payoff matrix has {R.shape[1]} environments"
        )

    if np.any(env < 0):
        errors.append("Environment probabilities must be non-negative")
    if not np.isclose(env.sum(), 1.0, atol=atol):
        errors.append(f"Environment probabilities sum to {env.sum():.6g}, not 1")
    if np.any(R < 0):
        errors.append("Payoffs must be non-negative")

    if errors:
        return False, "; ".join(errors)
    return True, "OK"

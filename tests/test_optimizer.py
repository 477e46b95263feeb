import numpy as np
from cue_value.config import OptimizerSettings
from cue_value.growth import uncued_growth_rate
from cue_value.optimizer import optimize_strategy, search_strategy, maximize, uniform_strategy, scale_free_growth

SYMMETRIC = np.array([[5.0, 1.0], [2.0, 2.0]])

def symmetric_optimum(p):
    # d/dx0 [p log(2+3x0) + (1-p) log(2-x0)] = 0
    return float(np.clip((8*p - 2) / 3, 0.0, 1.0))

def test_sums_to_one_any_size():
    rng = np.random.default_rng(7)
    env = np.array([0.2, 0.3, 0.5])
    for n in range(1, 6):
        R = rng.uniform(0.5, 5.0, size=(n, 3))
        x = optimize_strategy(env, R)
        assert x.shape == (n,)
        assert abs(x.sum() - 1.0) < 1e-9
        assert np.all(x >= 0) and np.all(x <= 1)

def test_symmetric_matches_closed_form():
    for p in [0.2, 0.3, 0.5, 0.6, 0.7]:
        x = optimize_strategy([p, 1 - p], SYMMETRIC)
        assert abs(x[0] - symmetric_optimum(p)) < 1e-3, (p, x)

def test_symmetric_growth_not_left_on_table():
    env = np.array([0.2, 0.8])
    x = optimize_strategy(env, SYMMETRIC)
    # the generalist alone earns log 2 when p <= 1/4
    assert uncued_growth_rate(x, env, SYMMETRIC) >= np.log(2.0) - 1e-5

def test_proportional_bet_hedging():
    x = optimize_strategy([0.3, 0.7], np.eye(2))
    assert np.allclose(x, [0.3, 0.7], atol=1e-3)

def test_dominant_phenotype_wins():
    x = optimize_strategy([0.3, 0.7], [[3.0, 4.0], [1.0, 2.0]])
    assert x[0] > 0.99

def test_deterministic():
    env = np.array([0.35, 0.65])
    assert np.array_equal(optimize_strategy(env, SYMMETRIC), optimize_strategy(env, SYMMETRIC))

def test_iteration_cap_returns_best_iterate():
    env = np.array([0.2, 0.3, 0.5])
    R = np.array([[4.0, 1.0, 0.5], [1.0, 3.0, 1.0], [0.5, 1.0, 2.0]])
    x, report = search_strategy(env, R, OptimizerSettings(MAX_ITER=1))
    # one capped iteration per stage
    assert report.n_iter <= 2
    assert abs(x.sum() - 1.0) < 1e-9

def test_penalized_stage_alone_still_normalized():
    x, report = search_strategy([0.3, 0.7], SYMMETRIC, OptimizerSettings(POLISH=False))
    assert abs(x.sum() - 1.0) < 1e-9
    assert report.raw_x is not None and report.raw_x.shape == (2,)

def test_report_keeps_raw_penalized_iterate():
    _, report = search_strategy([0.3, 0.7], SYMMETRIC)
    assert np.all(report.raw_x >= 0) and np.all(report.raw_x <= 1)

def test_scale_free_growth_ignores_scale():
    env = np.array([0.4, 0.6])
    a = scale_free_growth(np.array([0.2, 0.3]), env, SYMMETRIC)
    b = scale_free_growth(np.array([0.4, 0.6]), env, SYMMETRIC)
    assert np.isclose(a, b)
    assert np.isfinite(scale_free_growth(np.zeros(2), env, SYMMETRIC, floor=1e-300))

def test_maximize_concave_quadratic():
    x = maximize(lambda v: -np.sum((v - 0.25)**2), [(0.0, 1.0)] * 3, uniform_strategy(3), max_iter=100)
    assert np.allclose(x, 0.25, atol=1e-4)

def test_maximize_respects_bounds():
    x = maximize(lambda v: float(np.sum(v)), [(0.0, 1.0)] * 2, np.array([0.5, 0.5]), max_iter=100)
    assert np.allclose(x, 1.0)

import numpy as np
from cue_value.growth import uncued_growth_rate, cued_growth_rate, best_phenotypes, expected_payoffs

def test_uncued_closed_form():
    env = np.array([0.1, 0.9])
    R = np.array([[100.0, 0.0], [1.0, 1.0]])
    r = uncued_growth_rate([0.1, 0.9], env, R)
    assert np.isclose(r, 0.1*np.log(10.9) + 0.9*np.log(0.9), rtol=0, atol=1e-12)

def test_expected_payoffs_shape():
    R = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    m = expected_payoffs([0.5, 0.5], R)
    assert m.shape == (3,)
    assert np.allclose(m, [2.5, 3.5, 4.5])

def test_cued_picks_best_per_environment():
    env = np.array([0.25, 0.75])
    R = np.array([[5.0, 1.0], [2.0, 2.0]])
    assert np.isclose(cued_growth_rate(env, R), 0.25*np.log(5) + 0.75*np.log(2))

def test_tie_break_first_row():
    R = np.array([[3.0, 1.0], [3.0, 2.0], [0.5, 2.0]])
    assert list(best_phenotypes(R)) == [0, 1]

def test_lethal_gives_neg_inf_without_raising():
    env = np.array([0.5, 0.5])
    R = np.array([[1.0, 0.0], [0.0, 1.0]])
    r = uncued_growth_rate([1.0, 0.0], env, R)
    assert np.isneginf(r)

def test_impossible_environment_drops_out():
    env = np.array([1.0, 0.0])
    R = np.array([[1.0, 0.0], [0.0, 1.0]])
    assert uncued_growth_rate([1.0, 0.0], env, R) == 0.0

def test_floor_keeps_value_finite():
    env = np.array([0.5, 0.5])
    R = np.array([[1.0, 0.0], [0.0, 1.0]])
    r = uncued_growth_rate([1.0, 0.0], env, R, floor=1e-300)
    assert np.isfinite(r) and r < -300

def test_cued_monotone_in_best_payoff():
    env = np.array([0.3, 0.7])
    R = np.array([[5.0, 1.0], [2.0, 2.0]])
    base = cued_growth_rate(env, R)
    for bump in [0.0, 0.1, 1.0, 10.0]:
        R2 = R.copy()
        R2[0, 0] += bump
        assert cued_growth_rate(env, R2) >= base

def test_inputs_not_mutated():
    R = np.array([[5.0, 1.0], [2.0, 2.0]])
    R0 = R.copy()
    cued_growth_rate([0.5, 0.5], R)
    uncued_growth_rate([0.5, 0.5], [0.5, 0.5], R)
    assert np.array_equal(R, R0)

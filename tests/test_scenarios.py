import numpy as np
import pytest
from cue_value.scenarios import (
    two_environment, probability_grid, proportional_payoff, scale_columns,
    collapse_states, get_scenario
)

def test_two_environment():
    assert np.allclose(two_environment(0.3), [0.3, 0.7])

def test_grid_endpoints():
    g = probability_grid(0.001, 1.0, 5)
    assert g[0] == 0.001 and g[-1] == 1.0 and len(g) == 5

def test_proportional_is_identity():
    assert np.array_equal(proportional_payoff(3), np.eye(3))

def test_scale_columns_shape_check():
    with pytest.raises(ValueError):
        scale_columns(np.eye(2), [1.0, 2.0, 3.0])

def test_collapse_states():
    env = np.array([0.1, 0.3, 0.6])
    R = np.array([[1.0, 3.0, 2.0], [0.0, 0.0, 4.0]])
    env_c, R_c = collapse_states(env, R, [0, 0, 1])
    assert np.allclose(env_c, [0.4, 0.6])
    assert np.allclose(R_c[:, 0], [(0.1*1 + 0.3*3)/0.4, 0.0])
    assert np.allclose(R_c[:, 1], [2.0, 4.0])

def test_unknown_scenario():
    with pytest.raises(ValueError):
        get_scenario("nope")

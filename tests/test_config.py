from cue_value.config import ExperimentConfig, OptimizerSettings, SweepSettings, PRESETS, validate_config, validate_scenario

def test_presets_valid():
    for name, factory in PRESETS.items():
        ok, msg = validate_config(factory())
        assert ok, f"{name}: {msg}"

def test_defaults():
    cfg = ExperimentConfig()
    assert cfg.optimizer.MAX_ITER == 100
    assert cfg.optimizer.METHOD == "L-BFGS-B"

def test_invalid_config_collects_errors():
    cfg = ExperimentConfig(
        scenario="nope",
        optimizer=OptimizerSettings(MAX_ITER=0),
        sweep=SweepSettings(UNITS="decibans"),
    )
    ok, msg = validate_config(cfg)
    assert not ok
    assert "MAX_ITER" in msg and "UNITS" in msg and "nope" in msg

def test_validate_scenario():
    assert validate_scenario([0.5, 0.5], [[1, 2], [3, 4]])[0]
    ok, msg = validate_scenario([0.5, 0.6], [[1, 2], [3, -4]])
    assert not ok and "sum" in msg and "non-negative" in msg
    assert not validate_scenario([1.0], [[1, 2]])[0]

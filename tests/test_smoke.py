import json
import os
from cue_value.run_experiment import main

def test_smoke_small_run(tmp_path):
    outdir = str(tmp_path / "out")
    main(["--preset", "germination", "--outdir", outdir, "--npoints", "5"])
    for name in ["sweep.csv", "summary.txt", "metadata.json", "fig_benefit.png", "fig_strategy.png", "fig_growth.png"]:
        assert os.path.exists(os.path.join(outdir, name))
    with open(os.path.join(outdir, "metadata.json")) as f:
        meta = json.load(f)
    assert meta["n_points"] == 5
    assert meta["results"]["min_benefit"] >= -1e-9

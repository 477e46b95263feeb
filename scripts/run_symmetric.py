#!/usr/bin/env python3
"""
Run the symmetric specialist/generalist scenario, payoff [[5, 1], [2, 2]]
Expected: cue benefit >= 0 everywhere, zero at p=1
"""

import sys
import pathlib
import subprocess

# Create output directory
pathlib.Path("out_symmetric").mkdir(exist_ok=True, parents=True)

sys.exit(subprocess.call([
    sys.executable, "-m", "cue_value.run_experiment",
    "--preset", "symmetric",
    "--outdir", "out_symmetric",
    "--pmin", "0.001",
    "--pmax", "1.0",
    "--npoints", "41"
]))

#!/usr/bin/env python3
"""
Run every preset and collect the peak cue benefit of each
"""

import sys
import pathlib
import subprocess
import json

# Presets to run
presets = ["symmetric", "germination", "proportional", "dominant"]

results = []
for preset in presets:
    outdir = f"out_sweep/{preset}"
    pathlib.Path(outdir).mkdir(exist_ok=True, parents=True)

    # Run experiment
    ret = subprocess.call([
        sys.executable, "-m", "cue_value.run_experiment",
        "--preset", preset,
        "--outdir", outdir,
    ])
    if ret != 0:
        print(f"Preset {preset}: runner exited with {ret}")
        continue

    # Read results
    metadata_path = pathlib.Path(outdir) / "metadata.json"
    if metadata_path.exists():
        with open(metadata_path) as f:
            meta = json.load(f)
            results.append({
                "preset": preset,
                "units": meta["units"],
                "p_at_peak": meta["results"]["p_at_peak"],
                "peak_benefit": meta["results"]["peak_benefit"],
            })
            print(f"Preset {preset}: ΔG_max={meta['results']['peak_benefit']:.4f} {meta['units']} "
                  f"at p={meta['results']['p_at_peak']:.3f}")

# Summary
with open("out_sweep/summary.json", "w") as f:
    json.dump(results, f, indent=2)

print("\nSummary:")
for r in results:
    print(f"  {r['preset']:<13} {r['peak_benefit']:.4f} {r['units']}")

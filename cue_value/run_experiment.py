"""
cue_value/run_experiment.py - Cue-benefit sweep runner
"""

import argparse
import os
import json
from .config import PRESETS, validate_config, validate_scenario
from .estimator import sweep_environment_probability
from .metrics import strategy_entropy
from .plotters import plot_benefit_sweep, plot_strategy_sweep, plot_growth_rates, strategy_columns
from .scenarios import get_scenario, probability_grid, two_environment


def build_config(args):
    """Preset config with command-line overrides applied"""
    config = PRESETS[args.preset]()
    if args.pmin is not None:
        config.sweep.P_MIN = args.pmin
    if args.pmax is not None:
        config.sweep.P_MAX = args.pmax
    if args.npoints is not None:
        config.sweep.N_POINTS = args.npoints
    if args.units is not None:
        config.sweep.UNITS = args.units
    if args.max_iter is not None:
        config.optimizer.MAX_ITER = args.max_iter
    return config


def run_experiment(args):
    """Sweep envDist = [p, 1-p] for one preset and write results to outdir"""
    os.makedirs(args.outdir, exist_ok=True)

    config = build_config(args)
    ok, msg = validate_config(config)
    if not ok:
        raise ValueError(f"Invalid configuration: {msg}")

    payoff = get_scenario(config.scenario)
    sw = config.sweep
    probs = probability_grid(sw.P_MIN, sw.P_MAX, sw.N_POINTS)

    # The estimator accepts anything; only warn here
    for p in (probs[0], probs[-1]):
        ok, msg = validate_scenario(two_environment(p), payoff)
        if not ok:
            print(f"[WARNING] p={p:.3f}: {msg}")

    print(f"[INFO] Running {args.preset}: {sw.N_POINTS} points in [{sw.P_MIN}, {sw.P_MAX}], units={sw.UNITS}")
    df = sweep_environment_probability(payoff, probs, settings=config.optimizer, units=sw.UNITS)

    # Derived columns
    cols = strategy_columns(df)
    df["strategy_entropy"] = [
        strategy_entropy(row, units=sw.UNITS) for row in df[cols].values
    ]

    csv_path = os.path.join(args.outdir, "sweep.csv")
    df.to_csv(csv_path, index=False)

    f1 = os.path.join(args.outdir, "fig_benefit.png")
    p_peak, dG_peak = plot_benefit_sweep(df, f1, units=sw.UNITS, title=f"Cue value: {config.scenario}")

    f2 = os.path.join(args.outdir, "fig_strategy.png")
    plot_strategy_sweep(df, f2, title=f"Optimal strategy: {config.scenario}")

    f3 = os.path.join(args.outdir, "fig_growth.png")
    plot_growth_rates(df, f3, units=sw.UNITS)

    n_unconverged = int((~df["converged"]).sum())
    n_unverified = int((~df["verified"]).sum())
    max_gap = float(df["optimality_gap"].max())
    min_benefit = float(df["benefit"].min())

    summary_path = os.path.join(args.outdir, "summary.txt")
    with open(summary_path, "w") as f:
        f.write(f"=== Cue value: {args.preset.upper()} ===\n")
        f.write(f"Configuration:\n")
        f.write(f"  Payoff matrix (rows=phenotypes): {payoff.tolist()}\n")
        f.write(f"  Sweep: p in [{sw.P_MIN}, {sw.P_MAX}], {sw.N_POINTS} points\n")
        f.write(f"  Optimizer: {config.optimizer.METHOD}, max_iter={config.optimizer.MAX_ITER}\n")
        f.write(f"\nResults:\n")
        f.write(f"  Peak cue benefit: {dG_peak:.4f} {sw.UNITS} at p={p_peak:.3f}\n")
        f.write(f"  Minimum cue benefit: {min_benefit:.4g} {sw.UNITS}\n")
        f.write(f"  Unconverged searches: {n_unconverged}/{len(df)}\n")
        f.write(f"  Optimality gap > {config.optimizer.GAP_TOL:g} nats: {n_unverified}/{len(df)} (max {max_gap:.3g})\n")

    metadata = {
        "preset": args.preset,
        "scenario": config.scenario,
        "payoff": payoff.tolist(),
        "p_min": sw.P_MIN,
        "p_max": sw.P_MAX,
        "n_points": sw.N_POINTS,
        "units": sw.UNITS,
        "method": config.optimizer.METHOD,
        "max_iter": config.optimizer.MAX_ITER,
        "results": {
            "p_at_peak": p_peak,
            "peak_benefit": dG_peak,
            "min_benefit": min_benefit,
            "n_unconverged": n_unconverged,
            "n_unverified": n_unverified,
            "max_optimality_gap": max_gap,
        }
    }

    json_path = os.path.join(args.outdir, "metadata.json")
    with open(json_path, "w") as f:
        json.dump(metadata, f, indent=2)

    print(f"[DONE] {args.preset} - outdir={args.outdir}")
    print(f"  Peak benefit={dG_peak:.4f} {sw.UNITS} at p={p_peak:.3f}")
    if n_unconverged:
        print(f"  ⚠ {n_unconverged} searches stopped without scipy convergence (best iterate kept)")
    if n_unverified:
        print(f"  ⚠ {n_unverified} strategies have optimality gap > {config.optimizer.GAP_TOL:g} nats (max {max_gap:.3g})")
    if min_benefit < -1e-6:
        print(f"  ✗ Negative cue benefit ({min_benefit:.3g}): local optimum or bad scenario")

    return metadata


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        description="Fitness value of informative cues: bet-hedging sweep runner"
    )

    p.add_argument("--preset", type=str, default="symmetric",
                   choices=sorted(PRESETS),
                   help="Scenario preset")
    p.add_argument("--outdir", type=str, default="out",
                   help="Output directory for results")

    # Sweep overrides (default: preset values)
    p.add_argument("--pmin", type=float, default=None,
                   help="Smallest probability of environment 0")
    p.add_argument("--pmax", type=float, default=None,
                   help="Largest probability of environment 0")
    p.add_argument("--npoints", type=int, default=None,
                   help="Number of grid points")
    p.add_argument("--units", type=str, default=None, choices=["nats", "bits"],
                   help="Reporting units")

    # Optimizer
    p.add_argument("--max-iter", dest="max_iter", type=int, default=None,
                   help="Iteration cap for the strategy search")

    args = p.parse_args(argv)
    print(f"[CONFIG] Using preset {args.preset}")
    return args


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    run_experiment(args)


if __name__ == "__main__":
    main()

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt


def strategy_columns(df: pd.DataFrame):
    return [c for c in df.columns if c.startswith("strategy_") and c[len("strategy_"):].isdigit()]


def plot_benefit_sweep(df: pd.DataFrame, outpath: str, units: str = "nats", title: str = ""):
    """
    Plot cue benefit against the probability of environment 0.

    Returns:
        (p_at_peak, peak_benefit)
    """
    p = df["p"].values
    dG = df["benefit"].values
    best_idx = int(np.nanargmax(dG))

    plt.figure(figsize=(7, 4.5))
    plt.plot(p, dG, marker="o", markersize=4)
    plt.axvline(p[best_idx], color='red', linestyle='--', alpha=0.7,
                label=f'Peak: p={p[best_idx]:.3f}')
    plt.axhline(0, color='gray', linestyle='-', alpha=0.3)
    plt.xlabel("P(environment 0)")
    plt.ylabel(f"Cue benefit ΔG ({units})")
    plt.title(title or "Fitness value of a perfect cue")
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(outpath)
    plt.close()

    return float(p[best_idx]), float(dG[best_idx])


def plot_strategy_sweep(df: pd.DataFrame, outpath: str, title: str = ""):
    """Stacked phenotype probabilities of the optimal blind strategy"""
    p = df["p"].values
    cols = strategy_columns(df)

    plt.figure(figsize=(7, 4.5))
    plt.stackplot(p, *[df[c].values for c in cols],
                  labels=[c.replace("strategy_", "phenotype ") for c in cols], alpha=0.8)
    plt.xlabel("P(environment 0)")
    plt.ylabel("Phenotype probability")
    plt.ylim(0, 1)
    plt.title(title or "Optimal bet-hedging strategy")
    plt.legend(loc="upper left")
    plt.tight_layout()
    plt.savefig(outpath)
    plt.close()


def plot_growth_rates(df: pd.DataFrame, outpath: str, units: str = "nats"):
    plt.figure(figsize=(7, 4.5))
    plt.plot(df["p"].values, df["cued_growth"].values, label="with cue")
    plt.plot(df["p"].values, df["uncued_growth"].values, label="bet-hedging (no cue)")
    plt.xlabel("P(environment 0)"); plt.ylabel(f"Log-growth rate ({units})")
    plt.title("Cued vs. uncued growth")
    plt.legend(); plt.grid(True, alpha=0.3)
    plt.tight_layout(); plt.savefig(outpath); plt.close()

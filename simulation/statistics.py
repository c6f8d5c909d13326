"""Statistics and plots for equity estimates."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import numpy as np

from poker.cards import Card
from simulation.equity import DEFAULT_TRIALS, EquityResult, EquitySimulator, TiePolicy
from simulation.runner import shard_seeds


def confidence_interval(result: EquityResult, z: float = 1.96) -> tuple[float, float]:
    """Normal-approximation interval for the equity, clamped to [0, 1]."""
    margin = z * result.std_error
    return max(0.0, result.equity - margin), min(1.0, result.equity + margin)


@dataclass
class StabilityReport:
    """Spread of repeated independent estimates of the same spot."""

    estimates: list[float] = field(default_factory=list)
    trials: int = DEFAULT_TRIALS

    @property
    def mean(self) -> float:
        return float(np.mean(self.estimates)) if self.estimates else 0.0

    @property
    def std(self) -> float:
        return float(np.std(self.estimates)) if self.estimates else 0.0

    @property
    def spread(self) -> float:
        """Max minus min estimate."""
        if not self.estimates:
            return 0.0
        values = np.asarray(self.estimates)
        return float(values.max() - values.min())

    def within(self, tolerance: float) -> bool:
        """True if every pair of estimates agrees within ``tolerance``."""
        return self.spread <= tolerance


def measure_stability(
    hole_cards: Sequence[Card],
    community: Sequence[Card],
    runs: int = 5,
    trials: int = DEFAULT_TRIALS,
    seed: int | None = None,
    tie_policy: TiePolicy = TiePolicy.STRICT,
) -> StabilityReport:
    """Repeat independent estimates and report how much they disagree."""
    if runs < 2:
        raise ValueError(f"Need at least 2 runs to measure stability, got {runs}")

    report = StabilityReport(trials=trials)
    for run_seed in shard_seeds(seed, runs):
        simulator = EquitySimulator(trials=trials, tie_policy=tie_policy, seed=run_seed)
        report.estimates.append(simulator.estimate(hole_cards, community))
    return report


def plot_convergence(
    result: EquityResult,
    save_path: str | Path | None = None,
    show: bool = False,
) -> None:
    """Plot running equity against trial count.

    Requires a result produced with ``record_every > 0``.
    """
    import matplotlib.pyplot as plt

    if not result.history:
        raise ValueError("Result has no history; run with record_every > 0")

    trials = np.array([t for t, _ in result.history])
    running = np.array([e for _, e in result.history])
    # 95% band around the running estimate
    band = 1.96 * np.sqrt(np.clip(running * (1 - running), 0.0, None) / trials)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(trials, running * 100, "b-", linewidth=1.5, label="Running equity")
    ax.fill_between(
        trials,
        (running - band) * 100,
        (running + band) * 100,
        alpha=0.2,
        color="blue",
        label="95% interval",
    )
    ax.axhline(result.equity * 100, color="green", linestyle="--", linewidth=1, label="Final")
    ax.set_xlabel("Trials")
    ax.set_ylabel("Equity (%)")
    ax.set_title("Equity Convergence")
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches="tight")
    elif show:
        plt.show()

    plt.close(fig)

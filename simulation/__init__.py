"""Monte Carlo equity simulation."""

from simulation.equity import (
    DEFAULT_TRIALS,
    EquityResult,
    EquitySimulator,
    TiePolicy,
    estimate_equity,
)
from simulation.runner import run_parallel
from simulation.statistics import StabilityReport, confidence_interval, measure_stability

__all__ = [
    "DEFAULT_TRIALS",
    "EquityResult",
    "EquitySimulator",
    "StabilityReport",
    "TiePolicy",
    "confidence_interval",
    "estimate_equity",
    "measure_stability",
    "run_parallel",
]

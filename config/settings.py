"""Configuration settings for equity estimation."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from simulation.equity import DEFAULT_TRIALS, TiePolicy


@dataclass
class SimulationConfig:
    """Monte Carlo configuration."""

    trials: int = DEFAULT_TRIALS
    tie_policy: str = TiePolicy.STRICT.value  # strict or split
    workers: int = 1
    seed: int | None = None
    record_every: int = 0  # 0 disables convergence history

    def __post_init__(self) -> None:
        if self.trials <= 0:
            raise ValueError(f"trials must be positive, got {self.trials}")
        if self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.record_every < 0:
            raise ValueError(f"record_every must be >= 0, got {self.record_every}")
        # Raises ValueError on unknown policies
        TiePolicy(self.tie_policy)

    @property
    def policy(self) -> TiePolicy:
        return TiePolicy(self.tie_policy)


@dataclass
class DisplayConfig:
    """Terminal output configuration."""

    explain: bool = False
    max_beating_hands: int = 20


@dataclass
class Config:
    """Complete configuration."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    if "simulation" in data:
        config.simulation = SimulationConfig(**data["simulation"])
    if "display" in data:
        config.display = DisplayConfig(**data["display"])

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "simulation": {
            "trials": config.simulation.trials,
            "tie_policy": config.simulation.tie_policy,
            "workers": config.simulation.workers,
            "seed": config.simulation.seed,
            "record_every": config.simulation.record_every,
        },
        "display": {
            "explain": config.display.explain,
            "max_beating_hands": config.display.max_beating_hands,
        },
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()

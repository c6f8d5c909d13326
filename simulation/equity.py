"""Monte Carlo equity estimation against one random opponent hand.

Each trial completes the board from the unseen cards, deals the opponent two
more, and compares both best hands. Equity is the fraction of trials won
(ties count for nothing under ``TiePolicy.STRICT``, half under ``SPLIT``).
"""

import logging
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from random import Random
from typing import Sequence

from poker.cards import Card, Deck
from poker.errors import SimulationCancelled
from poker.hand_evaluator import HandEvaluator
from poker.validation import validate_cards

logger = logging.getLogger(__name__)

DEFAULT_TRIALS = 15000
BOARD_SIZE = 5


class TiePolicy(str, Enum):
    """How a tied showdown is credited to the hero."""

    STRICT = "strict"  # Only strict wins count
    SPLIT = "split"  # A tie counts as half a win

    @property
    def tie_credit(self) -> float:
        return 0.5 if self is TiePolicy.SPLIT else 0.0


@dataclass
class EquityResult:
    """Outcome counts of one simulation run."""

    wins: int
    ties: int
    losses: int
    tie_policy: TiePolicy = TiePolicy.STRICT
    history: list[tuple[int, float]] = field(default_factory=list)  # (trials, running equity)

    @property
    def trials(self) -> int:
        return self.wins + self.ties + self.losses

    @property
    def equity(self) -> float:
        """Probability in [0, 1] under the result's tie policy."""
        if self.trials == 0:
            return 0.0
        return (self.wins + self.ties * self.tie_policy.tie_credit) / self.trials

    @property
    def win_rate(self) -> float:
        return self.wins / self.trials if self.trials else 0.0

    @property
    def tie_rate(self) -> float:
        return self.ties / self.trials if self.trials else 0.0

    @property
    def loss_rate(self) -> float:
        return self.losses / self.trials if self.trials else 0.0

    @property
    def std_error(self) -> float:
        """Standard error of the equity estimate."""
        if self.trials == 0:
            return 0.0
        p = self.equity
        return (p * (1.0 - p) / self.trials) ** 0.5

    def merge(self, other: "EquityResult") -> "EquityResult":
        """Sum the counts of two independent runs with the same tie policy."""
        if other.tie_policy != self.tie_policy:
            raise ValueError("Cannot merge results with different tie policies")
        return EquityResult(
            wins=self.wins + other.wins,
            ties=self.ties + other.ties,
            losses=self.losses + other.losses,
            tie_policy=self.tie_policy,
        )


class EquitySimulator:
    """Estimate hero equity against one uniformly random opponent hand.

    Usage:
        simulator = EquitySimulator(trials=15000, seed=7)
        equity = simulator.estimate(hole, board)
    """

    def __init__(
        self,
        trials: int = DEFAULT_TRIALS,
        tie_policy: TiePolicy = TiePolicy.STRICT,
        seed: int | None = None,
        rng: Random | None = None,
    ) -> None:
        if trials <= 0:
            raise ValueError(f"trials must be positive, got {trials}")
        self.trials = trials
        self.tie_policy = TiePolicy(tie_policy)
        self.rng = rng or Random(seed)

    def run(
        self,
        hole_cards: Sequence[Card],
        community: Sequence[Card],
        cancel: threading.Event | None = None,
        record_every: int = 0,
    ) -> EquityResult:
        """Run all trials and return the outcome counts.

        Args:
            hole_cards: Exactly 2 hero cards
            community: 0, 3, 4 or 5 known board cards
            cancel: Checked between trials; when set, the run stops
            record_every: If > 0, append running equity every N trials

        Raises:
            InvalidCardCount, DuplicateCards: before any trial runs
            SimulationCancelled: when ``cancel`` is set mid-run
        """
        hole, board = validate_cards(hole_cards, community)

        deck = Deck.excluding([*hole, *board], rng=self.rng)
        missing = BOARD_SIZE - len(board)
        evaluate = HandEvaluator.evaluate
        credit = self.tie_policy.tie_credit

        wins = ties = losses = 0
        history: list[tuple[int, float]] = []
        start = time.perf_counter()

        for trial in range(1, self.trials + 1):
            if cancel is not None and cancel.is_set():
                logger.info("Simulation cancelled after %d trials", trial - 1)
                raise SimulationCancelled(trial - 1)

            deck.reset()
            full_board = [*board, *deck.deal(missing)]
            opponent = deck.deal(2)

            hero_score = evaluate([*hole, *full_board]).score
            opponent_score = evaluate([*opponent, *full_board]).score

            if hero_score > opponent_score:
                wins += 1
            elif hero_score == opponent_score:
                ties += 1
            else:
                losses += 1

            if record_every and trial % record_every == 0:
                history.append((trial, (wins + ties * credit) / trial))

        logger.debug(
            "Ran %d trials in %.2fs (wins=%d ties=%d losses=%d)",
            self.trials,
            time.perf_counter() - start,
            wins,
            ties,
            losses,
        )
        return EquityResult(
            wins=wins,
            ties=ties,
            losses=losses,
            tie_policy=self.tie_policy,
            history=history,
        )

    def estimate(
        self,
        hole_cards: Sequence[Card],
        community: Sequence[Card],
        cancel: threading.Event | None = None,
    ) -> float:
        """Equity in [0, 1]."""
        return self.run(hole_cards, community, cancel=cancel).equity


def estimate_equity(
    hole_cards: Sequence[Card],
    community: Sequence[Card],
    trials: int = DEFAULT_TRIALS,
    seed: int | None = None,
    tie_policy: TiePolicy = TiePolicy.STRICT,
) -> float:
    """Estimate hero equity against one random opponent hand.

    Each call is independent; results vary unless ``seed`` is given.
    """
    simulator = EquitySimulator(trials=trials, tie_policy=tie_policy, seed=seed)
    return simulator.estimate(hole_cards, community)

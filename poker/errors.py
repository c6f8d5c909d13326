"""Typed errors raised by the equity core."""

from typing import Sequence

from poker.cards import Card


class PokerError(ValueError):
    """Base class for rejected card input."""


class InvalidCardCount(PokerError):
    """Hole cards are not exactly 2, or community cards are not 0, 3, 4 or 5."""

    def __init__(self, hole_count: int, community_count: int) -> None:
        self.hole_count = hole_count
        self.community_count = community_count
        super().__init__(
            f"Expected 2 hole cards and 0, 3, 4 or 5 community cards, "
            f"got {hole_count} and {community_count}"
        )


class DuplicateCards(PokerError):
    """The same card appears more than once among hole and community cards."""

    def __init__(self, duplicates: Sequence[Card]) -> None:
        self.duplicates = tuple(duplicates)
        listed = " ".join(str(c) for c in self.duplicates)
        super().__init__(f"Duplicate cards detected: {listed}")


class SimulationCancelled(Exception):
    """A running simulation was stopped through its cancel event."""

    def __init__(self, completed_trials: int) -> None:
        self.completed_trials = completed_trials
        super().__init__(f"Simulation cancelled after {completed_trials} trials")

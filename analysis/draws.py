"""Draw and board-texture detection."""

from collections import Counter
from typing import Iterable, Sequence

from poker.cards import Card, Rank, Suit
from poker.hand_evaluator import HandCategory

ACE_LOW = 1


def _rank_values(cards: Iterable[Card]) -> set[int]:
    """Distinct rank values, with an Ace also counted as 1 for wheel draws."""
    values = {int(card.rank) for card in cards}
    if Rank.ACE in values:
        values.add(ACE_LOW)
    return values


def _windows() -> Iterable[range]:
    """Every 5-rank straight window, wheel (A-5) through broadway (T-A)."""
    for low in range(ACE_LOW, Rank.TEN + 1):
        yield range(low, low + 5)


def flush_draw_suits(cards: Sequence[Card]) -> list[Suit]:
    """Suits holding exactly four of the cards (one card from a flush)."""
    counts = Counter(card.suit for card in cards)
    return sorted(suit for suit, count in counts.items() if count == 4)


def _has_straight(values: set[int]) -> bool:
    return any(all(r in values for r in window) for window in _windows())


def is_open_ended_straight_draw(cards: Sequence[Card]) -> bool:
    """Four consecutive ranks that can be completed at either end.

    Runs touching an Ace (A-2-3-4, J-Q-K-A) only have one out rank. A made
    straight is not a draw.
    """
    if _has_straight(_rank_values(cards)):
        return False
    ranks = sorted({int(card.rank) for card in cards})
    present = set(ranks)
    for low in ranks:
        run = range(low, low + 4)
        if run[-1] < Rank.ACE and all(r in present for r in run):
            return True
    return False


def is_gutshot_straight_draw(cards: Sequence[Card]) -> bool:
    """One missing rank would complete a straight and the draw is not open-ended.

    Covers inside draws (5-6-8-9) and one-ended runs (A-2-3-4, J-Q-K-A).
    """
    values = _rank_values(cards)
    if _has_straight(values) or is_open_ended_straight_draw(cards):
        return False
    for window in _windows():
        if sum(1 for r in window if r not in values) == 1:
            return True
    return False


def board_flush_suits(board: Sequence[Card]) -> list[Suit]:
    """Suits with at least three board cards, so two suited hole cards make a flush."""
    counts = Counter(card.suit for card in board)
    return sorted(suit for suit, count in counts.items() if count >= 3)


def board_straight_possible(board: Sequence[Card]) -> bool:
    """True if some two hole cards complete a straight with this board."""
    values = _rank_values(board)
    return any(sum(1 for r in window if r in values) >= 3 for window in _windows())


IMPROVEMENT_HINTS: dict[HandCategory, tuple[str, ...]] = {
    HandCategory.HIGH_CARD: ("Potential to pair up with any of your hole cards",),
    HandCategory.ONE_PAIR: (
        "Potential to improve to three of a kind",
        "Potential to make two pair",
    ),
    HandCategory.TWO_PAIR: ("Potential to improve to a full house",),
    HandCategory.THREE_OF_A_KIND: (
        "Potential to improve to a full house",
        "Potential to improve to four of a kind",
    ),
}


def improvement_hints(category: HandCategory) -> list[str]:
    """Generic ways the current category can improve on later streets."""
    return list(IMPROVEMENT_HINTS.get(category, ()))

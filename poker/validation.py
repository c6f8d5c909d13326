"""Precondition checks run before any simulation work."""

from typing import Sequence

from poker.cards import Card, find_duplicates
from poker.errors import DuplicateCards, InvalidCardCount

HOLE_CARD_COUNT = 2
VALID_COMMUNITY_COUNTS = frozenset({0, 3, 4, 5})


def validate_cards(
    hole_cards: Sequence[Card],
    community: Sequence[Card],
) -> tuple[tuple[Card, Card], tuple[Card, ...]]:
    """Check card counts and uniqueness.

    Raises:
        InvalidCardCount: hole count != 2 or community count not in {0, 3, 4, 5}
        DuplicateCards: a card appears twice across hole + community

    Returns:
        The hole cards as a pair and the community cards as a tuple.
    """
    if len(hole_cards) != HOLE_CARD_COUNT or len(community) not in VALID_COMMUNITY_COUNTS:
        raise InvalidCardCount(len(hole_cards), len(community))

    duplicates = find_duplicates([*hole_cards, *community])
    if duplicates:
        raise DuplicateCards(duplicates)

    return (hole_cards[0], hole_cards[1]), tuple(community)

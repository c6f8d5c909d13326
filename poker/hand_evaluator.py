"""Hand evaluation for Texas Hold'em.

Any 2-7 cards map to a ``HandStrength``: a category, the tiebreak ranks that
order hands inside that category, one comparable integer score and a label.

Score encoding:
    score = category * 15**5 + sum(tiebreak[i] * 15**(4 - i))

Ranks are 2-14, so each tiebreak slot fits in base 15 and the category always
dominates. The leading tiebreak slots hold the defining ranks (straight high,
quad rank, trips rank then pair rank, ...); remaining slots hold kickers.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence

from poker.cards import Card, Rank, Suit
from poker.validation import validate_cards

TIEBREAK_SLOTS = 5
SLOT_BASE = 15
CATEGORY_BASE = SLOT_BASE**TIEBREAK_SLOTS

ROYAL_RANKS = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE})
WHEEL_RANKS = frozenset({Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE})


class HandCategory(IntEnum):
    """Poker hand categories from lowest to highest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    def __str__(self) -> str:
        names = {
            0: "High Card",
            1: "One Pair",
            2: "Two Pair",
            3: "Three of a Kind",
            4: "Straight",
            5: "Flush",
            6: "Full House",
            7: "Four of a Kind",
            8: "Straight Flush",
            9: "Royal Flush",
        }
        return names[self.value]


def encode_score(category: HandCategory, tiebreak: Sequence[int]) -> int:
    """Collapse category + tiebreak ranks into one comparable integer."""
    if len(tiebreak) > TIEBREAK_SLOTS:
        raise ValueError(f"At most {TIEBREAK_SLOTS} tiebreak ranks, got {len(tiebreak)}")
    score = int(category) * CATEGORY_BASE
    for slot, value in enumerate(tiebreak):
        score += int(value) * SLOT_BASE ** (TIEBREAK_SLOTS - 1 - slot)
    return score


@dataclass(frozen=True, slots=True)
class HandStrength:
    """Result of evaluating a set of cards."""

    category: HandCategory
    tiebreak: tuple[Rank, ...]  # Most significant first
    score: int

    @classmethod
    def of(cls, category: HandCategory, tiebreak: Sequence[Rank]) -> "HandStrength":
        tiebreak = tuple(tiebreak)
        return cls(category=category, tiebreak=tiebreak, score=encode_score(category, tiebreak))

    def __lt__(self, other: "HandStrength") -> bool:
        return self.score < other.score

    def __le__(self, other: "HandStrength") -> bool:
        return self.score <= other.score

    def __gt__(self, other: "HandStrength") -> bool:
        return self.score > other.score

    def __ge__(self, other: "HandStrength") -> bool:
        return self.score >= other.score

    @property
    def label(self) -> str:
        """Human-readable category and defining ranks."""
        category = self.category
        primary = self.tiebreak[0]
        if category == HandCategory.ROYAL_FLUSH:
            return "Royal Flush"
        if category in (HandCategory.STRAIGHT_FLUSH, HandCategory.FLUSH, HandCategory.STRAIGHT):
            return f"{category} ({primary} high)"
        if category == HandCategory.FULL_HOUSE:
            return f"Full House ({primary.plural} full of {self.tiebreak[1].plural})"
        if category == HandCategory.TWO_PAIR:
            return f"Two Pair ({primary.plural} and {self.tiebreak[1].plural})"
        if category in (
            HandCategory.FOUR_OF_A_KIND,
            HandCategory.THREE_OF_A_KIND,
            HandCategory.ONE_PAIR,
        ):
            return f"{category} ({primary.plural})"
        return f"High Card ({primary})"

    def __str__(self) -> str:
        return self.label


class HandEvaluator:
    """Evaluate poker hands of 2 to 7 cards.

    Categories are tested in strict priority order and the first match wins.
    """

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> HandStrength:
        """Evaluate the best hand formable from the given cards."""
        if not 2 <= len(cards) <= 7:
            raise ValueError(f"Expected 2 to 7 cards, got {len(cards)}")

        rank_counts = Counter(c.rank for c in cards)
        suited: dict[Suit, list[Rank]] = {}
        for card in cards:
            suited.setdefault(card.suit, []).append(card.rank)

        flush_ranks: list[Rank] | None = None
        for ranks in suited.values():
            if len(ranks) >= 5:
                flush_ranks = sorted(ranks, reverse=True)
                break

        # Straight flush (royal checked first)
        if flush_ranks is not None:
            if ROYAL_RANKS.issubset(flush_ranks):
                return HandStrength.of(HandCategory.ROYAL_FLUSH, (Rank.ACE,))
            straight_flush_high = HandEvaluator._straight_high(flush_ranks)
            if straight_flush_high is not None:
                return HandStrength.of(HandCategory.STRAIGHT_FLUSH, (straight_flush_high,))

        # Groups ordered by count, then rank
        groups = sorted(rank_counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
        unique_ranks = sorted(rank_counts, reverse=True)
        top_rank, top_count = groups[0]

        # Four of a kind
        if top_count >= 4:
            kickers = [r for r in unique_ranks if r != top_rank][:1]
            return HandStrength.of(HandCategory.FOUR_OF_A_KIND, (top_rank, *kickers))

        # Full house
        if top_count == 3 and len(groups) > 1 and groups[1][1] >= 2:
            return HandStrength.of(HandCategory.FULL_HOUSE, (top_rank, groups[1][0]))

        # Flush
        if flush_ranks is not None:
            return HandStrength.of(HandCategory.FLUSH, flush_ranks[:5])

        # Straight
        straight_high = HandEvaluator._straight_high(unique_ranks)
        if straight_high is not None:
            return HandStrength.of(HandCategory.STRAIGHT, (straight_high,))

        # Three of a kind
        if top_count == 3:
            kickers = [r for r in unique_ranks if r != top_rank][:2]
            return HandStrength.of(HandCategory.THREE_OF_A_KIND, (top_rank, *kickers))

        # Two pair
        if top_count == 2 and len(groups) > 1 and groups[1][1] == 2:
            high_pair, low_pair = top_rank, groups[1][0]
            kickers = [r for r in unique_ranks if r not in (high_pair, low_pair)][:1]
            return HandStrength.of(HandCategory.TWO_PAIR, (high_pair, low_pair, *kickers))

        # One pair
        if top_count == 2:
            kickers = [r for r in unique_ranks if r != top_rank][:3]
            return HandStrength.of(HandCategory.ONE_PAIR, (top_rank, *kickers))

        # High card
        return HandStrength.of(HandCategory.HIGH_CARD, unique_ranks[:5])

    @staticmethod
    def _straight_high(ranks: Sequence[Rank]) -> Rank | None:
        """Return the high card of the best straight among ranks, if any."""
        unique_ranks = sorted(set(ranks), reverse=True)
        if len(unique_ranks) < 5:
            return None

        for i in range(len(unique_ranks) - 4):
            window = unique_ranks[i : i + 5]
            if window[0] - window[4] == 4:
                return window[0]

        # Wheel (A-2-3-4-5): Ace sorts above King, so it never shows up in a window
        if WHEEL_RANKS.issubset(unique_ranks):
            return Rank.FIVE

        return None

    @staticmethod
    def compare(a: Sequence[Card], b: Sequence[Card]) -> int:
        """Return 1 if a is stronger, -1 if b is stronger, 0 on a tie."""
        score_a = HandEvaluator.evaluate(a).score
        score_b = HandEvaluator.evaluate(b).score
        return (score_a > score_b) - (score_a < score_b)


def evaluate(cards: Sequence[Card]) -> HandStrength:
    """Evaluate 2-7 cards."""
    return HandEvaluator.evaluate(cards)


def describe(cards: Sequence[Card]) -> str:
    """Label of the best hand formable from the cards."""
    return HandEvaluator.evaluate(cards).label


def best_hand(hole_cards: Sequence[Card], community: Sequence[Card]) -> HandStrength:
    """Best hand currently formable from hole + community cards.

    Applies the same card-count and duplicate checks as the equity estimate.
    """
    hole, board = validate_cards(hole_cards, community)
    return HandEvaluator.evaluate([*hole, *board])


def best_hand_label(hole_cards: Sequence[Card], community: Sequence[Card]) -> str:
    """Label of ``best_hand``, e.g. 'Full House (Kings full of Twos)'."""
    return best_hand(hole_cards, community).label

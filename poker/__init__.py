"""Card model, hand evaluator and input validation for Hold'em equity."""

from poker.cards import (
    Card,
    Deck,
    Rank,
    Suit,
    generate_deck,
    has_duplicates,
    parse_cards,
    strip_unset,
    without_known_cards,
)
from poker.errors import DuplicateCards, InvalidCardCount, PokerError, SimulationCancelled
from poker.hand_evaluator import (
    HandCategory,
    HandEvaluator,
    HandStrength,
    best_hand,
    best_hand_label,
    describe,
    evaluate,
)
from poker.validation import validate_cards

__all__ = [
    "Card",
    "Deck",
    "DuplicateCards",
    "HandCategory",
    "HandEvaluator",
    "HandStrength",
    "InvalidCardCount",
    "PokerError",
    "Rank",
    "SimulationCancelled",
    "Suit",
    "best_hand",
    "best_hand_label",
    "describe",
    "evaluate",
    "generate_deck",
    "has_duplicates",
    "parse_cards",
    "strip_unset",
    "validate_cards",
    "without_known_cards",
]

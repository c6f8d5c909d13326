"""Plain-language explanation of an equity estimate."""

from itertools import combinations
from typing import Sequence

from analysis.draws import (
    board_flush_suits,
    board_straight_possible,
    flush_draw_suits,
    improvement_hints,
    is_gutshot_straight_draw,
    is_open_ended_straight_draw,
)
from poker.cards import Card, generate_deck, without_known_cards
from poker.hand_evaluator import HandCategory, HandEvaluator
from poker.validation import validate_cards

OPPONENT_THREATS: dict[HandCategory, tuple[str, ...]] = {
    HandCategory.ONE_PAIR: (
        "Opponent could have a higher pair",
        "Opponent could have three of a kind",
    ),
    HandCategory.TWO_PAIR: (
        "Opponent could have a higher two pair",
        "Opponent could have a full house",
    ),
    HandCategory.THREE_OF_A_KIND: (
        "Opponent could have a higher three of a kind",
        "Opponent could have a full house",
    ),
}


def describe_cards(cards: Sequence[Card]) -> str:
    return " ".join(str(card) for card in cards)


def beating_hands(
    hole_cards: Sequence[Card],
    community: Sequence[Card],
) -> list[tuple[Card, Card]]:
    """Opponent holdings that beat the hero on the board as it stands.

    Only meaningful once the flop is out; returns an empty list preflop.
    """
    hole, board = validate_cards(hole_cards, community)
    if not board:
        return []

    hero_score = HandEvaluator.evaluate([*hole, *board]).score
    unseen = without_known_cards(generate_deck(), [*hole, *board])
    return [
        (first, second)
        for first, second in combinations(unseen, 2)
        if HandEvaluator.evaluate([first, second, *board]).score > hero_score
    ]


def draw_notes(hole_cards: Sequence[Card], community: Sequence[Card]) -> list[str]:
    """Improvement hints and live draws for the hero."""
    cards = [*hole_cards, *community]
    category = HandEvaluator.evaluate(cards).category
    notes = improvement_hints(category)

    # Draws to a category already made or beaten are not improvements
    if category < HandCategory.FLUSH:
        for suit in flush_draw_suits(cards):
            notes.append(f"One card away from a flush in {suit}")

    if category < HandCategory.STRAIGHT:
        if is_open_ended_straight_draw(cards):
            notes.append("Open-ended straight draw")
        elif is_gutshot_straight_draw(cards):
            notes.append("Gutshot straight draw")

    return notes


def explain_equity(
    hole_cards: Sequence[Card],
    community: Sequence[Card],
    equity: float,
    max_listed: int = 20,
) -> str:
    """Multi-line explanation of the hero's hand, threats and draws.

    Args:
        hole_cards: Hero's two cards
        community: Known board cards (0, 3, 4 or 5)
        equity: Estimated probability in [0, 1]
        max_listed: Cap on the number of beating holdings written out
    """
    hole, board = validate_cards(hole_cards, community)
    percent = f"{equity * 100:.1f}%"
    lines = [f"Your hand: {describe_cards(hole)}", ""]

    if not board:
        lines.append(
            "Add community cards for a closer look at your hand and the "
            "opponent's possible holdings."
        )
        lines.append("")
        lines.append(f"With this hand, you have a {percent} chance of winning against a random hand.")
        return "\n".join(lines)

    strength = HandEvaluator.evaluate([*hole, *board])
    lines += [f"Community cards: {describe_cards(board)}", ""]
    lines += [f"Current best hand: {strength.label}", ""]

    lines.append("Opponent possibilities:")
    for suit in board_flush_suits(board):
        lines.append(f"• Opponent could make a flush with suited {suit} cards")
    if board_straight_possible(board):
        lines.append("• Opponent could complete a straight")
    for threat in OPPONENT_THREATS.get(strength.category, ()):
        lines.append(f"• {threat}")
    lines.append("")

    beaters = beating_hands(hole, board)
    if not beaters:
        if len(board) == 5 or equity >= 1.0:
            lines.append("No possible hands can beat yours - you have the nuts!")
        else:
            lines.append("No hand beats yours right now.")
    else:
        shown = ", ".join(f"{a}{b}" for a, b in beaters[:max_listed])
        more = f" (+{len(beaters) - max_listed} more)" if len(beaters) > max_listed else ""
        lines.append(f"Hands that beat you now ({len(beaters)}): {shown}{more}")
    lines.append("")

    lines.append(f"With this hand, you have a {percent} chance of winning.")

    if len(board) < 5:
        notes = draw_notes(hole, board)
        lines.append("")
        lines.append("Your possible improvements:")
        if notes:
            lines += [f"• {note}" for note in notes]
        else:
            lines.append("No clear drawing opportunities")

    return "\n".join(lines)

"""Hand analysis: draws, board texture and equity explanations."""

from analysis.draws import (
    board_flush_suits,
    board_straight_possible,
    flush_draw_suits,
    improvement_hints,
    is_gutshot_straight_draw,
    is_open_ended_straight_draw,
)
from analysis.explain import beating_hands, draw_notes, explain_equity

__all__ = [
    "beating_hands",
    "board_flush_suits",
    "board_straight_possible",
    "draw_notes",
    "explain_equity",
    "flush_draw_suits",
    "improvement_hints",
    "is_gutshot_straight_draw",
    "is_open_ended_straight_draw",
]

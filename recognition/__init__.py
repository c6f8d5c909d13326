"""Boundary to the external image card-recognition service."""

from recognition.parser import fill_community_cards, parse_card_line, parse_recognized_cards
from recognition.service import CardRecognizer, RecognitionError, recognize_cards

__all__ = [
    "CardRecognizer",
    "RecognitionError",
    "fill_community_cards",
    "parse_card_line",
    "parse_recognized_cards",
    "recognize_cards",
]

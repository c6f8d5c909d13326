"""Parse card-recognition output of the form '<rank> of <suit>'."""

import logging
import re

from poker.cards import RANK_SYMBOLS, Card, Rank, Suit

logger = logging.getLogger(__name__)

RANK_WORDS: dict[str, Rank] = {
    "two": Rank.TWO,
    "three": Rank.THREE,
    "four": Rank.FOUR,
    "five": Rank.FIVE,
    "six": Rank.SIX,
    "seven": Rank.SEVEN,
    "eight": Rank.EIGHT,
    "nine": Rank.NINE,
    "ten": Rank.TEN,
    "jack": Rank.JACK,
    "queen": Rank.QUEEN,
    "king": Rank.KING,
    "ace": Rank.ACE,
}

SUIT_WORDS: dict[str, Suit] = {
    "spade": Suit.SPADES,
    "heart": Suit.HEARTS,
    "diamond": Suit.DIAMONDS,
    "club": Suit.CLUBS,
}

# Leading list markers such as "1.", "-", "*" or "•"
_BULLET = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s*")


def parse_rank(text: str) -> Rank | None:
    text = text.strip().lower()
    if text in RANK_WORDS:
        return RANK_WORDS[text]
    return RANK_SYMBOLS.get(text.upper())


def parse_suit(text: str) -> Suit | None:
    text = text.strip().lower().rstrip(".")
    return SUIT_WORDS.get(text.removesuffix("s"))


def parse_card_line(line: str) -> Card | None:
    """Parse one line like 'Ace of Spades'; None if it is not a card."""
    line = _BULLET.sub("", line)
    parts = line.lower().split(" of ")
    if len(parts) != 2:
        return None
    rank, suit = parse_rank(parts[0]), parse_suit(parts[1])
    if rank is None or suit is None:
        return None
    return Card(rank=rank, suit=suit)


def parse_recognized_cards(text: str) -> list[Card]:
    """Parse every recognizable card line, skipping the rest."""
    cards = []
    for line in text.splitlines():
        if not line.strip():
            continue
        card = parse_card_line(line)
        if card is None:
            logger.debug("Skipping unrecognized line: %r", line)
            continue
        cards.append(card)
    return cards


def fill_community_cards(recognized: list[Card], limit: int = 5) -> list[Card]:
    """Keep at most ``limit`` recognized cards for the board, in order."""
    if len(recognized) > limit:
        logger.info("Recognized %d cards, keeping the first %d", len(recognized), limit)
    return recognized[:limit]

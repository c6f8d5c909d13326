"""Card, Deck, Suit, and Rank definitions for equity estimation."""

from dataclasses import dataclass
from enum import IntEnum
from random import Random
from typing import Iterable, Iterator, Sequence


class Suit(IntEnum):
    """Card suits. Values are identifiers only; suits carry no order."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    def __str__(self) -> str:
        symbols = {0: "♣", 1: "♦", 2: "♥", 3: "♠"}
        return symbols[self.value]


class Rank(IntEnum):
    """Card ranks (2-14, where 14 is Ace)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    @property
    def full_name(self) -> str:
        """English name, e.g. 'Ace', 'Six'."""
        return self.name.capitalize()

    @property
    def plural(self) -> str:
        """Plural English name used in hand labels, e.g. 'Sixes', 'Kings'."""
        if self is Rank.SIX:
            return "Sixes"
        return f"{self.full_name}s"


RANK_SYMBOLS: dict[str, Rank] = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

SUIT_SYMBOLS: dict[str, Suit] = {
    "c": Suit.CLUBS,
    "d": Suit.DIAMONDS,
    "h": Suit.HEARTS,
    "s": Suit.SPADES,
    "♣": Suit.CLUBS,
    "♦": Suit.DIAMONDS,
    "♥": Suit.HEARTS,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def to_index(self) -> int:
        """Convert to 0-51 index.

        Index = suit * 13 + (rank - 2)
        """
        return self.suit * 13 + (self.rank - 2)

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Create card from 0-51 index."""
        if not 0 <= index < 52:
            raise ValueError(f"Card index out of range: {index}")
        suit = Suit(index // 13)
        rank = Rank((index % 13) + 2)
        return cls(rank=rank, suit=suit)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Kh', '10c', 'Td' or 'Q♠'."""
        s = s.strip()
        if len(s) not in (2, 3):
            raise ValueError(f"Invalid card string: {s!r}")
        rank_part, suit_char = s[:-1].upper(), s[-1].lower()
        if rank_part not in RANK_SYMBOLS:
            raise ValueError(f"Invalid rank: {rank_part!r}")
        if suit_char not in SUIT_SYMBOLS:
            raise ValueError(f"Invalid suit: {suit_char!r}")
        return cls(rank=RANK_SYMBOLS[rank_part], suit=SUIT_SYMBOLS[suit_char])


def parse_cards(tokens: Iterable[str]) -> list[Card]:
    """Parse several card strings, e.g. ``["As", "Kd"]``."""
    return [Card.from_string(token) for token in tokens]


_FULL_DECK: tuple[Card, ...] = tuple(Card.from_index(i) for i in range(52))


def generate_deck() -> tuple[Card, ...]:
    """Return the 52 canonical cards (built once at import)."""
    return _FULL_DECK


def without_known_cards(deck: Iterable[Card], known: Iterable[Card | None]) -> list[Card]:
    """Return the deck minus every card equal to a known card."""
    lookup = {card for card in known if card is not None}
    return [card for card in deck if card not in lookup]


def has_duplicates(cards: Iterable[Card | None]) -> bool:
    """True iff two set (non-None) cards share rank and suit."""
    seen: set[Card] = set()
    for card in cards:
        if card is None:
            continue
        if card in seen:
            return True
        seen.add(card)
    return False


def find_duplicates(cards: Iterable[Card | None]) -> list[Card]:
    """Return each card that appears more than once, in first-repeat order."""
    seen: set[Card] = set()
    repeated: list[Card] = []
    for card in cards:
        if card is None:
            continue
        if card in seen and card not in repeated:
            repeated.append(card)
        seen.add(card)
    return repeated


def strip_unset(cards: Iterable[Card | None]) -> list[Card]:
    """Drop the UI's unset (None) placeholders before calling the core."""
    return [card for card in cards if card is not None]


class Deck:
    """A working deck drawn from without replacement.

    Draws use a partial Fisher-Yates swap, so each draw is O(1) and
    ``reset()`` makes every card available again without rebuilding the list.
    """

    def __init__(
        self,
        cards: Sequence[Card] | None = None,
        seed: int | None = None,
        rng: Random | None = None,
    ) -> None:
        self._rng = rng or Random(seed)
        self._cards: list[Card] = list(cards) if cards is not None else list(_FULL_DECK)
        self._remaining = len(self._cards)

    @classmethod
    def excluding(
        cls,
        known: Iterable[Card],
        seed: int | None = None,
        rng: Random | None = None,
    ) -> "Deck":
        """Build a deck of the 52 cards minus the known ones."""
        return cls(without_known_cards(_FULL_DECK, known), seed=seed, rng=rng)

    def reset(self) -> None:
        """Make every card drawable again."""
        self._remaining = len(self._cards)

    def draw(self) -> Card:
        """Draw one card uniformly at random."""
        if self._remaining == 0:
            raise ValueError("Cannot draw from an empty deck")
        idx = self._rng.randrange(self._remaining)
        last = self._remaining - 1
        cards = self._cards
        cards[idx], cards[last] = cards[last], cards[idx]
        self._remaining = last
        return cards[last]

    def deal(self, n: int = 1) -> list[Card]:
        """Draw n cards."""
        if n > self._remaining:
            raise ValueError(f"Cannot deal {n} cards, only {self._remaining} remaining")
        return [self.draw() for _ in range(n)]

    def remaining(self) -> int:
        """Number of cards not yet drawn."""
        return self._remaining

    def __len__(self) -> int:
        return self._remaining

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards[: self._remaining])

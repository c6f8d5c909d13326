"""Injected card-recognition collaborator.

The recognizer itself (camera capture, remote vision model, retries) lives
outside this project. Callers pass in any object with an async
``recognize(image) -> str`` method; this module only awaits it and turns its
text into cards.
"""

import logging
from typing import Protocol, runtime_checkable

from poker.cards import Card
from recognition.parser import parse_recognized_cards

logger = logging.getLogger(__name__)


class RecognitionError(Exception):
    """The recognizer failed or returned nothing usable."""


@runtime_checkable
class CardRecognizer(Protocol):
    """Recognizes playing cards in an image."""

    async def recognize(self, image: bytes) -> str:
        """Return free text, one '<rank> of <suit>' line per visible card."""
        ...


async def recognize_cards(recognizer: CardRecognizer, image: bytes) -> list[Card]:
    """Run the recognizer and parse its answer.

    Raises:
        RecognitionError: the recognizer raised, or no card could be parsed
    """
    try:
        text = await recognizer.recognize(image)
    except Exception as exc:
        raise RecognitionError(f"Card recognition failed: {exc}") from exc

    logger.debug("Recognizer response: %r", text)
    cards = parse_recognized_cards(text)
    if not cards:
        raise RecognitionError("No cards could be parsed from the recognizer response")
    return cards

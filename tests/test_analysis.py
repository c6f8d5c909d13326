"""Tests for draw detection and equity explanations (analysis/)."""

import pytest

from analysis.draws import (
    board_flush_suits,
    board_straight_possible,
    flush_draw_suits,
    improvement_hints,
    is_gutshot_straight_draw,
    is_open_ended_straight_draw,
)
from analysis.explain import beating_hands, draw_notes, explain_equity
from poker.cards import Suit
from poker.errors import DuplicateCards
from poker.hand_evaluator import HandCategory, evaluate
from tests.helpers.card_utils import make_cards, make_hand


class TestDraws:
    """Test draw detection on hero cards."""

    def test_flush_draw(self):
        cards = make_cards(["Ah", "Kh", "7h", "2h", "9c"])
        assert flush_draw_suits(cards) == [Suit.HEARTS]

    def test_made_flush_is_not_a_draw(self):
        cards = make_cards(["Ah", "Kh", "7h", "2h", "9h"])
        assert flush_draw_suits(cards) == []

    @pytest.mark.parametrize(
        "cards,open_ended,gutshot",
        [
            (["8c", "9d", "Th", "Js", "2c"], True, False),
            (["2c", "3d", "4h", "5s", "Kc"], True, False),
            (["5c", "6d", "8h", "9s", "Kc"], False, True),
            (["Ac", "2d", "3h", "5s", "Kc"], False, True),  # Wheel gutshot
            (["Jc", "Qd", "Kh", "As", "2c"], False, True),  # Only a ten completes it
            (["Ac", "2d", "3h", "4s", "9c"], False, True),  # Only a five completes it
            (["5c", "6d", "7h", "8s", "9c"], False, False),  # Already a straight
            (["4c", "5d", "6h", "7s", "8c", "9d"], False, False),
            (["2c", "5d", "9h", "Js", "Kc"], False, False),
        ],
    )
    def test_straight_draws(self, cards, open_ended, gutshot):
        hand = make_cards(cards)
        assert is_open_ended_straight_draw(hand) is open_ended
        assert is_gutshot_straight_draw(hand) is gutshot

    def test_board_flush_suits(self):
        assert board_flush_suits(make_cards(["Qs", "Js", "2s", "7h"])) == [Suit.SPADES]
        assert board_flush_suits(make_cards(["Qs", "Js", "2h"])) == []

    @pytest.mark.parametrize(
        "board,possible",
        [
            (["Qs", "Jd", "Tc"], True),
            (["As", "2d", "4c"], True),
            (["Qs", "Jd", "2c"], False),
            (["Ks", "8d", "3c"], False),
        ],
    )
    def test_board_straight_possible(self, board, possible):
        assert board_straight_possible(make_cards(board)) is possible

    def test_improvement_hints(self):
        assert len(improvement_hints(HandCategory.ONE_PAIR)) == 2
        assert improvement_hints(HandCategory.FLUSH) == []

    def test_improvement_hints_returns_copy(self):
        hints = improvement_hints(HandCategory.HIGH_CARD)
        hints.append("extra")
        assert "extra" not in improvement_hints(HandCategory.HIGH_CARD)


class TestBeatingHands:
    """Enumerate opponent holdings that are ahead right now."""

    def test_nuts_has_no_beaters(self, nuts_hand):
        assert beating_hands(*nuts_hand) == []

    def test_preflop_is_empty(self, pocket_aces):
        assert beating_hands(*pocket_aces) == []

    def test_beaters_are_ahead_and_unseen(self):
        hole, board = make_hand("2c", "7d", ["As", "Ks", "Qh"])
        known = set(hole) | set(board)
        hero = evaluate([*hole, *board])

        beaters = beating_hands(hole, board)
        assert beaters
        for first, second in beaters:
            assert not known & {first, second}
            assert evaluate([first, second, *board]) > hero

    def test_validates(self):
        with pytest.raises(DuplicateCards):
            beating_hands(*make_hand("As", "Kd", ["As", "Qh", "2c"]))


class TestDrawNotes:
    def test_flush_draw_note(self):
        hole, board = make_hand("Ah", "Kh", ["Qh", "7h", "2c"])
        notes = draw_notes(hole, board)
        assert "One card away from a flush in ♥" in notes
        assert "Potential to pair up with any of your hole cards" in notes

    def test_open_ended_preferred_over_gutshot(self):
        hole, board = make_hand("8c", "9d", ["Th", "Js", "2c"])
        notes = draw_notes(hole, board)
        assert "Open-ended straight draw" in notes
        assert "Gutshot straight draw" not in notes

    def test_made_straight_has_no_straight_draw(self):
        """Five in a row is not reported as a draw to the same straight."""
        hole, board = make_hand("5c", "6d", ["7h", "8s", "9c"])
        assert draw_notes(hole, board) == []

    def test_made_flush_skips_draw_notes(self):
        hole, board = make_hand("Ah", "Kh", ["Qh", "7h", "2h", "Jh"])
        notes = draw_notes(hole, board)
        assert not any("flush" in note or "straight" in note for note in notes)

    def test_one_ended_run_is_gutshot(self):
        hole, board = make_hand("Ac", "2d", ["3h", "4s", "9c"])
        assert "Gutshot straight draw" in draw_notes(hole, board)


class TestExplainEquity:
    """Test the multi-line explanation."""

    def test_nuts(self, nuts_hand):
        text = explain_equity(*nuts_hand, equity=1.0)
        assert "Current best hand: Four of a Kind (Aces)" in text
        assert "No possible hands can beat yours - you have the nuts!" in text
        assert "With this hand, you have a 100.0% chance of winning." in text
        assert "improvements" not in text

    def test_preflop(self, pocket_aces):
        text = explain_equity(*pocket_aces, equity=0.85)
        assert text.startswith("Your hand: A♠ A♥")
        assert "Add community cards" in text
        assert "85.0% chance of winning against a random hand." in text
        assert "Opponent possibilities" not in text

    def test_flop_with_draws(self):
        hole, board = make_hand("Ah", "Kh", ["Qh", "7h", "2c"])
        text = explain_equity(hole, board, equity=0.55)
        assert "Community cards: Q♥ 7♥ 2♣" in text
        assert "Current best hand: High Card (A)" in text
        assert "Hands that beat you now" in text
        assert "Your possible improvements:" in text
        assert "• One card away from a flush in ♥" in text

    def test_opponent_threats(self):
        hole, board = make_hand("Kc", "Kd", ["Qs", "Js", "2s"])
        text = explain_equity(hole, board, equity=0.6)
        assert "• Opponent could make a flush with suited ♠ cards" in text
        assert "• Opponent could have a higher pair" in text

    def test_no_clear_draws(self):
        hole, board = make_hand("Kc", "Kd", ["Ks", "2c", "2d"])
        text = explain_equity(hole, board, equity=0.99)
        assert "Current best hand: Full House (Kings full of Twos)" in text
        assert "No clear drawing opportunities" in text

    def test_listing_is_capped(self):
        hole, board = make_hand("2c", "7d", ["As", "Ks", "Qh"])
        total = len(beating_hands(hole, board))
        text = explain_equity(hole, board, equity=0.1, max_listed=3)
        assert f"Hands that beat you now ({total})" in text
        assert f"(+{total - 3} more)" in text

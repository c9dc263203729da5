"""Tests for Hand evaluation."""

import pytest
from hypothesis import given

from blackjack.cards import Card, Rank, Suit
from blackjack.hand import Hand, Outcome, determine_outcome, hand_value, is_busted
from conftest import cards, hand_strategy, make_hand


class TestHandValue:
    """Tests for the soft-ace scoring algorithm."""

    @pytest.mark.parametrize(
        "specs, expected",
        [
            (("AS", "AH", "9C"), 21),
            (("AS", "KH"), 21),
            (("10S", "9H", "5C"), 24),
            (("7S", "7H", "7C"), 21),
            (("AS", "AH", "AC", "8D"), 21),
            (("AS", "5H", "8C"), 14),
            (("AS", "AH"), 12),
            ((), 0),
        ],
    )
    def test_hand_value_table(self, specs, expected):
        """Test known soft and hard totals."""
        assert hand_value(cards(*specs)) == expected

    def test_bust_with_no_aces_to_demote(self):
        """Test that a hard 24 stays 24 and is busted."""
        hand = make_hand("10S", "9H", "5C")
        assert hand.value == 24
        assert hand.is_busted

    def test_soft_to_hard_transition(self):
        """Test ace switching from 11 to 1."""
        hand = Hand()
        hand.add_card(Card(Rank.ACE, Suit.SPADES))
        assert hand.value == 11
        assert hand.is_soft

        hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
        assert hand.value == 16
        assert hand.is_soft

        hand.add_card(Card(Rank.EIGHT, Suit.CLUBS))
        assert hand.value == 14
        assert not hand.is_soft

    def test_value_is_recomputed(self):
        """Test that the value follows the cards, not a cached number."""
        hand = make_hand("10S", "6H")
        assert hand.value == 16
        hand.cards.append(Card(Rank.FIVE, Suit.CLUBS))
        assert hand.value == 21
        hand.clear()
        assert hand.value == 0

    def test_str_marks_bust_and_soft(self):
        """Test hand descriptions."""
        assert str(make_hand("AS", "6H")).endswith("(soft 17)")
        assert str(make_hand("10S", "6H", "KC")).endswith("(BUST)")

    @given(hand_strategy())
    def test_busted_iff_over_21(self, hand):
        """Test is_busted agrees with the value for every hand."""
        assert is_busted(hand.cards) == (hand_value(hand.cards) > 21)
        assert hand.is_busted == (hand.value > 21)

    @given(hand_strategy())
    def test_value_is_best_total(self, hand):
        """Test the value is the highest total not over 21 when one exists."""
        aces = sum(1 for c in hand if c.is_ace)
        hard = sum(1 if c.is_ace else c.value for c in hand)
        totals = [hard + 10 * k for k in range(aces + 1)]
        safe = [t for t in totals if t <= 21]
        assert hand.value == (max(safe) if safe else hard)


class TestDetermineOutcome:
    """Tests for hand comparison."""

    def test_player_wins_higher_value(self):
        """Test player wins with higher value."""
        assert determine_outcome(make_hand("10S", "9H"), make_hand("10C", "8D")) is Outcome.WIN

    def test_dealer_wins_higher_value(self):
        """Test dealer wins with higher value."""
        assert determine_outcome(make_hand("10S", "7H"), make_hand("10C", "9D")) is Outcome.LOSE

    def test_push(self):
        """Test push (tie)."""
        assert determine_outcome(make_hand("10S", "8H"), make_hand("10C", "8D")) is Outcome.PUSH

    def test_player_bust_loses(self):
        """Test player busting loses."""
        player = make_hand("10S", "6H", "KC")
        assert determine_outcome(player, make_hand("10D", "7S")) is Outcome.LOSE

    def test_dealer_bust_player_wins(self):
        """Test dealer busting means player wins."""
        dealer = make_hand("10C", "6D", "KS")
        assert determine_outcome(make_hand("10S", "7H"), dealer) is Outcome.WIN

    def test_both_bust_player_loses(self):
        """Test both busting means player loses."""
        player = make_hand("10S", "6H", "KC")
        dealer = make_hand("10D", "6C", "QS")
        assert determine_outcome(player, dealer) is Outcome.LOSE

    def test_natural_is_not_special(self):
        """Test a two-card 21 ties a three-card 21."""
        assert determine_outcome(make_hand("AS", "KH"), make_hand("7C", "7D", "7S")) is Outcome.PUSH

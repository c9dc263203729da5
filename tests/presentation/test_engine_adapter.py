"""Tests for the engine adapter used by the pygame UI."""

import pytest

from blackjack.round.state import RoundState
from table_ui.core.engine_adapter import EngineAdapter


def tick_until(adapter, state, limit=500):
    """Update until the table reaches ``state``; return the ticks taken."""
    for ticks in range(1, limit + 1):
        if adapter.update() == state:
            return ticks
    raise AssertionError(f"table never reached {state}")


def tick_until_settled(adapter, limit=500):
    for _ in range(limit):
        adapter.update()
        if adapter.is_settled():
            return
    raise AssertionError("cards never settled")


@pytest.fixture
def adapter(stacked_table):
    """Adapter over a stacked table where the player's 19 beats a dealer 17."""
    table = stacked_table("10S", "10H", "9C", "7D")
    return EngineAdapter(table=table, width=1200, height=800, card_speed=40)


class TestSnapshot:
    """Tests for what the renderer sees."""

    def test_empty_table(self, adapter):
        """Test a table before the first deal."""
        snap = adapter.snapshot()
        assert snap.state == RoundState.BETTING
        assert snap.player_cards == []
        assert snap.dealer_cards == []
        assert snap.can_deal
        assert not snap.can_hit
        assert snap.balance == 1000

    def test_hole_card_face_down(self, adapter):
        """Test the dealer's second card is hidden while the player acts."""
        adapter.deal(100)
        snap = adapter.snapshot()

        assert [c.face_up for c in snap.dealer_cards] == [True, False]
        assert all(c.face_up for c in snap.player_cards)
        assert snap.dealer_total is None
        assert snap.player_total == 19
        assert snap.bet == 100

    def test_new_cards_start_at_deck(self, adapter):
        """Test cards not yet placed are drawn at the deck position."""
        adapter.deal(0)
        card = adapter.snapshot().player_cards[0]
        assert (card.x, card.y) == pytest.approx(adapter.layout.deck_position)

    def test_card_views_carry_layout_size(self, adapter):
        """Test each view is card-sized for the current surface."""
        adapter.deal(0)
        card = adapter.snapshot().player_cards[0]
        assert card.width == pytest.approx(80)
        assert card.height == pytest.approx(120)
        assert card.rank == "10"
        assert card.suit == "♠"
        assert not card.is_red

    def test_cards_move_towards_slots(self, adapter):
        """Test one tick moves a dealt card off the deck."""
        adapter.deal(0)
        adapter.update()
        card = adapter.snapshot().player_cards[0]
        assert (card.x, card.y) != pytest.approx(adapter.layout.deck_position)


class TestResolutionGate:
    """Tests for resolution waiting on card motion."""

    def test_round_waits_for_cards(self, adapter):
        """Test a stood round resolves only after the cards have landed."""
        adapter.deal(100)
        adapter.stand()

        assert adapter.update() == RoundState.DEALER_ACTING
        assert not adapter.is_settled()

        ticks = tick_until(adapter, RoundState.RESOLVED)

        assert ticks > 1
        assert adapter.is_settled()
        assert adapter.snapshot().message == "You win!"
        assert adapter.snapshot().balance == 1100

    def test_fast_cards_resolve_on_first_tick(self, stacked_table):
        """Test cards that snap at once do not hold the round."""
        table = stacked_table("10S", "10H", "9C", "7D")
        adapter = EngineAdapter(table=table, card_speed=5000)
        adapter.deal(0)
        adapter.stand()

        assert adapter.update() == RoundState.RESOLVED

    def test_round_ended_callback(self, adapter):
        """Test the UI hears about the result with its message."""
        messages = []
        adapter.set_callbacks(on_round_ended=messages.append)
        adapter.deal(100)
        adapter.stand()

        tick_until(adapter, RoundState.RESOLVED)

        assert messages == ["You win!"]

    def test_invalid_action_callback(self, adapter):
        """Test rejected actions and refused bets reach the UI."""
        errors = []
        adapter.set_callbacks(on_invalid_action=errors.append)

        adapter.hit()
        adapter.deal(5000)

        assert errors[0] == "Cannot hit now"
        assert errors[1].startswith("Insufficient balance")


class TestActions:
    """Tests for actions routed through the adapter."""

    def test_deal_after_resolution_resets(self, adapter):
        """Test dealing again starts a fresh round."""
        adapter.deal(100)
        adapter.stand()
        tick_until(adapter, RoundState.RESOLVED)

        assert adapter.deal(100)

        snap = adapter.snapshot()
        assert snap.state == RoundState.PLAYER_ACTING
        assert len(snap.player_cards) == 2
        assert snap.message is None

    def test_reset_forgets_old_cards(self, adapter):
        """Test the motion map only holds cards still on the table."""
        adapter.deal(0)
        adapter.stand()
        tick_until(adapter, RoundState.RESOLVED)
        adapter.deal(0)
        adapter.update()

        assert len(adapter.motion) == 4

    def test_hit_routes_to_table(self, adapter):
        """Test a hit adds a player card."""
        adapter.deal(0)
        assert adapter.hit()
        assert len(adapter.snapshot().player_cards) == 3


class TestResize:
    """Tests for window resizing."""

    def test_resize_rebuilds_layout(self, adapter):
        """Test card size follows the new width."""
        adapter.resize(600, 400)
        assert adapter.layout.card_width == pytest.approx(40)

    def test_resize_retargets_landed_cards(self, adapter):
        """Test landed cards travel to their new slots."""
        adapter.deal(0)
        tick_until_settled(adapter)

        adapter.resize(600, 400)
        adapter.update()

        assert not adapter.is_settled()
        tick_until_settled(adapter)
        player_slots = adapter.layout.hand_positions("player", 2)
        card = adapter.snapshot().player_cards[0]
        assert (card.x, card.y) == pytest.approx(player_slots[0])

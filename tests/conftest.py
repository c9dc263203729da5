"""Pytest fixtures for blackjack table tests."""

from random import Random

import pytest
from hypothesis import strategies as st

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand
from blackjack.player import Player
from blackjack.round.table import Table


def cards(*specs: str) -> list[Card]:
    """Build cards from strings like 'AS', '10H', 'KC'."""
    return [Card.from_string(spec) for spec in specs]


def make_hand(*specs: str) -> Hand:
    return Hand(cards(*specs))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def player():
    """A player with the default stake."""
    return Player()


@pytest.fixture
def table(rng):
    """A table dealing from a seeded shuffled deck."""
    return Table(rng=rng)


@pytest.fixture
def stacked_table():
    """Factory for a table whose deck deals the given cards in order.

    The opening deal goes player, dealer, player, dealer; hits follow.
    """

    def _make(*specs: str, starting_balance: int = 1000, **kwargs) -> Table:
        return Table(
            deck_factory=lambda rng: Deck.from_cards(cards(*specs), rng=rng),
            seed=7,
            starting_balance=starting_balance,
            **kwargs,
        )

    return _make


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=1, max_cards=8):
    """Generate a random hand."""
    return Hand(draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards)))

"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from blackjack.cards import Card

BUST_LIMIT = 21


def hand_value(cards: Iterable[Card]) -> int:
    """
    Calculate the best value of a set of cards.

    Every Ace starts at 11; Aces are demoted to 1 one at a time while the
    total is over 21.
    """
    total = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
        total += card.value

    while total > BUST_LIMIT and aces > 0:
        total -= 10
        aces -= 1

    return total


def is_busted(cards: Iterable[Card]) -> bool:
    """Check if a set of cards is over 21."""
    return hand_value(cards) > BUST_LIMIT


@dataclass
class Hand:
    """An ordered hand of dealt cards. Values are never cached."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def value(self) -> int:
        return hand_value(self.cards)

    @property
    def is_busted(self) -> bool:
        return is_busted(self.cards)

    @property
    def is_soft(self) -> bool:
        """
        Check if the hand is soft (has an ace counted as 11).

        A hand is soft if it contains an ace that can be counted as 11
        without busting.
        """
        if not any(card.is_ace for card in self.cards):
            return False

        total_hard = sum(1 if card.is_ace else card.value for card in self.cards)
        return total_hard + 10 <= BUST_LIMIT

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


class Outcome(Enum):
    """Result of a round from the player's point of view."""

    WIN = "win"
    LOSE = "lose"
    PUSH = "push"


def determine_outcome(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Compare player and dealer hands once both are done acting.

    A busted player loses even if the dealer also busts.
    """
    if player_hand.is_busted:
        return Outcome.LOSE

    if dealer_hand.is_busted:
        return Outcome.WIN

    player_value = player_hand.value
    dealer_value = dealer_hand.value
    if player_value > dealer_value:
        return Outcome.WIN
    if player_value < dealer_value:
        return Outcome.LOSE
    return Outcome.PUSH

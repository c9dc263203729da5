"""Core blackjack engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Rank, Suit, blackjack_value
from blackjack.hand import Hand, Outcome, determine_outcome, hand_value, is_busted
from blackjack.player import InsufficientBalance, Player

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "blackjack_value",
    "Hand",
    "Outcome",
    "determine_outcome",
    "hand_value",
    "is_busted",
    "InsufficientBalance",
    "Player",
]

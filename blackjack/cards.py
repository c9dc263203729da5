"""Card and Deck classes - immutable card representations."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

DECK_SIZE = 52


class Suit(Enum):
    """Card suits."""

    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(Enum):
    """Card ranks in deck order, 2 through Ace."""

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
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        return blackjack_value(self)

    @property
    def is_ace(self) -> bool:
        return self == Rank.ACE


def blackjack_value(rank: Rank) -> int:
    """
    Return the base blackjack value of a rank.

    Aces count 11 here; demoting an Ace to 1 is decided by the hand,
    never stored on the card.
    """
    if rank.value <= 10:
        return rank.value
    if rank == Rank.ACE:
        return 11
    return 10  # Face cards


_RANK_MAP = {
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

_SUIT_MAP = {
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the base blackjack value."""
        return blackjack_value(self.rank)

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_MAP:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_MAP:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_MAP[rank_str], _SUIT_MAP[suit_str])


class Deck:
    """
    A standard 52-card deck that never runs dry.

    Dealing from an empty deck refills it to all 52 cards and reshuffles
    before the deal proceeds, so in practice it behaves as an infinite shoe
    rather than single-deck play.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new deck in order (call shuffle() to randomize)."""
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reshuffles = 0
        self.reset()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """
        Build a deck that deals the given cards in order.

        The first card is the top of the deck. Once they are used up the
        deck refills like any other.
        """
        deck = cls(rng=rng)
        deck._cards = list(reversed(list(cards)))
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """Shuffle the remaining cards (Fisher-Yates via Random.shuffle)."""
        self._rng.shuffle(self._cards)

    def deal(self) -> Card:
        """Deal a card from the top, refilling and reshuffling when empty."""
        if not self._cards:
            self.reset()
            self.shuffle()
            self.reshuffles += 1
            logger.debug("Deck exhausted, refilled and reshuffled (%d)", self.reshuffles)
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)


def shuffled_deck(rng: Random | None = None) -> Deck:
    """Default deck factory: a full deck, already shuffled."""
    deck = Deck(rng=rng)
    deck.shuffle()
    return deck

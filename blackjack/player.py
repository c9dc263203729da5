"""Player state: a hand, a balance and an escrowed bet."""

from dataclasses import dataclass, field

from blackjack.cards import Card, Deck
from blackjack.hand import Hand, Outcome, determine_outcome

DEFAULT_STAKE = 10000


class InsufficientBalance(ValueError):
    """Raised when a bet exceeds the player's balance."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(f"Insufficient balance to place bet: {required} > {available}")
        self.required = required
        self.available = available


@dataclass
class Player:
    """
    A participant at the table (the dealer is a Player too).

    Placing a bet moves chips out of ``balance`` into ``bet``; settling moves
    winnings back. ``balance + bet`` is therefore unchanged by placing a bet.
    """

    name: str = "Player"
    balance: int = DEFAULT_STAKE
    hand: Hand = field(default_factory=Hand)
    bet: int = 0
    standing: bool = False
    stake: int = field(init=False)

    def __post_init__(self) -> None:
        assert self.balance >= 0, "balance must start non-negative"
        self.stake = self.balance

    def draw_card(self, deck: Deck) -> Card:
        """Take the top card of the deck into this player's hand."""
        card = deck.deal()
        self.hand.add_card(card)
        return card

    def reset_hand(self) -> None:
        """Clear the hand and standing flag for a new round."""
        self.hand.clear()
        self.standing = False

    def place_bet(self, amount: int) -> None:
        """
        Move ``amount`` from balance into the current bet.

        Raises:
            ValueError: if amount is negative
            InsufficientBalance: if amount exceeds the balance; nothing changes
        """
        if amount < 0:
            raise ValueError(f"Bet must not be negative: {amount}")
        if amount > self.balance:
            raise InsufficientBalance(required=amount, available=self.balance)

        self.balance -= amount
        self.bet += amount
        assert self.balance >= 0

    def win(self, multiplier: int = 2) -> int:
        """Pay out ``bet * multiplier`` (2 returns the stake plus even money)."""
        winnings = self.bet * multiplier
        self.balance += winnings
        self.bet = 0
        return winnings

    def push(self) -> int:
        """Return the stake without profit."""
        returned = self.bet
        self.balance += returned
        self.bet = 0
        return returned

    def lose(self) -> int:
        """Forfeit the bet (it already left the balance when placed)."""
        lost = self.bet
        self.bet = 0
        return lost

    @property
    def hand_value(self) -> int:
        return self.hand.value

    @property
    def is_busted(self) -> bool:
        return self.hand.is_busted

    @property
    def net(self) -> int:
        """Winnings (or losses) relative to the starting stake."""
        return self.balance + self.bet - self.stake

    def outcome_against(self, dealer: "Player") -> Outcome:
        return determine_outcome(self.hand, dealer.hand)

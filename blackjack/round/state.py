"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: BETTING → PLAYER_ACTING → DEALER_ACTING → RESOLVED → BETTING
    """

    # Hands empty, waiting for a bet and the opening deal
    BETTING = auto()

    # Player may hit or stand
    PLAYER_ACTING = auto()

    # Dealer draws to 17, then waits for the cards to land
    DEALER_ACTING = auto()

    # Outcome settled; no actions until reset
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

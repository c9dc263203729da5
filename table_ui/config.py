"""Configuration constants for the pygame table UI."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Colors:
    """Color palette for the blackjack table."""

    # Felt
    FELT_GREEN: Tuple[int, int, int] = (0, 100, 0)
    FELT_DARK: Tuple[int, int, int] = (0, 70, 0)

    # Card colors
    CARD_WHITE: Tuple[int, int, int] = (245, 243, 238)
    CARD_RED: Tuple[int, int, int] = (192, 57, 57)
    CARD_BLACK: Tuple[int, int, int] = (28, 28, 32)
    CARD_BACK: Tuple[int, int, int] = (65, 85, 130)
    CARD_BACK_PATTERN: Tuple[int, int, int] = (85, 105, 150)
    CARD_BORDER: Tuple[int, int, int] = (40, 40, 48)
    CARD_SHADOW: Tuple[int, int, int, int] = (0, 0, 0, 80)

    # UI accents
    GOLD: Tuple[int, int, int] = (255, 200, 87)

    # Text
    TEXT_WHITE: Tuple[int, int, int] = (240, 240, 240)
    TEXT_MUTED: Tuple[int, int, int] = (170, 190, 170)

    # Buttons
    BUTTON_DEFAULT: Tuple[int, int, int] = (60, 70, 90)
    BUTTON_HOVER: Tuple[int, int, int] = (80, 95, 120)
    BUTTON_PRESSED: Tuple[int, int, int] = (45, 55, 70)
    BUTTON_DISABLED: Tuple[int, int, int] = (50, 50, 55)

    # Action buttons
    BUTTON_DEAL: Tuple[int, int, int] = (60, 80, 110)
    BUTTON_DEAL_HOVER: Tuple[int, int, int] = (80, 105, 140)
    BUTTON_HIT: Tuple[int, int, int] = (60, 100, 60)
    BUTTON_HIT_HOVER: Tuple[int, int, int] = (80, 130, 80)
    BUTTON_STAND: Tuple[int, int, int] = (100, 60, 60)
    BUTTON_STAND_HOVER: Tuple[int, int, int] = (130, 80, 80)


@dataclass(frozen=True)
class Dimensions:
    """Layout ratios; absolute sizes are derived from the surface every tick."""

    # Cards: width = surface width / divisor, height = width * aspect
    CARD_WIDTH_DIVISOR: float = 15.0
    CARD_ASPECT: float = 1.5
    CARD_MARGIN: int = 10
    CARD_CORNER_RADIUS: int = 6

    # Hand rows as fractions of surface height
    DEALER_ROW: float = 0.12
    PLAYER_ROW: float = 0.52

    # Buttons
    BUTTON_WIDTH: int = 120
    BUTTON_HEIGHT: int = 45
    BUTTON_CORNER_RADIUS: int = 6
    BUTTON_ROW: float = 0.88


# Global instances for easy import
COLORS = Colors()
DIMENSIONS = Dimensions()

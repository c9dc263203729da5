"""Table layout derived from the current surface size."""

from dataclasses import dataclass
from typing import List, Tuple

from table_ui.config import DIMENSIONS


@dataclass(frozen=True)
class TableLayout:
    """Card size and hand slots for a surface of the given size.

    The adapter creates a fresh one every tick so a resized
    window is picked up immediately. Positions are top-left corners.
    """

    width: float
    height: float

    @property
    def card_width(self) -> float:
        return self.width / DIMENSIONS.CARD_WIDTH_DIVISOR

    @property
    def card_height(self) -> float:
        return self.card_width * DIMENSIONS.CARD_ASPECT

    @property
    def card_size(self) -> Tuple[float, float]:
        return (self.card_width, self.card_height)

    @property
    def spacing(self) -> float:
        """Horizontal distance between neighbouring cards in a hand."""
        return self.card_width + DIMENSIONS.CARD_MARGIN

    @property
    def deck_position(self) -> Tuple[float, float]:
        """Where new cards appear (top right corner)."""
        margin = DIMENSIONS.CARD_MARGIN * 2
        return (self.width - self.card_width - margin, margin)

    def row_y(self, role: str) -> float:
        """Top edge of the dealer's or player's hand."""
        if role == "dealer":
            return self.height * DIMENSIONS.DEALER_ROW
        return self.height * DIMENSIONS.PLAYER_ROW

    def fan_positions(self, count: int, y: float) -> List[Tuple[float, float]]:
        """Slots for ``count`` cards, fanned out and centered horizontally."""
        if count <= 0:
            return []
        total_width = (count - 1) * self.spacing + self.card_width
        start_x = (self.width - total_width) / 2
        return [(start_x + i * self.spacing, y) for i in range(count)]

    def hand_positions(self, role: str, count: int) -> List[Tuple[float, float]]:
        return self.fan_positions(count, self.row_y(role))

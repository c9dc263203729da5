"""Card motion: per-tick stepping of dealt cards towards their layout slots."""

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from blackjack.cards import Card
from table_ui.utils.math_utils import step_toward

Point = Tuple[float, float]


@dataclass
class CardMotion:
    """Position of one card on screen and the slot it is travelling to.

    Each step moves ``speed`` pixels along the straight line to the goal.
    Once the card is within half a step of the goal on both axes it snaps
    into place and stops waiting.
    """

    x: float
    y: float
    goal_x: float
    goal_y: float
    speed: float
    waiting: bool = True

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @property
    def goal(self) -> Point:
        return (self.goal_x, self.goal_y)

    def set_goal(self, goal: Point) -> None:
        """Retarget the card; a moved goal puts it back in flight."""
        if goal != self.goal:
            self.goal_x, self.goal_y = goal
            self.waiting = True

    def step(self) -> bool:
        """Advance one tick.

        Returns:
            True while the card is still travelling
        """
        half = self.speed / 2
        if abs(self.goal_x - self.x) > half or abs(self.goal_y - self.y) > half:
            self.x, self.y = step_toward(self.position, self.goal, self.speed)
            self.waiting = True
        else:
            self.x, self.y = self.goal
            self.waiting = False
        return self.waiting


class MotionTracker:
    """Presentation-side position map, keyed by card identity.

    Cards are domain values and know nothing about pixels; the tracker holds
    one CardMotion per dealt card object for as long as that card is on the
    table.
    """

    def __init__(self, speed: float):
        self.speed = speed
        self._motions: Dict[int, Tuple[Card, CardMotion]] = {}

    def track(self, card: Card, start: Point, goal: Point) -> CardMotion:
        """Start tracking a card at ``start`` (if new) and aim it at ``goal``."""
        entry = self._motions.get(id(card))
        if entry is None:
            motion = CardMotion(
                x=start[0],
                y=start[1],
                goal_x=goal[0],
                goal_y=goal[1],
                speed=self.speed,
            )
            self._motions[id(card)] = (card, motion)
            return motion

        motion = entry[1]
        motion.set_goal(goal)
        return motion

    def motion_for(self, card: Card) -> CardMotion | None:
        entry = self._motions.get(id(card))
        return entry[1] if entry else None

    def step(self) -> None:
        """Advance every tracked card by one tick."""
        for _, motion in self._motions.values():
            motion.step()

    def hand_is_waiting(self, cards: Iterable[Card]) -> bool:
        """True if any card in the hand has not arrived (untracked cards count)."""
        for card in cards:
            motion = self.motion_for(card)
            if motion is None or motion.waiting:
                return True
        return False

    def prune(self, live_cards: Iterable[Card]) -> None:
        """Forget cards that are no longer on the table."""
        live = {id(card) for card in live_cards}
        self._motions = {key: entry for key, entry in self._motions.items() if key in live}

    def clear(self) -> None:
        self._motions.clear()

    def __len__(self) -> int:
        return len(self._motions)

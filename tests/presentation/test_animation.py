"""Tests for card motion."""

import math

import pytest

from blackjack.cards import Card
from table_ui.core.animation import CardMotion, MotionTracker
from table_ui.utils.math_utils import bearing, clamp, step_toward


class TestMathUtils:
    """Tests for geometry helpers."""

    def test_bearing(self):
        """Test angles along the axes."""
        assert bearing((0, 0), (10, 0)) == 0
        assert bearing((0, 0), (0, 10)) == pytest.approx(math.pi / 2)
        assert bearing((0, 0), (-10, 0)) == pytest.approx(math.pi)

    def test_step_toward_diagonal(self):
        """Test a 3-4-5 step."""
        x, y = step_toward((0, 0), (300, 400), 50)
        assert x == pytest.approx(30)
        assert y == pytest.approx(40)

    def test_clamp(self):
        """Test clamping to a range."""
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10


class TestCardMotion:
    """Tests for one card travelling to its slot."""

    def test_steps_then_snaps(self):
        """Test a card moves by speed each tick and snaps within half a step."""
        motion = CardMotion(x=0, y=0, goal_x=100, goal_y=0, speed=40)

        assert motion.step()
        assert motion.position == pytest.approx((40, 0))
        assert motion.step()
        assert motion.position == pytest.approx((80, 0))

        assert not motion.step()
        assert motion.position == (100, 0)
        assert not motion.waiting

    def test_snaps_only_when_close_on_both_axes(self):
        """Test one distant axis keeps the card moving."""
        motion = CardMotion(x=0, y=0, goal_x=5, goal_y=100, speed=20)
        assert motion.step()
        assert motion.waiting

    def test_card_at_goal_stops_waiting(self):
        """Test a card already in place finishes on its first tick."""
        motion = CardMotion(x=10, y=10, goal_x=10, goal_y=10, speed=40)
        assert motion.waiting
        assert not motion.step()

    def test_moves_along_bearing(self):
        """Test the step follows the straight line to the goal."""
        motion = CardMotion(x=0, y=0, goal_x=300, goal_y=400, speed=50)
        motion.step()
        assert motion.x == pytest.approx(30)
        assert motion.y == pytest.approx(40)

    def test_new_goal_restarts_travel(self):
        """Test retargeting a landed card sets it waiting again."""
        motion = CardMotion(x=0, y=0, goal_x=0, goal_y=0, speed=40)
        motion.step()
        assert not motion.waiting

        motion.set_goal((200, 0))
        assert motion.waiting

        motion.set_goal((200, 0))
        assert motion.goal == (200, 0)

    def test_same_goal_keeps_state(self):
        """Test an unchanged goal does not restart a landed card."""
        motion = CardMotion(x=0, y=0, goal_x=0, goal_y=0, speed=40)
        motion.step()
        motion.set_goal((0, 0))
        assert not motion.waiting

    @pytest.mark.parametrize("speed", [5, 17, 40, 123])
    def test_always_arrives(self, speed):
        """Test any speed reaches the goal in a bounded number of ticks."""
        motion = CardMotion(x=900, y=20, goal_x=100, goal_y=500, speed=speed)
        distance = math.hypot(800, 480)
        for _ in range(int(distance / speed) + 2):
            if not motion.step():
                break
        assert motion.position == (100, 500)


class TestMotionTracker:
    """Tests for the identity-keyed position map."""

    def test_track_new_card_starts_at_start(self):
        """Test the first track places the card at the start point."""
        tracker = MotionTracker(speed=40)
        card = Card.from_string("AS")

        motion = tracker.track(card, start=(500, 0), goal=(0, 0))

        assert motion.position == (500, 0)
        assert tracker.motion_for(card) is motion
        assert len(tracker) == 1

    def test_track_existing_card_retargets(self):
        """Test tracking again keeps the position and updates the goal."""
        tracker = MotionTracker(speed=40)
        card = Card.from_string("AS")
        tracker.track(card, start=(500, 0), goal=(0, 0))
        tracker.step()

        motion = tracker.track(card, start=(500, 0), goal=(100, 0))

        assert motion.position == pytest.approx((460, 0))
        assert motion.goal == (100, 0)

    def test_equal_cards_tracked_separately(self):
        """Test two equal card values are two cards on the table."""
        tracker = MotionTracker(speed=40)
        first = Card.from_string("7H")
        second = Card.from_string("7H")
        assert first == second

        tracker.track(first, start=(0, 0), goal=(0, 0))
        tracker.track(second, start=(0, 0), goal=(400, 0))
        tracker.step()

        assert not tracker.motion_for(first).waiting
        assert tracker.motion_for(second).waiting
        assert len(tracker) == 2

    def test_untracked_card_counts_as_waiting(self):
        """Test a hand with a card not yet placed is still waiting."""
        tracker = MotionTracker(speed=40)
        assert tracker.hand_is_waiting([Card.from_string("2C")])
        assert not tracker.hand_is_waiting([])

    def test_hand_waits_until_every_card_lands(self):
        """Test hand_is_waiting follows the slowest card."""
        tracker = MotionTracker(speed=40)
        near = Card.from_string("2C")
        far = Card.from_string("3C")
        tracker.track(near, start=(0, 0), goal=(10, 0))
        tracker.track(far, start=(0, 0), goal=(100, 0))

        tracker.step()
        assert tracker.hand_is_waiting([near, far])
        assert not tracker.hand_is_waiting([near])

        for _ in range(3):
            tracker.step()
        assert not tracker.hand_is_waiting([near, far])

    def test_prune_forgets_removed_cards(self):
        """Test cards no longer on the table are dropped."""
        tracker = MotionTracker(speed=40)
        kept = Card.from_string("KD")
        gone = Card.from_string("QD")
        tracker.track(kept, start=(0, 0), goal=(0, 0))
        tracker.track(gone, start=(0, 0), goal=(0, 0))

        tracker.prune([kept])

        assert tracker.motion_for(gone) is None
        assert tracker.motion_for(kept) is not None

        tracker.clear()
        assert len(tracker) == 0

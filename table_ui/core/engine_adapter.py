"""Adapter connecting the round engine to the pygame UI."""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from blackjack.player import Player
from blackjack.round.events import EventType, GameEvent
from blackjack.round.state import RoundState
from blackjack.round.table import Table
from table_ui.core.animation import MotionTracker
from table_ui.core.layout import TableLayout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardView:
    """One card as the renderer sees it."""

    rank: str  # "A", "2", "K", etc.
    suit: str  # "♥", "♠", ...
    is_red: bool
    x: float
    y: float
    width: float
    height: float
    face_up: bool = True


@dataclass(frozen=True)
class TableSnapshot:
    """Read-only snapshot of the table for one draw pass."""

    state: RoundState
    player_cards: List[CardView]
    dealer_cards: List[CardView]
    player_total: int
    player_soft: bool
    dealer_total: Optional[int]  # None while the hole card is hidden
    balance: int
    bet: int
    message: Optional[str]
    can_hit: bool
    can_stand: bool
    can_deal: bool


class EngineAdapter:
    """Adapter between the core Table and the pygame UI.

    Owns the motion tracker and guards the table's final transition with it,
    so a round only reports its result once every card has landed.
    """

    def __init__(
        self,
        table: Optional[Table] = None,
        width: float = 1200,
        height: float = 800,
        card_speed: float = 40,
        starting_balance: int = 10000,
        seed: Optional[int] = None,
    ):
        """Initialize the adapter.

        Args:
            table: Engine to drive (a new seeded one if not provided)
            width: Initial surface width
            height: Initial surface height
            card_speed: Pixels a card travels per tick
            starting_balance: Player stake for a new table
            seed: Seed for a new table's shuffles
        """
        self.table = table or Table(seed=seed, starting_balance=starting_balance)
        self.table.is_presentation_settled = self.is_settled
        self.motion = MotionTracker(card_speed)
        self.width = width
        self.height = height

        self._on_round_ended: Optional[Callable[[str], None]] = None
        self._on_invalid_action: Optional[Callable[[str], None]] = None
        self.table.subscribe(self._handle_event)

    def set_callbacks(
        self,
        on_round_ended: Optional[Callable[[str], None]] = None,
        on_invalid_action: Optional[Callable[[str], None]] = None,
    ) -> None:
        """Set UI callbacks for engine events."""
        self._on_round_ended = on_round_ended
        self._on_invalid_action = on_invalid_action

    def _handle_event(self, event: GameEvent) -> None:
        etype = event.event_type
        data = event.data

        if etype == EventType.ROUND_ENDED:
            if self._on_round_ended:
                self._on_round_ended(self.table.message or "")
        elif etype == EventType.INVALID_ACTION:
            if self._on_invalid_action:
                self._on_invalid_action(data.get("message", "Invalid action"))
        elif etype == EventType.INSUFFICIENT_FUNDS:
            if self._on_invalid_action:
                self._on_invalid_action(
                    f"Insufficient balance: {data.get('required')} > {data.get('available')}"
                )

    # Layout and ticking

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    @property
    def layout(self) -> TableLayout:
        """Layout for the current surface, rebuilt on every access."""
        return TableLayout(self.width, self.height)

    def update(self) -> RoundState:
        """One engine tick: retarget cards, step them, then update the table."""
        self._sync_motion(self.layout)
        self.motion.step()
        return self.table.update()

    def _sync_motion(self, layout: TableLayout) -> None:
        live = self.table.player.hand.cards + self.table.dealer.hand.cards
        self.motion.prune(live)

        for role, player in self._hands():
            goals = layout.hand_positions(role, len(player.hand))
            for card, goal in zip(player.hand.cards, goals):
                self.motion.track(card, start=layout.deck_position, goal=goal)

    def is_settled(self) -> bool:
        """True when neither hand has a card still in flight."""
        return not (
            self.motion.hand_is_waiting(self.table.player.hand)
            or self.motion.hand_is_waiting(self.table.dealer.hand)
        )

    # Actions

    def deal(self, bet: int) -> bool:
        """Start the next round with ``bet``."""
        if self.table.state == RoundState.BETTING:
            return self.table.deal(bet)
        return self.table.reset(bet)

    def hit(self) -> bool:
        return self.table.hit()

    def stand(self) -> bool:
        return self.table.stand()

    # Rendering

    def snapshot(self) -> TableSnapshot:
        """Build a snapshot for rendering; reads state only."""
        table = self.table
        layout = self.layout
        dealer_cards = self._card_views(table.dealer, layout, hide_hole=table.hole_card_hidden)
        player_cards = self._card_views(table.player, layout, hide_hole=False)

        return TableSnapshot(
            state=table.state,
            player_cards=player_cards,
            dealer_cards=dealer_cards,
            player_total=table.player.hand_value,
            player_soft=table.player.hand.is_soft,
            dealer_total=table.dealer_total,
            balance=table.player.balance,
            bet=table.player.bet,
            message=table.message,
            can_hit=table.can_hit,
            can_stand=table.can_stand,
            can_deal=table.can_deal,
        )

    def _hands(self):
        return (("dealer", self.table.dealer), ("player", self.table.player))

    def _card_views(self, player: Player, layout: TableLayout, hide_hole: bool) -> List[CardView]:
        width, height = layout.card_size
        views = []
        for index, card in enumerate(player.hand.cards):
            motion = self.motion.motion_for(card)
            x, y = motion.position if motion else layout.deck_position
            views.append(
                CardView(
                    rank=str(card.rank),
                    suit=str(card.suit),
                    is_red=card.suit.is_red,
                    x=x,
                    y=y,
                    width=width,
                    height=height,
                    face_up=not (hide_hole and index == 1),
                )
            )
        return views

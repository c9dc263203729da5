"""Blackjack table scene - integrated with the round engine."""

import logging
from typing import List, Optional

import pygame

from blackjack.round.state import RoundState
from table_ui.components.button import ActionButton, Button
from table_ui.components.card import CardSprite
from table_ui.config import COLORS, DIMENSIONS
from table_ui.core.engine_adapter import EngineAdapter, TableSnapshot
from table_ui.scenes.base_scene import BaseScene
from table_ui.utils.math_utils import clamp

logger = logging.getLogger(__name__)

STATUS_SECONDS = 2.5


class TableScene(BaseScene):
    """The one-table blackjack scene: deal, hit, stand and adjust the bet."""

    def __init__(self, engine: EngineAdapter, default_bet: int = 100, bet_step: int = 50):
        super().__init__()
        self.engine = engine
        self.current_bet = default_bet
        self.bet_step = bet_step

        self.buttons: List[Button] = []
        self.deal_button: Optional[ActionButton] = None
        self.hit_button: Optional[ActionButton] = None
        self.stand_button: Optional[ActionButton] = None

        self._status: str = ""
        self._status_time = 0.0
        self._fonts: dict = {}

    def on_enter(self) -> None:
        """Initialize buttons and engine callbacks."""
        super().on_enter()
        self.engine.set_callbacks(
            on_round_ended=self._on_round_ended,
            on_invalid_action=self._show_status,
        )
        self._setup_buttons()

    def _setup_buttons(self) -> None:
        self.deal_button = ActionButton(
            0, 0, "DEAL", action="deal", on_click=self._on_deal, hotkey="N",
            bg_color=COLORS.BUTTON_DEAL, hover_color=COLORS.BUTTON_DEAL_HOVER,
        )
        self.hit_button = ActionButton(
            0, 0, "HIT", action="hit", on_click=self._on_hit, hotkey="H",
            bg_color=COLORS.BUTTON_HIT, hover_color=COLORS.BUTTON_HIT_HOVER,
        )
        self.stand_button = ActionButton(
            0, 0, "STAND", action="stand", on_click=self._on_stand, hotkey="S",
            bg_color=COLORS.BUTTON_STAND, hover_color=COLORS.BUTTON_STAND_HOVER,
        )
        bet_minus = Button(0, 0, "-", on_click=lambda: self._adjust_bet(-1), width=45, font_size=32)
        bet_plus = Button(0, 0, "+", on_click=lambda: self._adjust_bet(1), width=45, font_size=32)

        self.buttons = [self.deal_button, self.hit_button, self.stand_button, bet_minus, bet_plus]
        self._position_buttons()

    def _position_buttons(self) -> None:
        if not self.buttons:
            return
        y = self.height * DIMENSIONS.BUTTON_ROW
        center_x = self.width / 2
        spacing = DIMENSIONS.BUTTON_WIDTH + 20
        offsets = [-1.5, -0.5, 0.5]
        for button, offset in zip(self.buttons[:3], offsets):
            button.set_center(center_x + offset * spacing, y)

        bet_minus, bet_plus = self.buttons[3:]
        bet_minus.set_center(center_x + 1.5 * spacing - 30, y)
        bet_plus.set_center(center_x + 1.5 * spacing + 30, y)

    def resize(self, width: int, height: int) -> None:
        super().resize(width, height)
        self.engine.resize(width, height)
        self._position_buttons()

    # Engine callbacks

    def _on_round_ended(self, message: str) -> None:
        logger.debug("Round ended: %s", message)
        # Keep the next bet affordable
        self.current_bet = int(clamp(self.current_bet, 0, self.engine.table.player.balance))

    def _show_status(self, message: str) -> None:
        self._status = message
        self._status_time = STATUS_SECONDS

    # Player actions

    def _on_deal(self) -> None:
        self.engine.deal(self.current_bet)

    def _on_hit(self) -> None:
        self.engine.hit()

    def _on_stand(self) -> None:
        self.engine.stand()

    def _adjust_bet(self, direction: int) -> None:
        if not self.engine.table.can_deal:
            return
        balance = self.engine.table.player.balance
        self.current_bet = int(clamp(self.current_bet + direction * self.bet_step, 0, balance))

    # Main loop

    def handle_event(self, event: pygame.event.Event) -> bool:
        for button in self.buttons:
            if button.handle_event(event):
                return True

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_h:
                self._on_hit()
            elif event.key == pygame.K_s:
                self._on_stand()
            elif event.key in (pygame.K_n, pygame.K_SPACE):
                self._on_deal()
            elif event.key == pygame.K_UP:
                self._adjust_bet(1)
            elif event.key == pygame.K_DOWN:
                self._adjust_bet(-1)
            else:
                return False
            return True

        return False

    def update(self, dt: float) -> None:
        self.engine.update()

        table = self.engine.table
        self.deal_button.set_enabled(table.can_deal)
        self.hit_button.set_enabled(table.can_hit)
        self.stand_button.set_enabled(table.can_stand)
        for button in self.buttons:
            button.update(dt)

        if self._status_time > 0:
            self._status_time = max(0.0, self._status_time - dt)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _draw_text(self, surface, text, pos, size=28, color=COLORS.TEXT_WHITE, center=False):
        rendered = self._font(size).render(text, True, color)
        rect = rendered.get_rect(center=pos) if center else rendered.get_rect(topleft=pos)
        surface.blit(rendered, rect)

    def draw(self, surface: pygame.Surface) -> None:
        snapshot = self.engine.snapshot()
        layout = self.engine.layout

        surface.fill(COLORS.FELT_GREEN)

        for view in snapshot.dealer_cards + snapshot.player_cards:
            CardSprite(view).draw(surface)

        self._draw_totals(surface, snapshot, layout.card_height)
        self._draw_bankroll(surface, snapshot)

        if snapshot.message:
            self._draw_text(
                surface,
                snapshot.message,
                (self.width / 2, self.height * 0.42),
                size=56,
                color=COLORS.GOLD,
                center=True,
            )

        for button in self.buttons:
            button.draw(surface)

        if self._status_time > 0:
            self._draw_text(
                surface,
                self._status,
                (self.width / 2, self.height * 0.97),
                size=24,
                color=COLORS.TEXT_MUTED,
                center=True,
            )

    def _draw_totals(self, surface: pygame.Surface, snapshot: TableSnapshot, card_height: float) -> None:
        layout = self.engine.layout
        center_x = self.width / 2

        if snapshot.dealer_cards:
            dealer_label = "Dealer: ?" if snapshot.dealer_total is None else f"Dealer: {snapshot.dealer_total}"
            self._draw_text(
                surface, dealer_label,
                (center_x, layout.row_y("dealer") + card_height + 18), center=True,
            )

        if snapshot.player_cards:
            soft = "soft " if snapshot.player_soft and snapshot.player_total <= 21 else ""
            self._draw_text(
                surface, f"You: {soft}{snapshot.player_total}",
                (center_x, layout.row_y("player") + card_height + 18), center=True,
            )

    def _draw_bankroll(self, surface: pygame.Surface, snapshot: TableSnapshot) -> None:
        self._draw_text(surface, f"Balance: ${snapshot.balance}", (20, 20), size=32, color=COLORS.GOLD)
        if snapshot.state == RoundState.BETTING or snapshot.state == RoundState.RESOLVED:
            bet_text = f"Next bet: ${self.current_bet}  [UP/DOWN]"
        else:
            bet_text = f"Bet: ${snapshot.bet}"
        self._draw_text(surface, bet_text, (20, 56), size=26)

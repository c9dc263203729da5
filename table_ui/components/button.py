"""Interactive button component with hover and press states."""

from enum import Enum, auto
from typing import Callable, Optional, Tuple

import pygame

from table_ui.config import COLORS, DIMENSIONS


class ButtonState(Enum):
    """Visual state of a button."""

    NORMAL = auto()
    HOVERED = auto()
    PRESSED = auto()
    DISABLED = auto()


class Button:
    """A clickable button with hover scaling and a pressed state.

    Positioned by its center so the scene can re-anchor it whenever the
    window size changes.
    """

    def __init__(
        self,
        x: float,
        y: float,
        text: str,
        on_click: Optional[Callable[[], None]] = None,
        width: float = DIMENSIONS.BUTTON_WIDTH,
        height: float = DIMENSIONS.BUTTON_HEIGHT,
        font_size: int = 28,
        bg_color: Tuple[int, int, int] = None,
        hover_color: Tuple[int, int, int] = None,
        text_color: Tuple[int, int, int] = COLORS.TEXT_WHITE,
        enabled: bool = True,
    ):
        self.text = text
        self.on_click = on_click
        self.width = width
        self.height = height
        self.font_size = font_size
        self.enabled = enabled

        self.bg_color = bg_color or COLORS.BUTTON_DEFAULT
        self.hover_color = hover_color or COLORS.BUTTON_HOVER
        self.pressed_color = COLORS.BUTTON_PRESSED
        self.disabled_color = COLORS.BUTTON_DISABLED
        self.text_color = text_color

        self._font: Optional[pygame.font.Font] = None

        self.center_x = x
        self.center_y = y

        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED
        self._is_pressed = False
        self.scale = 1.0
        self.target_scale = 1.0

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    @property
    def rect(self) -> pygame.Rect:
        """Get the button's rectangle."""
        return pygame.Rect(
            int(self.center_x - self.width / 2),
            int(self.center_y - self.height / 2),
            int(self.width),
            int(self.height),
        )

    def set_center(self, x: float, y: float) -> None:
        self.center_x = x
        self.center_y = y

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable the button."""
        if enabled == self.enabled:
            return
        self.enabled = enabled
        self._is_pressed = False
        self.target_scale = 1.0
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle a pygame event.

        Returns:
            True if event was consumed (clicked)
        """
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEMOTION:
            hovered = self.rect.collidepoint(event.pos)
            if not self._is_pressed:
                self.state = ButtonState.HOVERED if hovered else ButtonState.NORMAL
                self.target_scale = 1.05 if hovered else 1.0

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1 and self.rect.collidepoint(event.pos):
                self.state = ButtonState.PRESSED
                self._is_pressed = True
                self.target_scale = 0.95

        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1 and self._is_pressed:
                self._is_pressed = False
                if self.rect.collidepoint(event.pos):
                    self.state = ButtonState.HOVERED
                    self.target_scale = 1.05
                    if self.on_click:
                        self.on_click()
                    return True
                self.state = ButtonState.NORMAL
                self.target_scale = 1.0

        return False

    def update(self, dt: float) -> None:
        """Ease the hover scale towards its target."""
        scale_speed = 15.0
        self.scale += (self.target_scale - self.scale) * min(1.0, scale_speed * dt)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.enabled:
            bg_color = self.disabled_color
            text_color = COLORS.TEXT_MUTED
        elif self.state == ButtonState.PRESSED:
            bg_color = self.pressed_color
            text_color = self.text_color
        elif self.state == ButtonState.HOVERED:
            bg_color = self.hover_color
            text_color = self.text_color
        else:
            bg_color = self.bg_color
            text_color = self.text_color

        scaled_width = int(self.width * self.scale)
        scaled_height = int(self.height * self.scale)
        rect = pygame.Rect(0, 0, scaled_width, scaled_height)
        rect.center = (int(self.center_x), int(self.center_y))

        pygame.draw.rect(surface, bg_color, rect, border_radius=DIMENSIONS.BUTTON_CORNER_RADIUS)

        text_surface = self.font.render(self.text, True, text_color)
        surface.blit(text_surface, text_surface.get_rect(center=rect.center))


class ActionButton(Button):
    """Specialized button for table actions (Hit, Stand, Deal)."""

    def __init__(
        self,
        x: float,
        y: float,
        text: str,
        action: str,
        on_click: Optional[Callable[[], None]] = None,
        hotkey: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(x=x, y=y, text=text, on_click=on_click, **kwargs)
        self.action = action
        self.hotkey = hotkey

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the action button with optional hotkey hint."""
        super().draw(surface)

        if self.hotkey and self.enabled:
            hint_font = pygame.font.Font(None, 18)
            hint_text = hint_font.render(f"[{self.hotkey}]", True, COLORS.TEXT_MUTED)
            hint_rect = hint_text.get_rect(
                centerx=int(self.center_x),
                top=int(self.center_y + self.height / 2 + 4),
            )
            surface.blit(hint_text, hint_rect)

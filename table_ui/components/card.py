"""Card sprite drawn from a CardView snapshot."""

from typing import Dict, Optional, Tuple

import pygame

from table_ui.config import COLORS, DIMENSIONS
from table_ui.core.engine_adapter import CardView


class CardSprite:
    """Renders one card face up or face down at its animated position.

    Sprites are rebuilt from the snapshot every frame; rendered surfaces are
    cached per rank and suit (plus one back) for the current card size, so the
    cost is a blit. A new card size drops the cache.
    """

    _face_cache: Dict[str, pygame.Surface] = {}
    _back_surface: Optional[pygame.Surface] = None
    _cache_size: Tuple[int, int] = (0, 0)

    def __init__(self, view: CardView):
        self.view = view

    @property
    def rect(self) -> pygame.Rect:
        v = self.view
        return pygame.Rect(int(v.x), int(v.y), max(1, int(v.width)), max(1, int(v.height)))

    def _render_card_face(self, width: int, height: int) -> pygame.Surface:
        """Render the face-up side of the card."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        radius = DIMENSIONS.CARD_CORNER_RADIUS

        rect = pygame.Rect(0, 0, width, height)
        pygame.draw.rect(surface, COLORS.CARD_WHITE, rect, border_radius=radius)
        pygame.draw.rect(surface, COLORS.CARD_BORDER, rect, width=2, border_radius=radius)

        color = COLORS.CARD_RED if self.view.is_red else COLORS.CARD_BLACK

        # Rank and suit in the corner
        font_size = max(14, int(height * 0.18))
        font = pygame.font.Font(None, font_size)
        surface.blit(font.render(self.view.rank, True, color), (6, 5))
        surface.blit(font.render(self.view.suit, True, color), (6, 5 + font_size - 6))

        # Large center suit
        center_font = pygame.font.Font(None, max(18, int(height * 0.45)))
        center_suit = center_font.render(self.view.suit, True, color)
        surface.blit(center_suit, center_suit.get_rect(center=(width // 2, height // 2)))

        return surface

    def _render_card_back(self, width: int, height: int) -> pygame.Surface:
        """Render the face-down (back) side of the card."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        radius = DIMENSIONS.CARD_CORNER_RADIUS

        rect = pygame.Rect(0, 0, width, height)
        pygame.draw.rect(surface, COLORS.CARD_BACK, rect, border_radius=radius)
        pygame.draw.rect(surface, COLORS.CARD_BORDER, rect, width=2, border_radius=radius)

        inner_rect = rect.inflate(-10, -10)
        pygame.draw.rect(surface, COLORS.CARD_BACK_PATTERN, inner_rect, border_radius=4)

        # Diamond grid
        pattern_color = (*COLORS.CARD_BACK, 60)
        for i in range(-height, width + height, 14):
            pygame.draw.line(surface, pattern_color, (i, 5), (i + height, height - 5), 1)
            pygame.draw.line(surface, pattern_color, (i + height, 5), (i, height - 5), 1)

        return surface

    @classmethod
    def _use_size(cls, size: Tuple[int, int]) -> None:
        if size != cls._cache_size:
            cls._face_cache.clear()
            cls._back_surface = None
            cls._cache_size = size

    @classmethod
    def clear_cache(cls) -> None:
        cls._use_size((0, 0))

    @classmethod
    def cached_surfaces(cls) -> int:
        """Number of rendered surfaces currently held."""
        return len(cls._face_cache) + (cls._back_surface is not None)

    def _render(self) -> pygame.Surface:
        rect = self.rect
        v = self.view
        CardSprite._use_size(rect.size)

        if not v.face_up:
            if CardSprite._back_surface is None:
                CardSprite._back_surface = self._render_card_back(rect.width, rect.height)
            return CardSprite._back_surface

        cache_key = f"{v.rank}_{v.suit}"
        if cache_key not in self._face_cache:
            self._face_cache[cache_key] = self._render_card_face(rect.width, rect.height)
        return self._face_cache[cache_key]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the card with a small drop shadow."""
        rect = self.rect
        shadow = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(
            shadow,
            COLORS.CARD_SHADOW,
            shadow.get_rect(),
            border_radius=DIMENSIONS.CARD_CORNER_RADIUS,
        )
        surface.blit(shadow, rect.move(3, 4))
        surface.blit(self._render(), rect)

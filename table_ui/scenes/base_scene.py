"""Base scene class for table scenes."""

from abc import ABC, abstractmethod

import pygame


class BaseScene(ABC):
    """Abstract base class for scenes driven by the application loop.

    Lifecycle:
    - on_enter(): Called when the scene becomes active
    - on_exit(): Called when the application shuts down
    - resize(width, height): Called on start and whenever the window changes

    Per tick the application calls handle_event() for each pending input
    event, then update(dt) once, then draw(surface) once.
    """

    def __init__(self):
        self._is_active = False
        self.width = 0
        self.height = 0

    @property
    def is_active(self) -> bool:
        return self._is_active

    def on_enter(self) -> None:
        self._is_active = True

    def on_exit(self) -> None:
        self._is_active = False

    def resize(self, width: int, height: int) -> None:
        """Record the new surface size."""
        self.width = width
        self.height = height

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle a pygame event.

        Args:
            event: The pygame event to handle

        Returns:
            True if the event was consumed, False otherwise
        """

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance scene logic by one tick.

        Args:
            dt: Delta time in seconds since last update
        """

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the scene; must only read state."""

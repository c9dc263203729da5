"""Reusable pygame UI components."""

from table_ui.components.button import ActionButton, Button, ButtonState
from table_ui.components.card import CardSprite

__all__ = [
    "ActionButton",
    "Button",
    "ButtonState",
    "CardSprite",
]

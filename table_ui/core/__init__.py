"""Core systems for the blackjack table UI (no pygame dependency)."""

from table_ui.core.animation import CardMotion, MotionTracker
from table_ui.core.engine_adapter import CardView, EngineAdapter, TableSnapshot
from table_ui.core.layout import TableLayout

__all__ = [
    "CardMotion",
    "MotionTracker",
    "CardView",
    "EngineAdapter",
    "TableSnapshot",
    "TableLayout",
]

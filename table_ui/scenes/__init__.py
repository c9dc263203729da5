"""Table scenes."""

from table_ui.scenes.base_scene import BaseScene
from table_ui.scenes.table_scene import TableScene

__all__ = [
    "BaseScene",
    "TableScene",
]

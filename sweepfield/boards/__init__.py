"""
Expose the public board classes.
"""
from .cell_visual import CellVisual, HeadlessCellVisual
from .field_layout import CellGeometry, layout
from .stage import Stage
from .visual import Position, Size, Visual, VisualProps

__all__ = [
    "CellVisual", "HeadlessCellVisual", "CellGeometry", "layout",
    "Stage", "Position", "Size", "Visual", "VisualProps",
]

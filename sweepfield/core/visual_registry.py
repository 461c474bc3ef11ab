# core/visual_registry.py

from __future__ import annotations
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from sweepfield.boards.visual import Visual


class VisualRegistry:
    """
    Live id → visual lookup for the current field.

    Cell ids are dense (0 … rows*cols-1), so the registry is an arena of
    slots indexed by id rather than a dict. Only the scene mutates it.
    """

    def __init__(self):
        self._slots: List[Optional[Visual]] = []
        self._count = 0

    def register(self, cell_id: int, visual: Visual) -> None:
        if cell_id < 0:
            raise ValueError(f"cell id must be >= 0, got {cell_id}")
        if cell_id >= len(self._slots):
            self._slots.extend([None] * (cell_id + 1 - len(self._slots)))
        if self._slots[cell_id] is not None:
            raise ValueError(f"visual for cell {cell_id} already registered")
        self._slots[cell_id] = visual
        self._count += 1

    def get(self, cell_id: int) -> Visual | None:
        """Return the visual for *cell_id*, or None when there is none."""
        if 0 <= cell_id < len(self._slots):
            return self._slots[cell_id]
        return None

    def clear(self) -> None:
        self._slots = []
        self._count = 0

    def ids(self) -> List[int]:
        return [i for i, v in enumerate(self._slots) if v is not None]

    def __len__(self) -> int:
        return self._count

    def __contains__(self, cell_id: object) -> bool:
        return isinstance(cell_id, int) and self.get(cell_id) is not None

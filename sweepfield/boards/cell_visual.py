"""
Per‑cell visuals.

    • CellVisual          – draws a texture over a status fill with pygame
    • HeadlessCellVisual  – same contract, records what it would draw

Both keep the last applied `VisualProps` and render only from it.
"""
from __future__ import annotations
from dataclasses import replace
from typing import List, Tuple
import pygame

from sweepfield.boards.visual import VisualProps, is_interactive, texture_key
from sweepfield.constants import (
    EXPLODED_FILL, FLAGGED_FILL, HIDDEN_FILL, REVEALED_FILL,
)
from sweepfield.core.asset_manager import AssetManager
from sweepfield.core.errors import InvalidCellState
from sweepfield.core.types import CellStatus

STATUS_FILLS = {
    CellStatus.HIDDEN:   HIDDEN_FILL,
    CellStatus.FLAGGED:  FLAGGED_FILL,
    CellStatus.REVEALED: REVEALED_FILL,
}


def merge_props(current: VisualProps | None, changes: dict) -> VisualProps:
    """First call needs every field; later calls replace top‑level keys."""
    if current is None:
        return VisualProps(**changes)
    return replace(current, **changes)


def props_rect(props: VisualProps) -> pygame.Rect:
    # edges are rounded, not sizes, so neighbours never overlap
    pos, size = props.position, props.size
    left, top = round(pos.x), round(pos.y)
    width  = round(pos.x + size.width) - left
    height = round(pos.y + size.height) - top
    return pygame.Rect(left, top, max(1, width), max(1, height))


# ────────────────────────────────────────────────────────────────────
class _BaseCellVisual:
    """Props bookkeeping shared by every cell visual; subclasses paint."""

    def __init__(self, cell_id: int):
        self.cell_id     = cell_id
        self.props: VisualProps | None = None
        self.name        = ""
        self.interactive = False
        self.rect        = pygame.Rect(0, 0, 0, 0)
        self.texture: str | None = None

    def set_props(self, **changes) -> None:
        self.props = merge_props(self.props, changes)

    def should_component_update(self, next_props: VisualProps) -> bool:
        return self.props is None or next_props != self.props

    def render(self) -> None:
        props = self.props
        if props is None:
            raise InvalidCellState(f"cell {self.cell_id} rendered before set_props")
        key  = texture_key(props)
        rect = props_rect(props)
        self._paint(props, key, rect)

        self.texture     = key
        self.rect        = rect
        self.interactive = is_interactive(props.status)
        self.name        = str(self.cell_id)

    def _paint(self, props: VisualProps, key: str, rect: pygame.Rect) -> None:
        raise NotImplementedError

    def draw(self, target: pygame.Surface, origin: Tuple[int, int] = (0, 0)) -> None:
        raise NotImplementedError


# ────────────────────────────────────────────────────────────────────
class CellVisual(_BaseCellVisual):
    def __init__(self, cell_id: int, assets: AssetManager):
        super().__init__(cell_id)
        self.assets = assets
        self.image: pygame.Surface | None = None

    def _paint(self, props, key, rect):
        image = pygame.Surface(rect.size, pygame.SRCALPHA)
        image.fill(EXPLODED_FILL if props.exploded else STATUS_FILLS[props.status])
        image.blit(self.assets.texture(key, rect.size), (0, 0))
        self.image = image

    def draw(self, target, origin=(0, 0)):
        if self.image is not None:
            target.blit(self.image, self.rect.move(origin))


# ────────────────────────────────────────────────────────────────────
class HeadlessCellVisual(_BaseCellVisual):
    """Drawing‑free visual for tests and headless runs."""

    def __init__(self, cell_id: int):
        super().__init__(cell_id)
        self.rendered: List[VisualProps] = []   # props used by each render()

    @property
    def render_count(self) -> int:
        return len(self.rendered)

    def _paint(self, props, key, rect):
        self.rendered.append(props)

    def draw(self, target, origin=(0, 0)):
        pass

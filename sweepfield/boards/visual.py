"""
The visual contract shared by every per‑cell component.

A visual holds one `VisualProps` snapshot and renders itself from it. The
scene never cares which implementation it got: the pygame `CellVisual` and
the drawing‑free `HeadlessCellVisual` both satisfy `Visual`.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol

import pygame

from sweepfield.core.errors import InvalidCellState
from sweepfield.core.types import CellStatus, Content, ContentKind


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class VisualProps:
    position: Position
    size: Size
    status: CellStatus
    content: Content
    exploded: bool = False      # the mine whose reveal lost the game


class Visual(Protocol):
    cell_id: int
    props: VisualProps | None
    name: str
    interactive: bool
    rect: pygame.Rect

    def set_props(self, **changes) -> None: ...
    def should_component_update(self, next_props: VisualProps) -> bool: ...
    def render(self) -> None: ...
    def draw(self, target: pygame.Surface, origin: tuple[int, int] = (0, 0)) -> None: ...


def texture_key(props: VisualProps) -> str:
    """Pick the manifest texture for a props snapshot."""
    status, content = props.status, props.content
    if status is CellStatus.HIDDEN:
        return "empty_not_selected"
    if status is CellStatus.FLAGGED:
        return "flagged"
    if status is CellStatus.REVEALED:
        if content.kind is ContentKind.MINE:
            return "bomb_exploded" if props.exploded else "bomb"
        if content.kind is ContentKind.EMPTY and 0 <= content.value <= 8:
            return f"mark_{content.value}" if content.value else "empty_selected"
    raise InvalidCellState(f"no look for status={status!r} content={content!r}")


def is_interactive(status: CellStatus) -> bool:
    """Hidden and flagged cells take pointer events; revealed cells don't."""
    return status is not CellStatus.REVEALED

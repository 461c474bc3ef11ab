"""
Stage – the surface cell visuals are mounted on.

Visual rects are stage‑local; the stage owns the on‑screen origin, draws
its visuals in mount order and turns a raw pointer position into the tag
of the topmost interactive visual under it.
"""
from __future__ import annotations
from typing import List, Tuple
import pygame

from sweepfield.boards.visual import Visual
from sweepfield.constants import BOARD_BG_COLOR
from sweepfield.ui.input_router import PointerUp


class Stage:
    def __init__(self, origin: Tuple[int, int] = (0, 0), size: Tuple[int, int] = (0, 0)):
        self.origin = origin
        self.size   = size
        self._visuals: List[Visual] = []

    # ───────────────────────────── mounting ──────────────────────────
    def mount(self, visual: Visual) -> None:
        self._visuals.append(visual)

    def clear(self) -> None:
        self._visuals = []

    def __len__(self) -> int:
        return len(self._visuals)

    # ──────────────────────────── hit testing ────────────────────────
    def to_local(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        ox, oy = self.origin
        return pos[0] - ox, pos[1] - oy

    def hit_test(self, pos: Tuple[int, int]) -> str | None:
        """Tag of the topmost interactive visual under screen *pos*."""
        local = self.to_local(pos)
        for visual in reversed(self._visuals):
            if visual.interactive and visual.rect.collidepoint(local):
                return visual.name
        return None

    def pointer_up(self, pos: Tuple[int, int], button: int, mods: int) -> PointerUp:
        return PointerUp(target=self.hit_test(pos), button=button, mods=mods)

    # ─────────────────────────── rendering ───────────────────────────
    def draw(self, target: pygame.Surface) -> None:
        if self.size != (0, 0):
            pygame.draw.rect(target, BOARD_BG_COLOR, (*self.origin, *self.size))
        for visual in self._visuals:
            visual.draw(target, self.origin)

"""
Game engine contract plus a reference implementation.

The presentation layer only talks to an engine through `GameEngine`.
`MineSweeperEngine` is the engine the application ships with:

    • ids are row‑major (`row * cols + col`), stable for one field
    • `reveal` flood‑fills through zero‑count cells
    • once the game is won or lost the engine changes nothing
"""
from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, List, Protocol

from sweepfield.core.types import (
    Cell, CellStatus, Content, GameState, GameStatus,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]


class GameEngine(Protocol):
    def get_field(self) -> List[List[Cell]]: ...
    def reveal(self, cell_id: int) -> List[Cell]: ...
    def flag(self, cell_id: int) -> Cell: ...
    def get_game_state(self) -> GameState: ...
    def on_change(self, callback: StateListener) -> None: ...


EngineFactory = Callable[[int, int, int], GameEngine]


class MineSweeperEngine:
    def __init__(self, rows: int, cols: int, mine_ids: Iterable[int]):
        if rows < 1 or cols < 1:
            raise ValueError(f"field must be at least 1x1, got {rows}x{cols}")
        self.rows, self.cols = rows, cols
        mines = set(mine_ids)
        if any(not 0 <= m < rows * cols for m in mines):
            raise ValueError(f"mine id outside a {rows}x{cols} field")
        self.bombs = len(mines)

        self._cells: List[Cell] = []
        for cid in range(rows * cols):
            if cid in mines:
                content = Content.mine()
            else:
                content = Content.empty(sum(n in mines for n in self._neighbours(cid)))
            self._cells.append(Cell(cid, CellStatus.HIDDEN, content))

        self._status = GameStatus.PLAYING
        self._flags = 0
        self._listeners: List[StateListener] = []

    # ───────────────────────────── factories ─────────────────────────
    @classmethod
    def create(cls, rows: int, cols: int, bombs: int,
               rng: random.Random | None = None) -> MineSweeperEngine:
        """Build a field with `bombs` mines at unique random positions."""
        if not 0 <= bombs <= rows * cols:
            raise ValueError(f"cannot place {bombs} bombs on {rows}x{cols}")
        rng = rng or random.Random()
        return cls(rows, cols, rng.sample(range(rows * cols), bombs))

    @classmethod
    def with_mines(cls, rows: int, cols: int, mine_ids: Iterable[int]) -> MineSweeperEngine:
        """Build a field with mines at fixed ids (puzzles, tests)."""
        return cls(rows, cols, mine_ids)

    # ───────────────────────────── geometry ──────────────────────────
    def _neighbours(self, cid: int) -> List[int]:
        r, c = divmod(cid, self.cols)
        return [(r + dr) * self.cols + (c + dc)
                for dr in (-1, 0, 1) for dc in (-1, 0, 1)
                if (dr or dc)
                and 0 <= r + dr < self.rows and 0 <= c + dc < self.cols]

    def _get(self, cid: int) -> Cell:
        if not 0 <= cid < len(self._cells):
            raise ValueError(f"Cell didn't find in battlefield by provided id: {cid}")
        return self._cells[cid]

    def _set_status(self, cid: int, status: CellStatus) -> Cell:
        cell = self._cells[cid]
        cell = Cell(cell.id, status, cell.content)
        self._cells[cid] = cell
        return cell

    # ───────────────────────────── queries ───────────────────────────
    def get_field(self) -> List[List[Cell]]:
        return [self._cells[r * self.cols:(r + 1) * self.cols] for r in range(self.rows)]

    def get_game_state(self) -> GameState:
        return GameState(self._status, self._flags)

    def on_change(self, callback: StateListener) -> None:
        self._listeners.append(callback)

    # ───────────────────────────── commands ──────────────────────────
    def reveal(self, cell_id: int) -> List[Cell]:
        """Reveal a hidden cell; returns every cell whose status changed."""
        cell = self._get(cell_id)
        if self._status.is_terminal or cell.status is not CellStatus.HIDDEN:
            return []

        before = self.get_game_state()
        if cell.content.is_mine:
            changed = [self._set_status(cell_id, CellStatus.REVEALED)]
            changed += [self._set_status(c.id, CellStatus.REVEALED)
                        for c in list(self._cells)
                        if c.status is not CellStatus.REVEALED]
            self._status = GameStatus.LOST
        else:
            changed = self._flood(cell_id)
            if all(c.status is CellStatus.REVEALED
                   for c in self._cells if not c.content.is_mine):
                self._status = GameStatus.WON

        self._flags = sum(c.status is CellStatus.FLAGGED for c in self._cells)
        self._notify(before)
        return changed

    def _flood(self, start: int) -> List[Cell]:
        changed: List[Cell] = []
        stack = [start]
        while stack:
            cid = stack.pop()
            cell = self._cells[cid]
            if cell.status is CellStatus.REVEALED or cell.content.is_mine:
                continue
            changed.append(self._set_status(cid, CellStatus.REVEALED))
            if cell.content.value == 0:
                stack.extend(self._neighbours(cid))
        return changed

    def flag(self, cell_id: int) -> Cell:
        """Toggle HIDDEN <-> FLAGGED; at most `bombs` flags may be placed."""
        cell = self._get(cell_id)
        if self._status.is_terminal or cell.status is CellStatus.REVEALED:
            return cell

        before = self.get_game_state()
        if cell.status is CellStatus.FLAGGED:
            cell = self._set_status(cell_id, CellStatus.HIDDEN)
            self._flags -= 1
        elif self._flags < self.bombs:
            cell = self._set_status(cell_id, CellStatus.FLAGGED)
            self._flags += 1
        else:
            logger.debug("No flags left for cell %d", cell_id)
            return cell

        self._notify(before)
        return cell

    def _notify(self, before: GameState) -> None:
        state = self.get_game_state()
        if state == before:
            return
        for listener in list(self._listeners):
            listener(state)

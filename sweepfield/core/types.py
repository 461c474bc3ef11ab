"""Value types shared between the engine and the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class CellStatus(str, Enum):
    """Visibility of a single cell."""
    HIDDEN = 'HIDDEN'
    REVEALED = 'REVEALED'
    FLAGGED = 'FLAGGED'


class ContentKind(str, Enum):
    EMPTY = 'EMPTY'
    MINE = 'MINE'


class GameStatus(str, Enum):
    """Possible game states."""
    PLAYING = 'PLAYING'
    WON = 'WON'
    LOST = 'LOST'

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.PLAYING


@dataclass(frozen=True)
class Content:
    """What lies under a cell: a mine, or an empty square with its adjacent mine count."""
    kind: ContentKind
    value: int = 0

    @classmethod
    def empty(cls, adjacent: int = 0) -> Content:
        return cls(ContentKind.EMPTY, adjacent)

    @classmethod
    def mine(cls) -> Content:
        return cls(ContentKind.MINE, 0)

    @property
    def is_mine(self) -> bool:
        return self.kind is ContentKind.MINE


@dataclass(frozen=True)
class Cell:
    """A single cell as reported by the engine. `id` is stable for one field."""
    id: int
    status: CellStatus
    content: Content


@dataclass(frozen=True)
class GameState:
    """Current state of the game."""
    status: GameStatus
    flag_count: int = 0


@dataclass(frozen=True)
class DifficultyConfig:
    """Configuration for creating a new field."""
    rows: int
    cols: int
    bombs: int

    easy:   ClassVar[DifficultyConfig]
    medium: ClassVar[DifficultyConfig]
    hard:   ClassVar[DifficultyConfig]

    @property
    def size(self) -> int:
        return self.rows * self.cols


DifficultyConfig.easy   = DifficultyConfig(rows=10, cols=7, bombs=7)
DifficultyConfig.medium = DifficultyConfig(rows=12, cols=9, bombs=10)
DifficultyConfig.hard   = DifficultyConfig(rows=15, cols=10, bombs=20)

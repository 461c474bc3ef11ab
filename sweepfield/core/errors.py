"""
Errors raised by the presentation layer.

Structural errors (a missing mount surface, a registry that no longer
matches the engine) are raised from the operation that found them; the
scene's event hook logs them and keeps the window running.
"""
from __future__ import annotations

from typing import Any


class SweepfieldError(Exception):
    """Base class for every error raised by sweepfield."""


class MissingMountPoint(SweepfieldError):
    """The display surface the board should be mounted on is absent."""


class VisualRegistryDesync(SweepfieldError):
    """The registry no longer holds exactly one visual per engine cell."""

    def __init__(self, cell_id: int, message: str | None = None):
        super().__init__(message or f"Cannot find visual by id: {cell_id}")
        self.cell_id = cell_id


class InvalidCommand(SweepfieldError):
    """A pointer event did not resolve to a numeric cell id."""


class InvalidCellState(SweepfieldError):
    """A visual was asked to render a status/content pair it has no look for."""


class EngineRejected(SweepfieldError):
    """The game engine refused a command (e.g. an unknown cell id)."""

    def __init__(self, command: Any, cause: BaseException):
        super().__init__(f"Engine rejected {command!r}: {cause}")
        self.command = command
        self.cause = cause

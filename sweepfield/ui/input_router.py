"""
Pointer‑up → command translation.

`route` is stateless and knows nothing about the rules: it only reads the
tag of the visual under the pointer and whether flag intent was expressed
(right button, or Shift/Ctrl held while clicking).
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Union

from sweepfield.config import FLAG_BUTTONS, FLAG_MODIFIERS
from sweepfield.core.errors import InvalidCommand

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointerUp:
    target: str | None      # tag of the visual under the pointer
    button: int = 1
    mods: int = 0           # pygame.key.get_mods() at event time


@dataclass(frozen=True)
class Reveal:
    cell_id: int


@dataclass(frozen=True)
class Flag:
    cell_id: int


Command = Union[Reveal, Flag]


def parse_target(target: str | None) -> int:
    """Numeric cell id from a visual tag; raises InvalidCommand otherwise."""
    if target is None:
        raise InvalidCommand("pointer event has no target")
    try:
        return int(target)
    except (TypeError, ValueError):
        raise InvalidCommand(f"target {target!r} is not a cell id") from None


def route(event: PointerUp) -> Command | None:
    """Reveal/Flag command for *event*, or None when it should be ignored."""
    try:
        cell_id = parse_target(event.target)
    except InvalidCommand as exc:
        logger.debug("Ignoring pointer event: %s", exc)
        return None
    if event.button in FLAG_BUTTONS or event.mods & FLAG_MODIFIERS:
        return Flag(cell_id)
    return Reveal(cell_id)

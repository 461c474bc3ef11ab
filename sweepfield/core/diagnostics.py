"""
Optional inspector hook.

A scene can be handed a `Diagnostics` collaborator at construction; it is
told about the objects worth inspecting and about every state transition.
Nothing is registered globally.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Protocol, Tuple


class Diagnostics(Protocol):
    def register(self, name: str, obj: Any) -> None: ...
    def transition(self, source: str, target: str) -> None: ...


class LoggingInspector:
    """Keeps registered objects around and logs scene transitions."""

    def __init__(self, logger: logging.Logger | None = None):
        self.log = logger or logging.getLogger("sweepfield.inspector")
        self.objects: Dict[str, Any] = {}
        self.transitions: List[Tuple[str, str]] = []

    def register(self, name: str, obj: Any) -> None:
        self.objects[name] = obj
        self.log.debug("registered %s: %r", name, obj)

    def transition(self, source: str, target: str) -> None:
        self.transitions.append((source, target))
        self.log.debug("scene %s -> %s", source, target)

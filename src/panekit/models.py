"""Data models shared between views and the platform adapter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pygame


# Nodes are event targets and compare by identity.
@dataclass(eq=False)
class Node:
    """Platform-side target owned by a view."""

    rect: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))
    name: str = ""


@dataclass
class EventPayload:
    """A platform event re-dispatched to in-process observers."""

    platform_event: Any
    source: Any

    @property
    def type(self) -> Any:
        return getattr(self.platform_event, "type", None)

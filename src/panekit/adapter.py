"""Platform adapter: attaches handlers to pygame event sources."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

import pygame

logger = logging.getLogger(__name__)

PlatformHandler = Callable[[Any], None]


@runtime_checkable
class PlatformAdapter(Protocol):
    """What Observable needs from the platform."""

    def bind(self, target: Any, name: str, handler: PlatformHandler) -> None: ...
    def unbind(self, target: Any, name: str, handler: PlatformHandler) -> None: ...
    def event_type(self, event: Any) -> str: ...


def contains(target: Any, pos: tuple[int, int]) -> bool:
    """True if ``pos`` falls inside the target's rect. Targets without one cover everything."""
    rect = getattr(target, "rect", None)
    if rect is None:
        return True
    return pygame.Rect(rect).collidepoint(pos)


class PygameEventRouter:
    """Routes pygame events to handlers bound per (target, event name).

    Event names are the lower-cased pygame names, e.g. ``"keydown"`` or
    ``"mousebuttondown"``. Events carrying a ``pos`` only reach targets
    whose rect contains that point.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[tuple[Any, PlatformHandler]]] = {}

    def bind(self, target: Any, name: str, handler: PlatformHandler) -> None:
        self._handlers.setdefault(name, []).append((target, handler))
        logger.debug("Attached platform handler to %r for %s", target, name)

    def unbind(self, target: Any, name: str, handler: PlatformHandler) -> None:
        entries = self._handlers.get(name)
        if not entries:
            return
        entries = [(t, h) for t, h in entries if not (t is target and h is handler)]
        if entries:
            self._handlers[name] = entries
        else:
            self._handlers.pop(name, None)
        logger.debug("Detached platform handler from %r for %s", target, name)

    def event_type(self, event: pygame.event.Event) -> str:
        return pygame.event.event_name(event.type).lower()

    def bound_names(self) -> list[str]:
        return list(self._handlers)

    def feed_event(self, event: pygame.event.Event) -> int:
        """Call from the main loop for each pygame event. Returns handlers invoked."""
        entries = self._handlers.get(self.event_type(event))
        if not entries:
            return 0
        pos = getattr(event, "pos", None)
        invoked = 0
        for target, handler in list(entries):
            if pos is not None and not contains(target, pos):
                continue
            handler(event)
            invoked += 1
        return invoked


_default_adapter: PlatformAdapter | None = None


def get_default_adapter() -> PlatformAdapter:
    """Process-wide adapter, a ``PygameEventRouter`` unless replaced."""
    global _default_adapter
    if _default_adapter is None:
        _default_adapter = PygameEventRouter()
    return _default_adapter


def set_default_adapter(adapter: PlatformAdapter | None) -> None:
    global _default_adapter
    _default_adapter = adapter

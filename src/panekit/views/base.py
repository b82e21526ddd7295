"""Base view type: an Observable owning a platform Node."""

from __future__ import annotations

import logging
from typing import Any

import pygame

from panekit.classes import new_class
from panekit.models import Node
from panekit.observable import Observable
from panekit.props import add_props, delegate_prop

logger = logging.getLogger(__name__)


def _init(self, rect: Any = None, name: str = "") -> None:
    self._dom = Node(rect=pygame.Rect(rect) if rect is not None else pygame.Rect(0, 0, 0, 0), name=name)
    self._id = name or None


def _dom(self) -> Node | None:
    return self._dom


def _destroy(self) -> None:
    """Detach every platform handler and drop all observers."""
    for name in list(getattr(self, "_event_targets", None) or ()):
        self._unbind_from_platform(name)
    observers = getattr(self, "_observers", None)
    if observers:
        observers.clear()
    logger.debug("Destroyed %r", self)
    self._dom = None


def _repr(self) -> str:
    return f"<{type(self).__name__} id={self.id()!r}>"


_members: dict[str, Any] = {
    "__module__": __name__,
    "init": _init,
    "dom": _dom,
    "destroy": _destroy,
    "__repr__": _repr,
}
add_props(_members, ["id"])
delegate_prop(_members, "rect", "_dom")

View = new_class(_members, base=Observable, name="View")
View.__doc__ = """A rectangular region of the screen that can bind platform events.

    view = View((0, 0, 200, 40), name="header")
    view.bind("mousebuttondown", on_click)
"""

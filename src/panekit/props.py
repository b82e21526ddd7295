"""Accessor-style properties for classes assembled with ``new_class``.

An accessor is a method that reads when called with no argument and writes
(returning ``self`` for chaining) when called with one:

    view.rect(pygame.Rect(0, 0, 10, 10)).id("header")
    view.id()  # "header"
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableMapping
from typing import Any


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


def attr(target: Any, name: str, value: Any = UNSET) -> Any:
    """Get or set ``name`` on ``target``, going through it if it is an accessor.

    Returns ``target`` when setting, the value when getting.
    """
    current = getattr(target, name, None)
    if value is not UNSET:
        if callable(current):
            current(value)
        else:
            setattr(target, name, value)
        return target
    if callable(current):
        return current()
    return current


def new_prop(field: str, setter: Callable[[Any, Any], None] | None = None) -> Callable:
    """Accessor backed by ``self.<field>``; ``setter`` replaces the plain write."""

    def prop(self, value: Any = UNSET) -> Any:
        if value is UNSET:
            return getattr(self, field, None)
        if setter is not None:
            setter(self, value)
        else:
            setattr(self, field, value)
        return self

    prop.__name__ = field.lstrip("_") or field
    return prop


def add_props(namespace: MutableMapping[str, Any], names: Iterable[str]) -> None:
    """Add a ``new_prop('_' + name)`` accessor to ``namespace`` for each name."""
    for name in names:
        namespace[name] = new_prop("_" + name)


def delegate_prop(namespace: MutableMapping[str, Any], name: str, target: str) -> None:
    """Add an accessor forwarding ``name`` to ``self.<target>``.

    While the target is unset, the value lives in ``self._<name>``.
    """
    field = "_" + name

    def prop(self, value: Any = UNSET) -> Any:
        delegate = getattr(self, target, None)
        if value is UNSET:
            if delegate is not None:
                return attr(delegate, name)
            return getattr(self, field, None)
        if delegate is not None:
            attr(delegate, name, value)
        else:
            setattr(self, field, value)
        return self

    prop.__name__ = name
    namespace[name] = prop

"""Observable mixin: named events with lazy platform attachment.

Any class can mix this in, by inheritance or through ``new_class``. Observers
are registered per event name with ``bind`` and called by ``trigger``. The
first observer for a name also attaches a platform handler, either to an
explicit ``target`` or to whatever the instance's ``dom()`` returns. Platform
events come back in through ``trigger`` under their own type name, wrapped in
an ``EventPayload``. The platform handler is detached again when the last
observer for that name is removed.

Without a ``dom()`` (or when it returns ``None``) the instance is a plain
in-process event bus.
"""

from __future__ import annotations

import logging
import types
from collections.abc import Callable
from typing import Any

from panekit.adapter import PlatformAdapter, get_default_adapter
from panekit.models import EventPayload

logger = logging.getLogger(__name__)

Observer = Callable[..., Any]

_METHOD_TYPES = (types.MethodType, types.BuiltinMethodType)


class DispatchError(Exception):
    """Raised after an isolated dispatch in which one or more observers failed."""

    def __init__(self, name: str, errors: list[tuple[Observer, Exception]]) -> None:
        self.name = name
        self.errors = errors
        super().__init__(f"{len(errors)} observer(s) failed for event {name!r}")


def _same_observer(a: Observer, b: Observer) -> bool:
    # Bound methods are recreated on every attribute access; method equality
    # compares the bound instance by identity.
    if a is b:
        return True
    return isinstance(a, _METHOD_TYPES) and type(a) is type(b) and a == b


class Observable:
    # Adapter used for platform attachment; None falls back to the process default.
    event_adapter: PlatformAdapter | None = None
    # When True, every observer runs and failures are raised together afterwards.
    isolate_observer_errors: bool = False

    def bind(self, names: str, callback: Observer, target: Any = None) -> Observable:
        for name in names.split():
            if not self._bound(name):
                self._bind_to_platform(name, target)
            self._observers_for(name).append(callback)
        return self

    def unbind(self, names: str, callback: Observer) -> Observable:
        observers = getattr(self, "_observers", None)
        if not observers:
            return self
        for name in names.split():
            if name not in observers:
                continue
            remaining = [o for o in observers[name] if not _same_observer(o, callback)]
            if remaining:
                observers[name] = remaining
            else:
                del observers[name]
                self._unbind_from_platform(name)
        return self

    def trigger(self, name: str, *data: Any) -> Observable:
        snapshot = list(self._observers_for(name, create=False))
        if not self.isolate_observer_errors:
            for callback in snapshot:
                callback(*data)
            return self

        errors: list[tuple[Observer, Exception]] = []
        for callback in snapshot:
            try:
                callback(*data)
            except Exception as exc:
                logger.exception("Observer %r failed for event %s", callback, name)
                errors.append((callback, exc))
        if errors:
            raise DispatchError(name, errors)
        return self

    def event_names(self) -> list[str]:
        return list(getattr(self, "_observers", None) or ())

    def observers(self, name: str) -> tuple[Observer, ...]:
        return tuple(self._observers_for(name, create=False))

    def _platform_adapter(self) -> PlatformAdapter:
        return self.event_adapter if self.event_adapter is not None else get_default_adapter()

    def _default_target(self) -> Any:
        dom = getattr(self, "dom", None)
        return dom() if callable(dom) else None

    def _bind_to_platform(self, name: str, target: Any = None) -> bool:
        if target is None:
            target = self._default_target()
        if target is None:
            return False

        adapter = self._platform_adapter()
        if getattr(self, "_platform_handler", None) is None:
            def handler(event: Any) -> None:
                self.trigger(
                    self._platform_adapter().event_type(event),
                    EventPayload(platform_event=event, source=self),
                )
            self._platform_handler = handler

        adapter.bind(target, name, self._platform_handler)
        # Detach goes through the same adapter, whatever the default is by then.
        if getattr(self, "_event_targets", None) is None:
            self._event_targets: dict[str, tuple[PlatformAdapter, Any]] = {}
        self._event_targets[name] = (adapter, target)
        logger.debug("%r attached to platform event %s", self, name)
        return True

    def _unbind_from_platform(self, name: str) -> None:
        targets = getattr(self, "_event_targets", None)
        if not targets or name not in targets:
            return
        adapter, target = targets.pop(name)
        adapter.unbind(target, name, self._platform_handler)
        logger.debug("%r detached from platform event %s", self, name)

    def _bound(self, name: str) -> bool:
        observers = getattr(self, "_observers", None)
        return bool(observers) and name in observers

    def _observers_for(self, name: str, create: bool = True) -> list[Observer]:
        observers = getattr(self, "_observers", None)
        if not create and (not observers or name not in observers):
            return []
        if observers is None:
            observers = self._observers = {}
        return observers.setdefault(name, [])

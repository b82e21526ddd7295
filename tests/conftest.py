"""Shared fixtures: an in-memory platform adapter."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from panekit import adapter as adapter_mod


class RecordingAdapter:
    """Headless adapter that records attach/detach calls and can fire events."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object, str]] = []
        self.handlers: dict[tuple[int, str], list] = {}

    def bind(self, target, name, handler) -> None:
        self.calls.append(("bind", target, name))
        self.handlers.setdefault((id(target), name), []).append(handler)

    def unbind(self, target, name, handler) -> None:
        self.calls.append(("unbind", target, name))
        bound = self.handlers.get((id(target), name), [])
        self.handlers[(id(target), name)] = [h for h in bound if h is not handler]

    def event_type(self, event) -> str:
        return event.type

    def fire(self, target, name, **attrs) -> None:
        event = SimpleNamespace(type=name, **attrs)
        for handler in list(self.handlers.get((id(target), name), [])):
            handler(event)

    def count(self, kind: str, name: str) -> int:
        return sum(1 for k, _, n in self.calls if k == kind and n == name)


@pytest.fixture
def recording_adapter():
    fake = RecordingAdapter()
    adapter_mod.set_default_adapter(fake)
    yield fake
    adapter_mod.set_default_adapter(None)

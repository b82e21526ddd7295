"""Class construction with mixin composition.

``new_class`` assembles a class from an optional base and any number of
mixins. The base is inherited through the normal MRO; mixins are flattened
into the new class namespace once, at build time, in argument order.

    View = new_class({"init": init, "dom": dom}, base=Observable)
    Button = new_class(Clickable, lambda bases: {...}, base=View)
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

# Attributes of a mixin class that describe the class itself, not its interface.
_CLASS_INTERNALS = frozenset({
    "__dict__", "__weakref__", "__module__", "__qualname__", "__doc__",
    "__init__", "__slots__", "__annotations__", "__mixins__",
    "__firstlineno__", "__static_attributes__",
})


def class_members(cls: type) -> dict[str, Any]:
    """Members a class contributes when copied as a mixin, base classes first."""
    members: dict[str, Any] = {}
    for klass in reversed(cls.__mro__[:-1]):
        for key, value in vars(klass).items():
            if key not in _CLASS_INTERNALS:
                members[key] = value
    return members


def _as_bag(mixin: Any, bases: list) -> Mapping[str, Any]:
    if inspect.isclass(mixin):
        return class_members(mixin)
    if isinstance(mixin, Mapping):
        return mixin
    if callable(mixin):
        return mixin(list(bases))
    return vars(mixin)


def _construct(self, *args: Any, **kwargs: Any) -> None:
    self.init(*args, **kwargs)


def new_class(*mixins: Any, base: type | None = None, name: str | None = None) -> type:
    """Create a class from an optional base and ordered mixins.

    Passing ``base`` inherits from it: instances pass ``isinstance`` checks
    against the base, and the base's own constructor is never run. Positional
    mixins are copied instead. A mapping is merged as-is, a class contributes
    the members of its MRO (without ``isinstance`` compatibility), and any
    other callable is a factory called with the list of bases accumulated so
    far, returning the mapping to merge. Later mixins override earlier ones
    and the base.

    Instantiating the result calls ``init`` with the constructor arguments.
    """
    namespace: dict[str, Any] = {}
    bags: list[Mapping[str, Any]] = []
    bases: list = [base] if base is not None else []

    for mixin in mixins:
        bag = _as_bag(mixin, bases)
        bases.append(bag)
        bags.append(bag)
        namespace.update(bag)

    namespace["__init__"] = _construct
    namespace["__mixins__"] = tuple(bags)
    namespace.setdefault("__module__", __name__)

    class_name = name or (base.__name__ if base is not None else "Class")
    klass = type(class_name, (base,) if base is not None else (object,), namespace)
    logger.debug("Built class %s from %d mixin(s), base=%s", class_name, len(bags), base)
    return klass

"""Tests for class construction with mixins."""

from panekit.classes import class_members, new_class


def _init_x(self):
    self.x = 1


def test_inherits_base_and_merges_mixin():
    Base = new_class({"init": _init_x})
    Child = new_class({"get_x": lambda self: self.x}, base=Base)

    obj = Child()
    assert obj.get_x() == 1
    assert isinstance(obj, Base)


def test_later_mixin_overrides_earlier():
    Greeter = new_class(
        {"init": lambda self: None, "greet": lambda self: "a"},
        {"greet": lambda self: "b"},
    )
    assert Greeter().greet() == "b"


def test_mixin_overrides_base():
    Base = new_class({"init": lambda self: None, "greet": lambda self: "a"})
    Child = new_class({"greet": lambda self: "b"}, base=Base)
    assert Child().greet() == "b"
    assert Base().greet() == "a"


def test_constructor_arguments_go_to_init():
    Point = new_class({"init": lambda self, x, y=0: setattr(self, "xy", (x, y))})
    assert Point(3, y=4).xy == (3, 4)


def test_base_constructor_is_not_run():
    class Base:
        def __init__(self):
            raise AssertionError("base constructor ran")

        def hello(self):
            return "hi"

    Child = new_class({"init": lambda self: None}, base=Base)
    assert Child().hello() == "hi"


def test_init_errors_propagate():
    def init(self):
        raise ValueError("bad")

    Broken = new_class({"init": init})
    try:
        Broken()
    except ValueError as exc:
        assert str(exc) == "bad"
    else:
        raise AssertionError("expected ValueError")


def test_factory_receives_accumulated_bases():
    seen = []
    first = {"init": lambda self: None, "a": 1}

    def factory(bases):
        seen.append(bases)
        return {"b": bases[-1]["a"] + 1}

    Base = new_class({"base_member": True})
    Built = new_class(first, factory, base=Base)

    assert seen == [[Base, first]]
    assert Built().b == 2
    assert Built.__mixins__ == (first, {"b": 2})


def test_class_mixin_is_copied_without_inheritance():
    class Mixin:
        def shout(self):
            return "hey"

    class Loud(Mixin):
        volume = 11

    Built = new_class(Loud, {"init": lambda self: None})
    obj = Built()
    assert obj.shout() == "hey"
    assert obj.volume == 11
    assert not isinstance(obj, Loud)


def test_class_members_skip_internals():
    class Sample:
        """Doc."""

        def __init__(self):
            pass

        def method(self):
            pass

    members = class_members(Sample)
    assert "method" in members
    assert "__init__" not in members
    assert "__doc__" not in members
    assert "__dict__" not in members


def test_class_name():
    Base = new_class({"init": lambda self: None})
    assert new_class(base=Base).__name__ == Base.__name__
    assert new_class({}, name="Widget").__name__ == "Widget"

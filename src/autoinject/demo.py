"""Demo beans used by ``autoinject demo`` and the default mapping file."""

from typing import Protocol

from autoinject.injection import ImplementationRegistry, Injectable


class SomeInterface(Protocol):
    def do_something(self) -> str:
        ...


class SomeOtherInterface(Protocol):
    def do_some_other(self) -> str:
        ...


class SomeImpl:
    def do_something(self) -> str:
        return "A"


class OtherImpl:
    def do_something(self) -> str:
        return "B"


class SODoer:
    def do_some_other(self) -> str:
        return "C"


class SomeBean:
    field1: SomeInterface = Injectable()
    field2: SomeOtherInterface = Injectable()

    def foo(self) -> str:
        # AttributeError unless both fields were injected
        return self.field1.do_something() + self.field2.do_some_other()


def build_registry() -> ImplementationRegistry:
    """Registry holding the demo implementations under their canonical names."""
    registry = ImplementationRegistry()
    for cls in (SomeImpl, OtherImpl, SODoer):
        registry.register(cls)
    return registry

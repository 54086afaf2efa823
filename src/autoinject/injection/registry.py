"""
Implementation lookup: implementation identifier -> zero-argument factory.

ImplementationRegistry is the default locator. Implementations are registered
explicitly, usually with the decorator form:

    registry = ImplementationRegistry()

    @registry.register
    class SomeImpl:
        ...

    registry.add("circle", make_circle, provides=Circle)

ImportLocator resolves dotted paths with importlib and is only used when a
caller opts in.
"""

import importlib
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, get_type_hints

from .exceptions import ImplementationNotFoundError
from .fields import type_identifier


@dataclass(frozen=True)
class Implementation:
    """
    A locatable implementation.

    Attributes:
        identifier: Name used in mapping values
        provides: Type of the instances the factory builds (used for the
            compatibility check before anything is constructed)
        factory: Zero-argument callable building a new instance
    """
    identifier: str
    provides: type
    factory: Callable[[], Any]


def _provided_type(factory: Callable[[], Any]) -> Optional[type]:
    if inspect.isclass(factory):
        return factory
    try:
        returned = get_type_hints(factory).get('return')
    except (NameError, TypeError):
        return None
    return returned if inspect.isclass(returned) else None


class ImplementationRegistry:
    """Explicit name -> factory table."""

    def __init__(self):
        self._entries: Dict[str, Implementation] = {}

    def add(
        self,
        identifier: str,
        factory: Callable[[], Any],
        provides: Optional[type] = None
    ) -> Implementation:
        """Register ``factory`` under ``identifier``; a later add replaces an earlier one.

        Raises:
            ValueError: If the identifier is blank or the provided type
                cannot be determined (pass ``provides`` for plain functions
                without a return annotation)
        """
        if not identifier or not identifier.strip():
            raise ValueError("Implementation identifier must not be blank")

        provided = provides or _provided_type(factory)
        if provided is None:
            raise ValueError(
                f"Cannot determine the type built by {factory!r}; pass provides="
            )

        implementation = Implementation(identifier.strip(), provided, factory)
        self._entries[implementation.identifier] = implementation
        return implementation

    def register(self, target=None, *, name: Optional[str] = None):
        """Class decorator registering a class under ``name`` (default: its canonical name).

        Usable bare (``@registry.register``) or with arguments
        (``@registry.register(name="circle")``).
        """
        def decorator(cls):
            self.add(name or type_identifier(cls), cls)
            return cls

        if target is not None:
            return decorator(target)
        return decorator

    def locate(self, identifier: str) -> Implementation:
        try:
            return self._entries[identifier]
        except KeyError:
            raise ImplementationNotFoundError(
                f"No implementation registered as '{identifier}'",
                implementation=identifier
            ) from None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __iter__(self) -> Iterator[Implementation]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


class ImportLocator:
    """Resolves ``package.module.Class`` or ``package.module:Outer.Inner`` with importlib.

    The longest importable module prefix wins for the dotted form.
    """

    def locate(self, identifier: str) -> Implementation:
        module_name, colon, attr_path = identifier.partition(':')
        segments = f"{module_name}.{attr_path}" if colon else identifier
        if '' in segments.split('.') or not (colon or '.' in identifier):
            raise ImplementationNotFoundError(
                f"Invalid implementation identifier '{identifier}'",
                implementation=identifier
            )

        if colon:
            candidates = [(module_name, attr_path)]
        else:
            parts = identifier.split('.')
            candidates = [
                ('.'.join(parts[:i]), '.'.join(parts[i:]))
                for i in range(len(parts) - 1, 0, -1)
            ]

        for module_name, attr_path in candidates:
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                continue
            except Exception as e:
                raise ImplementationNotFoundError(
                    f"Cannot import implementation '{identifier}': "
                    f"module '{module_name}' failed to load ({e})",
                    implementation=identifier
                ) from e

            obj: Any = module
            try:
                for attr in attr_path.split('.'):
                    obj = getattr(obj, attr)
            except AttributeError:
                continue

            if not inspect.isclass(obj):
                raise ImplementationNotFoundError(
                    f"'{identifier}' resolves to {type(obj).__name__}, not a class",
                    implementation=identifier
                )
            return Implementation(identifier, obj, obj)

        raise ImplementationNotFoundError(
            f"Cannot import implementation '{identifier}'",
            implementation=identifier
        )


def _own_bases(cls: type) -> list:
    return [
        base for base in cls.__mro__
        if base is not object and base.__module__ != 'typing'
    ]


def _annotated_names(cls: type) -> set:
    names = set()
    for base in _own_bases(cls):
        names.update(getattr(base, '__annotations__', {}))
    return names


def _protocol_members(protocol: type) -> set:
    members = set()
    for base in _own_bases(protocol):
        members.update(vars(base))
        members.update(getattr(base, '__annotations__', {}))
    return {name for name in members if not name.startswith('_')}


def is_compatible(implementation: type, abstraction: type) -> bool:
    """Whether instances of ``implementation`` satisfy ``abstraction``.

    Protocols are checked structurally (every method and attribute present,
    runtime checkable or not); any other class nominally with issubclass().
    A data member counts as present when the implementation defines it or
    declares it with an annotation.
    """
    if implementation is abstraction:
        return True
    if getattr(abstraction, '_is_protocol', False):
        declared = _annotated_names(implementation)
        return all(
            hasattr(implementation, name) or name in declared
            for name in _protocol_members(abstraction)
        )
    return issubclass(implementation, abstraction)

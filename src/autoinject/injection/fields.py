"""
Injectable field declarations.

A type opts fields into injection at class-creation time, either with the
``Injectable`` descriptor:

    class SomeBean:
        field1: SomeInterface = Injectable()
        field2: SomeOtherInterface = Injectable()
        shared: ClassVar[SomeInterface] = Injectable()    # class-level, skipped
        pinned: Final[SomeInterface] = Injectable()       # read-only, rejected

or by registering a setter the type already exposes:

    register_field(Bean, "shape", Shape, setter=Bean.set_shape)

Declarations are kept per type (never inherited) in declaration order.
"""

import types
import weakref
from dataclasses import dataclass
from enum import Enum
from typing import (
    Annotated, Any, Callable, ClassVar, Final, List, Optional, Tuple, Union,
    get_args, get_origin, get_type_hints
)

from .exceptions import FieldDeclarationError

Setter = Callable[[Any, Any], None]
Getter = Callable[[Any], Any]
_UNION_ORIGINS = (Union, getattr(types, "UnionType", Union))


class Mutability(Enum):
    NORMAL = "normal"
    READ_ONLY = "read-only"


@dataclass(frozen=True)
class FieldDeclaration:
    """What a type declared about one injectable field.

    Attributes:
        name: Field name
        abstraction: Explicit abstraction type (None: take it from the annotation)
        readonly: Declared read-only
        static: Declared class-level
        setter: Writes the field on an instance; None for read-only fields
        annotated: Whether the owner's annotation for ``name`` refines the
            declaration (ClassVar/Final/type)
        getter: Reads the field back for reports; None: plain attribute access
    """
    name: str
    abstraction: Optional[type] = None
    readonly: bool = False
    static: bool = False
    setter: Optional[Setter] = None
    annotated: bool = False
    getter: Optional[Getter] = None


@dataclass(frozen=True)
class InjectableField:
    """A discovered injectable field, resolved against the owner's annotations."""
    name: str
    owner: type
    abstraction: Any
    mutability: Mutability
    static: bool
    setter: Optional[Setter]
    getter: Optional[Getter] = None

    @property
    def abstraction_id(self) -> str:
        return type_identifier(self.abstraction)


_DECLARATIONS: "weakref.WeakKeyDictionary[type, List[FieldDeclaration]]" = weakref.WeakKeyDictionary()


def type_identifier(tp: Any) -> str:
    """Canonical ``module.qualname`` of a type (repr() for anything else)."""
    if isinstance(tp, type):
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


def _declare(owner: type, declaration: FieldDeclaration) -> None:
    declarations = _DECLARATIONS.setdefault(owner, [])
    for i, existing in enumerate(declarations):
        if existing.name == declaration.name:
            declarations[i] = declaration
            return
    declarations.append(declaration)


class Injectable:
    """Descriptor marking an attribute as injectable.

    Args:
        abstraction: Abstraction type; defaults to the attribute's annotation
        readonly: Reject injection into this field

    Reading a field that was never assigned raises AttributeError.
    """

    def __init__(self, abstraction: Optional[type] = None, *, readonly: bool = False):
        self.abstraction = abstraction
        self.readonly = readonly
        self.name: Optional[str] = None

    def __set_name__(self, owner, name):
        self.name = name
        _declare(owner, FieldDeclaration(
            name=name,
            abstraction=self.abstraction,
            readonly=self.readonly,
            setter=None if self.readonly else self._write,
            annotated=True
        ))

    def _write(self, instance, value):
        instance.__dict__[self.name] = value

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        try:
            return instance.__dict__[self.name]
        except KeyError:
            raise AttributeError(
                f"'{type(instance).__name__}' field '{self.name}' has not been injected"
            ) from None

    def __set__(self, instance, value):
        if self.readonly and self.name in instance.__dict__:
            raise AttributeError(f"'{type(instance).__name__}' field '{self.name}' is read-only")
        instance.__dict__[self.name] = value

    def __repr__(self):
        parts = [] if self.abstraction is None else [type_identifier(self.abstraction)]
        if self.readonly:
            parts.append("readonly=True")
        return f"Injectable({', '.join(parts)})"


def register_field(
    owner: type,
    name: str,
    abstraction: type,
    setter: Optional[Setter],
    static: bool = False,
    getter: Optional[Getter] = None
) -> None:
    """Declare ``owner.name`` injectable through an explicit setter.

    ``setter(instance, value)`` is called to write the field; an unbound
    method such as ``Bean.set_shape`` works. Passing ``setter=None`` declares
    the field read-only. ``getter(instance)`` reads the value back for
    describe_injected() when the setter stores it under another name.
    """
    _declare(owner, FieldDeclaration(
        name=name,
        abstraction=abstraction,
        readonly=setter is None,
        static=static,
        setter=setter,
        getter=getter
    ))


def _owner_hints(owner: type) -> dict:
    try:
        return get_type_hints(owner, include_extras=True)
    except (NameError, TypeError) as e:
        raise FieldDeclarationError(
            f"Cannot resolve annotations of {type_identifier(owner)}: {e}"
        ) from e


def _unwrap(hint: Any) -> Tuple[Any, bool, bool]:
    """Strip ClassVar/Final/Annotated/Optional from an annotation.

    Returns:
        (inner type, is class-level, is read-only)
    """
    static = readonly = False
    while True:
        origin = get_origin(hint)
        if hint is ClassVar or origin is ClassVar:
            static = True
        elif hint is Final or origin is Final:
            readonly = True
        elif origin is Annotated:
            hint = get_args(hint)[0]
            continue
        elif origin in _UNION_ORIGINS:
            args = [a for a in get_args(hint) if a is not type(None)]
            if len(args) != 1:
                return hint, static, readonly
            hint = args[0]
            continue
        else:
            return hint, static, readonly
        args = get_args(hint)
        if not args:
            return None, static, readonly
        hint = args[0]


def injectable_fields(owner: type) -> List[InjectableField]:
    """Injectable fields declared directly on ``owner``, in declaration order.

    Inherited declarations are not included. Nothing is cached: annotations
    are re-read on every call.

    Raises:
        FieldDeclarationError: If the owner's annotations cannot be resolved
    """
    declarations = list(_DECLARATIONS.get(owner, ()))
    if not declarations:
        return []

    hints = _owner_hints(owner) if any(d.annotated for d in declarations) else {}

    fields = []
    for d in declarations:
        abstraction, static, readonly = d.abstraction, d.static, d.readonly
        if d.annotated and d.name in hints:
            hinted, hinted_static, hinted_readonly = _unwrap(hints[d.name])
            static = static or hinted_static
            readonly = readonly or hinted_readonly
            if abstraction is None:
                abstraction = hinted

        fields.append(InjectableField(
            name=d.name,
            owner=owner,
            abstraction=abstraction,
            mutability=Mutability.READ_ONLY if readonly else Mutability.NORMAL,
            static=static,
            setter=None if readonly else d.setter,
            getter=d.getter
        ))
    return fields


def describe_injected(obj: Any) -> List[Tuple[str, str, Optional[str]]]:
    """Report ``(field, abstraction id, implementation id or None)`` per injectable field."""
    report = []
    for field in injectable_fields(type(obj)):
        value = field.getter(obj) if field.getter else getattr(obj, field.name, None)
        report.append((
            field.name,
            field.abstraction_id,
            None if value is None else type_identifier(type(value))
        ))
    return report

"""Field injection driven by a mapping store and an implementation locator."""

import inspect
from dataclasses import dataclass
from typing import Iterable, List, Optional, TypeVar

from autoinject.core.implementations import LoggingObserver, StandardLogger
from autoinject.core.protocols import ImplementationLocator, InjectionObserver, Logger
from .exceptions import (
    FieldDeclarationError,
    ImmutableFieldError,
    ImplementationNotFoundError,
    IncompatibleTypeError,
    InjectionError,
    InstantiationError,
    UnresolvedDependencyError,
)
from .fields import InjectableField, Mutability, injectable_fields, type_identifier
from .mapping import MappingStore
from .registry import is_compatible

T = TypeVar('T')


@dataclass(frozen=True)
class InjectionRecord:
    """
    One successful injection.

    Attributes:
        owner: Simple name of the target's type
        field: Field name
        abstraction: Abstraction identifier (mapping key)
        implementation: Canonical name of the injected instance's type
    """
    owner: str
    field: str
    abstraction: str
    implementation: str


class Injector:
    """Resolves and assigns injectable fields of target objects.

    Args:
        mapping: Abstraction identifier -> implementation identifier
        locator: Turns implementation identifiers into factories
        logger: Logging abstraction (default: stdlib logging)
        observers: Receive an InjectionRecord per injected field; when none
            are given, records are logged through ``logger``

    The mapping and locator are only read, so one Injector can serve several
    targets concurrently. Injecting the same target from two threads at once
    is not supported.
    """

    def __init__(
        self,
        mapping: MappingStore,
        locator: ImplementationLocator,
        logger: Optional[Logger] = None,
        observers: Iterable[InjectionObserver] = ()
    ):
        self.mapping = mapping
        self.locator = locator
        self.log = logger or StandardLogger(__name__)
        self.observers: List[InjectionObserver] = list(observers) or [LoggingObserver(self.log)]

    def inject(self, target: T) -> T:
        """Inject every injectable field declared on ``type(target)``.

        Fields are processed in declaration order and each gets a freshly
        constructed instance, also on repeated calls. The first failing field
        aborts the call; fields injected before it keep their new values.

        Returns:
            ``target`` itself

        Raises:
            InjectionError: Describes the first failing field; the base class
                itself when the setter rejects the value
        """
        fields = injectable_fields(type(target))
        self.log.debug(f"Injecting {len(fields)} field(s) into {type(target).__name__}")

        for field in fields:
            if field.mutability is Mutability.READ_ONLY or field.setter is None:
                raise ImmutableFieldError(
                    f"Cannot inject into read-only field: {field.name}",
                    field=field.name
                )
            if field.static:
                self.log.debug(f"Skipping class-level field {field.owner.__name__}.{field.name}")
                continue

            record = self._inject_field(target, field)
            for observer in self.observers:
                observer.on_injected(record)

        return target

    def _inject_field(self, target, field: InjectableField) -> InjectionRecord:
        if not inspect.isclass(field.abstraction):
            raise FieldDeclarationError(
                f"Injectable field '{field.name}' on {field.owner.__name__} "
                f"does not declare an abstraction type (got {field.abstraction!r})",
                field=field.name
            )

        key = field.abstraction_id
        impl_name = self.mapping.get(key)
        if impl_name is None:
            raise UnresolvedDependencyError(
                f"No implementation mapping for: {key} (field: {field.name})",
                field=field.name,
                abstraction=key
            )

        try:
            implementation = self.locator.locate(impl_name)
        except ImplementationNotFoundError as e:
            raise ImplementationNotFoundError(
                f"{e} (field: {field.name}, abstraction: {key})",
                field=field.name,
                abstraction=key,
                implementation=impl_name
            ) from e

        if not is_compatible(implementation.provides, field.abstraction):
            raise IncompatibleTypeError(
                f"Class {impl_name} is not assignable to {key} (field: {field.name})",
                field=field.name,
                abstraction=key,
                implementation=impl_name
            )

        try:
            instance = implementation.factory()
        except Exception as e:
            raise InstantiationError(
                f"Failed to inject field: {field.name} with impl: {impl_name} ({e})",
                field=field.name,
                abstraction=key,
                implementation=impl_name
            ) from e

        try:
            field.setter(target, instance)
        except Exception as e:
            raise InjectionError(
                f"Failed to inject field: {field.name} with impl: {impl_name} "
                f"(cannot assign: {e})",
                field=field.name,
                abstraction=key,
                implementation=impl_name
            ) from e

        return InjectionRecord(
            owner=type(target).__name__,
            field=field.name,
            abstraction=key,
            implementation=type_identifier(type(instance))
        )

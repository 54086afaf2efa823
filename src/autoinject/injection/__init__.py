"""
Field injection subsystem.

Public API:
    - Injector, InjectionRecord: resolve and assign injectable fields
    - MappingStore: abstraction identifier -> implementation identifier
    - Injectable, register_field: declare injectable fields
    - ImplementationRegistry, ImportLocator: implementation lookup
    - InjectionError and its subclasses
"""

from .exceptions import (
    InjectionError,
    ConfigLoadError,
    FieldDeclarationError,
    ImmutableFieldError,
    UnresolvedDependencyError,
    ImplementationNotFoundError,
    IncompatibleTypeError,
    InstantiationError,
)
from .fields import (
    Injectable,
    InjectableField,
    Mutability,
    describe_injected,
    injectable_fields,
    register_field,
    type_identifier,
)
from .mapping import MappingStore, parse_properties
from .registry import Implementation, ImplementationRegistry, ImportLocator, is_compatible
from .injector import Injector, InjectionRecord

__all__ = [
    # Injector
    "Injector",
    "InjectionRecord",

    # Mapping
    "MappingStore",
    "parse_properties",

    # Fields
    "Injectable",
    "InjectableField",
    "Mutability",
    "describe_injected",
    "injectable_fields",
    "register_field",
    "type_identifier",

    # Implementations
    "Implementation",
    "ImplementationRegistry",
    "ImportLocator",
    "is_compatible",

    # Exceptions
    "InjectionError",
    "ConfigLoadError",
    "FieldDeclarationError",
    "ImmutableFieldError",
    "UnresolvedDependencyError",
    "ImplementationNotFoundError",
    "IncompatibleTypeError",
    "InstantiationError",
]

"""
Injection exceptions.

Every failure carries the field, abstraction and implementation involved so a
misconfiguration can be diagnosed from the message alone.
"""

from typing import Optional


class InjectionError(Exception):
    """
    Base class for all injection failures.

    Attributes:
        field: Name of the injectable field being processed (if any)
        abstraction: Abstraction identifier of the field (if known)
        implementation: Implementation identifier from the mapping (if known)
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        abstraction: Optional[str] = None,
        implementation: Optional[str] = None
    ):
        super().__init__(message)
        self.field = field
        self.abstraction = abstraction
        self.implementation = implementation


class ConfigLoadError(InjectionError):
    """
    Raised when a mapping source cannot be read or parsed.

    Examples:
        - File does not exist or is not readable
        - Line without '=' separator
        - Blank key
        - YAML document that is not a flat mapping
    """

    def __init__(self, message: str, path: Optional[str] = None, line: Optional[int] = None):
        super().__init__(message)
        self.path = path
        self.line = line


class FieldDeclarationError(InjectionError):
    """Raised when an injectable field declares no usable abstraction type."""
    pass


class ImmutableFieldError(InjectionError):
    """Raised when an injectable field is read-only."""
    pass


class UnresolvedDependencyError(InjectionError):
    """Raised when the mapping has no (or a blank) entry for an abstraction."""
    pass


class ImplementationNotFoundError(InjectionError):
    """Raised when a mapped implementation identifier cannot be located."""
    pass


class IncompatibleTypeError(InjectionError):
    """Raised when an implementation does not satisfy the declared abstraction."""
    pass


class InstantiationError(InjectionError):
    """
    Raised when an implementation cannot be constructed without arguments.

    The underlying exception (abstract type, missing arguments, constructor
    failure) is chained as ``__cause__``.
    """
    pass

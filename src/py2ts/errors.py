# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised while generating TypeScript declarations.

Two classes of failure exist. :class:`InvalidUnionError` and
:class:`InvalidTypeError` reject bad input before any declaration is touched,
so the generator stays usable. Every other error aborts generation and may
leave the generator in a partial state that should be discarded.
"""

from __future__ import annotations

# ###############
# Public Interface
# ###############


class GenerationError(Exception):
    """Base class for all errors raised by the generator."""


class InvalidUnionError(GenerationError):
    """Raised when the input to a literal union is not a usable sequence of constants."""


class InvalidTypeError(GenerationError):
    """Raised when a value cannot be registered as a top-level declaration."""


class UnsupportedTypeError(GenerationError):
    """Raised when a type has no TypeScript / JSON representation.

    Attributes:
        kind: The descriptor kind that could not be translated.
        type_name: Name of the offending type, empty for anonymous types.
        location: Where the type was reached from, e.g. ``"Order.total"``.
    """

    def __init__(self, kind: str, type_name: str = "", location: str = "") -> None:
        self.kind = kind
        self.type_name = type_name
        self.location = location
        message = f"Type kind {kind!r}"
        if type_name:
            message += f" ({type_name})"
        message += " can't be serialized to JSON"
        if location:
            message += f" at {location}"
        super().__init__(message)


class FieldNameCollisionError(GenerationError):
    """Raised when two fields of one interface resolve to the same property name.

    Attributes:
        interface: Name of the interface being built.
        field: The colliding property name.
    """

    def __init__(self, interface: str, field: str) -> None:
        self.interface = interface
        self.field = field
        super().__init__(f"Interface '{interface}' has more than one property named '{field}'")


class DeclarationConflictError(GenerationError):
    """Raised when a declaration cannot take the name it is given.

    This happens when a union is registered for a type already declared as an
    interface, or when two different types would be declared under the same
    qualified name.

    Attributes:
        name: Qualified name of the existing declaration.
        reason: Why the declaration is refused.
    """

    def __init__(self, name: str, reason: str = "it is already declared as an interface") -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot declare '{name}': {reason}")

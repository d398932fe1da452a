# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Abstract descriptors of host-language types consumed by the generator.

A descriptor graph is produced by a type provider (see
:mod:`py2ts.introspection`) or built by hand with the helper functions below.
The generator never looks at host runtime metadata directly.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

# ###############
# Public Interface
# ###############


class Kind(Enum):
    """Structural kind of a type descriptor."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "str"
    COMPLEX = "complex"
    BYTES = "bytes"
    CALLABLE = "callable"
    CHANNEL = "channel"
    OPAQUE = "opaque"
    POINTER = "pointer"
    RECORD = "record"
    COLLECTION = "collection"
    MAPPING = "mapping"
    ANY = "any"

    @property
    def is_primitive(self) -> bool:
        return self in _PRIMITIVE_KINDS


# (module, name) pairs of records that serialize as ISO-8601 strings.
TIMESTAMP_TYPES: frozenset[tuple[str, str]] = frozenset({("datetime", "datetime"), ("datetime", "date")})


@dataclass(eq=False)
class FieldDescriptor:
    """A single field of a record descriptor.

    Attributes:
        name: The field name as declared on the host type.
        type: Descriptor of the field's type.
        tags: Serialization tags keyed by tag name, e.g. ``{"json": "id,omitempty"}``.
        embedded: Whether the field embeds another record whose fields are promoted.
    """

    name: str
    type: TypeDescriptor
    tags: Mapping[str, str] = field(default_factory=dict)
    embedded: bool = False

    @property
    def is_exported(self) -> bool:
        return bool(self.name) and not self.name.startswith("_")


@dataclass(eq=False)
class TypeDescriptor:
    """Identity plus structural shape of one host type.

    Two descriptors are equal when their ``key`` is equal, regardless of shape.

    Attributes:
        key: Hashable identity of the host type.
        kind: Structural kind.
        name: Declared name, empty for anonymous shapes.
        module: Module the type was declared in, if known.
        elem: Pointer target, collection element, or mapping value.
        key_type: Mapping key descriptor.
        fixed_length: Whether a collection has a fixed number of elements.
        fields: Record fields in declaration order.
    """

    key: Hashable
    kind: Kind
    name: str = ""
    module: str = ""
    elem: TypeDescriptor | None = None
    key_type: TypeDescriptor | None = None
    fixed_length: bool = False
    fields: list[FieldDescriptor] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        label = self.name or "<anonymous>"
        return f"TypeDescriptor({self.kind.name}, {label!r})"

    @property
    def is_bare_primitive(self) -> bool:
        """True when the name is just the primitive's own name, e.g. ``int``."""
        return self.kind.is_primitive and self.name == self.kind.value

    @property
    def is_timestamp(self) -> bool:
        return self.kind is Kind.RECORD and (self.module, self.name) in TIMESTAMP_TYPES

    @property
    def display_name(self) -> str:
        return self.name or self.kind.value


class TypeProvider(Protocol):
    """Source of descriptors for host types and values."""

    def describe(self, annotation: Any) -> TypeDescriptor:
        """Return the descriptor of a type or type annotation."""
        ...

    def describe_value(self, value: Any) -> TypeDescriptor:
        """Return the descriptor of a value: a descriptor, a type, or an instance."""
        ...


def strip_indirection(descriptor: TypeDescriptor) -> TypeDescriptor:
    """Follow pointer descriptors until a non-pointer descriptor is reached."""
    while descriptor.kind is Kind.POINTER:
        assert descriptor.elem is not None
        descriptor = descriptor.elem
    return descriptor


def primitive(kind: Kind, name: str | None = None, *, key: Hashable | None = None) -> TypeDescriptor:
    """Build a primitive descriptor; without *name* it is the bare primitive."""
    if name is None:
        name = kind.value
    return TypeDescriptor(key=key if key is not None else ("primitive", kind, name), kind=kind, name=name)


def pointer(to: TypeDescriptor) -> TypeDescriptor:
    """Build an optional indirection over *to*."""
    return TypeDescriptor(key=("pointer", to.key), kind=Kind.POINTER, elem=to)


def record(
    name: str = "",
    fields: list[FieldDescriptor] | None = None,
    *,
    module: str = "",
    key: Hashable | None = None,
) -> TypeDescriptor:
    """Build a record descriptor. Without *key* every call yields a distinct identity."""
    return TypeDescriptor(
        key=key if key is not None else object(),
        kind=Kind.RECORD,
        name=name,
        module=module,
        fields=list(fields or []),
    )


def collection(elem: TypeDescriptor, *, fixed_length: bool = False, name: str = "") -> TypeDescriptor:
    """Build a collection descriptor; named collections are declared as aliases."""
    key = ("collection", elem.key, fixed_length) if not name else object()
    return TypeDescriptor(key=key, kind=Kind.COLLECTION, name=name, elem=elem, fixed_length=fixed_length)


def mapping(key_type: TypeDescriptor, value: TypeDescriptor, *, name: str = "") -> TypeDescriptor:
    """Build a mapping descriptor; named mappings are declared as aliases."""
    key = ("mapping", key_type.key, value.key) if not name else object()
    return TypeDescriptor(key=key, kind=Kind.MAPPING, name=name, key_type=key_type, elem=value)


def dynamic() -> TypeDescriptor:
    """Build a descriptor for a dynamically-typed value."""
    return TypeDescriptor(key=("any",), kind=Kind.ANY)


# ################
# Implementation
# ################

_PRIMITIVE_KINDS = frozenset({Kind.BOOL, Kind.INT, Kind.FLOAT, Kind.STRING})

# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Synthesis of literal union types from enumerated values."""

from __future__ import annotations

import json
import math
from collections.abc import Sequence
from enum import Enum
from typing import Any

from py2ts.errors import DeclarationConflictError, InvalidUnionError, UnsupportedTypeError
from py2ts.generator.registry import DeclarationRegistry
from py2ts.model.declarations import AliasDecl, InterfaceDecl, qualify
from py2ts.model.descriptors import Kind, TypeDescriptor, TypeProvider, strip_indirection
from py2ts.model.expressions import LiteralExpr, LiteralKind, UnionExpr

# ###############
# Public Interface
# ###############


class UnionSynthesizer:
    """Declares ``type Name = "a" | "b" | ...`` aliases.

    When the element type was already declared as an alias, for example
    because a record field used it, that alias is replaced by the union so the
    type is emitted once.
    """

    def __init__(self, registry: DeclarationRegistry, provider: TypeProvider) -> None:
        self._registry = registry
        self._provider = provider

    def add_union(
        self,
        values: Sequence[Any] | type[Enum],
        name: str = "",
        namespace: str = "",
        element_type: Any = None,
    ) -> str:
        """Declare a union of the literal *values* and return its qualified name.

        Args:
            values: A non-empty list or tuple of bool, number or string
                constants of one type, or an ``Enum`` class.
            name: Name of the union. Defaults to the element type's name.
            namespace: Namespace to emit the union in.
            element_type: The element type, when it cannot be taken from the
                values themselves (e.g. a ``NewType`` over ``str``).

        Raises:
            InvalidUnionError: If *values* is not a usable sequence or no name
                can be determined. Nothing is declared in that case.
            UnsupportedTypeError: If the elements are not bool, number or string.
            DeclarationConflictError: If the element type is declared as an interface.
        """
        members = _read_members(values)
        if element_type is not None:
            descriptor = self._provider.describe(element_type)
        else:
            descriptor = self._provider.describe_value(values if isinstance(values, type) else members[0])
        descriptor = strip_indirection(descriptor)
        if not descriptor.kind.is_primitive:
            raise UnsupportedTypeError(descriptor.kind.value, descriptor.name, name or "union")

        raw_values = [m.value if isinstance(m, Enum) else m for m in members]
        union = UnionExpr(members=[_literal(v, descriptor) for v in raw_values])

        if not name and not descriptor.is_bare_primitive:
            name = descriptor.name
        if not name:
            raise InvalidUnionError(f"A name is required for a union of {descriptor.kind.value} values")

        key = ("union", qualify(namespace, name)) if descriptor.is_bare_primitive else descriptor
        declaration = AliasDecl(name=name, namespace=namespace, expression=union)
        existing = self._registry.get(key)
        if isinstance(existing, InterfaceDecl):
            raise DeclarationConflictError(existing.qualified_name)
        if existing is not None:
            self._registry.replace(key, declaration)
            return declaration.qualified_name
        return self._registry.get_or_create(key, name, namespace, lambda: declaration).qualified_name


# ################
# Implementation
# ################


def _read_members(values: Any) -> list[Any]:
    if isinstance(values, type) and issubclass(values, Enum):
        members = list(values)
    elif isinstance(values, (list, tuple)):
        members = list(values)
    else:
        raise InvalidUnionError(f"Expected a list, tuple or Enum class of values, got {type(values).__name__}")

    if not members:
        raise InvalidUnionError("Cannot build a union from an empty sequence")
    element_kinds = {_value_kind(m) for m in members}
    if len(element_kinds) > 1:
        names = ", ".join(sorted(element_kinds))
        raise InvalidUnionError(f"Union values must all have the same type, got {names}")
    return members


def _value_kind(value: Any) -> str:
    # int and float values share one TypeScript number type.
    if isinstance(value, (int, float)) and not isinstance(value, (bool, Enum)):
        return "number"
    return type(value).__name__


def _literal(value: Any, descriptor: TypeDescriptor) -> LiteralExpr:
    kind = descriptor.kind
    if kind is Kind.BOOL and isinstance(value, bool):
        return LiteralExpr(literal=LiteralKind.BOOLEAN, text="true" if value else "false")
    if kind in (Kind.INT, Kind.FLOAT) and isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and not math.isfinite(value):
            raise UnsupportedTypeError(f"non-finite {kind.value}", descriptor.name, repr(value))
        return LiteralExpr(literal=LiteralKind.NUMBER, text=repr(value))
    if kind is Kind.STRING and isinstance(value, str):
        return LiteralExpr(literal=LiteralKind.STRING, text=json.dumps(value, ensure_ascii=False))
    raise InvalidUnionError(f"Value {value!r} does not match the union's {kind.value} element type")

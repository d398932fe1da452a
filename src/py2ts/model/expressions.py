# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""TypeScript type expressions produced by the generator."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class TSPrimitive(Enum):
    """Primitive TypeScript types."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ANY = "any"
    NULL = "null"


class IndexKind(Enum):
    """Key types allowed in a TypeScript index signature."""

    STRING = "string"
    NUMBER = "number"


class LiteralKind(Enum):
    """Kinds of TypeScript literal types."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"


class ReferenceExpr(BaseModel):
    """Reference to a declared interface or alias by (qualified) name."""

    kind: Literal["reference"] = "reference"
    name: str


class PrimitiveExpr(BaseModel):
    """A primitive TypeScript type."""

    kind: Literal["primitive"] = "primitive"
    primitive: TSPrimitive


class ArrayExpr(BaseModel):
    """An array ``T[]``."""

    kind: Literal["array"] = "array"
    element: TypeExpr


class MappingExpr(BaseModel):
    """An object with an index signature, ``{ [key: K]: V }``."""

    kind: Literal["mapping"] = "mapping"
    index: IndexKind
    value: TypeExpr


class UnionExpr(BaseModel):
    """A union ``A | B | ...`` whose members keep their order."""

    kind: Literal["union"] = "union"
    members: list[TypeExpr]


class LiteralExpr(BaseModel):
    """A literal type such as ``"up"``, ``3`` or ``true``.

    ``text`` holds the literal exactly as it is written in TypeScript.
    """

    kind: Literal["literal"] = "literal"
    literal: LiteralKind
    text: str


# A TypeScript type expression. The `kind` discriminator keeps validation unambiguous.
TypeExpr = Annotated[
    ReferenceExpr | PrimitiveExpr | ArrayExpr | MappingExpr | UnionExpr | LiteralExpr,
    _Field(discriminator="kind"),
]


def nullable(expr: TypeExpr) -> UnionExpr:
    """Return ``expr | null``."""
    return UnionExpr(members=[expr, PrimitiveExpr(primitive=TSPrimitive.NULL)])


def to_typescript(expr: TypeExpr) -> str:
    """Render a type expression as TypeScript source."""
    if isinstance(expr, ReferenceExpr):
        return expr.name
    if isinstance(expr, PrimitiveExpr):
        return expr.primitive.value
    if isinstance(expr, ArrayExpr):
        inner = to_typescript(expr.element)
        if isinstance(expr.element, UnionExpr):
            inner = f"({inner})"
        return f"{inner}[]"
    if isinstance(expr, MappingExpr):
        return f"{{ [key: {expr.index.value}]: {to_typescript(expr.value)} }}"
    if isinstance(expr, UnionExpr):
        return " | ".join(to_typescript(m) for m in expr.members)
    # LiteralExpr is the only remaining variant.
    assert isinstance(expr, LiteralExpr)
    return expr.text


def walk(expr: TypeExpr):
    """Yield *expr* and every expression nested inside it, depth first."""
    yield expr
    if isinstance(expr, ArrayExpr):
        yield from walk(expr.element)
    elif isinstance(expr, MappingExpr):
        yield from walk(expr.value)
    elif isinstance(expr, UnionExpr):
        for member in expr.members:
            yield from walk(member)


# Resolve forward references for models that use TypeExpr.
ArrayExpr.model_rebuild()
MappingExpr.model_rebuild()
UnionExpr.model_rebuild()

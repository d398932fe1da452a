# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for py2ts: type descriptors, TypeScript expressions and declarations."""

from py2ts.model.declarations import AliasDecl, Declaration, InterfaceDecl, PropertyDef, qualify
from py2ts.model.descriptors import (
    TIMESTAMP_TYPES,
    FieldDescriptor,
    Kind,
    TypeDescriptor,
    collection,
    dynamic,
    mapping,
    pointer,
    primitive,
    record,
    strip_indirection,
)
from py2ts.model.expressions import (
    ArrayExpr,
    IndexKind,
    LiteralExpr,
    LiteralKind,
    MappingExpr,
    PrimitiveExpr,
    ReferenceExpr,
    TSPrimitive,
    TypeExpr,
    UnionExpr,
    nullable,
    to_typescript,
    walk,
)

__all__ = [
    # Descriptors
    "Kind",
    "TypeDescriptor",
    "FieldDescriptor",
    "TIMESTAMP_TYPES",
    "primitive",
    "pointer",
    "record",
    "collection",
    "mapping",
    "dynamic",
    "strip_indirection",
    # Expressions
    "TSPrimitive",
    "IndexKind",
    "LiteralKind",
    "ReferenceExpr",
    "PrimitiveExpr",
    "ArrayExpr",
    "MappingExpr",
    "UnionExpr",
    "LiteralExpr",
    "TypeExpr",
    "nullable",
    "to_typescript",
    "walk",
    # Declarations
    "PropertyDef",
    "InterfaceDecl",
    "AliasDecl",
    "Declaration",
    "qualify",
]

# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive translation of type descriptors into TypeScript expressions.

The translator is the heart of the generator. Every named type it meets is
declared exactly once in the :class:`~py2ts.generator.registry.DeclarationRegistry`
and referenced by name from then on, which is also what makes recursive
types terminate. Anonymous records are declared under ``AnonymousN`` names;
everything else is translated structurally.
"""

from __future__ import annotations

from py2ts.generator.fields import extract_properties
from py2ts.generator.primitives import classify, index_kind
from py2ts.generator.registry import DeclarationRegistry
from py2ts.model.declarations import AliasDecl, InterfaceDecl, qualify
from py2ts.model.descriptors import Kind, TypeDescriptor, strip_indirection
from py2ts.model.expressions import (
    ArrayExpr,
    MappingExpr,
    PrimitiveExpr,
    ReferenceExpr,
    TSPrimitive,
    TypeExpr,
    nullable,
)

# ###############
# Public Interface
# ###############


class TypeTranslator:
    """Translates descriptors, declaring named types in *registry* as it goes."""

    def __init__(self, registry: DeclarationRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> DeclarationRegistry:
        return self._registry

    def translate(
        self,
        descriptor: TypeDescriptor,
        namespace: str = "",
        explicit: bool = False,
        suppress_null: bool = False,
        location: str = "",
    ) -> TypeExpr:
        """Translate *descriptor* into a type expression.

        Args:
            descriptor: The type to translate.
            namespace: Namespace for declarations first reached from here.
            explicit: True when *descriptor* is the type being declared itself,
                in which case it is translated structurally instead of by name.
            suppress_null: Never add ``| null`` anywhere in this subtree.
            location: Where the type was reached from, for error messages.

        Raises:
            UnsupportedTypeError: If the type, or any type reached from it, has
                no JSON representation.
        """
        can_be_null = False
        if descriptor.kind is Kind.POINTER:
            can_be_null = True
            descriptor = strip_indirection(descriptor)

        if not explicit:
            reserved = self._registry.name_of(descriptor)
            if reserved is not None:
                return _finish(ReferenceExpr(name=reserved), can_be_null, suppress_null)
            # A named type gets its own declaration, e.g. ``Mode`` rather than ``string``.
            if descriptor.name and not descriptor.is_bare_primitive and not descriptor.is_timestamp:
                name = self.declare(descriptor, namespace=namespace, suppress_null=suppress_null, location=location)
                return _finish(ReferenceExpr(name=name), can_be_null, suppress_null)

        expr: TypeExpr
        if descriptor.kind is Kind.RECORD:
            if descriptor.is_timestamp:
                expr = PrimitiveExpr(primitive=TSPrimitive.STRING)
            else:
                name = self.declare(descriptor, namespace=namespace, suppress_null=suppress_null, location=location)
                expr = ReferenceExpr(name=name)
        elif descriptor.kind is Kind.COLLECTION:
            assert descriptor.elem is not None
            expr = ArrayExpr(element=self.translate(descriptor.elem, namespace, False, suppress_null, location))
            can_be_null = not descriptor.fixed_length
        elif descriptor.kind is Kind.MAPPING:
            assert descriptor.key_type is not None and descriptor.elem is not None
            expr = MappingExpr(
                index=index_kind(strip_indirection(descriptor.key_type), location),
                value=self.translate(descriptor.elem, namespace, False, suppress_null, location),
            )
        else:
            expr = PrimitiveExpr(primitive=classify(descriptor, location))
        return _finish(expr, can_be_null, suppress_null)

    def declare(
        self,
        descriptor: TypeDescriptor,
        name: str = "",
        namespace: str = "",
        suppress_null: bool = False,
        location: str = "",
    ) -> str:
        """Declare *descriptor* unless already declared, and return its qualified name.

        Records become interfaces named *name*, else their capitalised type
        name, else ``AnonymousN``. Other types become aliases over their
        structural translation.
        """
        descriptor = strip_indirection(descriptor)
        reserved = self._registry.name_of(descriptor)
        if reserved is not None:
            return reserved

        if descriptor.kind is Kind.RECORD and not descriptor.is_timestamp:
            name = name or _capitalize(descriptor.name) or self._registry.anonymous_name()

            def build_interface() -> InterfaceDecl:
                properties = extract_properties(
                    descriptor,
                    qualify(namespace, name),
                    namespace,
                    suppress_null,
                    self._translate_field,
                )
                return InterfaceDecl(name=name, namespace=namespace, properties=properties)

            return self._registry.get_or_create(descriptor, name, namespace, build_interface).qualified_name

        name = name or descriptor.name or self._registry.anonymous_name()

        def build_alias() -> AliasDecl:
            expression = self.translate(descriptor, namespace, True, suppress_null, location or name)
            return AliasDecl(name=name, namespace=namespace, expression=expression)

        return self._registry.get_or_create(descriptor, name, namespace, build_alias).qualified_name

    def _translate_field(
        self, descriptor: TypeDescriptor, namespace: str, suppress_null: bool, location: str
    ) -> TypeExpr:
        return self.translate(descriptor, namespace, False, suppress_null, location)


# ################
# Implementation
# ################


def _finish(expr: TypeExpr, can_be_null: bool, suppress_null: bool) -> TypeExpr:
    if can_be_null and not suppress_null:
        return nullable(expr)
    return expr


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]

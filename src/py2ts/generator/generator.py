# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""The public entry point for registering types and rendering TypeScript."""

from __future__ import annotations

import io
from collections.abc import Sequence
from enum import Enum
from typing import Any, TextIO

from py2ts.errors import InvalidTypeError
from py2ts.generator.registry import DeclarationRegistry
from py2ts.generator.render import render
from py2ts.generator.translator import TypeTranslator
from py2ts.generator.unions import UnionSynthesizer
from py2ts.introspection.python import PythonTypeProvider
from py2ts.model.descriptors import TypeProvider, strip_indirection

# ###############
# Public Interface
# ###############


class Generator:
    """Collects Python types and renders them as TypeScript declarations.

    Records (dataclasses, pydantic models, TypedDicts) become interfaces,
    other named types become type aliases. Registering the same type again,
    whether as a class, an instance, ``Optional[...]`` or a descriptor, has no
    effect: the first registration decides the name.

    A generator is single-use per output file and not thread-safe. After a
    :class:`~py2ts.errors.GenerationError` other than
    :class:`~py2ts.errors.InvalidUnionError` or
    :class:`~py2ts.errors.InvalidTypeError` it should be discarded.

    Example::

        generator = Generator()
        generator.add(Turtle)
        generator.add_union(Direction)
        generator.render(sys.stdout)
    """

    def __init__(self, provider: TypeProvider | None = None) -> None:
        self._provider = provider if provider is not None else PythonTypeProvider()
        self._registry = DeclarationRegistry()
        self._translator = TypeTranslator(self._registry)
        self._unions = UnionSynthesizer(self._registry, self._provider)

    @property
    def registry(self) -> DeclarationRegistry:
        return self._registry

    def add(self, value: Any, *, name: str = "", namespace: str = "") -> str:
        """Register a type and everything reachable from it.

        Args:
            value: A type, a type annotation, a
                :class:`~py2ts.model.descriptors.TypeDescriptor`, or an instance
                whose type should be registered.
            name: Declaration name. Defaults to the type's own name.
            namespace: TypeScript namespace to emit the declaration in.

        Returns:
            The name the type is referenced by, qualified with its namespace.

        Raises:
            InvalidTypeError: If *value* is a plain primitive such as ``int``.
            UnsupportedTypeError: If a reachable type has no JSON representation.
            FieldNameCollisionError: If a record has two properties with one name.
        """
        descriptor = strip_indirection(self._provider.describe_value(value))
        if descriptor.is_bare_primitive:
            raise InvalidTypeError(f"Cannot declare the primitive type '{descriptor.name}' on its own")
        return self._translator.declare(descriptor, name=name, namespace=namespace)

    def add_multiple(self, *values: Any, namespace: str = "") -> list[str]:
        """Register several types in order, stopping at the first error."""
        return [self.add(value, namespace=namespace) for value in values]

    def add_union(
        self,
        values: Sequence[Any] | type[Enum],
        *,
        name: str = "",
        namespace: str = "",
        element_type: Any = None,
    ) -> str:
        """Declare a union of literal values, e.g. ``type Direction = "up" | "down"``.

        See :meth:`py2ts.generator.unions.UnionSynthesizer.add_union`.
        """
        return self._unions.add_union(values, name=name, namespace=namespace, element_type=element_type)

    def render(self, out: TextIO) -> None:
        """Write the TypeScript declarations to *out*."""
        render(self._registry, out)

    def render_string(self) -> str:
        """Return the TypeScript declarations as a string."""
        buffer = io.StringIO()
        render(self._registry, buffer)
        return buffer.getvalue()

# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for translating descriptors into TypeScript expressions."""

import pytest

from py2ts import UnsupportedTypeError
from py2ts.generator import DeclarationRegistry, TypeTranslator
from py2ts.model import (
    AliasDecl,
    FieldDescriptor,
    InterfaceDecl,
    Kind,
    TypeDescriptor,
    collection,
    dynamic,
    mapping,
    pointer,
    primitive,
    record,
    to_typescript,
)

STRING = primitive(Kind.STRING)
INT = primitive(Kind.INT)


@pytest.fixture
def translator() -> TypeTranslator:
    return TypeTranslator(DeclarationRegistry())


def _ts(translator: TypeTranslator, descriptor: TypeDescriptor, **kwargs: object) -> str:
    return to_typescript(translator.translate(descriptor, **kwargs))  # type: ignore[arg-type]


# ###############
# Structural Translation
# ###############


@pytest.mark.parametrize(
    ("descriptor", "expected"),
    [
        (primitive(Kind.BOOL), "boolean"),
        (primitive(Kind.INT), "number"),
        (primitive(Kind.FLOAT), "number"),
        (primitive(Kind.STRING), "string"),
        (dynamic(), "any"),
        (pointer(primitive(Kind.STRING)), "string | null"),
        (collection(STRING), "string[] | null"),
        (collection(STRING, fixed_length=True), "string[]"),
        (collection(collection(STRING)), "(string[] | null)[] | null"),
        (mapping(STRING, INT), "{ [key: string]: number }"),
        (mapping(INT, collection(STRING)), "{ [key: number]: string[] | null }"),
        (mapping(primitive(Kind.FLOAT), STRING), "{ [key: number]: string }"),
    ],
)
def test_structural_translation(translator: TypeTranslator, descriptor: TypeDescriptor, expected: str) -> None:
    """Unnamed descriptors translate structurally."""
    assert _ts(translator, descriptor) == expected
    assert len(translator.registry) == 0


def test_pointer_to_fixed_collection_is_not_nullable(translator: TypeTranslator) -> None:
    """Fixed-length collections are never null, even behind a pointer."""
    assert _ts(translator, pointer(collection(STRING, fixed_length=True))) == "string[]"


def test_pointer_to_named_type_is_nullable(translator: TypeTranslator) -> None:
    """A pointer to a named type references it with a null member."""
    mode = primitive(Kind.STRING, "Mode")
    assert _ts(translator, pointer(mode)) == "Mode | null"


def test_suppress_null_removes_null_everywhere(translator: TypeTranslator) -> None:
    """suppress_null drops null from pointers and collections in the subtree."""
    descriptor = pointer(mapping(STRING, collection(pointer(STRING))))
    assert _ts(translator, descriptor, suppress_null=True) == "{ [key: string]: string[] }"


def test_named_map_key_collapses_to_primitive(translator: TypeTranslator) -> None:
    """Named key types are written as their underlying primitive."""
    offset = primitive(Kind.INT, "Offset")
    assert _ts(translator, mapping(offset, STRING)) == "{ [key: number]: string }"
    assert translator.registry.name_of(offset) is None


def test_timestamp_record_is_string(translator: TypeTranslator) -> None:
    """Timestamp records translate to string without a declaration."""
    stamp = record("datetime", module="datetime")
    assert _ts(translator, stamp) == "string"
    assert _ts(translator, pointer(stamp)) == "string | null"
    assert len(translator.registry) == 0


# ###############
# Declarations
# ###############


def test_named_type_is_declared_once(translator: TypeTranslator) -> None:
    """A named primitive becomes an alias referenced by name."""
    mode = primitive(Kind.STRING, "Mode")
    assert _ts(translator, collection(mode)) == "Mode[] | null"
    assert _ts(translator, mode) == "Mode"
    aliases = list(translator.registry.aliases())
    assert len(aliases) == 1
    assert to_typescript(aliases[0].expression) == "string"


def test_named_collection_alias(translator: TypeTranslator) -> None:
    """A named collection is declared as an alias over its structure."""
    names = collection(STRING, name="Names")
    assert translator.declare(names) == "Names"
    alias = translator.registry.get(names)
    assert isinstance(alias, AliasDecl)
    assert to_typescript(alias.expression) == "string[] | null"


def test_record_declared_as_interface(translator: TypeTranslator) -> None:
    """Record fields become interface properties."""
    order = record("order", [FieldDescriptor("Id", INT), FieldDescriptor("Note", pointer(STRING))])
    assert translator.declare(order) == "Order"
    interface = translator.registry.get(order)
    assert isinstance(interface, InterfaceDecl)
    assert [(p.name, to_typescript(p.type)) for p in interface.properties] == [
        ("Id", "number"),
        ("Note", "string | null"),
    ]


def test_anonymous_records_are_numbered(translator: TypeTranslator) -> None:
    """Unnamed records are declared as Anonymous1, Anonymous2, ..."""
    first = record(fields=[FieldDescriptor("A", INT)])
    second = record(fields=[FieldDescriptor("B", STRING)])
    outer = record(
        "Outer",
        [FieldDescriptor("First", first), FieldDescriptor("Second", pointer(second)), FieldDescriptor("Again", first)],
    )
    translator.declare(outer)
    interface = translator.registry.get(outer)
    assert isinstance(interface, InterfaceDecl)
    assert [to_typescript(p.type) for p in interface.properties] == [
        "Anonymous1",
        "Anonymous2 | null",
        "Anonymous1",
    ]


def test_anonymous_alias_name(translator: TypeTranslator) -> None:
    """An unnamed non-record declaration gets an anonymous name."""
    assert translator.declare(mapping(STRING, INT)) == "Anonymous1"


def test_recursive_record_terminates(translator: TypeTranslator) -> None:
    """A record that refers to itself is referenced by its reserved name."""
    node = record("Node", key="node")
    node.fields = [FieldDescriptor("Next", pointer(node)), FieldDescriptor("Children", collection(node))]
    translator.declare(node)
    interface = translator.registry.get(node)
    assert isinstance(interface, InterfaceDecl)
    assert [to_typescript(p.type) for p in interface.properties] == ["Node | null", "Node[] | null"]


def test_namespace_is_inherited(translator: TypeTranslator) -> None:
    """Types first reached from a namespaced declaration join its namespace."""
    inner = record("Inner", [FieldDescriptor("X", INT)])
    outer = record("Outer", [FieldDescriptor("Inner", inner)])
    assert translator.declare(outer, namespace="api") == "api.Outer"
    assert translator.registry.name_of(inner) == "api.Inner"


def test_explicit_name_wins(translator: TypeTranslator) -> None:
    """An explicit name replaces the type's own name."""
    assert translator.declare(record("Order"), name="Purchase") == "Purchase"


# ###############
# Unsupported Types
# ###############


@pytest.mark.parametrize("kind", [Kind.COMPLEX, Kind.BYTES, Kind.CALLABLE, Kind.CHANNEL, Kind.OPAQUE])
def test_unsupported_kinds_raise(translator: TypeTranslator, kind: Kind) -> None:
    """Kinds without a JSON representation raise UnsupportedTypeError."""
    descriptor = TypeDescriptor(key=("test", kind), kind=kind)
    with pytest.raises(UnsupportedTypeError) as exc_info:
        translator.translate(descriptor, location="Order.total")
    assert exc_info.value.kind == kind.value
    assert exc_info.value.location == "Order.total"


def test_unsupported_nested_type_reports_field(translator: TypeTranslator) -> None:
    """The error names the record field the bad type was reached from."""
    bad = TypeDescriptor(key="bad", kind=Kind.COMPLEX)
    order = record("Order", [FieldDescriptor("Totals", collection(bad))])
    with pytest.raises(UnsupportedTypeError, match="at Order.Totals"):
        translator.declare(order)


@pytest.mark.parametrize(
    "key_type",
    [primitive(Kind.BOOL), record("Key"), collection(STRING)],
)
def test_unsupported_map_keys(translator: TypeTranslator, key_type: TypeDescriptor) -> None:
    """Only string- and number-like map keys are allowed."""
    with pytest.raises(UnsupportedTypeError, match="map key"):
        translator.translate(mapping(key_type, STRING))

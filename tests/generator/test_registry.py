# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the declaration registry."""

import logging

import pytest

from py2ts.errors import DeclarationConflictError
from py2ts.generator import DeclarationRegistry
from py2ts.model import (
    AliasDecl,
    InterfaceDecl,
    PrimitiveExpr,
    PropertyDef,
    ReferenceExpr,
    TSPrimitive,
    nullable,
)

# ###############
# Helpers
# ###############


def _alias(name: str, namespace: str = "") -> AliasDecl:
    return AliasDecl(name=name, namespace=namespace, expression=PrimitiveExpr(primitive=TSPrimitive.STRING))


# ###############
# Reservation and Lookup
# ###############


def test_get_or_create_builds_once() -> None:
    """The factory runs only for the first request of a key."""
    registry = DeclarationRegistry()
    calls: list[str] = []

    def factory() -> AliasDecl:
        calls.append("built")
        return _alias("Mode")

    first = registry.get_or_create("mode", "Mode", "", factory)
    second = registry.get_or_create("mode", "Other", "", factory)
    assert first is second
    assert calls == ["built"]
    assert len(registry) == 1


def test_name_is_reserved_before_factory_runs() -> None:
    """A recursive lookup during construction sees the reserved name."""
    registry = DeclarationRegistry()
    seen: list[str | None] = []

    def factory() -> InterfaceDecl:
        seen.append(registry.name_of("node"))
        assert registry.get("node") is None
        return InterfaceDecl(name="Node", namespace="tree")

    registry.get_or_create("node", "Node", "tree", factory)
    assert seen == ["tree.Node"]
    assert "node" in registry


def test_dependencies_are_stored_first() -> None:
    """A declaration completed inside another factory precedes it."""
    registry = DeclarationRegistry()

    def outer() -> InterfaceDecl:
        registry.get_or_create("inner", "Inner", "", lambda: InterfaceDecl(name="Inner"))
        return InterfaceDecl(name="Outer")

    registry.get_or_create("outer", "Outer", "", outer)
    assert [i.name for i in registry.interfaces()] == ["Inner", "Outer"]


def test_unknown_key() -> None:
    """Unseen keys have no name and no declaration."""
    registry = DeclarationRegistry()
    assert registry.name_of("missing") is None
    assert registry.get("missing") is None
    assert "missing" not in registry


def test_interfaces_and_aliases_are_separated() -> None:
    """interfaces() and aliases() filter by declaration type in insertion order."""
    registry = DeclarationRegistry()
    registry.get_or_create("a", "A", "", lambda: _alias("A"))
    registry.get_or_create("b", "B", "", lambda: InterfaceDecl(name="B"))
    registry.get_or_create("c", "C", "", lambda: _alias("C"))
    assert [i.name for i in registry.interfaces()] == ["B"]
    assert [a.name for a in registry.aliases()] == ["A", "C"]


def test_anonymous_names_are_sequential() -> None:
    """Anonymous names count up from one."""
    registry = DeclarationRegistry()
    assert registry.anonymous_name() == "Anonymous1"
    assert registry.anonymous_name() == "Anonymous2"


def test_declarations_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Each new declaration is logged at debug level."""
    registry = DeclarationRegistry()
    with caplog.at_level(logging.DEBUG, logger="py2ts.generator.registry"):
        registry.get_or_create("mode", "Mode", "api", lambda: _alias("Mode", "api"))
    assert "Declared alias 'api.Mode'" in caplog.text


# ###############
# Name Conflicts
# ###############


def test_same_name_for_different_keys_is_rejected() -> None:
    """Two types cannot be declared under one qualified name."""
    registry = DeclarationRegistry()
    registry.get_or_create("first", "Config", "", lambda: InterfaceDecl(name="Config"))
    with pytest.raises(DeclarationConflictError, match="'Config'") as exc_info:
        registry.get_or_create("second", "Config", "", lambda: InterfaceDecl(name="Config"))
    assert exc_info.value.name == "Config"
    assert registry.name_of("second") is None
    assert len(registry) == 1


def test_same_name_in_other_namespace_is_allowed() -> None:
    """Namespaces keep equal names apart."""
    registry = DeclarationRegistry()
    registry.get_or_create("first", "Config", "a", lambda: InterfaceDecl(name="Config", namespace="a"))
    registry.get_or_create("second", "Config", "b", lambda: InterfaceDecl(name="Config", namespace="b"))
    assert [i.qualified_name for i in registry.interfaces()] == ["a.Config", "b.Config"]


def test_replace_onto_a_taken_name_is_rejected() -> None:
    """A replacement alias cannot take another type's name."""
    registry = DeclarationRegistry()
    registry.get_or_create("a", "A", "", lambda: _alias("A"))
    registry.get_or_create("b", "B", "", lambda: _alias("B"))
    with pytest.raises(DeclarationConflictError):
        registry.replace("a", _alias("B"))
    assert registry.name_of("a") == "A"


def test_replace_releases_the_old_name() -> None:
    """After a rename the old name is free for another type."""
    registry = DeclarationRegistry()
    registry.get_or_create("a", "A", "", lambda: _alias("A"))
    registry.replace("a", _alias("Renamed"))
    registry.get_or_create("b", "A", "", lambda: _alias("A"))
    assert [a.qualified_name for a in registry.aliases()] == ["Renamed", "A"]


# ###############
# Replacement
# ###############


def test_replace_keeps_position() -> None:
    """A replaced alias keeps its place in the output order."""
    registry = DeclarationRegistry()
    registry.get_or_create("a", "A", "", lambda: _alias("A"))
    registry.get_or_create("b", "B", "", lambda: _alias("B"))
    replacement = _alias("A")
    registry.replace("a", replacement)
    assert list(registry.aliases()) == [replacement, registry.get("b")]


def test_replace_renames_references() -> None:
    """References to a renamed alias are updated everywhere."""
    registry = DeclarationRegistry()
    registry.get_or_create("mode", "Mode", "", lambda: _alias("Mode"))
    registry.get_or_create(
        "holder",
        "Holder",
        "",
        lambda: InterfaceDecl(
            name="Holder",
            properties=[PropertyDef(name="mode", type=nullable(ReferenceExpr(name="Mode")))],
        ),
    )
    registry.get_or_create("wrap", "Wrap", "", lambda: AliasDecl(name="Wrap", expression=ReferenceExpr(name="Mode")))

    registry.replace("mode", _alias("Choice"))

    assert registry.name_of("mode") == "Choice"
    holder = registry.get("holder")
    assert isinstance(holder, InterfaceDecl)
    union = holder.properties[0].type
    assert union.members[0].name == "Choice"  # type: ignore[union-attr]
    wrap = registry.get("wrap")
    assert isinstance(wrap, AliasDecl)
    assert wrap.expression == ReferenceExpr(name="Choice")

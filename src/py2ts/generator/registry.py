# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Registry of declarations keyed by type identity."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator

from py2ts.errors import DeclarationConflictError
from py2ts.model.declarations import AliasDecl, Declaration, InterfaceDecl, qualify
from py2ts.model.expressions import ReferenceExpr, walk

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class DeclarationRegistry:
    """Owns every declaration produced during one generation session.

    Each identity key maps to at most one declaration. Names are reserved when
    a declaration starts being built so that self-references resolve, and the
    declaration itself is stored once it is complete, which puts dependencies
    ahead of the declarations that use them.
    """

    def __init__(self) -> None:
        self._names: dict[Hashable, str] = {}
        self._declarations: dict[Hashable, Declaration] = {}
        self._owners: dict[str, Hashable] = {}
        self._anonymous_count = 0

    def __len__(self) -> int:
        return len(self._declarations)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._names

    def name_of(self, key: Hashable) -> str | None:
        """Return the qualified name reserved for *key*, or None if unseen."""
        return self._names.get(key)

    def get(self, key: Hashable) -> Declaration | None:
        """Return the completed declaration for *key*, if any."""
        return self._declarations.get(key)

    def get_or_create(
        self,
        key: Hashable,
        name: str,
        namespace: str,
        factory: Callable[[], Declaration],
    ) -> Declaration:
        """Return the declaration for *key*, building it with *factory* on first use.

        Args:
            key: Identity of the type being declared.
            name: Declaration name, reserved before *factory* runs.
            namespace: Namespace the declaration is emitted in.
            factory: Builds the declaration. May recurse into the registry.

        Returns:
            The existing or newly created declaration.

        Raises:
            DeclarationConflictError: If the qualified name already belongs to
                another type.
        """
        existing = self._declarations.get(key)
        if existing is not None:
            return existing
        qualified = qualify(namespace, name)
        self._claim(qualified, key)
        self._names[key] = qualified
        declaration = factory()
        self._declarations[key] = declaration
        logger.debug("Declared %s '%s'", _describe(declaration), declaration.qualified_name)
        return declaration

    def replace(self, key: Hashable, declaration: AliasDecl) -> None:
        """Replace the alias stored under *key*, keeping its position.

        References to the old qualified name are renamed when it changes.
        """
        old = self._declarations[key]
        assert isinstance(old, AliasDecl)
        old_name = old.qualified_name
        new_name = declaration.qualified_name
        if old_name != new_name:
            self._claim(new_name, key)
            del self._owners[old_name]
        self._declarations[key] = declaration
        self._names[key] = new_name
        if old_name != new_name:
            _rename_references(self._declarations.values(), old_name, new_name)
        logger.debug("Replaced alias '%s' with '%s'", old_name, new_name)

    def _claim(self, qualified: str, key: Hashable) -> None:
        owner = self._owners.get(qualified, key)
        if owner != key:
            raise DeclarationConflictError(qualified, reason="the name is already used by another type")
        self._owners[qualified] = key

    def anonymous_name(self) -> str:
        """Issue the next ``AnonymousN`` name."""
        self._anonymous_count += 1
        return f"Anonymous{self._anonymous_count}"

    def interfaces(self) -> Iterator[InterfaceDecl]:
        """Interface declarations in insertion order."""
        for declaration in self._declarations.values():
            if isinstance(declaration, InterfaceDecl):
                yield declaration

    def aliases(self) -> Iterator[AliasDecl]:
        """Alias declarations in insertion order."""
        for declaration in self._declarations.values():
            if isinstance(declaration, AliasDecl):
                yield declaration


# ################
# Implementation
# ################


def _rename_references(declarations: Iterable[Declaration], old_name: str, new_name: str) -> None:
    for declaration in declarations:
        if isinstance(declaration, InterfaceDecl):
            roots = [p.type for p in declaration.properties]
        else:
            roots = [declaration.expression]
        for root in roots:
            for expr in walk(root):
                if isinstance(expr, ReferenceExpr) and expr.name == old_name:
                    expr.name = new_name


def _describe(declaration: Declaration) -> str:
    return "interface" if isinstance(declaration, InterfaceDecl) else "alias"

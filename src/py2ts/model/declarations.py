# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Top-level TypeScript declarations: interfaces and type aliases."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

from py2ts.model.expressions import TypeExpr

# ###############
# Public Interface
# ###############


class PropertyDef(BaseModel):
    """One property of an interface, ``name[?]: type;``."""

    name: str
    type: TypeExpr
    optional: bool = False


class InterfaceDecl(BaseModel):
    """An ``export interface`` declaration."""

    name: str
    namespace: str = ""
    properties: list[PropertyDef] = _Field(default_factory=list)

    @property
    def qualified_name(self) -> str:
        return qualify(self.namespace, self.name)


class AliasDecl(BaseModel):
    """An ``export type Name = Expression;`` declaration."""

    name: str
    namespace: str = ""
    expression: TypeExpr

    @property
    def qualified_name(self) -> str:
        return qualify(self.namespace, self.name)


Declaration = InterfaceDecl | AliasDecl


def qualify(namespace: str, name: str) -> str:
    """Return the name used to reference a declaration from anywhere in the output."""
    return f"{namespace}.{name}" if namespace else name

# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of registered declarations as TypeScript source."""

from __future__ import annotations

import json
import logging
import re
from typing import TextIO

from py2ts.generator.registry import DeclarationRegistry
from py2ts.model.declarations import AliasDecl, Declaration, InterfaceDecl
from py2ts.model.expressions import to_typescript

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

HEADER = "// DO NOT EDIT. This file is automatically generated."


def render(registry: DeclarationRegistry, out: TextIO) -> None:
    """Write every declaration in *registry* to *out*.

    Interfaces come first, then aliases, each group in the order the
    declarations were created. Write errors propagate to the caller and may
    leave partial output behind.
    """
    out.write(HEADER + "\n")
    interfaces = list(registry.interfaces())
    aliases = list(registry.aliases())
    for declaration in [*interfaces, *aliases]:
        out.write("\n")
        out.write(render_declaration(declaration))
    logger.debug("Rendered %d interface(s) and %d alias(es)", len(interfaces), len(aliases))


def render_declaration(declaration: Declaration) -> str:
    """Render one declaration, wrapped in its namespace if it has one."""
    if isinstance(declaration, InterfaceDecl):
        lines = _interface_lines(declaration)
    else:
        lines = _alias_lines(declaration)
    if declaration.namespace:
        lines = [f"export namespace {declaration.namespace} {{", *("\t" + line for line in lines), "}"]
    return "".join(line + "\n" for line in lines)


# ################
# Implementation
# ################

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _interface_lines(interface: InterfaceDecl) -> list[str]:
    lines = [f"export interface {interface.name} {{"]
    for prop in interface.properties:
        optional = "?" if prop.optional else ""
        lines.append(f"\t{_property_name(prop.name)}{optional}: {to_typescript(prop.type)};")
    lines.append("}")
    return lines


def _alias_lines(alias: AliasDecl) -> list[str]:
    return [f"export type {alias.name} = {to_typescript(alias.expression)};"]


def _property_name(name: str) -> str:
    if _IDENTIFIER.match(name):
        return name
    return json.dumps(name, ensure_ascii=False)

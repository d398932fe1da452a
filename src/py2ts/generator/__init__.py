# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""TypeScript generation: translation, declaration registry and rendering."""

from py2ts.generator.generator import Generator
from py2ts.generator.registry import DeclarationRegistry
from py2ts.generator.render import HEADER, render
from py2ts.generator.translator import TypeTranslator
from py2ts.generator.unions import UnionSynthesizer

__all__ = [
    "Generator",
    "DeclarationRegistry",
    "TypeTranslator",
    "UnionSynthesizer",
    "render",
    "HEADER",
]

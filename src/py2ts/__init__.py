# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generate TypeScript declarations from Python types."""

from py2ts.errors import (
    DeclarationConflictError,
    FieldNameCollisionError,
    GenerationError,
    InvalidTypeError,
    InvalidUnionError,
    UnsupportedTypeError,
)
from py2ts.generator import Generator
from py2ts.introspection import Embedded, PythonTypeProvider, Tags, tags, ts_field

__all__ = [
    "Generator",
    "PythonTypeProvider",
    "Embedded",
    "Tags",
    "tags",
    "ts_field",
    # Errors
    "GenerationError",
    "InvalidTypeError",
    "InvalidUnionError",
    "UnsupportedTypeError",
    "FieldNameCollisionError",
    "DeclarationConflictError",
]

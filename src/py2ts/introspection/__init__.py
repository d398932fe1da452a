# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type providers turning host-language types into descriptors."""

from py2ts.introspection.python import Embedded, PythonTypeProvider, Tags, tags, ts_field

__all__ = [
    "PythonTypeProvider",
    "Embedded",
    "Tags",
    "tags",
    "ts_field",
]

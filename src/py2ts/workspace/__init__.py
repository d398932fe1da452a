# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for py2ts."""

from py2ts.workspace.config import (
    CONFIG_NAME,
    ConfigError,
    GeneratorConfig,
    TypeEntry,
    UnionEntry,
    build_generator,
    load_config,
    resolve_ref,
    save_config,
)

__all__ = [
    "CONFIG_NAME",
    "ConfigError",
    "GeneratorConfig",
    "TypeEntry",
    "UnionEntry",
    "build_generator",
    "load_config",
    "resolve_ref",
    "save_config",
]

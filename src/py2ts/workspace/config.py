# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation config file: which Python types to export and where to write them."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from py2ts.generator import Generator

# ###############
# Public Interface
# ###############

CONFIG_NAME = ".py2ts.yaml"


class ConfigError(Exception):
    """Raised when the config file cannot be read, written, or is invalid."""


class TypeEntry(BaseModel):
    """A type to declare, referenced as ``"package.module:Attribute"``."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    ref: str
    name: str = ""
    namespace: str = ""


class UnionEntry(BaseModel):
    """A literal union built from an Enum class or a sequence constant."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    ref: str
    name: str = ""
    namespace: str = ""
    element_type: str | None = Field(alias="element-type", default=None)


class GeneratorConfig(BaseModel):
    """Top-level config model."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    output: str
    types: list[TypeEntry] = Field(default_factory=list)
    unions: list[UnionEntry] = Field(default_factory=list)


def load_config(path: Path) -> GeneratorConfig:
    """Load and validate a config file.

    Args:
        path: Path to the ``.py2ts.yaml`` file.

    Returns:
        A validated GeneratorConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def save_config(config: GeneratorConfig, path: Path) -> None:
    """Write *config* to *path* as YAML.

    Raises:
        ConfigError: If the file cannot be written.
    """
    data = config.model_dump(by_alias=True, exclude_defaults=True)
    data.setdefault("types", [])
    try:
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot write config file '{path}': {exc}") from exc


def resolve_ref(ref: str) -> Any:
    """Import the object named by a ``"package.module:Attribute.path"`` reference.

    Raises:
        ConfigError: If the reference is malformed or cannot be imported.
    """
    module_name, sep, attribute_path = ref.partition(":")
    if not sep or not module_name or not attribute_path:
        raise ConfigError(f"Invalid reference '{ref}': expected 'module:attribute'")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigError(f"Cannot import module '{module_name}' for '{ref}': {exc}") from exc
    for attribute in attribute_path.split("."):
        try:
            obj = getattr(obj, attribute)
        except AttributeError:
            raise ConfigError(f"Cannot resolve '{ref}': no attribute '{attribute}'") from None
    return obj


def build_generator(config: GeneratorConfig) -> Generator:
    """Create a generator with every type and union listed in *config* registered.

    Raises:
        ConfigError: If a reference cannot be resolved.
        GenerationError: If a type cannot be translated.
    """
    generator = Generator()
    for entry in config.types:
        generator.add(resolve_ref(entry.ref), name=entry.name, namespace=entry.namespace)
    for union in config.unions:
        element_type = resolve_ref(union.element_type) if union.element_type else None
        generator.add_union(
            resolve_ref(union.ref),
            name=union.name,
            namespace=union.namespace,
            element_type=element_type,
        )
    return generator

# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extraction of interface properties from record descriptors.

Fields are read in declaration order. Embedded records have their fields
promoted into the enclosing interface, following the conventions of JSON
encoders that inline anonymous struct members:

* ``json:"-"`` drops a field, ``json:"name"`` renames it and
  ``json:",omitempty"`` marks it optional.
* ``ts:"ignorenil"`` suppresses ``| null`` for everything reached through the field.
* An embedded record reached through an optional indirection may be absent
  altogether, so each promoted field becomes optional.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from py2ts.errors import FieldNameCollisionError
from py2ts.model.declarations import PropertyDef
from py2ts.model.descriptors import FieldDescriptor, Kind, TypeDescriptor, strip_indirection
from py2ts.model.expressions import TypeExpr

# ###############
# Public Interface
# ###############

JSON_TAG = "json"
TS_TAG = "ts"

# translate(descriptor, namespace, suppress_null, location) -> expression
TranslateFn = Callable[[TypeDescriptor, str, bool, str], TypeExpr]


@dataclass(frozen=True)
class JsonTag:
    """Parsed ``json`` tag of a field.

    Attributes:
        name: Override name, empty when the field name is kept.
        omitempty: Whether the encoder omits the field when empty.
    """

    name: str = ""
    omitempty: bool = False

    @property
    def skip(self) -> bool:
        return self.name == "-"


def parse_json_tag(tag: str) -> JsonTag:
    """Parse a ``"name,opt1,opt2"`` json tag."""
    name, _, options = tag.partition(",")
    return JsonTag(name=name, omitempty="omitempty" in options.split(","))


def has_ts_option(field: FieldDescriptor, option: str) -> bool:
    """Return whether the field's ``ts`` tag lists *option*."""
    return option in field.tags.get(TS_TAG, "").split(",")


def extract_properties(
    record: TypeDescriptor,
    interface_name: str,
    namespace: str,
    suppress_null: bool,
    translate: TranslateFn,
) -> list[PropertyDef]:
    """Build the properties of the interface declared for *record*.

    Args:
        record: A record descriptor.
        interface_name: Name of the interface, used in error messages.
        namespace: Namespace new declarations reached from the fields go to.
        suppress_null: Whether ``| null`` is suppressed for the whole record.
        translate: Callback translating a field type into an expression.

    Returns:
        The properties in output order.

    Raises:
        FieldNameCollisionError: If two fields resolve to the same property name.
    """
    properties: list[PropertyDef] = []
    seen: set[str] = set()
    _collect(record, interface_name, namespace, suppress_null, False, translate, properties, seen)
    return properties


# ################
# Implementation
# ################


def _collect(
    record: TypeDescriptor,
    interface_name: str,
    namespace: str,
    suppress_null: bool,
    force_optional: bool,
    translate: TranslateFn,
    properties: list[PropertyDef],
    seen: set[str],
) -> None:
    for field in record.fields:
        tag = parse_json_tag(field.tags.get(JSON_TAG, ""))
        ignore_nil = suppress_null or has_ts_option(field, "ignorenil")

        if field.embedded and not tag.name:
            target = strip_indirection(field.type)
            if target.kind is Kind.RECORD and not target.is_timestamp:
                through_pointer = field.type.kind is Kind.POINTER
                _collect(
                    target,
                    interface_name,
                    namespace,
                    ignore_nil,
                    force_optional or through_pointer,
                    translate,
                    properties,
                    seen,
                )
                continue

        if not field.is_exported or tag.skip:
            continue

        name = tag.name or field.name
        if name in seen:
            raise FieldNameCollisionError(interface_name, name)
        seen.add(name)

        location = f"{interface_name}.{field.name}"
        properties.append(
            PropertyDef(
                name=name,
                type=translate(field.type, namespace, ignore_nil, location),
                optional=tag.omitempty or force_optional,
            )
        )

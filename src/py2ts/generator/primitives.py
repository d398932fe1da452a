# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification of descriptor kinds into TypeScript primitives."""

from __future__ import annotations

from py2ts.errors import UnsupportedTypeError
from py2ts.model.descriptors import Kind, TypeDescriptor
from py2ts.model.expressions import IndexKind, TSPrimitive

# ###############
# Public Interface
# ###############


def classify(descriptor: TypeDescriptor, location: str = "") -> TSPrimitive:
    """Map a primitive or dynamic descriptor to its TypeScript primitive.

    Raises:
        UnsupportedTypeError: If the kind cannot be serialized to JSON.
    """
    try:
        return _PRIMITIVES[descriptor.kind]
    except KeyError:
        raise UnsupportedTypeError(descriptor.kind.value, descriptor.name, location) from None


def index_kind(descriptor: TypeDescriptor, location: str = "") -> IndexKind:
    """Return the index-signature key type for a mapping key descriptor.

    Named aliases collapse to their underlying primitive since TypeScript only
    accepts ``string`` and ``number`` as index keys.

    Raises:
        UnsupportedTypeError: If the key is not string- or number-like.
    """
    try:
        return _INDEX_KINDS[descriptor.kind]
    except KeyError:
        raise UnsupportedTypeError(f"{descriptor.kind.value} map key", descriptor.name, location) from None


# ################
# Implementation
# ################

_PRIMITIVES: dict[Kind, TSPrimitive] = {
    Kind.BOOL: TSPrimitive.BOOLEAN,
    Kind.INT: TSPrimitive.NUMBER,
    Kind.FLOAT: TSPrimitive.NUMBER,
    Kind.STRING: TSPrimitive.STRING,
    Kind.ANY: TSPrimitive.ANY,
}

_INDEX_KINDS: dict[Kind, IndexKind] = {
    Kind.INT: IndexKind.NUMBER,
    Kind.FLOAT: IndexKind.NUMBER,
    Kind.STRING: IndexKind.STRING,
}

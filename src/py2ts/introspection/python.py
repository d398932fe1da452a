# Copyright 2026 Py2TS Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptors for Python classes and ``typing`` annotations.

Supported records are dataclasses, pydantic models and ``TypedDict`` classes.
Field serialization is controlled with ``json`` and ``ts`` tags:

* dataclasses: ``ts_field(json="id,omitempty", ts="ignorenil")`` or
  ``field(metadata={"json": ..., "ts": ..., "embed": True})``;
* pydantic: ``alias`` / ``serialization_alias`` rename a field,
  ``exclude=True`` drops it, and ``json_schema_extra={"json": ..., "ts": ...}``
  supplies tags;
* ``TypedDict``: keys that are not required are optional;
* any record: ``Annotated[T, Tags(...)]`` and ``Annotated[T, Embedded]``.
"""

from __future__ import annotations

import asyncio
import collections.abc
import dataclasses
import datetime
import queue
import types
import typing
from enum import Enum
from typing import Annotated, Any, NewType, NotRequired, Required, TypeAliasType, Union

from pydantic import BaseModel

from py2ts.errors import InvalidTypeError
from py2ts.model.descriptors import FieldDescriptor, Kind, TypeDescriptor

# ###############
# Public Interface
# ###############


class Embedded:
    """``Annotated`` marker promoting a record field's own fields into its parent."""


@dataclasses.dataclass(frozen=True)
class Tags:
    """``Annotated`` metadata carrying serialization tags for a field."""

    json: str = ""
    ts: str = ""


def ts_field(*, json: str = "", ts: str = "", embed: bool = False, **kwargs: Any) -> Any:
    """A ``dataclasses.field`` carrying serialization tags.

    Args:
        json: The ``json`` tag, e.g. ``"name,omitempty"`` or ``"-"``.
        ts: The ``ts`` tag, e.g. ``"ignorenil"``.
        embed: Promote the fields of this record-typed field into the parent.
        **kwargs: Passed on to :func:`dataclasses.field`.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata.update(tags(json=json, ts=ts))
    if embed:
        metadata["embed"] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def tags(*, json: str = "", ts: str = "") -> dict[str, str]:
    """Build a tag mapping, leaving out empty tags."""
    return {key: value for key, value in (("json", json), ("ts", ts)) if value}


class PythonTypeProvider:
    """Builds descriptors from Python types, caching one descriptor per type."""

    def __init__(self) -> None:
        self._cache: dict[Any, TypeDescriptor] = {}

    def describe_value(self, value: Any) -> TypeDescriptor:
        """Describe a descriptor, a type or annotation, or the type of an instance."""
        if isinstance(value, TypeDescriptor):
            return value
        if _is_type_like(value):
            return self.describe(value)
        return self.describe(type(value))

    def describe(self, annotation: Any) -> TypeDescriptor:
        """Describe a type or type annotation.

        Raises:
            InvalidTypeError: If the annotations of a record cannot be resolved.
        """
        if isinstance(annotation, TypeDescriptor):
            return annotation
        annotation = _strip_annotated(annotation)[0]
        try:
            cached = self._cache.get(annotation)
        except TypeError:
            return self._build(annotation)
        if cached is not None:
            return cached
        descriptor = self._build(annotation)
        return self._cache.setdefault(annotation, descriptor)

    def _build(self, tp: Any) -> TypeDescriptor:
        if tp is Any or tp is object:
            return TypeDescriptor(key=tp, kind=Kind.ANY)
        if isinstance(tp, NewType):
            return self._named_copy(tp, self.describe(tp.__supertype__))
        if isinstance(tp, TypeAliasType):
            return self._describe_alias(tp)

        origin = typing.get_origin(tp)
        args = typing.get_args(tp)
        if origin is Union or origin is types.UnionType:
            return self._describe_union(tp, args)
        if origin is tuple or tp is tuple:
            return self._describe_tuple(tp, args)
        if origin in _COLLECTION_ORIGINS or tp in _COLLECTION_ORIGINS:
            elem = self.describe(args[0]) if args else self.describe(Any)
            return TypeDescriptor(key=tp, kind=Kind.COLLECTION, elem=elem)
        if origin in _MAPPING_ORIGINS or tp in _MAPPING_ORIGINS:
            key_arg, value_arg = args if len(args) == 2 else (str, Any)
            return TypeDescriptor(
                key=tp,
                kind=Kind.MAPPING,
                key_type=self.describe(key_arg),
                elem=self.describe(value_arg),
            )
        if origin is collections.abc.Callable or tp is collections.abc.Callable:
            return TypeDescriptor(key=tp, kind=Kind.CALLABLE, name="Callable")
        if not isinstance(tp, type):
            return TypeDescriptor(key=tp, kind=Kind.OPAQUE, name=_label(tp))
        return self._describe_class(tp)

    def _describe_class(self, cls: type) -> TypeDescriptor:
        name = cls.__name__
        module = cls.__module__
        if issubclass(cls, Enum):
            return TypeDescriptor(key=cls, kind=_enum_kind(cls), name=name, module=module)
        for base, kind in _PRIMITIVE_CLASSES:
            if issubclass(cls, base):
                return TypeDescriptor(key=cls, kind=kind, name=name, module=module)
        if issubclass(cls, datetime.date):
            stamp = "datetime" if issubclass(cls, datetime.datetime) else "date"
            return TypeDescriptor(key=cls, kind=Kind.RECORD, name=stamp, module="datetime")
        if dataclasses.is_dataclass(cls) or issubclass(cls, BaseModel) or typing.is_typeddict(cls):
            descriptor = TypeDescriptor(key=cls, kind=Kind.RECORD, name=name, module=module)
            # Cache first so that self-referencing fields resolve to this descriptor.
            self._cache[cls] = descriptor
            try:
                descriptor.fields = self._record_fields(cls)
            except InvalidTypeError:
                del self._cache[cls]
                raise
            return descriptor
        return TypeDescriptor(key=cls, kind=Kind.OPAQUE, name=name, module=module)

    def _describe_union(self, tp: Any, args: tuple[Any, ...]) -> TypeDescriptor:
        members = [a for a in args if a is not types.NoneType]
        if len(members) == 1 and len(members) < len(args):
            return TypeDescriptor(key=tp, kind=Kind.POINTER, elem=self.describe(members[0]))
        return TypeDescriptor(key=tp, kind=Kind.OPAQUE, name=_label(tp))

    def _describe_tuple(self, tp: Any, args: tuple[Any, ...]) -> TypeDescriptor:
        if not args:
            return TypeDescriptor(key=tp, kind=Kind.COLLECTION, elem=self.describe(Any))
        if len(args) == 2 and args[1] is Ellipsis:
            return TypeDescriptor(key=tp, kind=Kind.COLLECTION, elem=self.describe(args[0]))
        if all(a == args[0] for a in args):
            return TypeDescriptor(key=tp, kind=Kind.COLLECTION, elem=self.describe(args[0]), fixed_length=True)
        return TypeDescriptor(key=tp, kind=Kind.OPAQUE, name=_label(tp))

    def _named_copy(self, tp: Any, base: TypeDescriptor) -> TypeDescriptor:
        return dataclasses.replace(base, key=tp, name=tp.__name__, module=getattr(tp, "__module__", ""))

    def _describe_alias(self, tp: TypeAliasType) -> TypeDescriptor:
        # A recursive alias refers to itself through this cached descriptor,
        # which is filled in once the aliased value is described.
        descriptor = TypeDescriptor(key=tp, kind=Kind.ANY, name=tp.__name__, module=getattr(tp, "__module__", ""))
        self._cache[tp] = descriptor
        try:
            base = self.describe(tp.__value__)
        except InvalidTypeError:
            del self._cache[tp]
            raise
        descriptor.kind = base.kind
        descriptor.elem = base.elem
        descriptor.key_type = base.key_type
        descriptor.fields = base.fields
        descriptor.fixed_length = base.fixed_length
        return descriptor

    def _record_fields(self, cls: type) -> list[FieldDescriptor]:
        if issubclass(cls, BaseModel):
            return [self._pydantic_field(name, info) for name, info in cls.model_fields.items()]

        try:
            hints = typing.get_type_hints(cls, include_extras=True)
        except (NameError, TypeError) as exc:
            raise InvalidTypeError(f"Cannot resolve the annotations of '{cls.__name__}': {exc}") from exc

        if typing.is_typeddict(cls):
            return [
                self._typeddict_field(name, annotation, name in cls.__required_keys__)
                for name, annotation in hints.items()
            ]
        return [
            self._make_field(f.name, hints.get(f.name, f.type), dict(f.metadata))
            for f in dataclasses.fields(cls)
        ]

    def _pydantic_field(self, name: str, info: Any) -> FieldDescriptor:
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        metadata: dict[str, Any] = {key: extra[key] for key in ("json", "ts", "embed") if key in extra}
        if "json" not in metadata:
            if info.exclude:
                metadata["json"] = "-"
            elif info.serialization_alias or info.alias:
                metadata["json"] = info.serialization_alias or info.alias
        annotation = Annotated[(info.annotation, *info.metadata)] if info.metadata else info.annotation
        return self._make_field(name, annotation, metadata)

    def _typeddict_field(self, name: str, annotation: Any, required: bool) -> FieldDescriptor:
        annotation = _strip_qualifiers(annotation)
        metadata: dict[str, Any] = {} if required else {"json": ",omitempty"}
        return self._make_field(name, annotation, metadata)

    def _make_field(self, name: str, annotation: Any, metadata: dict[str, Any]) -> FieldDescriptor:
        annotation, extras = _strip_annotated(annotation)
        field_tags = {key: str(metadata[key]) for key in ("json", "ts") if metadata.get(key)}
        embedded = bool(metadata.get("embed"))
        for extra in extras:
            if extra is Embedded or isinstance(extra, Embedded):
                embedded = True
            elif isinstance(extra, Tags):
                field_tags.update(tags(json=extra.json, ts=extra.ts))
        return FieldDescriptor(name=name, type=self.describe(annotation), tags=field_tags, embedded=embedded)


# ################
# Implementation
# ################

_PRIMITIVE_CLASSES: tuple[tuple[type, Kind], ...] = (
    (bool, Kind.BOOL),
    (int, Kind.INT),
    (float, Kind.FLOAT),
    (str, Kind.STRING),
    (complex, Kind.COMPLEX),
    (bytes, Kind.BYTES),
    (bytearray, Kind.BYTES),
    (memoryview, Kind.BYTES),
    (queue.Queue, Kind.CHANNEL),
    (asyncio.Queue, Kind.CHANNEL),
    (types.FunctionType, Kind.CALLABLE),
    (types.BuiltinFunctionType, Kind.CALLABLE),
    (types.MethodType, Kind.CALLABLE),
)

_COLLECTION_ORIGINS = frozenset(
    {
        list,
        set,
        frozenset,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Set,
        collections.abc.MutableSet,
        collections.abc.Collection,
        collections.abc.Iterable,
    }
)

_MAPPING_ORIGINS = frozenset({dict, collections.abc.Mapping, collections.abc.MutableMapping})

_QUALIFIERS = (Required, NotRequired)


def _is_type_like(value: Any) -> bool:
    if isinstance(value, (type, NewType, TypeAliasType, types.UnionType)):
        return True
    return value is Any or typing.get_origin(value) is not None


def _strip_annotated(annotation: Any) -> tuple[Any, tuple[Any, ...]]:
    if typing.get_origin(annotation) is Annotated:
        return annotation.__origin__, annotation.__metadata__
    return annotation, ()


def _strip_qualifiers(annotation: Any) -> Any:
    while typing.get_origin(annotation) in _QUALIFIERS:
        annotation = typing.get_args(annotation)[0]
    return annotation


def _enum_kind(cls: type) -> Kind:
    values = [member.value for member in cls]  # type: ignore[var-annotated]
    if values and all(isinstance(v, bool) for v in values):
        return Kind.BOOL
    if values and all(isinstance(v, str) for v in values):
        return Kind.STRING
    numbers = [v for v in values if isinstance(v, (int, float)) and not isinstance(v, bool)]
    if values and len(numbers) == len(values):
        return Kind.INT if all(isinstance(v, int) for v in numbers) else Kind.FLOAT
    return Kind.OPAQUE


def _label(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp).removeprefix("typing.")

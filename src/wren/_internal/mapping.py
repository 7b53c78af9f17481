"""Record-to-dataclass mapping with type coercion.

Converts raw records (dicts decoded from JSON or returned by a driver)
into typed frozen dataclasses. Uses dataclass field introspection, no
metaclass magic, no descriptors.

Coercion handles the loose typing of stored data: ``int`` fields accept
``"45"``, ``bool`` fields accept ``0``/``1``/``"true"``, enum fields
accept their value, ``tuple[X, ...]`` fields accept lists (mapping nested
dataclasses recursively), and ``Mapping`` fields become read-only views.
"""

import dataclasses
import types
from collections.abc import Mapping
from enum import Enum
from functools import cache
from typing import Any, TypeVar, get_args, get_origin, get_type_hints

T = TypeVar("T")

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})


def to_bool(value: Any) -> bool:
    """Read a loosely typed flag; strings count as true only when truthy words."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


# Scalar types we know how to coerce from loosely typed values.
_COERCIBLE: dict[type, Any] = {
    int: lambda v: int(v) if v != "" else 0,
    float: lambda v: float(v) if v != "" else 0.0,
    bool: to_bool,
    str: str,
}


def _unwrap_optional(annotation: Any) -> Any:
    """Return the non-None branch of ``X | None``; other unions pass through."""
    if get_origin(annotation) is types.UnionType:
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


@cache
def _field_types(cls: type) -> dict[str, Any]:
    hints = get_type_hints(cls)
    return {f.name: _unwrap_optional(hints[f.name]) for f in dataclasses.fields(cls)}


def _coerce(value: Any, annotation: Any) -> Any:
    """Coerce a single value to *annotation*, if it is a shape we understand."""
    if value is None:
        return None
    origin = get_origin(annotation)
    if origin is tuple:
        args = get_args(annotation)
        inner = args[0] if args else Any
        return tuple(_coerce(v, inner) for v in value)
    if origin is Mapping or annotation is Mapping:
        if not isinstance(value, Mapping):
            msg = f"expected an object, got {type(value).__name__}"
            raise TypeError(msg)
        return types.MappingProxyType({str(k): str(v) for k, v in value.items()})
    if isinstance(annotation, type):
        if dataclasses.is_dataclass(annotation):
            return value if isinstance(value, annotation) else map_record(annotation, value)
        if issubclass(annotation, Enum):
            return annotation(value)
        if annotation in _COERCIBLE and not isinstance(value, annotation):
            return _COERCIBLE[annotation](value)
    return value


def map_record(cls: type[T], record: Mapping[str, Any]) -> T:
    """Map a dict-like record to a frozen dataclass instance.

    Only passes keys that match dataclass fields. Extra keys are silently
    ignored so stored documents may carry more than the model needs.

    Raises ``TypeError`` if *cls* is not a dataclass, the record is not a
    mapping, or required fields are missing from the record.
    """
    if not dataclasses.is_dataclass(cls):
        msg = f"{cls.__name__} is not a dataclass; wren models are frozen dataclasses"
        raise TypeError(msg)
    if not isinstance(record, Mapping):
        msg = f"{cls.__name__} record must be an object, got {type(record).__name__}"
        raise TypeError(msg)

    field_types = _field_types(cls)
    filtered = {
        k: _coerce(v, field_types[k])
        for k, v in record.items()
        if k in field_types
    }
    return cls(**filtered)


def map_records(cls: type[T], records: list[Mapping[str, Any]]) -> list[T]:
    """Map a list of dict-like records to frozen dataclass instances."""
    return [map_record(cls, r) for r in records]

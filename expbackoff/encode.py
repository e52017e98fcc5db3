from __future__ import annotations

import base64
import binascii
import dataclasses
import json
import pickle
import types
import typing
from typing import Any, Type, TypeVar

from .errors import SerializationError
from .zero import field_types, get_zero

T = TypeVar("T")

_UNION_ORIGINS = (typing.Union, getattr(types, "UnionType", typing.Union))


def encode_struct_to_bytes(data: Any) -> bytes:
    """Encode a value to its binary form."""
    try:
        return pickle.dumps(data)
    except (pickle.PicklingError, TypeError, AttributeError) as exc:
        raise SerializationError(f"cannot encode {type(data).__name__}") from exc


def encode_struct_to_string(data: Any) -> str:
    """Encode a value to base64 text (standard alphabet)."""
    return base64.b64encode(encode_struct_to_bytes(data)).decode("ascii")


def decode_bytes_to_struct(encoded: bytes) -> Any:
    """Decode a value produced by encode_struct_to_bytes.

    Only decode data from a trusted source: the binary form can
    reconstruct arbitrary objects."""
    try:
        return pickle.loads(encoded)
    except Exception as exc:  # noqa: BLE001
        raise SerializationError("cannot decode binary data") from exc


def decode_string_to_struct(encoded: str) -> Any:
    """Decode a value produced by encode_struct_to_string."""
    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SerializationError("invalid base64 data") from exc
    return decode_bytes_to_struct(raw)


def _to_jsonable(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode_struct_to_json_string(data: Any) -> str:
    """JSON stringify a value. Dataclass instances, at any depth, become objects."""
    try:
        return json.dumps(data, ensure_ascii=False, default=_to_jsonable)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot encode {type(data).__name__} as JSON") from exc


def decode_json_string_to_struct(encoded: str, cls: Type[T]) -> T:
    """Decode a JSON string into an instance of cls.

    Dataclass targets are rebuilt field by field from their annotations,
    including nested dataclasses and lists or dicts of them. Unknown keys
    are ignored; a missing key takes the field's default, or its zero value
    when it has none. Any other target is called with the decoded value."""
    try:
        obj = json.loads(encoded)
    except json.JSONDecodeError as exc:
        raise SerializationError("invalid JSON data") from exc

    try:
        if dataclasses.is_dataclass(cls) or typing.get_origin(cls) is not None:
            return _build(cls, obj)
        return cls(obj)  # type: ignore[call-arg]
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot build {getattr(cls, '__name__', cls)} from JSON") from exc


def _build(tp: Any, value: Any) -> Any:
    if value is None or tp is None:
        return value

    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        if not isinstance(value, dict):
            raise TypeError(f"expected a JSON object for {tp.__name__}")
        hints = field_types(tp)
        kwargs = {}
        for f in dataclasses.fields(tp):
            if not f.init:
                continue
            if f.name in value:
                kwargs[f.name] = _build(hints.get(f.name), value[f.name])
            elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                kwargs[f.name] = get_zero(hints.get(f.name))
        return tp(**kwargs)

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin in _UNION_ORIGINS:
        members = [a for a in args if a is not type(None)]
        return _build(members[0], value) if len(members) == 1 else value
    if origin in (list, set, frozenset) and args:
        return origin(_build(args[0], v) for v in value)
    if origin is tuple and args:
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_build(args[0], v) for v in value)
        return tuple(_build(a, v) for a, v in zip(args, value))
    if origin is dict and len(args) == 2:
        return {k: _build(args[1], v) for k, v in value.items()}
    return value

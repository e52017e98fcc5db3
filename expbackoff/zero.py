"""Zero values for arbitrary types.

get_zero(tp) returns the canonical empty value of a type: 0 for numbers,
"" for strings, empty containers, and for dataclasses an instance whose
fields all hold their own zero values. Dataclass zeros are built without
calling __init__, so validation in __post_init__ never runs. Anything it
cannot build, including fields with unresolvable annotations, yields None.
"""
from __future__ import annotations

import dataclasses
import typing
from typing import Any, Dict

_NONE_TYPE = type(None)

_SIMPLE_TYPES = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    list,
    dict,
    set,
    frozenset,
    tuple,
)


def get_zero(tp: Any) -> Any:
    """Return the zero value for tp."""
    if tp is None or tp is _NONE_TYPE or tp is Any:
        return None

    origin = typing.get_origin(tp)
    if origin is not None:
        if origin is typing.Union or _NONE_TYPE in typing.get_args(tp):
            return None
        return get_zero(origin)

    if tp in _SIMPLE_TYPES:
        return tp()

    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return _zero_dataclass(tp)

    return None


def field_types(tp: type) -> Dict[str, Any]:
    """Resolved annotations of a dataclass, keyed by field name.

    When the annotations cannot be resolved as a whole (an unknown forward
    reference), only the fields annotated with real types are returned;
    string annotations are left out, so those fields zero to None."""
    try:
        return typing.get_type_hints(tp)
    except Exception:  # noqa: BLE001
        return {f.name: f.type for f in dataclasses.fields(tp) if not isinstance(f.type, str)}


def _zero_dataclass(tp: type) -> Any:
    # bypass __init__: a zero value must not trip __post_init__ checks or InitVars
    hints = field_types(tp)
    obj = tp.__new__(tp)
    for f in dataclasses.fields(tp):
        object.__setattr__(obj, f.name, get_zero(hints.get(f.name)))
    return obj

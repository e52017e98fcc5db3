"""Exponential backoff retry package.

Provides a generic retry strategy with jittered exponential delays,
plus the small value helpers it and its callers rely on.

Key modules:
    backoff -- ExponentialBackoffStrategy for retrying fallible operations
    models  -- BackoffOptions configuration dataclass
    errors  -- RetriesExhaustedError, BackoffCancelledError and friends
    zero    -- get_zero for the empty value of a type
    encode  -- bytes / base64 / JSON encode and decode helpers
"""
from .backoff import ExponentialBackoffStrategy
from .encode import (
    decode_bytes_to_struct,
    decode_json_string_to_struct,
    decode_string_to_struct,
    encode_struct_to_bytes,
    encode_struct_to_json_string,
    encode_struct_to_string,
)
from .errors import (
    BackoffCancelledError,
    BackoffError,
    OperationFailure,
    RetriesExhaustedError,
    SerializationError,
)
from .models import BackoffOptions
from .zero import get_zero

__all__ = [
    "BackoffCancelledError",
    "BackoffError",
    "BackoffOptions",
    "ExponentialBackoffStrategy",
    "OperationFailure",
    "RetriesExhaustedError",
    "SerializationError",
    "decode_bytes_to_struct",
    "decode_json_string_to_struct",
    "decode_string_to_struct",
    "encode_struct_to_bytes",
    "encode_struct_to_json_string",
    "encode_struct_to_string",
    "get_zero",
]

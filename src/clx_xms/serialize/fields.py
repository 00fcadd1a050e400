"""Encoders from Python values to their XMS wire representation."""

import base64
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import Any
from ..exceptions import EncodingError
from ..presence import Presence

BYTES_TYPES = (bytes, bytearray, memoryview)


def encode_bytes(data: bytes) -> str:
    """Encodes binary data as padded standard base64."""
    if not isinstance(data, BYTES_TYPES):
        raise EncodingError(f"Expected a byte sequence, got {type(data).__name__}")
    return base64.b64encode(data).decode("ascii")

def encode_hex(data: bytes) -> str:
    """Encodes binary data as lowercase hex without separators."""
    if not isinstance(data, BYTES_TYPES):
        raise EncodingError(f"Expected a byte sequence, got {type(data).__name__}")
    return bytes(data).hex()

def encode_timestamp(value: datetime) -> str:
    """Encodes a datetime as `YYYY-MM-DDTHH:MM:SS+00:00`.
    
    The value is converted to UTC and sub-second precision is truncated, never rounded. Naive datetimes are taken to be in UTC already.
    """
    if not isinstance(value, datetime):
        raise EncodingError(f"Expected a datetime, got {type(value).__name__}")
    
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=timezone.utc)
    
    try:
        value = value.astimezone(timezone.utc)
    except OverflowError as e:
        raise EncodingError(f"{value!r} cannot be represented in UTC") from e
    
    return value.replace(microsecond=0).isoformat()

def encode_string_set(values: Iterable[str]) -> list[str]:
    """Encodes strings as a JSON array, keeping order and duplicates."""
    if isinstance(values, (str, bytes)):
        raise EncodingError("Expected a collection of strings, got a single string")
    
    try:
        encoded = list(values)
    except TypeError as e:
        raise EncodingError(f"Expected a collection of strings, got {type(values).__name__}") from e

    for value in encoded:
        if not isinstance(value, str):
            raise EncodingError(f"Expected a string, got {type(value).__name__}")
    return encoded

def write_presence(
    fields: dict,
    key: str,
    presence: Presence,
    encoder: Callable[[Any], Any] | None = None
) -> None:
    """Writes a tri-state field: absent is skipped, reset becomes `null`, a value is encoded."""
    if presence.is_absent():
        return
    if presence.is_reset():
        fields[key] = None
        return
    
    value = presence.value()
    fields[key] = encoder(value) if encoder else value

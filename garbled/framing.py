"""Length-prefixed framing of messages: a 4-byte little-endian length, then the payload."""

from __future__ import annotations

_HEADER_SIZE = 4
_MAX_LENGTH = 0xFFFFFFFF


class FramingError(ValueError):
    """Raised when a frame cannot be built or read."""


def prepare(data: bytes) -> bytes:
    """Prefix ``data`` with its length as a 32-bit little-endian integer."""
    payload = bytes(data)
    if len(payload) > _MAX_LENGTH:
        raise FramingError("payload is too long for a 32-bit length header")
    return len(payload).to_bytes(_HEADER_SIZE, "little") + payload


def extract(data: bytes) -> tuple[int, bytes]:
    """Split a frame into the length from its header and the bytes after it."""
    raw = bytes(data)
    if len(raw) < _HEADER_SIZE:
        raise FramingError("Data does not contain a length header.")
    length = int.from_bytes(raw[:_HEADER_SIZE], "little")
    return length, raw[_HEADER_SIZE:]
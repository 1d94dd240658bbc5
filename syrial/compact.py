"""Variable-length encoding of unsigned 64-bit lengths and counts."""

from __future__ import annotations

import struct

from .stream import Stream

_U64_MAX = (1 << 64) - 1
_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFFFFFF

# Values below this are stored as a single byte; the three prefix bytes above it
# announce a 2, 4 or 8 byte little-endian value.
_SINGLE_BYTE_LIMIT = 0xFF - 2
_PREFIX_U16 = 0xFF - 2
_PREFIX_U32 = 0xFF - 1
_PREFIX_U64 = 0xFF

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")


def _check_range(n: int) -> None:
    if not 0 <= n <= _U64_MAX:
        raise ValueError(f"compact size {n} is outside the unsigned 64-bit range")


def get_size_of_compact_size(n: int) -> int:
    """Return how many bytes the compact encoding of ``n`` occupies."""
    _check_range(n)
    if n < _SINGLE_BYTE_LIMIT:
        return 1
    if n <= _U16_MAX:
        return 1 + _U16.size
    if n <= _U32_MAX:
        return 1 + _U32.size
    return 1 + _U64.size


def write_compact_size(stream: Stream, n: int) -> None:
    """Append ``n`` to ``stream`` in compact form."""
    _check_range(n)
    if n < _SINGLE_BYTE_LIMIT:
        stream.write(bytes([n]))
    elif n <= _U16_MAX:
        stream.write(bytes([_PREFIX_U16]) + _U16.pack(n))
    elif n <= _U32_MAX:
        stream.write(bytes([_PREFIX_U32]) + _U32.pack(n))
    else:
        stream.write(bytes([_PREFIX_U64]) + _U64.pack(n))


def read_compact_size(stream: Stream) -> int:
    """Read a compact-encoded unsigned integer from ``stream``."""
    prefix = stream.read(1)[0]
    if prefix < _SINGLE_BYTE_LIMIT:
        return prefix
    if prefix == _PREFIX_U16:
        return _U16.unpack(stream.read(_U16.size))[0]
    if prefix == _PREFIX_U32:
        return _U32.unpack(stream.read(_U32.size))[0]
    return _U64.unpack(stream.read(_U64.size))[0]
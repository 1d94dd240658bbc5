"""Codecs for optional values and bitfields."""

from __future__ import annotations

from typing import Any

from .bitfield import Bitfield
from .compact import get_size_of_compact_size, read_compact_size, write_compact_size
from .errors import InvalidFormatError
from .scalars import U8, Codec
from .stream import Stream


class OptionCodec(Codec):
    """A value or ``None``, preceded by a tag byte: 1 for a value, 0 for ``None``."""

    def __init__(self, inner: Codec) -> None:
        self.inner = inner

    def serialize_into(self, value: Any, stream: Stream) -> None:
        if value is None:
            U8.serialize_into(0, stream)
        else:
            U8.serialize_into(1, stream)
            self.inner.serialize_into(value, stream)

    def serialize_size(self, value: Any) -> int:
        return 1 + (0 if value is None else self.inner.serialize_size(value))

    def deserialize(self, stream: Stream) -> Any:
        tag = U8.deserialize(stream)
        if tag == 0:
            return None
        if tag == 1:
            return self.inner.deserialize(stream)
        raise InvalidFormatError()

    def __repr__(self) -> str:
        return f"OptionCodec({self.inner!r})"


class BitfieldCodec(Codec):
    """A bitfield of exactly ``num_bits`` bits: its bit count, then its bytes."""

    def __init__(self, num_bits: int) -> None:
        if num_bits < 0:
            raise ValueError("num_bits must be non-negative")
        self.num_bits = num_bits

    def _check(self, value: Bitfield) -> None:
        if value.num_bits != self.num_bits:
            raise ValueError(
                f"expected a bitfield of {self.num_bits} bits, got {value.num_bits}"
            )

    def serialize_into(self, value: Bitfield, stream: Stream) -> None:
        self._check(value)
        write_compact_size(stream, value.num_bits)
        stream.write(bytes(value.bits))

    def serialize_size(self, value: Bitfield) -> int:
        self._check(value)
        return get_size_of_compact_size(value.num_bits) + len(value.bits)

    def deserialize(self, stream: Stream) -> Bitfield:
        num_bits = read_compact_size(stream)
        if num_bits != self.num_bits:
            raise InvalidFormatError()
        result = Bitfield(num_bits)
        result.bits = bytearray(stream.read((num_bits + 7) // 8))
        return result

    def __repr__(self) -> str:
        return f"BitfieldCodec({self.num_bits})"
"""Codecs for numbers, booleans, strings and fixed-length byte strings."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import Any, Callable

from .compact import get_size_of_compact_size, read_compact_size, write_compact_size
from .errors import InvalidFormatError, Utf8DecodeError
from .stream import Stream


class Codec(ABC):
    """Encodes values of one kind into a stream and decodes them back."""

    def serialize(self, value: Any) -> Stream:
        """Return a new stream holding ``value``."""
        stream = Stream()
        self.serialize_into(value, stream)
        return stream

    @abstractmethod
    def serialize_into(self, value: Any, stream: Stream) -> None:
        """Append the encoding of ``value`` to ``stream``."""

    @abstractmethod
    def serialize_size(self, value: Any) -> int:
        """Return how many bytes the encoding of ``value`` occupies."""

    @abstractmethod
    def deserialize(self, stream: Stream) -> Any:
        """Read one value from ``stream``."""


class Primitive(Codec):
    """A fixed-size little-endian number described by a ``struct`` format code."""

    def __init__(self, fmt: str) -> None:
        self.fmt = fmt
        self._struct = struct.Struct("<" + fmt)

    def serialize_into(self, value: Any, stream: Stream) -> None:
        try:
            packed = self._struct.pack(value)
        except struct.error as exc:
            raise ValueError(f"cannot encode {value!r} as {self.fmt!r}: {exc}") from exc
        stream.write(packed)

    def serialize_size(self, value: Any) -> int:
        return self._struct.size

    def deserialize(self, stream: Stream) -> Any:
        return self._struct.unpack(stream.read(self._struct.size))[0]

    def __repr__(self) -> str:
        return f"Primitive({self.fmt!r})"


class BoolCodec(Codec):
    """A boolean stored as one byte, 0 or 1."""

    def serialize_into(self, value: bool, stream: Stream) -> None:
        stream.write(b"\x01" if value else b"\x00")

    def serialize_size(self, value: bool) -> int:
        return 1

    def deserialize(self, stream: Stream) -> bool:
        byte = stream.read(1)[0]
        if byte == 0:
            return False
        if byte == 1:
            return True
        raise InvalidFormatError()


class StringCodec(Codec):
    """UTF-8 text prefixed with its byte length in compact form."""

    def serialize_into(self, value: str, stream: Stream) -> None:
        raw = value.encode("utf-8")
        write_compact_size(stream, len(raw))
        stream.write(raw)

    def serialize_size(self, value: str) -> int:
        length = len(value.encode("utf-8"))
        return get_size_of_compact_size(length) + length

    def deserialize(self, stream: Stream) -> str:
        size = read_compact_size(stream)
        raw = stream.read(size)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise Utf8DecodeError(exc) from exc


class FixedBytes(Codec):
    """Exactly ``length`` raw bytes with no prefix."""

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError("length must be non-negative")
        self.length = length

    def serialize_into(self, value: bytes, stream: Stream) -> None:
        if len(value) != self.length:
            raise ValueError(f"expected {self.length} bytes, got {len(value)}")
        stream.write(bytes(value))

    def serialize_size(self, value: bytes) -> int:
        return self.length

    def deserialize(self, stream: Stream) -> bytes:
        return stream.read(self.length)

    def __repr__(self) -> str:
        return f"FixedBytes({self.length})"


class TextCodec(Codec):
    """A value stored as its text form, written with ``format`` and read with ``parse``."""

    def __init__(self, parse: Callable[[str], Any], format: Callable[[Any], str] = str) -> None:
        self.parse = parse
        self.format = format
        self._text = StringCodec()

    def serialize_into(self, value: Any, stream: Stream) -> None:
        self._text.serialize_into(self.format(value), stream)

    def serialize_size(self, value: Any) -> int:
        return self._text.serialize_size(self.format(value))

    def deserialize(self, stream: Stream) -> Any:
        text = self._text.deserialize(stream)
        try:
            return self.parse(text)
        except (ValueError, TypeError) as exc:
            raise InvalidFormatError() from exc


U8 = Primitive("B")
I8 = Primitive("b")
U16 = Primitive("H")
I16 = Primitive("h")
U32 = Primitive("I")
I32 = Primitive("i")
U64 = Primitive("Q")
I64 = Primitive("q")
F32 = Primitive("f")
F64 = Primitive("d")
BOOL = BoolCodec()
STRING = StringCodec()
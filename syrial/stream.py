"""A growable byte buffer with a read cursor."""

from __future__ import annotations

from typing import Any, Protocol

from .errors import IoError, SerializationError, Utf8DecodeError


class _Encoder(Protocol):
    def serialize_into(self, value: Any, stream: "Stream") -> None: ...


class _Decoder(Protocol):
    def deserialize(self, stream: "Stream") -> Any: ...


class Stream:
    """Bytes that are appended at the end and read from a cursor."""

    def __init__(self, data: bytes | bytearray = b"") -> None:
        self._data = bytearray(data)
        self._cursor = 0

    def copy(self) -> "Stream":
        """Return a new stream with the same bytes and the cursor at the start."""
        return Stream(self._data)

    def __str__(self) -> str:
        return self._data[self._cursor:].decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"Stream({bytes(self._data)!r}, cursor={self._cursor})"

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __add__(self, other: "Stream") -> "Stream":
        if not isinstance(other, Stream):
            return NotImplemented
        return Stream(self._data + other._data)

    def is_empty(self) -> bool:
        return not self._data

    def find_str(self, target: str) -> bool:
        """Return whether ``target`` occurs in the unread bytes."""
        needle = target.encode("utf-8")
        if not needle:
            raise ValueError("target must not be empty")
        return needle in self._data[self._cursor:]

    def write(self, data: bytes) -> None:
        """Append bytes without moving the cursor."""
        self._data += data

    def write_data(self, data: bytes) -> None:
        """Move the cursor to the current end, then append bytes."""
        self.seek_to_end()
        self._data += data

    def write_str(self, text: str) -> None:
        """Append UTF-8 text, leaving the cursor where it was."""
        self._data += text.encode("utf-8")

    def raw_write(self, data: bytes, pos: int) -> None:
        """Overwrite bytes at ``pos`` if they fit inside the buffer."""
        end = pos + len(data)
        if 0 <= pos and end <= len(self._data):
            self._data[pos:end] = data

    def read(self, size: int) -> bytes:
        """Consume and return ``size`` bytes from the cursor."""
        if size < 0:
            raise ValueError("Size must be non-negative")
        end = self._cursor + size
        if end > len(self._data):
            raise IoError(EOFError("Stream::read(): end of data"))
        chunk = bytes(self._data[self._cursor:end])
        self._cursor = end
        return chunk

    def raw_read_buf(self, start: int, size: int) -> bytes:
        """Return ``size`` bytes from ``start`` without touching the cursor."""
        if start < 0 or size < 0 or start + size > len(self._data):
            raise IndexError(
                f"range {start}..{start + size} out of bounds for length {len(self._data)}"
            )
        return bytes(self._data[start:start + size])

    def read_str(self, start: int, size: int) -> str:
        """Decode ``size`` bytes from ``start`` as UTF-8."""
        raw = self.raw_read_buf(start, size)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise Utf8DecodeError(exc) from exc

    def unread(self) -> bytes:
        """Return the bytes after the cursor."""
        return bytes(self._data[self._cursor:])

    def resize(self, size: int, fill: int = 0) -> None:
        """Grow with ``fill`` bytes or truncate to ``size`` bytes."""
        if size < 0:
            raise ValueError("size must be non-negative")
        current = len(self._data)
        if size > current:
            self._data += bytes([fill]) * (size - current)
        else:
            del self._data[size:]

    def begin_index(self) -> int:
        return self._cursor

    def end_index(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()
        self._cursor = 0

    def insert(self, pos: int, values: bytes) -> None:
        """Insert bytes at ``pos`` counted from the cursor."""
        start = self._cursor + pos
        if not 0 <= start <= len(self._data):
            raise IndexError(
                f"insert position {start} out of bounds for length {len(self._data)}"
            )
        self._data[start:start] = values

    def erase(self, start: int, end: int | None = None) -> None:
        """Remove bytes between ``start`` and ``end``, both counted from the cursor."""
        length = len(self._data)
        end_pos = min(length if end is None else end, length)
        if start >= length:
            return
        lo = self._cursor + start
        hi = self._cursor + end_pos
        if lo < 0 or lo > hi or hi > length:
            raise IndexError(f"range {lo}..{hi} out of bounds for length {length}")
        del self._data[lo:hi]

    def ignore(self, size: int) -> "Stream":
        """Skip ``size`` bytes; skipping past the end empties the stream."""
        if size == 0:
            return self
        new_pos = self._cursor + size
        if new_pos >= len(self._data):
            self.clear()
        else:
            self.seek(new_pos)
        return self

    def compact(self) -> None:
        """Drop the bytes already read and rewind the cursor."""
        remaining = self.unread()
        self.clear()
        self.write_data(remaining)
        self.seek(0)

    def seek(self, position: int) -> None:
        if position < 0:
            raise ValueError("position must be non-negative")
        self._cursor = position

    def seek_to_end(self) -> None:
        self._cursor = len(self._data)

    def stream_in(self, codec: _Encoder, value: Any) -> None:
        """Append ``value`` encoded with ``codec``."""
        codec.serialize_into(value, self)

    def stream_out(self, codec: _Decoder) -> Any:
        """Decode the next value with ``codec``."""
        try:
            return codec.deserialize(self)
        except IoError:
            raise
        except SerializationError as exc:
            raise IoError(exc) from exc
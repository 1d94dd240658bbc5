"""Codecs for tuples, sequences and mappings built from other codecs."""

from __future__ import annotations

from typing import Any, Callable, Iterable, MutableMapping

from .compact import get_size_of_compact_size, read_compact_size, write_compact_size
from .scalars import Codec
from .stream import Stream


class TupleCodec(Codec):
    """A fixed-length tuple whose items are encoded one after another."""

    def __init__(self, *args: Codec) -> None:
        if not args:
            raise ValueError("a tuple codec needs at least one item codec")
        self.items = tuple(args)

    def _check(self, value: tuple) -> None:
        if len(value) != len(self.items):
            raise ValueError(
                f"expected a tuple of {len(self.items)} items, got {len(value)}"
            )

    def serialize_into(self, value: tuple, stream: Stream) -> None:
        self._check(value)
        for codec, item in zip(self.items, value):
            codec.serialize_into(item, stream)

    def serialize_size(self, value: tuple) -> int:
        self._check(value)
        return sum(codec.serialize_size(item) for codec, item in zip(self.items, value))

    def deserialize(self, stream: Stream) -> tuple:
        return tuple(codec.deserialize(stream) for codec in self.items)

    def __repr__(self) -> str:
        return f"TupleCodec{self.items!r}"


class VecCodec(Codec):
    """A list of items prefixed with its length in compact form."""

    def __init__(self, item: Codec) -> None:
        self.item = item

    def serialize_into(self, value: Iterable[Any], stream: Stream) -> None:
        items = list(value)
        write_compact_size(stream, len(items))
        for element in items:
            self.item.serialize_into(element, stream)

    def serialize_size(self, value: Iterable[Any]) -> int:
        items = list(value)
        return get_size_of_compact_size(len(items)) + sum(
            self.item.serialize_size(element) for element in items
        )

    def deserialize(self, stream: Stream) -> list:
        size = read_compact_size(stream)
        return [self.item.deserialize(stream) for _ in range(size)]

    def __repr__(self) -> str:
        return f"VecCodec({self.item!r})"


class MapCodec(Codec):
    """Key/value pairs prefixed with their count in compact form.

    Pairs are written in the mapping's iteration order; ``factory`` builds
    the mapping that decoded pairs are inserted into.
    """

    def __init__(
        self,
        key: Codec,
        value: Codec,
        factory: Callable[[], MutableMapping[Any, Any]] = dict,
    ) -> None:
        self.key = key
        self.value = value
        self.factory = factory

    def serialize_into(self, value: MutableMapping[Any, Any], stream: Stream) -> None:
        write_compact_size(stream, len(value))
        for k, v in value.items():
            self.key.serialize_into(k, stream)
            self.value.serialize_into(v, stream)

    def serialize_size(self, value: MutableMapping[Any, Any]) -> int:
        return get_size_of_compact_size(len(value)) + sum(
            self.key.serialize_size(k) + self.value.serialize_size(v)
            for k, v in value.items()
        )

    def deserialize(self, stream: Stream) -> MutableMapping[Any, Any]:
        size = read_compact_size(stream)
        mapping = self.factory()
        for _ in range(size):
            k = self.key.deserialize(stream)
            mapping[k] = self.value.deserialize(stream)
        return mapping

    def __repr__(self) -> str:
        return f"MapCodec({self.key!r}, {self.value!r})"
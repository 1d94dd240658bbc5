"""Codecs built from the shape of a class: dataclass fields or enum members."""

from __future__ import annotations

import dataclasses
import enum
from typing import Any, Iterable, Mapping

from .errors import InvalidFormatError
from .scalars import Codec
from .stream import Stream

_FieldSpec = Mapping[str, Codec] | Iterable[tuple[str, Codec]]


class StructCodec(Codec):
    """Encodes the named fields of an object one after another, in order.

    Decoding builds a new object by calling ``cls`` with the decoded fields
    as keyword arguments.
    """

    def __init__(self, cls: type, fields: _FieldSpec) -> None:
        self.cls = cls
        pairs = fields.items() if isinstance(fields, Mapping) else fields
        self.fields: tuple[tuple[str, Codec], ...] = tuple(
            (name, codec) for name, codec in pairs
        )
        names = [name for name, _ in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate field names in {names}")

    def serialize_into(self, value: Any, stream: Stream) -> None:
        for name, codec in self.fields:
            codec.serialize_into(getattr(value, name), stream)

    def serialize_size(self, value: Any) -> int:
        return sum(codec.serialize_size(getattr(value, name)) for name, codec in self.fields)

    def deserialize(self, stream: Stream) -> Any:
        values = {name: codec.deserialize(stream) for name, codec in self.fields}
        return self.cls(**values)

    def deserialize_into(self, obj: Any, stream: Stream) -> None:
        """Overwrite the fields of ``obj`` with values read from ``stream``, in order."""
        for name, codec in self.fields:
            setattr(obj, name, codec.deserialize(stream))

    def __repr__(self) -> str:
        return f"StructCodec({self.cls.__name__}, {[name for name, _ in self.fields]})"


class EnumCodec(Codec):
    """Encodes an enum member as one byte holding its position in the enum."""

    def __init__(self, enum_cls: type[enum.Enum]) -> None:
        if not (isinstance(enum_cls, type) and issubclass(enum_cls, enum.Enum)):
            raise TypeError(f"{enum_cls!r} is not an Enum class")
        members = list(enum_cls)
        if len(members) > 256:
            raise ValueError("an enum codec supports at most 256 members")
        self.enum_cls = enum_cls
        self._members = members
        self._index = {member: position for position, member in enumerate(members)}

    def serialize_into(self, value: enum.Enum, stream: Stream) -> None:
        try:
            position = self._index[value]
        except (KeyError, TypeError):
            raise ValueError(
                f"{value!r} is not a member of {self.enum_cls.__name__}"
            ) from None
        stream.write(bytes([position]))

    def serialize_size(self, value: enum.Enum) -> int:
        return 1

    def deserialize(self, stream: Stream) -> enum.Enum:
        position = stream.read(1)[0]
        if position >= len(self._members):
            raise InvalidFormatError()
        return self._members[position]

    def __repr__(self) -> str:
        return f"EnumCodec({self.enum_cls.__name__})"


def serializable(cls: type) -> type:
    """Attach a ``codec`` class attribute to a dataclass or an Enum.

    Each dataclass field must name its codec in its metadata under the key
    ``"codec"``; fields are encoded in declaration order.
    """
    if isinstance(cls, type) and issubclass(cls, enum.Enum):
        cls.codec = EnumCodec(cls)
        return cls
    if not dataclasses.is_dataclass(cls) or not isinstance(cls, type):
        raise TypeError("Only dataclasses and enums are supported")
    pairs = []
    for field in dataclasses.fields(cls):
        codec = field.metadata.get("codec")
        if codec is None:
            raise TypeError(f"field {field.name!r} of {cls.__name__} has no codec")
        if field.name == "codec":
            raise TypeError("a field named 'codec' would clash with the class codec")
        pairs.append((field.name, codec))
    cls.codec = StructCodec(cls, pairs)
    return cls
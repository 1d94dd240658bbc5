# syrial

Compact little-endian binary serialization on top of an in-memory byte
stream with a read cursor. It is a library only; it has no command-line
program.

## Install

    pip install syrial

## Streams

`syrial.stream.Stream` holds a byte buffer and a read cursor. Writes append
to the end of the buffer and reads consume bytes from the cursor onwards:

    from syrial.stream import Stream

    stream = Stream(b"")
    stream.write(b"\x01\x02\x03")
    stream.read(2)        # b"\x01\x02"
    stream.unread()       # b"\x03"
    bytes(stream)         # b"\x01\x02\x03"
    len(stream)           # 3

A read that asks for more bytes than are left raises
`syrial.errors.IoError` and leaves the cursor where it was.

Other methods work on the buffer directly: `write_data`, `write_str`,
`raw_write`, `raw_read_buf`, `read_str`, `find_str`, `insert`, `erase`,
`resize`, `ignore`, `compact`, `clear`, `seek`, `seek_to_end`,
`begin_index`, `end_index`, `is_empty` and `copy`. Two streams can be joined
with `+`, and `str(stream)` decodes the unread bytes as UTF-8, replacing
invalid sequences.

## Codecs

A codec describes how one kind of value is encoded. Every codec has
`serialize(value)` (returns a new `Stream`), `serialize_into(value, stream)`,
`serialize_size(value)` and `deserialize(stream)`.

`syrial.scalars` holds the basic codecs and ready-made instances:

- `Primitive(fmt)` for a fixed-size little-endian number given by a `struct`
  format code without byte-order prefix; instances `U8`, `I8`, `U16`, `I16`,
  `U32`, `I32`, `U64`, `I64`, `F32`, `F64`.
- `BoolCodec` (`BOOL`): one byte, 0 or 1; any other byte raises
  `InvalidFormatError`.
- `StringCodec` (`STRING`): UTF-8 bytes preceded by their length.
- `FixedBytes(length)`: exactly `length` raw bytes, no prefix.
- `TextCodec(parse, format=str)`: a value stored as its text form; a `parse`
  that raises `ValueError` or `TypeError` gives `InvalidFormatError`.

`syrial.containers` and `syrial.optional` build codecs from other codecs:

- `TupleCodec(*codecs)`: items one after another.
- `VecCodec(item)`: a length, then the items; decodes to a list.
- `MapCodec(key, value, factory=dict)`: a count, then key/value pairs in the
  mapping's iteration order.
- `OptionCodec(inner)`: a tag byte, 0 for `None` or 1 followed by the value.
- `BitfieldCodec(num_bits)`: a bit count, then the packed bytes.

Example:

    from ipaddress import ip_address
    from syrial.scalars import U8, U32, STRING, TextCodec
    from syrial.containers import VecCodec, TupleCodec, MapCodec
    from syrial.optional import OptionCodec

    names = VecCodec(STRING)
    stream = names.serialize(["alpha", "beta"])
    names.deserialize(stream)                 # ["alpha", "beta"]

    pair = TupleCodec(U8, STRING)
    maybe = OptionCodec(U32)
    table = MapCodec(U8, STRING, dict)
    address = TextCodec(ip_address)

Use `Stream.stream_in(codec, value)` and `Stream.stream_out(codec)` to put
several values on one stream:

    from syrial.stream import Stream

    stream = Stream(b"")
    stream.stream_in(U32, 1_000_000)
    stream.stream_in(STRING, "hello")
    stream.stream_out(U32)                    # 1000000
    stream.stream_out(STRING)                 # "hello"

`stream_out` reports every decoding failure as `IoError`.

## Compact sizes

Lengths and counts are written in a variable-length form by the functions
in `syrial.compact`: values below 253 take one byte; larger ones take a
prefix byte (253, 254 or 255) followed by a 2, 4 or 8 byte little-endian
value. Use `write_compact_size(stream, n)`, `read_compact_size(stream)` and
`get_size_of_compact_size(n)`. Values outside the unsigned 64-bit range
raise `ValueError`.

## Bitfields

    from syrial.bitfield import Bitfield
    from syrial.optional import BitfieldCodec

    flags = Bitfield(3)
    flags.set(0, True)
    flags.set(2, True)
    flags.get(1)                              # False
    flags.count_ones()                        # 2
    BitfieldCodec(3).serialize(flags)

An index outside the bitfield raises `IndexError`. Decoding a bitfield whose
stored bit count differs from the codec's raises `InvalidFormatError`.

## Dataclasses and enums

`syrial.derive.serializable` decorates a dataclass or an `enum.Enum`
subclass and sets a `codec` class attribute. Each dataclass field names its
codec in its metadata; fields are encoded in declaration order:

    from dataclasses import dataclass, field
    from enum import Enum
    from syrial.derive import serializable
    from syrial.scalars import I32, STRING

    @serializable
    @dataclass
    class Point:
        x: int = field(metadata={"codec": I32})
        label: str = field(metadata={"codec": STRING})

    @serializable
    class Color(Enum):
        RED = "red"
        GREEN = "green"

    Point.codec.deserialize(Point.codec.serialize(Point(3, "a")))
    Color.codec.serialize(Color.GREEN)        # one byte: 1

`StructCodec(cls, fields)` and `EnumCodec(enum_cls)` can also be built
directly. `StructCodec.deserialize_into(obj, stream)` overwrites the fields
of an existing object. An enum member is stored as its position in the enum;
a byte past the last member raises `InvalidFormatError`.

## Errors

Decoding failures raise subclasses of `syrial.errors.SerializationError`:
`IoError` when the stream runs out of data, `Utf8DecodeError` when string
bytes are not valid UTF-8, and `InvalidFormatError` when a tag or value is
out of range. Values that cannot be encoded (a number out of range, wrong
tuple or byte-string length) raise `ValueError`.
import pytest

from syrial.bitfield import Bitfield
from syrial.errors import InvalidFormatError, IoError
from syrial.optional import BitfieldCodec, OptionCodec
from syrial.scalars import U32
from syrial.stream import Stream


def test_option_none_and_some():
    codec = OptionCodec(U32)
    stream_none = Stream()
    codec.serialize_into(None, stream_none)
    assert codec.deserialize(stream_none) is None

    stream_some = Stream()
    codec.serialize_into(12345, stream_some)
    assert codec.deserialize(stream_some) == 12345


def test_option_bytes_and_size():
    codec = OptionCodec(U32)
    assert bytes(codec.serialize(None)) == b"\x00"
    assert bytes(codec.serialize(1)) == b"\x01\x01\x00\x00\x00"
    assert codec.serialize_size(None) == 1
    assert codec.serialize_size(1) == 5


def test_option_invalid_tag():
    with pytest.raises(InvalidFormatError):
        OptionCodec(U32).deserialize(Stream(b"\x02"))


def test_option_truncated_value():
    with pytest.raises(IoError):
        OptionCodec(U32).deserialize(Stream(b"\x01\x00"))


def test_bitfield_round_trip():
    bf = Bitfield(8)
    bf.set(0, True)
    bf.set(7, True)
    codec = BitfieldCodec(8)
    stream = Stream()
    codec.serialize_into(bf, stream)
    result = codec.deserialize(stream)
    assert result == bf
    assert result.get(0) and result.get(7)
    assert result.count_ones() == 2


def test_bitfield_bytes_and_size():
    bf = Bitfield(8)
    bf.set(0, True)
    bf.set(7, True)
    codec = BitfieldCodec(8)
    assert bytes(codec.serialize(bf)) == b"\x08\x81"
    assert codec.serialize_size(bf) == 2


def test_bitfield_partial_byte():
    bf = Bitfield(10)
    bf.set(9, True)
    codec = BitfieldCodec(10)
    encoded = codec.serialize(bf)
    assert bytes(encoded) == b"\x0a\x00\x02"
    assert codec.deserialize(encoded) == bf


def test_bitfield_wrong_bit_count():
    stream = BitfieldCodec(8).serialize(Bitfield(8))
    with pytest.raises(InvalidFormatError):
        BitfieldCodec(16).deserialize(stream)


def test_bitfield_serialize_mismatch():
    with pytest.raises(ValueError):
        BitfieldCodec(4).serialize(Bitfield(8))
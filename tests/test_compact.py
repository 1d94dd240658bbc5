import pytest

from syrial.compact import (
    get_size_of_compact_size,
    read_compact_size,
    write_compact_size,
)
from syrial.errors import IoError
from syrial.stream import Stream

U64_MAX = (1 << 64) - 1


def test_round_trip_300():
    stream = Stream()
    write_compact_size(stream, 300)
    assert read_compact_size(stream) == 300


def test_round_trip_u64_max():
    stream = Stream()
    write_compact_size(stream, U64_MAX)
    assert read_compact_size(stream) == U64_MAX


@pytest.mark.parametrize(
    "n, encoded",
    [
        (0, b"\x00"),
        (252, b"\xfc"),
        (253, b"\xfd\xfd\x00"),
        (300, b"\xfd\x2c\x01"),
        (65535, b"\xfd\xff\xff"),
        (65536, b"\xfe\x00\x00\x01\x00"),
        (0xFFFFFFFF, b"\xfe\xff\xff\xff\xff"),
        (1 << 32, b"\xff\x00\x00\x00\x00\x01\x00\x00\x00"),
    ],
)
def test_encoded_bytes(n, encoded):
    stream = Stream()
    write_compact_size(stream, n)
    assert bytes(stream) == encoded
    assert read_compact_size(stream) == n


@pytest.mark.parametrize(
    "n, size",
    [
        (0, 1),
        (252, 1),
        (253, 3),
        (65535, 3),
        (65536, 5),
        (0xFFFFFFFF, 5),
        (1 << 32, 9),
        (U64_MAX, 9),
    ],
)
def test_sizes(n, size):
    assert get_size_of_compact_size(n) == size
    stream = Stream()
    write_compact_size(stream, n)
    assert len(stream) == size


def test_several_values_in_sequence():
    values = [1, 253, 70000, 1 << 40]
    stream = Stream()
    for value in values:
        write_compact_size(stream, value)
    assert [read_compact_size(stream) for _ in values] == values
    assert stream.begin_index() == stream.end_index()


def test_read_from_empty_stream_fails():
    with pytest.raises(IoError):
        read_compact_size(Stream())


def test_read_truncated_payload_fails():
    with pytest.raises(IoError):
        read_compact_size(Stream(b"\xfe\x01\x02"))


@pytest.mark.parametrize("n", [-1, U64_MAX + 1])
def test_out_of_range_rejected(n):
    with pytest.raises(ValueError):
        write_compact_size(Stream(), n)
    with pytest.raises(ValueError):
        get_size_of_compact_size(n)
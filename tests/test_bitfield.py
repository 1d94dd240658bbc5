import pytest

from syrial.bitfield import Bitfield


def test_bitfield_set_get_count():
    flags = Bitfield(3)
    flags.set(0, True)
    flags.set(2, True)
    assert flags.get(0) is True
    assert flags.get(1) is False
    assert flags.get(2) is True
    assert flags.count_ones() == 2


def test_new_bitfield_is_zeroed():
    bf = Bitfield(10)
    assert len(bf.bits) == 2
    assert bf.count_ones() == 0
    assert bytes(bf.bits) == b"\x00\x00"


def test_bit_layout_is_lsb_first():
    bf = Bitfield(8)
    bf.set(0, True)
    bf.set(7, True)
    assert bytes(bf.bits) == b"\x81"


def test_clear_bit():
    bf = Bitfield(9)
    bf.set(8, True)
    assert bf.get(8)
    bf.set(8, False)
    assert not bf.get(8)
    assert bf.count_ones() == 0


@pytest.mark.parametrize("index", [3, 100, -1])
def test_out_of_bounds(index):
    bf = Bitfield(3)
    with pytest.raises(IndexError, match="out of bounds for Bitfield<3>"):
        bf.get(index)
    with pytest.raises(IndexError):
        bf.set(index, True)


def test_equality():
    a = Bitfield(5)
    b = Bitfield(5)
    assert a == b
    a.set(4, True)
    assert not a == b
    b.set(4, True)
    assert a == b
    assert not Bitfield(5) == Bitfield(6)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Bitfield(-1)
"""A fixed-size set of bits packed into bytes."""

from __future__ import annotations


class Bitfield:
    """Stores ``num_bits`` bits, least significant bit first in each byte."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, num_bits: int) -> None:
        if num_bits < 0:
            raise ValueError("num_bits must be non-negative")
        self.num_bits = num_bits
        self.bits = bytearray((num_bits + 7) // 8)

    def _locate(self, index: int) -> tuple[int, int]:
        if not 0 <= index < self.num_bits:
            raise IndexError(
                f"Index {index} out of bounds for Bitfield<{self.num_bits}>"
            )
        return divmod(index, 8)

    def set(self, index: int, value: bool) -> None:
        """Set or clear the bit at ``index``."""
        byte, bit = self._locate(index)
        if value:
            self.bits[byte] |= 1 << bit
        else:
            self.bits[byte] &= ~(1 << bit) & 0xFF

    def get(self, index: int) -> bool:
        """Return whether the bit at ``index`` is set."""
        byte, bit = self._locate(index)
        return bool(self.bits[byte] & (1 << bit))

    def count_ones(self) -> int:
        """Return how many of the bits are set."""
        return sum(self.get(i) for i in range(self.num_bits))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitfield):
            return NotImplemented
        return self.num_bits == other.num_bits and self.bits == other.bits

    def __repr__(self) -> str:
        return f"Bitfield(num_bits={self.num_bits}, bits={bytes(self.bits)!r})"
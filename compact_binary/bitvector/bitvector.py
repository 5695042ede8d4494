"""
Immutable little-endian bit vector for unbounded non-negative integers.
Index 0 holds the least significant bit. Every operation returns a new vector.
"""

from typing import Iterable, Iterator, List, Tuple, Union

from compact_binary.shared.config import BITS_PER_BYTE
from compact_binary.shared.errors import DomainError
from compact_binary.shared.utils import format_bits, parse_bits


class BitVector:
    """
    Ordered, fixed-length sequence of bits representing an unsigned integer.
    Length is independent of value: high zero bits are kept unless trimmed.
    """

    def __init__(self, bits: Iterable = ()) -> None:
        # Strings are '0'/'1' text, not truthy characters
        if isinstance(bits, str):
            bits = parse_bits(bits)
        self._bits: Tuple[bool, ...] = tuple(bool(bit) for bit in bits)

    # ------------------- Construction -------------------

    @classmethod
    def zeros(cls, length: int) -> "BitVector":
        """Return a vector of `length` zero bits."""
        if length < 0:
            raise DomainError(f"length must be non-negative, got {length}")
        return cls((False,) * length)

    @classmethod
    def from_integer(cls, value: int, minimal: bool = True) -> "BitVector":
        """
        Decompose a non-negative integer into bits, least significant first.
        - Goes through the unsigned little-endian byte form of value
        - Zero always becomes a single zero bit
        - minimal=False keeps the padding of the final byte
        - minimal=True trims down to the highest set bit
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise DomainError(f"value must be an integer, got {type(value).__name__}")
        if value < 0:
            raise DomainError(f"value must be non-negative, got {value}")
        if value == 0:
            return cls([False])

        byte_count = (value.bit_length() + BITS_PER_BYTE - 1) // BITS_PER_BYTE
        bits = cls.from_bytes(value.to_bytes(byte_count, "little"))

        if minimal:
            bits = bits.trim_end(False)
        return bits

    @classmethod
    def from_bytes(cls, data: bytes) -> "BitVector":
        """Unpack bytes 8 bits at a time, lowest bit of each byte first."""
        return cls((byte >> i) & 1 for byte in data for i in range(BITS_PER_BYTE))

    @classmethod
    def from_string(cls, text: str) -> "BitVector":
        """Parse a '0'/'1' string, index 0 first."""
        return cls(parse_bits(text))

    # ------------------- Conversion -------------------

    def to_integer(self) -> int:
        """Reconstruct the unsigned integer, bit 0 least significant."""
        return int.from_bytes(self.to_bytes(), "little")

    def to_bytes(self) -> bytes:
        """
        Pack bits 8 per byte, lowest index in each byte's least significant bit.
        - The final byte is padded with zero bits
        - An empty vector packs to a single zero byte
        """
        if not self._bits:
            return b"\x00"

        packed = bytearray((len(self._bits) + BITS_PER_BYTE - 1) // BITS_PER_BYTE)
        for i, bit in enumerate(self._bits):
            if bit:
                packed[i // BITS_PER_BYTE] |= 1 << (i % BITS_PER_BYTE)
        return bytes(packed)

    def to_bools(self) -> List[bool]:
        """Return the bits as a list, index 0 first."""
        return list(self._bits)

    # ------------------- Arithmetic -------------------

    def increment(self) -> "BitVector":
        """
        Add 1 by ripple-carry from index 0 upward.
        Grows by exactly one bit when every bit was 1.
        """
        bits = list(self._bits)
        for i, bit in enumerate(bits):
            bits[i] = not bit
            if not bit:
                return BitVector(bits)

        # Carry ran past the top bit
        bits.append(True)
        return BitVector(bits)

    def decrement(self) -> "BitVector":
        """
        Subtract 1 by ripple-borrow from index 0 upward.
        Raises DomainError when the vector holds zero (including the empty vector).
        """
        bits = list(self._bits)
        for i, bit in enumerate(bits):
            bits[i] = not bit
            if bit:
                return BitVector(bits)

        raise DomainError("cannot decrement a vector holding zero")

    def add(self, k: int) -> "BitVector":
        """Add a small constant as k sequential increments."""
        if k < 0:
            raise DomainError(f"k must be non-negative, got {k}")
        bits = self
        for _ in range(k):
            bits = bits.increment()
        return bits

    def subtract(self, k: int) -> "BitVector":
        """Subtract a small constant as k sequential decrements."""
        if k < 0:
            raise DomainError(f"k must be non-negative, got {k}")
        bits = self
        for _ in range(k):
            bits = bits.decrement()
        return bits

    # ------------------- Length changes -------------------

    def grow(self, extra: int) -> "BitVector":
        """Append `extra` zero bits at the high end. Value is unchanged."""
        if extra < 0:
            raise DomainError(f"extra must be non-negative, got {extra}")
        return BitVector(self._bits + (False,) * extra)

    def shrink(self, remove: int) -> "BitVector":
        """Drop the top `remove` bits. Lower indices keep their values."""
        if remove < 0 or remove > len(self._bits):
            raise DomainError(f"cannot remove {remove} bits from a vector of length {len(self._bits)}")
        return BitVector(self._bits[:len(self._bits) - remove])

    def append(self, bit: bool) -> "BitVector":
        """Grow by one bit and set the new top bit."""
        return BitVector(self._bits + (bool(bit),))

    def trim_end(self, value: bool = False) -> "BitVector":
        """
        Drop high-index bits equal to value until a differing bit is found.
        Returns an empty vector when every bit equals value.
        """
        keep = len(self._bits)
        while keep > 0 and self._bits[keep - 1] == bool(value):
            keep -= 1
        return BitVector(self._bits[:keep])

    # ------------------- Rearrangement -------------------

    def _check_range(self, start: int, count: int) -> None:
        if start < 0 or count < 0 or start + count > len(self._bits):
            raise DomainError(f"range start={start} count={count} outside vector of length {len(self._bits)}")

    def slice(self, start: int, count: int) -> "BitVector":
        """Return bits [start, start + count) renumbered from 0."""
        self._check_range(start, count)
        return BitVector(self._bits[start:start + count])

    def concat(self, other: "BitVector") -> "BitVector":
        """Join two vectors; `other` becomes the more significant part."""
        return BitVector(self._bits + other._bits)

    def reverse(self) -> "BitVector":
        """Return the bits in reverse order: index i moves to n - 1 - i."""
        return BitVector(reversed(self._bits))

    def flip(self, index: int) -> "BitVector":
        """Return a copy with bit `index` inverted."""
        if index < 0 or index >= len(self._bits):
            raise DomainError(f"index {index} out of range for vector of length {len(self._bits)}")
        bits = list(self._bits)
        bits[index] = not bits[index]
        return BitVector(bits)

    def invert_range(self, start: int, count: int) -> "BitVector":
        """Return a copy with bits [start, start + count) inverted."""
        self._check_range(start, count)
        bits = list(self._bits)
        for i in range(start, start + count):
            bits[i] = not bits[i]
        return BitVector(bits)

    # ------------------- Queries -------------------

    def hamming_weight(self) -> int:
        """Count of set bits."""
        return sum(self._bits)

    def is_minimal(self) -> bool:
        """True for a single zero bit, or when the top bit is set."""
        if len(self._bits) == 1:
            return True
        return bool(self._bits) and self._bits[-1]

    def equals(self, other: "BitVector") -> bool:
        """Same length and identical bits. No numeric normalization."""
        return self._bits == other._bits

    # ------------------- Python protocol -------------------

    def __len__(self) -> int:
        return len(self._bits)

    def __getitem__(self, index: Union[int, slice]) -> Union[bool, "BitVector"]:
        if isinstance(index, slice):
            return BitVector(self._bits[index])
        return self._bits[index]

    def __iter__(self) -> Iterator[bool]:
        return iter(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._bits)

    def __str__(self) -> str:
        return format_bits(self._bits)

    def __repr__(self) -> str:
        return f"BitVector('{self}')"

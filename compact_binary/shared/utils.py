"""
Shared helper functions.
"""
from typing import Iterable, List

from compact_binary.shared.errors import DomainError

def format_bits(bits: Iterable[bool]) -> str:
    """
    Render bits as a string of '0'/'1' characters.
    - Index 0 (least significant bit) comes first
    """
    return "".join("1" if bit else "0" for bit in bits)

def parse_bits(text: str) -> List[bool]:
    """
    Parse a '0'/'1' string back into a list of bits, index 0 first.
    Raises DomainError on any other character.
    """
    bits: List[bool] = []
    for char in text:
        if char == "1":
            bits.append(True)
        elif char == "0":
            bits.append(False)
        else:
            raise DomainError(f"invalid bit character {char!r}")
    return bits

def bit_length(value: int) -> int:
    """Minimal number of bits needed to hold value (1 for value 0)."""
    if value < 0:
        raise DomainError(f"value must be non-negative, got {value}")
    return max(value.bit_length(), 1)

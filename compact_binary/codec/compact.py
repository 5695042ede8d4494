"""
Compact binary codec for non-negative integers.
Biases the value by 2, drops the always-set top bit and inverts the interior bits.
Codewords carry no length prefix: decoding needs the exact codeword length.
"""

from compact_binary.bitvector.bitvector import BitVector
from compact_binary.shared.config import BIAS
from compact_binary.shared.errors import DomainError

# ---------------------------------------------------------
#   Bit-level transforms
# ---------------------------------------------------------

def encode_bits(bits: BitVector, add: bool = True) -> BitVector:
    """
    Transform a biased minimal bit vector into a codeword.
    - add=True adds the bias first (pass add=False if bits are already biased)
    - Keeps bit 0, inverts bits 1..n-2, drops the top bit
    """
    if add:
        bits = bits.add(BIAS)
    if len(bits) == 0:
        return bits

    # Keep the lowest bit, invert the interior, leave out the top bit
    encoded = [bits[0]]
    for i in range(1, len(bits) - 1):
        encoded.append(not bits[i])

    return BitVector(encoded)

def decode_bits(codeword: BitVector, subtract: bool = True) -> BitVector:
    """
    Invert encode_bits.
    - Keeps bit 0, inverts bits 1..n-1, appends the dropped top bit (always 1)
    - subtract=True removes the bias afterwards
    An empty codeword is returned unchanged.
    """
    if len(codeword) == 0:
        return codeword

    decoded = [codeword[0]]
    for i in range(1, len(codeword)):
        decoded.append(not codeword[i])

    # Restore the top bit that encoding dropped
    decoded.append(True)
    restored = BitVector(decoded)

    if subtract:
        restored = restored.subtract(BIAS)
    return restored

# ---------------------------------------------------------
#   Integer interface
# ---------------------------------------------------------

def encode(value: int) -> BitVector:
    """Encode a non-negative integer as a compact codeword."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise DomainError(f"value must be an integer, got {type(value).__name__}")
    if value < 0:
        raise DomainError(f"value must be non-negative, got {value}")
    return encode_bits(BitVector.from_integer(value + BIAS, minimal=True), add=False)

def decode(codeword: BitVector) -> int:
    """Decode a codeword produced by encode back to its integer."""
    return decode_bits(codeword).to_integer()

# Aliases used by callers that think in terms of bit representations
to_compact_bits = encode
from_compact_bits = decode

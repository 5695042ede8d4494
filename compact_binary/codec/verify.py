"""
Round-trip verification sweep for the compact codec.
Runs encode/decode over a range of values and collects any violations.
"""

import logging
from typing import Dict, List

from tqdm import tqdm

from compact_binary.codec.compact import encode, decode
from compact_binary.shared.config import BIAS, PROGRESS_MIN_VALUES
from compact_binary.shared.errors import DomainError
from compact_binary.shared.utils import bit_length

logger = logging.getLogger(__name__)

def verify_roundtrip(start: int, stop: int) -> Dict:
    """
    Check the codec over range(start, stop).
    For each value:
    - decode(encode(value)) must give value back
    - codeword length must be bit_length(value + 2) - 1
    - codeword length must not drop below the previous value's
    Returns a report dict with the failures found.
    """
    if start < 0:
        raise DomainError(f"start must be non-negative, got {start}")
    if stop < start:
        raise DomainError(f"stop ({stop}) must not be below start ({start})")

    failures: List[Dict] = []
    checked: int = 0
    max_length: int = 0
    prev_length: int = 0

    logger.info("Verifying values %d..%d", start, stop - 1)

    total = stop - start
    with tqdm(total=total, desc="Verifying codewords", unit="value", disable=total < PROGRESS_MIN_VALUES) as progress:
        for value in range(start, stop):
            codeword = encode(value)
            length = len(codeword)

            # Round trip
            decoded = decode(codeword)
            if decoded != value:
                failures.append({"value": value, "reason": f"decoded to {decoded}"})

            # Length relation against the biased minimal form
            expected = bit_length(value + BIAS) - 1
            if length != expected:
                failures.append({"value": value, "reason": f"length {length}, expected {expected}"})

            # Codeword lengths only grow with value
            if length < prev_length:
                failures.append({"value": value, "reason": f"length {length} shorter than previous {prev_length}"})

            prev_length = length
            max_length = max(max_length, length)
            checked += 1
            progress.update(1)

    for failure in failures:
        logger.warning("Value %d failed: %s", failure["value"], failure["reason"])
    logger.info("Checked %d values, %d failures", checked, len(failures))

    return {
        "start": start,
        "stop": stop,
        "checked": checked,
        "max_length": max_length,
        "failures": failures,
    }

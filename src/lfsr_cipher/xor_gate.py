from __future__ import annotations

from typing import Tuple

import numpy as np

# (a, b, a XOR b)
TRUTH_TABLE: Tuple[Tuple[int, int, int], ...] = (
    (0, 0, 0),
    (0, 1, 1),
    (1, 0, 1),
    (1, 1, 0),
)


def xor_bit(a: int, b: int) -> int:
    """
    Modulo-2 sum of two bits. (p ^ k) ^ k == p for any key bit k.
    """
    if a not in (0, 1) or b not in (0, 1):
        raise ValueError("xor_bit: inputs must be 0 or 1")
    return (a ^ b) & 1


def xor_bits(a, b) -> np.ndarray:
    a = np.asarray(a, dtype=np.uint8).reshape(-1)
    b = np.asarray(b, dtype=np.uint8).reshape(-1)
    if a.size != b.size:
        raise ValueError("xor_bits: length mismatch")
    return np.bitwise_xor(a & 1, b & 1)

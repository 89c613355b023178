from __future__ import annotations

from typing import List, Sequence

import numpy as np


def byte_to_bits(value: int) -> List[int]:
    """
    One byte -> 8 bits, MSB first (switch order: index 0 is b7).
    """
    if not isinstance(value, int):
        raise TypeError("value must be int")
    if not (0 <= value <= 0xFF):
        raise ValueError("value must be in [0, 255]")
    return [(value >> i) & 1 for i in range(7, -1, -1)]


def bits_to_byte(bits: Sequence[int]) -> int:
    validate_bits(bits, 8)
    v = 0
    for b in bits:
        v = (v << 1) | b
    return v


def int_to_bits(value: int, width: int) -> List[int]:
    """
    Register view: index i holds bit i (index 0 = LSB).
    """
    return [(value >> i) & 1 for i in range(width)]


def int_to_bits_array(value: int, width: int) -> np.ndarray:
    return np.asarray(int_to_bits(value, width), dtype=np.uint8)


def validate_bits(bits: Sequence[int], n: int) -> List[int]:
    if isinstance(bits, (str, bytes, bytearray)):
        raise TypeError("bits must be a sequence of ints")
    out = [int(b) if isinstance(b, (int, np.integer)) else b for b in bits]
    if len(out) != n:
        raise ValueError(f"expected {n} bits, got {len(out)}")
    for b in out:
        if not isinstance(b, int):
            raise TypeError("bits must be ints")
        if b not in (0, 1):
            raise ValueError("bits must be 0 or 1")
    return out

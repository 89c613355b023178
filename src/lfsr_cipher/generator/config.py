from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

# x^31 + x^6 + x^5 + x^1 + 1
DEFAULT_TAPS: Tuple[int, ...] = (1, 5, 6, 31)
DEFAULT_WIDTH = 32
DEFAULT_HISTORY_LEN = 64

# Non-zero so the default generator never sits on the all-zero fixed point.
DEFAULT_SEED = 0b10110011100011110000111110000011  # 0xB38F0F83


@dataclass(frozen=True)
class GeneratorConfig:
    """
    LFSR generator configuration.

    module: shift-direction realization (e.g. "shift_left", "shift_right")
    width: register width W in bits
    taps: bit positions XORed into the feedback bit
    history_len: capacity of the output-bit history (oldest evicted)
    """
    module: str = "shift_left"
    width: int = DEFAULT_WIDTH
    taps: Tuple[int, ...] = DEFAULT_TAPS
    history_len: int = DEFAULT_HISTORY_LEN


def get_width(cfg: Any) -> int:
    w = getattr(cfg, "width", None)
    if w is None:
        raise AttributeError("cfg missing required int attribute: width")
    if not isinstance(w, int) or isinstance(w, bool):
        raise TypeError("cfg.width must be int")
    if not (2 <= w <= 64):
        raise ValueError("cfg.width must be in [2, 64]")
    return w


def get_taps(cfg: Any) -> Tuple[int, ...]:
    width = get_width(cfg)
    taps = getattr(cfg, "taps", None)
    if taps is None:
        raise AttributeError("cfg missing required attribute: taps")
    taps = tuple(taps)
    if not taps:
        raise ValueError("cfg.taps must be non-empty")
    for t in taps:
        if not isinstance(t, int) or isinstance(t, bool):
            raise TypeError("cfg.taps must contain ints")
        if not (0 <= t < width):
            raise ValueError(f"cfg.taps entry {t} out of range for width {width}")
    if len(set(taps)) != len(taps):
        raise ValueError("cfg.taps must not contain duplicates")
    return taps


def get_history_len(cfg: Any) -> int:
    n = getattr(cfg, "history_len", DEFAULT_HISTORY_LEN)
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("cfg.history_len must be int")
    if n < 1:
        raise ValueError("cfg.history_len must be >= 1")
    return n


from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from lfsr_cipher.generator.config import GeneratorConfig
from lfsr_cipher.utils.bitops import validate_bits

BYTE_BITS = 8

# 'A' = 0x41
DEFAULT_INPUT: Tuple[int, ...] = (0, 1, 0, 0, 0, 0, 0, 1)


@dataclass(frozen=True)
class SessionConfig:
    """
    Pulse-by-pulse stream cipher session configuration.

    seed: shared tx/rx seed (None -> generator default seed)
    generator: config for both the tx and rx generators
    desync_min/desync_max: inclusive range of extra rx clocks on desync
    default_input: switch setting restored by reset_session()
    """
    seed: Optional[int] = None
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    desync_min: int = 3
    desync_max: int = 10
    default_input: Tuple[int, ...] = DEFAULT_INPUT


def get_desync_range(cfg: Any) -> Tuple[int, int]:
    lo = getattr(cfg, "desync_min", None)
    hi = getattr(cfg, "desync_max", None)
    if lo is None or hi is None:
        raise AttributeError("cfg missing required int attributes: desync_min/desync_max")
    if not isinstance(lo, int) or not isinstance(hi, int):
        raise TypeError("cfg.desync_min/desync_max must be int")
    if not (1 <= lo <= hi):
        raise ValueError("cfg.desync range must satisfy 1 <= desync_min <= desync_max")
    return lo, hi


def get_default_input(cfg: Any) -> Tuple[int, ...]:
    bits = getattr(cfg, "default_input", DEFAULT_INPUT)
    return tuple(validate_bits(bits, BYTE_BITS))

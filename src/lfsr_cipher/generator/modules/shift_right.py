from __future__ import annotations

from typing import Any, Tuple

from lfsr_cipher.generator.config import get_taps, get_width
from lfsr_cipher.generator.step import StepResult


def tap_positions(cfg: Any) -> Tuple[int, ...]:
    """
    cfg.taps are counted from the input end; in this orientation the input
    end is bit W-1, so tap t sits at physical bit (W-1-t).
    """
    width = get_width(cfg)
    return tuple(width - 1 - t for t in get_taps(cfg))


def step(state: int, *, cfg: Any) -> StepResult:
    """
    Mirror orientation. Data enters at bit W-1 and exits at bit 0:
      output   = bit 0
      feedback = parity of the (mirrored) tap bits
      state    = (state >> 1) | (feedback << (W-1))

    Bit-reversed twin of shift_left: seeding with the reversed register gives
    the same keystream.
    """
    width = get_width(cfg)
    state &= (1 << width) - 1

    mask = 0
    for t in tap_positions(cfg):
        mask |= 1 << t
    feedback = bin(state & mask).count("1") & 1

    output = state & 1
    new_state = (state >> 1) | (feedback << (width - 1))
    return StepResult(state=new_state, output_bit=output, feedback_bit=feedback)

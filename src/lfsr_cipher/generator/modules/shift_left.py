from __future__ import annotations

from typing import Any, Tuple

from lfsr_cipher.generator.config import get_taps, get_width
from lfsr_cipher.generator.step import StepResult


def tap_positions(cfg: Any) -> Tuple[int, ...]:
    # input end is bit 0, so taps are physical positions as given
    return get_taps(cfg)


def step(state: int, *, cfg: Any) -> StepResult:
    """
    Reference orientation. Data enters at bit 0 and exits at bit W-1:
      output   = bit W-1 (shifted out on the left)
      feedback = XOR of tap bits
      state    = (state << 1) | feedback, masked to W bits
    """
    width = get_width(cfg)
    mask = (1 << width) - 1
    state &= mask

    feedback = 0
    for t in tap_positions(cfg):
        feedback ^= (state >> t) & 1

    output = (state >> (width - 1)) & 1
    new_state = ((state << 1) & mask) | feedback
    return StepResult(state=new_state, output_bit=output, feedback_bit=feedback)

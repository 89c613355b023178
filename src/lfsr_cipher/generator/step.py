from __future__ import annotations

from typing import NamedTuple


class StepResult(NamedTuple):
    state: int
    output_bit: int
    feedback_bit: int

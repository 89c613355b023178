from __future__ import annotations

from collections import deque
from typing import Any, Dict, List, Optional
import importlib
import pkgutil

import numpy as np

from lfsr_cipher.generator.config import (
    DEFAULT_SEED,
    GeneratorConfig,
    get_history_len,
    get_width,
)
from lfsr_cipher.generator.step import StepResult
from lfsr_cipher.utils.bitops import int_to_bits, int_to_bits_array


def available_modules() -> list[str]:
    """
    Enumerate available shift-direction modules under generator/modules.
    """
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_step_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    mod = importlib.import_module(f"{__package__}.modules.{name}")
    if not hasattr(mod, "step") or not hasattr(mod, "tap_positions"):
        raise AttributeError(f"generator module '{name}' missing step/tap_positions")
    return mod


def _coerce_seed(seed: Optional[int], width: int) -> int:
    if seed is None:
        seed = DEFAULT_SEED
    if not isinstance(seed, (int, np.integer)) or isinstance(seed, bool):
        raise TypeError("seed must be int")
    # Unsigned, mod 2^W. Zero is accepted (degenerate fixed point).
    return int(seed) & ((1 << width) - 1)


class Lfsr:
    """
    Stateful Fibonacci LFSR: one pseudorandom output bit per clock.

    Owns the register, step counter, last output/feedback bits and a bounded
    output history (oldest first, oldest evicted past cfg.history_len).
    The register realization (which end is output, which end receives
    feedback) is selected by cfg.module.
    """

    def __init__(self, seed: Optional[int] = None, *, cfg: Optional[GeneratorConfig] = None):
        self.cfg = cfg if cfg is not None else GeneratorConfig()
        self._width = get_width(self.cfg)
        self._mod = _import_step_module(self.cfg.module)
        # physical bit positions for this orientation
        self._taps = tuple(self._mod.tap_positions(self.cfg))
        self._history: deque[int] = deque(maxlen=get_history_len(self.cfg))

        self._seed = _coerce_seed(seed, self._width)
        self._state = self._seed
        self._step_count = 0
        self._last_output: Optional[int] = None
        self._last_feedback: Optional[int] = None

    # ----------------------------
    # Clocking
    # ----------------------------

    def step(self) -> StepResult:
        res = self._mod.step(self._state, cfg=self.cfg)
        self._state = res.state
        self._step_count += 1
        self._last_output = res.output_bit
        self._last_feedback = res.feedback_bit
        self._history.append(res.output_bit)
        return res

    def generate(self, n: int) -> np.ndarray:
        """
        Clock n times; return the output bits as uint8 array.
        """
        if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
            raise TypeError("n must be int")
        if n < 0:
            raise ValueError("n must be non-negative")
        n = int(n)
        out = np.empty(n, dtype=np.uint8)
        for i in range(n):
            out[i] = self.step().output_bit
        return out

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self._seed = _coerce_seed(seed, self._width)
        self._state = self._seed
        self._step_count = 0
        self._last_output = None
        self._last_feedback = None
        self._history.clear()

    # ----------------------------
    # Inspection (never mutates)
    # ----------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def taps(self) -> tuple[int, ...]:
        return self._taps

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> int:
        return self._state

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def last_output(self) -> Optional[int]:
        return self._last_output

    @property
    def last_feedback(self) -> Optional[int]:
        return self._last_feedback

    @property
    def history(self) -> List[int]:
        return list(self._history)

    def peek_bits(self) -> List[int]:
        """Index i holds register bit i."""
        return int_to_bits(self._state, self._width)

    def bits_array(self) -> np.ndarray:
        return int_to_bits_array(self._state, self._width)

    def tap_values(self) -> Dict[int, int]:
        return {t: (self._state >> t) & 1 for t in self._taps}

    def next_feedback(self) -> int:
        fb = 0
        for v in self.tap_values().values():
            fb ^= v
        return fb

    def snapshot(self) -> Dict[str, Any]:
        return {
            "module": self.cfg.module,
            "width": self._width,
            "taps": list(self._taps),
            "seed": self._seed,
            "state": self._state,
            "state_hex": f"0x{self._state:0{(self._width + 3) // 4}X}",
            "step_count": self._step_count,
            "last_output": self._last_output,
            "last_feedback": self._last_feedback,
            "history": self.history,
        }

    def __repr__(self) -> str:
        return f"Lfsr(state=0x{self._state:X}, step_count={self._step_count}, module={self.cfg.module!r})"


def keystream(seed: Optional[int], n: int, *, cfg: Optional[GeneratorConfig] = None) -> np.ndarray:
    """
    One-shot: fresh generator from seed, first n output bits.
    """
    return Lfsr(seed, cfg=cfg).generate(n)

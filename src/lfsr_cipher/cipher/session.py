from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np

from lfsr_cipher.cipher.config import (
    BYTE_BITS,
    SessionConfig,
    get_default_input,
    get_desync_range,
)
from lfsr_cipher.cipher.pulse import (
    ByteResult,
    DesyncResult,
    PulseRecord,
    Rejected,
    SessionState,
)
from lfsr_cipher.generator.config import DEFAULT_SEED
from lfsr_cipher.generator.lfsr import Lfsr
from lfsr_cipher.utils.bitops import bits_to_byte, byte_to_bits, validate_bits
from lfsr_cipher.xor_gate import xor_bit


class CipherSession:
    """
    One plaintext byte sent bit-by-bit through a tx/rx pair of LFSRs.

      TX: encrypted = plaintext ^ tx.step().output_bit
      RX: decrypted = encrypted ^ rx.step().output_bit

    tx and rx start from the same seed and are clocked once each per pulse, so
    while in sync the keystreams agree step-for-step and decrypted == plaintext.
    Accumulator bytes are written MSB-first: pulse i lands at bit (7 - i).

    Calls that are not allowed in the current state return Rejected and leave
    the session untouched.

    rng: anything with integers(low, high) (e.g. numpy Generator), used to draw
         the desync extra-step count. Defaults to np.random.default_rng().
    """

    def __init__(self, cfg: Optional[SessionConfig] = None, *, rng: Any = None):
        self.cfg = cfg if cfg is not None else SessionConfig()
        self._desync_range = get_desync_range(self.cfg)
        self._rng = rng if rng is not None else np.random.default_rng()

        self._tx = Lfsr(self.cfg.seed, cfg=self.cfg.generator)
        self._rx = Lfsr(self.cfg.seed, cfg=self.cfg.generator)
        self._input_bits: List[int] = list(get_default_input(self.cfg))
        self._synchronized = True
        self._clear_unit()

    def _clear_unit(self) -> None:
        self._cursor = 0
        self._original = 0
        self._encrypted = 0
        self._decrypted = 0
        self._pulses: List[PulseRecord] = []

    # ----------------------------
    # State
    # ----------------------------

    @property
    def state(self) -> SessionState:
        if self._cursor == 0:
            return SessionState.AWAITING_INPUT
        if self._cursor < BYTE_BITS:
            return SessionState.TRANSMITTING
        return SessionState.BYTE_COMPLETE

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def tx(self) -> Lfsr:
        return self._tx

    @property
    def rx(self) -> Lfsr:
        return self._rx

    @property
    def synchronized(self) -> bool:
        return self._synchronized

    @property
    def input_bits(self) -> List[int]:
        return list(self._input_bits)

    @property
    def input_byte(self) -> int:
        return bits_to_byte(self._input_bits)

    @property
    def original_byte(self) -> int:
        return self._original

    @property
    def encrypted_byte(self) -> int:
        return self._encrypted

    @property
    def decrypted_byte(self) -> int:
        return self._decrypted

    @property
    def pulses(self) -> List[PulseRecord]:
        return list(self._pulses)

    def _reject(self, operation: str, reason: str) -> Rejected:
        return Rejected(operation=operation, state=self.state, reason=reason)

    # ----------------------------
    # Input latch
    # ----------------------------

    def set_input_bits(self, bits: Sequence[int]) -> Optional[Rejected]:
        """
        Replace the 8 switch bits (MSB first). Only while AWAITING_INPUT.
        """
        checked = validate_bits(bits, BYTE_BITS)
        if self._cursor != 0:
            return self._reject("set_input_bits", "input register is latched during transmission")
        self._input_bits = checked
        return None

    def set_input_byte(self, value: int) -> Optional[Rejected]:
        return self.set_input_bits(byte_to_bits(value))

    # ----------------------------
    # Transmission
    # ----------------------------

    def submit_bit(self) -> Union[PulseRecord, Rejected]:
        if self._cursor >= BYTE_BITS:
            return self._reject("submit_bit", "byte already complete")

        i = self._cursor
        p = self._input_bits[i]

        k_tx = self._tx.step().output_bit
        e = xor_bit(p, k_tx)

        k_rx = self._rx.step().output_bit
        d = xor_bit(e, k_rx)

        shift = BYTE_BITS - 1 - i
        self._original |= p << shift
        self._encrypted |= e << shift
        self._decrypted |= d << shift

        rec = PulseRecord(
            index=i,
            plaintext_bit=p,
            tx_key_bit=k_tx,
            encrypted_bit=e,
            rx_key_bit=k_rx,
            decrypted_bit=d,
        )
        self._pulses.append(rec)
        self._cursor += 1
        return rec

    def send_byte(self) -> Union[ByteResult, Rejected]:
        """
        Run every remaining pulse of the current unit.
        """
        if self._cursor >= BYTE_BITS:
            return self._reject("send_byte", "byte already complete")
        while self._cursor < BYTE_BITS:
            self.submit_bit()
        return ByteResult(
            original=self._original,
            encrypted=self._encrypted,
            decrypted=self._decrypted,
            pulses=tuple(self._pulses),
        )

    def complete_byte(self) -> Optional[Rejected]:
        """
        Start the next unit. tx/rx keep their state: the keystream continues.
        """
        if self._cursor != BYTE_BITS:
            return self._reject("complete_byte", "byte not complete")
        self._clear_unit()
        return None

    # ----------------------------
    # Session control
    # ----------------------------

    def reset_session(self, seed: Optional[int] = None) -> None:
        s = self.cfg.seed if seed is None else seed
        # Lfsr.reset(None) would restore the last seed, not cfg.seed
        if s is None:
            s = DEFAULT_SEED
        self._tx.reset(s)
        self._rx.reset(s)
        self._input_bits = list(get_default_input(self.cfg))
        self._synchronized = True
        self._clear_unit()

    def desynchronize(self, extra_steps: Optional[int] = None) -> Union[DesyncResult, Rejected]:
        """
        Clock rx alone by extra_steps (default: drawn from the configured
        inclusive range) and drop the sync flag. Once per reset.
        """
        if not self._synchronized:
            return self._reject("desynchronize", "already desynchronized")

        if extra_steps is None:
            lo, hi = self._desync_range
            extra_steps = int(self._rng.integers(lo, hi + 1))
            if not (lo <= extra_steps <= hi):
                raise ValueError(f"rng drew {extra_steps}, outside desync range [{lo}, {hi}]")
        else:
            if not isinstance(extra_steps, (int, np.integer)) or isinstance(extra_steps, bool):
                raise TypeError("extra_steps must be int")
            if extra_steps < 0:
                raise ValueError("extra_steps must be non-negative")
            extra_steps = int(extra_steps)

        for _ in range(extra_steps):
            self._rx.step()
        self._synchronized = False
        return DesyncResult(extra_steps=extra_steps)

    def snapshot(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "cursor": self._cursor,
            "synchronized": self._synchronized,
            "input_bits": self.input_bits,
            "input_byte": self.input_byte,
            "original_byte": self._original,
            "encrypted_byte": self._encrypted,
            "decrypted_byte": self._decrypted,
            "pulses": [p.to_dict() for p in self._pulses],
            "tx": self._tx.snapshot(),
            "rx": self._rx.snapshot(),
        }

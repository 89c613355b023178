from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class SessionState(str, Enum):
    AWAITING_INPUT = "awaiting_input"    # cursor == 0, switches writable
    TRANSMITTING = "transmitting"        # 0 < cursor < 8, switches latched
    BYTE_COMPLETE = "byte_complete"      # cursor == 8, accumulators final


@dataclass(frozen=True)
class PulseRecord:
    """
    Full derivation of one transmitted bit.

    index 0 is the first pulse, i.e. the MSB (b7) of the unit.
    """
    index: int
    plaintext_bit: int
    tx_key_bit: int
    encrypted_bit: int
    rx_key_bit: int
    decrypted_bit: int

    @property
    def matched(self) -> bool:
        return self.plaintext_bit == self.decrypted_bit

    @property
    def bit_label(self) -> str:
        return f"b{7 - self.index}"

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["matched"] = self.matched
        return d


@dataclass(frozen=True)
class Rejected:
    """
    Operation refused in the current state. Nothing was mutated.
    """
    operation: str
    state: SessionState
    reason: str

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class DesyncResult:
    extra_steps: int


@dataclass(frozen=True)
class ByteResult:
    original: int
    encrypted: int
    decrypted: int
    pulses: Tuple[PulseRecord, ...]

    @property
    def ok(self) -> bool:
        return self.original == self.decrypted

from __future__ import annotations

from pathlib import Path
from typing import Iterable
import json

from lfsr_cipher.cipher.pulse import PulseRecord

_COLUMNS = ("Bit", "MSG", "LFSR TX", "ENC", "LFSR RX", "DEC", "OK?")


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def format_pulse_table(pulses: Iterable[PulseRecord]) -> str:
    """
    Bit-by-bit progress table, one row per pulse (first row = b7).
    """
    widths = [max(3, len(c)) for c in _COLUMNS]
    lines = [" ".join(c.rjust(w) for c, w in zip(_COLUMNS, widths))]
    for p in pulses:
        row = (
            p.bit_label,
            str(p.plaintext_bit),
            str(p.tx_key_bit),
            str(p.encrypted_bit),
            str(p.rx_key_bit),
            str(p.decrypted_bit),
            "OK" if p.matched else "ERR",
        )
        lines.append(" ".join(v.rjust(w) for v, w in zip(row, widths)))
    return "\n".join(lines)


def write_trace(session, debug_dir: str | Path, *, name: str = "trace") -> Path:
    """
    Dump session snapshot + pulse table to <debug_dir>/<name>.json.
    """
    base = Path(debug_dir)
    _ensure_dir(base)
    out = base / f"{name}.json"

    snap = session.snapshot()
    snap["pulse_table"] = format_pulse_table(session.pulses).splitlines()
    out.write_text(json.dumps(snap, indent=2, sort_keys=True), encoding="utf-8")
    return out

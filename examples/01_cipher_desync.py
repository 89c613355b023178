from pathlib import Path

from lfsr_cipher.cipher.session import CipherSession
from lfsr_cipher.cipher.trace import format_pulse_table, write_trace


def send(session: CipherSession, ch: str) -> None:
    session.set_input_byte(ord(ch))
    res = session.send_byte()
    print(format_pulse_table(res.pulses))
    print(
        f"'{ch}': original=0x{res.original:02X} encrypted=0x{res.encrypted:02X} "
        f"decrypted=0x{res.decrypted:02X} ok={res.ok} synchronized={session.synchronized}"
    )
    session.complete_byte()


if __name__ == "__main__":
    session = CipherSession()

    for ch in "HI":
        send(session, ch)

    d = session.desynchronize()
    print(f"\nrx clocked {d.extra_steps} extra steps\n")

    for ch in "HI":
        send(session, ch)

    session.set_input_byte(ord("!"))
    session.send_byte()
    out = write_trace(session, Path("tests/output/examples"), name="desync")
    print(f"Wrote {out}")

import time

from lfsr_cipher.generator.lfsr import Lfsr, keystream
from lfsr_cipher.utils.bitops import byte_to_bits
from lfsr_cipher.xor_gate import xor_bits


def render_register(lfsr: Lfsr) -> str:
    # MSB (bit W-1) on the left, taps marked with '^' underneath
    bits = lfsr.peek_bits()
    cells = "".join(str(bits[i]) for i in range(lfsr.width - 1, -1, -1))
    marks = "".join("^" if i in lfsr.taps else " " for i in range(lfsr.width - 1, -1, -1))
    return f"{cells}\n{marks}"


if __name__ == "__main__":
    lfsr = Lfsr()
    interval_s = 0.05

    # Auto-run is the caller's loop; each step() is atomic.
    for _ in range(40):
        res = lfsr.step()
        print(render_register(lfsr))
        print(f"step={lfsr.step_count} out={res.output_bit} fb={res.feedback_bit} state=0x{res.state:08X}")
        time.sleep(interval_s)

    print("stream:", "".join(str(b) for b in lfsr.history))

    # Same keystream as XOR mask over a message, one byte at a time
    msg = [b for ch in "HI" for b in byte_to_bits(ord(ch))]
    mask = keystream(lfsr.seed, len(msg))
    enc = xor_bits(msg, mask)
    dec = xor_bits(enc, keystream(lfsr.seed, len(msg)))
    print("msg:", "".join(map(str, msg)))
    print("enc:", "".join(map(str, enc.tolist())))
    print("dec:", "".join(map(str, dec.tolist())), "ok" if dec.tolist() == msg else "MISMATCH")

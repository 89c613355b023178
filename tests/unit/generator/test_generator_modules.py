import random

import pytest

from lfsr_cipher.generator.config import GeneratorConfig
from lfsr_cipher.generator.lfsr import Lfsr, _import_step_module, available_modules
from lfsr_cipher.generator.modules import shift_left, shift_right


def _reverse_bits(x: int, width: int = 32) -> int:
    out = 0
    for i in range(width):
        out = (out << 1) | ((x >> i) & 1)
    return out


def test_shift_right_output_is_low_bit():
    cfg = GeneratorConfig(module="shift_right")
    res = shift_right.step(0b1, cfg=cfg)
    assert res.output_bit == 1
    # bit 0 is the mirror of tap 31
    assert res.feedback_bit == 1
    assert res.state == 0x8000_0000


def test_shift_right_mirror_of_first_step():
    cfg = GeneratorConfig(module="shift_right")
    res = shift_right.step(0x8000_0000, cfg=cfg)  # reverse of 1
    assert tuple(res) == (0x4000_0000, 0, 0)  # reverse of 2


def test_tap_positions_per_orientation():
    cfg = GeneratorConfig()
    assert shift_left.tap_positions(cfg) == (1, 5, 6, 31)
    assert shift_right.tap_positions(cfg) == (30, 26, 25, 0)
    assert Lfsr(cfg=GeneratorConfig(module="shift_right")).taps == (30, 26, 25, 0)


def test_shift_right_is_bit_reversed_twin():
    rng = random.Random(0xBEEF)
    left = GeneratorConfig(module="shift_left")
    right = GeneratorConfig(module="shift_right")
    for _ in range(20):
        seed = rng.getrandbits(32)
        a = Lfsr(seed, cfg=left)
        b = Lfsr(_reverse_bits(seed), cfg=right)
        for _ in range(200):
            ra = a.step()
            rb = b.step()
            assert ra.output_bit == rb.output_bit
            assert ra.feedback_bit == rb.feedback_bit
            assert rb.state == _reverse_bits(ra.state)


def test_orientations_differ_for_same_seed():
    seed = 0xB33C87E3
    a = Lfsr(seed, cfg=GeneratorConfig(module="shift_left")).generate(64)
    b = Lfsr(seed, cfg=GeneratorConfig(module="shift_right")).generate(64)
    assert a.tolist() != b.tolist()


@pytest.mark.parametrize("module_name", available_modules())
def test_modules_expose_uniform_api(module_name: str):
    mod = _import_step_module(module_name)
    res = mod.step(0xB33C87E3, cfg=GeneratorConfig(module=module_name))
    assert 0 <= res.state < 2**32
    assert res.output_bit in (0, 1)
    assert res.feedback_bit in (0, 1)


def test_small_width_register():
    # 4-bit x^4 + x^3 + 1 style register: taps 0,3 -> period 15
    cfg = GeneratorConfig(width=4, taps=(0, 3))
    lfsr = Lfsr(1, cfg=cfg)
    seen = []
    for _ in range(15):
        lfsr.step()
        seen.append(lfsr.state)
    assert lfsr.state == 1
    assert len(set(seen)) == 15


def test_unknown_module_raises():
    with pytest.raises(ModuleNotFoundError):
        Lfsr(cfg=GeneratorConfig(module="nope"))


def test_empty_module_name_raises():
    with pytest.raises(ValueError):
        Lfsr(cfg=GeneratorConfig(module=""))


@pytest.mark.parametrize(
    "kwargs, exc",
    [
        ({"width": 1}, ValueError),
        ({"width": 65}, ValueError),
        ({"width": "32"}, TypeError),
        ({"taps": ()}, ValueError),
        ({"taps": (1, 32)}, ValueError),
        ({"taps": (1, 1)}, ValueError),
        ({"taps": (1, "5")}, TypeError),
        ({"history_len": 0}, ValueError),
    ],
)
def test_config_validation(kwargs, exc):
    with pytest.raises(exc):
        Lfsr(cfg=GeneratorConfig(**kwargs))

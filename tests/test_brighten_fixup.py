"""Tests for the brighten fixup simulator."""

from hover_audit.design.brighten import brighten, brighten_channel


def test_known_values():
    assert brighten((30, 30, 30)) == (40, 40, 40)
    assert brighten((0, 0, 0)) == (1, 1, 1)
    assert brighten((32, 32, 32)) == (42, 42, 42)


def test_clamps_to_255():
    assert brighten((200, 255, 196)) == (255, 255, 255)
    assert brighten_channel(195) == 254


def test_moves_every_non_saturated_channel():
    for v in range(0, 196):
        c = (v, 0, v // 2)
        out = brighten(c)
        assert out != c
        assert all(o > i for o, i in zip(out, c))


def test_repeated_brighten_never_darkens():
    for v in range(0, 256, 3):
        once = brighten((v, 255 - v, v // 2))
        twice = brighten(once)
        assert all(b >= a for a, b in zip(once, twice))


def test_custom_factor_and_bias():
    assert brighten((100, 100, 100), factor=1.5, bias=0) == (150, 150, 150)
    assert brighten_channel(0, factor=2.0, bias=0) == 0

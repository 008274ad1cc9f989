"""Tests for hex decoding and the L1 color distance."""

import pytest

from hover_audit.design.color_model import MAX_DISTANCE, decode, distance, encode
from hover_audit.errors import MalformedColor

SAMPLE_COLORS = [
    (0, 0, 0),
    (255, 255, 255),
    (30, 30, 30),
    (0x20, 0x20, 0x20),
    (0x4A, 0x4A, 0x4A),
    (255, 0, 128),
    (12, 200, 99),
]


def test_decode_with_and_without_prefix():
    assert decode("#1e1e1e") == (30, 30, 30)
    assert decode("1E1E1E") == (30, 30, 30)
    assert decode("#FF0080") == (255, 0, 128)


@pytest.mark.parametrize(
    "value", ["#fff", "#12345g", "", "#", "##123456", "#1234567", " #123456", None, 0x123456]
)
def test_decode_rejects_malformed(value):
    with pytest.raises(MalformedColor) as exc:
        decode(value)
    assert exc.value.context["value"] == value


def test_encode_lowercase_hex():
    assert encode((30, 30, 30)) == "#1e1e1e"
    assert decode(encode((255, 0, 128))) == (255, 0, 128)


def test_distance_identity_symmetry_range():
    for a in SAMPLE_COLORS:
        assert distance(a, a) == 0
        for b in SAMPLE_COLORS:
            d = distance(a, b)
            assert d == distance(b, a)
            assert 0 <= d <= MAX_DISTANCE


def test_distance_extremes_and_known_values():
    assert distance((0, 0, 0), (255, 255, 255)) == 765
    assert distance(decode("#202020"), decode("#4a4a4a")) == 3 * 0x2A
    assert distance(decode("#000000"), decode("#010101")) == 3

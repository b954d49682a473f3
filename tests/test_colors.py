import pytest

from polkicon.colors import (
    FOREGROUND,
    NEAR_BLACK,
    SCHEMES,
    SCHEMES_TOTAL,
    Color,
    build_palette,
    choose_scheme,
    compose_colors,
    derive_color,
    get_colors,
    normalize,
    saturation_component,
    select_scheme_and_rotation,
)

from .conftest import ALICE, ALICE_COLORS, BOB, BOB_COLORS


def test_colors_alice():
    assert get_colors(ALICE) == ALICE_COLORS


def test_colors_bob():
    assert get_colors(BOB) == BOB_COLORS


def test_colors_deterministic():
    for identity in (b"", b"\x00", ALICE, bytes(range(200))):
        assert get_colors(identity) == get_colors(identity)


@pytest.mark.parametrize("identity", [b"", b"x", bytes(32), bytes(range(256)) * 4])
def test_always_19_colors(identity):
    colors = get_colors(identity)
    assert len(colors) == 19
    assert all(c.alpha == 255 for c in colors)


def test_normalize_length_and_zero_reference():
    assert len(normalize(ALICE)) == 64
    assert len(normalize(b"")) == 64
    # the reference input normalizes to all zeros
    assert normalize(bytes(32)) == bytes(64)


def test_normalize_accepts_bytearray():
    assert normalize(bytearray(ALICE)) == normalize(ALICE)


def test_scheme_table():
    assert len(SCHEMES) == 7
    assert [s.freq for s in SCHEMES] == [1, 20, 16, 32, 32, 128, 128]
    assert SCHEMES_TOTAL == 357
    for scheme in SCHEMES:
        assert len(scheme.slots) == 19
        assert all(0 <= slot <= 28 for slot in scheme.slots)


def test_choose_scheme_boundaries():
    assert choose_scheme(0) is SCHEMES[0]
    assert choose_scheme(1) is SCHEMES[1]
    assert choose_scheme(20) is SCHEMES[1]
    assert choose_scheme(21) is SCHEMES[2]
    assert choose_scheme(36) is SCHEMES[2]
    assert choose_scheme(37) is SCHEMES[3]
    assert choose_scheme(69) is SCHEMES[4]
    assert choose_scheme(100) is SCHEMES[4]
    assert choose_scheme(101) is SCHEMES[5]
    assert choose_scheme(228) is SCHEMES[5]
    assert choose_scheme(229) is SCHEMES[6]
    assert choose_scheme(356) is SCHEMES[6]


def test_choose_scheme_covers_range():
    counts = {}
    for d in range(SCHEMES_TOTAL):
        scheme = choose_scheme(d)
        counts[SCHEMES.index(scheme)] = counts.get(SCHEMES.index(scheme), 0) + 1
    assert counts == {i: s.freq for i, s in enumerate(SCHEMES)}


def test_select_scheme_and_rotation_reads_digest_bytes():
    digest = bytearray(64)
    digest[28] = 7   # 7 % 6 == 1 -> rotation 3
    digest[30] = 100
    digest[31] = 1   # 100 + 256 = 356
    scheme, rotation = select_scheme_and_rotation(bytes(digest))
    assert scheme is SCHEMES[6]
    assert rotation == 3


def test_select_scheme_wraps_modulus():
    digest = bytearray(64)
    digest[30] = 357 % 256
    digest[31] = 357 // 256
    scheme, rotation = select_scheme_and_rotation(bytes(digest))
    assert scheme is SCHEMES[0]
    assert rotation == 0


def test_rotation_values():
    seen = set()
    for value in range(256):
        digest = bytearray(64)
        digest[28] = value
        seen.add(select_scheme_and_rotation(bytes(digest))[1])
    assert seen == {0, 3, 6, 9, 12, 15}


def test_compose_rotates_ring_but_not_center():
    palette = [Color(i, i, i) for i in range(64)]
    scheme = SCHEMES[6]
    colors = compose_colors(palette, scheme, 3)
    assert colors[0] == palette[scheme.slots[3]]
    assert colors[15] == palette[scheme.slots[0]]
    assert colors[17] == palette[scheme.slots[2]]
    assert colors[18] == palette[scheme.slots[18]]


def test_palette_special_values():
    # digest[0] == 0 -> b == 0 at index 0; digest[1] == 255 - 58 -> b == 255
    digest = bytearray(64)
    digest[1] = 255 - 58
    palette = build_palette(bytes(digest))
    assert len(palette) == 64
    assert palette[0] == NEAR_BLACK
    assert palette[1] == FOREGROUND


def test_saturation_component_range():
    values = set()
    for value in range(256):
        digest = bytearray(64)
        digest[29] = value
        values.add(saturation_component(bytes(digest)))
    assert min(values) >= 0.30
    # not clamped to 1.0
    assert max(values) > 1.0


def test_derive_color_gray_axis():
    # hue 0 with zero saturation is pure gray at the lightness level
    assert derive_color(64, 0.0) == Color(38, 38, 38, 255)
    assert derive_color(192, 0.0) == Color(191, 191, 191, 255)


def test_derive_color_clamps_channels():
    color = derive_color(64, 1.09)
    assert color.blue == 0
    assert 0 <= color.red <= 255


def test_to_hex():
    assert FOREGROUND.to_hex() == "#eeeeee"
    assert Color(4, 165, 255).to_hex() == "#04a5ff"

"""Color derivation for 19-circle identicons.

The pipeline is: identity bytes -> normalized 64-byte digest -> 64-color
palette -> weighted scheme choice with rotation -> final 19 colors.

Everything here is deterministic. The same identity always yields the same
19 colors, which is what makes the identicon usable for comparing keys by eye.
"""
import math
from dataclasses import dataclass
from functools import lru_cache

from nacl.encoding import RawEncoder
from nacl.hash import blake2b

DIGEST_SIZE = 64
CIRCLE_COUNT = 19


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int
    alpha: int = 255

    def to_tuple(self) -> tuple:
        return (self.red, self.green, self.blue, self.alpha)

    def to_bytes(self) -> bytes:
        return bytes(self.to_tuple())

    def to_hex(self) -> str:
        """Return `#rrggbb` (alpha is not part of the hex form)."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


# Outer disc fill. A palette entry equal to it makes a small circle blend in.
FOREGROUND = Color(238, 238, 238, 255)
# Raster-only, outside the outer disc.
BACKGROUND = Color(255, 255, 255, 0)
NEAR_BLACK = Color(4, 4, 4, 255)


@dataclass(frozen=True)
class SchemeEntry:
    freq: int
    slots: tuple


SCHEMES = (
    SchemeEntry(1, (0, 28, 0, 0, 28, 0, 0, 28, 0, 0, 28, 0, 0, 28, 0, 0, 28, 0, 1)),
    SchemeEntry(20, (0, 1, 3, 2, 4, 3, 0, 1, 3, 2, 4, 3, 0, 1, 3, 2, 4, 3, 5)),
    SchemeEntry(16, (1, 2, 3, 1, 2, 4, 5, 5, 4, 1, 2, 3, 1, 2, 4, 5, 5, 4, 0)),
    SchemeEntry(32, (0, 1, 2, 0, 1, 2, 0, 1, 2, 0, 1, 2, 0, 1, 2, 0, 1, 2, 3)),
    SchemeEntry(32, (0, 1, 2, 3, 4, 5, 0, 1, 2, 3, 4, 5, 0, 1, 2, 3, 4, 5, 6)),
    SchemeEntry(128, (0, 1, 2, 3, 4, 5, 3, 4, 2, 0, 1, 6, 7, 8, 9, 7, 8, 6, 10)),
    SchemeEntry(128, (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 8, 6, 7, 5, 3, 4, 2, 11)),
)

SCHEMES_TOTAL = sum(s.freq for s in SCHEMES)  # 357


def _hash64(data: bytes) -> bytes:
    return blake2b(data, digest_size=DIGEST_SIZE, encoder=RawEncoder)


@lru_cache(maxsize=1)
def _zero_digest() -> bytes:
    return _hash64(bytes(32))


def normalize(identity: bytes) -> bytes:
    """Hash the identity and subtract the digest of 32 zero bytes, bytewise mod 256."""
    zero = _zero_digest()
    raw = _hash64(bytes(identity))
    return bytes((x - z) % 256 for x, z in zip(raw, zero))


def saturation_component(digest: bytes) -> float:
    sat = ((digest[29] * 70 // 256 + 26) % 80) + 30
    # Not clamped: values up to 1.09 reach the HSL conversion as is.
    return sat / 100


def _channel_to_u8(value: float) -> int:
    scaled = min(max(value, 0.0), 1.0) * 255.0
    # round half away from zero; `scaled - whole` is exact
    whole = math.floor(scaled)
    return int(whole) + (1 if scaled - whole >= 0.5 else 0)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple:
    """Convert HSL (hue in degrees, s and l as fractions) to float RGB in [0, 1].

    Chroma based form; the result is not clamped, so an out-of-range
    saturation can push channels below 0 or above 1.
    """
    c = (1.0 - abs(lightness * 2.0 - 1.0)) * saturation
    h = (hue % 360.0) / 60.0
    x = c * (1.0 - abs(math.fmod(h, 2.0) - 1.0))
    m = lightness - c * 0.5

    if 0.0 <= h < 1.0:
        r, g, b = c, x, 0.0
    elif 1.0 <= h < 2.0:
        r, g, b = x, c, 0.0
    elif 2.0 <= h < 3.0:
        r, g, b = 0.0, c, x
    elif 3.0 <= h < 4.0:
        r, g, b = 0.0, x, c
    elif 4.0 <= h < 5.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x
    return (r + m, g + m, b + m)


def derive_color(b: int, saturation: float) -> Color:
    hue = (b % 64) * 360 // 64
    lightness = (53, 15, 35, 75)[b // 64] / 100
    red, green, blue = hsl_to_rgb(float(hue), saturation, lightness)
    return Color(_channel_to_u8(red), _channel_to_u8(green), _channel_to_u8(blue), 255)


def build_palette(digest: bytes) -> list:
    """Expand a normalized digest into 64 candidate colors."""
    saturation = saturation_component(digest)
    palette = []
    for i, x in enumerate(digest):
        b = (x + (i % 28) * 58) % 256
        if b == 0:
            palette.append(NEAR_BLACK)
        elif b == 255:
            palette.append(FOREGROUND)
        else:
            palette.append(derive_color(b, saturation))
    return palette


def choose_scheme(d: int) -> SchemeEntry:
    """Pick the scheme whose cumulative frequency first exceeds `d` (0 <= d < 357)."""
    total = 0
    for scheme in SCHEMES:
        total += scheme.freq
        if d < total:
            return scheme
    raise ValueError(f"scheme selector {d} out of range 0..{SCHEMES_TOTAL - 1}")


def select_scheme_and_rotation(digest: bytes) -> tuple:
    d = (digest[30] + digest[31] * 256) % SCHEMES_TOTAL
    rot = (digest[28] % 6) * 3
    return choose_scheme(d), rot


def compose_colors(palette, scheme: SchemeEntry, rotation: int) -> list:
    """Apply scheme and rotation; positions 0..17 rotate, the center (18) never does."""
    colors = []
    for i in range(CIRCLE_COUNT):
        slot = (i + rotation) % 18 if i < 18 else 18
        colors.append(palette[scheme.slots[slot]])
    return colors


def get_colors(identity: bytes) -> list:
    """Full pipeline: identity bytes to the ordered 19-color set."""
    digest = normalize(identity)
    palette = build_palette(digest)
    scheme, rotation = select_scheme_and_rotation(digest)
    return compose_colors(palette, scheme, rotation)

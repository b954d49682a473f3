"""Circle geometry and rendering for 19-circle identicons.

Two renderers share one layout: `render_raster` fills an RGBA pixel buffer,
`render_vector` returns the list of circles for a vector document.
"""
import math
from dataclasses import dataclass
from typing import List

from .colors import BACKGROUND, CIRCLE_COUNT, FOREGROUND, Color

# All geometry is double precision. Reference renderers working in single
# precision can disagree on pixels lying exactly on a circle boundary.
SMALL_RADIUS_RATIO = 5 / 32
CENTER_TO_CENTER_RATIO = 3 / 8


@dataclass(frozen=True)
class CirclePosition:
    x_center: float
    y_center: float


@dataclass(frozen=True)
class Circle:
    x_center: float
    y_center: float
    radius: float
    color: Color


@dataclass
class RasterImage:
    """Square RGBA8 buffer, row-major, origin at top-left."""
    size: int
    data: bytes

    def pixel(self, column: int, row: int) -> tuple:
        offset = (row * self.size + column) * 4
        return tuple(self.data[offset:offset + 4])


def position_circle_set(center_to_center: float) -> List[CirclePosition]:
    """Centers of the 19 small circles for a given center-to-center distance.

    Order matches the color set: 18 ring positions first, center last.
    """
    a = center_to_center
    b = center_to_center * math.sqrt(3) / 2
    offsets = (
        (0.0, -2 * a),
        (0.0, -a),
        (-b, -3 * a / 2),
        (-2 * b, -a),
        (-b, -a / 2),
        (-2 * b, 0.0),
        (-2 * b, a),
        (-b, a / 2),
        (-b, 3 * a / 2),
        (0.0, 2 * a),
        (0.0, a),
        (b, 3 * a / 2),
        (2 * b, a),
        (b, a / 2),
        (2 * b, 0.0),
        (2 * b, -a),
        (b, -a / 2),
        (b, -3 * a / 2),
        (0.0, 0.0),
    )
    return [CirclePosition(x, y) for x, y in offsets]


def in_circle(x: float, y: float, circle: Circle) -> bool:
    # strict: boundary points are outside
    return (x - circle.x_center) ** 2 + (y - circle.y_center) ** 2 < circle.radius ** 2


def get_colored_circles(center_to_center: float, small_radius: float, colors) -> List[Circle]:
    if len(colors) != CIRCLE_COUNT:
        raise ValueError(f"expected {CIRCLE_COUNT} colors, got {len(colors)}")
    positions = position_circle_set(center_to_center)
    return [
        Circle(p.x_center, p.y_center, small_radius, color)
        for p, color in zip(positions, colors)
    ]


def pixel_color(x: float, y: float, big_circle: Circle, small_circles) -> Color:
    """Color at one point: first containing small circle in order, else the disc."""
    if not in_circle(x, y, big_circle):
        return BACKGROUND
    for circle in small_circles:
        if in_circle(x, y, circle):
            return circle.color
    return big_circle.color


def render_circles(size: int, big_circle: Circle, small_circles) -> RasterImage:
    """Rasterize arbitrary circles onto a `size` x `size` grid centered at the origin."""
    start = -(size // 2)
    end = size // 2 + size % 2
    data = bytearray()
    for y in range(start, end):
        for x in range(start, end):
            data.extend(pixel_color(x, y, big_circle, small_circles).to_bytes())
    return RasterImage(size=size, data=bytes(data))


def render_raster(colors, diameter: int) -> RasterImage:
    """Render the identicon into a `diameter` x `diameter` RGBA buffer.

    Callers must pass `diameter >= 1`; the encoders in `polkicon.export`
    validate this before getting here.
    """
    big_radius = diameter / 2
    big_circle = Circle(0.0, 0.0, big_radius, FOREGROUND)
    small_circles = get_colored_circles(
        big_radius * CENTER_TO_CENTER_RATIO,
        big_radius * SMALL_RADIUS_RATIO,
        colors,
    )
    return render_circles(diameter, big_circle, small_circles)


def render_vector(colors, outer_radius: float) -> List[Circle]:
    """Outer circle followed by the 19 small circles, in drawing order."""
    out = [Circle(0.0, 0.0, outer_radius, FOREGROUND)]
    out.extend(get_colored_circles(
        outer_radius * CENTER_TO_CENTER_RATIO,
        outer_radius * SMALL_RADIUS_RATIO,
        colors,
    ))
    return out

"""PNG and SVG output for identicons.

PNG encoding and downscaling use Pillow, SVG documents are built with
svgwrite. Small PNGs look much better when rendered larger and scaled down,
see `generate_png_scaled_custom`.
"""
import io
import os

import svgwrite
from PIL import Image

from .circles import render_raster, render_vector
from .colors import get_colors
from .config import get_settings

# Static transparent 30x30 png, used when png generation fails
EMPTY_PNG = bytes([
    137, 80, 78, 71, 13, 10, 26, 10, 0, 0, 0, 13, 73, 72, 68, 82, 0, 0, 0, 30, 0, 0, 0, 30, 8, 6,
    0, 0, 0, 59, 48, 174, 162, 0, 0, 0, 46, 73, 68, 65, 84, 120, 156, 237, 205, 65, 1, 0, 32, 12,
    0, 33, 237, 31, 122, 182, 56, 31, 131, 2, 220, 153, 57, 63, 136, 51, 226, 140, 56, 35, 206,
    136, 51, 226, 140, 56, 35, 206, 136, 51, 251, 226, 7, 36, 207, 89, 197, 10, 134, 29, 92, 0, 0,
    0, 0, 73, 69, 78, 68, 174, 66, 96, 130,
])

FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "box": Image.Resampling.BOX,
    "bilinear": Image.Resampling.BILINEAR,
    "triangle": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "catmullrom": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
    "lanczos3": Image.Resampling.LANCZOS,
}


class IdenticonError(Exception):
    """Raised when png data could not be encoded or decoded."""


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"Image size must be at least 1 pixel, got {size}")


def resolve_filter(name: str):
    try:
        return FILTERS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown filter type {name!r}, expected one of: {', '.join(sorted(FILTERS))}")


def make_image(colors, size: int) -> Image.Image:
    _check_size(size)
    raster = render_raster(colors, size)
    return Image.frombytes("RGBA", (raster.size, raster.size), raster.data)


def encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    try:
        image.save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise IdenticonError(f"Error encoding data into png format: {e}") from e
    return buf.getvalue()


def generate_png_with_colors(colors, size: int) -> bytes:
    """PNG bytes for a given 19-color set. Useful for test images with preset colors."""
    return encode_png(make_image(colors, size))


def generate_png(identity: bytes, size: int) -> bytes:
    """PNG bytes of the identicon for `identity`, `size` x `size` pixels.

    Looks acceptable from roughly 100 pixels up; use the scaled variants
    for smaller icons.
    """
    return generate_png_with_colors(get_colors(identity), size)


def generate_png_scaled_custom_with_colors(colors, size: int, scaling_factor: int, filter_type: str) -> bytes:
    """Render at `size * scaling_factor` then downscale to `size` with the named filter.

    scaling_factor=1 gives the same pixels as `generate_png_with_colors`.
    From about 4 upwards the off-centering of small icons is gone.
    """
    _check_size(size)
    if scaling_factor < 1:
        raise ValueError(f"Scaling factor must be at least 1, got {scaling_factor}")
    resample = resolve_filter(filter_type)

    large = make_image(colors, size * scaling_factor)
    if scaling_factor == 1:
        return encode_png(large)
    small = large.resize((size, size), resample)
    return encode_png(small)


def generate_png_scaled_custom(identity: bytes, size: int, scaling_factor: int, filter_type: str) -> bytes:
    return generate_png_scaled_custom_with_colors(get_colors(identity), size, scaling_factor, filter_type)


def generate_png_scaled_default(identity: bytes) -> bytes:
    """Small identicon with the configured defaults (30px, 5x, lanczos).

    Never raises on encoding problems; falls back to `EMPTY_PNG`.
    """
    settings = get_settings()
    try:
        return generate_png_scaled_custom(
            identity, settings.default_size, settings.scaling_factor, settings.filter_type
        )
    except IdenticonError as e:
        print(f"[export] png generation failed, using empty png: {e}")
        return EMPTY_PNG


def make_svg_drawing(colors, unit: int = 10) -> svgwrite.Drawing:
    # unit is arbitrary for a vector image, only the viewBox depends on it
    drawing = svgwrite.Drawing(size=None)
    drawing.viewbox(-unit, -unit, 2 * unit, 2 * unit)
    for circle in render_vector(colors, float(unit)):
        drawing.add(drawing.circle(
            center=(circle.x_center, circle.y_center),
            r=circle.radius,
            fill=circle.color.to_hex(),
            stroke="none",
        ))
    return drawing


def generate_svg_with_colors(colors, unit: int = None) -> str:
    if unit is None:
        unit = get_settings().svg_unit
    return make_svg_drawing(colors, unit).tostring()


def generate_svg(identity: bytes, unit: int = None) -> str:
    return generate_svg_with_colors(get_colors(identity), unit)


def save_png(content: bytes, name: str, output_dir: str = None) -> str:
    output_dir = output_dir or get_settings().output_dir
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"{name}.png")
    with open(path, "wb") as f:
        f.write(content)
    return path


def save_svg(content: str, name: str, output_dir: str = None) -> str:
    output_dir = output_dir or get_settings().output_dir
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"{name}.svg")
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path

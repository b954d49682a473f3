"""19-circle identicons from arbitrary identity bytes (typically public keys)."""
from .circles import Circle, RasterImage, position_circle_set, render_raster, render_vector
from .colors import (
    BACKGROUND,
    FOREGROUND,
    SCHEMES,
    Color,
    SchemeEntry,
    build_palette,
    choose_scheme,
    compose_colors,
    get_colors,
    normalize,
    select_scheme_and_rotation,
)
from .export import (
    EMPTY_PNG,
    IdenticonError,
    generate_png,
    generate_png_scaled_custom,
    generate_png_scaled_default,
    generate_png_with_colors,
    generate_svg,
    generate_svg_with_colors,
)
from .identity import decode_base58, decode_hex, decode_identity

__version__ = "0.1.0"

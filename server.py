from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from polkicon.colors import get_colors
from polkicon.config import get_settings
from polkicon.export import (
    IdenticonError,
    generate_png_scaled_custom_with_colors,
    generate_png_with_colors,
    generate_svg_with_colors,
)
from polkicon.identity import decode_identity

settings = get_settings()

app = FastAPI(title="Polkicon API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.allowed_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ColorOut(BaseModel):
    red: int
    green: int
    blue: int
    alpha: int
    hex: str


class ColorsResponse(BaseModel):
    identity_hex: str
    colors: List[ColorOut]


def _decode(identity: str, encoding: str, verify_checksum: bool) -> bytes:
    try:
        return decode_identity(identity, encoding, verify_checksum=verify_checksum)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _check_size(size: int, scaling_factor: int = 1):
    # max_size bounds the rasterized size, which is size * scaling_factor
    limit = settings.max_size // scaling_factor
    if size < 1 or size > limit:
        raise HTTPException(status_code=400, detail=f"size must be between 1 and {limit}")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/identicon/{identity}.png")
def identicon_png(
    identity: str,
    size: Optional[int] = Query(None),
    scaled: bool = Query(False),
    encoding: str = Query("auto"),
    verify_checksum: bool = Query(False),
):
    raw = _decode(identity, encoding, verify_checksum)
    if size is None:
        size = settings.default_size if scaled else 2 * settings.default_size * settings.scaling_factor
    _check_size(size, settings.scaling_factor if scaled else 1)
    colors = get_colors(raw)
    try:
        if scaled:
            content = generate_png_scaled_custom_with_colors(colors, size, settings.scaling_factor, settings.filter_type)
        else:
            content = generate_png_with_colors(colors, size)
    except IdenticonError as e:
        print(f"[server] png generation failed for {identity}: {e}")
        raise HTTPException(status_code=500, detail="png generation failed")
    return Response(content=content, media_type="image/png")


@app.get("/identicon/{identity}.svg")
def identicon_svg(identity: str, encoding: str = Query("auto"), verify_checksum: bool = Query(False)):
    raw = _decode(identity, encoding, verify_checksum)
    return Response(content=generate_svg_with_colors(get_colors(raw)), media_type="image/svg+xml")


@app.get("/identicon/{identity}/colors", response_model=ColorsResponse)
def identicon_colors(identity: str, encoding: str = Query("auto"), verify_checksum: bool = Query(False)):
    raw = _decode(identity, encoding, verify_checksum)
    colors = [
        ColorOut(red=c.red, green=c.green, blue=c.blue, alpha=c.alpha, hex=c.to_hex())
        for c in get_colors(raw)
    ]
    return ColorsResponse(identity_hex=raw.hex(), colors=colors)


if settings.verbose:
    print(f"✅ Polkicon API ready (max size {settings.max_size}px)")

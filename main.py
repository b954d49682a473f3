"""Command line entry point: write identicon png/svg files for a public key.

Examples:
    python main.py --hex d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d --size 500
    python main.py --base58 5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY --format svg
    python main.py --identity 0xd435...a27d --scaled --size 32 --filter catmullrom
"""
import argparse
import sys

from polkicon.config import get_settings
from polkicon.export import (
    generate_png,
    generate_png_scaled_custom,
    generate_svg,
    save_png,
    save_svg,
    IdenticonError,
)
from polkicon.identity import decode_identity


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Generate 19-circle identicons from public keys.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--hex", help="public key as hexadecimal (optional 0x prefix)")
    source.add_argument("--base58", help="base58 address with version byte and 2-byte checksum")
    source.add_argument("--identity", help="public key, encoding guessed")
    parser.add_argument("--size", type=int, default=None, help="image size in pixels")
    parser.add_argument("--format", choices=["png", "svg", "both"], default="png")
    parser.add_argument("--scaled", action="store_true", help="render larger and downscale (small icons)")
    parser.add_argument("--scaling-factor", type=int, default=settings.scaling_factor)
    parser.add_argument("--filter", default=settings.filter_type, help="resampling filter for --scaled")
    parser.add_argument("--output", default="identicon", help="output file name without extension")
    parser.add_argument("--output-dir", default=None)
    parser.add_argument("--verify-checksum", action="store_true", help="check the base58 address checksum")
    return parser


def _identity_from_args(args) -> bytes:
    if args.hex is not None:
        return decode_identity(args.hex, "hex")
    if args.base58 is not None:
        return decode_identity(args.base58, "base58", verify_checksum=args.verify_checksum)
    return decode_identity(args.identity, "auto", verify_checksum=args.verify_checksum)


def run(args) -> list:
    """Generate the requested files and return their paths."""
    settings = get_settings()
    identity = _identity_from_args(args)
    written = []

    if args.format in ("png", "both"):
        if args.scaled:
            size = args.size if args.size is not None else settings.default_size
            content = generate_png_scaled_custom(identity, size, args.scaling_factor, args.filter)
        else:
            size = args.size if args.size is not None else 2 * settings.default_size * settings.scaling_factor
            content = generate_png(identity, size)
        written.append(save_png(content, args.output, args.output_dir))

    if args.format in ("svg", "both"):
        written.append(save_svg(generate_svg(identity), args.output, args.output_dir))

    if settings.verbose:
        for path in written:
            print(f"[polkicon] wrote {path}")
    return written


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        written = run(args)
    except (ValueError, IdenticonError, OSError) as e:
        print(f"Error. {e}", file=sys.stderr)
        return 1
    print(f"Done! {', '.join(written)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

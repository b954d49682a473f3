"""Decode textual public keys into raw identity bytes.

Two forms are supported:
- hexadecimal, with or without a `0x` prefix
- base58 addresses that carry one leading version byte and two trailing
  checksum bytes (e.g. "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY")
"""
import string

import base58
from nacl.encoding import RawEncoder
from nacl.hash import blake2b

CHECKSUM_PREFIX = b"SS58PRE"
CHECKSUM_SIZE = 2
VERSION_SIZE = 1


def decode_hex(text: str) -> bytes:
    cleaned = text.strip()
    if cleaned[:2].lower() == "0x":
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError:
        raise ValueError(f"Invalid hex identity: {text!r}")


def address_checksum(data: bytes) -> bytes:
    """First two bytes of blake2b-512 over the checksum prefix and version+payload."""
    return blake2b(CHECKSUM_PREFIX + data, digest_size=64, encoder=RawEncoder)[:CHECKSUM_SIZE]


def decode_base58(text: str, verify_checksum: bool = False) -> bytes:
    """Return the payload of a base58 address (version byte and checksum stripped).

    The checksum is not checked unless `verify_checksum` is set.
    """
    try:
        raw = base58.b58decode(text.strip())
    except ValueError:
        raise ValueError(f"Invalid base58 identity: {text!r}")
    if len(raw) < VERSION_SIZE + CHECKSUM_SIZE:
        raise ValueError(f"Base58 identity too short: {text!r}")

    body, checksum = raw[:-CHECKSUM_SIZE], raw[-CHECKSUM_SIZE:]
    if verify_checksum and address_checksum(body) != checksum:
        raise ValueError(f"Base58 identity checksum mismatch: {text!r}")
    return body[VERSION_SIZE:]


def _looks_like_hex(text: str) -> bool:
    cleaned = text.strip()
    if cleaned[:2].lower() == "0x":
        return True
    return len(cleaned) % 2 == 0 and all(c in string.hexdigits for c in cleaned)


def decode_identity(text: str, encoding: str = "auto", verify_checksum: bool = False) -> bytes:
    """Decode `text` as "hex", "base58", or guess ("auto")."""
    if encoding == "auto":
        encoding = "hex" if _looks_like_hex(text) else "base58"
    if encoding == "hex":
        return decode_hex(text)
    if encoding == "base58":
        return decode_base58(text, verify_checksum=verify_checksum)
    raise ValueError(f"Unknown identity encoding: {encoding!r}")

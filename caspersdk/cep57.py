"""Mixed-case checksummed hex encoding (CEP-57)."""

from __future__ import annotations

import hashlib
from collections.abc import Iterator

from caspersdk import crypto_util

SMALL_BYTES_COUNT = 75
_HEX_CHARS = "0123456789abcdef"


class ChecksumError(ValueError):
    """Raised when checksummed hex does not match its own checksum."""


def _nibbles(data: bytes) -> Iterator[int]:
    for byte in data:
        yield byte >> 4
        yield byte & 0x0F


def _bits_cycle(data: bytes) -> Iterator[bool]:
    for byte in data:
        for shift in range(8):
            yield bool((byte >> shift) & 1)


def has_checksum(hex_str: str) -> bool:
    """Return whether ``hex_str`` mixes lower- and upper-case hex letters."""
    mix = 0
    for c in hex_str:
        if "0" <= c <= "9":
            continue
        if "a" <= c <= "f":
            mix |= 0x01
        elif "A" <= c <= "F":
            mix |= 0x02
        else:
            raise ValueError(f"invalid hex character: {c!r}")
    return mix > 2


def encode(data: bytes) -> str:
    """Encode bytes as checksummed hex; long inputs are plain upper-case hex."""
    data = bytes(data)
    if len(data) > SMALL_BYTES_COUNT:
        return crypto_util.hex_encode(data)

    hash_bits = _bits_cycle(hashlib.blake2b(data, digest_size=32).digest())
    chars = []
    for nibble in _nibbles(data):
        c = _HEX_CHARS[nibble]
        if c.isalpha() and next(hash_bits):
            c = c.upper()
        chars.append(c)
    return "".join(chars)


def decode(encoded: str) -> bytes:
    """Decode hex, verifying the checksum when the text carries one."""
    decoded = crypto_util.hex_decode(encoded)
    if len(decoded) > SMALL_BYTES_COUNT or not has_checksum(encoded):
        return decoded
    computed = encode(decoded)
    if computed != encoded:
        raise ChecksumError(
            f"Invalid Checksum computed:{computed}\n encoded: {encoded}"
        )
    return decoded
"""Hex helpers and the length-prefixed little-endian encoding of big unsigned integers."""

from __future__ import annotations

import string

_HEX_DIGITS = frozenset(string.hexdigits)
_SUPPORTED_BITS = (128, 256, 512)


def iequals(a: str, b: str) -> bool:
    """Compare two strings for equality, ignoring ASCII case."""
    return len(a) == len(b) and all(
        x.lower() == y.lower() for x, y in zip(a, b)
    )


def hex_decode(hex_str: str) -> bytes:
    """Decode hex text leniently: non-hex characters and a trailing nibble are ignored."""
    digits = "".join(c for c in hex_str if c in _HEX_DIGITS)
    if len(digits) % 2:
        digits = digits[:-1]
    return bytes.fromhex(digits)


def hex_encode(data: bytes) -> str:
    """Encode bytes as lower-case hex."""
    return bytes(data).hex()


def hex_to_integer(hex_str: str, size: int) -> int:
    """Read an unsigned little-endian integer of ``size`` bytes from hex text."""
    raw = hex_decode(hex_str)[:size].ljust(size, b"\x00")
    return int.from_bytes(raw, "little")


def integer_to_hex(value: int, size: int) -> str:
    """Write an integer as ``size`` little-endian two's complement bytes in hex."""
    wrapped = value % (1 << (8 * size))
    return wrapped.to_bytes(size, "little").hex()


def reverse_hex(hex_str: str) -> str:
    """Reverse the byte order of a hex string."""
    pairs = [hex_str[i:i + 2] for i in range(0, len(hex_str), 2)]
    return "".join(reversed(pairs))


def _check_bits(bits: int) -> int:
    if bits not in _SUPPORTED_BITS:
        raise ValueError(f"unsupported integer width: {bits}")
    return (1 << bits) - 1


def uint_from_hex(hex_str: str, bits: int) -> int:
    """Decode a length-prefixed little-endian unsigned integer of the given width."""
    mask = _check_bits(bits)
    length = hex_to_integer(hex_str[:2], 4)
    if length < 1:
        return 0
    body = reverse_hex(hex_str[2:2 + length * 2])
    if not body:
        raise ValueError("missing integer bytes after length prefix")
    return int(body, 16) & mask


def uint_to_hex(value: int) -> str:
    """Encode an unsigned integer as a length byte followed by its little-endian bytes."""
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "00"
    digits = format(value, "x")
    if len(digits) % 2:
        digits = "0" + digits
    return integer_to_hex(len(digits) // 2, 1) + reverse_hex(digits)


def uint_to_dec(value: int) -> str:
    """Render an unsigned integer in decimal."""
    return str(value)


def uint_from_dec(dec_str: str, bits: int) -> int:
    """Parse a decimal string into an unsigned integer of the given width."""
    mask = _check_bits(bits)
    text = dec_str.strip()
    if not text.isdigit():
        raise ValueError(f"invalid decimal integer: {dec_str!r}")
    return int(text) & mask
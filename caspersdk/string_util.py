"""String helpers: prefixes, splitting and the length-prefixed hex form of strings."""

from __future__ import annotations

import re

_HEX_PREFIX = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)")
_UINT32_MAX = 0xFFFFFFFF


def join(*args: str) -> str:
    """Concatenate the given strings."""
    return "".join(args)


def starts_with(text: str, prefix: str) -> bool:
    """Return whether ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def split_string(text: str, delim: str) -> list[str]:
    """Split on the first character of ``delim``; a trailing empty field is dropped."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    parts = text.split(delim[0])
    if parts[-1] == "":
        parts.pop()
    return parts


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``."""
    return "".join(c.lower() if "A" <= c <= "Z" else c for c in text)


def hex_str_to_uint32(text: str) -> int:
    """Parse the leading hex digits of ``text`` as an unsigned 32-bit number."""
    match = _HEX_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a hex number: {text!r}")
    value = int(match.group(1), 16)
    if value > _UINT32_MAX:
        raise ValueError(f"hex number out of 32-bit range: {text!r}")
    return value


def hex_to_utf8(text: str) -> str:
    """Return the character whose code point is given in hex."""
    return chr(hex_str_to_uint32(text))


def hex_to_string(bytes_str: str) -> str:
    """Decode a string whose first byte holds its length and whose tail holds its bytes."""
    size = 2 * hex_str_to_uint32(bytes_str[:2])
    if size > len(bytes_str):
        raise ValueError("encoded string is shorter than its length prefix")
    body = bytes_str[len(bytes_str) - size:]
    return "".join(hex_to_utf8(body[i:i + 2]) for i in range(0, size, 2))


def string_bytes_without_length(text: str) -> str:
    """Hex-encode each character of ``text`` with at least two digits."""
    return "".join(format(ord(c), "02x") for c in text)


def _swap_and_reverse(text: str) -> str:
    reversed_text = text[::-1]
    half = len(reversed_text) // 2
    swapped = "".join(
        reversed_text[i + 1] + reversed_text[i] for i in range(0, half, 2)
    )
    return swapped + reversed_text[half:]


def string_to_hex(text: str) -> str:
    """Encode ``text`` as a 4-byte little-endian length followed by its character bytes."""
    length = _swap_and_reverse(format(len(text), "08x"))
    return length + string_bytes_without_length(text)
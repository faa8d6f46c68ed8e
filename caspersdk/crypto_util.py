"""Hex conversion and timestamp formatting used by the SDK."""

from __future__ import annotations

from datetime import datetime

from caspersdk import base


def hex_decode(encoded: str) -> bytes:
    """Decode hex text leniently, ignoring non-hex characters."""
    return base.hex_decode(encoded)


def hex_encode(data: bytes) -> str:
    """Encode bytes as upper-case hex."""
    return bytes(data).hex().upper()


def time_to_rfc3339(timestamp: float) -> str:
    """Format a Unix timestamp in local time as ``YYYY-MM-DDTHH:MM:SS+hhmm``."""
    local = datetime.fromtimestamp(timestamp).astimezone()
    return local.strftime("%Y-%m-%dT%H:%M:%S%z")
"""Unforgeable references into global state."""

from __future__ import annotations

import functools

from caspersdk import cep57, crypto_util, string_util
from caspersdk.access_rights import AccessRights

_PREFIX = "uref-"
_RAW_LENGTH = 32
# Key tag that marks a URef among global state keys.
UREF_KEY_TAG = 0x02


def _rights_suffix(rights: int) -> str:
    return f"{int(rights):03d}"


@functools.total_ordering
class URef:
    """A 32-byte address with access rights, written ``uref-<hex>-<rights>``."""

    __slots__ = ("_key", "raw_bytes", "access_rights")

    def __init__(self, raw_bytes: bytes, access_rights: AccessRights, key: str = "") -> None:
        raw_bytes = bytes(raw_bytes)
        if len(raw_bytes) != _RAW_LENGTH:
            raise ValueError("A URef object must contain a 32 byte value.")
        self.raw_bytes = raw_bytes
        self.access_rights = AccessRights(access_rights)
        self._key = key or (
            _PREFIX + crypto_util.hex_encode(raw_bytes) + "-" + _rights_suffix(access_rights)
        )

    @classmethod
    def from_string(cls, value: str) -> URef:
        """Parse ``uref-<64 hex digits>-<3 digit rights>``."""
        if not string_util.starts_with(value, _PREFIX):
            raise ValueError("Invalid URef format")
        parts = string_util.split_string(value[len(_PREFIX):], "-")
        if len(parts) != 2:
            raise ValueError("A URef object must end with an access rights suffix.")
        hex_part, rights_part = parts
        if len(hex_part) != 64:
            raise ValueError("A URef object must contain a 32 byte value.")
        if len(rights_part) != 3:
            raise ValueError("A URef object must contain a 3 digit access rights suffix.")
        try:
            raw = cep57.decode(hex_part)
        except ValueError as exc:
            raise ValueError("URef Invalid Checksum.") from exc
        if not rights_part.isdigit():
            raise ValueError("A URef object must contain a 3 digit access rights suffix.")
        return cls(raw, AccessRights(int(rights_part)), value)

    @classmethod
    def from_bytes(cls, data: bytes) -> URef:
        """Create a URef from 33 bytes whose last byte holds the access rights."""
        data = bytes(data)
        if len(data) != _RAW_LENGTH + 1:
            raise ValueError("A URef byte form must be 33 bytes long.")
        text = (
            _PREFIX
            + crypto_util.hex_encode(data[:-1])
            + "-"
            + _rights_suffix(data[-1])
        )
        return cls.from_string(text)

    @classmethod
    def from_raw_bytes(cls, raw_bytes: bytes, access_rights: AccessRights) -> URef:
        """Create a URef from its 32 address bytes and access rights."""
        text = (
            _PREFIX
            + crypto_util.hex_encode(bytes(raw_bytes))
            + "-"
            + _rights_suffix(AccessRights(access_rights))
        )
        return cls.from_string(text)

    @property
    def key(self) -> str:
        """The text this URef was created from."""
        return self._key

    def to_bytes(self) -> bytes:
        """Return the key tag, the 32 address bytes and the access rights byte."""
        return bytes([UREF_KEY_TAG]) + self.raw_bytes + bytes([int(self.access_rights)])

    def to_string(self) -> str:
        """Return the checksummed ``uref-`` text form."""
        return _PREFIX + cep57.encode(self.raw_bytes) + "-" + _rights_suffix(self.access_rights)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"URef({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URef):
            return NotImplemented
        return self.to_string() == other.to_string()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, URef):
            return NotImplemented
        return self.to_string() < other.to_string()

    def __hash__(self) -> int:
        return hash(self.to_string())
"""Access rights attached to an unforgeable reference."""

from __future__ import annotations

import enum


class AccessRights(enum.IntEnum):
    """Permissions on the value under a URef, as a 3-bit mask."""

    NONE = 0b000
    READ = 0b001
    WRITE = 0b010
    ADD = 0b100
    READ_WRITE = 0b011
    READ_ADD = 0b101
    ADD_WRITE = 0b110
    READ_ADD_WRITE = 0b111


def access_rights_to_json(rights: AccessRights) -> dict[str, str]:
    """Return the JSON object form of ``rights``."""
    return {"access_rights": AccessRights(rights).name}
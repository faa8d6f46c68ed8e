"""Cryptographic signatures tagged with their key algorithm."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from caspersdk import cep57


class KeyAlgo(enum.IntEnum):
    """Key algorithms, valued by their identifier byte."""

    ED25519 = 0x01
    SECP256K1 = 0x02


@dataclass(frozen=True)
class Signature:
    """Signature bytes without the algorithm identifier, and that algorithm."""

    raw_bytes: bytes
    key_algorithm: KeyAlgo

    @classmethod
    def from_hex_string(cls, signature: str) -> Signature:
        """Parse hex text whose first byte is the key algorithm identifier."""
        raw = cep57.decode(signature[2:])
        tag = signature[:2]
        if tag == "01":
            return cls.from_raw_bytes(raw, KeyAlgo.ED25519)
        if tag == "02":
            return cls.from_raw_bytes(raw, KeyAlgo.SECP256K1)
        raise ValueError("Invalid key algorithm identifier.")

    @classmethod
    def from_bytes(cls, data: bytes) -> Signature:
        """Parse bytes whose first byte is the key algorithm identifier."""
        data = bytes(data)
        if not data:
            raise ValueError("Signature bytes cannot be empty.")
        try:
            algo = KeyAlgo(data[0])
        except ValueError:
            raise ValueError("Wrong signature algorithm identifier") from None
        return cls(data[1:], algo)

    @classmethod
    def from_raw_bytes(cls, raw_bytes: bytes, key_algorithm: KeyAlgo) -> Signature:
        """Build a signature from its bytes and key algorithm."""
        return cls(bytes(raw_bytes), KeyAlgo(key_algorithm))

    def to_bytes(self) -> bytes:
        """Return the signature bytes prefixed by the algorithm identifier."""
        return bytes([int(self.key_algorithm)]) + self.raw_bytes

    def to_hex_string(self) -> str:
        """Return the algorithm identifier and checksummed hex of the signature."""
        tag = "01" if self.key_algorithm is KeyAlgo.ED25519 else "02"
        return tag + cep57.encode(self.raw_bytes)

    def to_json(self) -> str:
        """Return the JSON form, the hex string."""
        return self.to_hex_string()

    @classmethod
    def from_json(cls, value: str) -> Signature:
        """Parse the JSON form, a hex string."""
        if not isinstance(value, str):
            raise TypeError("signature JSON value must be a string")
        return cls.from_hex_string(value)

    def __str__(self) -> str:
        return self.to_hex_string()
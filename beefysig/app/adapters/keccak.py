"""Keccak-256 digest adapter."""

from __future__ import annotations

from beefysig.app.ports import DigestPort
from beefysig.utils.hashing import KECCAK256_DIGEST_SIZE, keccak256


class Keccak256Digest(DigestPort):
    """Ethereum-flavoured Keccak-256 (not SHA3-256)."""

    digest_size = KECCAK256_DIGEST_SIZE

    def digest(self, message: bytes) -> bytes:
        return keccak256(message)

    def __repr__(self) -> str:
        return "Keccak256Digest()"

"""Hashing utilities for commitment digests."""

from Crypto.Hash import keccak

KECCAK256_DIGEST_SIZE = 32


def keccak256(content: bytes) -> bytes:
    """Compute the Keccak-256 digest of content.

    This is the original Keccak padding used by Ethereum, not NIST SHA3-256.

    Args:
        content: Bytes to hash (any length, including empty)

    Returns:
        32-byte digest
    """
    return keccak.new(digest_bits=256, data=bytes(content)).digest()


def keccak256_hex(content: bytes) -> str:
    """Compute Keccak-256 of content as a lowercase hexadecimal string."""
    return keccak256(content).hex()

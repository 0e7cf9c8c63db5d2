"""Utility modules for common operations."""

from beefysig.utils.hashing import KECCAK256_DIGEST_SIZE, keccak256, keccak256_hex
from beefysig.utils.hexutil import decode_hex, encode_hex, strip_0x

__all__ = [
    "KECCAK256_DIGEST_SIZE",
    "decode_hex",
    "encode_hex",
    "keccak256",
    "keccak256_hex",
    "strip_0x",
]

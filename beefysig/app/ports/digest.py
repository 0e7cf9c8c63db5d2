"""Digest port interface for message hashing."""

from typing import Protocol


class DigestPort(Protocol):
    """Port interface for fixed-width message digests.

    Implementations must be pure: same input, same output, no state.

    Side effects: None (pure computation).
    """

    digest_size: int

    def digest(self, message: bytes) -> bytes:
        """Hash a message.

        Args:
            message: Bytes of any length, including empty

        Returns:
            Digest of exactly ``digest_size`` bytes
        """
        ...

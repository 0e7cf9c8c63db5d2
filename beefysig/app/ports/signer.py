"""Signer port interfaces for commitment signing and verification."""

from __future__ import annotations

from typing import Protocol, TypeVar

S = TypeVar("S", bound="SignatureCodec")
S_co = TypeVar("S_co", bound="SignatureCodec", covariant=True)
S_contra = TypeVar("S_contra", bound="SignatureCodec", contravariant=True)
P_contra = TypeVar("P_contra", contravariant=True)


class SignatureCodec(Protocol):
    """Contract every signature type handed to protocol logic satisfies.

    Besides the canonical encoding below, implementations are immutable values
    with equality, hashing and a diagnostic ``repr``, so code that does not
    know the concrete scheme can compare, log and transmit them.
    """

    def to_bytes(self) -> bytes:
        """Return the canonical byte encoding."""
        ...

    @classmethod
    def from_bytes(cls: type[S], data: bytes) -> S:
        """Decode the canonical byte encoding."""
        ...


class SignerPort(Protocol[S_co]):
    """Port interface for signing opaque commitments.

    One concrete realization exists per signature type. Whether the message is
    hashed first, and with which function, is a property of the realization.

    Side effects: None (pure computation). Implementations never mutate the
    identity and are safe to call concurrently.
    """

    def sign(self, message: bytes) -> S_co:
        """Sign a message.

        Args:
            message: Commitment bytes, any length, including empty

        Returns:
            Signature value of the scheme's signature type

        Invalid key material is a fatal precondition failure, not a
        recoverable result.
        """
        ...


class VerifierPort(Protocol[S_contra, P_contra]):
    """Port interface for checking signatures produced by a :class:`SignerPort`.

    Side effects: None (pure computation).
    """

    def verify(self, message: bytes, signature: S_contra, public: P_contra) -> bool:
        """Verify a signature.

        Args:
            message: Original commitment bytes
            signature: Signature to check
            public: Expected signer public key

        Returns:
            True if the signature is valid for ``public``; malformed input
            yields False rather than an exception
        """
        ...

"""ECDSA-over-Keccak-256 signing adapters.

Signatures produced here match the convention of ``ecrecover``-style external
verifiers: the message is hashed with Keccak-256 and the 32-byte digest is
signed directly with secp256k1, without any further hashing or prefixing.
"""

from __future__ import annotations

import logging

from beefysig.app.adapters.keccak import Keccak256Digest
from beefysig.app.ports import DigestPort, SignerPort, VerifierPort
from beefysig.crypto.ecdsa import DIGEST_SIZE, EcdsaPair, EcdsaPublic, EcdsaSignature

logger = logging.getLogger(__name__)


class SigningPreconditionError(RuntimeError):
    """Raised when the configured digest function breaks the signing contract."""


def _check_digest_size(digest: DigestPort) -> None:
    size = getattr(digest, "digest_size", None)
    if size != DIGEST_SIZE:
        raise ValueError(
            f"digest function must produce {DIGEST_SIZE}-byte output, "
            f"{digest!r} declares {size}"
        )


class EcdsaKeccakSigner(SignerPort[EcdsaSignature]):
    """Hash-then-sign commitments with Keccak-256 and secp256k1.

    Args:
        pair: Signing identity; only read, never mutated
        digest: Digest function, Keccak-256 unless a test injects a stub
        log_digests: Emit the digest prefix at DEBUG level for each signature
    """

    def __init__(
        self,
        pair: EcdsaPair,
        digest: DigestPort | None = None,
        *,
        log_digests: bool = False,
    ) -> None:
        self._pair = pair
        self._digest = digest if digest is not None else Keccak256Digest()
        self._log_digests = log_digests
        _check_digest_size(self._digest)

    def public(self) -> EcdsaPublic:
        return self._pair.public()

    def sign(self, message: bytes) -> EcdsaSignature:
        digest = self._digest.digest(bytes(message))
        if len(digest) != DIGEST_SIZE:
            logger.error(
                "Digest function %r returned %d bytes, expected %d",
                self._digest,
                len(digest),
                DIGEST_SIZE,
            )
            raise SigningPreconditionError(
                f"digest function returned {len(digest)} bytes, expected {DIGEST_SIZE}"
            )

        # Pre-hashed entry point: the digest is the exact value signed.
        signature = self._pair.sign_prehashed(digest)

        if self._log_digests:
            logger.debug(
                "Signed commitment (%d bytes) digest=%s... for %s",
                len(message),
                digest.hex()[:16],
                self._pair.public().hex(),
            )
        return signature

    def __repr__(self) -> str:
        return f"EcdsaKeccakSigner(public={self._pair.public().hex()}, digest={self._digest!r})"


class EcdsaKeccakVerifier(VerifierPort[EcdsaSignature, EcdsaPublic]):
    """Check Keccak-256/secp256k1 commitment signatures by public-key recovery."""

    def __init__(self, digest: DigestPort | None = None) -> None:
        self._digest = digest if digest is not None else Keccak256Digest()
        _check_digest_size(self._digest)

    def recover(self, message: bytes, signature: EcdsaSignature) -> EcdsaPublic:
        """Recover the signer's public key from a message and signature.

        Raises:
            ValueError: If no public key can be recovered
        """
        return signature.recover_public(self._digest.digest(bytes(message)))

    def verify(self, message: bytes, signature: EcdsaSignature, public: EcdsaPublic) -> bool:
        try:
            recovered = self.recover(message, signature)
        except ValueError as exc:
            logger.debug("Signature recovery failed: %s", exc)
            return False
        return recovered == public

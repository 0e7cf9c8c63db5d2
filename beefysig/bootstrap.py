"""Bootstrap wiring identities, digest functions, and signing adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from beefysig.app.adapters import EcdsaKeccakSigner, EcdsaKeccakVerifier, Keccak256Digest
from beefysig.app.ports import DigestPort, SignerPort, VerifierPort
from beefysig.config import Settings, get_settings
from beefysig.crypto.ecdsa import EcdsaPair

logger = logging.getLogger("beefysig")


class UnsupportedSchemeError(ValueError):
    """Raised when settings name a signing scheme with no registered wiring."""

    pass


@dataclass(slots=True)
class SignerContainer:
    """Aggregates the wired digest, signer, and verifier for one identity."""

    settings: Settings
    digest: DigestPort
    signer: SignerPort
    verifier: VerifierPort


def _wire_ecdsa_keccak256(pair: EcdsaPair, settings: Settings) -> SignerContainer:
    digest = Keccak256Digest()
    return SignerContainer(
        settings=settings,
        digest=digest,
        signer=EcdsaKeccakSigner(pair, digest, log_digests=settings.log_digests),
        verifier=EcdsaKeccakVerifier(digest),
    )


_SCHEMES: dict[str, Callable[[EcdsaPair, Settings], SignerContainer]] = {
    "ecdsa-keccak256": _wire_ecdsa_keccak256,
}


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured level to the package logger."""
    active = settings or get_settings()
    logger.setLevel(active.get_log_level())


def bootstrap_signer(pair: EcdsaPair, settings: Settings | None = None) -> SignerContainer:
    """Build the signing container for ``pair`` using the configured scheme.

    Args:
        pair: Signing identity owned by the caller
        settings: Optional settings override (defaults to global settings)

    Returns:
        SignerContainer with digest, signer, and verifier wired together

    Raises:
        UnsupportedSchemeError: If ``settings.scheme`` has no wiring
    """
    active = settings or get_settings()
    try:
        wire = _SCHEMES[active.scheme]
    except KeyError as exc:
        raise UnsupportedSchemeError(
            f"Unsupported signing scheme '{active.scheme}'. "
            f"Available: {', '.join(sorted(_SCHEMES))}"
        ) from exc

    container = wire(pair, active)
    logger.debug("Wired %s signer for %s", active.scheme, pair.public().hex())
    return container

"""beefysig - Commitment signing for BEEFY-style finality gadgets.

Signs opaque finality commitments so that both native peers and external
``ecrecover``-style verifiers accept the result.
"""

__version__ = "0.1.0"
__author__ = "beefysig Contributors"

from beefysig.app.adapters import EcdsaKeccakSigner, EcdsaKeccakVerifier, Keccak256Digest
from beefysig.app.ports import DigestPort, SignerPort, VerifierPort
from beefysig.config import Settings, get_settings
from beefysig.crypto import EcdsaPair, EcdsaPublic, EcdsaSignature

__all__ = [
    "DigestPort",
    "EcdsaKeccakSigner",
    "EcdsaKeccakVerifier",
    "EcdsaPair",
    "EcdsaPublic",
    "EcdsaSignature",
    "Keccak256Digest",
    "Settings",
    "SignerPort",
    "VerifierPort",
    "get_settings",
    "__version__",
]

"""Port interfaces for the beefysig application layer.

These protocol interfaces define contracts for adapters.
Protocol logic depends on these ports, never on concrete implementations.
"""

__all__ = [
    "DigestPort",
    "SignatureCodec",
    "SignerPort",
    "VerifierPort",
]

from beefysig.app.ports.digest import DigestPort
from beefysig.app.ports.signer import SignatureCodec, SignerPort, VerifierPort

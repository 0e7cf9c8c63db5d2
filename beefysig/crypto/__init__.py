"""Curve primitives backing the concrete signing schemes."""

from beefysig.crypto.ecdsa import (
    EcdsaPair,
    EcdsaPublic,
    EcdsaSignature,
    KeyMaterialError,
    SignatureDecodeError,
)

__all__ = [
    "EcdsaPair",
    "EcdsaPublic",
    "EcdsaSignature",
    "KeyMaterialError",
    "SignatureDecodeError",
]

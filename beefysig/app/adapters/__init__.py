"""Concrete adapters wiring application ports to built-in implementations."""

from __future__ import annotations

from .ecdsa_keccak import EcdsaKeccakSigner, EcdsaKeccakVerifier, SigningPreconditionError
from .keccak import Keccak256Digest

__all__ = [
    "EcdsaKeccakSigner",
    "EcdsaKeccakVerifier",
    "Keccak256Digest",
    "SigningPreconditionError",
]

"""secp256k1 ECDSA identities, public keys and recoverable signatures.

Signatures use the 65-byte ``r || s || v`` layout with ``v`` the recovery id
in ``{0, 1}``. Public keys are carried in 33-byte compressed form. Signing is
only exposed over 32-byte digests; hashing is the caller's job.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from eth_keys import keys
from eth_keys.exceptions import BadSignature, ValidationError

from beefysig.utils.hexutil import decode_hex, encode_hex

SECRET_SIZE = 32
DIGEST_SIZE = 32
SIGNATURE_SIZE = 65
COMPRESSED_PUBLIC_SIZE = 33
UNCOMPRESSED_PUBLIC_SIZE = 64

SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# Entropy-to-seed derivation shared with substrate-bip39.
_PHRASE_SALT_PREFIX = b"mnemonic"
_PHRASE_ITERATIONS = 2048
_DEFAULT_ENTROPY_SIZE = 16
_ETH_V_OFFSET = 27


class KeyMaterialError(RuntimeError):
    """Raised when secret key material is malformed or rejected by the curve.

    Key validity is a precondition of signing, so this is never retried.
    """


class SignatureDecodeError(ValueError):
    """Raised when bytes are not a canonical recoverable signature."""


def _require_digest(digest: bytes) -> bytes:
    digest = bytes(digest)
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f"digest must be {DIGEST_SIZE} bytes, got {len(digest)}")
    return digest


@dataclass(frozen=True, slots=True)
class EcdsaPublic:
    """Compressed secp256k1 public key."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != COMPRESSED_PUBLIC_SIZE:
            raise ValueError(
                f"compressed public key must be {COMPRESSED_PUBLIC_SIZE} bytes, "
                f"got {len(self.data)}"
            )

    @classmethod
    def from_bytes(cls, data: bytes) -> EcdsaPublic:
        """Build from 33-byte compressed or 64-byte uncompressed ``x || y`` bytes."""
        data = bytes(data)
        try:
            if len(data) == UNCOMPRESSED_PUBLIC_SIZE:
                return cls(keys.PublicKey(data).to_compressed_bytes())
            if len(data) == COMPRESSED_PUBLIC_SIZE:
                return cls(keys.PublicKey.from_compressed_bytes(data).to_compressed_bytes())
        except (ValidationError, BadSignature) as exc:
            raise ValueError(f"invalid secp256k1 public key: {exc}") from exc
        raise ValueError(
            f"public key must be {COMPRESSED_PUBLIC_SIZE} or {UNCOMPRESSED_PUBLIC_SIZE} "
            f"bytes, got {len(data)}"
        )

    @classmethod
    def from_hex(cls, text: str) -> EcdsaPublic:
        return cls.from_bytes(decode_hex(text))

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data

    def hex(self) -> str:
        return encode_hex(self.data)

    def to_uncompressed_bytes(self) -> bytes:
        """Return the 64-byte ``x || y`` form."""
        return self._key().to_bytes()

    def to_eth_address(self) -> str:
        """Return the checksummed address an ``ecrecover`` verifier compares against."""
        return self._key().to_checksum_address()

    def _key(self) -> keys.PublicKey:
        return keys.PublicKey.from_compressed_bytes(self.data)

    def __repr__(self) -> str:
        return f"EcdsaPublic({self.hex()})"


@dataclass(frozen=True, slots=True)
class EcdsaSignature:
    """Recoverable secp256k1 signature in canonical ``r || s || v`` encoding."""

    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != SIGNATURE_SIZE:
            raise SignatureDecodeError(
                f"signature must be {SIGNATURE_SIZE} bytes, got {len(self.data)}"
            )
        if self.data[64] not in (0, 1):
            raise SignatureDecodeError(
                f"recovery id must be 0 or 1, got {self.data[64]}"
            )

    @classmethod
    def from_bytes(cls, data: bytes) -> EcdsaSignature:
        """Decode the canonical 65-byte encoding.

        Raises:
            SignatureDecodeError: If length or recovery id is invalid
        """
        return cls(bytes(data))

    @classmethod
    def from_hex(cls, text: str) -> EcdsaSignature:
        try:
            raw = decode_hex(text)
        except ValueError as exc:
            raise SignatureDecodeError(f"signature is not valid hex: {exc}") from exc
        return cls.from_bytes(raw)

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data

    def hex(self) -> str:
        return encode_hex(self.data)

    @property
    def r(self) -> int:
        return int.from_bytes(self.data[:32], "big")

    @property
    def s(self) -> int:
        return int.from_bytes(self.data[32:64], "big")

    @property
    def v(self) -> int:
        return self.data[64]

    def to_eth_rsv(self) -> bytes:
        """Return ``r || s || (v + 27)``, the layout ``ecrecover`` contracts expect."""
        return self.data[:64] + bytes([self.v + _ETH_V_OFFSET])

    def recover_public(self, digest: bytes) -> EcdsaPublic:
        """Recover the signer's public key from a 32-byte digest.

        Raises:
            ValueError: If the digest is malformed or no key can be recovered
        """
        digest = _require_digest(digest)
        try:
            recovered = keys.Signature(signature_bytes=self.data).recover_public_key_from_msg_hash(
                digest
            )
        except (BadSignature, ValidationError) as exc:
            raise ValueError(f"public key recovery failed: {exc}") from exc
        return EcdsaPublic(recovered.to_compressed_bytes())

    def __repr__(self) -> str:
        return f"EcdsaSignature({self.hex()})"


@dataclass(frozen=True, slots=True)
class EcdsaPair:
    """secp256k1 key pair acting as a signing identity.

    The pair is immutable, so concurrent ``sign_prehashed`` calls share nothing
    mutable. The secret is excluded from ``repr`` and equality.
    """

    _secret: bytes = field(repr=False, compare=False)
    _public: EcdsaPublic = field(init=False)

    def __post_init__(self) -> None:
        secret = bytes(self._secret)
        if len(secret) != SECRET_SIZE:
            raise KeyMaterialError(f"secret must be {SECRET_SIZE} bytes, got {len(secret)}")
        if not 0 < int.from_bytes(secret, "big") < SECP256K1_N:
            raise KeyMaterialError("secret is outside the secp256k1 scalar range")
        try:
            public = keys.PrivateKey(secret).public_key.to_compressed_bytes()
        except ValidationError as exc:
            raise KeyMaterialError(f"secret rejected by secp256k1: {exc}") from exc
        object.__setattr__(self, "_secret", secret)
        object.__setattr__(self, "_public", EcdsaPublic(public))

    @classmethod
    def from_seed(cls, seed: bytes) -> EcdsaPair:
        """Use a 32-byte seed directly as the secret scalar."""
        return cls(bytes(seed))

    @classmethod
    def from_seed_hex(cls, text: str) -> EcdsaPair:
        try:
            seed = decode_hex(text)
        except ValueError as exc:
            raise KeyMaterialError(f"seed is not valid hex: {exc}") from exc
        return cls.from_seed(seed)

    @classmethod
    def generate(cls) -> EcdsaPair:
        """Create a pair from fresh OS randomness."""
        while True:
            seed = secrets.token_bytes(SECRET_SIZE)
            if 0 < int.from_bytes(seed, "big") < SECP256K1_N:
                return cls(seed)

    @classmethod
    def generate_with_phrase(
        cls, password: str | None = None
    ) -> tuple[EcdsaPair, str, bytes]:
        """Create a pair from fresh entropy protected by an optional password.

        Returns:
            Tuple of (pair, phrase, seed) where ``phrase`` is the hex entropy
            accepted by :meth:`from_phrase`.
        """
        entropy = secrets.token_bytes(_DEFAULT_ENTROPY_SIZE)
        seed = _seed_from_entropy(entropy, password)
        return cls.from_seed(seed), entropy.hex(), seed

    @classmethod
    def from_phrase(cls, phrase: str, password: str | None = None) -> EcdsaPair:
        """Re-derive the pair produced by :meth:`generate_with_phrase`."""
        try:
            entropy = decode_hex(phrase)
        except ValueError as exc:
            raise KeyMaterialError(f"phrase is not valid hex entropy: {exc}") from exc
        if len(entropy) < 16 or len(entropy) > 32 or len(entropy) % 4:
            raise KeyMaterialError(
                f"phrase entropy must be 16-32 bytes in steps of 4, got {len(entropy)}"
            )
        return cls.from_seed(_seed_from_entropy(entropy, password))

    def public(self) -> EcdsaPublic:
        return self._public

    def sign_prehashed(self, digest: bytes) -> EcdsaSignature:
        """Sign a 32-byte digest as-is, with an RFC 6979 deterministic nonce.

        The digest is not hashed or prefixed again.

        Raises:
            ValueError: If ``digest`` is not 32 bytes
        """
        digest = _require_digest(digest)
        signature = keys.PrivateKey(self._secret).sign_msg_hash(digest)
        return EcdsaSignature(signature.to_bytes())

    def verify_prehashed(self, digest: bytes, signature: EcdsaSignature) -> bool:
        """Return True when ``signature`` over ``digest`` recovers this pair's key."""
        try:
            return signature.recover_public(digest) == self._public
        except ValueError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EcdsaPair):
            return NotImplemented
        return self._public == other._public

    def __hash__(self) -> int:
        return hash(self._public)

    def __repr__(self) -> str:
        return f"EcdsaPair(public={self._public.hex()})"


def _seed_from_entropy(entropy: bytes, password: str | None) -> bytes:
    salt = _PHRASE_SALT_PREFIX + (password or "").encode("utf-8")
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA512(),
        length=64,
        salt=salt,
        iterations=_PHRASE_ITERATIONS,
    )
    return kdf.derive(entropy)[:SECRET_SIZE]

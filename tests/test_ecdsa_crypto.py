"""Tests for secp256k1 identities, public keys and signature encoding."""

from __future__ import annotations

import copy

import pytest
from eth_keys import keys

from beefysig.crypto import (
    EcdsaPair,
    EcdsaPublic,
    EcdsaSignature,
    KeyMaterialError,
    SignatureDecodeError,
)
from beefysig.crypto.ecdsa import SECP256K1_N
from beefysig.utils.hashing import keccak256

GENERATOR_COMPRESSED = "0x0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
GENERATOR_ADDRESS = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"


def _scalar(value: int) -> bytes:
    return value.to_bytes(32, "big")


def test_pair_from_scalar_one_is_generator() -> None:
    pair = EcdsaPair.from_seed(_scalar(1))

    assert pair.public().hex() == GENERATOR_COMPRESSED
    assert pair.public().to_eth_address() == GENERATOR_ADDRESS


@pytest.mark.parametrize(
    "secret",
    [_scalar(0), _scalar(SECP256K1_N), b"\xff" * 32, b"\x01" * 31, b"\x01" * 33],
)
def test_invalid_key_material_is_rejected(secret: bytes) -> None:
    with pytest.raises(KeyMaterialError):
        EcdsaPair.from_seed(secret)


def test_pair_from_bad_hex_raises_key_material_error() -> None:
    with pytest.raises(KeyMaterialError):
        EcdsaPair.from_seed_hex("0xnot-hex")


def test_pair_repr_hides_secret(pair: EcdsaPair) -> None:
    text = repr(pair)
    assert "4c0883a6" not in text
    assert pair.public().hex() in text


def test_phrase_round_trip_with_password() -> None:
    pair, phrase, seed = EcdsaPair.generate_with_phrase("password")

    assert len(seed) == 32
    assert EcdsaPair.from_phrase(phrase, "password") == pair
    assert EcdsaPair.from_phrase(phrase) != pair
    assert EcdsaPair.from_phrase(phrase, "other") != pair


def test_phrase_entropy_length_is_checked() -> None:
    with pytest.raises(KeyMaterialError):
        EcdsaPair.from_phrase("00" * 15)


def test_generate_yields_distinct_pairs() -> None:
    assert EcdsaPair.generate() != EcdsaPair.generate()


def test_sign_prehashed_requires_32_byte_digest(pair: EcdsaPair) -> None:
    with pytest.raises(ValueError):
        pair.sign_prehashed(b"short")


def test_sign_prehashed_is_deterministic(pair: EcdsaPair) -> None:
    digest = keccak256(b"round 7")
    assert pair.sign_prehashed(digest) == pair.sign_prehashed(digest)


def test_sign_prehashed_matches_eth_keys(pair: EcdsaPair) -> None:
    digest = keccak256(b"round 7")
    secret = bytes.fromhex("4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318")
    expected = keys.PrivateKey(secret).sign_msg_hash(digest).to_bytes()

    assert pair.sign_prehashed(digest).to_bytes() == expected


def test_verify_prehashed(pair: EcdsaPair) -> None:
    digest = keccak256(b"round 7")
    signature = pair.sign_prehashed(digest)

    assert pair.verify_prehashed(digest, signature)
    assert not pair.verify_prehashed(keccak256(b"round 8"), signature)
    assert not EcdsaPair.generate().verify_prehashed(digest, signature)


def test_signature_encoding_layout(pair: EcdsaPair) -> None:
    signature = pair.sign_prehashed(keccak256(b"layout"))
    raw = signature.to_bytes()

    assert len(raw) == 65
    assert bytes(signature) == raw
    assert signature.r == int.from_bytes(raw[:32], "big")
    assert signature.s == int.from_bytes(raw[32:64], "big")
    assert signature.v in (0, 1)
    assert EcdsaSignature.from_bytes(raw) == signature
    assert EcdsaSignature.from_hex(signature.hex()) == signature
    assert EcdsaSignature.from_hex(signature.hex()[2:]) == signature


def test_signature_eth_rsv_shifts_recovery_id(pair: EcdsaPair) -> None:
    signature = pair.sign_prehashed(keccak256(b"ecrecover"))
    rsv = signature.to_eth_rsv()

    assert rsv[:64] == signature.to_bytes()[:64]
    assert rsv[64] == signature.v + 27


def test_signature_value_semantics(pair: EcdsaPair) -> None:
    signature = pair.sign_prehashed(keccak256(b"value"))

    assert copy.copy(signature) == signature
    assert copy.deepcopy(signature) == signature
    assert hash(copy.deepcopy(signature)) == hash(signature)
    assert {signature, EcdsaSignature(signature.to_bytes())} == {signature}
    assert repr(signature) == f"EcdsaSignature({signature.hex()})"
    with pytest.raises(AttributeError):
        signature.data = b""  # type: ignore[misc]


@pytest.mark.parametrize(
    "raw",
    [b"", b"\x00" * 64, b"\x00" * 66, b"\x11" * 64 + b"\x1b", b"\x11" * 64 + b"\x02"],
)
def test_signature_decode_rejects_malformed(raw: bytes) -> None:
    with pytest.raises(SignatureDecodeError):
        EcdsaSignature.from_bytes(raw)


def test_signature_decode_rejects_bad_hex() -> None:
    with pytest.raises(SignatureDecodeError):
        EcdsaSignature.from_hex("0xzz")


def test_signature_decode_error_is_value_error() -> None:
    assert issubclass(SignatureDecodeError, ValueError)


def test_public_accepts_uncompressed_form(pair: EcdsaPair) -> None:
    public = pair.public()
    uncompressed = public.to_uncompressed_bytes()

    assert len(uncompressed) == 64
    assert EcdsaPublic.from_bytes(uncompressed) == public
    assert EcdsaPublic.from_hex(public.hex()) == public


def test_public_rejects_wrong_length() -> None:
    with pytest.raises(ValueError):
        EcdsaPublic.from_bytes(b"\x02" * 20)


def test_recover_public_requires_digest_width(pair: EcdsaPair) -> None:
    signature = pair.sign_prehashed(keccak256(b"x"))
    with pytest.raises(ValueError):
        signature.recover_public(b"\x00" * 31)

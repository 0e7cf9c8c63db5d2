"""Pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from beefysig.config import Settings
from beefysig.crypto import EcdsaPair

# Fixed, non-secret test seed; any scalar in [1, n) works.
TEST_SEED_HEX = "0x" + "4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"


@pytest.fixture
def pair() -> EcdsaPair:
    """Deterministic signing identity."""
    return EcdsaPair.from_seed_hex(TEST_SEED_HEX)


@pytest.fixture
def password_pair() -> EcdsaPair:
    """Identity generated from fresh entropy protected by the passphrase 'password'."""
    generated, _phrase, _seed = EcdsaPair.generate_with_phrase("password")
    return generated


@pytest.fixture
def override_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[Settings, None, None]:
    """Provide isolated beefysig settings scoped to tests."""

    import beefysig.config as config_module

    for name in ("BEEFYSIG_SCHEME", "BEEFYSIG_LOG_LEVEL", "BEEFYSIG_LOG_DIGESTS"):
        monkeypatch.delenv(name, raising=False)

    original_settings = getattr(config_module, "_settings", None)

    settings = config_module.Settings(_env_file=None, log_level="DEBUG", log_digests=True)
    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from shared.config import VaultConfig
from vault.analyzers.password import PasswordAnalyzer
from vault.core.engine import VaultEngine


@pytest.fixture
def analyzer() -> PasswordAnalyzer:
    return PasswordAnalyzer()


@pytest.fixture
def quiet_config() -> VaultConfig:
    """Config with console logging off and a cheap key derivation."""
    config = VaultConfig()
    config.global_settings.console_log = False
    config.crypto.kdf_iterations = 1_000
    return config


@pytest.fixture
def engine(quiet_config: VaultConfig) -> VaultEngine:
    return VaultEngine(quiet_config)

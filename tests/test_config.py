"""Tests for configuration loading and structured logging."""

from __future__ import annotations

import json
import logging

import pytest

from shared import config as config_module
from shared.config import VaultConfig
from shared.logger import VaultLogger


SAMPLE_TOML = """
[global]
log_level = "DEBUG"
console_log = false
unknown_key = "ignored"

[analyzer]
extra_breached_passwords = ["Hunter2", "correcthorse"]

[crypto]
kdf_iterations = 5000
rsa_key_size = 3072

[generator]
default_length = 24
exclude_similar = false
"""


def test_defaults():
    config = VaultConfig()

    assert config.global_settings.log_level == "INFO"
    assert config.global_settings.console_log is True
    assert config.analyzer.extra_breached_passwords == []
    assert config.crypto.kdf_salt == "SecureVault-Studio-Salt-2024"
    assert config.crypto.kdf_iterations == 100_000
    assert config.crypto.rsa_key_size == 2048
    assert config.crypto.pss_salt_length == 32
    assert config.generator.default_length == 16
    assert config.generator.exclude_similar is True


def test_load_from_file(tmp_path):
    path = tmp_path / "vault.toml"
    path.write_text(SAMPLE_TOML, encoding="utf-8")

    config = VaultConfig.load(path)

    assert config.global_settings.log_level == "DEBUG"
    assert config.global_settings.console_log is False
    assert config.analyzer.extra_breached_passwords == ["Hunter2", "correcthorse"]
    assert config.crypto.kdf_iterations == 5000
    assert config.crypto.rsa_key_size == 3072
    assert config.crypto.pss_salt_length == 32
    assert config.generator.default_length == 24
    assert config.generator.exclude_similar is False


def test_missing_explicit_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        VaultConfig.load(tmp_path / "missing.toml")


def test_missing_default_path_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "_DEFAULT_CONFIG_PATH", tmp_path / "none.toml")
    assert VaultConfig.load() == VaultConfig()


def test_to_dict_has_every_section():
    data = VaultConfig().to_dict()
    assert set(data) == {"global_settings", "analyzer", "crypto", "generator"}
    assert data["crypto"]["kdf_iterations"] == 100_000


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def test_json_file_logging(tmp_path):
    log_file = tmp_path / "logs" / "vault.log"
    log = VaultLogger("test-json", log_file=log_file, json_logs=True, console_output=False)

    with log.operation("encrypt"):
        log.info("Derived key in %s", "0.1s", iterations=5)
    log.debug("below threshold")

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1

    entry = json.loads(lines[0])
    assert entry["level"] == "INFO"
    assert entry["logger"] == "securevault.test-json"
    assert entry["message"] == "Derived key in 0.1s"
    assert entry["tool_name"] == "test-json"
    assert entry["operation"] == "encrypt"
    assert entry["extra"] == {"iterations": 5}


def test_operation_context_is_restored():
    log = VaultLogger("test-ctx", console_output=False)

    with log.operation("outer"):
        with log.operation("inner"):
            assert log._operation == "inner"
        assert log._operation == "outer"
    assert log._operation is None


def test_logger_without_outputs_is_silent():
    log = VaultLogger("test-silent", console_output=False)

    handlers = log.underlying.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)
    assert log.underlying.propagate is False


def test_get_config_caches(tmp_path):
    path = tmp_path / "vault.toml"
    path.write_text("[generator]\nhex_bytes = 8\n", encoding="utf-8")

    first = config_module.get_config(path)
    assert first.generator.hex_bytes == 8
    assert config_module.get_config() is first


def test_reinstantiation_closes_previous_handlers(tmp_path):
    first = VaultLogger("test-reopen", log_file=tmp_path / "a.log", console_output=False)
    old_handler = first.underlying.handlers[0]

    VaultLogger("test-reopen", log_file=tmp_path / "b.log", console_output=False)

    assert old_handler.stream is None
    assert old_handler not in logging.getLogger("securevault.test-reopen").handlers

"""Tests for the engine facade and report generation."""

from __future__ import annotations

import json

import pytest

from shared.models import Severity
from vault.core.engine import VaultEngine
from vault.core.errors import CryptoOperationFailed, InvalidFormat, InvalidInput, NoKeyAvailable
from vault.core.models import Commonality
from vault.output.report import VaultReportGenerator

SECRET = "Zebra!Quartz"


# ---------------------------------------------------------------------------
# Password analysis
# ---------------------------------------------------------------------------


def test_analyze_password_wraps_result(engine):
    result = engine.analyze_password("password")

    assert result.tool_name == "vault"
    assert result.target == "[password]"
    assert result.end_time is not None
    assert result.metadata["commonality"] == "breached"
    assert result.metadata["score"] == 0
    assert result.highest_severity is Severity.CRITICAL

    titles = [f.title for f in result.findings]
    assert titles[0] == "Password Strength: Very Weak"
    assert "Breached Password" in titles
    assert "Pattern Detected: dictionary" in titles


def test_pattern_findings_are_low_severity(engine):
    result = engine.analyze_password("aaaa1111")

    patterns = [f for f in result.findings if f.title.startswith("Pattern Detected")]
    assert [f.title for f in patterns] == ["Pattern Detected: repeated"]
    assert patterns[0].severity is Severity.LOW


def test_similar_password_finding(engine):
    result = engine.analyze_password("p@ssw0rd")

    similar = [f for f in result.findings if f.title == "Similar to Breached Password"]
    assert len(similar) == 1
    assert similar[0].severity is Severity.HIGH


def test_suggestions_become_info_findings(engine):
    result = engine.analyze_password("abc")

    suggestions = [f.description for f in result.findings if f.title == "Suggestion"]
    assert suggestions == result.metadata["suggestions"]


def test_password_never_stored_in_result(engine):
    result = engine.analyze_password(SECRET)
    assert SECRET not in json.dumps(result.model_dump(mode="json"))


def test_extra_breached_passwords_from_config(quiet_config):
    quiet_config.analyzer.extra_breached_passwords = ["Hunter2"]
    engine = VaultEngine(quiet_config)

    assert "hunter2" in engine.analyzer.breached_passwords
    assert engine.analyze("hunter2").commonality is Commonality.BREACHED


# ---------------------------------------------------------------------------
# Toolkit wrappers
# ---------------------------------------------------------------------------


def test_hash_text(engine):
    assert len(engine.hash_text("hello", "SHA-512")) == 128
    with pytest.raises(InvalidInput):
        engine.hash_text("hello", "CRC32")


def test_encrypt_decrypt(engine):
    blob = engine.encrypt_text("attack at dawn", "hunter2")
    assert engine.decrypt_text(blob, "hunter2") == "attack at dawn"

    with pytest.raises(CryptoOperationFailed):
        engine.decrypt_text(blob, "wrong")


def test_sign_requires_key_pair(engine):
    with pytest.raises(NoKeyAvailable):
        engine.sign_text("hello")

    keys = engine.generate_key_pair()
    signature = engine.sign_text("hello")

    assert keys.key_size == 2048
    assert engine.signer.has_key
    assert engine.verify_signature("hello", signature) is True
    assert engine.verify_signature("goodbye", signature) is False


def test_generators_use_config_defaults(quiet_config):
    quiet_config.generator.default_length = 20
    quiet_config.generator.hex_bytes = 8
    quiet_config.generator.key_length = 48
    engine = VaultEngine(quiet_config)

    assert len(engine.generate_password()) == 20
    assert len(engine.generate_password(5)) == 5
    assert len(engine.generate_hex()) == 16
    assert len(engine.generate_key()) == 48
    assert len(engine.generate_uuid()) == 36


def test_base64_and_cidr(engine):
    assert engine.decode_base64(engine.encode_base64("hello")) == "hello"
    assert engine.calculate_cidr("172.16.5.4/16").network_address == "172.16.0.0"

    with pytest.raises(InvalidFormat):
        engine.calculate_cidr("172.16.5.4")


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


def test_json_report(engine, tmp_path):
    result = engine.analyze_password("aaaa1111")
    path = VaultReportGenerator().generate_json(result, tmp_path / "out" / "report.json")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["report_metadata"]["tool"] == "vault"
    assert data["report_metadata"]["target"] == "[password]"
    assert data["summary"]["total_findings"] == len(result.findings)
    assert sum(data["summary"]["severity_counts"].values()) == len(result.findings)
    assert data["analysis"]["score"] == 15
    assert data["analysis"]["crack_time"] == "24 minutes"


def test_html_report(engine, tmp_path):
    result = engine.analyze_password(SECRET)
    path = VaultReportGenerator().generate_html(result, tmp_path / "report.html")

    content = path.read_text(encoding="utf-8")
    assert content.startswith("<!DOCTYPE html>")
    assert "SecureVault" in content
    assert result.metadata["level"] in content
    assert SECRET not in content


def test_html_report_marks_severity(engine, tmp_path):
    result = engine.analyze_password("password")
    content = VaultReportGenerator().generate_html(result, tmp_path / "r.html").read_text(
        encoding="utf-8"
    )

    assert '<span class="badge severity-critical">CRITICAL</span>' in content
    assert "Breached Password" in content

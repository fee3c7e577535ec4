"""
SecureVault Engine
===================

Central facade of the SecureVault toolkit. :class:`VaultEngine` owns one
password analyzer, one symmetric cipher and one signer configured from
:class:`~shared.config.VaultConfig`, logs every operation, and wraps
password analyses in :class:`~shared.models.ScanResult` objects for the
console and report layers.

Secrets never reach the log: only lengths, algorithm names and outcomes
are recorded.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional

from shared.config import VaultConfig
from shared.logger import VaultLogger
from shared.models import Finding, ScanResult, Severity

from vault.analyzers.password import PasswordAnalyzer
from vault.core.errors import VaultError
from vault.core.models import (
    Analysis,
    CidrInfo,
    Commonality,
    KeyPairExport,
    StrengthLevel,
)
from vault.toolkit import cidr, encoding, hashing, randomness
from vault.toolkit.signing import Signer
from vault.toolkit.symmetric import SymmetricCipher


_LEVEL_SEVERITY: dict[StrengthLevel, Severity] = {
    StrengthLevel.VERY_WEAK: Severity.CRITICAL,
    StrengthLevel.WEAK: Severity.HIGH,
    StrengthLevel.FAIR: Severity.MEDIUM,
    StrengthLevel.GOOD: Severity.LOW,
    StrengthLevel.STRONG: Severity.INFO,
    StrengthLevel.EXCELLENT: Severity.INFO,
}

_PATTERN_DESCRIPTIONS: dict[str, str] = {
    "repeated": "Three or more identical consecutive characters.",
    "sequential": "An ascending run of digits or letters (e.g. 123, abc).",
    "keyboard": "Adjacent keys from a QWERTY row (e.g. qwe, asd).",
    "dictionary": "A common word such as 'password', 'admin' or 'love'.",
    "dates": "A year (19xx/20xx) or a D/M/Y style date.",
}


class VaultEngine:
    """Orchestrates password analysis and the cryptographic toolkit.

    Usage::

        engine = VaultEngine()
        result = engine.analyze_password("P@ssw0rd!")
        blob = engine.encrypt_text("secret", "passphrase")

    Attributes:
        config: Active configuration.
        logger: Logger bound to ``securevault.engine``.
    """

    def __init__(self, config: Optional[VaultConfig] = None) -> None:
        self.config = config or VaultConfig()
        settings = self.config.global_settings
        self.logger = VaultLogger(
            "engine",
            log_level=settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
            console_output=settings.console_log,
        )

        self._analyzer = PasswordAnalyzer(
            self.config.analyzer.extra_breached_passwords
        )
        self._cipher = SymmetricCipher(
            salt=self.config.crypto.kdf_salt,
            iterations=self.config.crypto.kdf_iterations,
        )
        self._signer = Signer(
            key_size=self.config.crypto.rsa_key_size,
            salt_length=self.config.crypto.pss_salt_length,
        )

    @property
    def analyzer(self) -> PasswordAnalyzer:
        return self._analyzer

    @property
    def signer(self) -> Signer:
        return self._signer

    @contextmanager
    def _operation(self, name: str) -> Iterator[None]:
        """Bind *name* to the log context and log toolkit failures."""
        with self.logger.operation(name):
            try:
                yield
            except VaultError as exc:
                self.logger.error("%s failed: %s", name, exc)
                raise
            except Exception:
                self.logger.exception("%s failed unexpectedly", name)
                raise

    # ------------------------------------------------------------------ #
    #  Password Analysis
    # ------------------------------------------------------------------ #

    def analyze(self, password: str) -> Analysis:
        """Run the password analyzer and return the bare :class:`Analysis`."""
        with self.logger.operation("analyze"):
            analysis = self._analyzer.analyze(password)
            self.logger.debug(
                "Analysed password of length %d: score=%d level=%s",
                analysis.length,
                analysis.score,
                analysis.level.value,
            )
            return analysis

    def analyze_password(self, password: str) -> ScanResult:
        """Analyse *password* and wrap the result with findings.

        Args:
            password: The password to analyse.

        Returns:
            ScanResult whose ``metadata`` holds the :class:`Analysis` dump.
        """
        result = ScanResult(
            tool_name="vault",
            target="[password]",
            start_time=datetime.now(timezone.utc),
        )
        self.logger.info("Starting password analysis")

        analysis = self.analyze(password)
        result.metadata = analysis.model_dump(mode="json")

        result.add_finding(Finding(
            title=f"Password Strength: {analysis.level.value}",
            description=(
                f"Score: {analysis.score}/100. "
                f"Entropy: {analysis.entropy:.2f} bits. "
                f"Character set: {analysis.charset_size}. "
                f"Length: {analysis.length}. "
                f"Estimated crack time: {analysis.crack_time}."
            ),
            severity=_LEVEL_SEVERITY[analysis.level],
            evidence={
                "score": analysis.score,
                "entropy": round(analysis.entropy, 2),
                "charset_size": analysis.charset_size,
                "complexity": analysis.complexity,
            },
        ))

        if analysis.commonality is Commonality.BREACHED:
            result.add_finding(Finding(
                title="Breached Password",
                description="The password appears verbatim in the breached-password list.",
                severity=Severity.CRITICAL,
                recommendation="Change this password immediately.",
            ))
        elif analysis.commonality is Commonality.SIMILAR_TO_BREACHED:
            result.add_finding(Finding(
                title="Similar to Breached Password",
                description=(
                    "After undoing common character substitutions the password "
                    "matches an entry of the breached-password list."
                ),
                severity=Severity.HIGH,
            ))

        for flag in analysis.patterns.detected():
            result.add_finding(Finding(
                title=f"Pattern Detected: {flag}",
                description=_PATTERN_DESCRIPTIONS[flag],
                severity=Severity.LOW,
            ))

        for suggestion in analysis.suggestions:
            result.add_finding(Finding(
                title="Suggestion",
                description=suggestion,
                severity=Severity.INFO,
            ))

        return result.finalize(
            f"Password analysis: {analysis.level.value}, "
            f"score={analysis.score}/100, entropy={analysis.entropy:.1f} bits"
        )

    # ------------------------------------------------------------------ #
    #  Hashing and Encoding
    # ------------------------------------------------------------------ #

    def hash_text(self, text: str, algorithm: str = "SHA-256") -> str:
        with self._operation("hash"):
            self.logger.info("Hashing %d characters with %s", len(text), algorithm)
            return hashing.digest(text, algorithm)

    def encode_base64(self, text: str) -> str:
        with self._operation("base64_encode"):
            return encoding.encode_base64(text)

    def decode_base64(self, data: str) -> str:
        with self._operation("base64_decode"):
            return encoding.decode_base64(data)

    # ------------------------------------------------------------------ #
    #  Symmetric Encryption
    # ------------------------------------------------------------------ #

    def encrypt_text(self, plaintext: str, password: str) -> str:
        with self._operation("encrypt"):
            with self.logger.timed("AES-GCM encryption"):
                blob = self._cipher.encrypt(plaintext, password)
            self.logger.info(
                "Encrypted %d characters (PBKDF2, %d iterations)",
                len(plaintext),
                self._cipher.iterations,
            )
            return blob

    def decrypt_text(self, blob: str, password: str) -> str:
        with self._operation("decrypt"):
            with self.logger.timed("AES-GCM decryption"):
                plaintext = self._cipher.decrypt(blob, password)
            self.logger.info("Decrypted %d characters", len(plaintext))
            return plaintext

    # ------------------------------------------------------------------ #
    #  Signatures
    # ------------------------------------------------------------------ #

    def generate_key_pair(self) -> KeyPairExport:
        with self._operation("keygen"):
            with self.logger.timed("RSA key generation"):
                keys = self._signer.generate_key_pair()
            self.logger.info("Generated RSA-%d key pair", keys.key_size)
            return keys

    def sign_text(self, text: str) -> str:
        with self._operation("sign"):
            return self._signer.sign(text)

    def verify_signature(self, text: str, signature: str) -> bool:
        with self._operation("verify"):
            valid = self._signer.verify(text, signature)
            self.logger.info("Signature verification: %s", "valid" if valid else "invalid")
            return valid

    # ------------------------------------------------------------------ #
    #  Random Values
    # ------------------------------------------------------------------ #

    def generate_password(
        self,
        length: Optional[int] = None,
        *,
        lowercase: bool = True,
        uppercase: bool = True,
        numbers: bool = True,
        symbols: bool = True,
        exclude_similar: Optional[bool] = None,
    ) -> str:
        gen = self.config.generator
        with self._operation("generate_password"):
            return randomness.random_password(
                length if length is not None else gen.default_length,
                lowercase=lowercase,
                uppercase=uppercase,
                numbers=numbers,
                symbols=symbols,
                exclude_similar=(
                    gen.exclude_similar if exclude_similar is None else exclude_similar
                ),
            )

    def generate_hex(self, nbytes: Optional[int] = None) -> str:
        with self._operation("generate_hex"):
            return randomness.random_hex(
                nbytes if nbytes is not None else self.config.generator.hex_bytes
            )

    def generate_uuid(self) -> str:
        return randomness.random_uuid()

    def generate_key(self, length: Optional[int] = None) -> str:
        with self._operation("generate_key"):
            return randomness.random_key(
                length if length is not None else self.config.generator.key_length
            )

    # ------------------------------------------------------------------ #
    #  Network
    # ------------------------------------------------------------------ #

    def calculate_cidr(self, notation: str) -> CidrInfo:
        with self._operation("cidr"):
            info = cidr.calculate(notation)
            self.logger.debug(
                "CIDR %s -> network %s, %d usable hosts",
                info.cidr,
                info.network_address,
                info.host_count,
            )
            return info

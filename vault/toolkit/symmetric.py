"""
Password-Based Symmetric Encryption
====================================

AES-256-GCM encryption keyed by PBKDF2-HMAC-SHA256 over a password.

Wire format of the Base64 blob::

    nonce (12 bytes) || ciphertext || GCM tag (16 bytes)

The salt is fixed application-wide (configurable), so the same password
always derives the same key; uniqueness comes from the per-call nonce.

References:
    - NIST SP 800-38D (2007). Galois/Counter Mode (GCM) and GMAC.
    - RFC 8018 (2017). PKCS #5: Password-Based Cryptography Specification.
"""

from __future__ import annotations

import base64
import binascii
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from vault.core.errors import CryptoOperationFailed, InvalidFormat, InvalidInput
from vault.toolkit.encoding import utf8_bytes

DEFAULT_SALT = "SecureVault-Studio-Salt-2024"
DEFAULT_ITERATIONS = 100_000
NONCE_SIZE = 12
KEY_SIZE = 32


class SymmetricCipher:
    """Encrypts and decrypts text with a password-derived AES-GCM key.

    Usage::

        cipher = SymmetricCipher()
        blob = cipher.encrypt("attack at dawn", "hunter2")
        assert cipher.decrypt(blob, "hunter2") == "attack at dawn"
    """

    def __init__(
        self,
        salt: str = DEFAULT_SALT,
        iterations: int = DEFAULT_ITERATIONS,
    ) -> None:
        if iterations < 1:
            raise InvalidInput("KDF iteration count must be positive")
        self._salt = utf8_bytes(salt)
        self._iterations = iterations

    @property
    def iterations(self) -> int:
        return self._iterations

    def derive_key(self, password: str) -> bytes:
        """Derive the 256-bit AES key for *password*."""
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=KEY_SIZE,
            salt=self._salt,
            iterations=self._iterations,
        )
        return kdf.derive(utf8_bytes(password))

    def encrypt(self, plaintext: str, password: str) -> str:
        """Encrypt *plaintext* and return the Base64 blob.

        Raises:
            InvalidInput: If either argument is empty.
        """
        if not plaintext or not password:
            raise InvalidInput("Plaintext and password are required")

        nonce = os.urandom(NONCE_SIZE)
        sealed = AESGCM(self.derive_key(password)).encrypt(
            nonce, utf8_bytes(plaintext), None
        )
        return base64.b64encode(nonce + sealed).decode("ascii")

    def decrypt(self, blob: str, password: str) -> str:
        """Decrypt a Base64 blob produced by :meth:`encrypt`.

        Raises:
            InvalidInput: If either argument is empty.
            InvalidFormat: If the blob is not valid Base64 or is too short.
            CryptoOperationFailed: If authentication fails (wrong password
                or tampered data) or the plaintext is not UTF-8.
        """
        if not blob or not password:
            raise InvalidInput("Encrypted data and password are required")

        try:
            combined = base64.b64decode(blob, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidFormat(f"Decryption failed: invalid Base64 data ({exc})") from exc

        if len(combined) <= NONCE_SIZE:
            raise InvalidFormat("Decryption failed: data too short")

        nonce, sealed = combined[:NONCE_SIZE], combined[NONCE_SIZE:]
        try:
            plaintext = AESGCM(self.derive_key(password)).decrypt(nonce, sealed, None)
        except InvalidTag as exc:
            raise CryptoOperationFailed(
                "Decryption failed: wrong password or corrupted data"
            ) from exc

        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CryptoOperationFailed(
                "Decryption failed: plaintext is not valid UTF-8"
            ) from exc

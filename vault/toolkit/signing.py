"""
RSA-PSS Signatures
===================

Generates an RSA key pair held in memory for the lifetime of a
:class:`Signer`, and signs / verifies UTF-8 text with RSA-PSS over
SHA-256. Keys are never written to disk.

References:
    - RFC 8017 (2016). PKCS #1: RSA Cryptography Specifications v2.2.
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from vault.core.errors import CryptoOperationFailed, InvalidFormat, NoKeyAvailable
from vault.core.models import KeyPairExport
from vault.toolkit.encoding import utf8_bytes

PUBLIC_EXPONENT = 65537


class Signer:
    """Holds one RSA key pair and signs / verifies text with it.

    Usage::

        signer = Signer()
        signer.generate_key_pair()
        sig = signer.sign("hello")
        assert signer.verify("hello", sig)
    """

    def __init__(self, key_size: int = 2048, salt_length: int = 32) -> None:
        self._key_size = key_size
        self._salt_length = salt_length
        self._private_key: Optional[rsa.RSAPrivateKey] = None

    @property
    def has_key(self) -> bool:
        return self._private_key is not None

    def generate_key_pair(self) -> KeyPairExport:
        """Generate a fresh key pair, replacing any previous one.

        Returns:
            The Base64 DER export of both keys.

        Raises:
            CryptoOperationFailed: If the backend rejects the key size.
        """
        try:
            self._private_key = rsa.generate_private_key(
                public_exponent=PUBLIC_EXPONENT,
                key_size=self._key_size,
            )
        except ValueError as exc:
            raise CryptoOperationFailed(f"Key generation failed: {exc}") from exc

        public_der = self._private_key.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        private_der = self._private_key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
        return KeyPairExport(
            public_key=base64.b64encode(public_der).decode("ascii"),
            private_key=base64.b64encode(private_der).decode("ascii"),
            key_size=self._key_size,
        )

    def _padding(self) -> padding.PSS:
        return padding.PSS(
            mgf=padding.MGF1(hashes.SHA256()),
            salt_length=self._salt_length,
        )

    def _require_key(self) -> rsa.RSAPrivateKey:
        if self._private_key is None:
            raise NoKeyAvailable()
        return self._private_key

    def sign(self, text: str) -> str:
        """Sign *text* and return the Base64 signature.

        Raises:
            NoKeyAvailable: If no key pair has been generated.
        """
        key = self._require_key()
        signature = key.sign(utf8_bytes(text), self._padding(), hashes.SHA256())
        return base64.b64encode(signature).decode("ascii")

    def verify(self, text: str, signature: str) -> bool:
        """Check a Base64 *signature* over *text*.

        Returns:
            ``True`` if the signature is valid, ``False`` otherwise.

        Raises:
            NoKeyAvailable: If no key pair has been generated.
            InvalidFormat: If *signature* is not valid Base64.
        """
        key = self._require_key()
        try:
            raw = base64.b64decode(signature, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidFormat(f"Verification failed: invalid signature encoding ({exc})") from exc

        try:
            key.public_key().verify(
                raw, utf8_bytes(text), self._padding(), hashes.SHA256()
            )
        except InvalidSignature:
            return False
        return True

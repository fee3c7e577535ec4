"""
SecureVault Error Types
========================

Exceptions raised by the cryptographic toolkit. The password analyzer
never raises; every toolkit failure surfaces as a :class:`VaultError`
subclass carrying a descriptive message.
"""

from __future__ import annotations


class VaultError(Exception):
    """Base class for every toolkit failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(VaultError):
    """A required value is empty, missing, or unsupported."""


class InvalidFormat(VaultError):
    """A value could not be parsed (CIDR notation, Base64, ...)."""


class CryptoOperationFailed(VaultError):
    """The underlying primitive rejected the key or the data."""


class NoKeyAvailable(VaultError):
    """Signing or verification was attempted before a key pair existed."""

    def __init__(self, message: str = "No key pair available. Generate keys first.") -> None:
        super().__init__(message)

"""
SecureVault Toolkit
====================

Cryptographic and network utilities: digests, password-based AES-GCM
encryption, RSA-PSS signatures, secure random values, Base64 and CIDR
arithmetic.
"""

from vault.toolkit.signing import Signer
from vault.toolkit.symmetric import SymmetricCipher

__all__ = [
    "Signer",
    "SymmetricCipher",
]

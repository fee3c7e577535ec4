"""
SecureVault Core Module
========================

Data models and error types for the SecureVault toolkit. The
:class:`~vault.core.engine.VaultEngine` facade lives in
:mod:`vault.core.engine`.
"""

from vault.core.errors import (
    CryptoOperationFailed,
    InvalidFormat,
    InvalidInput,
    NoKeyAvailable,
    VaultError,
)
from vault.core.models import (
    Analysis,
    CidrInfo,
    Commonality,
    KeyPairExport,
    PatternFlags,
    StrengthLevel,
)

__all__ = [
    "Analysis",
    "CidrInfo",
    "Commonality",
    "CryptoOperationFailed",
    "InvalidFormat",
    "InvalidInput",
    "KeyPairExport",
    "NoKeyAvailable",
    "PatternFlags",
    "StrengthLevel",
    "VaultError",
]

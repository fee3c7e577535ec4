"""
SecureVault -- Password Strength & Cryptographic Utilities
===========================================================

Password-strength analysis (entropy, pattern detection, breach
similarity, scoring and suggestions) together with a small set of
cryptographic helpers: hashing, AES-GCM encryption, RSA-PSS signing,
secure random values, Base64 and CIDR arithmetic.

Modules:
    - vault.analyzers: Password analyzer and pattern tables
    - vault.toolkit: Cryptographic and network helpers
    - vault.core: Engine facade, models and errors
    - vault.output: Console and report output
    - vault.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
__tool_name__ = "vault"

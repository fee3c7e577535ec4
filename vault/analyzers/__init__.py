"""
SecureVault Analyzers
======================

The password-strength analyzer and its static pattern tables.
"""

from vault.analyzers.password import PasswordAnalyzer, format_crack_time

__all__ = [
    "PasswordAnalyzer",
    "format_crack_time",
]

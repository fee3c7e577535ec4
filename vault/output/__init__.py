"""
SecureVault Output Module
==========================

Console display and report generation for SecureVault results.
"""

from vault.output.console import VaultConsoleOutput
from vault.output.report import VaultReportGenerator

__all__ = [
    "VaultConsoleOutput",
    "VaultReportGenerator",
]

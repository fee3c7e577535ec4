"""
SecureVault Shared Module
=========================

Configuration, logging, console presentation and result models shared by
every SecureVault component.
"""

from shared.config import VaultConfig, get_config

__all__ = ["VaultConfig", "get_config"]

"""
SecureVault Configuration Management
=====================================

Centralized configuration for the SecureVault toolkit using Python
dataclasses and TOML-based persistence.

Each section of ``config.toml`` maps onto one dataclass below; keys the
dataclass does not declare are ignored so that newer config files keep
loading on older builds.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class AnalyzerConfig:
    """Configuration for the password-strength analyzer.

    ``extra_breached_passwords`` is merged into the built-in breach list
    when the analyzer is constructed; entries are lower-cased.
    """

    extra_breached_passwords: list[str] = field(default_factory=list)


@dataclass(frozen=False, slots=True)
class CryptoConfig:
    """Parameters for the symmetric cipher and the RSA signer.

    Reference:
        NIST SP 800-132 (2010). Recommendation for Password-Based
        Key Derivation.
    """

    kdf_salt: str = "SecureVault-Studio-Salt-2024"
    kdf_iterations: int = 100_000
    rsa_key_size: int = 2048
    pss_salt_length: int = 32


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Defaults for random password, hex and key generation."""

    default_length: int = 16
    exclude_similar: bool = True
    hex_bytes: int = 16
    key_length: int = 32


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, output directory, version."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False
    console_log: bool = True
    output_dir: str = "output"
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class VaultConfig:
    """Master configuration aggregating every section.

    Usage:
        >>> config = VaultConfig.load()                  # from default path
        >>> config = VaultConfig.load("custom.toml")     # from custom path
        >>> config.crypto.kdf_iterations
        100000
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    crypto: CryptoConfig = field(default_factory=CryptoConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> VaultConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`VaultConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            analyzer=cls._build_section(AnalyzerConfig, raw.get("analyzer", {})),
            crypto=cls._build_section(CryptoConfig, raw.get("crypto", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares."""
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> VaultConfig:
    """Module-level convenience wrapper around :meth:`VaultConfig.load`.

    Caches the result so that repeated calls share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = VaultConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]

"""
SecureVault Core Data Models
=============================

Pydantic models for the password analyzer and the cryptographic toolkit.
These models represent the structured results consumed by the CLI output
layer and the JSON / HTML report generators.

The :class:`Analysis` record serialises with the camelCase keys used by
the browser front end (``charsetSize``, ``crackTime``) when dumped with
``by_alias=True``.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Commonality(str, enum.Enum):
    """How closely a password resembles a known breached password."""

    UNIQUE = "unique"
    SIMILAR_TO_BREACHED = "similar_to_breached"
    BREACHED = "breached"


class StrengthLevel(str, enum.Enum):
    """Score bucket of a password analysis."""

    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"
    EXCELLENT = "Excellent"


# ===================================================================== #
#  Password Analysis Models
# ===================================================================== #


class PatternFlags(BaseModel):
    """Presence flags for weakening patterns found in a password."""

    model_config = ConfigDict(frozen=True)

    repeated: bool = False
    sequential: bool = False
    keyboard: bool = False
    dictionary: bool = False
    dates: bool = False

    def detected(self) -> list[str]:
        """Names of the flags that are set, in declaration order."""
        return [name for name, value in self.model_dump().items() if value]


class Analysis(BaseModel):
    """Complete password strength analysis.

    Attributes:
        length: Character count of the password.
        charset_size: Sum of the sizes of the character classes present.
        entropy: Estimated bits of entropy after the pattern penalty.
        patterns: Weakening-pattern flags.
        commonality: Breach-likeness classification.
        complexity: Count (0-4) of lowercase/uppercase/digit/other classes.
        crack_time: Human-readable brute-force estimate.
        score: Overall score, clamped to 0-100.
        level: Score bucket.
        suggestions: Improvement advice; never empty.
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(default=0, ge=0)
    charset_size: int = Field(default=0, ge=0, serialization_alias="charsetSize")
    entropy: float = Field(default=0.0, ge=0.0)
    patterns: PatternFlags = Field(default_factory=PatternFlags)
    commonality: Commonality = Commonality.UNIQUE
    complexity: int = Field(default=0, ge=0, le=4)
    crack_time: str = Field(default="0 seconds", serialization_alias="crackTime")
    score: int = Field(default=0, ge=0, le=100)
    level: StrengthLevel = StrengthLevel.VERY_WEAK
    suggestions: list[str] = Field(default_factory=list)


# ===================================================================== #
#  Toolkit Models
# ===================================================================== #


class CidrInfo(BaseModel):
    """IPv4 network information derived from CIDR notation.

    Attributes:
        cidr: The input notation, as given.
        prefix: Prefix length (0-32).
        network_address: Dotted network address.
        broadcast_address: Dotted broadcast address.
        subnet_mask: Dotted subnet mask.
        host_count: Usable hosts, ``2^(32-prefix) - 2`` floored at 0.
        usable_range: ``"first - last"`` or ``"None"`` without usable hosts.
    """

    cidr: str
    prefix: int = Field(ge=0, le=32)
    network_address: str
    broadcast_address: str
    subnet_mask: str
    host_count: int = Field(ge=0)
    usable_range: str


class KeyPairExport(BaseModel):
    """Base64-encoded DER export of an RSA key pair.

    Attributes:
        public_key: SubjectPublicKeyInfo DER, Base64.
        private_key: PKCS#8 DER, Base64.
        key_size: Modulus length in bits.
    """

    public_key: str
    private_key: str
    key_size: int = 2048

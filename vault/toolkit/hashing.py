"""
Text Digests
=============

Hex digests of UTF-8 text for the SHA family via :mod:`hashlib`.

``"MD5"`` is served by a legacy 32-bit string hash kept for output
compatibility with earlier SecureVault releases; it is *not* MD5 and the
digest is suffixed ``_simplified`` so it cannot be mistaken for one.
"""

from __future__ import annotations

import hashlib

from vault.core.errors import InvalidInput
from vault.toolkit.encoding import utf8_bytes

SUPPORTED_ALGORITHMS: dict[str, str] = {
    "SHA-1": "sha1",
    "SHA-256": "sha256",
    "SHA-384": "sha384",
    "SHA-512": "sha512",
    "MD5": "legacy",
}


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def legacy_hash(text: str) -> str:
    """32-bit ``h * 31 + c`` string hash over UTF-16 code units."""
    h = 0
    if not text:
        return format(h, "032x")

    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = _to_int32((h << 5) - h + code_unit)

    return format(abs(h), "032x") + "_simplified"


def digest(text: str, algorithm: str = "SHA-256") -> str:
    """Hash *text* with *algorithm* and return the hex digest.

    Args:
        text: Input text, encoded as UTF-8.
        algorithm: One of :data:`SUPPORTED_ALGORITHMS` (case-insensitive).

    Returns:
        Lower-case hex digest, or ``""`` for empty text.

    Raises:
        InvalidInput: If the algorithm is not supported.
    """
    name = SUPPORTED_ALGORITHMS.get(algorithm.upper())
    if name is None:
        raise InvalidInput(
            f"Unsupported hash algorithm: {algorithm}. "
            f"Supported: {', '.join(SUPPORTED_ALGORITHMS)}"
        )
    if not text:
        return ""
    if name == "legacy":
        return legacy_hash(text)
    return hashlib.new(name, utf8_bytes(text)).hexdigest()

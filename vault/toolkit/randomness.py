"""
Secure Random Values
=====================

Random passwords, hex strings, UUIDs and encryption keys drawn from the
operating system CSPRNG via :mod:`secrets`.
"""

from __future__ import annotations

import secrets
import string
import uuid

from vault.core.errors import InvalidInput

SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
SIMILAR_CHARACTERS = "0O1lI"


def build_charset(
    *,
    lowercase: bool = True,
    uppercase: bool = True,
    numbers: bool = True,
    symbols: bool = True,
    exclude_similar: bool = True,
) -> str:
    """Concatenate the selected character classes.

    With *exclude_similar*, the look-alike characters ``0 O 1 l I`` are
    removed.
    """
    charset = ""
    if lowercase:
        charset += string.ascii_lowercase
    if uppercase:
        charset += string.ascii_uppercase
    if numbers:
        charset += string.digits
    if symbols:
        charset += SYMBOLS
    if exclude_similar:
        charset = "".join(c for c in charset if c not in SIMILAR_CHARACTERS)
    return charset


def random_password(
    length: int = 16,
    *,
    lowercase: bool = True,
    uppercase: bool = True,
    numbers: bool = True,
    symbols: bool = True,
    exclude_similar: bool = True,
) -> str:
    """Generate a random password from the selected character classes.

    Raises:
        InvalidInput: If *length* is not positive or no class is selected.
    """
    if length < 1:
        raise InvalidInput("Password length must be at least 1")

    charset = build_charset(
        lowercase=lowercase,
        uppercase=uppercase,
        numbers=numbers,
        symbols=symbols,
        exclude_similar=exclude_similar,
    )
    if not charset:
        raise InvalidInput("No character set selected")

    return "".join(secrets.choice(charset) for _ in range(length))


def random_hex(nbytes: int = 16) -> str:
    """Return *nbytes* random bytes as lower-case hex (``2 * nbytes`` chars)."""
    if nbytes < 1:
        raise InvalidInput("Byte count must be at least 1")
    return secrets.token_hex(nbytes)


def random_uuid() -> str:
    """Return a random version-4 UUID string."""
    return str(uuid.uuid4())


def random_key(length: int = 32) -> str:
    """Random key text using every class, look-alikes included."""
    return random_password(length, exclude_similar=False)

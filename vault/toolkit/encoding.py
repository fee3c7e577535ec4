"""Base64 encoding of UTF-8 text."""

from __future__ import annotations

import base64
import binascii

from vault.core.errors import InvalidFormat


def utf8_bytes(text: str) -> bytes:
    """Encode *text* as UTF-8, replacing lone surrogates with U+FFFD.

    Surrogate pairs are joined into the character they encode.
    """
    return (
        text.encode("utf-16-le", "surrogatepass")
        .decode("utf-16-le", "replace")
        .encode("utf-8")
    )


def encode_base64(text: str) -> str:
    return base64.b64encode(utf8_bytes(text)).decode("ascii")


def decode_base64(data: str) -> str:
    """Decode standard Base64 back to UTF-8 text.

    Surrounding whitespace is ignored.

    Raises:
        InvalidFormat: If *data* is not valid Base64 or not UTF-8.
    """
    try:
        raw = base64.b64decode(data.strip(), validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError) as exc:
        raise InvalidFormat("Base64 decoding failed - invalid format") from exc

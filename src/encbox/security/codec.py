"""Base64 and ``ENC(...)`` marker helpers for embedding ciphertext in text.

A value is considered "encrypted" when, ignoring surrounding whitespace, it
appears as ``ENC(<base64>)``.
"""

import base64
import binascii

from encbox.core.exceptions import EncodingError, FormatError


PREFIX = "ENC("
SUFFIX = ")"


def base64_encode(data: bytes) -> str:
    """Standard alphabet, padded."""
    return base64.b64encode(data).decode("ascii")


def base64_decode(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise EncodingError(f"malformed base64: {exc}") from exc


def is_marked(text: str) -> bool:
    if not isinstance(text, str):
        return False
    # str.strip() trims Unicode whitespace, including \x1c-\x1f
    trimmed = text.strip()
    # "ENC(" alone must not pass as prefix and suffix at once
    if len(trimmed) < len(PREFIX) + len(SUFFIX):
        return False
    return trimmed.startswith(PREFIX) and trimmed.endswith(SUFFIX)


def unmark(text: str) -> str:
    """Return the part between ``ENC(`` and ``)``; inner content is kept as-is."""
    if not is_marked(text):
        raise FormatError("value is not in the ENC(...) form")
    trimmed = text.strip()
    return trimmed[len(PREFIX):len(trimmed) - len(SUFFIX)]


def mark(encoded: str) -> str:
    return f"{PREFIX}{encoded}{SUFFIX}"


def decode_marked(text: str) -> bytes:
    return base64_decode(unmark(text))


def encode_marked(data: bytes) -> str:
    return mark(base64_encode(data))

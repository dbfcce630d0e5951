"""
String-level encryption to and from the ``ENC(<base64>)`` form.

Typical use is keeping secrets inline in otherwise plaintext configuration:

    marked = encrypt_string(key, nonce, "s3cret")   # "ENC(...)"
    decrypt_string(key, nonce, marked)              # "s3cret"

The same (key, nonce) pair must never encrypt two different strings.
"""
from __future__ import annotations

from typing import Any, Optional

from encbox.core.exceptions import EncodingError
from .codec import decode_marked, encode_marked, is_marked
from .crypto import seal, unseal
from .nonces import NonceTracker


def encrypt_string(
    key: bytes, nonce: bytes, plaintext: str, *, tracker: Optional[NonceTracker] = None
) -> str:
    """Encrypt ``plaintext`` and return it in marked form.

    If a ``tracker`` is given the (key, nonce) pair is registered once sealing
    succeeds; a repeat raises ``NonceReuseError`` and no ciphertext is returned.
    """
    ciphertext = seal(key, nonce, plaintext.encode("utf-8"))
    if tracker is not None:
        tracker.register(key, nonce)
    return encode_marked(ciphertext)


def decrypt_string(key: bytes, nonce: bytes, marked: str) -> str:
    plaintext = unseal(key, nonce, decode_marked(marked))
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError("decrypted value is not valid UTF-8") from exc


def decrypt_values(data: Any, key: bytes, nonce: bytes) -> Any:
    """
    Return a copy of ``data`` with every marked string decrypted.

    Walks nested dicts, lists and tuples (e.g. a parsed JSON or YAML config).
    Unmarked strings and other scalars are returned unchanged and the input is
    not modified. The first failing value aborts the walk with its error.
    """
    if isinstance(data, str):
        return decrypt_string(key, nonce, data) if is_marked(data) else data
    if isinstance(data, dict):
        return {k: decrypt_values(v, key, nonce) for k, v in data.items()}
    if isinstance(data, list):
        return [decrypt_values(v, key, nonce) for v in data]
    if isinstance(data, tuple):
        return tuple(decrypt_values(v, key, nonce) for v in data)
    return data

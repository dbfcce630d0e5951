"""AES-GCM authenticated encryption of byte strings.

The key selects the cipher strength: 16 bytes for AES-128, 32 bytes for
AES-256. Nonces are 12 bytes and no associated data is used. The 16-byte
authentication tag is appended to the ciphertext.

A nonce must never be reused with the same key; this module does not track
nonces (see :class:`encbox.security.nonces.NonceTracker`).
"""

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from encbox.core.exceptions import AuthenticationError, CipherInitError
from .entropy import NONCE_SIZE


KEY_SIZES = (16, 32)
TAG_SIZE = 16


def _make_aead(key: bytes, nonce: bytes) -> AESGCM:
    if not isinstance(key, (bytes, bytearray)) or len(key) not in KEY_SIZES:
        size = len(key) if isinstance(key, (bytes, bytearray)) else type(key).__name__
        raise CipherInitError(f"invalid AES key size: {size} (expected 16 or 32 bytes)")
    if not isinstance(nonce, (bytes, bytearray)) or len(nonce) != NONCE_SIZE:
        raise CipherInitError(f"nonce must be {NONCE_SIZE} bytes")
    try:
        return AESGCM(bytes(key))
    except (ValueError, TypeError) as exc:
        raise CipherInitError(f"cannot initialize AES-GCM: {exc}") from exc


def seal(key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
    """Encrypt and authenticate ``plaintext``; returns ciphertext || tag."""
    aead = _make_aead(key, nonce)
    try:
        return aead.encrypt(bytes(nonce), plaintext, None)
    except (TypeError, OverflowError) as exc:
        raise CipherInitError(f"cannot encrypt: {exc}") from exc


def unseal(key: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    """Verify and decrypt output of :func:`seal`.

    Raises:
        AuthenticationError: the tag does not verify. No plaintext is returned.
        CipherInitError: bad key or nonce.
    """
    aead = _make_aead(key, nonce)
    if len(ciphertext) < TAG_SIZE:
        raise AuthenticationError("ciphertext too short to contain an authentication tag")
    try:
        return aead.decrypt(bytes(nonce), bytes(ciphertext), None)
    except InvalidTag as exc:
        raise AuthenticationError("message authentication failed") from exc

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from encbox.core.exceptions import KeyDerivationError, RandomSourceError
from .entropy import SALT_SIZE, salt as generate_salt


logger = logging.getLogger(__name__)

# Fixed for compatibility with previously derived material.
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1

KEY_LENGTHS = (16, 32)


@dataclass(frozen=True)
class DerivedKey:
    """A derived key together with the salt and cost parameters that produced it."""

    key: bytes = field(repr=False)
    salt: bytes
    n: int = SCRYPT_N
    r: int = SCRYPT_R
    p: int = SCRYPT_P


def derive_key_with_salt(
    password: bytes | str,
    key_len: int,
    salt: Optional[bytes] = None,
    *,
    n: int = SCRYPT_N,
    r: int = SCRYPT_R,
    p: int = SCRYPT_P,
) -> DerivedKey:
    """
    Derive a ``key_len``-byte key from a password using scrypt.

    When ``salt`` is None a fresh 8-byte salt is generated. Passing the salt
    of an earlier result re-derives the same key.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")
    if key_len not in KEY_LENGTHS:
        raise KeyDerivationError(f"key length must be 16 or 32 bytes, got {key_len!r}")

    if salt is None:
        try:
            salt = generate_salt()
        except RandomSourceError as exc:
            raise KeyDerivationError(f"salt generation failed: {exc}") from exc
    elif len(salt) != SALT_SIZE:
        raise KeyDerivationError(f"salt must be {SALT_SIZE} bytes, got {len(salt)}")

    try:
        kdf = Scrypt(salt=salt, length=key_len, n=n, r=r, p=p)
        key = kdf.derive(password)
    except (ValueError, TypeError, MemoryError, UnsupportedAlgorithm) as exc:
        raise KeyDerivationError(f"scrypt rejected its parameters: {exc}") from exc

    logger.debug("derived %d-byte key (n=%d, r=%d, p=%d)", key_len, n, r, p)
    return DerivedKey(key=key, salt=salt, n=n, r=r, p=p)


def derive_key(password: bytes | str, key_len: int, **params) -> bytes:
    """
    Derive a key from a password with a fresh random salt.

    The salt is discarded, so every call yields a different key. Use
    :func:`derive_key_with_salt` when the key must be derivable again.
    """
    return derive_key_with_salt(password, key_len, **params).key


def key16(password: bytes | str) -> bytes:
    """Derive an AES-128 key."""
    return derive_key(password, 16)


def key32(password: bytes | str) -> bytes:
    """Derive an AES-256 key."""
    return derive_key(password, 32)


def kdf_params_to_dict(derived: DerivedKey) -> Dict:
    # The key itself is never serialized.
    return {
        "algo": "scrypt",
        "salt": derived.salt.hex(),
        "length": len(derived.key),
        "n": derived.n,
        "r": derived.r,
        "p": derived.p,
    }


def derived_key_from_dict(params: Dict, password: bytes | str) -> DerivedKey:
    """Re-derive a key from parameters produced by :func:`kdf_params_to_dict`."""
    if params.get("algo", "scrypt") != "scrypt":
        raise KeyDerivationError(f"unsupported KDF: {params.get('algo')!r}")
    try:
        salt = bytes.fromhex(params["salt"])
        key_len = int(params["length"])
        n = int(params.get("n", SCRYPT_N))
        r = int(params.get("r", SCRYPT_R))
        p = int(params.get("p", SCRYPT_P))
    except (KeyError, TypeError, ValueError) as exc:
        raise KeyDerivationError(f"malformed KDF parameters: {exc}") from exc
    return derive_key_with_salt(password, key_len, salt, n=n, r=r, p=p)

"""Security helpers for encbox: scrypt key derivation, AES-GCM and ENC(...) values.

This package provides a small, reviewable toolkit for:
- password-based key derivation (scrypt, N=16384, r=8, p=1)
- AES-128/256-GCM sealing of byte strings
- the ``ENC(<base64>)`` convention for ciphertext embedded in text

Every function is stateless and safe to call from several threads.
"""

from .entropy import random_bytes, salt, nonce
from .kdf import (
    DerivedKey,
    derive_key,
    derive_key_with_salt,
    derived_key_from_dict,
    kdf_params_to_dict,
    key16,
    key32,
)
from .crypto import seal, unseal
from .codec import (
    base64_decode,
    base64_encode,
    decode_marked,
    encode_marked,
    is_marked,
    mark,
    unmark,
)
from .values import encrypt_string, decrypt_string, decrypt_values
from .nonces import NonceTracker

__all__ = [
    "random_bytes",
    "salt",
    "nonce",
    "DerivedKey",
    "derive_key",
    "derive_key_with_salt",
    "derived_key_from_dict",
    "kdf_params_to_dict",
    "key16",
    "key32",
    "seal",
    "unseal",
    "base64_encode",
    "base64_decode",
    "is_marked",
    "mark",
    "unmark",
    "encode_marked",
    "decode_marked",
    "encrypt_string",
    "decrypt_string",
    "decrypt_values",
    "NonceTracker",
]

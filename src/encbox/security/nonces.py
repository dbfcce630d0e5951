"""Optional in-memory guard against reusing a nonce with the same key.

Nothing in encbox requires a tracker. Pass one to ``encrypt_string`` to turn
an accidental (key, nonce) repeat into a ``NonceReuseError`` instead of a
silent loss of confidentiality. Keys are remembered only by their SHA-256
fingerprint.
"""
from __future__ import annotations

import hashlib
import threading
from typing import Set, Tuple

from encbox.core.exceptions import NonceReuseError


def key_fingerprint(key: bytes) -> bytes:
    return hashlib.sha256(bytes(key)).digest()


class NonceTracker:
    def __init__(self):
        self._seen: Set[Tuple[bytes, bytes]] = set()
        self._lock = threading.Lock()

    def register(self, key: bytes, nonce: bytes) -> None:
        """Record a (key, nonce) use; raise NonceReuseError if it was seen before."""
        entry = (key_fingerprint(key), bytes(nonce))
        with self._lock:
            if entry in self._seen:
                raise NonceReuseError("nonce already used with this key")
            self._seen.add(entry)

    def seen(self, key: bytes, nonce: bytes) -> bool:
        entry = (key_fingerprint(key), bytes(nonce))
        with self._lock:
            return entry in self._seen

    def clear(self) -> None:
        with self._lock:
            self._seen.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)

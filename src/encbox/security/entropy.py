"""Random byte source for salts and nonces, backed by ``os.urandom``."""

import os

from encbox.core.exceptions import RandomSourceError


SALT_SIZE = 8
NONCE_SIZE = 12


def random_bytes(n: int) -> bytes:
    """Return exactly ``n`` cryptographically secure random bytes.

    Raises:
        RandomSourceError: if ``n`` is invalid, the OS read fails, or it
            returns fewer bytes than requested.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise RandomSourceError(f"invalid random length: {n!r}")
    try:
        data = os.urandom(n)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(f"entropy read failed: {exc}") from exc
    if len(data) != n:
        raise RandomSourceError(f"short entropy read: wanted {n} bytes, got {len(data)}")
    return data


def salt() -> bytes:
    return random_bytes(SALT_SIZE)


def nonce() -> bytes:
    """Return a fresh 12-byte GCM nonce.

    Never use more than 2**32 random nonces with a given key because of the
    risk of a repeat.
    """
    return random_bytes(NONCE_SIZE)

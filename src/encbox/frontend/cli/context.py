"""Small helper to build the encbox CLI settings from the environment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional
import logging
import os

from encbox.core.exceptions import ConfigurationError, EncodingError
from encbox.security.codec import base64_decode
from encbox.security.crypto import KEY_SIZES
from encbox.security.entropy import NONCE_SIZE


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the command line."""

    key: Optional[bytes] = field(default=None, repr=False)
    nonce: Optional[bytes] = None
    password: Optional[str] = field(default=None, repr=False)
    log_level: int = logging.WARNING

    def require_key(self) -> bytes:
        if self.key is None:
            raise ConfigurationError("no key configured; pass --key or set ENCBOX_KEY")
        return self.key

    def require_nonce(self) -> bytes:
        if self.nonce is None:
            raise ConfigurationError("no nonce configured; pass --nonce or set ENCBOX_NONCE")
        return self.nonce


def _decode_setting(name: str, value: str, sizes: tuple) -> bytes:
    try:
        raw = base64_decode(value.strip())
    except EncodingError as exc:
        raise ConfigurationError(f"{name} is not valid base64") from exc
    if len(raw) not in sizes:
        expected = " or ".join(str(s) for s in sizes)
        raise ConfigurationError(f"{name} must decode to {expected} bytes, got {len(raw)}")
    return raw


def _parse_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"unknown log level: {value!r}")
    return level


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    key: Optional[str] = None,
    nonce: Optional[str] = None,
) -> Settings:
    """
    Read ``ENCBOX_*`` variables, letting explicit ``key``/``nonce`` override them.

    - ``ENCBOX_KEY``: base64 key, 16 or 32 bytes
    - ``ENCBOX_NONCE``: base64 nonce, 12 bytes
    - ``ENCBOX_PASSWORD``: password for ``keygen`` instead of prompting
    - ``ENCBOX_LOG_LEVEL``: logging level name (default WARNING)
    """
    env = os.environ if env is None else env

    key_text = key if key is not None else env.get("ENCBOX_KEY")
    nonce_text = nonce if nonce is not None else env.get("ENCBOX_NONCE")
    level_text = env.get("ENCBOX_LOG_LEVEL")

    return Settings(
        key=_decode_setting("key", key_text, KEY_SIZES) if key_text else None,
        nonce=_decode_setting("nonce", nonce_text, (NONCE_SIZE,)) if nonce_text else None,
        password=env.get("ENCBOX_PASSWORD") or None,
        log_level=_parse_level(level_text) if level_text else logging.WARNING,
    )

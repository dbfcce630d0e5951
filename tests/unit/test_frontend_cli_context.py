"""Unit tests for the CLI settings loader."""

import base64
import logging

import pytest

from encbox.core.exceptions import ConfigurationError
from encbox.frontend.cli.context import Settings, load_settings

KEY_B64 = "lJVRh3lGtxZwlwplx+Wz9XbJSEouhfcPKmYbBM45ODE="
NONCE_B64 = "hoOLlooQPN21ufCy"


def test_load_settings_empty_env():
    settings = load_settings(env={})
    assert settings == Settings()
    assert settings.log_level == logging.WARNING


def test_load_settings_from_env():
    env = {
        "ENCBOX_KEY": KEY_B64,
        "ENCBOX_NONCE": NONCE_B64,
        "ENCBOX_PASSWORD": "Swordfish",
        "ENCBOX_LOG_LEVEL": "debug",
    }
    settings = load_settings(env=env)

    assert settings.key == base64.b64decode(KEY_B64)
    assert settings.nonce == base64.b64decode(NONCE_B64)
    assert settings.password == "Swordfish"
    assert settings.log_level == logging.DEBUG


def test_explicit_values_override_env():
    other_key = base64.b64encode(b"\x01" * 16).decode()
    settings = load_settings(env={"ENCBOX_KEY": KEY_B64}, key=other_key)
    assert settings.key == b"\x01" * 16


def test_repr_hides_secrets():
    settings = load_settings(env={"ENCBOX_KEY": KEY_B64, "ENCBOX_PASSWORD": "Swordfish"})
    text = repr(settings)
    assert "Swordfish" not in text
    assert "key=" not in text


@pytest.mark.parametrize(
    "env, message",
    [
        ({"ENCBOX_KEY": "not base64!"}, "key is not valid base64"),
        ({"ENCBOX_KEY": base64.b64encode(b"\x00" * 24).decode()}, "key must decode to 16 or 32 bytes"),
        ({"ENCBOX_NONCE": base64.b64encode(b"\x00" * 16).decode()}, "nonce must decode to 12 bytes"),
        ({"ENCBOX_LOG_LEVEL": "LOUD"}, "unknown log level"),
    ],
)
def test_malformed_settings(env, message):
    with pytest.raises(ConfigurationError, match=message):
        load_settings(env=env)


def test_require_key_and_nonce():
    settings = Settings()
    with pytest.raises(ConfigurationError, match="ENCBOX_KEY"):
        settings.require_key()
    with pytest.raises(ConfigurationError, match="ENCBOX_NONCE"):
        settings.require_nonce()

"""
Command line for encbox.

Examples:

    encbox keygen --size 32 --show-salt
    encbox nonce
    ENCBOX_KEY=... ENCBOX_NONCE=... encbox encrypt "s3cret"
    encbox --key ... --nonce ... decrypt "ENC(...)"
    encbox check "ENC(...)"
    encbox decrypt-file settings.json
"""

from __future__ import annotations

import argparse
import getpass
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from encbox.core.exceptions import EncboxError, EncodingError, FormatError
from encbox.security import (
    base64_decode,
    base64_encode,
    decrypt_string,
    decrypt_values,
    derive_key_with_salt,
    encrypt_string,
    is_marked,
    nonce,
)
from encbox.frontend.cli.clipboard import copy_to_clipboard
from encbox.frontend.cli.context import Settings, load_settings
from encbox.frontend.cli.logging_config import configure_logging


logger = logging.getLogger(__name__)


def _cmd_keygen(args: argparse.Namespace, settings: Settings) -> str:
    password = settings.password
    if password is None:
        password = getpass.getpass("Password: ")
    salt = base64_decode(args.salt) if args.salt else None
    derived = derive_key_with_salt(password, args.size, salt)
    if not args.show_salt:
        return base64_encode(derived.key)
    return f"key: {base64_encode(derived.key)}\nsalt: {base64_encode(derived.salt)}"


def _cmd_nonce(args: argparse.Namespace, settings: Settings) -> str:
    return base64_encode(nonce())


def _cmd_encrypt(args: argparse.Namespace, settings: Settings) -> str:
    return encrypt_string(settings.require_key(), settings.require_nonce(), args.value)


def _cmd_decrypt(args: argparse.Namespace, settings: Settings) -> str:
    return decrypt_string(settings.require_key(), settings.require_nonce(), args.value)


def _cmd_decrypt_file(args: argparse.Namespace, settings: Settings) -> str:
    try:
        document = json.loads(Path(args.path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise EncodingError(f"{args.path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise FormatError(f"{args.path} is not valid JSON: {exc}") from exc
    decrypted = decrypt_values(document, settings.require_key(), settings.require_nonce())
    return json.dumps(decrypted, indent=2, ensure_ascii=False)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="encbox",
        description="Derive keys and encrypt/decrypt ENC(...) values with AES-GCM.",
    )
    parser.add_argument(
        "--key",
        default=None,
        help="Base64 AES key, 16 or 32 bytes (default: $ENCBOX_KEY)",
    )
    parser.add_argument(
        "--nonce",
        default=None,
        help="Base64 12-byte nonce (default: $ENCBOX_NONCE)",
    )
    parser.add_argument(
        "--copy",
        action="store_true",
        help="Also copy the output to the system clipboard",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    keygen = sub.add_parser("keygen", help="Derive a key from a password (scrypt)")
    keygen.add_argument(
        "--size",
        type=int,
        choices=(16, 32),
        default=32,
        help="Key size in bytes (default: 32)",
    )
    keygen.add_argument(
        "--salt",
        default=None,
        help="Base64 8-byte salt to re-derive an earlier key (default: random)",
    )
    keygen.add_argument(
        "--show-salt",
        action="store_true",
        help="Print the salt as well so the key can be derived again",
    )
    keygen.set_defaults(handler=_cmd_keygen)

    sub.add_parser("nonce", help="Print a random 12-byte nonce").set_defaults(handler=_cmd_nonce)

    encrypt = sub.add_parser("encrypt", help="Encrypt a value into ENC(...) form")
    encrypt.add_argument("value")
    encrypt.set_defaults(handler=_cmd_encrypt)

    decrypt = sub.add_parser("decrypt", help="Decrypt an ENC(...) value")
    decrypt.add_argument("value")
    decrypt.set_defaults(handler=_cmd_decrypt)

    check = sub.add_parser(
        "check", help="Exit 0 if the value is in ENC(...) form, 1 otherwise (prints nothing)"
    )
    check.add_argument("value")

    decrypt_file = sub.add_parser(
        "decrypt-file", help="Decrypt every ENC(...) value in a JSON document"
    )
    decrypt_file.add_argument("path")
    decrypt_file.set_defaults(handler=_cmd_decrypt_file)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.command == "check":
        if args.copy:
            parser.error("--copy cannot be used with check")
        return 0 if is_marked(args.value) else 1

    try:
        settings = load_settings(key=args.key, nonce=args.nonce)
        configure_logging(logging.DEBUG if args.verbose else settings.log_level)
        logger.debug("running %s", args.command)
        output = args.handler(args, settings)
        if args.copy:
            copy_to_clipboard(output)
    except (EncboxError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())

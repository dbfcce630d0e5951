"""Clipboard utilities for the CLI frontend.

Uses pyperclip for cross-platform clipboard access.
"""

from __future__ import annotations

import pyperclip

from encbox.core.exceptions import ClipboardError


def copy_to_clipboard(text: str) -> None:
    """Copy a command result (e.g. an ENC(...) value) to the system clipboard.

    Raises:
        ClipboardError: If clipboard access fails.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"could not copy to clipboard: {exc}") from exc

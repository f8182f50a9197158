"""Clipboard sink for the rendered prompt."""

from __future__ import annotations

import pyperclip


class ClipboardError(Exception):
    """Raised when the prompt could not be placed on the clipboard."""


def copy_to_clipboard(text: str) -> None:
    """Copy *text* verbatim. Raises ClipboardError on any failure."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"could not copy to clipboard: {exc}") from exc

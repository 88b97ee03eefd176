"""Clipboard backends for copying review sections outside the browser."""

from __future__ import annotations


class Clipboard:
    """Interface for clipboard backends.

    The Streamlit page copies in the browser (see ``utils/copy_button.py``) and
    reports the outcome to ``ReviewRenderer.report_copy``; a backend is only
    needed when the renderer is driven without a browser.
    """

    def copy(self, text: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError


__all__ = ["Clipboard"]

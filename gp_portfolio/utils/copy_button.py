"""Browser-side copy button that reports whether the clipboard write worked."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import streamlit as st
import streamlit.components.v1 as components

FRONTEND_DIR = Path(__file__).parent / "copy_button_frontend"
DENIED_MESSAGE = "Clipboard access was denied"

_copy_button = components.declare_component("copy_button", path=str(FRONTEND_DIR))


@dataclass
class CopyResult:
    ok: bool
    error: Optional[str] = None


def parse_result(value: object) -> Optional[CopyResult]:
    if not isinstance(value, dict):
        return None
    if value.get("ok"):
        return CopyResult(ok=True)
    return CopyResult(ok=False, error=value.get("error") or DENIED_MESSAGE)


def copy_button(text: str, key: str, label: str = "Copy") -> Optional[CopyResult]:
    """Render the button; return the outcome of a click once, else None.

    The component keeps its last value across reruns, so each click carries a
    nonce and a nonce is only reported the first time it is seen.
    """
    value = _copy_button(text=text, label=label, key=key, default=None)
    if not isinstance(value, dict):
        return None

    handled_key = f"{key}_handled_nonce"
    nonce = value.get("nonce")
    if st.session_state.get(handled_key) == nonce:
        return None
    st.session_state[handled_key] = nonce
    return parse_result(value)


__all__ = ["CopyResult", "copy_button", "parse_result", "DENIED_MESSAGE"]

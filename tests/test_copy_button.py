"""Unit tests for the browser copy button wrapper (component mocked)."""

from __future__ import annotations

from unittest import mock

import pytest

from gp_portfolio.utils.copy_button import DENIED_MESSAGE, CopyResult, copy_button, parse_result


class TestParseResult:
    def test_variants(self):
        assert parse_result(None) is None
        assert parse_result("ok") is None
        assert parse_result({"ok": True, "nonce": 1}) == CopyResult(ok=True)
        assert parse_result({"ok": False, "error": "NotAllowedError"}) == CopyResult(
            ok=False, error="NotAllowedError"
        )
        assert parse_result({"ok": False}) == CopyResult(ok=False, error=DENIED_MESSAGE)


@pytest.fixture
def component():
    with mock.patch("gp_portfolio.utils.copy_button._copy_button") as patched_component, \
            mock.patch("gp_portfolio.utils.copy_button.st") as patched_st:
        patched_st.session_state = {}
        yield patched_component


class TestCopyButton:
    def test_no_click_returns_none(self, component):
        component.return_value = None
        assert copy_button("text", key="copy_1_reflection") is None

    def test_passes_text_to_component(self, component):
        component.return_value = None
        copy_button("Reflection text", key="copy_1_reflection")
        component.assert_called_once_with(
            text="Reflection text", label="Copy", key="copy_1_reflection", default=None
        )

    def test_each_click_is_reported_once(self, component):
        component.return_value = {"ok": True, "nonce": 1}
        assert copy_button("text", key="copy_1_reflection") == CopyResult(ok=True)
        # Same value on the following rerun.
        assert copy_button("text", key="copy_1_reflection") is None

        component.return_value = {"ok": False, "error": "denied", "nonce": 2}
        assert copy_button("text", key="copy_1_reflection") == CopyResult(ok=False, error="denied")

"""Holds the generated review and the local edits made to it."""

from __future__ import annotations

from typing import List, Optional, Tuple

from gp_portfolio.core.errors import ClipboardError
from gp_portfolio.core.notifications import NotificationCenter
from gp_portfolio.generators import pdf_generator
from gp_portfolio.utils.clipboard import Clipboard
from gp_portfolio.utils.logger import logger
from gp_portfolio.utils.state import ReviewContent

NO_CLIPBOARD = "Clipboard is not available"


class ReviewRenderer:
    def __init__(self, notifier: NotificationCenter, clipboard: Optional[Clipboard] = None):
        self.notifier = notifier
        self.clipboard = clipboard
        self.content: Optional[ReviewContent] = None
        # Bumped on every load so widget keys from an older review are not reused.
        self.revision = 0

    @property
    def has_content(self) -> bool:
        return self.content is not None

    def load(self, content: ReviewContent) -> None:
        self.content = content
        self.revision += 1

    def sections(self) -> List[Tuple[str, str, str]]:
        if self.content is None:
            return []
        return self.content.sections()

    def label_for(self, section_key: str) -> str:
        for key, label, _ in self.sections():
            if key == section_key:
                return label
        raise KeyError(section_key)

    def text_for(self, section_key: str) -> str:
        if self.content is None:
            raise KeyError(section_key)
        return self.content.get_section(section_key)

    def edit_field(self, section_key: str, new_text: str) -> None:
        if self.content is None:
            raise KeyError(section_key)
        self.content.set_section(section_key, new_text)

    def copy(self, section_key: str) -> bool:
        """Copy through the configured backend and notify the outcome."""
        text = self.text_for(section_key)
        try:
            if self.clipboard is None:
                raise ClipboardError(NO_CLIPBOARD)
            self.clipboard.copy(text)
        except ClipboardError as exc:
            return self.report_copy(section_key, str(exc))
        return self.report_copy(section_key)

    def report_copy(self, section_key: str, error: Optional[str] = None) -> bool:
        """Notify the outcome of a copy made elsewhere, e.g. in the browser."""
        label = self.label_for(section_key)
        if error:
            logger.warning("Copy of {} failed: {}", label, error)
            self.notifier.error(f"Could not copy {label}: {error}")
            return False
        self.notifier.success(f"{label} copied to clipboard", title="Copied!")
        return True

    def to_markdown(self) -> str:
        if self.content is None:
            return ""
        return self.content.as_markdown()

    def to_pdf(self, title: str = "Case Review") -> bytes:
        if self.content is None:
            return b""
        return pdf_generator.review_to_pdf_bytes(self.content, title=title)


__all__ = ["ReviewRenderer", "NO_CLIPBOARD"]

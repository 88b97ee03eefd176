"""Wires the form, the review and the notifier into one page session."""

from __future__ import annotations

from typing import Optional

from gp_portfolio.core.generation_client import GenerationClient, create_client
from gp_portfolio.core.notifications import NotificationCenter
from gp_portfolio.core.review_renderer import ReviewRenderer
from gp_portfolio.core.selection_form import SelectionForm
from gp_portfolio.utils.clipboard import Clipboard


class Orchestrator:
    def __init__(
        self,
        client: Optional[GenerationClient] = None,
        clipboard: Optional[Clipboard] = None,
        notifier: Optional[NotificationCenter] = None,
    ):
        self.notifier = notifier or NotificationCenter()
        self.review = ReviewRenderer(self.notifier, clipboard=clipboard)
        self.form = SelectionForm(
            client or create_client(),
            self.notifier,
            on_review=self.review.load,
        )

    def generate(self) -> bool:
        return self.form.submit() is not None


__all__ = ["Orchestrator"]

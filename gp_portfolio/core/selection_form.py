"""Case description and capability selection form."""

from __future__ import annotations

from typing import Callable, List, Optional

from gp_portfolio.core.errors import (
    GenerationError,
    SelectionLimitExceeded,
    ValidationError,
)
from gp_portfolio.core.generation_client import GenerationClient
from gp_portfolio.core.notifications import NotificationCenter
from gp_portfolio.utils import validators
from gp_portfolio.utils.logger import logger
from gp_portfolio.utils.state import MAX_CAPABILITIES, CaseInput, ReviewContent

SELECTION_LIMIT_MESSAGE = f"You can select up to {MAX_CAPABILITIES} capabilities"
SUCCESS_MESSAGE = "Case review generated"


class SelectionForm:
    """Collects a CaseInput and submits it to the generation client.

    Idle -> Generating -> Idle. While ``generating`` is set further submits
    are ignored; a successful result is handed to ``on_review``.
    """

    def __init__(
        self,
        client: GenerationClient,
        notifier: NotificationCenter,
        on_review: Optional[Callable[[ReviewContent], None]] = None,
    ):
        self.client = client
        self.notifier = notifier
        self.on_review = on_review
        self.case = CaseInput()
        self.generating = False

    @property
    def description(self) -> str:
        return self.case.description

    @property
    def selected(self) -> List[str]:
        return list(self.case.capabilities)

    @property
    def can_submit(self) -> bool:
        return (
            not self.generating
            and not validators.is_blank(self.case.description)
            and bool(self.case.capabilities)
        )

    def set_description(self, text: str) -> None:
        self.case.description = text

    def toggle_capability(self, name: str) -> bool:
        """Add or remove ``name``. Returns False when the toggle was refused."""
        selected = self.case.capabilities
        if name in selected:
            selected.remove(name)
            return True
        try:
            if not validators.is_known_capability(name):
                raise ValidationError(f"Unknown capability: {name}", field="capabilities")
            if len(selected) >= MAX_CAPABILITIES:
                raise SelectionLimitExceeded(SELECTION_LIMIT_MESSAGE)
        except (ValidationError, SelectionLimitExceeded) as exc:
            self.notifier.error(str(exc))
            return False
        selected.append(name)
        return True

    def submit(self) -> Optional[ReviewContent]:
        if self.generating:
            return None

        try:
            validators.validate_case_input(self.case)
        except ValidationError as exc:
            self.notifier.error(str(exc))
            return None

        snapshot = CaseInput(
            description=self.case.description,
            capabilities=list(self.case.capabilities),
        )
        self.generating = True
        try:
            review = self.client.generate(snapshot)
        except GenerationError as exc:
            logger.warning("Generation failed: {}", exc)
            self.notifier.error(str(exc))
            return None
        finally:
            self.generating = False

        if self.on_review is not None:
            self.on_review(review)
        self.notifier.success(SUCCESS_MESSAGE)
        return review


__all__ = ["SelectionForm", "SELECTION_LIMIT_MESSAGE", "SUCCESS_MESSAGE"]

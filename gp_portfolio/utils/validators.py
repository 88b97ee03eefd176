"""Validation helpers for the case form."""

from __future__ import annotations

from typing import Optional

from gp_portfolio.core.errors import ValidationError
from gp_portfolio.utils.state import (
    CAPABILITIES,
    MAX_CAPABILITIES,
    MIN_CAPABILITIES,
    CaseInput,
)

DESCRIPTION_REQUIRED = "Please enter a case description"
CAPABILITIES_REQUIRED = f"Please select {MIN_CAPABILITIES}-{MAX_CAPABILITIES} capabilities"


def is_blank(text: Optional[str]) -> bool:
    if not text:
        return True
    return not text.strip()


def is_capability_count_valid(count: int) -> bool:
    return MIN_CAPABILITIES <= count <= MAX_CAPABILITIES


def is_known_capability(name: str) -> bool:
    return name in CAPABILITIES


def validate_case_input(case: CaseInput) -> None:
    """Raise ValidationError naming the first missing field."""
    if is_blank(case.description):
        raise ValidationError(DESCRIPTION_REQUIRED, field="description")
    if not is_capability_count_valid(len(case.capabilities)):
        raise ValidationError(CAPABILITIES_REQUIRED, field="capabilities")


__all__ = [
    "DESCRIPTION_REQUIRED",
    "CAPABILITIES_REQUIRED",
    "is_blank",
    "is_capability_count_valid",
    "is_known_capability",
    "validate_case_input",
]

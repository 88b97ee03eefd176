"""Error taxonomy. Every error ends up as a user-facing notification."""

from __future__ import annotations

from typing import Optional


class PortfolioError(Exception):
    """Base class for all errors raised by the portfolio generator."""


class ValidationError(PortfolioError):
    """Form input failed the pre-submission checks."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class SelectionLimitExceeded(PortfolioError):
    """An extra capability was picked while the selection was already full."""


class GenerationError(PortfolioError):
    """The endpoint answered with a non-2xx status or an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(GenerationError):
    """The request never got a response (connection refused, DNS, reset...)."""


class ClipboardError(PortfolioError):
    """Writing to the clipboard was denied or is unsupported here."""


__all__ = [
    "PortfolioError",
    "ValidationError",
    "SelectionLimitExceeded",
    "GenerationError",
    "NetworkError",
    "ClipboardError",
]

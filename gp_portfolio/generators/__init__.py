"""Exports for generator modules."""

from . import pdf_generator

__all__ = ["pdf_generator"]

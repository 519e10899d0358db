"""Utility helpers for the :mod:`applicable` package."""

from .logging import CallLogger, setup_logging

__all__ = ["CallLogger", "setup_logging"]

"""Logging helpers for consistent instrumentation."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, TypeVar

from rich.console import Console
from rich.logging import RichHandler

F = TypeVar("F", bound=Callable[..., object])

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", rich_tracebacks: bool = True) -> None:
    """Configure the root logger with optional rich tracebacks."""

    console = Console()
    handler = RichHandler(console=console, rich_tracebacks=rich_tracebacks)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


@dataclass
class CallLogger:
    """Count invocations of functions handed to the apply helpers."""

    calls: int = 0
    extras: Dict[str, int] = field(default_factory=dict)

    def count(self, label: str) -> int:
        return self.extras.get(label, 0)

    def track(self, fn: F, label: Optional[str] = None) -> F:
        """Wrap ``fn`` so each call is counted and logged at DEBUG.

        Arguments, return value and exceptions pass through unchanged.
        """

        name = label or getattr(fn, "__qualname__", None) or repr(fn)

        @functools.wraps(fn)
        def _tracked(*args, **kwargs):
            self.calls += 1
            self.extras[name] = self.extras.get(name, 0) + 1
            logger.debug("call #%d to %s", self.count(name), name)
            return fn(*args, **kwargs)

        return _tracked  # type: ignore[return-value]


__all__ = ["setup_logging", "CallLogger"]

"""Shared typing aliases for the applicable package."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")
P = TypeVar("P")

Mutator = Callable[[T], object]
ParamMutator = Callable[[T, P], object]

__all__ = ["T", "P", "Mutator", "ParamMutator"]

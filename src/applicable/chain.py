"""Method-chaining front ends over :mod:`applicable.functional`."""

from __future__ import annotations

from typing import Generic, Iterable

from .functional import apply, apply_with_param, apply_with_params
from .typing import Mutator, P, ParamMutator, T


class Applicable(Generic[T]):
    """Hold a value so the apply helpers can be chained as methods.

    Works for any object, including third-party types that cannot be
    subclassed::

        path = (
            Applicable(PathBuf("/repo"))
            .apply(lambda it: it.push("src"))
            .apply_with_param(PathBuf.push, "lib.rs")
            .unwrap()
        )
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def apply(self, fn: Mutator[T]) -> Applicable[T]:
        apply(self._value, fn)
        return self

    def apply_with_param(self, fn: ParamMutator[T, P], param: P) -> Applicable[T]:
        apply_with_param(self._value, fn, param)
        return self

    def apply_with_params(self, fn: ParamMutator[T, P], params: Iterable[P]) -> Applicable[T]:
        apply_with_params(self._value, fn, params)
        return self

    def unwrap(self) -> T:
        """Return the held value, the same object the wrapper was built with."""

        return self._value

    def __repr__(self) -> str:
        return f"Applicable({self._value!r})"


class ApplicableMixin:
    """Give a class ``apply``-style methods that return ``self``."""

    def apply(self: T, fn: Mutator[T]) -> T:
        return apply(self, fn)

    def apply_with_param(self: T, fn: ParamMutator[T, P], param: P) -> T:
        return apply_with_param(self, fn, param)

    def apply_with_params(self: T, fn: ParamMutator[T, P], params: Iterable[P]) -> T:
        return apply_with_params(self, fn, params)


__all__ = ["Applicable", "ApplicableMixin"]

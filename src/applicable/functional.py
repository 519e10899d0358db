"""Apply caller-supplied functions to a value inline and hand the value back.

Each helper invokes the function purely for its side effects on ``value``
and returns the very same object, so a mutation can sit inside an
expression instead of needing a temporary name and a separate statement::

    >>> items = apply_with_params([], list.append, ["a", "b"])
    >>> items
    ['a', 'b']

Whatever the supplied function returns is discarded, and whatever it
raises propagates to the caller untouched.
"""

from __future__ import annotations

from typing import Iterable

from .typing import Mutator, P, ParamMutator, T


def apply(value: T, fn: Mutator[T]) -> T:
    """Call ``fn(value)`` once and return ``value``.

    Parameters
    ----------
    value:
        Object handed to ``fn``. It is returned as-is (same identity).
    fn:
        Callable taking ``value``. Its return value is ignored.
    """

    fn(value)
    return value


def apply_with_param(value: T, fn: ParamMutator[T, P], param: P) -> T:
    """Call ``fn(value, param)`` once and return ``value``.

    Lets an existing two-argument callable such as ``list.append`` be
    passed directly instead of wrapping it in a lambda.
    """

    fn(value, param)
    return value


def apply_with_params(value: T, fn: ParamMutator[T, P], params: Iterable[P]) -> T:
    """Call ``fn(value, param)`` for each element of ``params`` in order.

    Every call sees the effect of the previous ones. An empty ``params``
    leaves ``value`` untouched. If a call raises, the remaining elements
    are neither pulled from ``params`` nor applied.
    """

    for param in params:
        fn(value, param)
    return value


__all__ = ["apply", "apply_with_param", "apply_with_params"]

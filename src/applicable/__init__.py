"""applicable
=================

Apply a mutating function to a value inside an expression and get the same
value back, so setup steps can be chained instead of spread across
statements::

    from applicable import apply, apply_with_params

    dog = apply(Dog(), lambda it: setattr(it, "size", "Big"))
    items = apply_with_params([], list.append, ["src", "lib.rs"])

:class:`Applicable` wraps any value for method chaining and
:class:`ApplicableMixin` adds the same methods to classes you own.
"""

__version__ = "0.1.0"

from .chain import Applicable, ApplicableMixin
from .functional import apply, apply_with_param, apply_with_params

__all__ = [
    "__version__",
    "apply",
    "apply_with_param",
    "apply_with_params",
    "Applicable",
    "ApplicableMixin",
]

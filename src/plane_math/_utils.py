"""
.. Utilities
"""

from __future__ import annotations

import math
import random as _random
from collections.abc import Callable
from enum import Enum, auto
from typing import Generic

from typing_extensions import Any, TypeVar, no_type_check

# Type Variables and Aliases

T = TypeVar("T")


# Enumerations


class RoundingMode(Enum):
    """Tie-breaking strategies for the ``round()`` methods of all geometry types."""

    HALF_UP = auto()
    """Ties are rounded towards positive infinity i.e ``round(-2.5) == -2``
    and ``round(2.5) == 3``.

    :meta hide-value:
    """

    HALF_EVEN = auto()
    """Ties are rounded to the nearest even integer, as with the built-in
    :py:func:`round`.

    :meta hide-value:
    """


# Decorator Classes


class ClassInstanceMethod(Generic[T]):
    """A method which when invoked via the owner, behaves like a class method
    and when invoked via an instance, behaves like an instance method.

    The class-level implementation is the decorated function; the instance-level
    one is registered with :py:meth:`instancemethod`::

        @ClassInstanceMethod
        def equals(cls, a, b): ...

        @equals.instancemethod
        def equals(self, other): ...
    """

    def __init__(
        self,
        f_owner: Callable[..., T],
        f_instance: Callable[..., T] | None = None,
    ) -> None:
        self.f_owner = f_owner
        self.f_instance = f_instance
        self.__doc__ = f_owner.__doc__
        self.__name__ = f_owner.__name__

    @no_type_check
    def __get__(self, instance, owner=None):
        if instance is not None:
            return self.f_instance.__get__(instance, owner)
        return self.f_owner.__get__(owner, type(owner))

    def instancemethod(self, function: Callable[..., T]) -> ClassInstanceMethod[T]:
        return type(self)(self.f_owner, function)


# Non-decorator Functions


def arg_type_error(arg: str, value: Any, got_extra: str = "") -> TypeError:
    return TypeError(
        f"Invalid type for {arg!r} (got: {type(value).__qualname__}; {got_extra})"
        if got_extra
        else f"Invalid type for {arg!r} (got: {type(value).__qualname__})"
    )


def arg_value_error_msg(msg: str, value: Any, got_extra: str = "") -> ValueError:
    return ValueError(
        f"{msg} (got: {value!r}; {got_extra})"
        if got_extra
        else f"{msg} (got: {value!r})"
    )


def format_number(value: float) -> str:
    """Formats a number the way display strings expect it.

    Integral floats lose their fractional part (``5.0`` -> ``"5"``); anything else,
    including ``nan`` and the infinities, is formatted with :py:func:`str`.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def divide(numerator: float, denominator: float) -> float:
    """True division with IEEE 754 semantics for a zero denominator.

    Returns ``±inf`` for a non-zero numerator and ``nan`` for ``0 / 0``, instead
    of raising :py:class:`ZeroDivisionError`.
    """
    if denominator:
        return numerator / denominator
    if not numerator or math.isnan(numerator):
        return math.nan
    # Signed zeros matter here e.g `1 / -0.0 == -inf`
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ceil_number(value: float) -> float:
    return math.ceil(value) if math.isfinite(value) else value


def floor_number(value: float) -> float:
    return math.floor(value) if math.isfinite(value) else value


def round_number(value: float) -> float:
    """Rounds *value* to the nearest integer, using the active rounding mode.

    See :py:func:`plane_math.set_rounding_mode`.

    Non-finite values are returned as-is.
    """
    if not math.isfinite(value):
        return value
    if _rounding_mode is RoundingMode.HALF_UP:
        # `floor(value + 0.5)` is off for e.g `0.49999999999999994` and `2**52 + 1`
        floor = math.floor(value)
        return floor + 1 if value - floor >= 0.5 else floor
    return round(value)


def get_rng() -> _random.Random:
    """Returns the active random source."""
    return _rng or _default_rng


_default_rng = _random.Random()
_rng: _random.Random | None = None
_rounding_mode = RoundingMode.HALF_UP

"""
.. The Size API
"""

from __future__ import annotations

__all__ = ("Size",)

from typing import Iterator, Optional, Sequence

from typing_extensions import Self

from ._utils import (
    ClassInstanceMethod,
    arg_value_error_msg,
    ceil_number,
    divide,
    floor_number,
    format_number,
    round_number,
)
from .coordinate import Coordinate
from .exceptions import InvalidSizeError


class Size:
    """The dimensions of a rectangular region.

    Args:
        width: The horizontal dimension
        height: The vertical dimension

    NOTE:
        * A dimension may be zero or negative; no dimension is validated at
          construction.
        * Instances are **mutable**. Methods that modify an instance return the
          same instance, to allow chaining.
        * Instances with equal fields compare equal but are **not** hashable.
        * No locking is done; mutating an instance shared across threads must be
          synchronized by the caller.
    """

    # Class Attributes =========================================================

    __slots__ = ("width", "height")

    # Instance Attributes ======================================================

    width: float
    """The horizontal dimension"""

    height: float
    """The vertical dimension"""

    # Special Methods ==========================================================

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def __copy__(self) -> Size:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.width
        yield self.height

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width!r}, height={self.height!r})"

    def __str__(self) -> str:
        return f"({format_number(self.width)} x {format_number(self.height)})"

    # Constructors =============================================================

    @classmethod
    def from_coordinate(cls, coordinate: Coordinate) -> Self:
        """Creates a new instance with the dimensions ``(coordinate.x, coordinate.y)``.

        The components are reinterpreted as-is, there is no unit conversion.
        """
        return cls(coordinate.x, coordinate.y)

    @classmethod
    def from_json(cls, values: Sequence[float]) -> Self:
        """Creates a new instance from the form returned by :py:meth:`to_json`.

        Args:
            values: A sequence ``[width, height]``.

        Raises:
            ValueError: *values* is not of length 2.
        """
        if len(values) != 2:
            raise arg_value_error_msg("Expected a sequence of length 2", values)

        return cls(*values)

    # Public Methods ===========================================================

    def clone(self) -> Self:
        return type(self)(self.width, self.height)

    def to_coordinate(self) -> Coordinate:
        """Returns the coordinate ``(width, height)``."""
        return Coordinate(self.width, self.height)

    def to_json(self) -> list[float]:
        """Returns ``[width, height]``."""
        return [self.width, self.height]

    @ClassInstanceMethod
    def equals(cls, a: Optional[Size], b: Optional[Size]) -> bool:
        """Compares sizes for equality.

        Returns:
            ``True`` if the sizes are identical, both ``None`` or have exactly
            equal dimensions. Otherwise, ``False``.

        When invoked via an instance, takes only the other size.
        """
        if a is b:
            return True
        if a is None or b is None:
            return False
        return a.width == b.width and a.height == b.height

    @equals.instancemethod
    def equals(self, other: Optional[Size]) -> bool:
        return type(self).equals(self, other)

    def get_longest(self) -> float:
        return max(self.width, self.height)

    def get_shortest(self) -> float:
        return min(self.width, self.height)

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return (self.width + self.height) * 2

    def aspect_ratio(self) -> float:
        """Returns ``width / height``.

        A zero height yields an infinity (or ``nan`` if the width is also zero).
        """
        return divide(self.width, self.height)

    def is_empty(self) -> bool:
        """Returns ``True`` if the area is exactly zero.

        A negative area is **not** considered empty.
        """
        return not self.area()

    def fits_inside(self, target: Size) -> bool:
        """Checks if this size fits inside another.

        Returns:
            ``True`` if neither dimension exceeds the corresponding one of
            *target*. Otherwise, ``False``.
        """
        return self.width <= target.width and self.height <= target.height

    def ceil(self) -> Self:
        self.width = ceil_number(self.width)
        self.height = ceil_number(self.height)
        return self

    def floor(self) -> Self:
        self.width = floor_number(self.width)
        self.height = floor_number(self.height)
        return self

    def round(self) -> Self:
        """Rounds both dimensions to the nearest integer values.

        See :py:func:`~plane_math.set_rounding_mode`.
        """
        self.width = round_number(self.width)
        self.height = round_number(self.height)
        return self

    def scale(self, sx: float, sy: Optional[float] = None) -> Self:
        """Scales the dimensions.

        Args:
            sx: The horizontal scale factor.
            sy: The vertical scale factor. If ``None``, *sx* is used.
        """
        self.width *= sx
        self.height *= sx if sy is None else sy
        return self

    def scale_to_fit(self, target: Size) -> Self:
        """Uniformly scales the size to fit inside the dimensions of another.

        Args:
            target: The size to fit into.

        Raises:
            InvalidSizeError: A dimension of either size is not positive.

        The aspect ratio is preserved. The result touches *target* on the limiting
        dimension i.e its width equals that of *target* if this size is relatively
        wider, otherwise its height equals that of *target*.
        """
        for name, size in (("size", self), ("target", target)):
            if not size.width > 0 < size.height:
                raise InvalidSizeError(
                    f"Both dimensions of {name!r} must be positive (got: {size!r})"
                )

        return self.scale(
            target.width / self.width
            if self.aspect_ratio() > target.aspect_ratio()
            else target.height / self.height
        )

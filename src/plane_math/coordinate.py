"""
.. The Coordinate API
"""

from __future__ import annotations

__all__ = ("Coordinate",)

import math
from typing import Iterator, Optional, Sequence

from typing_extensions import Self

from ._utils import (
    ClassInstanceMethod,
    arg_value_error_msg,
    ceil_number,
    divide,
    floor_number,
    format_number,
    get_rng,
    round_number,
)


class Coordinate:
    """A two-dimensional point or vector.

    Args:
        x: The horizontal component.
        y: The vertical component.

    The same type represents both absolute positions and free vectors; all vector
    operations (rotation, dot product, magnitude, ...) apply to either.

    NOTE:
        * The y axis points **downwards** i.e towards the bottom of the plane.
        * Instances are **mutable**. Methods that modify an instance return the
          same instance, to allow chaining.
        * Instances with equal fields compare equal but are **not** hashable.
        * No locking is done; mutating an instance shared across threads must be
          synchronized by the caller.
    """

    # Class Attributes =========================================================

    __slots__ = ("x", "y")

    # Instance Attributes ======================================================

    x: float
    """The horizontal component"""

    y: float
    """The vertical component"""

    # Special Methods ==========================================================

    def __init__(self, x: float = 0, y: float = 0) -> None:
        self.x = x
        self.y = y

    def __copy__(self) -> Coordinate:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r})"

    def __str__(self) -> str:
        return f"({format_number(self.x)}, {format_number(self.y)})"

    # Constructors =============================================================

    @classmethod
    def from_json(cls, values: Sequence[float]) -> Self:
        """Creates a new instance from the form returned by :py:meth:`to_json`.

        Args:
            values: A sequence ``[x, y]``.

        Raises:
            ValueError: *values* is not of length 2.
        """
        if len(values) != 2:
            raise arg_value_error_msg("Expected a sequence of length 2", values)

        return cls(*values)

    @classmethod
    def random_unit(cls) -> Self:
        """Returns a random unit-length vector."""
        angle = get_rng().random() * math.pi * 2
        return cls(math.cos(angle), math.sin(angle))

    @classmethod
    def random(cls) -> Self:
        """Returns a random vector inside the unit disc.

        The radius is the square root of a uniform draw, so points are uniformly
        distributed over the disc's area.
        """
        rng = get_rng()
        magnitude = math.sqrt(rng.random())
        angle = rng.random() * math.pi * 2
        return cls(math.cos(angle) * magnitude, math.sin(angle) * magnitude)

    @classmethod
    def random_positive(cls) -> Self:
        """Returns a random vector with each component uniform in ``[0, 1)``."""
        rng = get_rng()
        return cls(rng.random(), rng.random())

    # Public Methods ===========================================================

    def clone(self) -> Self:
        """Returns a new copy of the coordinate."""
        return type(self)(self.x, self.y)

    def to_json(self) -> list[float]:
        """Returns ``[x, y]``."""
        return [self.x, self.y]

    @ClassInstanceMethod
    def equals(cls, a: Optional[Coordinate], b: Optional[Coordinate]) -> bool:
        """Compares coordinates for equality.

        Args:
            a: A coordinate.
            b: A coordinate.

        Returns:
            ``True`` if the coordinates are identical, both ``None`` or have
            exactly equal components. Otherwise, ``False``.

        When invoked via an instance, takes only the other coordinate.
        """
        if a is b:
            return True
        if a is None or b is None:
            return False
        return a.x == b.x and a.y == b.y

    @equals.instancemethod
    def equals(self, other: Optional[Coordinate]) -> bool:
        return type(self).equals(self, other)

    @staticmethod
    def distance(a: Coordinate, b: Coordinate) -> float:
        """Returns the Euclidean distance between two coordinates."""
        dx = a.x - b.x
        dy = a.y - b.y
        return math.sqrt(dx * dx + dy * dy)

    @staticmethod
    def squared_distance(a: Coordinate, b: Coordinate) -> float:
        """Returns the squared distance between two coordinates.

        Useful for comparisons when the actual distance is not required.
        """
        dx = a.x - b.x
        dy = a.y - b.y
        return dx * dx + dy * dy

    @ClassInstanceMethod
    def magnitude(cls, a: Coordinate) -> float:
        """Returns the distance of a coordinate from the origin.

        When invoked via an instance, takes no argument and measures the instance.
        """
        return math.sqrt(a.x * a.x + a.y * a.y)

    @magnitude.instancemethod
    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def squared_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    @staticmethod
    def azimuth(a: Coordinate) -> float:
        """Returns the angle from the origin to a coordinate.

        Returns:
            The angle, in degrees within ``[0, 360)``, clockwise from the positive
            x axis (with the y axis pointing downwards) to *a*.
        """
        angle = math.degrees(math.atan2(a.y, a.x)) % 360
        # `-1e-17 % 360` gives `360.0`
        return angle if angle < 360 else 0.0

    @staticmethod
    def difference(a: Coordinate, b: Coordinate) -> Coordinate:
        """Returns ``a - b`` as a new coordinate."""
        return Coordinate(a.x - b.x, a.y - b.y)

    @staticmethod
    def sum(a: Coordinate, b: Coordinate) -> Coordinate:
        """Returns ``a + b`` as a new coordinate."""
        return Coordinate(a.x + b.x, a.y + b.y)

    @staticmethod
    def dot(a: Coordinate, b: Coordinate) -> float:
        """Returns the dot product of two vectors."""
        return a.x * b.x + a.y * b.y

    @staticmethod
    def lerp(a: Coordinate, b: Coordinate, t: float) -> Coordinate:
        """Linearly interpolates between two vectors.

        Args:
            a: The value at ``t == 0``.
            b: The value at ``t == 1``.
            t: The interpolation factor. Not clamped to ``[0, 1]``.

        Returns:
            A new coordinate.
        """
        return Coordinate(a.x + t * (b.x - a.x), a.y + t * (b.y - a.y))

    @staticmethod
    def rotate_around_point(
        v: Coordinate, axis_point: Coordinate, angle: float
    ) -> Coordinate:
        """Rotates a vector about a given point.

        Args:
            v: The vector to rotate. It's left unmodified.
            axis_point: The point to rotate about.
            angle: The rotation angle, in radians.

        Returns:
            A new coordinate.
        """
        return v.clone().subtract(axis_point).rotate(angle).add(axis_point)

    def ceil(self) -> Self:
        """Rounds both components up to integer values."""
        self.x = ceil_number(self.x)
        self.y = ceil_number(self.y)
        return self

    def floor(self) -> Self:
        """Rounds both components down to integer values."""
        self.x = floor_number(self.x)
        self.y = floor_number(self.y)
        return self

    def round(self) -> Self:
        """Rounds both components to the nearest integer values.

        See :py:func:`~plane_math.set_rounding_mode`.
        """
        self.x = round_number(self.x)
        self.y = round_number(self.y)
        return self

    def translate(self, tx: float, ty: Optional[float] = None) -> Self:
        """Translates the coordinate by the given offsets.

        Args:
            tx: The horizontal offset.
            ty: The vertical offset. If ``None``, the vertical component is left
              as-is.

        See also: :py:meth:`translate_by`.
        """
        self.x += tx
        if ty is not None:
            self.y += ty
        return self

    def translate_by(self, offset: Coordinate) -> Self:
        """Translates the coordinate by the components of another."""
        self.x += offset.x
        self.y += offset.y
        return self

    def scale(self, sx: float, sy: Optional[float] = None) -> Self:
        """Scales the coordinate.

        Args:
            sx: The horizontal scale factor.
            sy: The vertical scale factor. If ``None``, *sx* is used.
        """
        self.x *= sx
        self.y *= sx if sy is None else sy
        return self

    def invert(self) -> Self:
        """Reverses the sign of both components."""
        self.x = -self.x
        self.y = -self.y
        return self

    def normalize(self) -> Self:
        """Scales the vector to a magnitude of 1.

        NOTE:
            The zero vector has no direction; normalizing it yields ``nan``
            components.
        """
        return self.scale(divide(1, self.magnitude()))

    def add(self, b: Coordinate) -> Self:
        self.x += b.x
        self.y += b.y
        return self

    def subtract(self, b: Coordinate) -> Self:
        self.x -= b.x
        self.y -= b.y
        return self

    def multiply(self, b: Coordinate) -> Self:
        """Multiplies each component by the corresponding one of *b*."""
        self.x *= b.x
        self.y *= b.y
        return self

    def rotate(self, angle: float) -> Self:
        """Rotates the vector about the origin.

        Args:
            angle: The rotation angle, in radians.
        """
        cos = math.cos(angle)
        sin = math.sin(angle)
        self.x, self.y = self.x * cos - self.y * sin, self.y * cos + self.x * sin
        return self

    @ClassInstanceMethod
    def min(cls, a: Coordinate, b: Coordinate) -> Coordinate:
        """Returns the component-wise minimum of two coordinates.

        When invoked via an instance, takes only *b* and updates the instance
        in place instead.
        """
        return cls(min(a.x, b.x), min(a.y, b.y))

    @min.instancemethod
    def min(self, b: Coordinate) -> Self:
        self.x = min(self.x, b.x)
        self.y = min(self.y, b.y)
        return self

    @ClassInstanceMethod
    def max(cls, a: Coordinate, b: Coordinate) -> Coordinate:
        """Returns the component-wise maximum of two coordinates.

        When invoked via an instance, takes only *b* and updates the instance
        in place instead.
        """
        return cls(max(a.x, b.x), max(a.y, b.y))

    @max.instancemethod
    def max(self, b: Coordinate) -> Self:
        self.x = max(self.x, b.x)
        self.y = max(self.y, b.y)
        return self

    @ClassInstanceMethod
    def clamp(cls, a: Coordinate, lower: Coordinate, upper: Coordinate) -> Coordinate:
        """Clamps a coordinate within the given bounds, component-wise.

        Args:
            a: The coordinate to clamp.
            lower: The lower bounds.
            upper: The upper bounds.

        Returns:
            A new coordinate.

        When invoked via an instance, takes only *lower* and *upper* and clamps
        the instance in place instead.
        """
        return cls(
            min(max(a.x, lower.x), upper.x), min(max(a.y, lower.y), upper.y)
        )

    @clamp.instancemethod
    def clamp(self, lower: Coordinate, upper: Coordinate) -> Self:
        self.x = min(max(self.x, lower.x), upper.x)
        self.y = min(max(self.y, lower.y), upper.y)
        return self

"""
.. The Box API
"""

from __future__ import annotations

__all__ = ("Box",)

import math
from typing import Iterator, Optional, Sequence, Union

from typing_extensions import Self

from ._utils import (
    ClassInstanceMethod,
    arg_type_error,
    arg_value_error_msg,
    ceil_number,
    floor_number,
    format_number,
    round_number,
)
from .coordinate import Coordinate
from .exceptions import EmptyBoundsError
from .size import Size


class Box:
    """A rectangular region specified by the positions of its four edges.

    Args:
        top: Top edge
        right: Right edge
        bottom: Bottom edge
        left: Left edge

    Also useful for representing margins and padding.

    Unlike :py:class:`~plane_math.Rect`, the right and bottom edges are stored,
    not derived.

    NOTE:
        * No relationship between opposite edges is enforced i.e *right* may be
          less than *left*.
        * Instances are **mutable**. Methods that modify an instance return the
          same instance, to allow chaining.
        * Instances with equal fields compare equal but are **not** hashable.
        * No locking is done; mutating an instance shared across threads must be
          synchronized by the caller.
    """

    # Class Attributes =========================================================

    __slots__ = ("top", "right", "bottom", "left")

    # Instance Attributes ======================================================

    top: float
    """Top edge"""

    right: float
    """Right edge"""

    bottom: float
    """Bottom edge"""

    left: float
    """Left edge"""

    # Special Methods ==========================================================

    def __init__(self, top: float, right: float, bottom: float, left: float) -> None:
        self.top = top
        self.right = right
        self.bottom = bottom
        self.left = left

    def __copy__(self) -> Box:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.top
        yield self.right
        yield self.bottom
        yield self.left

    def __repr__(self) -> str:
        return "{}(top={!r}, right={!r}, bottom={!r}, left={!r})".format(
            type(self).__name__, self.top, self.right, self.bottom, self.left
        )

    def __str__(self) -> str:
        return "({}t, {}r, {}b, {}l)".format(*map(format_number, self))

    # Constructors =============================================================

    @classmethod
    def bounding_box(cls, *coordinates: Coordinate) -> Self:
        """Creates the smallest box containing all the given coordinates.

        Args:
            coordinates: The coordinates to be included.

        Raises:
            EmptyBoundsError: No coordinate was given.
        """
        if not coordinates:
            raise EmptyBoundsError("At least one coordinate is required")

        first, *rest = coordinates
        box = cls(first.y, first.x, first.y, first.x)
        for coordinate in rest:
            box.top = min(box.top, coordinate.y)
            box.right = max(box.right, coordinate.x)
            box.bottom = max(box.bottom, coordinate.y)
            box.left = min(box.left, coordinate.x)

        return box

    @classmethod
    def at_offset(cls, offset: Coordinate, size: Size) -> Self:
        """Creates a box with its top-left corner at *offset*."""
        return cls(
            offset.y, offset.x + size.width, offset.y + size.height, offset.x
        )

    @classmethod
    def around_center(cls, center: Coordinate, size: Size) -> Self:
        """Creates a box with its midpoint at *center*."""
        half_width = size.width / 2
        half_height = size.height / 2
        return cls(
            center.y - half_height,
            center.x + half_width,
            center.y + half_height,
            center.x - half_width,
        )

    @classmethod
    def from_json(cls, values: Sequence[float]) -> Self:
        """Creates a new instance from the form returned by :py:meth:`to_json`.

        Args:
            values: A sequence ``[top, right, bottom, left]``.

        Raises:
            ValueError: *values* is not of length 4.
        """
        if len(values) != 4:
            raise arg_value_error_msg("Expected a sequence of length 4", values)

        return cls(*values)

    # Public Methods ===========================================================

    def clone(self) -> Self:
        return type(self)(self.top, self.right, self.bottom, self.left)

    def to_json(self) -> list[float]:
        """Returns ``[top, right, bottom, left]``."""
        return [self.top, self.right, self.bottom, self.left]

    def top_left(self) -> Coordinate:
        return Coordinate(self.left, self.top)

    def top_right(self) -> Coordinate:
        return Coordinate(self.right, self.top)

    def bottom_left(self) -> Coordinate:
        return Coordinate(self.left, self.bottom)

    def bottom_right(self) -> Coordinate:
        return Coordinate(self.right, self.bottom)

    @ClassInstanceMethod
    def equals(cls, a: Optional[Box], b: Optional[Box]) -> bool:
        """Compares boxes for equality.

        Returns:
            ``True`` if the boxes are identical, both ``None`` or have exactly
            equal edges. Otherwise, ``False``.

        When invoked via an instance, takes only the other box.
        """
        if a is b:
            return True
        if a is None or b is None:
            return False
        return (
            a.top == b.top
            and a.right == b.right
            and a.bottom == b.bottom
            and a.left == b.left
        )

    @equals.instancemethod
    def equals(self, other: Optional[Box]) -> bool:
        return type(self).equals(self, other)

    @ClassInstanceMethod
    def contains(
        cls, box: Optional[Box], other: Union[Box, Coordinate, None]
    ) -> bool:
        """Checks if a box contains a coordinate or another box.

        Args:
            box: The containing box.
            other: A box or a coordinate.

        Returns:
            ``True`` if *other* lies within *box*, edges inclusive. ``False`` if
            it doesn't or if either argument is ``None``.

        Raises:
            TypeError: *other* is neither a box, a coordinate nor ``None``.

        When invoked via an instance, takes only *other*.
        """
        if box is None or other is None:
            return False

        if isinstance(other, Box):
            return (
                other.left >= box.left
                and other.right <= box.right
                and other.top >= box.top
                and other.bottom <= box.bottom
            )
        if isinstance(other, Coordinate):
            return (
                box.left <= other.x <= box.right and box.top <= other.y <= box.bottom
            )

        raise arg_type_error("other", other)

    @contains.instancemethod
    def contains(self, other: Union[Box, Coordinate, None]) -> bool:
        return type(self).contains(self, other)

    def expand(self, top: float, right: float, bottom: float, left: float) -> Self:
        """Expands the box by the given margins.

        Args:
            top: Top margin
            right: Right margin
            bottom: Bottom margin
            left: Left margin

        Positive margins move the corresponding edge **outwards**, negative ones
        move it inwards.

        See also: :py:meth:`expand_by`.
        """
        self.top -= top
        self.right += right
        self.bottom += bottom
        self.left -= left
        return self

    def expand_by(self, margins: Box) -> Self:
        """Expands the box by margins given as the edges of another box.

        Same as ``expand(*margins)``.
        """
        return self.expand(margins.top, margins.right, margins.bottom, margins.left)

    def expand_to_include(self, box: Box) -> Self:
        """Expands the box to include another box."""
        # Performance-sensitive; keep this free of argument handling.
        self.left = min(self.left, box.left)
        self.top = min(self.top, box.top)
        self.right = max(self.right, box.right)
        self.bottom = max(self.bottom, box.bottom)
        return self

    def get_size(self) -> Size:
        """Returns the size ``(right - left, bottom - top)``."""
        return Size(self.right - self.left, self.bottom - self.top)

    def area(self) -> float:
        return (self.right - self.left) * (self.bottom - self.top)

    @staticmethod
    def relative_position_x(box: Box, coordinate: Coordinate) -> float:
        """Returns the horizontal position of a coordinate relative to a box.

        Returns:
            The signed horizontal distance from the nearest vertical edge of
            *box* to *coordinate*, or zero if *coordinate* is within the
            horizontal extent of *box*.
        """
        if coordinate.x < box.left:
            return coordinate.x - box.left
        if coordinate.x > box.right:
            return coordinate.x - box.right
        return 0

    @staticmethod
    def relative_position_y(box: Box, coordinate: Coordinate) -> float:
        """Returns the vertical position of a coordinate relative to a box.

        Returns:
            The signed vertical distance from the nearest horizontal edge of
            *box* to *coordinate*, or zero if *coordinate* is within the
            vertical extent of *box*.
        """
        if coordinate.y < box.top:
            return coordinate.y - box.top
        if coordinate.y > box.bottom:
            return coordinate.y - box.bottom
        return 0

    @staticmethod
    def distance(box: Box, coordinate: Coordinate) -> float:
        """Returns the distance between a coordinate and the nearest edge or corner
        of a box.

        Returns:
            The distance, or zero if *coordinate* is inside *box*.
        """
        x = Box.relative_position_x(box, coordinate)
        y = Box.relative_position_y(box, coordinate)
        return math.sqrt(x * x + y * y)

    @ClassInstanceMethod
    def intersects(cls, a: Box, b: Box) -> bool:
        """Checks if two boxes intersect.

        Boxes that only touch along an edge or at a corner intersect.

        When invoked via an instance, takes only the other box.
        """
        return (
            a.left <= b.right
            and b.left <= a.right
            and a.top <= b.bottom
            and b.top <= a.bottom
        )

    @intersects.instancemethod
    def intersects(self, other: Box) -> bool:
        return type(self).intersects(self, other)

    @ClassInstanceMethod
    def intersects_with_padding(cls, a: Box, b: Box, padding: float) -> bool:
        """Checks if two boxes would intersect with additional padding.

        Args:
            a: A box.
            b: Another box.
            padding: The amount by which every edge comparison is relaxed.

        When invoked via an instance, takes only *b* and *padding*.
        """
        return (
            a.left <= b.right + padding
            and b.left <= a.right + padding
            and a.top <= b.bottom + padding
            and b.top <= a.bottom + padding
        )

    @intersects_with_padding.instancemethod
    def intersects_with_padding(self, other: Box, padding: float) -> bool:
        return type(self).intersects_with_padding(self, other, padding)

    def ceil(self) -> Self:
        self.top = ceil_number(self.top)
        self.right = ceil_number(self.right)
        self.bottom = ceil_number(self.bottom)
        self.left = ceil_number(self.left)
        return self

    def floor(self) -> Self:
        self.top = floor_number(self.top)
        self.right = floor_number(self.right)
        self.bottom = floor_number(self.bottom)
        self.left = floor_number(self.left)
        return self

    def round(self) -> Self:
        """Rounds all edges to the nearest integer values.

        See :py:func:`~plane_math.set_rounding_mode`.
        """
        self.top = round_number(self.top)
        self.right = round_number(self.right)
        self.bottom = round_number(self.bottom)
        self.left = round_number(self.left)
        return self

    def translate(self, tx: float, ty: Optional[float] = None) -> Self:
        """Translates the box by the given offsets.

        Args:
            tx: The offset for the left and right edges.
            ty: The offset for the top and bottom edges. If ``None``, those are
              left as-is.

        See also: :py:meth:`translate_by`.
        """
        self.left += tx
        self.right += tx
        if ty is not None:
            self.top += ty
            self.bottom += ty
        return self

    def translate_by(self, offset: Coordinate) -> Self:
        """Translates the box by the components of a coordinate."""
        self.left += offset.x
        self.right += offset.x
        self.top += offset.y
        self.bottom += offset.y
        return self

    def scale(self, sx: float, sy: Optional[float] = None) -> Self:
        """Scales the box about the origin.

        Args:
            sx: The scale factor for the left and right edges.
            sy: The scale factor for the top and bottom edges. If ``None``, *sx*
              is used.
        """
        if sy is None:
            sy = sx
        self.left *= sx
        self.right *= sx
        self.top *= sy
        self.bottom *= sy
        return self

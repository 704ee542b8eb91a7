"""
.. The Rect API
"""

from __future__ import annotations

__all__ = ("Rect",)

from typing import Iterator, List, Optional, Sequence, Union

from typing_extensions import Self

from ._utils import (
    ClassInstanceMethod,
    arg_type_error,
    arg_value_error_msg,
    ceil_number,
    floor_number,
    format_number,
    get_rng,
    round_number,
)
from .box import Box
from .coordinate import Coordinate
from .size import Size


class Rect:
    """A rectangular region specified by its top-left corner and its dimensions.

    Args:
        left: Left edge
        top: Top edge
        width: Horizontal dimension
        height: Vertical dimension

    The right and bottom edges are derived i.e ``right == left + width`` and
    ``bottom == top + height``.

    NOTE:
        * Negative dimensions are accepted and never normalized. Such a rectangle
          extends leftwards/upwards from *left*/*top* as far as arithmetic goes, but
          compares unequal to the equivalent rectangle with positive dimensions.
        * Instances are **mutable**. Methods that modify an instance return the
          same instance (unless documented otherwise), to allow chaining.
        * Instances with equal fields compare equal but are **not** hashable.
        * No locking is done; mutating an instance shared across threads must be
          synchronized by the caller.
    """

    # Class Attributes =========================================================

    __slots__ = ("left", "top", "width", "height")

    # Instance Attributes ======================================================

    left: float
    """Left edge"""

    top: float
    """Top edge"""

    width: float
    """Horizontal dimension"""

    height: float
    """Vertical dimension"""

    # Special Methods ==========================================================

    def __init__(self, left: float, top: float, width: float, height: float) -> None:
        self.left = left
        self.top = top
        self.width = width
        self.height = height

    def __copy__(self) -> Rect:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[float]:
        yield self.left
        yield self.top
        yield self.width
        yield self.height

    def __repr__(self) -> str:
        return "{}(left={!r}, top={!r}, width={!r}, height={!r})".format(
            type(self).__name__, self.left, self.top, self.width, self.height
        )

    def __str__(self) -> str:
        return "({}, {} - {}w x {}h)".format(*map(format_number, self))

    # Properties ===============================================================

    @property
    def right(self) -> float:
        """Right edge

        GET:
            Returns ``left + width``.
        """
        return self.left + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge

        GET:
            Returns ``top + height``.
        """
        return self.top + self.height

    # Constructors =============================================================

    @classmethod
    def from_box(cls, box: Box) -> Self:
        """Creates a rectangle covering the same region as a box.

        NOTE:
            This is the inverse of :py:meth:`to_box` only if the box's right and
            bottom edges are not less than its left and top edges respectively.
            Otherwise, the dimensions of the result are negative.
        """
        return cls(box.left, box.top, box.right - box.left, box.bottom - box.top)

    @classmethod
    def at_offset(cls, offset: Coordinate, size: Size) -> Self:
        """Creates a rectangle with its top-left corner at *offset*."""
        return cls(offset.x, offset.y, size.width, size.height)

    @classmethod
    def around_center(cls, center: Coordinate, size: Size) -> Self:
        """Creates a rectangle with its midpoint at *center*."""
        return cls(
            center.x - size.width / 2,
            center.y - size.height / 2,
            size.width,
            size.height,
        )

    @classmethod
    def from_json(cls, values: Sequence[float]) -> Self:
        """Creates a new instance from the form returned by :py:meth:`to_json`.

        Args:
            values: A sequence ``[left, top, width, height]``.

        Raises:
            ValueError: *values* is not of length 4.
        """
        if len(values) != 4:
            raise arg_value_error_msg("Expected a sequence of length 4", values)

        return cls(*values)

    # Public Methods ===========================================================

    def clone(self) -> Self:
        return type(self)(self.left, self.top, self.width, self.height)

    def to_box(self) -> Box:
        """Returns a box covering the same region."""
        return Box(self.top, self.left + self.width, self.top + self.height, self.left)

    def to_json(self) -> list[float]:
        """Returns ``[left, top, width, height]``."""
        return [self.left, self.top, self.width, self.height]

    @ClassInstanceMethod
    def equals(cls, a: Optional[Rect], b: Optional[Rect]) -> bool:
        """Compares rectangles for equality.

        Returns:
            ``True`` if the rectangles are identical, both ``None`` or have
            exactly equal left, top, width and height. Otherwise, ``False``.

        When invoked via an instance, takes only the other rectangle.
        """
        if a is b:
            return True
        if a is None or b is None:
            return False
        return (
            a.left == b.left
            and a.width == b.width
            and a.top == b.top
            and a.height == b.height
        )

    @equals.instancemethod
    def equals(self, other: Optional[Rect]) -> bool:
        return type(self).equals(self, other)

    @ClassInstanceMethod
    def intersection(cls, a: Rect, b: Rect) -> Optional[Rect]:
        """Computes the intersection of two rectangles.

        Args:
            a: A rectangle.
            b: Another rectangle.

        Returns:
            A new rectangle covering the overlap of *a* and *b*, or ``None`` if
            they do not intersect.

        Rectangles that only touch intersect; the result then has a zero width
        and/or height.

        When invoked via an instance, takes only the other rectangle and:

        * if they intersect, **updates the instance** to the intersection and
          returns ``True``,
        * otherwise, leaves the instance unmodified and returns ``False``.
        """
        # Duplicates the instance form, which must not allocate.
        x0 = max(a.left, b.left)
        x1 = min(a.left + a.width, b.left + b.width)

        if x0 <= x1:
            y0 = max(a.top, b.top)
            y1 = min(a.top + a.height, b.top + b.height)

            if y0 <= y1:
                return cls(x0, y0, x1 - x0, y1 - y0)

        return None

    @intersection.instancemethod
    def intersection(self, other: Rect) -> bool:
        x0 = max(self.left, other.left)
        x1 = min(self.left + self.width, other.left + other.width)

        if x0 <= x1:
            y0 = max(self.top, other.top)
            y1 = min(self.top + self.height, other.top + other.height)

            if y0 <= y1:
                self.left = x0
                self.top = y0
                self.width = x1 - x0
                self.height = y1 - y0
                return True

        return False

    @ClassInstanceMethod
    def intersects(cls, a: Rect, b: Rect) -> bool:
        """Checks if two rectangles intersect.

        Same test as :py:meth:`intersection` without computing the overlap.

        When invoked via an instance, takes only the other rectangle.
        """
        return (
            a.left <= b.left + b.width
            and b.left <= a.left + a.width
            and a.top <= b.top + b.height
            and b.top <= a.top + a.height
        )

    @intersects.instancemethod
    def intersects(self, other: Rect) -> bool:
        return type(self).intersects(self, other)

    @ClassInstanceMethod
    def difference(cls, a: Rect, b: Rect) -> List[Rect]:
        """Computes the region of one rectangle not covered by another.

        Args:
            a: The rectangle to subtract from.
            b: The rectangle to subtract.

        Returns:
            Zero to four non-overlapping rectangles which together cover exactly
            the area of *a* outside *b*.

            If *a* and *b* don't intersect or their intersection has no area, the
            only element is a copy of *a*.

        The pieces are produced in this order, each only if present:

        1. the band of *a* above *b*, spanning the full width of *a*,
        2. the band of *a* below *b*, spanning the full width of *a*,
        3. the band of *a* left of *b*, between the first two bands,
        4. the band of *a* right of *b*, between the first two bands.

        When invoked via an instance, takes only *b*.
        """
        intersection = cls.intersection(a, b)
        if intersection is None or not intersection.height or not intersection.width:
            return [a.clone()]

        result = []

        top = a.top
        height = a.height

        a_right = a.left + a.width
        a_bottom = a.top + a.height

        b_right = b.left + b.width
        b_bottom = b.top + b.height

        # Top band
        if b.top > a.top:
            result.append(cls(a.left, a.top, a.width, b.top - a.top))
            top = b.top
            height -= b.top - a.top
        # Bottom band
        if b_bottom < a_bottom:
            result.append(cls(a.left, b_bottom, a.width, a_bottom - b_bottom))
            height = b_bottom - top
        # Left band, within the vertical extent left over by the first two
        if b.left > a.left:
            result.append(cls(a.left, top, b.left - a.left, height))
        # Right band, likewise
        if b_right < a_right:
            result.append(cls(b_right, top, a_right - b_right, height))

        return result

    @difference.instancemethod
    def difference(self, other: Rect) -> List[Rect]:
        return type(self).difference(self, other)

    @ClassInstanceMethod
    def bounding_rect(cls, a: Optional[Rect], b: Optional[Rect]) -> Optional[Rect]:
        """Computes the smallest rectangle containing two rectangles.

        Returns:
            A new rectangle, or ``None`` if either argument is ``None``.

        When invoked via an instance, takes only the other rectangle and
        **updates the instance** to the bounding rectangle instead.
        """
        if a is None or b is None:
            return None

        return a.clone().bounding_rect(b)

    @bounding_rect.instancemethod
    def bounding_rect(self, other: Rect) -> Self:
        # Right and bottom must be computed before left and top change
        right = max(self.left + self.width, other.left + other.width)
        bottom = max(self.top + self.height, other.top + other.height)

        self.left = min(self.left, other.left)
        self.top = min(self.top, other.top)

        self.width = right - self.left
        self.height = bottom - self.top
        return self

    def contains(self, other: Union[Rect, Coordinate]) -> bool:
        """Checks if the rectangle contains a coordinate or another rectangle.

        Args:
            other: A rectangle or a coordinate.

        Returns:
            ``True`` if *other* lies within the rectangle, edges inclusive.
            Otherwise, ``False``.

        Raises:
            TypeError: *other* is neither a rectangle nor a coordinate.
        """
        if isinstance(other, Rect):
            return (
                self.left <= other.left
                and self.left + self.width >= other.left + other.width
                and self.top <= other.top
                and self.top + self.height >= other.top + other.height
            )
        if isinstance(other, Coordinate):
            return (
                self.left <= other.x <= self.left + self.width
                and self.top <= other.y <= self.top + self.height
            )

        raise arg_type_error("other", other)

    def random_inside(self) -> Coordinate:
        """Returns a random coordinate inside the rectangle.

        Each component is drawn independently and uniformly along its axis.
        """
        rng = get_rng()
        return Coordinate(
            self.left + rng.random() * self.width,
            self.top + rng.random() * self.height,
        )

    def offset(self) -> Coordinate:
        """Returns the top-left corner."""
        return Coordinate(self.left, self.top)

    def get_size(self) -> Size:
        return Size(self.width, self.height)

    def area(self) -> float:
        """Returns ``width * height``, which is negative if exactly one dimension
        is negative.
        """
        return self.width * self.height

    def ceil(self) -> Self:
        self.left = ceil_number(self.left)
        self.top = ceil_number(self.top)
        self.width = ceil_number(self.width)
        self.height = ceil_number(self.height)
        return self

    def floor(self) -> Self:
        self.left = floor_number(self.left)
        self.top = floor_number(self.top)
        self.width = floor_number(self.width)
        self.height = floor_number(self.height)
        return self

    def round(self) -> Self:
        """Rounds all fields to the nearest integer values.

        See :py:func:`~plane_math.set_rounding_mode`.
        """
        self.left = round_number(self.left)
        self.top = round_number(self.top)
        self.width = round_number(self.width)
        self.height = round_number(self.height)
        return self

    def translate(self, tx: float, ty: Optional[float] = None) -> Self:
        """Translates the rectangle by the given offsets.

        Args:
            tx: The horizontal offset.
            ty: The vertical offset. If ``None``, the top edge is left as-is.

        See also: :py:meth:`translate_by`.
        """
        self.left += tx
        if ty is not None:
            self.top += ty
        return self

    def translate_by(self, offset: Coordinate) -> Self:
        """Translates the rectangle by the components of a coordinate."""
        self.left += offset.x
        self.top += offset.y
        return self

    def scale(self, sx: float, sy: Optional[float] = None) -> Self:
        """Scales the rectangle about the origin (not about its own center).

        Args:
            sx: The scale factor for the left edge and width.
            sy: The scale factor for the top edge and height. If ``None``, *sx*
              is used.
        """
        if sy is None:
            sy = sx
        self.left *= sx
        self.width *= sx
        self.top *= sy
        self.height *= sy
        return self

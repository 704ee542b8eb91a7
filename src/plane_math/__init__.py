"""
plane-math

2D planar geometry value types

Copyright (c) 2022, Toluwaleke Ogundipe <anonymoux47@gmail.com>
"""

from __future__ import annotations

__all__ = (
    "Box",
    "Coordinate",
    "Rect",
    "RoundingMode",
    "Size",
    "get_random_source",
    "get_rounding_mode",
    "seed",
    "set_random_source",
    "set_rounding_mode",
)
__author__ = "Toluwaleke Ogundipe"

import logging as _logging
from random import Random
from typing import Optional, Union

from . import _utils
from ._utils import RoundingMode, arg_type_error
from .box import Box
from .coordinate import Coordinate
from .rect import Rect
from .size import Size

version_info = (0, 1, 0)

# Follows https://semver.org/spec/v2.0.0.html
__version__ = ".".join(map(str, version_info[:3]))
if version_info[3:]:
    __version__ += "-" + ".".join(map(str, version_info[3:]))


def get_rounding_mode() -> RoundingMode:
    """Returns the global rounding mode.

    See :py:func:`set_rounding_mode`.
    """
    return _utils._rounding_mode


def set_rounding_mode(mode: RoundingMode) -> None:
    """Sets the global rounding mode.

    Args:
        mode: The tie-breaking strategy used by the ``round()`` method of every
          geometry type.

    Raises:
        TypeError: *mode* is not a :py:class:`RoundingMode`.

    The default is :py:attr:`RoundingMode.HALF_UP`.

    NOTE:
        Only affects ``round()``; ``ceil()`` and ``floor()`` are unambiguous.
    """
    if not isinstance(mode, RoundingMode):
        raise arg_type_error("mode", mode)

    _utils._rounding_mode = mode
    _logger.debug(f"Rounding mode set to {mode.name}")


def get_random_source() -> Random:
    """Returns the random number generator used for random points.

    See :py:func:`set_random_source`.
    """
    return _utils.get_rng()


def set_random_source(rng: Optional[Random]) -> None:
    """Sets the random number generator used for random points.

    Args:
        rng: A :py:class:`random.Random` instance or ``None``, to restore the
          package's default generator.

    Raises:
        TypeError: *rng* is neither a :py:class:`random.Random` instance nor
          ``None``.

    Affects :py:meth:`Coordinate.random() <plane_math.Coordinate.random>`,
    :py:meth:`Coordinate.random_unit() <plane_math.Coordinate.random_unit>`,
    :py:meth:`Coordinate.random_positive() <plane_math.Coordinate.random_positive>`
    and :py:meth:`Rect.random_inside() <plane_math.Rect.random_inside>`.
    """
    if rng is not None and not isinstance(rng, Random):
        raise arg_type_error("rng", rng)

    _utils._rng = rng
    _logger.debug(
        "Random source reset to default"
        if rng is None
        else f"Random source set to {type(rng).__qualname__} instance"
    )


def seed(value: Union[None, int, float, str, bytes, bytearray] = None) -> None:
    """Re-seeds the active random number generator.

    Args:
        value: Same as for :py:meth:`random.Random.seed`.
    """
    _utils.get_rng().seed(value)
    _logger.debug("Random source re-seeded")


_logger = _logging.getLogger(__name__)

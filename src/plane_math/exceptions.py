"""
.. Custom Exceptions
"""

from __future__ import annotations


class PlaneMathError(Exception):
    """Exception baseclass. Raised for generic errors."""


class InvalidSizeError(PlaneMathError, ValueError):
    """Raised for sizes that do not satisfy an operation's preconditions."""


class EmptyBoundsError(PlaneMathError, ValueError):
    """Raised when bounds are requested for an empty collection of points."""

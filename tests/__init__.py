from contextlib import contextmanager

from plane_math import _utils


@contextmanager
def reset_config():
    rounding_mode = _utils._rounding_mode
    rng = _utils._rng
    try:
        yield
    finally:
        _utils._rounding_mode = rounding_mode
        _utils._rng = rng

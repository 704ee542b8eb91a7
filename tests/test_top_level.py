import logging
from random import Random

import pytest

from plane_math import (
    Coordinate,
    Rect,
    RoundingMode,
    _utils,
    get_random_source,
    get_rounding_mode,
    seed,
    set_random_source,
    set_rounding_mode,
)

from . import reset_config


class TestRoundingMode:
    def test_default(self):
        assert get_rounding_mode() is RoundingMode.HALF_UP

    @pytest.mark.parametrize("mode", RoundingMode)
    @reset_config()
    def test_valid(self, mode):
        set_rounding_mode(mode)
        assert get_rounding_mode() is mode

    @pytest.mark.parametrize("mode", [None, 0, "HALF_UP", RoundingMode.HALF_UP.value])
    @reset_config()
    def test_invalid(self, mode):
        with pytest.raises(TypeError, match="'mode'"):
            set_rounding_mode(mode)
        assert get_rounding_mode() is RoundingMode.HALF_UP

    @pytest.mark.parametrize(
        "mode,rounded",
        [
            (RoundingMode.HALF_UP, Coordinate(3, -2)),
            (RoundingMode.HALF_EVEN, Coordinate(2, -2)),
        ],
    )
    @reset_config()
    def test_affects_round(self, mode, rounded):
        set_rounding_mode(mode)
        assert Coordinate(2.5, -2.5).round() == rounded

    @reset_config()
    def test_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="plane_math"):
            set_rounding_mode(RoundingMode.HALF_EVEN)
        assert "HALF_EVEN" in caplog.text


class TestRandomSource:
    def test_default(self):
        assert isinstance(get_random_source(), Random)

    @reset_config()
    def test_set(self):
        rng = Random(1)
        set_random_source(rng)
        assert get_random_source() is rng

    @reset_config()
    def test_reset(self):
        default = get_random_source()
        set_random_source(Random())
        assert get_random_source() is not default
        set_random_source(None)
        assert get_random_source() is default

    @pytest.mark.parametrize("rng", [1, "random", Random])
    @reset_config()
    def test_invalid(self, rng):
        with pytest.raises(TypeError, match="'rng'"):
            set_random_source(rng)
        assert _utils._rng is None

    @reset_config()
    def test_used(self):
        set_random_source(Random(7))
        first = [Coordinate.random_positive() for _ in range(3)]
        set_random_source(Random(7))
        second = [Coordinate.random_positive() for _ in range(3)]
        assert first == second

    @reset_config()
    def test_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="plane_math"):
            set_random_source(Random())
            set_random_source(None)
        assert "Random source set" in caplog.text
        assert "reset to default" in caplog.text


class TestSeed:
    @pytest.mark.parametrize("value", [0, 42, "plane", b"math"])
    @reset_config()
    def test_reproducible(self, value):
        rect = Rect(0, 0, 100, 50)
        seed(value)
        first = [rect.random_inside() for _ in range(5)]
        seed(value)
        second = [rect.random_inside() for _ in range(5)]
        assert first == second

    @reset_config()
    def test_seeds_active_source(self):
        rng = Random()
        set_random_source(rng)
        seed(3)
        assert rng.random() == Random(3).random()

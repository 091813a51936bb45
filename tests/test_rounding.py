import pytest

from scoring.rounding import round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,rounded", [
        (62.5, 63),
        (0.5, 1),
        (2.5, 3),
        (62.4, 62),
        (99.6, 100),
        (0.0, 0),
    ])
    def test_halves_round_up(self, value, rounded):
        assert round_half_up(value) == rounded

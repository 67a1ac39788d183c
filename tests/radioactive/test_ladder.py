"""Tests for the Transport Index ladder."""

import pytest

from trimsheet.radioactive import DEFAULT_TI_STEPS, TIDistanceLadder, ti_to_distance


class TestTIDistanceLadder:
    """Tests for TI to stand-off distance mapping."""

    @pytest.mark.parametrize(
        "ti, distance",
        [(0, 0.0), (0.5, 0.30), (1.0, 0.30), (1.01, 0.50), (3.2, 0.85), (10.0, 1.65), (11.0, 1.75)],
    )
    def test_standard_steps(self, ti, distance) -> None:
        assert ti_to_distance(ti) == distance

    def test_saturates_above_last_step(self) -> None:
        assert ti_to_distance(11.5) == 1.75
        assert ti_to_distance(50) == 1.75

    def test_monotonic(self) -> None:
        ladder = TIDistanceLadder.default()
        samples = [i / 10 for i in range(0, 150)]
        distances = [ladder.distance_for(ti) for ti in samples]

        assert distances == sorted(distances)

    def test_max_ti(self) -> None:
        assert TIDistanceLadder.default().max_ti == DEFAULT_TI_STEPS[-1][0]

    def test_custom_ladder(self) -> None:
        ladder = TIDistanceLadder.from_config([{"max_ti": 2, "distance_m": 0.4}, [4, 0.9]])

        assert ti_to_distance(1.5, ladder) == 0.4
        assert ti_to_distance(3, ladder) == 0.9
        assert ti_to_distance(8, ladder) == 0.9

    @pytest.mark.parametrize(
        "steps, message",
        [
            ((), "at least one step"),
            (((2.0, 0.5), (1.0, 0.7)), "strictly increasing"),
            (((1.0, 0.5), (2.0, 0.3)), "must not decrease"),
            (((1.0, -0.1),), "negative"),
        ],
    )
    def test_invalid_ladders(self, steps, message) -> None:
        with pytest.raises(ValueError, match=message):
            TIDistanceLadder(steps)

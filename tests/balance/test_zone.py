"""Tests for chart zones."""

import pytest

from trimsheet.balance import Zone, ZoneKind


def make_zone(**overrides) -> Zone:
    values = dict(key="c1", order=0, value_divisor=500, width_per_divisor=10,
                  direction=-1, y_start=100, y_end=100)
    values.update(overrides)
    return Zone(**values)


class TestZone:
    """Tests for Zone geometry."""

    def test_displacement(self) -> None:
        assert make_zone().displacement(1000) == pytest.approx(-20.0)
        assert make_zone(direction=1).displacement(250) == pytest.approx(5.0)

    def test_zero_load_has_no_displacement(self) -> None:
        assert make_zone().displacement(0) == 0

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"value_divisor": 0}, "value_divisor"),
            ({"width_per_divisor": -1}, "width_per_divisor"),
            ({"direction": 0}, "direction"),
            ({"y_start": 200, "y_end": 100}, "above y_start"),
        ],
    )
    def test_invalid_geometry(self, overrides, message) -> None:
        with pytest.raises(ValueError, match=message):
            make_zone(**overrides)

    def test_from_config(self) -> None:
        zone = Zone.from_config(
            {"key": "paxA", "divisor": 5, "direction": "left", "kind": "cabin", "label": "Zone A"},
            order=0, y_start=150, y_end=150, width_per_divisor=10,
        )

        assert zone.direction == -1
        assert zone.kind is ZoneKind.CABIN
        assert zone.value_divisor == 5
        assert zone.label == "Zone A"

    def test_from_config_overrides_band(self) -> None:
        zone = Zone.from_config(
            {"key": "c5", "divisor": 250, "y_start": 600, "y_end": 640},
            order=8, y_start=550, y_end=550, width_per_divisor=10,
        )

        assert (zone.y_start, zone.y_end) == (600, 640)
        assert zone.kind is ZoneKind.HOLD
        assert zone.direction == 1

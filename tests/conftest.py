"""Pytest configuration and fixtures for all tests."""

from pathlib import Path
from unittest.mock import patch

import pytest

from trimsheet.balance import ChartGeometry, IndexScale, Zone, ZoneKind
from trimsheet.core.logging_system import shutdown_logging
from trimsheet.reference.tables import ReferenceTables


@pytest.fixture(scope="session")
def tables() -> ReferenceTables:
    """Reference tables loaded from the packaged data directory."""
    return ReferenceTables.load()


@pytest.fixture
def a321_chart(tables: ReferenceTables) -> ChartGeometry:
    chart = tables.get_chart("A321-231")
    assert chart is not None
    return chart


@pytest.fixture
def simple_chart() -> ChartGeometry:
    """Chart with one left cabin zone and one right hold zone.

    Index 0 sits at x=0 and one index unit is 10 chart units wide.
    """
    zones = (
        Zone("pax", order=0, value_divisor=10, width_per_divisor=10, direction=-1,
             y_start=100, y_end=150, kind=ZoneKind.CABIN),
        Zone("c1", order=1, value_divisor=100, width_per_divisor=10, direction=1,
             y_start=200, y_end=200),
    )
    return ChartGeometry(
        scale=IndexScale(index_min=0, x_min=0, index_max=100, x_max=1000),
        top_y=50,
        bottom_y=300,
        zones=zones,
        name="TEST",
    )


@pytest.fixture
def log_dir(tmp_path: Path):
    """Redirect the platform log directory to a temporary one."""
    with patch("trimsheet.core.logging_system.get_platform_log_dir", return_value=tmp_path):
        yield tmp_path
        shutdown_logging()

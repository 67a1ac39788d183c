"""Trim line projection on a loading-index chart.

The trim line starts at the dry operating index on the chart's top reference
line and walks down the zones in chart order. In each zone it moves sideways
by the zone's displacement for its load, then drops to the chart bottom. The
result is a staircase: consecutive points differ in exactly one coordinate.

Typical usage:
    chart = ChartGeometry.from_config(charts.get_section("charts.A321-231"))
    points = project_trim_line(baseline.dry_operating_index, zone_weights, chart)
    svg_points = " ".join(f"{p.x},{p.y}" for p in points)
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from trimsheet.balance.zone import Zone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrimLinePoint:
    """A point of the trim line in chart coordinates (y grows downwards)."""

    x: float
    y: float


@dataclass(frozen=True)
class IndexScale:
    """Affine map between balance index and chart x coordinate.

    Calibrated by two reference points: ``index_min`` sits at ``x_min`` and
    ``index_max`` at ``x_max``. Both points map exactly.

    Examples:
        >>> scale = IndexScale(index_min=0, x_min=0, index_max=100, x_max=1000)
        >>> scale.to_x(45)
        450.0
        >>> scale.to_index(450.0)
        45.0
    """

    index_min: float
    x_min: float
    index_max: float
    x_max: float

    def __post_init__(self) -> None:
        if self.index_max == self.index_min:
            raise ValueError("Index scale needs two distinct index reference values")
        if self.x_max == self.x_min:
            raise ValueError("Index scale needs two distinct x reference values")

    @classmethod
    def from_origin(cls, origin_x: float, origin_index: float, pixels_per_unit: float) -> "IndexScale":
        """Calibrate from a single origin and a pixels-per-index-unit ratio."""
        return cls(
            index_min=origin_index,
            x_min=origin_x,
            index_max=origin_index + 1,
            x_max=origin_x + pixels_per_unit,
        )

    def to_x(self, index: float) -> float:
        t = (index - self.index_min) / (self.index_max - self.index_min)
        return self.x_min * (1 - t) + self.x_max * t

    def to_index(self, x: float) -> float:
        t = (x - self.x_min) / (self.x_max - self.x_min)
        return self.index_min * (1 - t) + self.index_max * t


@dataclass(frozen=True)
class ChartGeometry:
    """Calibration and zone layout of one balance chart.

    Attributes:
        scale: Index to x mapping
        top_y: y of the reference line where the trim line starts
        bottom_y: y of the chart's bottom edge
        zones: Zones in walk order (sorted by ``Zone.order`` on construction)
        name: Chart name
    """

    scale: IndexScale
    top_y: float
    bottom_y: float
    zones: tuple[Zone, ...]
    name: str = ""

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.zones, key=lambda z: z.order))
        object.__setattr__(self, "zones", ordered)

        keys = [z.key for z in ordered]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Chart {self.name}: duplicate zone keys in {keys}")
        if self.bottom_y < self.top_y:
            raise ValueError(f"Chart {self.name}: bottom_y is above top_y")

    def get_zone(self, key: str) -> Zone | None:
        for zone in self.zones:
            if zone.key == key:
                return zone
        return None

    @classmethod
    def from_config(cls, section: Mapping[str, Any], name: str = "") -> "ChartGeometry":
        """Build a chart from a ``charts.yaml`` entry.

        The ``calibration`` block takes either two reference points
        (``index_min``/``x_min``/``index_max``/``x_max``) or an origin
        (``origin_x``/``origin_index``/``pixels_per_unit``). With
        ``step_height`` set, zones without an explicit band are placed on
        evenly spaced rows below ``top_y``.

        Raises:
            KeyError: If a required calibration value is missing.
            ValueError: If the calibration or a zone is invalid.
        """
        cal = section["calibration"]

        if "index_min" in cal:
            scale = IndexScale(
                index_min=float(cal["index_min"]),
                x_min=float(cal["x_min"]),
                index_max=float(cal["index_max"]),
                x_max=float(cal["x_max"]),
            )
        else:
            scale = IndexScale.from_origin(
                origin_x=float(cal["origin_x"]),
                origin_index=float(cal["origin_index"]),
                pixels_per_unit=float(cal["pixels_per_unit"]),
            )

        top_y = float(cal["top_y"])
        bottom_y = float(cal["bottom_y"])
        step_height = float(cal.get("step_height", 0.0))
        width = float(cal.get("width_per_divisor", cal.get("pixels_per_unit", 0.0)))

        zones = []
        for i, zone_config in enumerate(section.get("zones") or []):
            row_y = top_y + (i + 1) * step_height
            zones.append(Zone.from_config(zone_config, order=i, y_start=row_y, y_end=row_y,
                                          width_per_divisor=width))

        return cls(scale=scale, top_y=top_y, bottom_y=bottom_y, zones=tuple(zones),
                   name=name or str(section.get("name", "")))


def _emit(points: list[TrimLinePoint], x: float, y: float) -> None:
    """Append a point unless it repeats the last one."""
    if points and points[-1].x == x and points[-1].y == y:
        return
    points.append(TrimLinePoint(x, y))


def project_trim_line(
    dry_operating_index: float,
    zone_weights: Mapping[str, float],
    chart: ChartGeometry,
) -> list[TrimLinePoint]:
    """Project zone loads onto the chart and return the trim line.

    Args:
        dry_operating_index: DOI from the dry-operating baseline.
        zone_weights: Load per zone key; missing and non-finite loads count as 0.
        chart: Chart calibration and zones.

    Returns:
        Ordered staircase of points from the top reference line at the DOI
        down to the bottom edge at the final index. With every load at 0 all
        points share the DOI's x coordinate.
    """
    points: list[TrimLinePoint] = []
    x = chart.scale.to_x(dry_operating_index)
    y = chart.top_y
    _emit(points, x, y)

    for zone in chart.zones:
        if y < zone.y_start:
            y = zone.y_start
            _emit(points, x, y)

        load = zone_weights.get(zone.key) or 0.0
        if not math.isfinite(load):
            logger.debug("Zone %s load %r is not finite, using 0", zone.key, load)
            load = 0.0
        x += zone.displacement(load)
        _emit(points, x, y)

        if y < zone.y_end:
            y = zone.y_end
            _emit(points, x, y)

    if y < chart.bottom_y:
        _emit(points, x, chart.bottom_y)

    logger.debug("Projected trim line with %d points, final x=%.2f", len(points), x)
    return points


def final_index(points: Sequence[TrimLinePoint], scale: IndexScale) -> float:
    """Read the resulting balance index off the last trim line point."""
    if not points:
        raise ValueError("Trim line has no points")
    return scale.to_index(points[-1].x)

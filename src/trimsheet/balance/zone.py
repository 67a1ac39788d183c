"""Loading zones of a balance chart.

A zone is one row of the loading-index chart: a passenger section or a cargo
compartment. Its geometry says how far the trim line moves sideways for a
given load in that zone.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class ZoneKind(Enum):
    """What a zone's load is measured in.

    Attributes:
        CABIN: Passenger section, load is a passenger count
        HOLD: Cargo compartment, load is kilograms
    """

    CABIN = "cabin"
    HOLD = "hold"


@dataclass(frozen=True)
class Zone:
    """Chart geometry for one loading zone.

    The horizontal displacement for a load ``w`` is
    ``(w / value_divisor) * width_per_divisor * direction``.

    Attributes:
        key: Zone identifier (e.g., "paxA", "c1")
        order: Position in the chart walk
        value_divisor: Load that moves the line by one chart step (> 0)
        width_per_divisor: Chart units per step (>= 0)
        direction: -1 for a nose-heavy (left) shift, +1 for tail-heavy (right)
        y_start: Top of the zone's band on the chart
        y_end: Bottom of the zone's band (>= y_start)
        kind: Whether the load is passengers or kilograms
        label: Display label

    Examples:
        >>> c5 = Zone("c5", order=8, value_divisor=250, width_per_divisor=10,
        ...           direction=1, y_start=550, y_end=550, kind=ZoneKind.HOLD)
        >>> c5.displacement(500)
        20.0
    """

    key: str
    order: int
    value_divisor: float
    width_per_divisor: float
    direction: int
    y_start: float
    y_end: float
    kind: ZoneKind = ZoneKind.HOLD
    label: str = ""

    def __post_init__(self) -> None:
        if not self.value_divisor > 0:
            raise ValueError(f"Zone {self.key}: value_divisor must be positive, got {self.value_divisor}")
        if self.width_per_divisor < 0:
            raise ValueError(f"Zone {self.key}: width_per_divisor must not be negative")
        if self.direction not in (1, -1):
            raise ValueError(f"Zone {self.key}: direction must be +1 or -1, got {self.direction}")
        if self.y_end < self.y_start:
            raise ValueError(f"Zone {self.key}: y_end {self.y_end} is above y_start {self.y_start}")

    def displacement(self, load: float) -> float:
        """Horizontal chart displacement produced by ``load`` in this zone."""
        return (load / self.value_divisor) * self.width_per_divisor * self.direction

    @classmethod
    def from_config(cls, section: Mapping[str, Any], order: int, y_start: float, y_end: float,
                    width_per_divisor: float) -> "Zone":
        """Build a zone from one entry of a chart's ``zones`` list.

        ``section`` may override the band and width given by the chart.
        ``direction`` accepts ``left``/``right`` as well as -1/+1.
        """
        direction = section.get("direction", 1)
        if isinstance(direction, str):
            direction = {"left": -1, "right": 1}.get(direction.strip().lower(), direction)

        return cls(
            key=str(section["key"]),
            order=order,
            value_divisor=float(section["divisor"]),
            width_per_divisor=float(section.get("width_per_divisor", width_per_divisor)),
            direction=int(direction),
            y_start=float(section.get("y_start", y_start)),
            y_end=float(section.get("y_end", y_end)),
            kind=ZoneKind(section.get("kind", ZoneKind.HOLD.value)),
            label=str(section.get("label", section["key"])),
        )

"""Weight and balance index engine.

This package turns load entries into per-zone totals and projects them onto
a loading-index chart as a trim line.

Typical usage:
    from trimsheet.balance import compute_zone_weights, project_trim_line

    weights = compute_zone_weights(inputs, layout=layout, average_baggage_weight=15)
    points = project_trim_line(baseline.dry_operating_index, weights, chart)
"""

from trimsheet.balance.baggage import BaggagePlan
from trimsheet.balance.contributions import (
    LoadSummary,
    PositionLoadInput,
    ZoneLoadInput,
    compute_zone_weights,
    parse_number,
    summarize_load,
)
from trimsheet.balance.layout import (
    AircraftLayout,
    CompartmentLayout,
    LoadPosition,
    PositionKind,
    normalize_compartment_id,
)
from trimsheet.balance.projection import (
    ChartGeometry,
    IndexScale,
    TrimLinePoint,
    final_index,
    project_trim_line,
)
from trimsheet.balance.zone import Zone, ZoneKind

__all__ = [
    "AircraftLayout",
    "BaggagePlan",
    "ChartGeometry",
    "CompartmentLayout",
    "IndexScale",
    "LoadPosition",
    "LoadSummary",
    "PositionKind",
    "PositionLoadInput",
    "TrimLinePoint",
    "Zone",
    "ZoneKind",
    "ZoneLoadInput",
    "compute_zone_weights",
    "final_index",
    "normalize_compartment_id",
    "parse_number",
    "project_trim_line",
    "summarize_load",
]

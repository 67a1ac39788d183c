"""Reference data lookups.

Dry-operating baselines and water index corrections are read-only tables
loaded once per session. Lookups return explicit not-found outcomes.

Typical usage:
    from trimsheet.reference import ConfigurationKey, lookup_baseline
    from trimsheet.reference.tables import ReferenceTables

    tables = ReferenceTables.load()
    baseline = lookup_baseline(tables.dry_operating, key)
"""

from trimsheet.reference.dry_operating import (
    ConfigurationKey,
    DryOperatingBaseline,
    DryOperatingTable,
    lookup_baseline,
)
from trimsheet.reference.water_index import (
    TailGroup,
    TailIncomplete,
    WaterIndex,
    WaterIndexFamily,
    WaterIndexTable,
    normalize_percent,
    normalize_tail,
    resolve_water_index,
)

__all__ = [
    "ConfigurationKey",
    "DryOperatingBaseline",
    "DryOperatingTable",
    "TailGroup",
    "TailIncomplete",
    "WaterIndex",
    "WaterIndexFamily",
    "WaterIndexTable",
    "lookup_baseline",
    "normalize_percent",
    "normalize_tail",
    "resolve_water_index",
]

"""Load-once reference tables.

All reference data lives in one directory (the packaged ``data/`` directory
by default):

    dry_operating_data.csv    dry-operating baselines
    compartment_heights.yaml  minimum compartment heights and notes
    ti_distance.yaml          Transport Index ladder
    water_index.yaml          water corrections and tail groups
    aircraft_layouts.yaml     hold layouts and extra-item defaults
    charts.yaml               balance chart calibration and zones

A missing file leaves its table empty (the standard ladder is used when the
TI file is missing), so lookups report not-found instead of failing.
Malformed content is an error at load time.

Typical usage:
    tables = ReferenceTables.load()
    chart = tables.get_chart("A321-231")
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, TypeVar

from trimsheet.balance.layout import AircraftLayout
from trimsheet.balance.projection import ChartGeometry
from trimsheet.core.config import ConfigError, ConfigLoader
from trimsheet.core.resource_path import get_data_path
from trimsheet.radioactive.clearance import CompartmentHeightTable
from trimsheet.radioactive.ladder import TIDistanceLadder
from trimsheet.reference.dry_operating import DryOperatingTable
from trimsheet.reference.water_index import WaterIndexTable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReferenceDataError(ConfigError):
    """Raised when a reference data file exists but cannot be used."""


@dataclass
class ReferenceTables:
    """Every reference table needed by the calculations."""

    dry_operating: DryOperatingTable = field(default_factory=DryOperatingTable)
    compartment_heights: CompartmentHeightTable = field(default_factory=CompartmentHeightTable)
    ti_ladder: TIDistanceLadder = field(default_factory=TIDistanceLadder.default)
    water_index: WaterIndexTable = field(default_factory=WaterIndexTable)
    layouts: dict[str, AircraftLayout] = field(default_factory=dict)
    charts: dict[str, ChartGeometry] = field(default_factory=dict)

    @classmethod
    def load(cls, data_dir: str | Path | None = None) -> "ReferenceTables":
        """Load all tables from ``data_dir`` (the packaged data by default).

        Raises:
            ReferenceDataError: If a file exists but is malformed.
        """
        data_dir = Path(data_dir) if data_dir is not None else get_data_path()
        logger.info("Loading reference tables from %s", data_dir)

        tables = cls()
        tables.dry_operating.load_from_csv(data_dir / "dry_operating_data.csv")

        tables.compartment_heights = _load_section(
            data_dir / "compartment_heights.yaml", "aircraft",
            CompartmentHeightTable.from_config, CompartmentHeightTable,
        )
        tables.ti_ladder = _load_section(
            data_dir / "ti_distance.yaml", "steps",
            TIDistanceLadder.from_config, TIDistanceLadder.default,
        )
        tables.water_index = _load_section(
            data_dir / "water_index.yaml", "families",
            WaterIndexTable.from_config, WaterIndexTable,
        )
        tables.layouts = _load_section(
            data_dir / "aircraft_layouts.yaml", "aircraft",
            lambda section: {
                str(name).upper(): AircraftLayout.from_config(str(name), cfg)
                for name, cfg in section.items()
            },
            dict,
        )
        tables.charts = _load_section(
            data_dir / "charts.yaml", "charts",
            lambda section: {
                str(name).upper(): ChartGeometry.from_config(cfg, name=str(name))
                for name, cfg in section.items()
            },
            dict,
        )

        logger.info(
            "Reference tables loaded: %d baselines, %d layouts, %d charts",
            len(tables.dry_operating), len(tables.layouts), len(tables.charts),
        )
        return tables

    def get_layout(self, aircraft_type: str) -> AircraftLayout | None:
        """Get the hold layout for an aircraft type.

        A variant such as ``"A321-231"`` falls back to its base type ``"A321"``.
        """
        key = aircraft_type.strip().upper()
        return self.layouts.get(key) or self.layouts.get(key.split("-", 1)[0])

    def get_chart(self, name: str) -> ChartGeometry | None:
        return self.charts.get(name.strip().upper())


def _load_section(
    path: Path,
    section: str,
    build: Callable[[Any], T],
    empty: Callable[[], T],
) -> T:
    """Load one YAML file and build a table from one of its sections."""
    if not path.exists():
        logger.warning("Reference data file not found, using empty table: %s", path)
        return empty()

    try:
        data = ConfigLoader.load(path).get(section)
    except ConfigError as e:
        raise ReferenceDataError(str(e)) from e

    if data is None:
        logger.warning("No '%s' section in %s, using empty table", section, path)
        return empty()

    try:
        return build(data)
    except (AttributeError, KeyError, OverflowError, TypeError, ValueError) as e:
        raise ReferenceDataError(f"Invalid reference data in {path}: {e}") from e

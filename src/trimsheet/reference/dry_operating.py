"""Dry-operating baseline table and lookup.

Each row of the dry-operating table gives the basic weight and dry operating
index (DOI) of one aircraft configuration: airframe, crew complement, pantry
code and potable water fill. A planner's entries must match a row exactly;
when nothing matches, the lookup says so and the caller skips the trim line.

Typical usage:
    table = DryOperatingTable()
    table.load_from_csv("data/dry_operating_data.csv")

    key = ConfigurationKey("A321-231", "TC-JRA", 2, 6, "a", 100)
    baseline = lookup_baseline(table, key)
    if baseline:
        print(baseline.basic_weight, baseline.dry_operating_index)
"""

import csv
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from trimsheet.core.outcomes import NotFound

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("Aircraft", "Reg", "Cockpit", "Cabin", "Pantry", "WaterPercent", "BasicWeight", "DOI")

NormalizedKey = tuple[str, str, float | str, float | str, str, float | str]


def _normalize_text(value: object) -> str:
    return str(value if value is not None else "").strip().upper()


def _normalize_number(value: object) -> float | str:
    """Normalize a numeric key field so ``"2"``, ``2`` and ``2.0`` compare equal.

    Values that do not parse stay as text and will simply never match a row.
    """
    text = _normalize_text(value).lstrip("%").rstrip("%")
    try:
        return float(text)
    except ValueError:
        return text


@dataclass(frozen=True)
class ConfigurationKey:
    """Aircraft configuration used to select a dry-operating baseline.

    Attributes:
        aircraft_type: Aircraft type/variant (e.g., "A321-231")
        tail_number: Registration (e.g., "TC-JRA")
        cockpit_crew: Number of flight deck crew
        cabin_crew: Number of cabin crew
        pantry_code: Catering/pantry configuration code (case-insensitive)
        water_percent: Potable water fill in percent
    """

    aircraft_type: str
    tail_number: str
    cockpit_crew: int | str
    cabin_crew: int | str
    pantry_code: str
    water_percent: int | str

    def normalized(self) -> NormalizedKey:
        """Return the key in the form used for exact matching."""
        return (
            _normalize_text(self.aircraft_type),
            _normalize_text(self.tail_number),
            _normalize_number(self.cockpit_crew),
            _normalize_number(self.cabin_crew),
            _normalize_text(self.pantry_code),
            _normalize_number(self.water_percent),
        )


@dataclass(frozen=True)
class DryOperatingBaseline:
    """Basic weight (kg) and dry operating index of one configuration."""

    basic_weight: float
    dry_operating_index: float


class DryOperatingTable:
    """Read-only table of dry-operating baselines keyed by configuration.

    The table is populated once (from CSV or from row mappings). An empty
    table is valid: every lookup against it reports not-found.
    """

    def __init__(self) -> None:
        self._rows: dict[NormalizedKey, DryOperatingBaseline] = {}

    @property
    def rows(self) -> Mapping[NormalizedKey, DryOperatingBaseline]:
        return MappingProxyType(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def load_from_csv(self, csv_path: str | Path) -> None:
        """Load rows from a CSV file with the standard dry-operating columns.

        A missing file leaves the table empty. Rows with unparsable weight or
        index values are skipped.

        Args:
            csv_path: Path to ``dry_operating_data.csv``.
        """
        csv_path = Path(csv_path)
        if not csv_path.exists():
            logger.warning("Dry-operating data not found: %s", csv_path)
            return

        with open(csv_path, encoding="utf-8", newline="") as f:
            self.load_rows(csv.DictReader(f))

        logger.info("Loaded %d dry-operating baselines from %s", len(self._rows), csv_path)

    def load_rows(self, rows: Iterable[Mapping[str, object]]) -> None:
        """Add rows given as mappings with the CSV column names."""
        for row in rows:
            try:
                key = ConfigurationKey(
                    aircraft_type=str(row["Aircraft"]),
                    tail_number=str(row["Reg"]),
                    cockpit_crew=str(row["Cockpit"]),
                    cabin_crew=str(row["Cabin"]),
                    pantry_code=str(row.get("Pantry") or ""),
                    water_percent=str(row["WaterPercent"]),
                ).normalized()
                baseline = DryOperatingBaseline(
                    basic_weight=float(row["BasicWeight"]),
                    dry_operating_index=float(row["DOI"]),
                )
            except (KeyError, TypeError, ValueError) as e:
                logger.debug("Skipping invalid dry-operating row %s: %s", row, e)
                continue

            if not (math.isfinite(baseline.basic_weight) and math.isfinite(baseline.dry_operating_index)):
                logger.debug("Skipping dry-operating row with non-finite values: %s", row)
                continue

            if key in self._rows:
                logger.warning("Duplicate dry-operating configuration %s, keeping first row", key)
                continue

            self._rows[key] = baseline

    def get(self, key: ConfigurationKey) -> DryOperatingBaseline | None:
        return self._rows.get(key.normalized())


def lookup_baseline(
    table: DryOperatingTable, key: ConfigurationKey
) -> DryOperatingBaseline | NotFound:
    """Resolve the dry-operating baseline for a configuration.

    Args:
        table: Loaded dry-operating table (may be empty).
        key: Configuration entered by the planner.

    Returns:
        The matching baseline, or NotFound when no row matches exactly.
    """
    baseline = table.get(key)
    if baseline is None:
        logger.info("No dry-operating configuration for %s", key)
        return NotFound(
            f"No matching configuration for {key.aircraft_type} {key.tail_number} "
            f"(cockpit {key.cockpit_crew}, cabin {key.cabin_crew}, "
            f"pantry {key.pantry_code or '-'}, water {key.water_percent}%). "
            "Check pantry code and crew."
        )
    return baseline

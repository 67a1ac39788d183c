"""Radioactive cargo stand-off clearance check.

A package may go into a compartment when the compartment's minimum height
leaves room for the package itself plus the stand-off distance its Transport
Index requires:

    required space (cm) = stand-off distance (m) * 100 + box height (cm)
    clearance (cm)      = compartment minimum height (cm) - required space

Compartments with several height variants (different bin heights) get one
verdict per variant.

Typical usage:
    heights = CompartmentHeightTable.from_config(config.get_section("aircraft"))
    report = check_radioactive_clearance(heights, "B737", "4", 3.2, "30cm")
    if report:
        for result in report.results:
            print(result.message)
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from trimsheet.balance.layout import normalize_compartment_id
from trimsheet.core.outcomes import InvalidInput, NotApplicable
from trimsheet.radioactive.ladder import TIDistanceLadder, ti_to_distance

logger = logging.getLogger(__name__)

_HEIGHT_PATTERN = re.compile(r"^(\d+(?:\.\d*)?|\.\d+)(cm|m)?$")


def _to_cm(metres: float) -> float:
    # 1.15 * 100 is 114.99999999999999 in binary floating point
    return round(metres * 100, 6)


def parse_box_height(value: str | float | int | None, default_unit: str = "cm") -> float | None:
    """Parse a box height entry into centimetres.

    A trailing ``cm`` means centimetres and a trailing ``m`` means metres.
    A bare number is in ``default_unit``.

    Returns:
        Height in cm (0.0 for an entry of zero), or None when unparsable.

    Examples:
        >>> parse_box_height("30cm")
        30.0
        >>> parse_box_height("0.2m")
        20.0
        >>> parse_box_height("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number, unit = float(value), default_unit
    elif isinstance(value, str):
        text = value.strip().lower().replace(" ", "").replace(",", ".")
        match = _HEIGHT_PATTERN.match(text)
        if not match:
            return None
        number, unit = float(match.group(1)), match.group(2) or default_unit
    else:
        return None

    if not math.isfinite(number):
        return None
    return _to_cm(number) if unit == "m" else number


def _parse_ti(value: str | float | int | None) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        ti = float(value.strip().replace(",", ".")) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    return ti if math.isfinite(ti) else None


def _parse_heights(raw: Any) -> tuple[float, ...]:
    """Heights may be a number, a list, or a ``"1.24 - 1.20"`` range string."""
    if isinstance(raw, (list, tuple)):
        items = list(raw)
    elif isinstance(raw, str):
        items = raw.split(" - ")
    else:
        items = [raw]

    heights = tuple(float(str(item).strip()) for item in items)
    if not heights:
        raise ValueError("Compartment height list is empty")
    if any(h <= 0 for h in heights):
        raise ValueError(f"Compartment heights must be positive: {heights}")
    return heights


@dataclass(frozen=True)
class AdvisoryNote:
    """Free-text caveat for an aircraft, optionally limited to some compartments."""

    text: str
    compartments: frozenset[str] = frozenset()

    def applies_to(self, compartment_id: str) -> bool:
        return not self.compartments or compartment_id in self.compartments


@dataclass
class CompartmentHeightTable:
    """Minimum compartment heights (metres) and advisory notes per aircraft type."""

    heights: dict[str, dict[str, tuple[float, ...]]] = field(default_factory=dict)
    notes: dict[str, tuple[AdvisoryNote, ...]] = field(default_factory=dict)

    @classmethod
    def from_config(cls, section: Mapping[str, Any]) -> "CompartmentHeightTable":
        """Build the table from the ``aircraft`` section of ``compartment_heights.yaml``.

        Raises:
            ValueError: If a height entry is empty, non-positive or unparsable.
        """
        heights: dict[str, dict[str, tuple[float, ...]]] = {}
        notes: dict[str, tuple[AdvisoryNote, ...]] = {}

        for aircraft, aircraft_config in section.items():
            key = str(aircraft).strip().upper()
            heights[key] = {
                normalize_compartment_id(comp): _parse_heights(raw)
                for comp, raw in (aircraft_config.get("compartments") or {}).items()
            }

            parsed_notes = []
            for note in aircraft_config.get("notes") or []:
                if isinstance(note, str):
                    parsed_notes.append(AdvisoryNote(note))
                else:
                    scope = frozenset(normalize_compartment_id(c) for c in note.get("compartments") or [])
                    parsed_notes.append(AdvisoryNote(str(note["text"]), scope))
            notes[key] = tuple(parsed_notes)

        logger.debug("Loaded compartment heights for %d aircraft types", len(heights))
        return cls(heights=heights, notes=notes)

    def get_heights(self, aircraft_type: str, compartment_id: object) -> tuple[float, ...] | None:
        compartments = self.heights.get(str(aircraft_type).strip().upper())
        if compartments is None:
            return None
        return compartments.get(normalize_compartment_id(compartment_id))

    def notes_for(self, aircraft_type: str, compartment_id: object) -> tuple[str, ...]:
        comp = normalize_compartment_id(compartment_id)
        return tuple(
            note.text
            for note in self.notes.get(str(aircraft_type).strip().upper(), ())
            if note.applies_to(comp)
        )


@dataclass(frozen=True)
class ClearanceResult:
    """Verdict for one compartment height variant.

    Attributes:
        height_m: Compartment minimum height in metres
        height_cm: Same height in centimetres
        required_space_cm: Stand-off distance plus box height
        clearance_cm: height_cm - required_space_cm
    """

    height_m: float
    height_cm: float
    required_space_cm: float
    clearance_cm: float

    @property
    def clears(self) -> bool:
        return self.clearance_cm > 0

    @property
    def formula(self) -> str:
        relation = "<" if self.clears else ">="
        return f"{self.required_space_cm:.0f} cm {relation} {self.height_cm:.0f} cm"

    @property
    def message(self) -> str:
        if self.clears:
            return f"{self.height_m:g} m: clears with {self.clearance_cm:.0f} cm margin ({self.formula})"
        return f"{self.height_m:g} m: does not clear at this height ({self.formula})"


@dataclass(frozen=True)
class ClearanceReport:
    """All verdicts for one package and compartment, plus advisory notes."""

    aircraft_type: str
    compartment_id: str
    ti: float
    distance_m: float
    box_height_cm: float
    required_space_cm: float
    results: tuple[ClearanceResult, ...]
    notes: tuple[str, ...] = ()

    @property
    def clears_any(self) -> bool:
        return any(result.clears for result in self.results)


def check_radioactive_clearance(
    table: CompartmentHeightTable,
    aircraft_type: str,
    compartment_id: object,
    ti: str | float | int | None,
    box_height: str | float | int | None,
    ladder: TIDistanceLadder | None = None,
    default_unit: str = "cm",
) -> ClearanceReport | NotApplicable | InvalidInput:
    """Check whether a radioactive package fits a compartment.

    Args:
        table: Compartment height table.
        aircraft_type: Aircraft type key (e.g., "B737").
        compartment_id: Compartment identifier ("4" or "Compartment 4").
        ti: Transport Index of the package.
        box_height: Box height, e.g. ``"30cm"``, ``"0.2m"`` or ``30``.
        ladder: TI ladder; the standard ladder when omitted.
        default_unit: Unit of a box height given without a unit ("cm" or "m").

    Returns:
        A ClearanceReport with one verdict per height variant, NotApplicable
        when the aircraft has no such compartment, or InvalidInput when the
        TI or box height cannot be read.
    """
    ti_value = _parse_ti(ti)
    if ti_value is None:
        return InvalidInput(f"Invalid transport index: {ti!r}")

    box_cm = parse_box_height(box_height, default_unit)
    if box_cm is None:
        return InvalidInput(f"Invalid box height: {box_height!r}")

    heights = table.get_heights(aircraft_type, compartment_id)
    if not heights:
        logger.info("No height data for %s compartment %s", aircraft_type, compartment_id)
        return NotApplicable(
            f"Compartment {compartment_id} does not exist on {aircraft_type} or may not be loaded"
        )

    distance_m = ti_to_distance(ti_value, ladder)
    required_cm = _to_cm(distance_m) + box_cm

    results = tuple(
        ClearanceResult(
            height_m=height,
            height_cm=_to_cm(height),
            required_space_cm=required_cm,
            clearance_cm=round(_to_cm(height) - required_cm, 6),
        )
        for height in heights
    )

    return ClearanceReport(
        aircraft_type=aircraft_type,
        compartment_id=normalize_compartment_id(compartment_id),
        ti=ti_value,
        distance_m=distance_m,
        box_height_cm=box_cm,
        required_space_cm=required_cm,
        results=results,
        notes=table.notes_for(aircraft_type, compartment_id),
    )

"""Reduce raw load entries to one total per chart zone.

Planner entries arrive as text or numbers and may be blank. A blank or
unparsable entry counts as zero, so a half-filled form still produces a
usable (if incomplete) trim line.

Per zone::

    total = bags * average bag weight   (when both are known and bags > 0)
          + cargo + extra items
          + ULD positions (bags, cargo and container tare)
          + passengers                  (cabin zones only)

Cabin zone totals are passenger counts; hold zone totals are kilograms.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from trimsheet.balance.layout import (
    DEFAULT_ULD_TARE_KG,
    AircraftLayout,
    CompartmentLayout,
    PositionKind,
    normalize_compartment_id,
)
from trimsheet.balance.zone import Zone, ZoneKind
from trimsheet.reference.dry_operating import DryOperatingBaseline

logger = logging.getLogger(__name__)

STANDARD_PASSENGER_WEIGHT_KG = 84.0

RawNumber = float | int | str | None


def parse_number(value: RawNumber) -> float:
    """Parse a form entry, treating blank, unparsable and NaN entries as 0."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Treating unparsable entry %r as 0", value)
        return 0.0
    return number if math.isfinite(number) else 0.0


@dataclass(frozen=True)
class PositionLoadInput:
    """Entries for a single ULD or bulk position.

    Attributes:
        baggage_count: Bags loaded in the position
        cargo_weight: Cargo weight in kg
        empty_uld: Position carries an empty container (tare only)
        uld_tare: Container tare override in kg
    """

    baggage_count: RawNumber = None
    cargo_weight: RawNumber = None
    empty_uld: bool = False
    uld_tare: RawNumber = None


@dataclass(frozen=True)
class ZoneLoadInput:
    """Raw entries for one zone.

    Attributes:
        passengers: Passenger count (cabin zones)
        baggage_count: Bags loaded bulk in the zone
        average_baggage_weight: Average bag weight; falls back to the plan-wide value
        cargo_weight: Bulk cargo weight in kg
        extra_items_weight: Fixed extra items (crew rest, emergency equipment) in kg
        positions: ULD/bulk position entries keyed by position id
    """

    passengers: RawNumber = None
    baggage_count: RawNumber = None
    average_baggage_weight: RawNumber = None
    cargo_weight: RawNumber = None
    extra_items_weight: RawNumber = None
    positions: Mapping[str, PositionLoadInput] = field(default_factory=dict)


def _baggage_weight(count: RawNumber, average: float) -> float:
    bags = parse_number(count)
    if bags > 0 and average:
        return bags * average
    return 0.0


def _position_weight(
    position_id: str,
    entry: PositionLoadInput,
    average: float,
    compartment: CompartmentLayout | None,
) -> float:
    """Weight of one position, including container tare where it applies."""
    carries_tare = True
    if compartment is not None:
        position = compartment.get_position(position_id)
        carries_tare = compartment.uld_tare and (position is None or position.kind is PositionKind.ULD)

    tare_override = parse_number(entry.uld_tare)

    if entry.empty_uld:
        if not carries_tare:
            return 0.0
        return tare_override or DEFAULT_ULD_TARE_KG

    contents = _baggage_weight(entry.baggage_count, average) + parse_number(entry.cargo_weight)
    if not carries_tare:
        return contents
    if contents > 0:
        return contents + (tare_override or DEFAULT_ULD_TARE_KG)
    return tare_override


def compute_zone_weights(
    inputs: Mapping[str, ZoneLoadInput],
    layout: AircraftLayout | None = None,
    average_baggage_weight: RawNumber = None,
    eic_weight: RawNumber = None,
    eic_compartment: str | int | None = None,
) -> dict[str, float]:
    """Compute the total load of every zone.

    Args:
        inputs: Raw entries keyed by zone key.
        layout: Hold layout of the aircraft; supplies ULD tare rules and the
            default extra-item (EIC) weight and compartment.
        average_baggage_weight: Plan-wide average bag weight in kg.
        eic_weight: Extra-item weight override in kg.
        eic_compartment: Compartment id carrying the extra items, overriding
            the layout default. "5" and "Compartment 5" are the same compartment.

    Returns:
        Mapping of zone key to total load (passengers or kg), never negative.
    """
    plan_average = parse_number(average_baggage_weight)
    weights: dict[str, float] = {}

    for zone_key, entry in inputs.items():
        average = parse_number(entry.average_baggage_weight) or plan_average
        compartment = layout.compartment_for_zone(zone_key) if layout else None

        total = (
            parse_number(entry.passengers)
            + _baggage_weight(entry.baggage_count, average)
            + parse_number(entry.cargo_weight)
            + parse_number(entry.extra_items_weight)
        )
        for position_id, position_entry in entry.positions.items():
            total += _position_weight(position_id, position_entry, average, compartment)

        weights[zone_key] = total

    eic_zone, eic_kg = _resolve_eic(layout, eic_weight, eic_compartment)
    if eic_zone is not None and eic_kg:
        weights[eic_zone] = weights.get(eic_zone, 0.0) + eic_kg

    for zone_key, total in weights.items():
        if total < 0:
            logger.debug("Zone %s total %.1f is negative, using 0", zone_key, total)
            weights[zone_key] = 0.0

    return weights


def _resolve_eic(
    layout: AircraftLayout | None, eic_weight: RawNumber, eic_compartment: str | int | None
) -> tuple[str | None, float]:
    weight = parse_number(eic_weight) if eic_weight is not None else (layout.eic_weight if layout else 0.0)
    compartment_id = eic_compartment or (layout.eic_compartment if layout else None)
    if compartment_id is None:
        return None, 0.0
    compartment_id = normalize_compartment_id(compartment_id)

    if layout is None:
        return f"c{compartment_id}", weight

    compartment = layout.get_compartment(compartment_id)
    if compartment is None:
        logger.warning(
            "Extra items compartment %s does not exist on %s, using zone c%s",
            compartment_id, layout.aircraft_type, compartment_id,
        )
        return f"c{compartment_id}", weight
    return compartment.zone_key, weight


@dataclass(frozen=True)
class LoadSummary:
    """Weight summary of a load plan.

    Attributes:
        dry_operating_weight: Basic weight from the dry-operating table (kg)
        dry_operating_index: DOI from the dry-operating table
        hold_payload: Total weight in cargo compartments (kg)
        passengers: Passenger count over all cabin zones
        passenger_weight: Passenger count times the standard passenger weight (kg)
        zero_fuel_weight: Dry operating weight plus all payload (kg)
    """

    dry_operating_weight: float
    dry_operating_index: float
    hold_payload: float
    passengers: float
    passenger_weight: float
    zero_fuel_weight: float


def summarize_load(
    baseline: DryOperatingBaseline,
    zone_weights: Mapping[str, float],
    zones: Sequence[Zone],
    passenger_weight_kg: float = STANDARD_PASSENGER_WEIGHT_KG,
) -> LoadSummary:
    """Summarize payload and zero-fuel weight for a resolved baseline."""
    passengers = sum(zone_weights.get(z.key, 0.0) for z in zones if z.kind is ZoneKind.CABIN)
    hold_payload = sum(zone_weights.get(z.key, 0.0) for z in zones if z.kind is ZoneKind.HOLD)
    pax_weight = passengers * passenger_weight_kg

    return LoadSummary(
        dry_operating_weight=baseline.basic_weight,
        dry_operating_index=baseline.dry_operating_index,
        hold_payload=hold_payload,
        passengers=passengers,
        passenger_weight=pax_weight,
        zero_fuel_weight=baseline.basic_weight + hold_payload + pax_weight,
    )

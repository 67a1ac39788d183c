"""Cargo hold layouts.

Every compartment is described the same way: an ordered list of loading
positions, each tagged as a bulk position or a ULD position. Narrow-body
holds with a single bulk position and wide-body holds with several
container positions therefore share one shape.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

DEFAULT_ULD_TARE_KG = 65.0


def normalize_compartment_id(compartment_id: object) -> str:
    """Reduce ``"Compartment 5"``, ``" 5 "`` or ``5`` to ``"5"``."""
    text = str(compartment_id).strip()
    if text.lower().startswith("compartment"):
        text = text[len("compartment"):].strip()
    return text


class PositionKind(Enum):
    """Loading position type."""

    BULK = "bulk"
    ULD = "uld"


@dataclass(frozen=True)
class LoadPosition:
    """A loading position inside a compartment (e.g., "11P" or "5 (Bulk)")."""

    position_id: str
    kind: PositionKind


@dataclass(frozen=True)
class CompartmentLayout:
    """One cargo compartment.

    Attributes:
        compartment_id: Short identifier used on the chart and in height tables ("1".."5")
        name: Display name (e.g., "Compartment 1")
        positions: Loading positions in the compartment
        uld_tare: Whether ULD positions here add container tare weight
        zone_key: Key of the chart zone this compartment loads into
    """

    compartment_id: str
    name: str
    positions: tuple[LoadPosition, ...]
    uld_tare: bool = True
    zone_key: str = ""

    def __post_init__(self) -> None:
        if not self.zone_key:
            object.__setattr__(self, "zone_key", f"c{self.compartment_id}")

    def get_position(self, position_id: str) -> LoadPosition | None:
        for position in self.positions:
            if position.position_id == position_id:
                return position
        return None


@dataclass(frozen=True)
class AircraftLayout:
    """Hold layout and extra-item defaults for one aircraft type.

    Attributes:
        aircraft_type: Type key (e.g., "A321")
        name: Display name
        compartments: Compartments in chart order
        eic_weight: Default weight of extra items carried in the hold (kg)
        eic_compartment: Compartment id that carries the extra items
        uld_loading: Whether the type can be loaded with ULDs at all
    """

    aircraft_type: str
    name: str
    compartments: tuple[CompartmentLayout, ...]
    eic_weight: float = 0.0
    eic_compartment: str | None = None
    uld_loading: bool = True

    def get_compartment(self, compartment_id: object) -> CompartmentLayout | None:
        wanted = normalize_compartment_id(compartment_id)
        for compartment in self.compartments:
            if compartment.compartment_id == wanted:
                return compartment
        return None

    def compartment_for_zone(self, zone_key: str) -> CompartmentLayout | None:
        for compartment in self.compartments:
            if compartment.zone_key == zone_key:
                return compartment
        return None

    @classmethod
    def from_config(cls, aircraft_type: str, section: Mapping[str, Any]) -> "AircraftLayout":
        """Build a layout from one entry of ``aircraft_layouts.yaml``.

        Positions are listed as ``{id: "11P", kind: uld}``; a bare string is
        a ULD position.
        """
        compartments = []
        for comp_id, comp_config in (section.get("compartments") or {}).items():
            comp_id = normalize_compartment_id(comp_id)
            positions = []
            for entry in comp_config.get("positions") or []:
                if isinstance(entry, str):
                    positions.append(LoadPosition(entry, PositionKind.ULD))
                else:
                    positions.append(
                        LoadPosition(str(entry["id"]), PositionKind(entry.get("kind", "uld")))
                    )
            compartments.append(
                CompartmentLayout(
                    compartment_id=comp_id,
                    name=str(comp_config.get("name", f"Compartment {comp_id}")),
                    positions=tuple(positions),
                    uld_tare=bool(comp_config.get("uld_tare", True)),
                    zone_key=str(comp_config.get("zone", "")),
                )
            )

        eic = section.get("eic") or {}
        eic_compartment = eic.get("compartment")
        return cls(
            aircraft_type=aircraft_type,
            name=str(section.get("name", aircraft_type)),
            compartments=tuple(compartments),
            eic_weight=float(eic.get("weight", 0.0)),
            eic_compartment=(
                normalize_compartment_id(eic_compartment) if eic_compartment is not None else None
            ),
            uld_loading=bool(section.get("uld_loading", True)),
        )

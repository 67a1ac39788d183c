"""Potable water index corrections per aircraft family and tail group.

Some families (the B737 fleet mixes -800 and -900 airframes) need the
individual tail to pick the right correction. The planner types a short tail
identifier, which is searched in the group membership lists. Other families
resolve straight to their single group.

Typical usage:
    table = WaterIndexTable.from_config(config.get_section("families"))
    result = resolve_water_index(table, "B737", "%50", tail="JFC")
    if result:
        print(result.weight_offset, result.index_offset)
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from trimsheet.core.outcomes import NotFound

logger = logging.getLogger(__name__)


def normalize_percent(value: object) -> int | None:
    """Turn ``25``, ``"25"`` or ``"%25"`` into ``25``; None if unparsable or not finite."""
    text = str(value).strip().strip("%").strip()
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return None


def normalize_tail(value: str) -> str:
    """Reduce a tail entry to its short identifier (``"tc-jfc"`` -> ``"JFC"``)."""
    text = value.strip().upper()
    if "-" in text:
        text = text.rsplit("-", 1)[1]
    return text


@dataclass(frozen=True)
class WaterIndex:
    """Weight and index correction for a water fill percentage.

    Attributes:
        family: Aircraft family the lookup was made for
        group: Tail group that matched (equal to the family for single-group families)
        percent: Water fill percentage
        weight_offset: Weight correction in kg
        index_offset: Index correction
    """

    family: str
    group: str
    percent: int
    weight_offset: float
    index_offset: float


@dataclass(frozen=True)
class TailIncomplete:
    """The tail identifier is still being typed; no verdict yet."""

    entered: str
    required_length: int

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class TailGroup:
    """Airframes sharing one set of water corrections."""

    name: str
    tails: frozenset[str]
    corrections: Mapping[int, tuple[float, float]]

    @classmethod
    def from_config(cls, name: str, section: Mapping[str, Any]) -> "TailGroup":
        corrections: dict[int, tuple[float, float]] = {}
        for percent, pair in (section.get("percents") or {}).items():
            key = normalize_percent(percent)
            if key is None:
                raise ValueError(f"Invalid water percentage {percent!r} in group {name}")
            weight, index = pair
            corrections[key] = (float(weight), float(index))

        tails = frozenset(normalize_tail(str(t)) for t in section.get("tails") or [])
        return cls(name=name, tails=tails, corrections=MappingProxyType(corrections))


@dataclass(frozen=True)
class WaterIndexFamily:
    """An aircraft family and its tail groups.

    A family with ``tail_length`` set requires a tail identifier of that many
    characters; otherwise it must have exactly one group.
    """

    name: str
    groups: tuple[TailGroup, ...]
    tail_length: int | None = None

    @property
    def requires_tail(self) -> bool:
        return self.tail_length is not None

    def find_group(self, tail: str) -> TailGroup | None:
        for group in self.groups:
            if tail in group.tails:
                return group
        return None


@dataclass
class WaterIndexTable:
    """All water-index families, keyed by upper-case family name."""

    families: dict[str, WaterIndexFamily] = field(default_factory=dict)

    @classmethod
    def from_config(cls, section: Mapping[str, Any]) -> "WaterIndexTable":
        """Build the table from the ``families`` section of ``water_index.yaml``.

        Raises:
            ValueError: If a family is malformed.
        """
        families: dict[str, WaterIndexFamily] = {}
        for name, family_config in section.items():
            groups = tuple(
                TailGroup.from_config(str(group_name), group_config or {})
                for group_name, group_config in (family_config.get("groups") or {}).items()
            )
            if not groups:
                raise ValueError(f"Water index family {name} has no groups")

            tail_length = family_config.get("tail_length")
            if tail_length is None and len(groups) > 1:
                raise ValueError(f"Water index family {name} has several groups but no tail_length")

            families[str(name).upper()] = WaterIndexFamily(
                name=str(name),
                groups=groups,
                tail_length=int(tail_length) if tail_length is not None else None,
            )

        logger.debug("Loaded %d water index families", len(families))
        return cls(families=families)


def resolve_water_index(
    table: WaterIndexTable,
    family: str,
    percent: object,
    tail: str | None = None,
) -> WaterIndex | TailIncomplete | NotFound:
    """Resolve the water correction for a family, fill percentage and tail.

    Args:
        table: Loaded water-index table.
        family: Aircraft family name (e.g., "B737", "A321").
        percent: Fill percentage (``50``, ``"50"`` or ``"%50"``).
        tail: Short tail identifier; only used by families that require one.

    Returns:
        WaterIndex on success, TailIncomplete while the identifier is shorter
        than the family's tail length, NotFound for an unknown family or
        percentage, or a complete tail that belongs to no group.
    """
    entry = table.families.get(family.strip().upper())
    if entry is None:
        return NotFound(f"No water index data for aircraft family {family}")

    pct = normalize_percent(percent)
    if pct is None:
        return NotFound(f"Invalid water percentage {percent!r}")

    if entry.requires_tail:
        short_tail = normalize_tail(tail or "")
        if len(short_tail) < entry.tail_length:
            return TailIncomplete(entered=short_tail, required_length=entry.tail_length)

        group = entry.find_group(short_tail)
        if group is None:
            logger.info("Tail %s not found in any %s group", short_tail, entry.name)
            return NotFound(f"Tail {short_tail} not found in any {entry.name} group")
    else:
        group = entry.groups[0]

    correction = group.corrections.get(pct)
    if correction is None:
        return NotFound(f"No {entry.name} water correction for {pct}%")

    weight_offset, index_offset = correction
    return WaterIndex(
        family=entry.name,
        group=group.name,
        percent=pct,
        weight_offset=weight_offset,
        index_offset=index_offset,
    )

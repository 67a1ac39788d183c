"""Radioactive cargo stand-off clearance."""

from trimsheet.radioactive.clearance import (
    AdvisoryNote,
    ClearanceReport,
    ClearanceResult,
    CompartmentHeightTable,
    check_radioactive_clearance,
    parse_box_height,
)
from trimsheet.radioactive.ladder import DEFAULT_TI_STEPS, TIDistanceLadder, ti_to_distance

__all__ = [
    "DEFAULT_TI_STEPS",
    "AdvisoryNote",
    "ClearanceReport",
    "ClearanceResult",
    "CompartmentHeightTable",
    "TIDistanceLadder",
    "check_radioactive_clearance",
    "parse_box_height",
    "ti_to_distance",
]

"""TrimSheet command line.

Thin front end over the calculation entry points. Results are printed as
plain text. Load plans for the trim line are read from YAML.

Examples:
    trimsheet baseline --aircraft A321-231 --tail TC-JRA --cockpit 2 --cabin 6 --pantry a --water 100
    trimsheet trim-line plan.yaml
    trimsheet radioactive --aircraft B737 --compartment 4 --ti 3.2 --box 30cm
    trimsheet water-index --family B737 --percent 50 --tail JFC
"""

import argparse
import logging
import sys
from typing import Any, Mapping, Sequence

from trimsheet.balance import (
    BaggagePlan,
    PositionLoadInput,
    ZoneLoadInput,
    compute_zone_weights,
    final_index,
    project_trim_line,
    summarize_load,
)
from trimsheet.core.config import ConfigError, ConfigLoader
from trimsheet.core.logging_system import (
    LoggingError,
    get_logger,
    initialize_logging,
    shutdown_logging,
)
from trimsheet.core.resource_path import get_config_path
from trimsheet.radioactive import check_radioactive_clearance
from trimsheet.reference import ConfigurationKey, TailIncomplete, lookup_baseline, resolve_water_index
from trimsheet.reference.tables import ReferenceTables

EXIT_OK = 0
EXIT_NO_RESULT = 1
EXIT_DATA_ERROR = 2

logger = logging.getLogger("trimsheet.cli")


def _print(line: str = "") -> None:
    sys.stdout.write(line + "\n")


def _zone_input(entry: Mapping[str, Any]) -> ZoneLoadInput:
    positions = {
        str(pos_id): PositionLoadInput(
            baggage_count=pos.get("baggage_count"),
            cargo_weight=pos.get("cargo_weight"),
            empty_uld=bool(pos.get("empty_uld", False)),
            uld_tare=pos.get("uld_tare"),
        )
        for pos_id, pos in (entry.get("positions") or {}).items()
    }
    return ZoneLoadInput(
        passengers=entry.get("passengers"),
        baggage_count=entry.get("baggage_count"),
        average_baggage_weight=entry.get("average_baggage_weight"),
        cargo_weight=entry.get("cargo_weight"),
        extra_items_weight=entry.get("extra_items_weight"),
        positions=positions,
    )


def _baggage_plan(section: Mapping[str, Any]) -> BaggagePlan:
    """Apply plan entries in the order count, total, average.

    The average, when given, is therefore the authoritative weight.
    """
    plan = BaggagePlan()
    if section.get("count") is not None:
        plan = plan.with_count(int(section["count"]))
    if section.get("total") is not None:
        plan = plan.with_total(float(section["total"]))
    if section.get("average") is not None:
        plan = plan.with_average(float(section["average"]))
    return plan


def cmd_baseline(args: argparse.Namespace, tables: ReferenceTables) -> int:
    key = ConfigurationKey(args.aircraft, args.tail, args.cockpit, args.cabin, args.pantry, args.water)
    baseline = lookup_baseline(tables.dry_operating, key)
    if not baseline:
        _print(baseline.reason)
        return EXIT_NO_RESULT

    _print(f"Basic weight: {baseline.basic_weight:.0f} kg")
    _print(f"DOI: {baseline.dry_operating_index:.2f}")
    return EXIT_OK


def cmd_trim_line(args: argparse.Namespace, tables: ReferenceTables) -> int:
    plan = ConfigLoader.load(args.plan)
    config = plan.get_section("configuration")

    key = ConfigurationKey(
        aircraft_type=str(config.get("aircraft", "")),
        tail_number=str(config.get("tail", "")),
        cockpit_crew=config.get("cockpit", ""),
        cabin_crew=config.get("cabin", ""),
        pantry_code=str(config.get("pantry") or ""),
        water_percent=config.get("water", ""),
    )
    baseline = lookup_baseline(tables.dry_operating, key)
    if not baseline:
        _print(baseline.reason)
        return EXIT_NO_RESULT

    chart_name = str(plan.get("chart", key.aircraft_type))
    chart = tables.get_chart(chart_name)
    if chart is None:
        _print(f"No balance chart configured for {chart_name}")
        return EXIT_NO_RESULT

    baggage = _baggage_plan(plan.get("baggage") or {})
    zones = {str(k): _zone_input(v or {}) for k, v in (plan.get("zones") or {}).items()}
    weights = compute_zone_weights(
        zones,
        layout=tables.get_layout(key.aircraft_type),
        average_baggage_weight=baggage.average_weight,
        eic_weight=plan.get("eic.weight"),
        eic_compartment=plan.get("eic.compartment"),
    )

    points = project_trim_line(baseline.dry_operating_index, weights, chart)
    summary = summarize_load(baseline, weights, chart.zones)
    logger.info("Trim line for %s: %d points", key.tail_number, len(points))

    _print(f"DOW: {summary.dry_operating_weight:.0f} kg  DOI: {summary.dry_operating_index:.2f}")
    _print(f"Passengers: {summary.passengers:.0f} ({summary.passenger_weight:.0f} kg)")
    _print(f"Hold payload: {summary.hold_payload:.1f} kg")
    _print(f"ZFW: {summary.zero_fuel_weight:.0f} kg")
    _print(f"Final index: {final_index(points, chart.scale):.2f}")
    _print("Trim line: " + " ".join(f"{p.x:g},{p.y:g}" for p in points))
    return EXIT_OK


def cmd_radioactive(args: argparse.Namespace, tables: ReferenceTables) -> int:
    report = check_radioactive_clearance(
        tables.compartment_heights,
        args.aircraft,
        args.compartment,
        args.ti,
        args.box,
        ladder=tables.ti_ladder,
        default_unit=args.unit,
    )
    if not report:
        _print(report.reason)
        return EXIT_NO_RESULT

    _print(
        f"TI {report.ti:g}: stand-off {report.distance_m:.2f} m, "
        f"required space {report.required_space_cm:.0f} cm"
    )
    for result in report.results:
        _print(result.message)
    for note in report.notes:
        _print(f"Note: {note}")
    return EXIT_OK


def cmd_water_index(args: argparse.Namespace, tables: ReferenceTables) -> int:
    result = resolve_water_index(tables.water_index, args.family, args.percent, args.tail)
    if not result:
        if isinstance(result, TailIncomplete):
            _print(f"Tail identifier needs {result.required_length} characters")
        else:
            _print(result.reason)
        return EXIT_NO_RESULT

    _print(f"{result.group} {result.percent}%: {result.weight_offset:+g} kg / {result.index_offset:+g}")
    return EXIT_OK


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="trimsheet", description="Weight and balance trim sheet calculations"
    )
    parser.add_argument("--data-dir", help="Directory with reference data files")
    sub = parser.add_subparsers(dest="command", required=True)

    baseline = sub.add_parser("baseline", help="Look up a dry-operating baseline")
    baseline.add_argument("--aircraft", required=True, help="Aircraft type (e.g., A321-231)")
    baseline.add_argument("--tail", required=True, help="Registration (e.g., TC-JRA)")
    baseline.add_argument("--cockpit", required=True, help="Flight deck crew count")
    baseline.add_argument("--cabin", required=True, help="Cabin crew count")
    baseline.add_argument("--pantry", default="", help="Pantry code")
    baseline.add_argument("--water", default="100", help="Water fill percentage")
    baseline.set_defaults(handler=cmd_baseline)

    trim = sub.add_parser("trim-line", help="Project a load plan onto the balance chart")
    trim.add_argument("plan", help="Load plan YAML file")
    trim.set_defaults(handler=cmd_trim_line)

    radio = sub.add_parser("radioactive", help="Check radioactive package clearance")
    radio.add_argument("--aircraft", required=True, help="Aircraft type (e.g., B737)")
    radio.add_argument("--compartment", required=True, help="Compartment number")
    radio.add_argument("--ti", required=True, help="Transport Index")
    radio.add_argument("--box", required=True, help="Box height, e.g. 30cm or 0.2m")
    radio.add_argument("--unit", choices=("cm", "m"), default="cm", help="Unit for a bare box height")
    radio.set_defaults(handler=cmd_radioactive)

    water = sub.add_parser("water-index", help="Resolve the water index correction")
    water.add_argument("--family", required=True, help="Aircraft family (e.g., B737)")
    water.add_argument("--percent", required=True, help="Water fill percentage")
    water.add_argument("--tail", help="Short tail identifier (e.g., JFC)")
    water.set_defaults(handler=cmd_water_index)

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code: 0 on success, 1 when a lookup has no result, 2 on a
        reference data or configuration error.
    """
    args = parse_args(argv)

    try:
        initialize_logging(get_config_path("logging.yaml"))
    except LoggingError as e:
        sys.stderr.write(f"Logging disabled: {e}\n")
    get_logger(logger.name)

    try:
        tables = ReferenceTables.load(args.data_dir)
        return args.handler(args, tables)
    except ConfigError as e:
        logger.error("Reference data error: %s", e)
        sys.stderr.write(f"{e}\n")
        return EXIT_DATA_ERROR
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())

"""Tests for hold layouts."""

from trimsheet.balance import AircraftLayout, PositionKind


def test_layout_from_config() -> None:
    layout = AircraftLayout.from_config("A321", {
        "name": "Airbus A321",
        "eic": {"weight": 35, "compartment": 5},
        "compartments": {
            1: {"positions": ["11P", "12P"]},
            5: {"positions": [{"id": "5 (Bulk)", "kind": "bulk"}], "uld_tare": False},
        },
    })

    assert layout.eic_compartment == "5"
    assert layout.get_compartment("1").get_position("11P").kind is PositionKind.ULD
    assert layout.get_compartment("5").get_position("5 (Bulk)").kind is PositionKind.BULK
    assert not layout.get_compartment("5").uld_tare
    assert layout.get_compartment("9") is None


def test_compartment_zone_key_defaults() -> None:
    layout = AircraftLayout.from_config("X", {
        "compartments": {"1": {"positions": []}, "2": {"positions": [], "zone": "fwd"}},
    })

    assert layout.compartment_for_zone("c1").compartment_id == "1"
    assert layout.compartment_for_zone("fwd").compartment_id == "2"
    assert layout.eic_compartment is None
    assert layout.uld_loading


def test_compartment_id_forms() -> None:
    layout = AircraftLayout.from_config("A321", {
        "eic": {"compartment": "Compartment 5"},
        "compartments": {"Compartment 1": {"positions": ["11P"]}, 5: {"positions": []}},
    })

    assert layout.eic_compartment == "5"
    assert layout.get_compartment(1).compartment_id == "1"
    assert layout.get_compartment("compartment 5").zone_key == "c5"
    assert layout.compartment_for_zone("c1").name == "Compartment 1"

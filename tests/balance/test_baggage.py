"""Tests for the baggage count/average/total model."""

import pytest

from trimsheet.balance import BaggagePlan


class TestBaggagePlan:
    """Tests for BaggagePlan field precedence."""

    def test_average_derives_total(self) -> None:
        plan = BaggagePlan().with_count(120).with_average(15)

        assert plan.total == 1800.0
        assert plan.authority == "average"

    def test_total_derives_average(self) -> None:
        plan = BaggagePlan().with_count(3).with_total(50)

        assert plan.average == pytest.approx(16.67)
        assert plan.authority == "total"

    def test_last_edit_wins(self) -> None:
        plan = BaggagePlan().with_count(120).with_average(15).with_total(1500)

        assert plan.total == 1500
        assert plan.average == 12.5
        assert plan.authority == "total"

    def test_count_change_recomputes_from_authority(self) -> None:
        plan = BaggagePlan().with_count(100).with_average(15).with_count(110)
        assert plan.total == 1650.0

        plan = BaggagePlan().with_count(100).with_total(1500).with_count(120)
        assert plan.average == 12.5

    def test_no_derivation_without_count(self) -> None:
        plan = BaggagePlan().with_average(15)

        assert plan.total is None
        assert plan.average_weight == 15

    def test_zero_count_derives_nothing(self) -> None:
        plan = BaggagePlan().with_total(300).with_count(0)
        assert plan.average is None

    def test_clearing_authority_keeps_other_value(self) -> None:
        plan = BaggagePlan().with_count(10).with_average(15).with_average(None)

        assert plan.average is None
        assert plan.total == 150.0
        assert plan.authority is None

    def test_edited_field_is_not_recomputed(self) -> None:
        plan = BaggagePlan().with_count(10).with_total(150).with_average(20)

        assert plan.average == 20
        assert plan.total == 200.0

    def test_average_weight_from_total(self) -> None:
        plan = BaggagePlan(count=4, total=60)
        assert plan.average_weight == 15

    def test_average_weight_unknown(self) -> None:
        assert BaggagePlan().average_weight == 0.0

"""Tests for non-value outcomes."""

import pytest

from trimsheet.core.outcomes import InvalidInput, NotApplicable, NotFound


@pytest.mark.parametrize("outcome_type", [NotFound, NotApplicable, InvalidInput])
def test_outcomes_are_falsy_and_carry_reason(outcome_type) -> None:
    outcome = outcome_type("No matching configuration")

    assert not outcome
    assert outcome.reason == "No matching configuration"


def test_outcomes_are_distinct() -> None:
    assert NotFound("x") != NotApplicable("x")

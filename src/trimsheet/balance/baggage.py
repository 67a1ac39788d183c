"""Planned baggage: count, average weight and total weight kept consistent.

Any two of the three values determine the third. The count is always entered
by the planner, never derived. Of average and total, the one the planner set
most recently is authoritative and the other is recomputed from it.
Clearing a field drops its authority and recomputes nothing.

Examples:
    >>> plan = BaggagePlan().with_count(120).with_average(15)
    >>> plan.total
    1800.0
    >>> plan.with_total(1500).average   # total now wins
    12.5
"""

from dataclasses import dataclass, replace
from typing import Literal

Field = Literal["count", "average", "total"]


@dataclass(frozen=True)
class BaggagePlan:
    """Immutable three-slot baggage model.

    Attributes:
        count: Number of bags, or None when blank
        average: Average bag weight in kg, or None when blank
        total: Total baggage weight in kg, or None when blank
        authority: "average" or "total", whichever the planner set last
    """

    count: int | None = None
    average: float | None = None
    total: float | None = None
    authority: Literal["average", "total"] | None = None

    def with_count(self, count: int | None) -> "BaggagePlan":
        return self._with("count", count)

    def with_average(self, average: float | None) -> "BaggagePlan":
        return self._with("average", average)

    def with_total(self, total: float | None) -> "BaggagePlan":
        return self._with("total", total)

    def _with(self, name: Field, value: float | int | None) -> "BaggagePlan":
        authority = self.authority
        if name != "count":
            if value is not None:
                authority = name
            elif authority == name:
                authority = None

        plan = replace(self, **{name: value}, authority=authority)
        return plan._derive(edited=name)

    def _derive(self, edited: Field) -> "BaggagePlan":
        """Recompute the non-authoritative weight, never the field being edited."""
        if self.authority is None or not self.count or self.count <= 0:
            return self

        if self.authority == "average" and edited != "total" and self.average is not None:
            return replace(self, total=round(self.count * self.average, 1))

        if self.authority == "total" and edited != "average" and self.total is not None:
            return replace(self, average=round(self.total / self.count, 2))

        return self

    @property
    def average_weight(self) -> float:
        """Average bag weight used for compartment totals (0 when unknown)."""
        if self.average is not None:
            return self.average
        if self.total is not None and self.count:
            return self.total / self.count
        return 0.0

"""Transport Index to stand-off distance ladder.

The required separation between a radioactive package and the compartment
ceiling grows in steps with the package's Transport Index (TI). Above the
last tabulated TI the distance stays at the last value; it is never
extrapolated.
"""

import bisect
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

# (upper TI bound, stand-off distance in metres)
DEFAULT_TI_STEPS: tuple[tuple[float, float], ...] = (
    (0.0, 0.00),
    (1.0, 0.30),
    (2.0, 0.50),
    (3.0, 0.70),
    (4.0, 0.85),
    (5.0, 1.00),
    (6.0, 1.15),
    (7.0, 1.30),
    (8.0, 1.45),
    (9.0, 1.55),
    (10.0, 1.65),
    (11.0, 1.75),
)


@dataclass(frozen=True)
class TIDistanceLadder:
    """Monotonic step function from TI to stand-off distance.

    A TI maps to the distance of the first step whose bound is greater than or
    equal to it. TI values at or below the first bound get the first distance,
    and values above the last bound saturate at the last distance.

    Examples:
        >>> ladder = TIDistanceLadder.default()
        >>> ladder.distance_for(3.2)
        0.85
        >>> ladder.distance_for(40)
        1.75
    """

    steps: tuple[tuple[float, float], ...]

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("TI ladder needs at least one step")

        bounds = [bound for bound, _ in self.steps]
        distances = [distance for _, distance in self.steps]
        if any(b2 <= b1 for b1, b2 in zip(bounds, bounds[1:])):
            raise ValueError(f"TI ladder bounds must be strictly increasing: {bounds}")
        if any(d2 < d1 for d1, d2 in zip(distances, distances[1:])):
            raise ValueError(f"TI ladder distances must not decrease: {distances}")
        if distances[0] < 0:
            raise ValueError("TI ladder distances must not be negative")

    @classmethod
    def default(cls) -> "TIDistanceLadder":
        return cls(DEFAULT_TI_STEPS)

    @classmethod
    def from_config(cls, steps: Iterable[Sequence[Any] | dict[str, Any]]) -> "TIDistanceLadder":
        """Build a ladder from ``[max_ti, distance_m]`` pairs or mappings."""
        parsed = []
        for step in steps:
            if isinstance(step, dict):
                parsed.append((float(step["max_ti"]), float(step["distance_m"])))
            else:
                bound, distance = step
                parsed.append((float(bound), float(distance)))
        return cls(tuple(parsed))

    @property
    def max_ti(self) -> float:
        return self.steps[-1][0]

    def distance_for(self, ti: float) -> float:
        """Stand-off distance in metres for a Transport Index."""
        bounds = [bound for bound, _ in self.steps]
        i = bisect.bisect_left(bounds, ti)
        if i >= len(self.steps):
            return self.steps[-1][1]
        return self.steps[i][1]


_DEFAULT_LADDER = TIDistanceLadder.default()


def ti_to_distance(ti: float, ladder: TIDistanceLadder | None = None) -> float:
    """Stand-off distance in metres for ``ti`` using ``ladder`` or the standard ladder."""
    return (ladder or _DEFAULT_LADDER).distance_for(ti)

"""Explicit non-value outcomes returned by lookups and calculations.

Missing table rows and bad user entries are expected during load planning,
so they are returned as values rather than raised. Every outcome is falsy,
which lets callers branch with ``if not result:``.

Typical usage:
    result = lookup_baseline(table, key)
    if not result:
        print(result.reason)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotFound:
    """A configuration, tail or table row is absent.

    Attributes:
        reason: Human-readable explanation for the operator.
    """

    reason: str

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class NotApplicable:
    """The aircraft/compartment combination does not exist or is not permitted."""

    reason: str

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class InvalidInput:
    """A user entry that must be reported rather than treated as zero."""

    reason: str

    def __bool__(self) -> bool:
        return False

"""Progressive threshold lookups shared by transfer duty and income tax."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from errors import DomainError


@dataclass(frozen=True)
class Bracket:
    threshold: float
    rate: float
    base: float = 0.0  # cumulative amount owed up to threshold


def validate_brackets(brackets: Iterable[Bracket], label: str = "bracket table") -> tuple[Bracket, ...]:
    table = tuple(brackets)
    if not table:
        raise DomainError(f"{label} is empty")
    for prev, cur in zip(table, table[1:]):
        if cur.threshold <= prev.threshold:
            raise DomainError(
                f"{label} thresholds must be strictly ascending "
                f"({prev.threshold} then {cur.threshold})"
            )
    for bracket in table:
        if bracket.rate < 0 or bracket.base < 0:
            raise DomainError(f"{label} has a negative rate or base at {bracket.threshold}")
    return table


def progressive_amount(brackets: Sequence[Bracket], value: float) -> float:
    """
    Amount owed on value under a progressive table:
      base + (value - threshold) * rate
    using the bracket with the greatest threshold strictly below value.
    """
    applicable = None
    for bracket in brackets:
        if bracket.threshold < value:
            applicable = bracket
        else:
            break
    if applicable is None:
        return 0.0
    return applicable.base + (value - applicable.threshold) * applicable.rate


def marginal_rate(brackets: Sequence[Bracket], income: float) -> float:
    """Rate of the highest bracket whose threshold is strictly below income."""
    for bracket in reversed(brackets):
        if bracket.threshold < income:
            return bracket.rate
    return 0.0

"""Computed statement — the priced form of an Invoice."""

from __future__ import annotations

from dataclasses import dataclass

from theater.domain.model.value_objects import Money


@dataclass(frozen=True)
class StatementLine:
    play_name: str
    audience: int
    amount: Money
    credits: int


@dataclass(frozen=True)
class Statement:
    """Fully accumulated statement.

    Only ever built once every line has been priced, so the totals
    always equal the sums of the lines.
    """

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount: Money
    total_credits: int

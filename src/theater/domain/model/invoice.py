"""Invoice aggregate — a customer's bill for a run of performances.

The Invoice owns its performances; their order is the order the
statement lines are printed in.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from theater.domain.exceptions import ValidationError
from theater.domain.model.value_objects import Audience


@dataclass(frozen=True)
class Performance:
    """One showing of a play, billed as a single statement line."""

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        Audience(self.audience)  # validates: non-negative int


@dataclass(frozen=True)
class Invoice:
    """Aggregate root for billing.

    Use ``Invoice.create()`` when building from untrusted input; the
    plain constructor performs no validation. The customer name is
    kept exactly as given since it is printed on the statement.
    """

    customer: str
    performances: tuple[Performance, ...] = ()

    @staticmethod
    def create(customer: str, performances: Iterable[Performance]) -> Invoice:
        if not isinstance(customer, str) or not customer.strip():
            raise ValidationError("Customer name is required")
        return Invoice(customer=customer, performances=tuple(performances))

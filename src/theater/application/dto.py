"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class StatementLineDTO:
    """Output: a single priced performance."""

    play_name: str
    audience: int
    amount: str  # formatted, e.g. "$650.00"
    credits: int


@dataclass(frozen=True)
class StatementDTO:
    """Output: a complete statement as displayed to the user."""

    customer: str
    lines: list[StatementLineDTO]
    total_amount: str
    total_credits: int
    text: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PlayDTO:
    play_id: str
    name: str
    genre: str

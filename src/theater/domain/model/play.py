"""Play reference data.

Plays live independently of invoices: they are loaded once from the
catalogue and only ever referenced by ID from a performance.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from theater.domain.exceptions import UnknownGenreError


class Genre(Enum):
    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @staticmethod
    def parse(raw: str) -> Genre:
        try:
            return Genre(raw)
        except ValueError:
            raise UnknownGenreError(raw) from None


@dataclass(frozen=True)
class Play:
    """A theatrical play as it appears in the catalogue.

    ``type`` keeps the genre string exactly as supplied so a catalogue
    with an unsupported genre can still be loaded; pricing goes through
    ``genre``, which rejects it.
    """

    name: str
    type: str

    @property
    def genre(self) -> Genre:
        return Genre.parse(self.type)

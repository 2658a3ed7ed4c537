"""Abstract repository for Play reference data.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping

from theater.domain.model.play import Play


class PlayRepository(ABC):

    @abstractmethod
    def as_registry(self) -> Mapping[str, Play]:
        """Return the whole catalogue keyed by play ID, in catalogue order."""

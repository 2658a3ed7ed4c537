"""JSON-file-backed implementation of PlayRepository.

File format (keyed by play ID)::

    {"hamlet": {"name": "Hamlet", "type": "tragedy"}, ...}
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from theater.domain.exceptions import ValidationError
from theater.domain.model.play import Play
from theater.domain.repository.play_repository import PlayRepository


class JsonPlayRepository(PlayRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- PlayRepository interface ---------------------------------------------

    def as_registry(self) -> Mapping[str, Play]:
        return self._load()

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Play]:
        if not self._file_path.exists():
            return {}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Corrupt play catalogue {self._file_path.name}: {exc}"
            ) from exc
        if not isinstance(raw, dict):
            raise ValidationError(
                f"Play catalogue {self._file_path.name} must be a JSON object"
            )
        try:
            return {
                play_id: Play(name=item["name"], type=item["type"])
                for play_id, item in raw.items()
            }
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValidationError(
                f"Malformed play catalogue {self._file_path.name}: {exc}"
            ) from exc

"""Application service: List Plays use case (query)."""

from __future__ import annotations

from theater.application.dto import PlayDTO
from theater.domain.repository.play_repository import PlayRepository


class ListPlaysHandler:

    def __init__(self, play_repo: PlayRepository) -> None:
        self._play_repo = play_repo

    def handle(self) -> list[PlayDTO]:
        return [
            PlayDTO(play_id=play_id, name=play.name, genre=play.type)
            for play_id, play in self._play_repo.as_registry().items()
        ]

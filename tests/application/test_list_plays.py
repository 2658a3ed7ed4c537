"""Tests for the ListPlays query."""

from theater.application.list_plays import ListPlaysHandler
from theater.domain.model.play import Play
from tests.fakes import FakePlayRepository


class TestListPlays:

    def test_lists_catalogue_in_order(self):
        repo = FakePlayRepository({
            "hamlet": Play("Hamlet", "tragedy"),
            "as-like": Play("As You Like It", "comedy"),
        })
        plays = ListPlaysHandler(repo).handle()
        assert [(p.play_id, p.name, p.genre) for p in plays] == [
            ("hamlet", "Hamlet", "tragedy"),
            ("as-like", "As You Like It", "comedy"),
        ]

    def test_empty_catalogue(self):
        assert ListPlaysHandler(FakePlayRepository()).handle() == []

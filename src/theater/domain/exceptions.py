"""Domain-level exceptions.

All billing rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnknownPlayError(EntityNotFoundError):
    """A performance references a play ID missing from the registry."""

    def __init__(self, play_id: str) -> None:
        super().__init__(f"Unknown play: '{play_id}'")
        self.play_id = play_id


class UnknownGenreError(ValidationError):
    """A play carries a genre with no pricing rule."""

    def __init__(self, genre: str) -> None:
        super().__init__(f"Unknown genre: '{genre}'")
        self.genre = genre

"""Pricing and volume-credit rules.

Both rules are pure functions of (genre, audience, rules). Amounts are
integer cents; credits are integer points.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from theater.domain.exceptions import UnknownGenreError, ValidationError
from theater.domain.model.play import Genre
from theater.domain.model.value_objects import Audience


@dataclass(frozen=True)
class PricingRules:
    """The tariff: per-genre base amounts, thresholds and overage rates."""

    tragedy_base: int = 40000
    tragedy_threshold: int = 30
    tragedy_over_per_person: int = 1000

    comedy_base: int = 30000
    comedy_threshold: int = 20
    comedy_over_flat: int = 10000
    comedy_over_per_person: int = 500
    comedy_per_audience: int = 300

    base_credit_threshold: int = 30
    comedy_extra_credit_divisor: int = 5

    currency: str = "USD"

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "currency":
                continue
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValidationError(
                    f"Pricing rule '{f.name}' must be an integer, got {value!r}"
                )
            if value < 0:
                raise ValidationError(
                    f"Pricing rule '{f.name}' cannot be negative, got {value}"
                )
        if self.comedy_extra_credit_divisor == 0:
            raise ValidationError("Pricing rule 'comedy_extra_credit_divisor' must be positive")
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise ValidationError(
                f"Pricing currency must be a currency code, got {self.currency!r}"
            )

    @staticmethod
    def from_mapping(raw: Mapping[str, Any]) -> PricingRules:
        """Build rules from config data, falling back to defaults for absent keys."""
        if not isinstance(raw, Mapping):
            raise ValidationError(
                f"Pricing rules must be a mapping, got {type(raw).__name__}"
            )
        known = {f.name for f in fields(PricingRules)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValidationError(f"Unknown pricing rule(s): {', '.join(unknown)}")
        return PricingRules(**raw)


DEFAULT_RULES = PricingRules()


def _resolve(genre: Genre | str) -> Genre:
    if isinstance(genre, Genre):
        return genre
    return Genre.parse(genre)


def amount_for(genre: Genre | str, audience: int, rules: PricingRules = DEFAULT_RULES) -> int:
    """Amount owed for one performance, in cents.

    Raises UnknownGenreError for a genre with no pricing rule and
    ValidationError for a negative audience.
    """
    genre = _resolve(genre)
    audience = Audience(audience).value

    if genre is Genre.TRAGEDY:
        result = rules.tragedy_base
        if audience > rules.tragedy_threshold:
            result += rules.tragedy_over_per_person * (audience - rules.tragedy_threshold)
        return result

    if genre is Genre.COMEDY:
        result = rules.comedy_base
        if audience > rules.comedy_threshold:
            result += rules.comedy_over_flat + rules.comedy_over_per_person * (
                audience - rules.comedy_threshold
            )
        result += rules.comedy_per_audience * audience
        return result

    raise UnknownGenreError(genre.value)


def volume_credits_for(
    genre: Genre | str, audience: int, rules: PricingRules = DEFAULT_RULES
) -> int:
    """Loyalty credits earned by one performance.

    Every seat above ``base_credit_threshold`` earns a credit; comedies
    earn an extra credit per ``comedy_extra_credit_divisor`` attendees.
    """
    genre = _resolve(genre)
    audience = Audience(audience).value

    result = max(audience - rules.base_credit_threshold, 0)
    if genre is Genre.COMEDY:
        result += audience // rules.comedy_extra_credit_divisor
    return result

"""Unit tests for the pricing and volume-credit rules."""

import pytest

from theater.domain.exceptions import UnknownGenreError, ValidationError
from theater.domain.model.play import Genre
from theater.domain.pricing import PricingRules, amount_for, volume_credits_for

RULES = PricingRules()


class TestTragedyAmount:

    @pytest.mark.parametrize("audience", [0, 1, 20, 30])
    def test_flat_base_up_to_threshold(self, audience):
        assert amount_for(Genre.TRAGEDY, audience) == RULES.tragedy_base

    def test_above_threshold(self):
        assert amount_for(Genre.TRAGEDY, 55) == 65000

    def test_slope_above_threshold(self):
        amounts = [amount_for(Genre.TRAGEDY, a) for a in range(31, 60)]
        diffs = {b - a for a, b in zip(amounts, amounts[1:])}
        assert diffs == {RULES.tragedy_over_per_person}
        assert amounts[0] > RULES.tragedy_base


class TestComedyAmount:

    def test_below_threshold(self):
        assert amount_for(Genre.COMEDY, 20) == 30000 + 300 * 20

    def test_above_threshold(self):
        assert amount_for(Genre.COMEDY, 35) == 58000

    def test_non_decreasing_in_audience(self):
        amounts = [amount_for(Genre.COMEDY, a) for a in range(0, 100)]
        assert amounts == sorted(amounts)

    def test_flat_surcharge_kicks_in_past_threshold(self):
        jump = amount_for(Genre.COMEDY, 21) - amount_for(Genre.COMEDY, 20)
        assert jump == RULES.comedy_over_flat + RULES.comedy_over_per_person + RULES.comedy_per_audience


class TestVolumeCredits:

    def test_tragedy_credits(self):
        assert volume_credits_for(Genre.TRAGEDY, 55) == 25

    def test_comedy_credits_include_bonus(self):
        assert volume_credits_for(Genre.COMEDY, 35) == 5 + 7

    def test_no_credits_below_threshold(self):
        assert volume_credits_for(Genre.TRAGEDY, 20) == 0

    def test_comedy_bonus_below_threshold(self):
        assert volume_credits_for(Genre.COMEDY, 14) == 2

    @pytest.mark.parametrize("genre", list(Genre))
    def test_never_negative(self, genre):
        assert all(volume_credits_for(genre, a) >= 0 for a in range(0, 80))


class TestUnknownInputs:

    def test_raw_genre_strings_accepted(self):
        assert amount_for("tragedy", 55) == 65000
        assert volume_credits_for("comedy", 35) == 12

    def test_unknown_genre_amount(self):
        with pytest.raises(UnknownGenreError) as excinfo:
            amount_for("history", 10)
        assert excinfo.value.genre == "history"

    def test_unknown_genre_credits_fails_the_same_way(self):
        with pytest.raises(UnknownGenreError):
            volume_credits_for("history", 10)

    def test_negative_audience_rejected(self):
        with pytest.raises(ValidationError):
            amount_for(Genre.TRAGEDY, -1)
        with pytest.raises(ValidationError):
            volume_credits_for(Genre.COMEDY, -1)


class TestPricingRules:

    def test_custom_rules_are_used(self):
        rules = PricingRules(tragedy_base=100, tragedy_threshold=0, tragedy_over_per_person=1)
        assert amount_for(Genre.TRAGEDY, 5, rules) == 105

    def test_from_mapping_overrides_some_keys(self):
        rules = PricingRules.from_mapping({"comedy_base": 1000, "currency": "EUR"})
        assert rules.comedy_base == 1000
        assert rules.currency == "EUR"
        assert rules.tragedy_base == 40000

    def test_from_mapping_rejects_unknown_keys(self):
        with pytest.raises(ValidationError, match="Unknown pricing rule"):
            PricingRules.from_mapping({"history_base": 1})

    def test_negative_constant_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            PricingRules(tragedy_base=-1)

    def test_non_integer_constant_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            PricingRules(comedy_base=300.5)

    def test_non_string_currency_rejected(self):
        with pytest.raises(ValidationError, match="currency code"):
            PricingRules(currency=5)

    def test_blank_currency_rejected(self):
        with pytest.raises(ValidationError, match="currency code"):
            PricingRules(currency="  ")

    def test_from_mapping_requires_a_mapping(self):
        with pytest.raises(ValidationError, match="must be a mapping"):
            PricingRules.from_mapping([["tragedy_base", 1]])

    def test_zero_divisor_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            PricingRules(comedy_extra_credit_divisor=0)

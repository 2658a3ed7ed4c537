"""Domain service: Statement Printer.

Prices every performance on an invoice against the play registry and
renders the customer statement. Pure: no I/O, no shared state, so
separate invoices can be printed independently.

Pricing happens in a single pass before anything is rendered. If any
line fails (unknown play, unknown genre) the error propagates and no
statement is produced.
"""

from __future__ import annotations

from collections.abc import Mapping

from theater.domain.exceptions import UnknownPlayError
from theater.domain.model.invoice import Invoice, Performance
from theater.domain.model.play import Play
from theater.domain.model.statement import Statement, StatementLine
from theater.domain.model.value_objects import Money
from theater.domain.pricing import DEFAULT_RULES, PricingRules, amount_for, volume_credits_for


class StatementPrinter:

    def __init__(
        self,
        invoice: Invoice,
        plays: Mapping[str, Play],
        rules: PricingRules = DEFAULT_RULES,
    ) -> None:
        self._invoice = invoice
        self._plays = plays
        self._rules = rules

    @property
    def invoice(self) -> Invoice:
        return self._invoice

    @property
    def plays(self) -> Mapping[str, Play]:
        return self._plays

    def statement(self) -> str:
        """Return the formatted statement for the invoice.

        Raises UnknownPlayError or UnknownGenreError if any performance
        cannot be priced.
        """
        return render_text(self.statement_data())

    def statement_data(self) -> Statement:
        """Price every performance and accumulate the totals."""
        lines: list[StatementLine] = []
        total_amount = Money.zero(self._rules.currency)
        total_credits = 0

        for performance in self._invoice.performances:
            line = self._price(performance)
            lines.append(line)
            total_amount = total_amount + line.amount
            total_credits += line.credits

        return Statement(
            customer=self._invoice.customer,
            lines=tuple(lines),
            total_amount=total_amount,
            total_credits=total_credits,
        )

    # --- Internal helpers -----------------------------------------------------

    def _play_for(self, performance: Performance) -> Play:
        try:
            return self._plays[performance.play_id]
        except KeyError:
            raise UnknownPlayError(performance.play_id) from None

    def _price(self, performance: Performance) -> StatementLine:
        play = self._play_for(performance)
        genre = play.genre  # validated once, shared by both rules
        return StatementLine(
            play_name=play.name,
            audience=performance.audience,
            amount=Money(
                amount_for(genre, performance.audience, self._rules),
                self._rules.currency,
            ),
            credits=volume_credits_for(genre, performance.audience, self._rules),
        )


def render_text(statement: Statement) -> str:
    """Render a priced statement as plain text, one newline per line."""
    result = [f"Statement for {statement.customer}\n"]
    for line in statement.lines:
        result.append(f"  {line.play_name}: {line.amount} ({line.audience} seats)\n")
    result.append(f"Amount owed is {statement.total_amount}\n")
    result.append(f"You earned {statement.total_credits} credits\n")
    return "".join(result)

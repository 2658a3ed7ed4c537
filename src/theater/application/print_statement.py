"""Application service: Print Statement use case (query).

Loads an invoice and the play catalogue, hands both to the
StatementPrinter domain service and maps the result to a DTO.
"""

from __future__ import annotations

from collections.abc import Mapping

from theater.application.dto import StatementDTO, StatementLineDTO
from theater.application.log import get_logger
from theater.domain.exceptions import DomainException, EntityNotFoundError
from theater.domain.model.invoice import Invoice
from theater.domain.model.play import Play
from theater.domain.model.statement import Statement
from theater.domain.pricing import DEFAULT_RULES, PricingRules
from theater.domain.repository.invoice_repository import InvoiceRepository
from theater.domain.repository.play_repository import PlayRepository
from theater.domain.service.statement_printer import StatementPrinter, render_text

logger = get_logger(__name__)


class PrintStatementHandler:

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        play_repo: PlayRepository,
        rules: PricingRules = DEFAULT_RULES,
    ) -> None:
        self._invoice_repo = invoice_repo
        self._play_repo = play_repo
        self._rules = rules

    def handle(self, invoice_id: int) -> StatementDTO:
        invoice = self._invoice_repo.get_by_id(invoice_id)
        if invoice is None:
            raise EntityNotFoundError(f"Invoice #{invoice_id} not found")
        return self.render(invoice, self._play_repo.as_registry())

    def render(self, invoice: Invoice, plays: Mapping[str, Play]) -> StatementDTO:
        """Price and render *invoice* against an already-loaded catalogue."""
        printer = StatementPrinter(invoice, plays, self._rules)
        try:
            statement = printer.statement_data()
        except DomainException as exc:
            logger.warning(
                "statement_failed",
                customer=invoice.customer,
                error=type(exc).__name__,
                detail=str(exc),
            )
            raise

        logger.info(
            "statement_rendered",
            customer=statement.customer,
            lines=len(statement.lines),
            total_cents=statement.total_amount.cents,
            credits=statement.total_credits,
        )
        return self._to_dto(statement)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(statement: Statement) -> StatementDTO:
        return StatementDTO(
            customer=statement.customer,
            lines=[
                StatementLineDTO(
                    play_name=line.play_name,
                    audience=line.audience,
                    amount=str(line.amount),
                    credits=line.credits,
                )
                for line in statement.lines
            ],
            total_amount=str(statement.total_amount),
            total_credits=statement.total_credits,
            text=render_text(statement),
        )

"""Abstract repository for the Invoice aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from theater.domain.model.invoice import Invoice


class InvoiceRepository(ABC):

    @abstractmethod
    def get_by_id(self, invoice_id: int) -> Invoice | None:
        """Return an invoice by its ID, or None if not found."""

    @abstractmethod
    def list_ids(self) -> list[int]:
        """Return every stored invoice ID in ascending order."""

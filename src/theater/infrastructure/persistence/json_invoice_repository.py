"""JSON-file-backed implementation of InvoiceRepository.

File format (a list; invoice IDs are 1-based positions)::

    [{"customer": "BigCo",
      "performances": [{"playID": "hamlet", "audience": 55}]}]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from theater.domain.exceptions import ValidationError
from theater.domain.model.invoice import Invoice, Performance
from theater.domain.repository.invoice_repository import InvoiceRepository


class JsonInvoiceRepository(InvoiceRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- InvoiceRepository interface ------------------------------------------

    def get_by_id(self, invoice_id: int) -> Invoice | None:
        raw = self._load_raw()
        if invoice_id < 1 or invoice_id > len(raw):
            return None
        return self._to_invoice(raw[invoice_id - 1])

    def list_ids(self) -> list[int]:
        return list(range(1, len(self._load_raw()) + 1))

    # --- Serialization helpers ------------------------------------------------

    def _load_raw(self) -> list[dict[str, Any]]:
        if not self._file_path.exists():
            return []
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Corrupt invoice file {self._file_path.name}: {exc}"
            ) from exc
        if not isinstance(raw, list):
            raise ValidationError(
                f"Invoice file {self._file_path.name} must be a JSON list"
            )
        return raw

    def _to_invoice(self, item: dict[str, Any]) -> Invoice:
        try:
            performances = [
                Performance(play_id=p["playID"], audience=p["audience"])
                for p in item["performances"]
            ]
            return Invoice.create(customer=item["customer"], performances=performances)
        except (KeyError, TypeError) as exc:
            raise ValidationError(
                f"Malformed invoice in {self._file_path.name}: {exc}"
            ) from exc

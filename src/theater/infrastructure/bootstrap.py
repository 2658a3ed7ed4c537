"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from theater.domain.exceptions import ValidationError
from theater.domain.pricing import DEFAULT_RULES, PricingRules
from theater.infrastructure.persistence.json_invoice_repository import (
    JsonInvoiceRepository,
)
from theater.infrastructure.persistence.json_play_repository import (
    JsonPlayRepository,
)

DATA_DIR_ENV = "THEATER_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def play_repository() -> JsonPlayRepository:
    return JsonPlayRepository(data_dir() / "plays.json")


def invoice_repository() -> JsonInvoiceRepository:
    return JsonInvoiceRepository(data_dir() / "invoices.json")


def pricing_rules() -> PricingRules:
    """Tariff from ``pricing.json`` in the data directory, else the defaults."""
    path = data_dir() / "pricing.json"
    if not path.exists():
        return DEFAULT_RULES
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Corrupt pricing config {path.name}: {exc}") from exc
    return PricingRules.from_mapping(raw)

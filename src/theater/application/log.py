"""structlog loggers for the application layer.

Loggers are bound straight to the standard library ``logging`` module
instead of going through ``structlog.configure``, so events follow the
handlers and levels of the host process and never print on stdout.
"""

from __future__ import annotations

import logging

import structlog

PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )

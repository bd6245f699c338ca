"""Logging configuration for bank-terminal.

Logs go to stderr so command output on stdout stays clean. CPFs showing up
in log messages (request paths, backend error bodies) are masked unless
redaction is switched off.
"""

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any

from bank_terminal.identifiers import mask_tax_id, validate_tax_id

# 11 digits, masked or bare, not part of a longer number
_TAX_ID_PATTERN = re.compile(r"(?<!\d)\d{3}\.?\d{3}\.?\d{3}-?\d{2}(?!\d)", re.ASCII)

_STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_QUIET_LOGGERS = ("httpx", "httpcore", "faker")


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    redact_tax_ids: bool = True,
) -> None:
    """Configure logging for bank-terminal.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    redact_tax_ids : bool
        Mask valid CPFs in every record passing through the handler.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=_STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    if redact_tax_ids:
        handler.addFilter(TaxIdRedactionFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    logging.getLogger("bank_terminal").setLevel(log_level)

    # Reduce noise from external libraries
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class TaxIdRedactionFilter(logging.Filter):
    """Replace valid CPFs in the rendered message with their masked form.

    Numbers that merely have 11 digits but fail the checksum (NSUs, account
    ids) are left alone.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _TAX_ID_PATTERN.sub(_mask_match, message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def _mask_match(match: re.Match) -> str:
    value = match.group(0)
    return mask_tax_id(value) if validate_tax_id(value) else value


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Fields passed as logger.info(..., extra={"extra": {...}})
        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Parameters
    ----------
    name : str
        Logger name (usually __name__).

    Returns
    -------
    logging.Logger
        Configured logger.
    """
    return logging.getLogger(name)

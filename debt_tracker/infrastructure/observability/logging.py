"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "debt-tracker"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_report(
    request_id: str,
    account_key: str,
    status: str,
    payment_days_remaining: int,
    duration_ms: float,
) -> None:
    """Log structured report outcome"""
    logging.info(
        "Report completed",
        extra={
            "request_id": request_id,
            "account_key": account_key,
            "step": "report_complete",
            "payment_status": status,
            "payment_days_remaining": payment_days_remaining,
            "duration_ms": duration_ms,
        },
    )


def log_payment_recorded(
    request_id: str,
    account_key: str,
    kind: str,
    amount_minor: int,
    transaction_id: str,
) -> None:
    """Log a payment written to the ledger"""
    logging.info(
        "Payment recorded",
        extra={
            "request_id": request_id,
            "account_key": account_key,
            "step": "payment_recorded",
            "payment_kind": kind,
            "amount_minor": amount_minor,
            "transaction_id": transaction_id,
        },
    )

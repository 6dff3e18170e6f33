"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger
from budget_engine.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


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


def log_transaction_recorded(request_id: str, transaction_id: str, kind: str, amount_display: str) -> None:
    logging.info(
        "Transaction recorded",
        extra={
            "request_id": request_id,
            "step": "transaction_recorded",
            "transaction_id": transaction_id,
            "kind": kind,
            "amount": amount_display,
        },
    )


def log_transaction_removed(request_id: str, transaction_id: str, kind: str) -> None:
    logging.info(
        "Transaction removed",
        extra={
            "request_id": request_id,
            "step": "transaction_removed",
            "transaction_id": transaction_id,
            "kind": kind,
        },
    )


def log_goal_change(request_id: str, action: str, goal_id: str, kind: str, category: Optional[str]) -> None:
    """Log goal added/removed; category is None for income goals"""
    logging.info(
        f"Goal {action}",
        extra={
            "request_id": request_id,
            "step": f"goal_{action}",
            "goal_id": goal_id,
            "kind": kind,
            "category": category,
        },
    )


def log_rejected_operation(request_id: str, operation: str, error: Exception) -> None:
    logging.warning(
        f"{operation} rejected: {error}",
        extra={
            "request_id": request_id,
            "step": operation,
            "error": type(error).__name__,
        },
    )

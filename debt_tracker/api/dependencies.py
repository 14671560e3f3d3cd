"""Dependency injection for FastAPI endpoints"""

from datetime import date
from fastapi import Request
from debt_tracker.config import settings
from debt_tracker.infrastructure.clients.ledger import LedgerClient
from debt_tracker.utils.date_utils import today_in


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_ledger_client() -> LedgerClient:
    """Provide Ledger API client instance"""
    return LedgerClient()


def get_today() -> date:
    """Capture the current date once per request in the configured timezone"""
    return today_in(settings.timezone)

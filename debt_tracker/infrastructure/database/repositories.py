"""Data access layer for tracked account configuration"""

from decimal import Decimal
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
from debt_tracker.infrastructure.database.models import TrackedAccount
from debt_tracker.domain.exceptions import AccountConfigNotFoundError
from debt_tracker.domain.models import AccountScheduleConfig, DeadlineConfig


class AccountRepository:
    """Repository for account schedule configuration"""

    def __init__(self, db: Session):
        self.db = db

    def get_account(self, key: str) -> Optional[TrackedAccount]:
        return self.db.get(TrackedAccount, key)

    def get_config(self, key: str) -> AccountScheduleConfig:
        """
        Resolve an account key to its immutable schedule configuration.

        Raises:
            AccountConfigNotFoundError: No account is registered under the key
        """
        account = self.get_account(key)
        if account is None:
            raise AccountConfigNotFoundError(key)
        return to_schedule_config(account)

    def upsert_account(self, key: str, values: Dict[str, Any]) -> TrackedAccount:
        """Create or replace the configuration stored under key"""
        account = self.get_account(key)
        if account is None:
            account = TrackedAccount(key=key)
            self.db.add(account)

        for column, value in values.items():
            setattr(account, column, value)

        self.db.flush()
        return account


def to_schedule_config(account: TrackedAccount) -> AccountScheduleConfig:
    """Map a stored row to the domain configuration value"""
    deadline = None
    if account.deadline_end_date is not None:
        deadline = DeadlineConfig(
            end_date=account.deadline_end_date,
            enabled=bool(account.deadline_enabled),
            show_days_remaining=bool(account.show_days_remaining),
            description=account.deadline_description or "Payment days remaining",
        )

    return AccountScheduleConfig(
        key=account.key,
        account_id=account.ledger_account_id,
        name=account.name,
        payment_amount=Decimal(account.payment_amount),
        max_payment_amount=Decimal(account.max_payment_amount),
        min_payment_amount=Decimal(account.min_payment_amount),
        scheduled_weekdays=frozenset(account.payment_weekdays or []),
        deadline=deadline,
        payment_accounts=dict(account.payment_accounts or {}),
    )

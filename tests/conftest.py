"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from decimal import Decimal
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from debt_tracker.api.main import create_app
from debt_tracker.api.dependencies import get_today
from debt_tracker.infrastructure.database.models import Base
from debt_tracker.infrastructure.database.session import get_db
from debt_tracker.infrastructure.database.repositories import AccountRepository
from debt_tracker.domain.models import AccountScheduleConfig, DeadlineConfig, LedgerTransaction

# Fixed evaluation day: Monday 19 October 2026
MONDAY = date(2026, 10, 19)
WEEKDAYS = frozenset({1, 2, 3, 4, 5})

# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def today() -> date:
    return MONDAY


@pytest.fixture
def client(db: Session, today: date) -> TestClient:
    """Create FastAPI test client with test database and a fixed current date"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: today
    return TestClient(app)


@pytest.fixture
def weekday_config() -> AccountScheduleConfig:
    """Monday-Friday loan paid 20.00 per day with a year-end deadline"""
    return AccountScheduleConfig(
        key="pickup",
        account_id="loan-weekdays",
        name="Pickup loan",
        payment_amount=Decimal("20.00"),
        max_payment_amount=Decimal("35.00"),
        min_payment_amount=Decimal("10.00"),
        scheduled_weekdays=WEEKDAYS,
        deadline=DeadlineConfig(end_date=date(2026, 12, 31)),
        payment_accounts={"Cash": "cash"},
    )


@pytest.fixture
def registered_account(db: Session, weekday_config: AccountScheduleConfig) -> AccountScheduleConfig:
    """Store weekday_config in the configuration database"""
    AccountRepository(db).upsert_account(
        weekday_config.key,
        {
            "ledger_account_id": weekday_config.account_id,
            "name": weekday_config.name,
            "payment_amount": weekday_config.payment_amount,
            "max_payment_amount": weekday_config.max_payment_amount,
            "min_payment_amount": weekday_config.min_payment_amount,
            "payment_weekdays": sorted(weekday_config.scheduled_weekdays),
            "payment_accounts": dict(weekday_config.payment_accounts),
            "deadline_end_date": weekday_config.deadline.end_date,
            "deadline_enabled": True,
            "show_days_remaining": True,
            "deadline_description": weekday_config.deadline.description,
        },
    )
    db.commit()
    return weekday_config


@pytest.fixture
def sample_transactions() -> list[LedgerTransaction]:
    """Last week's weekday payments plus a blank payment, as the ledger returns them"""
    base_date = MONDAY - timedelta(days=7)
    transactions = [
        LedgerTransaction(
            transaction_id=f"txn_{day}",
            date=base_date + timedelta(days=day),
            amount_minor=20000,  # 20.00 inflow on the debt account
            cleared="cleared",
        )
        for day in range(5)
        if day != 2
    ]
    transactions.append(
        LedgerTransaction(
            transaction_id="txn_blank",
            date=base_date + timedelta(days=2),
            amount_minor=0,
            cleared="uncleared",
            memo="Truck at the mechanic",
        )
    )
    return transactions

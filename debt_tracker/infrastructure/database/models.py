"""SQLAlchemy ORM models for the account schedule configuration store"""

from sqlalchemy import Column, String, Boolean, Date, DateTime, Numeric, Text, JSON
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class TrackedAccount(Base):
    """Schedule parameters for one tracked debt, keyed by an opaque account key"""

    __tablename__ = "tracked_account"

    key = Column(String(64), primary_key=True)
    ledger_account_id = Column(Text, nullable=False)
    name = Column(Text, nullable=False)
    payment_amount = Column(Numeric(12, 2), nullable=False)
    max_payment_amount = Column(Numeric(12, 2), nullable=False)
    min_payment_amount = Column(Numeric(12, 2), nullable=False)
    payment_weekdays = Column(JSON, nullable=False, default=list)  # Sunday=0 .. Saturday=6
    payment_accounts = Column(JSON, nullable=False, default=dict)  # method -> ledger account id

    # Deadline mode
    deadline_end_date = Column(Date, nullable=True)
    deadline_enabled = Column(Boolean, nullable=False, default=False)
    show_days_remaining = Column(Boolean, nullable=False, default=True)
    deadline_description = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

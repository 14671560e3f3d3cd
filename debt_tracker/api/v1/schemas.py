"""Pydantic schemas for API request/response validation"""

from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


class DeadlineSchema(BaseModel):
    """Deadline-based reporting settings"""

    end_date: date
    enabled: bool = True
    show_days_remaining: bool = True
    description: str = "Payment days remaining"


class AccountConfigRequest(BaseModel):
    """Request body for PUT /v1/accounts/{key}"""

    ledger_account_id: str = Field(..., min_length=1, description="Ledger account identifier")
    name: str = Field(..., min_length=1)
    payment_amount: Decimal = Field(..., gt=0, decimal_places=2, description="Fixed amount per payment")
    max_payment_amount: Decimal = Field(..., ge=0, decimal_places=2)
    min_payment_amount: Decimal = Field(..., ge=0, decimal_places=2)
    payment_weekdays: List[int] = Field(default_factory=list, description="Sunday=0 .. Saturday=6")
    deadline: Optional[DeadlineSchema] = None
    payment_accounts: Dict[str, str] = Field(default_factory=dict, description="Payment method -> source account")

    @field_validator("payment_weekdays")
    @classmethod
    def check_weekdays(cls, value: List[int]) -> List[int]:
        if any(day < 0 or day > 6 for day in value):
            raise ValueError("weekdays must be between 0 (Sunday) and 6 (Saturday)")
        return sorted(set(value))


class AccountConfigResponse(AccountConfigRequest):
    """Response for account configuration endpoints"""

    key: str


class PaymentRecordSchema(BaseModel):
    """Single reconciled payment"""

    date: date
    amount: Decimal
    cleared: str
    memo: Optional[str] = None
    blank: bool


class TrendPointSchema(BaseModel):
    date: date
    amount: Decimal


class DebtStateSchema(BaseModel):
    outstanding_balance: Decimal
    payment_days_remaining: int
    calendar_days_until_deadline: int


class ReportResponse(BaseModel):
    """Response for GET /v1/accounts/{key}/report"""

    account_key: str
    account_name: str
    today: date
    status: str
    status_label: str
    state: DebtStateSchema
    payment_amount: Decimal
    max_payment_amount: Decimal
    min_payment_amount: Decimal
    payment_weekdays: List[int]
    deadline: Optional[DeadlineSchema] = None
    projection_available: bool
    payments_left: Optional[int] = None
    projected_finish_date: Optional[date] = None
    history: List[PaymentRecordSchema]


class HistoryResponse(BaseModel):
    """Response for GET /v1/accounts/{key}/history"""

    account_key: str
    payments: List[PaymentRecordSchema]
    trend: List[TrendPointSchema]


class CalendarDaySchema(BaseModel):
    date: date
    is_scheduled: bool
    has_payment: bool


class CalendarResponse(BaseModel):
    """Response for GET /v1/accounts/{key}/calendar"""

    account_key: str
    year: int
    month: int
    days: List[CalendarDaySchema]


class PaymentRequest(BaseModel):
    """Request body for POST /v1/accounts/{key}/payments"""

    method: str = Field(..., min_length=1, description="Payment method label, e.g. Cash")
    amount: Optional[Decimal] = Field(None, gt=0, decimal_places=2, description="Defaults to the account payment amount")


class BlankPaymentRequest(BaseModel):
    """Request body for POST /v1/accounts/{key}/blank-payments"""

    reason: str = Field(..., description="Why no payment is made today")


class PaymentResponse(BaseModel):
    """Confirmation of a recorded payment"""

    transaction_id: str
    kind: str  # direct | transfer | blank
    date: date
    amount: Decimal

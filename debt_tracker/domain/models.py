"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Optional


class ClearedState(str, Enum):
    """Clearance of a ledger entry"""

    CLEARED = "cleared"
    UNCLEARED = "uncleared"
    UNKNOWN = "unknown"


class PaymentStatus(str, Enum):
    """Same-day payment verdict"""

    COMPLETED = "completed"
    PENDING = "pending"
    NOT_SCHEDULED = "not_scheduled"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    PaymentStatus.COMPLETED: "Payment completed today",
    PaymentStatus.PENDING: "Payment pending today",
    PaymentStatus.NOT_SCHEDULED: "Not a payment day",
}


@dataclass(frozen=True)
class DeadlineConfig:
    """Optional end date for deadline-based reporting"""

    end_date: date
    enabled: bool = True
    show_days_remaining: bool = True
    description: str = "Payment days remaining"


@dataclass(frozen=True)
class AccountScheduleConfig:
    """Per-debt tracking parameters, fixed for a tracking session"""

    key: str
    account_id: str
    name: str
    payment_amount: Decimal
    max_payment_amount: Decimal
    min_payment_amount: Decimal
    scheduled_weekdays: FrozenSet[int] = frozenset()  # Sunday=0 .. Saturday=6
    deadline: Optional[DeadlineConfig] = None
    payment_accounts: Mapping[str, str] = field(default_factory=dict, hash=False)  # method -> source account id

    def __post_init__(self):
        object.__setattr__(self, "payment_accounts", MappingProxyType(dict(self.payment_accounts)))

    @property
    def deadline_active(self) -> bool:
        return self.deadline is not None and self.deadline.enabled


@dataclass
class LedgerTransaction:
    """Transaction as returned by the ledger API"""

    transaction_id: str
    date: date
    amount_minor: int  # signed, thousandths of the major unit
    cleared: str  # "cleared" | "uncleared" | "reconciled"
    memo: Optional[str] = None


@dataclass(frozen=True)
class PaymentRecord:
    """Reconciled payment history entry"""

    date: date
    amount: Decimal
    cleared: ClearedState = ClearedState.UNKNOWN
    memo: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        return self.amount == 0


@dataclass(frozen=True)
class DebtState:
    """Derived debt metrics, recomputed on every evaluation"""

    outstanding_balance: Decimal
    payment_days_remaining: int
    calendar_days_until_deadline: int


@dataclass(frozen=True)
class FinishProjection:
    """Projected payoff under a fixed payment cadence"""

    payments_left: int
    finish_date: date


@dataclass(frozen=True)
class TrendPoint:
    """Single point of the payment trend chart"""

    date: date
    amount: Decimal


@dataclass(frozen=True)
class CalendarDay:
    """Calendar cell for the payment calendar"""

    date: date
    is_scheduled: bool
    has_payment: bool


@dataclass
class DebtReport:
    """Output of a tracking evaluation for one account"""

    account_key: str
    account_name: str
    today: date
    state: DebtState
    status: PaymentStatus
    history: List[PaymentRecord]
    projection: Optional[FinishProjection]
    deadline: Optional[DeadlineConfig]


@dataclass
class RecordedTransaction:
    """Confirmation of a transaction written to the ledger"""

    transaction_id: str
    date: date
    amount_minor: int

"""Prometheus metrics for monitoring payment status, recorded payments, and ledger performance"""

from prometheus_client import Counter, Histogram

# Report metrics
report_counter = Counter(
    "debt_tracker_report_total",
    "Debt reports generated",
    ["status"],  # completed | pending | not_scheduled
)

payment_days_remaining_histogram = Histogram(
    "debt_tracker_payment_days_remaining",
    "Scheduled payment days remaining on deadline accounts",
    buckets=[0, 5, 20, 60, 120, 250, 500, 1000, 2000],
)

# Payment metrics
payment_counter = Counter(
    "debt_tracker_payments_recorded_total",
    "Payments written to the ledger",
    ["kind"],  # direct | transfer | blank
)

# Ledger API metrics
ledger_latency_histogram = Histogram(
    "ledger_request_latency_seconds",
    "Ledger API response time",
    ["operation"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

ledger_failure_counter = Counter(
    "ledger_failures_total",
    "Failed ledger API calls",
    ["operation"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report(status: str, payment_days_remaining: int | None) -> None:
    """Record report metrics; remaining days only for deadline accounts"""
    report_counter.labels(status=status).inc()

    if payment_days_remaining is not None:
        payment_days_remaining_histogram.observe(payment_days_remaining)


def record_payment(kind: str) -> None:
    payment_counter.labels(kind=kind).inc()

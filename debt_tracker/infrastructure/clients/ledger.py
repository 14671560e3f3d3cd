"""Ledger (budgeting service) HTTP client with retry on reads"""

import asyncio
import logging
from datetime import date
from typing import Any, Dict, List
import httpx
from debt_tracker.config import settings
from debt_tracker.domain.exceptions import LedgerAPIError
from debt_tracker.domain.models import LedgerTransaction, RecordedTransaction
from debt_tracker.infrastructure.observability.metrics import ledger_failure_counter, ledger_latency_histogram
from debt_tracker.utils.date_utils import today_in

logger = logging.getLogger(__name__)


class LedgerClient:
    """Client for the budgeting ledger API (accounts and transactions)"""

    def __init__(
        self,
        base_url: str | None = None,
        access_token: str | None = None,
        budget_id: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.ledger_api_base).rstrip("/")
        self.access_token = access_token if access_token is not None else settings.ledger_access_token
        self.budget_id = budget_id or settings.ledger_budget_id
        self.timeout = timeout or settings.http_timeout_seconds
        self.max_retries = settings.ledger_max_retries
        self.backoff_base = settings.ledger_backoff_base
        self.transport = transport

    @property
    def _budget_url(self) -> str:
        return f"{self.base_url}/budgets/{self.budget_id}"

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    async def _get(self, operation: str, url: str, params: Dict[str, Any] | None = None) -> Dict[str, Any]:
        """
        GET with retry.

        Retry strategy:
        - Exponential backoff: base, 2*base, 4*base, ...
        - Retries on 5xx errors and network failures, 4xx fail immediately
        """
        attempt = 0
        async with httpx.AsyncClient(timeout=self.timeout, headers=self._headers(), transport=self.transport) as client:
            while True:
                try:
                    with ledger_latency_histogram.labels(operation=operation).time():
                        response = await client.get(url, params=params)
                        response.raise_for_status()
                        return response.json()["data"]

                except (httpx.HTTPStatusError, httpx.RequestError) as e:
                    attempt += 1
                    ledger_failure_counter.labels(operation=operation).inc()

                    retryable = isinstance(e, httpx.RequestError) or e.response.status_code >= 500
                    if not retryable or attempt >= self.max_retries:
                        raise _to_ledger_error(operation, e) from e

                    backoff = self.backoff_base * (2 ** (attempt - 1))
                    logger.warning(
                        f"Ledger {operation} failed, retrying in {backoff}s",
                        extra={"operation": operation, "attempt": attempt},
                    )
                    await asyncio.sleep(backoff)

                except (KeyError, TypeError, ValueError) as e:
                    ledger_failure_counter.labels(operation=operation).inc()
                    raise LedgerAPIError(f"Invalid {operation} response from ledger: {e}") from e

    async def _post(self, operation: str, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST once; writes are never retried so a payment is not posted twice"""
        async with httpx.AsyncClient(timeout=self.timeout, headers=self._headers(), transport=self.transport) as client:
            try:
                with ledger_latency_histogram.labels(operation=operation).time():
                    response = await client.post(url, json=payload)
                    response.raise_for_status()
                    return response.json()["data"]

            except (httpx.HTTPStatusError, httpx.RequestError) as e:
                ledger_failure_counter.labels(operation=operation).inc()
                raise _to_ledger_error(operation, e) from e
            except (KeyError, TypeError, ValueError) as e:
                ledger_failure_counter.labels(operation=operation).inc()
                raise LedgerAPIError(f"Invalid {operation} response from ledger: {e}") from e

    async def get_account(self, account_id: str) -> Dict[str, Any]:
        data = await self._get("get_account", f"{self._budget_url}/accounts/{account_id}")
        try:
            return data["account"]
        except (KeyError, TypeError) as e:
            raise LedgerAPIError(f"Invalid account data from ledger: {e}") from e

    async def get_account_balance(self, account_id: str) -> int:
        """
        Fetch the signed account balance in minor units.

        Raises:
            LedgerAPIError: On timeout, HTTP errors, or invalid response
        """
        account = await self.get_account(account_id)
        try:
            return int(account["balance"])
        except (KeyError, TypeError, ValueError) as e:
            raise LedgerAPIError(f"Invalid account data from ledger: {e}") from e

    async def get_transactions(self, account_id: str, since_date: date | None = None) -> List[LedgerTransaction]:
        """
        Fetch transactions for an account, optionally only since a date.

        Deleted ledger entries are dropped.

        Raises:
            LedgerAPIError: On timeout, HTTP errors, or invalid response
        """
        params = {"since_date": since_date.isoformat()} if since_date else None
        data = await self._get(
            "get_transactions",
            f"{self._budget_url}/accounts/{account_id}/transactions",
            params=params,
        )

        try:
            return [
                LedgerTransaction(
                    transaction_id=txn["id"],
                    date=date.fromisoformat(txn["date"]),
                    amount_minor=int(txn["amount"]),
                    cleared=txn.get("cleared", ""),
                    memo=txn.get("memo"),
                )
                for txn in data.get("transactions", [])
                if not txn.get("deleted", False)
            ]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise LedgerAPIError(f"Invalid transaction data from ledger: {e}") from e

    async def create_transaction(
        self,
        account_id: str,
        amount_minor: int,
        payee_name: str,
        memo: str | None = None,
        on: date | None = None,
    ) -> RecordedTransaction:
        """
        Record a transaction on an account.

        Args:
            account_id: Ledger account the entry belongs to
            amount_minor: Signed amount in minor units
            payee_name: Payee label shown in the ledger
            memo: Optional note
            on: Transaction date (default: today in the configured timezone)
        """
        return await self._create(
            "create_transaction",
            {
                "account_id": account_id,
                "payee_name": payee_name,
                "amount": amount_minor,
                "memo": memo or "",
                "cleared": "uncleared",
                "date": (on or today_in(settings.timezone)).isoformat(),
            },
        )

    async def create_transfer(
        self,
        from_account_id: str,
        to_account_id: str,
        amount_minor: int,
        memo: str | None = None,
        on: date | None = None,
    ) -> RecordedTransaction:
        """
        Move funds from one account to another.

        The ledger models a transfer as an outflow on the source account whose
        payee is the target account's transfer payee.
        """
        target = await self.get_account(to_account_id)
        try:
            transfer_payee_id = target["transfer_payee_id"]
        except KeyError as e:
            raise LedgerAPIError(f"Account {to_account_id} has no transfer payee") from e

        return await self._create(
            "create_transfer",
            {
                "account_id": from_account_id,
                "payee_id": transfer_payee_id,
                "amount": -abs(amount_minor),
                "memo": memo or "",
                "cleared": "uncleared",
                "date": (on or today_in(settings.timezone)).isoformat(),
            },
        )

    async def _create(self, operation: str, transaction: Dict[str, Any]) -> RecordedTransaction:
        data = await self._post(operation, f"{self._budget_url}/transactions", {"transaction": transaction})
        try:
            created = data["transaction"]
            return RecordedTransaction(
                transaction_id=created["id"],
                date=date.fromisoformat(created["date"]),
                amount_minor=int(created["amount"]),
            )
        except (KeyError, ValueError, TypeError) as e:
            raise LedgerAPIError(f"Invalid transaction confirmation from ledger: {e}") from e


def _to_ledger_error(operation: str, error: httpx.HTTPError) -> LedgerAPIError:
    if isinstance(error, httpx.TimeoutException):
        return LedgerAPIError(f"Ledger {operation} timed out")
    if isinstance(error, httpx.HTTPStatusError):
        return LedgerAPIError(f"Ledger {operation} error: {error.response.status_code}")
    return LedgerAPIError(f"Ledger {operation} unavailable: {error}")

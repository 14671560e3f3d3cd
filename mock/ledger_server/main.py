from datetime import date
from pathlib import Path
import json
import os
import uuid

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

app = FastAPI(title="Mock Ledger Server", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/ledger_stub") if os.path.exists("/ledger_stub") else Path(__file__).resolve().parents[2] / "ledger_stub"

# account_id -> {"account": {...}, "transactions": [...]}, loaded lazily, writes kept in memory
_accounts: dict = {}


class NewTransaction(BaseModel):
    account_id: str
    amount: int
    date: str | None = None
    payee_name: str | None = None
    payee_id: str | None = None
    memo: str | None = None
    cleared: str = "uncleared"


class TransactionWrapper(BaseModel):
    transaction: NewTransaction


def _load(account_id: str) -> dict:
    if account_id not in _accounts:
        file = DATA_DIR / f"account_{account_id}.json"
        if not file.exists():
            raise HTTPException(status_code=404, detail="account not found")
        _accounts[account_id] = json.loads(file.read_text())
    return _accounts[account_id]


def _by_transfer_payee(payee_id: str) -> dict | None:
    for file in DATA_DIR.glob("account_*.json"):
        account = _load(file.stem.removeprefix("account_"))
        if account["account"].get("transfer_payee_id") == payee_id:
            return account
    return None


@app.get("/health")
def health(): return {"status": "ok"}


@app.get("/v1/budgets/{budget_id}/accounts/{account_id}")
def get_account(budget_id: str, account_id: str):
    return {"data": {"account": _load(account_id)["account"]}}


@app.get("/v1/budgets/{budget_id}/accounts/{account_id}/transactions")
def get_transactions(budget_id: str, account_id: str, since_date: str | None = None):
    transactions = _load(account_id)["transactions"]
    if since_date:
        transactions = [t for t in transactions if t["date"] >= since_date]
    return {"data": {"transactions": transactions}}


@app.post("/v1/budgets/{budget_id}/transactions", status_code=201)
def create_transaction(budget_id: str, body: TransactionWrapper):
    txn = body.transaction
    source = _load(txn.account_id)
    record = {
        "id": str(uuid.uuid4()),
        "date": txn.date or date.today().isoformat(),
        "amount": txn.amount,
        "memo": txn.memo,
        "cleared": txn.cleared,
        "deleted": False,
    }
    source["transactions"].append(record)
    source["account"]["balance"] += txn.amount

    # Transfers land as the mirrored inflow on the target account
    target = _by_transfer_payee(txn.payee_id) if txn.payee_id else None
    if target is not None:
        target["transactions"].append({**record, "id": str(uuid.uuid4()), "amount": -txn.amount})
        target["account"]["balance"] -= txn.amount

    return {"data": {"transaction": record}}

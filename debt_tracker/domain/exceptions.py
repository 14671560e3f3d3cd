"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class AccountConfigNotFoundError(DomainException):
    """No schedule configuration is registered for the account key"""

    def __init__(self, account_key: str):
        super().__init__(f"Account configuration not found for: {account_key}")
        self.account_key = account_key


class LedgerAPIError(DomainException):
    """Ledger API returned an error or is unavailable"""

    pass


class InvalidBlankPaymentReasonError(DomainException):
    """Blank payment reason is empty or too long"""

    pass

"""
Ledger Errors

Every rejected operation raises one of these. An exception always means the
operation changed nothing.
"""

from typing import Optional


class LedgerError(ValueError):
    """Base class for rejected ledger operations"""


class InvalidAmountError(LedgerError):
    """Amount is zero, negative, or not a number"""

    def __init__(self, message: str = "Amount must be a positive number"):
        super().__init__(message)


class InsufficientFundsError(LedgerError):
    """Withdrawal or transfer amount exceeds the current balance"""

    def __init__(self, message: str = "Insufficient funds in account"):
        super().__init__(message)


class AccountNotFoundError(LedgerError):
    """No account is stored under the requested identity"""

    def __init__(self, account_id: Optional[str] = None):
        self.account_id = account_id
        if account_id is None:
            super().__init__("Account not found")
        else:
            super().__init__(f"Account {account_id} not found")


class SameAccountTransferError(LedgerError):
    """Transfer source and destination are the same account"""

    def __init__(self, message: str = "Cannot transfer to the same account"):
        super().__init__(message)

"""
Ledger Exceptions

Typed business errors raised by the ledger core. All of them are expected,
caller-correctable conditions; none is fatal to the process.
"""

from decimal import Decimal


class LedgerError(Exception):
    """Base class for ledger errors"""


class InvalidInputError(LedgerError):
    """Raised for malformed or missing input (blank owner, absent account)"""


class InvalidAmountError(LedgerError):
    """Raised when a transaction amount is not a positive number"""


class InsufficientFundsError(LedgerError):
    """
    Raised when a withdrawal exceeds the available balance.

    Carries the shortfall so callers can report how much is missing.
    """

    def __init__(self, account_id: str, available: Decimal, requested: Decimal):
        self.account_id = account_id
        self.available = available
        self.requested = requested
        self.shortfall = requested - available
        super().__init__(
            f"Insufficient funds in account {account_id}: "
            f"available {available}, requested {requested}, shortfall {self.shortfall}"
        )

"""
Ledger Core

A minimal in-memory ledger: accounts holding a Decimal balance and a service
layer that performs deposits, withdrawals and transfers without ever letting
a balance go negative.
"""

from .accounts import Account
from .exceptions import (
    LedgerError, InvalidInputError, InvalidAmountError, InsufficientFundsError
)
from .service import LedgerService
from .transactions import TransactionType, TransactionResult, TransferResult

__version__ = "1.0.0"

__all__ = [
    "Account",
    "LedgerService",
    "LedgerError",
    "InvalidInputError",
    "InvalidAmountError",
    "InsufficientFundsError",
    "TransactionType",
    "TransactionResult",
    "TransferResult",
]

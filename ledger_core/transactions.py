"""
Transaction Module

Transaction intents (the unit of validation) and the structured results the
ledger service returns once a transaction has been applied.
"""

from decimal import Decimal
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from enum import Enum

from .accounts import Account
from .currency import AmountLike, ZERO, to_amount
from .exceptions import InvalidInputError, InvalidAmountError


class TransactionType(Enum):
    """Types of ledger transactions"""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    TRANSFER = "transfer"


def require_account(account: Optional[Account], role: str = "account") -> Account:
    """Reject a missing or foreign account reference"""
    if account is None:
        raise InvalidInputError(f"The {role} cannot be None")
    if not isinstance(account, Account):
        raise InvalidInputError(
            f"The {role} must be an Account, got {type(account).__name__}"
        )
    return account


def require_positive(amount: AmountLike) -> Decimal:
    """Convert an amount and reject zero or negative values"""
    value = to_amount(amount)
    if value <= ZERO:
        raise InvalidAmountError(f"Amount must be positive, got {value}")
    return value


@dataclass(frozen=True)
class DepositIntent:
    """Request to add funds to an account"""
    account: Account
    amount: AmountLike

    @property
    def transaction_type(self) -> TransactionType:
        return TransactionType.DEPOSIT

    def validate(self) -> Decimal:
        """Check the request and return the normalized amount"""
        require_account(self.account)
        return require_positive(self.amount)


@dataclass(frozen=True)
class WithdrawalIntent:
    """Request to remove funds from an account"""
    account: Account
    amount: AmountLike

    @property
    def transaction_type(self) -> TransactionType:
        return TransactionType.WITHDRAWAL

    def validate(self) -> Decimal:
        """Check the request and return the normalized amount"""
        require_account(self.account)
        return require_positive(self.amount)


@dataclass(frozen=True)
class TransferIntent:
    """Request to move funds between two accounts (which may be the same)"""
    source: Account
    destination: Account
    amount: AmountLike

    @property
    def transaction_type(self) -> TransactionType:
        return TransactionType.TRANSFER

    def validate(self) -> Decimal:
        """Check the request and return the normalized amount"""
        require_account(self.source, "source account")
        require_account(self.destination, "destination account")
        return require_positive(self.amount)


@dataclass(frozen=True)
class TransactionResult:
    """Outcome of a completed deposit or withdrawal"""
    transaction_id: str
    transaction_type: TransactionType
    account_id: str
    amount: Decimal
    previous_balance: Decimal
    new_balance: Decimal
    completed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary"""
        return {
            "transaction_id": self.transaction_id,
            "transaction_type": self.transaction_type.value,
            "account_id": self.account_id,
            "amount": str(self.amount),
            "previous_balance": str(self.previous_balance),
            "new_balance": str(self.new_balance),
            "completed_at": self.completed_at.isoformat(),
        }


@dataclass(frozen=True)
class TransferResult:
    """Outcome of a completed transfer, with both resulting balances"""
    transaction_id: str
    source_id: str
    destination_id: str
    amount: Decimal
    source_balance: Decimal
    destination_balance: Decimal
    completed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def transaction_type(self) -> TransactionType:
        return TransactionType.TRANSFER

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary"""
        return {
            "transaction_id": self.transaction_id,
            "transaction_type": self.transaction_type.value,
            "source_id": self.source_id,
            "destination_id": self.destination_id,
            "amount": str(self.amount),
            "source_balance": str(self.source_balance),
            "destination_balance": str(self.destination_balance),
            "completed_at": self.completed_at.isoformat(),
        }

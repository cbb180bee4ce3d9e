"""
Account Module

The account entity: identity, owner and balance. The balance can only be
changed through the mutation primitive, which the ledger service calls after
it has validated the transaction.
"""

from decimal import Decimal
from datetime import datetime, timezone
from dataclasses import dataclass, field
import threading

from .currency import ZERO, quantize
from .exceptions import InvalidInputError


def normalize_owner(owner: str) -> str:
    """Trim an owner name, rejecting missing or blank names"""
    if not isinstance(owner, str) or not owner.strip():
        raise InvalidInputError("Owner name cannot be empty")
    return owner.strip()


@dataclass(frozen=True, eq=False)
class Account:
    """
    Bank account holding a Decimal balance

    Identity and owner are immutable. Accounts compare by identity, so two
    accounts with the same owner are never equal.
    """
    id: str
    owner: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _balance: Decimal = field(default=ZERO, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise InvalidInputError("Account id must be a non-empty string")
        if not isinstance(self.owner, str) or not self.owner.strip():
            raise InvalidInputError("Owner name cannot be empty")

    @classmethod
    def create(cls, owner: str, account_id: str) -> 'Account':
        """
        Create a new account with a zero balance

        Args:
            owner: Account holder name, trimmed before storing
            account_id: Identifier issued by the ledger's generator

        Returns:
            New Account

        Raises:
            InvalidInputError: If owner is missing or blank
        """
        return cls(id=account_id, owner=normalize_owner(owner))

    @property
    def account_number(self) -> str:
        return self.id

    @property
    def balance(self) -> Decimal:
        return self._balance

    def get_id(self) -> str:
        return self.id

    def get_owner(self) -> str:
        return self.owner

    def get_balance(self) -> Decimal:
        return self._balance

    def _apply_delta(self, amount: Decimal) -> None:
        """
        Add a positive or negative delta to the balance.

        Unconditional write: validation is the ledger service's job, and only
        the service calls this.
        """
        object.__setattr__(self, '_balance', quantize(self._balance + amount))

"""
Ledger Service Module

Validated entry points for account creation, deposits, withdrawals and
transfers. The service keeps no account state of its own; it operates on the
accounts passed to it and is the only caller of the account mutation
primitive.
"""

from contextlib import contextmanager
from decimal import Decimal
from typing import Callable, Optional

from .accounts import Account, normalize_owner
from .config import LedgerConfig, get_config
from .currency import AmountLike, MAX_AMOUNT
from .exceptions import InsufficientFundsError, InvalidAmountError
from .identifiers import AccountNumberGenerator, build_generator, generate_transaction_id
from .logging_config import get_logger, log_action
from .transactions import (
    DepositIntent, WithdrawalIntent, TransferIntent,
    TransactionResult, TransferResult, TransactionType, require_account
)


@contextmanager
def _hold_locks(*accounts: Account):
    """
    Hold the locks of all given accounts, acquired in account id order

    A consistent order keeps two opposite transfers between the same pair of
    accounts from deadlocking. Repeated accounts are locked once.
    """
    unique = {id(account): account for account in accounts}.values()
    ordered = sorted(unique, key=lambda account: (account.id, id(account)))
    acquired = []
    try:
        for account in ordered:
            account._lock.acquire()
            acquired.append(account)
        yield
    finally:
        for account in reversed(acquired):
            account._lock.release()


class LedgerService:
    """
    Performs ledger operations under the no-negative-balance invariant

    Every failed operation raises a typed LedgerError and leaves all
    balances exactly as they were.
    """

    def __init__(
        self,
        id_generator: AccountNumberGenerator,
        transaction_id_factory: Callable[[], str] = generate_transaction_id
    ):
        self.id_generator = id_generator
        self.transaction_id_factory = transaction_id_factory
        self.logger = get_logger("ledger_core.service")

    @classmethod
    def from_config(cls, config: Optional[LedgerConfig] = None) -> 'LedgerService':
        """Build a service whose account number generator follows configuration"""
        return cls(build_generator(config or get_config()))

    def create_account(self, owner: str) -> Account:
        """
        Open a new account with a zero balance

        Args:
            owner: Account holder name (trimmed)

        Returns:
            Created Account

        Raises:
            InvalidInputError: If owner is missing or blank
        """
        # Validate before drawing an identifier so a bad request burns no number
        name = normalize_owner(owner)
        account = Account.create(name, self.id_generator())

        log_action(
            self.logger, "debug", "Account created",
            action="create_account", resource=f"account:{account.id}",
            extra={"owner": account.owner}
        )
        return account

    def deposit(self, account: Account, amount: AmountLike) -> TransactionResult:
        """
        Add funds to an account

        Args:
            account: Account to credit
            amount: Positive amount

        Returns:
            TransactionResult with previous and new balance

        Raises:
            InvalidInputError: If account is missing
            InvalidAmountError: If amount is not positive or the balance would
                exceed the ledger maximum
        """
        value = DepositIntent(account, amount).validate()
        transaction_id = self.transaction_id_factory()

        with _hold_locks(account):
            result = self._credit(account, value, transaction_id)

        self._log_result(result)
        return result

    def withdraw(self, account: Account, amount: AmountLike) -> TransactionResult:
        """
        Remove funds from an account

        Args:
            account: Account to debit
            amount: Positive amount not exceeding the balance

        Returns:
            TransactionResult with previous and new balance

        Raises:
            InvalidInputError: If account is missing
            InvalidAmountError: If amount is not positive
            InsufficientFundsError: If amount exceeds the balance
        """
        value = WithdrawalIntent(account, amount).validate()
        transaction_id = self.transaction_id_factory()

        with _hold_locks(account):
            result = self._debit(account, value, transaction_id)

        self._log_result(result)
        return result

    def transfer(
        self,
        source: Account,
        destination: Account,
        amount: AmountLike
    ) -> TransferResult:
        """
        Move funds from one account to another

        The source is debited first, so a transfer can never create money.
        If anything fails after the debit, every applied leg is undone before
        the error propagates. Source and destination may be the same account.

        Args:
            source: Account to debit
            destination: Account to credit
            amount: Positive amount not exceeding the source balance

        Returns:
            TransferResult with both resulting balances

        Raises:
            InvalidInputError: If either account is missing
            InvalidAmountError: If amount is not positive or the destination
                balance would exceed the ledger maximum
            InsufficientFundsError: If amount exceeds the source balance
        """
        value = TransferIntent(source, destination, amount).validate()
        transaction_id = self.transaction_id_factory()

        with _hold_locks(source, destination):
            debited = credited = False
            try:
                self._debit(source, value, transaction_id)
                debited = True
                self._credit(destination, value, transaction_id)
                credited = True
                result = TransferResult(
                    transaction_id=transaction_id,
                    source_id=source.id,
                    destination_id=destination.id,
                    amount=value,
                    source_balance=source.balance,
                    destination_balance=destination.balance
                )
            except Exception:
                if credited:
                    destination._apply_delta(-value)
                if debited:
                    source._apply_delta(value)
                raise

        log_action(
            self.logger, "debug", "Transfer completed",
            action="transfer", resource=f"account:{source.id}",
            extra=result.to_dict()
        )
        return result

    def get_account_balance(self, account: Account) -> Decimal:
        """
        Current balance of an account

        Raises:
            InvalidInputError: If account is missing
        """
        require_account(account)
        with _hold_locks(account):
            return account.balance

    def _credit(self, account: Account, amount: Decimal, transaction_id: str) -> TransactionResult:
        """Apply a validated credit. Caller holds the account lock."""
        previous = account.balance
        new_balance = previous + amount
        if new_balance > MAX_AMOUNT:
            raise InvalidAmountError(
                f"Deposit would take account {account.id} above the maximum balance of {MAX_AMOUNT}"
            )

        result = TransactionResult(
            transaction_id=transaction_id,
            transaction_type=TransactionType.DEPOSIT,
            account_id=account.id,
            amount=amount,
            previous_balance=previous,
            new_balance=new_balance
        )
        account._apply_delta(amount)
        return result

    def _debit(self, account: Account, amount: Decimal, transaction_id: str) -> TransactionResult:
        """Apply a validated debit if funds allow. Caller holds the account lock."""
        previous = account.balance
        if amount > previous:
            raise InsufficientFundsError(account.id, previous, amount)

        result = TransactionResult(
            transaction_id=transaction_id,
            transaction_type=TransactionType.WITHDRAWAL,
            account_id=account.id,
            amount=amount,
            previous_balance=previous,
            new_balance=previous - amount
        )
        account._apply_delta(-amount)
        return result

    def _log_result(self, result: TransactionResult) -> None:
        log_action(
            self.logger, "debug", f"{result.transaction_type.value.capitalize()} completed",
            action=result.transaction_type.value, resource=f"account:{result.account_id}",
            extra=result.to_dict()
        )

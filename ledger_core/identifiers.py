"""
Identifier Generation Module

Account number generators injected into the ledger service, plus the
transaction id stamp used on results. A generator is any zero-argument
callable returning a fresh string that never repeats within the process.
"""

from typing import Callable, Set
import random
import re
import threading
import time
import uuid

AccountNumberGenerator = Callable[[], str]


class SequentialAccountNumberGenerator:
    """
    Prefixed, zero-padded sequential account numbers (ACC001001, ACC001002, ...)

    The counter is incremented under a lock so concurrent callers never
    receive the same number.
    """

    def __init__(self, prefix: str = "ACC", start: int = 1000, width: int = 6):
        if width < 1:
            raise ValueError("Width must be at least 1")
        if start < 0:
            raise ValueError("Start must not be negative")
        self.prefix = prefix
        self.width = width
        self._counter = start
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            self._counter += 1
            if len(str(self._counter)) > self.width:
                raise ValueError(
                    f"Account number space exhausted for width {self.width}"
                )
            return f"{self.prefix}{self._counter:0{self.width}d}"


class RandomAccountNumberGenerator:
    """Randomized account numbers (ACCT-1A2B3C4D) with collision redraw"""

    def __init__(self, prefix: str = "ACCT-", length: int = 8):
        if not 1 <= length <= 32:
            raise ValueError("Length must be between 1 and 32")
        self.prefix = prefix
        self.length = length
        self._issued: Set[str] = set()
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            if len(self._issued) >= 16 ** self.length:
                raise ValueError(
                    f"Account number space exhausted for length {self.length}"
                )
            while True:
                candidate = f"{self.prefix}{uuid.uuid4().hex[:self.length].upper()}"
                if candidate not in self._issued:
                    self._issued.add(candidate)
                    return candidate


def is_valid_account_number(value: str, prefix: str = "ACC", width: int = 6) -> bool:
    """Check that a value has the sequential account number format"""
    if not isinstance(value, str):
        return False
    return re.fullmatch(rf"{re.escape(prefix)}\d{{{width}}}", value) is not None


def generate_transaction_id() -> str:
    """Generate a transaction id: TXN + epoch millis + 4 random digits"""
    millis = int(time.time() * 1000)
    return f"TXN{millis}{random.randint(0, 9999):04d}"


def build_generator(config) -> AccountNumberGenerator:
    """
    Build the account number generator selected by configuration

    Args:
        config: LedgerConfig instance

    Returns:
        Generator callable

    Raises:
        ValueError: If the configured strategy is unknown
    """
    strategy = config.account_number_strategy.lower()
    if strategy == "sequential":
        return SequentialAccountNumberGenerator(
            prefix=config.account_number_prefix,
            start=config.account_number_start,
            width=config.account_number_width
        )
    if strategy == "random":
        return RandomAccountNumberGenerator(
            prefix=config.random_account_prefix,
            length=config.random_account_length
        )
    raise ValueError(f"Unknown account number strategy: {config.account_number_strategy}")

#!/usr/bin/env python3
"""
Example: Embedding the ledger core in a host program

The ledger never prints; this script plays the host and decides how results
and errors are presented.
"""

import os
import sys
from decimal import Decimal

# Add the ledger core module to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from ledger_core.config import LedgerConfig
from ledger_core.currency import format_amount
from ledger_core.exceptions import LedgerError, InsufficientFundsError
from ledger_core.logging_config import setup_logging
from ledger_core.service import LedgerService


def main():
    print("🏦 Ledger Core - Basic Usage Example")
    print("=" * 60)

    config = LedgerConfig()
    setup_logging(config.log_level, log_format=config.log_format)
    service = LedgerService.from_config(config)

    print("\n1. Open accounts")
    alice = service.create_account("Alice")
    bob = service.create_account("Bob")
    print(f"   {alice.account_number} ({alice.owner}): {format_amount(alice.balance)}")
    print(f"   {bob.account_number} ({bob.owner}): {format_amount(bob.balance)}")

    print("\n2. Deposits")
    for account, amount in [(alice, Decimal('1000.00')), (bob, Decimal('750.50'))]:
        result = service.deposit(account, amount)
        print(f"   {account.account_number}: {format_amount(result.previous_balance)}"
              f" -> {format_amount(result.new_balance)}")

    print("\n3. Transfer 200.00 from Alice to Bob")
    transfer = service.transfer(alice, bob, Decimal('200.00'))
    print(f"   Alice: {format_amount(transfer.source_balance)}")
    print(f"   Bob:   {format_amount(transfer.destination_balance)}")

    print("\n4. Overdraw attempt")
    try:
        service.withdraw(alice, Decimal('1500.00'))
    except InsufficientFundsError as e:
        print(f"   ❌ Refused, shortfall {format_amount(e.shortfall)}")

    print("\n5. Invalid deposit")
    try:
        service.deposit(bob, Decimal('-50.00'))
    except LedgerError as e:
        print(f"   ❌ {e}")

    print(f"\n✅ Final balances: Alice {format_amount(service.get_account_balance(alice))},"
          f" Bob {format_amount(service.get_account_balance(bob))}")


if __name__ == "__main__":
    main()

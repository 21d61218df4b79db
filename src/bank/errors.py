"""
Domain errors raised by the ledger and its menu.

The ledger raises; only the console loop turns these into messages.
"""
from __future__ import annotations

from decimal import Decimal


class LedgerError(Exception):
    pass


class InvalidAmount(LedgerError, ValueError):
    """Deposit or withdrawal amount is zero or negative."""

    def __init__(self, amount: Decimal, message: str = ""):
        super().__init__(message or f"amount must be greater than zero, got {amount}")
        self.amount = amount


class AmountOutOfRange(InvalidAmount):
    """The resulting balance cannot be held exactly to the paisa."""

    def __init__(self, amount: Decimal, balance: Decimal):
        super().__init__(amount, f"amount {amount} would take balance {balance} out of range")
        self.balance = balance


class InsufficientFunds(LedgerError):
    """Withdrawal larger than the current balance."""

    def __init__(self, requested: Decimal, balance: Decimal):
        super().__init__(f"cannot withdraw {requested}: balance is {balance}")
        self.requested = requested
        self.balance = balance


class InvalidMenuChoice(LedgerError):
    def __init__(self, choice: int):
        super().__init__(f"not an option: {choice}")
        self.choice = choice

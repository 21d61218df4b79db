"""bank package.

A single in-memory account with deposit, withdraw and balance inquiry,
driven by a console menu.
"""

from .errors import (
    AmountOutOfRange,
    InsufficientFunds,
    InvalidAmount,
    InvalidMenuChoice,
    LedgerError,
)
from .ledger import Account, BalanceInquiry, open_default_account

__all__ = [
    "Account",
    "BalanceInquiry",
    "open_default_account",
    "LedgerError",
    "InvalidAmount",
    "AmountOutOfRange",
    "InsufficientFunds",
    "InvalidMenuChoice",
]

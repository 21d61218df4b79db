"""
Single-account ledger: identity, balance, deposit/withdraw/inquiry.

Teaching notes:
- The balance is a Decimal rounded to two places; floats never touch it.
- Every rejected operation leaves the balance exactly as it was.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, Inexact, Rounded, localcontext

from .errors import AmountOutOfRange, InsufficientFunds, InvalidAmount
from .money import AmountLike, to_amount

DEFAULT_ACCOUNT_NUMBER = 101
DEFAULT_ACCOUNT_HOLDER = "Granth"
DEFAULT_OPENING_BALANCE = Decimal("1000.00")


@dataclass(frozen=True)
class BalanceInquiry:
    number: int
    holder: str
    balance: Decimal


class Account:
    def __init__(self, number: int, holder: str, balance: AmountLike = Decimal("0.00")):
        opening = to_amount(balance)
        if opening < 0:
            raise InvalidAmount(opening)
        self._number = number
        self._holder = holder
        self._balance = opening

    @property
    def number(self) -> int:
        return self._number

    @property
    def holder(self) -> str:
        return self._holder

    @property
    def balance(self) -> Decimal:
        return self._balance

    def _checked(self, amount: AmountLike) -> Decimal:
        value = to_amount(amount)
        if value <= 0:
            logging.debug("account=%s rejected amount=%s", self._number, value)
            raise InvalidAmount(value)
        return value

    def _settle(self, amount: Decimal, delta: Decimal) -> Decimal:
        """Return the balance after applying ``delta``; refuse results that would be rounded."""
        with localcontext() as ctx:
            ctx.traps[Inexact] = True
            ctx.traps[Rounded] = True
            try:
                return self._balance + delta
            except (Inexact, Rounded):
                logging.debug("account=%s amount=%s out of range", self._number, amount)
                raise AmountOutOfRange(amount, self._balance) from None

    def deposit(self, amount: AmountLike) -> Decimal:
        """Add ``amount`` and return the new balance."""
        value = self._checked(amount)
        self._balance = self._settle(value, value)
        logging.debug("account=%s deposit=%s balance=%s", self._number, value, self._balance)
        return self._balance

    def withdraw(self, amount: AmountLike) -> Decimal:
        """Subtract ``amount`` and return the new balance.

        The whole balance may be withdrawn; anything beyond it is refused.
        """
        value = self._checked(amount)
        if value > self._balance:
            logging.debug(
                "account=%s withdraw=%s refused balance=%s", self._number, value, self._balance
            )
            raise InsufficientFunds(value, self._balance)
        self._balance = self._settle(value, -value)
        logging.debug("account=%s withdraw=%s balance=%s", self._number, value, self._balance)
        return self._balance

    def balance_inquiry(self) -> BalanceInquiry:
        return BalanceInquiry(number=self._number, holder=self._holder, balance=self._balance)

    def __repr__(self) -> str:
        return f"Account(number={self._number!r}, holder={self._holder!r}, balance={self._balance!r})"


def open_default_account() -> Account:
    return Account(DEFAULT_ACCOUNT_NUMBER, DEFAULT_ACCOUNT_HOLDER, DEFAULT_OPENING_BALANCE)

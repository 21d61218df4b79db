from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from typing import Optional, TextIO

from termio import MalformedInput, TokenReader

from .errors import AmountOutOfRange, InsufficientFunds, InvalidAmount, InvalidMenuChoice
from .ledger import Account, open_default_account
from .money import format_amount, to_amount

DEPOSIT, WITHDRAW, BALANCE, EXIT = 1, 2, 3, 4

MENU = (
    "\nBank Management System\n"
    "1. Deposit\n"
    "2. Withdraw\n"
    "3. Balance\n"
    "4. Exit\n"
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bank", description="Single-account console bank")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p


def _prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def read_choice(reader: TokenReader, out: TextIO) -> int:
    _prompt(out, "Enter your choice: ")
    choice = reader.read_int()
    if choice not in (DEPOSIT, WITHDRAW, BALANCE, EXIT):
        reader.discard_line()
        raise InvalidMenuChoice(choice)
    return choice


def read_amount(reader: TokenReader, out: TextIO, action: str) -> Decimal:
    """Prompt until a number is entered; malformed entries are reported and re-asked."""
    while True:
        _prompt(out, f"Enter the amount to {action}: ")
        try:
            return reader.read(to_amount, "an amount")
        except MalformedInput:
            print("Error: please enter a valid amount.", file=out)


def _deposit(account: Account, reader: TokenReader, out: TextIO) -> None:
    amount = read_amount(reader, out, "deposit")
    try:
        balance = account.deposit(amount)
    except AmountOutOfRange:
        print("Error: amount is too large for this account.", file=out)
        return
    except InvalidAmount:
        print("Error: amount must be greater than zero.", file=out)
        return
    print(f"Deposited: {format_amount(amount)}", file=out)
    print(f"New balance: {format_amount(balance)}", file=out)
    print("Thank you", file=out)


def _withdraw(account: Account, reader: TokenReader, out: TextIO) -> None:
    amount = read_amount(reader, out, "withdraw")
    try:
        balance = account.withdraw(amount)
    except AmountOutOfRange:
        print("Error: amount is too large for this account.", file=out)
        return
    except InvalidAmount:
        print("Error: amount must be greater than zero.", file=out)
        return
    except InsufficientFunds as exc:
        print(f"Error: insufficient funds. Your balance is {format_amount(exc.balance)}", file=out)
        return
    print(f"Withdrawn: {format_amount(amount)}", file=out)
    print(f"New balance: {format_amount(balance)}", file=out)
    print("Thank you", file=out)


def _show_balance(account: Account, out: TextIO) -> None:
    info = account.balance_inquiry()
    print(f"Account number: {info.number}", file=out)
    print(f"Account holder: {info.holder}", file=out)
    print(f"Your balance is: {format_amount(info.balance)}", file=out)


def run_session(account: Account, stdin: TextIO, stdout: TextIO) -> None:
    """Menu loop over ``account``; returns when Exit is chosen or input runs out."""
    reader = TokenReader(stdin)
    logging.debug("session start account=%s", account.number)
    try:
        while True:
            stdout.write(MENU)
            try:
                choice = read_choice(reader, stdout)
            except MalformedInput:
                print("Error: please enter a number from the menu.", file=stdout)
                continue
            except InvalidMenuChoice as exc:
                logging.debug("invalid menu choice %s", exc.choice)
                print("Error: not an option.", file=stdout)
                continue

            if choice == DEPOSIT:
                _deposit(account, reader, stdout)
            elif choice == WITHDRAW:
                _withdraw(account, reader, stdout)
            elif choice == BALANCE:
                _show_balance(account, stdout)
            else:
                print("Exiting program.", file=stdout)
                break
    except EOFError:
        logging.debug("input closed; ending session")
        print("", file=stdout)
    logging.debug("session end account=%s balance=%s", account.number, account.balance)


def main(argv: list[str] | None = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        try:
            from importlib.metadata import version as _ver

            print(_ver("console-demos"))
        except Exception:
            print("unknown")
        return 0

    run_session(open_default_account(), stdin or sys.stdin, stdout or sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

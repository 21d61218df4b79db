"""
Whitespace-token reader over a line-oriented text stream.

Teaching notes:
- Tokens are read the way a console stream reads them: a line may hold several
  tokens, and tokens left over after a successful read stay buffered for the
  next prompt.
- When a token cannot be parsed the reader resynchronises before raising:
  the bad token and everything after it on the same line are dropped.
"""
from __future__ import annotations

import logging
import re
from collections import deque
from decimal import InvalidOperation
from typing import Callable, Deque, TextIO, TypeVar

T = TypeVar("T")

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


class MalformedInput(ValueError):
    """The input did not hold a value of the expected type."""

    def __init__(self, token: str, expected: str):
        super().__init__(f"expected {expected}, got {token!r}")
        self.token = token
        self.expected = expected


class TokenReader:
    def __init__(self, stream: TextIO):
        self._stream = stream
        self._pending: Deque[str] = deque()

    def next_token(self) -> str:
        """Return the next token, blocking on the stream for a new line if needed.

        Raises EOFError once the stream is exhausted.
        """
        while not self._pending:
            line = self._stream.readline()
            if line == "":
                raise EOFError("end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        if self._pending:
            logging.debug("discarding buffered tokens: %s", list(self._pending))
        self._pending.clear()

    def read(self, parse: Callable[[str], T], expected: str) -> T:
        """Parse the next token with ``parse``; on failure resync and raise MalformedInput."""
        token = self.next_token()
        try:
            return parse(token)
        except (ValueError, InvalidOperation):
            self.discard_line()
            logging.debug("malformed input %r (expected %s)", token, expected)
            raise MalformedInput(token, expected) from None

    def read_int(self) -> int:
        return self.read(_strict_int, "a whole number")

    def read_char(self) -> str:
        """Read a single non-blank character; the rest of its token stays buffered."""
        token = self.next_token()
        if len(token) > 1:
            self._pending.appendleft(token[1:])
        return token[0]


def _strict_int(token: str) -> int:
    # ASCII digits only, no underscores
    if not _INT_TOKEN.fullmatch(token):
        raise ValueError(f"not a whole number: {token!r}")
    return int(token)

"""termio package.

Console input shared by the bank and tic-tac-toe demos.
"""

from .reader import MalformedInput, TokenReader

__all__ = [
    "MalformedInput",
    "TokenReader",
]

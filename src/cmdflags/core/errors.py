from __future__ import annotations

"""Exception hierarchy for cmdflags.

Decode failures and undeclared flags are *not* exceptions: they are logged
and parsing goes on. Exceptions are reserved for precondition violations
(`UnknownFlagError`, `KindMismatchError`), the tokenizer's malformed-stream
signal and a failed top-level `CmdParser.parse`.
"""


class CmdFlagsError(Exception):
    """Base class for all cmdflags errors."""


class UnknownFlagError(CmdFlagsError, KeyError):
    """Raised when a lookup names a flag that was never declared."""

    def __init__(self, name: str, operation: str = 'lookup') -> None:
        self.name = name
        self.operation = operation
        super().__init__(f'CmdParser.{operation} given unrecognized variable name {name}')

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])


class KindMismatchError(CmdFlagsError, TypeError):
    """Raised when a typed getter asks for a kind the flag was not declared with."""


class TokenStreamError(CmdFlagsError, ValueError):
    """Raised when a bare value appears where a flag token was expected."""

    def __init__(self, remainder: str) -> None:
        self.remainder = remainder
        super().__init__(f'formatting problem in command line from {remainder}')


class CmdlineParseError(CmdFlagsError, RuntimeError):
    """Raised by `CmdParser.parse` when the argument stream does not parse."""

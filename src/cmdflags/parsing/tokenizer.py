from __future__ import annotations

"""
FlagTokenizer – split a command string into flag/value pairs.

Rules:
    * Tokens are separated by arbitrary whitespace; there is no quoting.
    * A token starting with '-' is a flag. Exactly one leading '-' is
      removed to form its name, so '--name' becomes '-name'.
    * If a flag is the last token, or the next token is also a flag, its
      value is the literal 'true'.
    * Otherwise the next token is its value.
    * A bare token where a flag is expected stops tokenization with a
      `TokenStreamError` carrying the rest of the stream.
"""

from dataclasses import dataclass
from typing import List, Sequence

from cmdflags.core.errors import TokenStreamError

FLAG_PREFIX = "-"
IMPLICIT_VALUE = "true"


@dataclass(frozen=True)
class FlagValue:
    flag: str
    value: str


class FlagTokenizer:
    @staticmethod
    def split(text: str) -> List[str]:
        return text.split()

    @staticmethod
    def is_flag_token(token: str) -> bool:
        return token.startswith(FLAG_PREFIX)

    @staticmethod
    def pair_tokens(tokens: Sequence[str]) -> List[FlagValue]:
        """Pair each flag token with its value.

        Raises:
            TokenStreamError: a bare value sits where a flag was expected.
                Nothing is returned in that case, so no pair is applied.
        """
        pairs: List[FlagValue] = []
        idx, n = 0, len(tokens)
        while idx < n:
            tok = tokens[idx]
            if not FlagTokenizer.is_flag_token(tok):
                raise TokenStreamError(" ".join(tokens[idx:]))
            name = tok[len(FLAG_PREFIX):]
            if idx == n - 1 or FlagTokenizer.is_flag_token(tokens[idx + 1]):
                pairs.append(FlagValue(flag=name, value=IMPLICIT_VALUE))
                idx += 1
            else:
                pairs.append(FlagValue(flag=name, value=tokens[idx + 1]))
                idx += 2
        return pairs

    @staticmethod
    def tokenize(text: str) -> List[FlagValue]:
        return FlagTokenizer.pair_tokens(FlagTokenizer.split(text))

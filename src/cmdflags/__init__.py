from __future__ import annotations

from cmdflags.core.errors import (
    CmdFlagsError,
    CmdlineParseError,
    KindMismatchError,
    TokenStreamError,
    UnknownFlagError,
)
from cmdflags.core.kinds import ArgKind, kind_label
from cmdflags.parsing.parser import FILE_SWITCH, CmdParser
from cmdflags.parsing.source import FlagSource, read_flag_file, strip_comment
from cmdflags.parsing.tokenizer import FlagTokenizer, FlagValue
from cmdflags.registry import FlagRegistry
from cmdflags.slots import ValueSlot, create_slot

__version__ = '1.0.0'


def new_parser() -> CmdParser:
    """Return an empty CmdParser ready for `add_flag` calls."""
    return CmdParser()


__all__ = [
    'ArgKind',
    'kind_label',
    'CmdParser',
    'new_parser',
    'FILE_SWITCH',
    'FlagRegistry',
    'FlagSource',
    'FlagTokenizer',
    'FlagValue',
    'ValueSlot',
    'create_slot',
    'read_flag_file',
    'strip_comment',
    'CmdFlagsError',
    'CmdlineParseError',
    'KindMismatchError',
    'TokenStreamError',
    'UnknownFlagError',
]

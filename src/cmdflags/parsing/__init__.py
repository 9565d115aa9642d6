from cmdflags.parsing.parser import FILE_SWITCH, CmdParser
from cmdflags.parsing.source import FlagSource, read_flag_file, strip_comment
from cmdflags.parsing.tokenizer import FlagTokenizer, FlagValue

__all__ = [
    'CmdParser',
    'FILE_SWITCH',
    'FlagSource',
    'FlagTokenizer',
    'FlagValue',
    'read_flag_file',
    'strip_comment',
]

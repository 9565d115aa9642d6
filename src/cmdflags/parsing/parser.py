from __future__ import annotations

"""
CmdParser – flag registry plus the parsing entry points.

Typical use::

    cp = CmdParser()
    cp.add_flag(ArgKind.INT, "n", required=True)
    cp.add_flag(ArgKind.BOOL, "verbose")
    cp.parse()                      # sys.argv[1:], or '-is FILE'
    if cp.is_loaded("verbose"):
        ...
    n = cp.get_var("n")

Parsing a command string runs in four steps:

1) tokenize into flag/value pairs (a malformed stream fails here, before
   anything is applied);
2) warn about flags that were never declared, then drop them;
3) apply the declared pairs in input order;
4) fail if a required flag is still not loaded. Values applied in step 3
   are kept even then.

The `parse_from_*` methods report failure by returning False and logging
the reason. `parse` is the fail-fast wrapper for programs: no arguments at
all exits the process, any other failure raises `CmdlineParseError`.
"""

import sys
from pathlib import Path
from typing import List, Optional, Sequence, Union

from cmdflags.core.errors import CmdlineParseError, TokenStreamError
from cmdflags.logging.helpers import get_logger
from cmdflags.parsing.source import FlagSource, read_flag_file
from cmdflags.parsing.tokenizer import FLAG_PREFIX, FlagTokenizer, FlagValue
from cmdflags.registry import FlagRegistry

FILE_SWITCH = "-is"

log = get_logger("parser")


def _dashed(names: Sequence[str]) -> str:
    return ",".join(FLAG_PREFIX + n for n in names)


class CmdParser(FlagRegistry):
    """Declare flags, then parse them from a string, a file or argv."""

    def parse_from_string(self, cmd_string: str, *, src: Optional[FlagSource] = None) -> bool:
        """Parse *cmd_string* into the declared flags.

        Returns:
            True on success; False on a malformed token stream or when a
            required flag is missing afterwards.
        """
        ctx = {"source": (src or FlagSource()).format()}
        try:
            pairs = FlagTokenizer.tokenize(cmd_string)
        except TokenStreamError as exc:
            log.error("%s", exc, extra={"context": ctx})
            return False

        undeclared = [fv.flag for fv in pairs if not self.is_flag(fv.flag)]
        if undeclared:
            log.warning(
                "Flags not declared in CmdParser: %s, ignored", _dashed(undeclared),
                extra={"context": {**ctx, "flags": undeclared}},
            )

        self._apply(pairs)

        missing = self.missing_required()
        if missing:
            log.error(
                "Flags required but missing: %s", _dashed(missing),
                extra={"context": {**ctx, "flags": missing}},
            )
            return False
        return True

    def _apply(self, pairs: List[FlagValue]) -> None:
        for fv in pairs:
            if self.is_flag(fv.flag):
                self.set_var(fv.flag, fv.value)

    def parse_from_cmdline(self, argv: Optional[Sequence[str]] = None) -> bool:
        """Join *argv* (default `sys.argv[1:]`) with single spaces and parse it."""
        args = list(sys.argv[1:] if argv is None else argv)
        return self.parse_from_string(" ".join(args))

    def parse_from_file(self, filename: Union[str, Path]) -> bool:
        """Parse the flags stored in *filename* (see `cmdflags.parsing.source`)."""
        try:
            cmd_string = read_flag_file(filename)
        except (OSError, UnicodeDecodeError) as exc:
            log.error("Cannot open command line file %s: %s", filename, exc)
            return False
        return self.parse_from_string(cmd_string, src=FlagSource(path=Path(filename)))

    def parse(self, argv: Optional[Sequence[str]] = None) -> bool:
        """Parse the program's arguments, reading them from a file after '-is'.

        Args:
            argv: Arguments without the program name; `sys.argv[1:]` if None.

        Raises:
            SystemExit: no arguments were given, or '-is' has no file name.
            CmdlineParseError: the arguments did not parse.
        """
        args = list(sys.argv[1:] if argv is None else argv)
        if not args:
            log.error("call requires command line arguments")
            sys.exit(1)

        if args[0] == FILE_SWITCH:
            if len(args) < 2:
                log.error("missing FILE after %s", FILE_SWITCH)
                sys.exit(1)
            parsed_ok = self.parse_from_file(args[1])
        else:
            parsed_ok = self.parse_from_cmdline(args)

        if not parsed_ok:
            raise CmdlineParseError("Command line parsing error")
        return True

from __future__ import annotations
"""Flag-file reading and source labels.

A flag file is plain text holding the same tokens one would type on the
command line, spread over any number of lines:

    # run settings
    -n 5          # iterations
    -s hello

`#` starts a comment that runs to the end of the line and blank lines are
skipped. Whatever survives is joined with single spaces into one command
string, so a flag and its value may even sit on different lines.

`FlagSource` only labels diagnostics (file, line); it never changes the
token stream.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from cmdflags.logging.helpers import get_logger, trace_io

COMMENT_CHAR = "#"
_BLANK_CHARS = (" ", "\t")

log = get_logger("source")


@dataclass(frozen=True)
class FlagSource:
    """Origin of a command string.

    Attributes:
        path: Flag file the text was read from, None for process arguments.
        line: 1-based line number in the file.
    """
    path: Optional[Path] = None
    line: Optional[int] = None

    def format(self) -> str:
        """Return a human-readable source label."""
        parts: list[str] = []
        if self.path:
            parts.append(str(self.path))
        if self.line is not None:
            parts.append(f"line {self.line}")
        return ":".join(parts) if parts else "<cli>"

    def with_line(self, line: int) -> "FlagSource":
        return FlagSource(path=self.path, line=line)


def strip_comment(line: str) -> str:
    """Return *line* without its trailing newline and `#` comment.

    A line whose `#` is preceded only by spaces or tabs is blank. Other
    whitespace before the `#` does not count as blank.
    """
    line = line.rstrip("\r\n")
    idx = line.find(COMMENT_CHAR)
    if idx < 0:
        return line
    leading = len(line) - len(line.lstrip("".join(_BLANK_CHARS)))
    if leading >= idx:
        return ""
    return line[:idx]


def join_flag_lines(lines: Iterable[str], src: Optional[FlagSource] = None) -> str:
    """Strip comments from *lines* and join the survivors with single spaces."""
    origin = src or FlagSource()
    kept: List[str] = []
    for lno, raw in enumerate(lines, start=1):
        if raw in ("", "\n", "\r\n"):
            continue
        text = strip_comment(raw)
        if text:
            trace_io(log, "flag file line kept", source=origin.with_line(lno).format(), text=text)
            kept.append(text)
    return " ".join(kept)


def read_flag_file(path: Union[str, Path]) -> str:
    """Read the flag file at *path* and return its aggregate command string.

    Raises:
        OSError: the file cannot be opened or read.
        UnicodeDecodeError: the file is not valid UTF-8.
    """
    fpath = Path(path)
    trace_io(log, "reading flag file", path=str(fpath))
    with fpath.open("r", encoding="utf-8") as fp:
        return join_flag_lines(fp, src=FlagSource(path=fpath))

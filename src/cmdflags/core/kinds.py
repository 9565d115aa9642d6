from __future__ import annotations

"""Scalar kinds a declared flag can hold.

`ArgKind.NONE` is the sentinel for "no kind"; the registry never creates a
slot for it.
"""

from enum import Enum
from typing import Any, Dict


class ArgKind(Enum):
    INT = 'int'
    INT64 = 'int64'
    FLOAT = 'float'
    STRING = 'string'
    BOOL = 'bool'
    NONE = 'none'


_LABELS: Dict[ArgKind, str] = {
    ArgKind.INT: 'IntFlag',
    ArgKind.INT64: 'Int64Flag',
    ArgKind.FLOAT: 'FloatFlag',
    ArgKind.STRING: 'StringFlag',
    ArgKind.BOOL: 'BoolFlag',
}

# Spellings accepted by `kind_from_name`, e.g. in `--declare n:int`.
_ALIASES: Dict[str, ArgKind] = {
    'int': ArgKind.INT,
    'int64': ArgKind.INT64,
    'float': ArgKind.FLOAT,
    'string': ArgKind.STRING,
    'str': ArgKind.STRING,
    'bool': ArgKind.BOOL,
}


def kind_label(kind: Any) -> str:
    """Return the display label of *kind* ('None' for anything unknown)."""
    return _LABELS.get(kind, 'None') if isinstance(kind, ArgKind) else 'None'


def kind_from_name(name: str) -> ArgKind:
    """Map a short kind name to its ArgKind, `ArgKind.NONE` when unknown."""
    return _ALIASES.get((name or '').strip().lower(), ArgKind.NONE)

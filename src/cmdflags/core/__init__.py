from __future__ import annotations

"""Public surface for cmdflags.core.

Kinds, errors and protocol types live here so that downstream code has a
single, stable import location:

    from cmdflags.core import ArgKind, UnknownFlagError, SlotProtocol
"""

from cmdflags.core.errors import (
    CmdFlagsError,
    CmdlineParseError,
    KindMismatchError,
    TokenStreamError,
    UnknownFlagError,
)
from cmdflags.core.interfaces import (
    SlotProtocol,
)
from cmdflags.core.kinds import ArgKind, kind_from_name, kind_label

__all__ = [
    # Kinds
    "ArgKind",
    "kind_label",
    "kind_from_name",
    # Errors
    "CmdFlagsError",
    "CmdlineParseError",
    "KindMismatchError",
    "TokenStreamError",
    "UnknownFlagError",
    # Protocols
    "SlotProtocol",
]

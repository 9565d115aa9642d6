from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from cmdflags.core.kinds import ArgKind


@runtime_checkable
class SlotProtocol(Protocol):
    """Capability set shared by the typed value slots of every kind.

    The registry stores slots only through this surface, so an int slot and
    a bool slot are interchangeable from its point of view.
    """

    @property
    def kind(self) -> ArgKind: ...

    @property
    def name(self) -> str: ...

    @property
    def required(self) -> bool: ...

    @property
    def loaded(self) -> bool: ...

    def set(self, raw: str) -> bool:
        """Decode *raw* and store it; return False if the decode failed."""
        ...

    def get(self) -> Any:
        """Return the stored value in its native type."""
        ...

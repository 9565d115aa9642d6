from __future__ import annotations

"""Name-keyed registry of typed value slots."""

from typing import Any, Dict, List

from cmdflags.core.errors import KindMismatchError, UnknownFlagError
from cmdflags.core.interfaces.slot import SlotProtocol
from cmdflags.core.kinds import ArgKind, kind_label
from cmdflags.logging.helpers import get_logger
from cmdflags.slots import create_slot

log = get_logger("registry")


class FlagRegistry:
    """Owns one slot per declared flag name.

    Slots never leave the registry through the public accessors: callers
    work with a registry and a name. `set_var` and `get_var` treat an
    unregistered name as a programming error and raise `UnknownFlagError`;
    the `is_*` queries answer False instead.
    """

    def __init__(self) -> None:
        self._vars: Dict[str, SlotProtocol] = {}

    def add_flag(self, kind: ArgKind, name: str, required: bool = False) -> None:
        """Declare flag *name* of the given *kind*.

        Re-declaring a name replaces the previous slot. Unknown kinds are
        ignored and no slot is created.
        """
        slot = create_slot(kind, name, required)
        if slot is None:
            log.debug("ignoring flag -%s with unknown kind %r", name, kind)
            return
        self._vars[name] = slot

    def set_var(self, name: str, value: str) -> bool:
        """Feed the raw token *value* to the slot of *name*."""
        try:
            slot = self._vars[name]
        except KeyError:
            raise UnknownFlagError(name, "SetVar") from None
        return slot.set(value)

    def get_var(self, name: str) -> Any:
        """Return the decoded value of *name*.

        Call `is_loaded` first to tell "never set" from a zero value.
        """
        try:
            slot = self._vars[name]
        except KeyError:
            raise UnknownFlagError(name, "GetVar") from None
        return slot.get()

    def get_typed(self, name: str, kind: ArgKind) -> Any:
        """Like `get_var`, but insist that *name* was declared as *kind*."""
        actual = self.kind_of(name)
        if actual is ArgKind.NONE:
            raise UnknownFlagError(name, "GetVar")
        if actual is not kind:
            raise KindMismatchError(
                f"flag -{name} is a {kind_label(actual)}, not a {kind_label(kind)}"
            )
        return self._vars[name].get()

    def get_int(self, name: str) -> int:
        return self.get_typed(name, ArgKind.INT)

    def get_int64(self, name: str) -> int:
        return self.get_typed(name, ArgKind.INT64)

    def get_float(self, name: str) -> float:
        return self.get_typed(name, ArgKind.FLOAT)

    def get_string(self, name: str) -> str:
        return self.get_typed(name, ArgKind.STRING)

    def get_bool(self, name: str) -> bool:
        return self.get_typed(name, ArgKind.BOOL)

    def is_flag(self, name: str) -> bool:
        return name in self._vars

    def is_loaded(self, name: str) -> bool:
        slot = self._vars.get(name)
        return slot.loaded if slot is not None else False

    def is_required(self, name: str) -> bool:
        slot = self._vars.get(name)
        return slot.required if slot is not None else False

    def kind_of(self, name: str) -> ArgKind:
        slot = self._vars.get(name)
        return slot.kind if slot is not None else ArgKind.NONE

    def names(self) -> List[str]:
        """Declared names, in declaration order."""
        return list(self._vars)

    def missing_required(self) -> List[str]:
        """Names that are required but have not been loaded yet."""
        return [name for name, slot in self._vars.items() if slot.required and not slot.loaded]

    def values(self, *, loaded_only: bool = False) -> Dict[str, Any]:
        """Snapshot of name -> current value."""
        return {
            name: slot.get()
            for name, slot in self._vars.items()
            if slot.loaded or not loaded_only
        }

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)

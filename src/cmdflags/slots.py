from __future__ import annotations

"""
slots – Typed value slots backing declared flags.

One generic `ValueSlot` covers every scalar kind: the kind only selects a
decoder (raw token -> native value) and a zero value. The decoders raise
`ValueError` on bad input; `ValueSlot.set` turns that into a logged warning
and leaves the slot untouched, so a bad integer on the command line never
aborts parsing by itself.

Decoding rules
--------------
• INT / INT64: base-10 signed integer, optional sign, digits only, must fit
  in a signed 64-bit range.
• FLOAT: ASCII base-10 float; 'inf'/'nan' spellings are accepted, underscores
  and hex floats are not, and a finite literal that overflows to infinity
  is rejected.
• STRING: stored verbatim.
• BOOL: exactly 'T', 't', 'True' or 'true' mean True; anything else is False.
"""

import math
import re
from typing import Callable, Dict, Generic, Optional, Tuple, TypeVar

from cmdflags.core.kinds import ArgKind, kind_label
from cmdflags.logging.helpers import get_logger

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1
_TRUE_LITERALS = frozenset({"T", "t", "True", "true"})

log = get_logger("slots")


def decode_int(raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"invalid integer syntax: {raw!r}")
    value = int(raw, 10)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {raw!r}")
    return value


def decode_float(raw: str) -> float:
    if not raw.isascii() or "_" in raw or raw != raw.strip():
        raise ValueError(f"invalid float syntax: {raw!r}")
    value = float(raw)
    if math.isinf(value) and "inf" not in raw.lower():
        raise ValueError(f"float out of range: {raw!r}")
    return value


def decode_string(raw: str) -> str:
    return raw


def decode_bool(raw: str) -> bool:
    return raw in _TRUE_LITERALS


class ValueSlot(Generic[T]):
    """Storage cell for one declared flag.

    Args:
        kind: Scalar kind; fixed for the lifetime of the slot.
        name: Flag name without the leading '-'.
        required: Whether a successful parse must load this flag.
        decoder: Callable turning a raw token into the native value.
        zero: Value reported until something is loaded.
    """

    __slots__ = ("_kind", "_name", "_required", "_loaded", "_value", "_decoder")

    def __init__(
        self,
        kind: ArgKind,
        name: str,
        required: bool,
        decoder: Callable[[str], T],
        zero: T,
    ) -> None:
        self._kind = kind
        self._name = name
        self._required = bool(required)
        self._loaded = False
        self._value: T = zero
        self._decoder = decoder

    @property
    def kind(self) -> ArgKind:
        return self._kind

    @property
    def name(self) -> str:
        return self._name

    @property
    def required(self) -> bool:
        return self._required

    @property
    def loaded(self) -> bool:
        return self._loaded

    def set(self, raw: str) -> bool:
        """Decode *raw* and store it.

        Returns:
            True when the value was stored; False when decoding failed, in
            which case the previous value and load state are kept.
        """
        try:
            value = self._decoder(raw)
        except ValueError as exc:
            log.warning("Error setting %s variable -%s: %s", kind_label(self._kind), self._name, exc)
            return False
        self._value = value
        self._loaded = True
        return True

    def get(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return (
            f"ValueSlot(kind={self._kind.name}, name={self._name!r}, "
            f"required={self._required}, loaded={self._loaded}, value={self._value!r})"
        )


_SLOT_TYPES: Dict[ArgKind, Tuple[Callable[[str], object], object]] = {
    ArgKind.INT: (decode_int, 0),
    ArgKind.INT64: (decode_int, 0),
    ArgKind.FLOAT: (decode_float, 0.0),
    ArgKind.STRING: (decode_string, ""),
    ArgKind.BOOL: (decode_bool, False),
}


def create_slot(kind: ArgKind, name: str, required: bool = False) -> Optional[ValueSlot]:
    """Build an empty slot for *kind*, or return None if the kind is unknown."""
    try:
        decoder, zero = _SLOT_TYPES[kind]
    except (KeyError, TypeError):
        return None
    return ValueSlot(kind, name, required, decoder, zero)

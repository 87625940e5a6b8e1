"""Runtime values of the interpreter, one family per rank."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .errors import ValueKindUnexpected

VALUE_INT_BITS = 64
VALUE_INT_MAX = (1 << VALUE_INT_BITS) - 1

UNIT_KIND = "    unit"
UNBOUND_KIND = " unbound"
BOOL_KIND = "    bool"
INT_KIND = "     int"
FUN_KIND = "     fun"


class ValueKind(Enum):
    """The kinds of value, each carrying its descriptor text."""

    UNIT = UNIT_KIND
    UNBOUND = UNBOUND_KIND
    BOOL = BOOL_KIND
    INTEGRAL = INT_KIND
    FUN = FUN_KIND


@dataclass(frozen=True)
class ValueFun:
    """A reference to a callable function."""

    id: int


@dataclass(frozen=True)
class Value:
    """A runtime value: unit, unbound, boolean, unsigned 64-bit integer or function."""

    kind: ValueKind
    payload: object = None

    def __post_init__(self) -> None:
        kind, payload = self.kind, self.payload
        if kind in (ValueKind.UNIT, ValueKind.UNBOUND):
            if payload is not None:
                raise ValueError(f"{kind.name.lower()} value carries no payload")
        elif kind is ValueKind.BOOL:
            if not isinstance(payload, bool):
                raise TypeError("boolean value needs a bool payload")
        elif kind is ValueKind.INTEGRAL:
            if isinstance(payload, bool) or not isinstance(payload, int):
                raise TypeError("integral value needs an int payload")
            if not 0 <= payload <= VALUE_INT_MAX:
                raise ValueError(f"integral value out of range: {payload}")
        elif kind is ValueKind.FUN:
            if not isinstance(payload, ValueFun):
                raise TypeError("function value needs a ValueFun payload")

    @classmethod
    def unit(cls) -> "Value":
        return cls(ValueKind.UNIT)

    @classmethod
    def unbound(cls) -> "Value":
        return cls(ValueKind.UNBOUND)

    @classmethod
    def boolean(cls, value: bool) -> "Value":
        return cls(ValueKind.BOOL, value)

    @classmethod
    def integral(cls, value: int) -> "Value":
        return cls(ValueKind.INTEGRAL, value)

    @classmethod
    def make_fun(cls, fun: ValueFun) -> "Value":
        return cls(ValueKind.FUN, fun)

    @classmethod
    def make_dummy(cls) -> "Value":
        return cls.unit()

    def descriptor(self) -> str:
        """Return the fixed-width text describing this value's kind."""
        return self.kind.value

    def conditional(self) -> Optional[bool]:
        """Return the boolean held, or None when this is not a boolean."""
        return self.payload if self.kind is ValueKind.BOOL else None

    def fun(self) -> Optional[ValueFun]:
        """Return the function held, or None when this is not a function."""
        return self.payload if self.kind is ValueKind.FUN else None

    def structure(self) -> Optional[Tuple[int, tuple]]:
        """Values of this family have no structures."""
        return None

    def index(self, index: int) -> Optional["Value"]:
        """Values of this family cannot be indexed."""
        return None

    def int(self) -> int:
        """Return the integer held, raising if this is not an integer."""
        if self.kind is ValueKind.INTEGRAL:
            return self.payload  # type: ignore[return-value]
        raise ValueKindUnexpected(INT_KIND, self.descriptor())


class GeneralValue(Value):
    """Value used by the general rank."""


class BrigadierValue(Value):
    """Value used by the brigadier rank."""


class MajorValue(Value):
    """Value used by the major rank."""


class CorporalValue(Value):
    """Value used by the corporal rank."""
"""Native functions and literals available to programs of each rank."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Type

from .errors import CompilationError, ExecutionError, LiteralNotSupported, UserPanic
from .value import (
    VALUE_INT_MAX,
    BrigadierValue,
    CorporalValue,
    GeneralValue,
    MajorValue,
    Value,
)

_DECIMAL_DIGITS = re.compile(r"\+?[0-9]+")

UNBOUND_ARGS_MESSAGE = "`nil' function does not need any arguments"


@dataclass(frozen=True)
class Span:
    """A range of positions in the program text."""

    start: int
    end: int


class LiteralKind(Enum):
    """The kinds of literal the parser produces."""

    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    DECIMAL = "decimal"
    BYTES = "bytes"


@dataclass(frozen=True)
class CoreLiteral:
    """A literal as written in the program, before the environment maps it."""

    kind: LiteralKind
    text: str | bytes


@dataclass(frozen=True)
class Nif:
    """A native function callable from programs.

    A raw function receives the arguments as given and checks them itself;
    any other function is called only with exactly ``arity`` arguments.
    """

    name: str
    arity: int
    func: Callable[[Sequence[Value]], Value] = field(compare=False)
    raw: bool = False

    def call(self, args: Sequence[Value]) -> Value:
        """Run the function on ``args`` and return its result."""
        if not self.raw and len(args) != self.arity:
            raise ExecutionError(
                f"function {self.name!r} expects {self.arity} argument(s), got {len(args)}"
            )
        return self.func(args)


class Environment:
    """The native functions known to a program, keyed by path."""

    def __init__(self, value_type: Type[Value] = Value) -> None:
        self.value_type = value_type
        self._nifs: Dict[str, Nif] = {}

    def add_nif(self, path: str, nif: Nif) -> None:
        """Register ``nif`` under ``path``; a path may be bound only once."""
        if path in self._nifs:
            raise CompilationError(f"duplicate symbol: {path!r}")
        self._nifs[path] = nif

    def get(self, path: str) -> Optional[Nif]:
        """Return the function bound to ``path``, or None."""
        return self._nifs.get(path)

    def names(self) -> List[str]:
        """Return the bound paths in the order they were added."""
        return list(self._nifs)

    def __contains__(self, path: object) -> bool:
        return path in self._nifs

    def __iter__(self) -> Iterator[str]:
        return iter(self._nifs)

    def __len__(self) -> int:
        return len(self._nifs)


@dataclass(frozen=True)
class RankLiteral:
    """A literal the environment supports: a boolean or an unsigned 64-bit integer."""

    value: bool | int

    value_type = Value

    def __post_init__(self) -> None:
        if isinstance(self.value, bool):
            return
        if not isinstance(self.value, int):
            raise TypeError("literal must hold a bool or an int")
        if not 0 <= self.value <= VALUE_INT_MAX:
            raise ValueError(f"integer literal out of range: {self.value}")

    @property
    def is_bool(self) -> bool:
        return isinstance(self.value, bool)

    def to_value(self) -> Value:
        """Turn the literal into a runtime value of this rank."""
        if self.is_bool:
            return self.value_type.boolean(self.value)  # type: ignore[arg-type]
        return self.value_type.integral(self.value)  # type: ignore[arg-type]


class GeneralLiteral(RankLiteral):
    """Literal of the general rank."""

    value_type = GeneralValue


class BrigadierLiteral(RankLiteral):
    """Literal of the brigadier rank."""

    value_type = BrigadierValue


class MajorLiteral(RankLiteral):
    """Literal of the major rank."""

    value_type = MajorValue


class CorporalLiteral(RankLiteral):
    """Literal of the corporal rank."""

    value_type = CorporalValue


def _map_literal(literal_type: Type[RankLiteral], span: Span, lit: CoreLiteral) -> RankLiteral:
    if lit.kind is LiteralKind.BOOL:
        return literal_type(lit.text == "true")
    if lit.kind is LiteralKind.NUMBER:
        text = lit.text
        if not isinstance(text, str) or not _DECIMAL_DIGITS.fullmatch(text):
            raise CompilationError(f"invalid number literal at {span!r}: {text!r}")
        number = int(text, 10)
        if number > VALUE_INT_MAX:
            raise CompilationError(f"number literal out of range at {span!r}: {text!r}")
        return literal_type(number)
    raise LiteralNotSupported(span, lit)


def _checked(value_type: Type[Value], result: int, operation: str) -> Value:
    if not 0 <= result <= VALUE_INT_MAX:
        raise UserPanic(f"attempt to {operation} with overflow")
    return value_type.integral(result)


def _create_env(value_type: Type[Value]) -> Environment:
    def nif_unbound(args: Sequence[Value]) -> Value:
        if args:
            raise UserPanic(UNBOUND_ARGS_MESSAGE)
        return value_type.unbound()

    def nif_plus(args: Sequence[Value]) -> Value:
        return _checked(value_type, args[0].int() + args[1].int(), "add")

    def nif_sub(args: Sequence[Value]) -> Value:
        return _checked(value_type, args[0].int() - args[1].int(), "subtract")

    def nif_mul(args: Sequence[Value]) -> Value:
        return _checked(value_type, args[0].int() * args[1].int(), "multiply")

    def nif_eq(args: Sequence[Value]) -> Value:
        return value_type.boolean(args[0].int() == args[1].int())

    def nif_le(args: Sequence[Value]) -> Value:
        return value_type.boolean(args[0].int() <= args[1].int())

    def nif_neg(args: Sequence[Value]) -> Value:
        return value_type.integral(args[0].int() ^ VALUE_INT_MAX)

    env = Environment(value_type)
    env.add_nif("unbound", Nif("unbound", 0, nif_unbound, raw=True))
    for name, arity, func in (
        ("+", 2, nif_plus),
        ("-", 2, nif_sub),
        ("*", 2, nif_mul),
        ("==", 2, nif_eq),
        ("<=", 2, nif_le),
        ("neg", 1, nif_neg),
    ):
        env.add_nif(name, Nif(name, arity, func))
    return env


def general_literal_mapper(span: Span, lit: CoreLiteral) -> GeneralLiteral:
    """Map a parsed literal to a general literal."""
    return _map_literal(GeneralLiteral, span, lit)  # type: ignore[return-value]


def general_literal_to_value(lit: GeneralLiteral) -> GeneralValue:
    """Turn a general literal into a general value."""
    return lit.to_value()  # type: ignore[return-value]


def create_general_env() -> Environment:
    """Build the native environment of the general rank."""
    return _create_env(GeneralValue)


def brigadier_literal_mapper(span: Span, lit: CoreLiteral) -> BrigadierLiteral:
    """Map a parsed literal to a brigadier literal."""
    return _map_literal(BrigadierLiteral, span, lit)  # type: ignore[return-value]


def brigadier_literal_to_value(lit: BrigadierLiteral) -> BrigadierValue:
    """Turn a brigadier literal into a brigadier value."""
    return lit.to_value()  # type: ignore[return-value]


def create_brigadier_env() -> Environment:
    """Build the native environment of the brigadier rank."""
    return _create_env(BrigadierValue)


def major_literal_mapper(span: Span, lit: CoreLiteral) -> MajorLiteral:
    """Map a parsed literal to a major literal."""
    return _map_literal(MajorLiteral, span, lit)  # type: ignore[return-value]


def major_literal_to_value(lit: MajorLiteral) -> MajorValue:
    """Turn a major literal into a major value."""
    return lit.to_value()  # type: ignore[return-value]


def create_major_env() -> Environment:
    """Build the native environment of the major rank."""
    return _create_env(MajorValue)


def corporal_literal_mapper(span: Span, lit: CoreLiteral) -> CorporalLiteral:
    """Map a parsed literal to a corporal literal."""
    return _map_literal(CorporalLiteral, span, lit)  # type: ignore[return-value]


def corporal_literal_to_value(lit: CorporalLiteral) -> CorporalValue:
    """Turn a corporal literal into a corporal value."""
    return lit.to_value()  # type: ignore[return-value]


def create_corporal_env() -> Environment:
    """Build the native environment of the corporal rank."""
    return _create_env(CorporalValue)
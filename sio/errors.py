"""Errors raised while compiling and running programs."""

from __future__ import annotations

from typing import Any


class ExecutionError(Exception):
    """Base class of every error raised while a program runs."""


class ValueKindUnexpected(ExecutionError):
    """A value of one kind was found where another kind was required."""

    def __init__(self, value_expected: str, value_got: str) -> None:
        self.value_expected = value_expected
        self.value_got = value_got
        super().__init__(
            f"unexpected value kind: expected {value_expected.strip()!r}, "
            f"got {value_got.strip()!r}"
        )


class UserPanic(ExecutionError):
    """A native function aborted execution with a message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CompilationError(Exception):
    """Base class of every error raised while a program is compiled."""


class LiteralNotSupported(CompilationError):
    """A literal of a kind the environment cannot represent was used."""

    def __init__(self, span: Any, literal: Any) -> None:
        self.span = span
        self.literal = literal
        super().__init__(f"literal not supported at {span!r}: {literal!r}")
"""
Failure values — the exception types that travel through the must/try bridge.

A failure value is any Exception instance: its display form is str(exc) and
its cause is reachable through unwrap() (when defined) or __cause__.

    ┌──────────────┐  must_e(…, "ctx")   ┌──────────────────────────┐  abort hook   ┌────────────────┐
    │ KeyError('x')│────────────────────→│ WrappedFailure(ctx: 'x') │──────────────→│ Abort(payload) │
    └──────────────┘                     └──────────────────────────┘               └────────────────┘
           ↑                                         │ unwrap()                             │ unwrap()
           └─────────────────────────────────────────┴──────────────────────────────────────┘

errors_as() walks that chain, so the original KeyError is still found
after it has been wrapped and aborted.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

E = TypeVar("E", bound=BaseException)


class ContractViolation(TypeError):
    """
    A caller programming error: wrong indicator shape, unusable message
    template, or a computation returning the wrong number of values.

    Never intercepted by a try boundary.
    """


class ValidationFailure(Exception):
    """Failure value produced by the default failure formatter."""


class WrappedFailure(Exception):
    """
    A failure decorated with a prefix message.

    Keeps the original failure reachable through unwrap() and __cause__
    so chain inspection still finds its concrete type.

    >>> inner = KeyError("user")
    >>> str(WrappedFailure(ValueError("boom"), "loading user"))
    'loading user: boom'
    >>> WrappedFailure(inner, "ctx").unwrap() is inner
    True
    """

    def __init__(self, base: BaseException, attach: str = "") -> None:
        if base is None:
            raise TypeError("WrappedFailure base must not be None")
        super().__init__(base, attach)
        self.base = base
        self.attach = attach
        self.__cause__ = base

    def unwrap(self) -> BaseException:
        return self.base

    def __str__(self) -> str:
        if self.attach != "":
            return f"{self.attach}: {self.base}"
        return str(self.base)

    def __repr__(self) -> str:
        return f"WrappedFailure({self.base!r}, attach={self.attach!r})"


class Abort(Exception):
    """
    Raised by the default abort hook.

    Carries whatever payload the must family handed over: a plain message
    string, or a WrappedFailure.
    """

    def __init__(self, payload: Any) -> None:
        super().__init__(payload)
        self.payload = payload
        if isinstance(payload, BaseException):
            self.__cause__ = payload

    def unwrap(self) -> Optional[BaseException]:
        if isinstance(self.payload, BaseException):
            return self.payload
        return None

    def __str__(self) -> str:
        return str(self.payload)

    def __repr__(self) -> str:
        return f"Abort({self.payload!r})"


def _unwrap_once(err: BaseException) -> Optional[BaseException]:
    unwrap = getattr(err, "unwrap", None)
    if callable(unwrap):
        return unwrap()
    return err.__cause__


def errors_as(err: Optional[BaseException], target: type[E]) -> tuple[Optional[E], bool]:
    """
    Find the first failure in err's chain that is an instance of target.

    The chain starts at err itself and follows unwrap() where a failure
    defines it, __cause__ otherwise.

        found, ok = errors_as(abort, KeyError)
    """
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        if isinstance(current, target):
            return current, True
        seen.add(id(current))
        current = _unwrap_once(current)
    return None, False

"""
Must family — unwrap-or-abort for fallible calls.

Each mustN takes the N values a fallible call produced, then its failure
indicator, then optional message arguments:

    config = must(load_config(path), err, "loading %s", path)
    host, port = must2(*split_address(raw), "bad address")

On success the values come back untouched. On failure the abort hook fires:

    indicator            abort payload
    ─────────────────    ────────────────────────────────────────────
    False                composed message, or "not ok" when empty
    exception err        "message: err", or str(err) when no message
    anything else        ContractViolation (caller bug, not an abort)

must_eN accepts only exception indicators and hands the abort hook a
WrappedFailure instead of a flattened string, so the original exception
stays reachable through errors_as().

Every variant accepts a keyword-only hooks= to override the process-wide
Hooks for that call.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar, Union

from abortable.config import effective_settings
from abortable.failure import ContractViolation, WrappedFailure
from abortable.hooks import Hooks, resolve
from abortable.messages import compose_message

T = TypeVar("T")
T1 = TypeVar("T1")
T2 = TypeVar("T2")
T3 = TypeVar("T3")
T4 = TypeVar("T4")
T5 = TypeVar("T5")
T6 = TypeVar("T6")

Indicator = Union[bool, BaseException, None]


def _check(err: Any, message_args: tuple[Any, ...], hooks: Optional[Hooks]) -> None:
    if err is None:
        return

    if isinstance(err, bool):
        if not err:
            message = compose_message(*message_args) or effective_settings().not_ok_message
            resolve(hooks).abort(message)
        return

    if isinstance(err, BaseException):
        message = compose_message(*message_args)
        resolve(hooks).abort(f"{message}: {err}" if message else str(err))
        return

    raise ContractViolation(
        f"must: invalid err type '{type(err).__name__}', should either be a bool or an error"
    )


def _check_error(err: Any, message_args: tuple[Any, ...], hooks: Optional[Hooks]) -> None:
    if err is None:
        return

    if not isinstance(err, BaseException):
        raise ContractViolation(
            f"must_e: invalid err type '{type(err).__name__}', should be an error"
        )
    resolve(hooks).abort(WrappedFailure(err, compose_message(*message_args)))


# ──────────────────────── Bool or exception indicator ────────────────────────


def must0(err: Indicator, *message_args: Any, hooks: Optional[Hooks] = None) -> None:
    """Abort if err is False or an exception."""
    _check(err, message_args, hooks)


def must(value: T, err: Indicator, *message_args: Any, hooks: Optional[Hooks] = None) -> T:
    """
    Return value, or abort if err is False or an exception.

        user = must(*find_user(user_id), "user %s", user_id)
    """
    _check(err, message_args, hooks)
    return value


must1 = must


def must2(
    v1: T1, v2: T2, err: Indicator, *message_args: Any, hooks: Optional[Hooks] = None
) -> tuple[T1, T2]:
    _check(err, message_args, hooks)
    return v1, v2


def must3(
    v1: T1, v2: T2, v3: T3, err: Indicator, *message_args: Any, hooks: Optional[Hooks] = None
) -> tuple[T1, T2, T3]:
    _check(err, message_args, hooks)
    return v1, v2, v3


def must4(
    v1: T1, v2: T2, v3: T3, v4: T4, err: Indicator,
    *message_args: Any, hooks: Optional[Hooks] = None,
) -> tuple[T1, T2, T3, T4]:
    _check(err, message_args, hooks)
    return v1, v2, v3, v4


def must5(
    v1: T1, v2: T2, v3: T3, v4: T4, v5: T5, err: Indicator,
    *message_args: Any, hooks: Optional[Hooks] = None,
) -> tuple[T1, T2, T3, T4, T5]:
    _check(err, message_args, hooks)
    return v1, v2, v3, v4, v5


def must6(
    v1: T1, v2: T2, v3: T3, v4: T4, v5: T5, v6: T6, err: Indicator,
    *message_args: Any, hooks: Optional[Hooks] = None,
) -> tuple[T1, T2, T3, T4, T5, T6]:
    _check(err, message_args, hooks)
    return v1, v2, v3, v4, v5, v6


# ──────────────────────── Exception indicator, wrapped payload ────────────────────────


def must_e0(err: Optional[BaseException], *message_args: Any, hooks: Optional[Hooks] = None) -> None:
    """Abort with WrappedFailure(err, message) if err is an exception."""
    _check_error(err, message_args, hooks)


def must_e(value: T, err: Optional[BaseException], *message_args: Any, hooks: Optional[Hooks] = None) -> T:
    """
    Return value, or abort with a WrappedFailure around err.

        try:
            must_e(None, KeyError("id"), "decoding order")
        except Abort as abort:
            errors_as(abort, KeyError)  # → (KeyError('id'), True)
    """
    _check_error(err, message_args, hooks)
    return value


must_e1 = must_e


def must_e2(
    v1: T1, v2: T2, err: Optional[BaseException], *message_args: Any, hooks: Optional[Hooks] = None
) -> tuple[T1, T2]:
    _check_error(err, message_args, hooks)
    return v1, v2


def must_e3(
    v1: T1, v2: T2, v3: T3, err: Optional[BaseException],
    *message_args: Any, hooks: Optional[Hooks] = None,
) -> tuple[T1, T2, T3]:
    _check_error(err, message_args, hooks)
    return v1, v2, v3


def must_e4(
    v1: T1, v2: T2, v3: T3, v4: T4, err: Optional[BaseException],
    *message_args: Any, hooks: Optional[Hooks] = None,
) -> tuple[T1, T2, T3, T4]:
    _check_error(err, message_args, hooks)
    return v1, v2, v3, v4


def must_e5(
    v1: T1, v2: T2, v3: T3, v4: T4, v5: T5, err: Optional[BaseException],
    *message_args: Any, hooks: Optional[Hooks] = None,
) -> tuple[T1, T2, T3, T4, T5]:
    _check_error(err, message_args, hooks)
    return v1, v2, v3, v4, v5


def must_e6(
    v1: T1, v2: T2, v3: T3, v4: T4, v5: T5, v6: T6, err: Optional[BaseException],
    *message_args: Any, hooks: Optional[Hooks] = None,
) -> tuple[T1, T2, T3, T4, T5, T6]:
    _check_error(err, message_args, hooks)
    return v1, v2, v3, v4, v5, v6

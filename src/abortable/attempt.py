"""
Try family — interception boundaries that turn aborts into booleans.

A boundary runs a computation and reports whether it succeeded. It fails
when the computation returns a non-None failure value, or when any
Exception escapes it: an Abort raised through a must call, whatever a
custom abort hook raises, or an ordinary error.

    ok = try_(lambda: save(order))
    port, ok = try_or(lambda: parse_port(raw), 8080)
    try_catch_with_error_value(sync, lambda failure: report(failure))

Computations return their values followed by the failure slot:

    try0      callback() → anything (ignored)
    try_      callback() → err
    tryN      callback() → (v1, …, v(N-1), err)      N = 2..6
    try_orN   callback() → (v1, …, vN, err)          N = 1..6

Boundaries nest: each one catches only what is raised inside its own
call. ContractViolation, KeyboardInterrupt and SystemExit always
propagate.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from abortable.failure import Abort, ContractViolation
from abortable.log import is_tracing, trace

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")
F = TypeVar("F")

_LOGGER = "abortable.attempt"


def _intercept(run: Callable[[], Any]) -> tuple[Any, bool]:
    """Call run() inside a boundary. Returns (failure payload, ok)."""
    try:
        err = run()
    except ContractViolation:
        raise
    except Exception as e:
        payload = e.payload if isinstance(e, Abort) else e
        if is_tracing():
            trace(_LOGGER, "try.recovered", error=str(e), error_type=type(e).__name__)
        return payload, False

    if err is not None:
        return err, False
    return None, True


def _split(outcome: Any, size: int) -> tuple[tuple[Any, ...], Any]:
    """Split a computation's tuple into its values and its failure slot."""
    if not isinstance(outcome, tuple) or len(outcome) != size:
        got = f"{len(outcome)}-tuple" if isinstance(outcome, tuple) else type(outcome).__name__
        raise ContractViolation(f"computation must return a {size}-tuple ending with the error, got {got}")
    return outcome[:-1], outcome[-1]


def _failure_slot(computation: Callable[[], Any], size: int) -> Callable[[], Any]:
    return lambda: _split(computation(), size)[1]


# ──────────────────────── Try ────────────────────────


def try_with_error_value(computation: Callable[[], Optional[BaseException]]) -> tuple[Any, bool]:
    """
    Like try_, but also return what made the computation fail.

    Returns (None, True) on success. On failure the first element is the
    returned failure value, the payload of an intercepted Abort, or the
    intercepted exception itself.
    """
    return _intercept(computation)


def try_(computation: Callable[[], Optional[BaseException]]) -> bool:
    """Run computation; False if it returned a failure or raised."""
    _, ok = _intercept(computation)
    return ok


try1 = try_


def try0(computation: Callable[[], Any]) -> bool:
    """Run computation, ignoring its return value; False if it raised."""

    def run() -> None:
        computation()

    _, ok = _intercept(run)
    return ok


def try2(computation: Callable[[], tuple[Any, Optional[BaseException]]]) -> bool:
    return _intercept(_failure_slot(computation, 2))[1]


def try3(computation: Callable[[], tuple[Any, Any, Optional[BaseException]]]) -> bool:
    return _intercept(_failure_slot(computation, 3))[1]


def try4(computation: Callable[[], tuple[Any, Any, Any, Optional[BaseException]]]) -> bool:
    return _intercept(_failure_slot(computation, 4))[1]


def try5(computation: Callable[[], tuple[Any, Any, Any, Any, Optional[BaseException]]]) -> bool:
    return _intercept(_failure_slot(computation, 5))[1]


def try6(computation: Callable[[], tuple[Any, Any, Any, Any, Any, Optional[BaseException]]]) -> bool:
    return _intercept(_failure_slot(computation, 6))[1]


# ──────────────────────── TryOr ────────────────────────


def _try_or(computation: Callable[[], tuple[Any, ...]], fallbacks: tuple[Any, ...]) -> tuple[Any, ...]:
    produced: list[tuple[Any, ...]] = []

    def run() -> Any:
        values, err = _split(computation(), len(fallbacks) + 1)
        if err is None:
            produced.append(values)
        return err

    _, ok = _intercept(run)
    if ok:
        return (*produced[0], True)
    return (*fallbacks, False)


def try_or1(computation: Callable[[], tuple[A, Optional[BaseException]]], fallback_a: A) -> tuple[A, bool]:
    """
    Return the computation's value, or fallback_a if it failed.

        try_or1(lambda: (5, None), 0)          # → (5, True)
        try_or1(lambda: (0, KeyError()), 9)    # → (9, False)
    """
    return _try_or(computation, (fallback_a,))  # type: ignore[return-value]


try_or = try_or1


def try_or2(
    computation: Callable[[], tuple[A, B, Optional[BaseException]]],
    fallback_a: A,
    fallback_b: B,
) -> tuple[A, B, bool]:
    return _try_or(computation, (fallback_a, fallback_b))  # type: ignore[return-value]


def try_or3(
    computation: Callable[[], tuple[A, B, C, Optional[BaseException]]],
    fallback_a: A,
    fallback_b: B,
    fallback_c: C,
) -> tuple[A, B, C, bool]:
    return _try_or(computation, (fallback_a, fallback_b, fallback_c))  # type: ignore[return-value]


def try_or4(
    computation: Callable[[], tuple[A, B, C, D, Optional[BaseException]]],
    fallback_a: A,
    fallback_b: B,
    fallback_c: C,
    fallback_d: D,
) -> tuple[A, B, C, D, bool]:
    return _try_or(computation, (fallback_a, fallback_b, fallback_c, fallback_d))  # type: ignore[return-value]


def try_or5(
    computation: Callable[[], tuple[A, B, C, D, E, Optional[BaseException]]],
    fallback_a: A,
    fallback_b: B,
    fallback_c: C,
    fallback_d: D,
    fallback_e: E,
) -> tuple[A, B, C, D, E, bool]:
    return _try_or(  # type: ignore[return-value]
        computation, (fallback_a, fallback_b, fallback_c, fallback_d, fallback_e)
    )


def try_or6(
    computation: Callable[[], tuple[A, B, C, D, E, F, Optional[BaseException]]],
    fallback_a: A,
    fallback_b: B,
    fallback_c: C,
    fallback_d: D,
    fallback_e: E,
    fallback_f: F,
) -> tuple[A, B, C, D, E, F, bool]:
    return _try_or(  # type: ignore[return-value]
        computation, (fallback_a, fallback_b, fallback_c, fallback_d, fallback_e, fallback_f)
    )


# ──────────────────────── TryCatch ────────────────────────


def try_catch(computation: Callable[[], Optional[BaseException]], catch: Callable[[], Any]) -> None:
    """Run computation; call catch() once if it failed."""
    if not try_(computation):
        catch()


def try_catch_with_error_value(
    computation: Callable[[], Optional[BaseException]],
    catch: Callable[[Any], Any],
) -> None:
    """Run computation; call catch(failure) once if it failed."""
    failure, ok = try_with_error_value(computation)
    if not ok:
        catch(failure)

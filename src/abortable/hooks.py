"""
Hooks — the two replaceable strategies behind the must/try bridge.

  - abort(payload): leave the current call stack carrying payload.
    Default: raise Abort(payload).
  - failure_formatter(template, args): build a failure value.
    Default: ValidationFailure(template % args).

Hooks is a frozen value object. Every entry point accepts hooks=... so a
caller can thread its own configuration explicitly; when omitted, the
process-wide instance is used.

Replace the process-wide hooks once at start-up, before concurrent use
begins. The lock only makes each swap atomic; it does not coordinate
callers that are already running.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from typing import Any, Callable, NoReturn, Optional, Sequence

from abortable.failure import Abort, ValidationFailure
from abortable.log import is_tracing, trace
from abortable.messages import format_message

AbortHook = Callable[[Any], NoReturn]
FailureFormatter = Callable[[str, Sequence[Any]], BaseException]

_LOGGER = "abortable.hooks"


def default_abort(payload: Any) -> NoReturn:
    """Raise Abort carrying payload."""
    if is_tracing():
        trace("abortable.abort", "abort.raised", payload=str(payload), payload_type=type(payload).__name__)
    raise Abort(payload)


def default_failure_formatter(template: str, args: Sequence[Any]) -> BaseException:
    """Format template with args, printf-style, into a ValidationFailure."""
    return ValidationFailure(format_message(template, args))


@dataclass(frozen=True, slots=True)
class Hooks:
    """
    Abort strategy + failure formatter strategy.

        strict = Hooks(abort=my_abort)
        must(value, err, hooks=strict)
    """

    abort: AbortHook = field(default=default_abort)
    failure_formatter: FailureFormatter = field(default=default_failure_formatter)

    def with_abort(self, abort: AbortHook) -> Hooks:
        return replace(self, abort=abort)

    def with_failure_formatter(self, failure_formatter: FailureFormatter) -> Hooks:
        return replace(self, failure_formatter=failure_formatter)


_lock = threading.RLock()
_current = Hooks()


def get_hooks() -> Hooks:
    return _current


def resolve(hooks: Optional[Hooks]) -> Hooks:
    """Return hooks if given, else the process-wide instance."""
    return hooks if hooks is not None else _current


def set_hooks(hooks: Hooks) -> Hooks:
    """Install hooks process-wide and return the previous instance."""
    global _current
    if not isinstance(hooks, Hooks):
        raise TypeError(f"expected Hooks, got {type(hooks).__name__}")
    with _lock:
        previous, _current = _current, hooks
    trace(_LOGGER, "hooks.replaced", abort=_name(hooks.abort), failure_formatter=_name(hooks.failure_formatter))
    return previous


def set_abort_hook(abort: AbortHook) -> Hooks:
    """Replace only the process-wide abort hook. Returns the previous Hooks."""
    with _lock:
        return set_hooks(_current.with_abort(abort))


def set_failure_formatter(failure_formatter: FailureFormatter) -> Hooks:
    """Replace only the process-wide failure formatter. Returns the previous Hooks."""
    with _lock:
        return set_hooks(_current.with_failure_formatter(failure_formatter))


def reset_hooks() -> None:
    set_hooks(Hooks())


def _name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", repr(fn))

"""
abortable — an error-to-control-flow bridge for Python.

Per call, choose between failing fast with context and recovering locally:

    from abortable import must, try_or

    def load_port(raw: str) -> int:
        return must(*parse_port(raw), "invalid port %r", raw)  # aborts on error

    port, ok = try_or(lambda: parse_port(raw), 8080)        # falls back instead

The must family aborts through a replaceable hook (default: raise Abort);
the try family intercepts aborts and reports success as a boolean.
"""

from abortable.assertions import AbortAssertions
from abortable.attempt import (
    try0,
    try1,
    try2,
    try3,
    try4,
    try5,
    try6,
    try_,
    try_catch,
    try_catch_with_error_value,
    try_or,
    try_or1,
    try_or2,
    try_or3,
    try_or4,
    try_or5,
    try_or6,
    try_with_error_value,
)
from abortable.config import AbortableSettings, effective_settings, get_settings, reload_settings
from abortable.failure import (
    Abort,
    ContractViolation,
    ValidationFailure,
    WrappedFailure,
    errors_as,
)
from abortable.hooks import (
    Hooks,
    get_hooks,
    reset_hooks,
    set_abort_hook,
    set_failure_formatter,
    set_hooks,
)
from abortable.log import configure_logging
from abortable.messages import MessageFormatError, compose_message
from abortable.must import (
    must,
    must0,
    must1,
    must2,
    must3,
    must4,
    must5,
    must6,
    must_e,
    must_e0,
    must_e1,
    must_e2,
    must_e3,
    must_e4,
    must_e5,
    must_e6,
)
from abortable.validation import validate

__all__ = [
    "Abort",
    "ContractViolation",
    "MessageFormatError",
    "ValidationFailure",
    "WrappedFailure",
    "errors_as",
    "validate",
    "compose_message",
    "Hooks",
    "get_hooks",
    "set_hooks",
    "set_abort_hook",
    "set_failure_formatter",
    "reset_hooks",
    "must",
    "must0",
    "must1",
    "must2",
    "must3",
    "must4",
    "must5",
    "must6",
    "must_e",
    "must_e0",
    "must_e1",
    "must_e2",
    "must_e3",
    "must_e4",
    "must_e5",
    "must_e6",
    "try_",
    "try0",
    "try1",
    "try2",
    "try3",
    "try4",
    "try5",
    "try6",
    "try_or",
    "try_or1",
    "try_or2",
    "try_or3",
    "try_or4",
    "try_or5",
    "try_or6",
    "try_with_error_value",
    "try_catch",
    "try_catch_with_error_value",
    "AbortableSettings",
    "get_settings",
    "effective_settings",
    "reload_settings",
    "configure_logging",
    "AbortAssertions",
]

__version__ = "0.1.0"

"""Validation helper — turn a boolean condition into a failure value."""

from __future__ import annotations

from typing import Any, Optional

from abortable.hooks import Hooks, resolve


def validate(ok: bool, template: str, *args: Any, hooks: Optional[Hooks] = None) -> Optional[BaseException]:
    """
    Return None when ok, else a failure built by the failure formatter.

        must0(validate(qty > 0, "quantity must be positive, got %d", qty))
    """
    if ok:
        return None
    return resolve(hooks).failure_formatter(template, args)

"""Message composition for the must family's variadic message arguments."""

from __future__ import annotations

from typing import Any, Sequence


class MessageFormatError(ValueError):
    """
    A message template that cannot be rendered with its arguments.

    An ordinary failure: raised inside a try boundary it is intercepted
    like any abort.
    """


def format_message(template: Any, args: Sequence[Any]) -> str:
    """
    Render template printf-style with args, even when args is empty.

        format_message("100%%", ())  # → "100%"
    """
    if not isinstance(template, str):
        raise MessageFormatError(
            f"message template must be a str when arguments are given, "
            f"got {type(template).__name__}"
        )
    try:
        return template % tuple(args)
    except (TypeError, ValueError) as e:
        raise MessageFormatError(f"cannot format message {template!r}: {e}") from e


def compose_message(*message_args: Any) -> str:
    """
    Turn a message-and-args tuple into one display string.

      - no arguments      → ""
      - one argument      → the string itself, or str(argument)
      - two or more       → printf-style: message_args[0] % message_args[1:]

        compose_message("a=%d, b=%s", 3, "x")  # → "a=3, b=x"

    A non-string template, or a template that rejects its arguments,
    raises MessageFormatError.
    """
    if not message_args:
        return ""

    template, *args = message_args
    if not args:
        return template if isinstance(template, str) else str(template)
    return format_message(template, args)

"""
Test assertions for code that aborts.

Provides expressive assert methods that produce clear failure messages.

Usage in tests:
    from abortable import AbortAssertions

    def test_rejects_missing_user():
        payload = AbortAssertions.assert_aborts(load_user, "missing-id")
        assert "missing-id" in str(payload)

    def test_loads_user():
        user = AbortAssertions.assert_no_abort(load_user, "alice")
        assert user.name == "Alice"
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from abortable.failure import Abort

T = TypeVar("T")


class AbortAssertions:
    """Expressive test assertions for the default Abort mechanism."""

    @staticmethod
    def assert_aborts(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """
        Assert that fn(*args, **kwargs) raises Abort and return its payload.

            payload = AbortAssertions.assert_aborts(must0, False)
        """
        try:
            result = fn(*args, **kwargs)
        except Abort as abort:
            return abort.payload
        raise AssertionError(f"Expected Abort but call returned {result!r}")

    @staticmethod
    def assert_aborts_with(
        fn: Callable[..., Any],
        expected_message: str,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        """Assert that fn aborts and its payload displays as expected_message."""
        payload = AbortAssertions.assert_aborts(fn, *args, **kwargs)
        assert str(payload) == expected_message, (
            f"Expected abort message {expected_message!r} but got {str(payload)!r}"
        )
        return payload

    @staticmethod
    def assert_no_abort(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Assert that fn completes without Abort and return its result."""
        try:
            return fn(*args, **kwargs)
        except Abort as abort:
            raise AssertionError(f"Expected no Abort but got Abort({abort.payload!r})") from abort

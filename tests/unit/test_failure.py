"""Tests for the failure types and errors_as chain inspection."""

from __future__ import annotations

import pytest

from abortable import Abort, ContractViolation, ValidationFailure, WrappedFailure, errors_as


class NotFound(Exception):
    def __init__(self, key: str) -> None:
        super().__init__(f"{key} not found")
        self.key = key


class TestWrappedFailure:
    def test_display_with_attach(self):
        wrapped = WrappedFailure(ValueError("boom"), "ctx")
        assert str(wrapped) == "ctx: boom"

    def test_display_without_attach_is_base_display(self):
        wrapped = WrappedFailure(ValueError("boom"))
        assert str(wrapped) == "boom"
        assert str(WrappedFailure(ValueError("boom"), "")) == "boom"

    def test_unwrap_returns_exact_base(self):
        base = NotFound("user")
        wrapped = WrappedFailure(base, "ctx")
        assert wrapped.unwrap() is base
        assert wrapped.base is base
        assert wrapped.attach == "ctx"

    def test_python_cause_is_base(self):
        base = KeyError("id")
        assert WrappedFailure(base, "ctx").__cause__ is base

    def test_unwrap_is_single_level(self):
        inner = ValueError("inner")
        middle = WrappedFailure(inner, "middle")
        outer = WrappedFailure(middle, "outer")
        assert str(outer) == "outer: middle: inner"
        assert outer.unwrap() is middle

    def test_rejects_none_base(self):
        with pytest.raises(TypeError, match="must not be None"):
            WrappedFailure(None)  # type: ignore[arg-type]

    def test_repr(self):
        assert repr(WrappedFailure(ValueError("x"), "ctx")) == "WrappedFailure(ValueError('x'), attach='ctx')"

    def test_can_be_raised_and_caught_as_exception(self):
        with pytest.raises(WrappedFailure, match="ctx: boom"):
            raise WrappedFailure(RuntimeError("boom"), "ctx")


class TestAbort:
    def test_carries_string_payload(self):
        abort = Abort("not ok")
        assert abort.payload == "not ok"
        assert str(abort) == "not ok"
        assert abort.unwrap() is None

    def test_carries_failure_payload(self):
        wrapped = WrappedFailure(ValueError("boom"), "ctx")
        abort = Abort(wrapped)
        assert abort.payload is wrapped
        assert str(abort) == "ctx: boom"
        assert abort.unwrap() is wrapped
        assert abort.__cause__ is wrapped

    def test_repr(self):
        assert repr(Abort("x")) == "Abort('x')"


class TestErrorsAs:
    def test_finds_error_itself(self):
        err = NotFound("user")
        found, ok = errors_as(err, NotFound)
        assert ok
        assert found is err

    def test_finds_base_beneath_wrapper(self):
        base = NotFound("user")
        found, ok = errors_as(WrappedFailure(base, "loading"), NotFound)
        assert ok
        assert found is base
        assert found.key == "user"

    def test_finds_base_beneath_abort_and_wrapper(self):
        base = NotFound("order")
        found, ok = errors_as(Abort(WrappedFailure(base, "ctx")), NotFound)
        assert ok
        assert found is base

    def test_follows_python_cause(self):
        base = NotFound("user")
        try:
            try:
                raise base
            except NotFound as e:
                raise RuntimeError("lookup failed") from e
        except RuntimeError as outer:
            found, ok = errors_as(outer, NotFound)
        assert ok
        assert found is base

    def test_matches_superclass(self):
        base = KeyError("k")
        found, ok = errors_as(WrappedFailure(base, "ctx"), LookupError)
        assert ok
        assert found is base

    def test_not_found(self):
        found, ok = errors_as(WrappedFailure(ValueError("x"), "ctx"), NotFound)
        assert not ok
        assert found is None

    def test_none_error(self):
        assert errors_as(None, ValueError) == (None, False)

    def test_abort_with_string_payload_ends_chain(self):
        assert errors_as(Abort("not ok"), ValueError) == (None, False)

    def test_cycle_terminates(self):
        a = RuntimeError("a")
        b = RuntimeError("b")
        a.__cause__ = b
        b.__cause__ = a
        assert errors_as(a, ValueError) == (None, False)


class TestExceptionHierarchy:
    def test_contract_violation_is_type_error(self):
        assert issubclass(ContractViolation, TypeError)

    def test_validation_failure_is_exception(self):
        assert issubclass(ValidationFailure, Exception)

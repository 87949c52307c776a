"""Unit tests for Context, Deadline and Request keys."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime, timedelta
from types import MappingProxyType

import pytest

from mp_mediator.kernel.context import Context, Deadline
from mp_mediator.kernel.errors import DeadlineExceededError
from mp_mediator.kernel.messaging import Request, request_key


# ---------------------------------------------------------------------------
# Deadline
# ---------------------------------------------------------------------------


class TestDeadline:
    def test_after_is_in_the_future(self) -> None:
        dl = Deadline.after(10)
        assert not dl.is_expired
        assert 0 < dl.remaining_seconds <= 10

    def test_past_deadline_is_expired(self) -> None:
        dl = Deadline(expires_at=datetime.now(UTC) - timedelta(seconds=1))
        assert dl.is_expired
        assert dl.remaining_seconds == 0.0

    def test_raise_if_expired(self) -> None:
        with pytest.raises(DeadlineExceededError):
            Deadline.after(-1).raise_if_expired()
        Deadline.after(10).raise_if_expired()

    def test_expired_error_names_expiry(self) -> None:
        dl = Deadline.after(-1)
        with pytest.raises(DeadlineExceededError) as exc_info:
            dl.raise_if_expired()
        assert exc_info.value.detail == {"expires_at": dl.expires_at.isoformat()}

    def test_ordering(self) -> None:
        assert Deadline.after(1) < Deadline.after(100)


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------


class TestContext:
    def test_background_is_empty(self) -> None:
        ctx = Context.background()
        assert ctx.deadline is None
        assert ctx.remaining_seconds is None
        assert not ctx.is_expired
        assert dict(ctx.values) == {}

    def test_default_values_are_shared_read_only_mapping(self) -> None:
        [values_field] = [f for f in dataclasses.fields(Context) if f.name == "values"]
        assert values_field.default is dataclasses.MISSING
        assert Context().values is Context.background().values
        assert isinstance(Context().values, MappingProxyType)

    def test_is_immutable(self) -> None:
        ctx = Context.background()
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.deadline = Deadline.after(1)  # type: ignore[misc]
        with pytest.raises(TypeError):
            ctx.values["k"] = "v"  # type: ignore[index]

    def test_with_value_derives_new_context(self) -> None:
        root = Context.background()
        child = root.with_value("tenant", "t-1")
        grandchild = child.with_value("user", "u-1")
        assert root.value("tenant") is None
        assert child.value("tenant") == "t-1"
        assert child.value("user", "anon") == "anon"
        assert grandchild.value("tenant") == "t-1"
        assert grandchild.value("user") == "u-1"

    def test_with_value_keeps_deadline(self) -> None:
        ctx = Context.background().with_timeout(10).with_value("k", 1)
        assert ctx.deadline is not None

    def test_with_deadline_keeps_earlier(self) -> None:
        early, late = Deadline.after(1), Deadline.after(100)
        assert Context(deadline=early).with_deadline(late).deadline == early
        assert Context(deadline=late).with_deadline(early).deadline == early

    def test_with_timeout_sets_deadline(self) -> None:
        ctx = Context.background().with_timeout(5)
        assert ctx.remaining_seconds is not None
        assert 0 < ctx.remaining_seconds <= 5

    def test_raise_if_expired(self) -> None:
        Context.background().raise_if_expired()
        expired = Context(deadline=Deadline.after(-1))
        assert expired.is_expired
        with pytest.raises(DeadlineExceededError):
            expired.raise_if_expired()


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


class Named(Request):
    key_name = "named"


class Anonymous(Request):
    pass


class Dynamic(Request):
    def __init__(self, topic: str) -> None:
        self.topic = topic

    def key(self) -> str:
        return f"dynamic.{self.topic}"


class TestRequest:
    def test_key_name(self) -> None:
        assert Named().key() == "named"
        assert Named.class_key() == "named"

    def test_default_key_is_qualname(self) -> None:
        assert Anonymous().key() == "Anonymous"

    def test_subclass_inherits_or_overrides_key_name(self) -> None:
        class Child(Named):
            pass

        class Renamed(Named):
            key_name = "renamed"

        assert Child().key() == "named"
        assert Renamed().key() == "renamed"

    def test_request_key_accepts_class_or_instance(self) -> None:
        assert request_key(Named) == request_key(Named()) == "named"

    def test_instance_key_override(self) -> None:
        assert request_key(Dynamic("a")) == "dynamic.a"

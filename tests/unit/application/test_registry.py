"""Unit tests for HandlerRegistry."""

from __future__ import annotations

import pytest

from mp_mediator.application.mediator import HandlerBinding, HandlerRegistry
from mp_mediator.kernel.errors import HandlerNotFoundError, InvalidArgumentError
from mp_mediator.kernel.messaging import Request
from mp_mediator.testing.fakes import StubHandler


class CreateOrder(Request):
    key_name = "orders.create"


class CreateOrderV2(Request):
    key_name = "orders.create"


class Unnamed(Request):
    pass


class ByRegion(Request):
    def __init__(self, region: str) -> None:
        self.region = region

    def key(self) -> str:
        return f"report.{self.region}"


def make_factory(result: object = None):
    return lambda: StubHandler(result=result)


class TestRegister:
    def test_register_and_lookup(self) -> None:
        registry = HandlerRegistry()
        factory = make_factory()
        key = registry.register(CreateOrder(), factory)
        assert key == "orders.create"
        assert registry.lookup("orders.create") is factory

    def test_class_and_instance_prototypes_share_a_key(self) -> None:
        registry = HandlerRegistry()
        assert registry.register(CreateOrder, make_factory()) == registry.register(
            CreateOrder(), make_factory()
        )
        assert len(registry) == 1

    def test_default_key_is_qualname(self) -> None:
        registry = HandlerRegistry()
        assert registry.register(Unnamed, make_factory()) == Unnamed.__qualname__

    def test_instance_key_override(self) -> None:
        registry = HandlerRegistry()
        registry.register(ByRegion("eu"), make_factory("eu"))
        registry.register(ByRegion("us"), make_factory("us"))
        assert sorted(registry.keys()) == ["report.eu", "report.us"]

    def test_overwrite_last_wins(self) -> None:
        registry = HandlerRegistry()
        first, second = make_factory(1), make_factory(2)
        registry.register(CreateOrder, first)
        registry.register(CreateOrder, second)
        assert registry.lookup("orders.create") is second
        assert len(registry) == 1

    def test_binding_records_request_type(self) -> None:
        registry = HandlerRegistry()
        factory = make_factory()
        registry.register(CreateOrder(), factory)
        assert registry.binding("orders.create") == HandlerBinding(
            key="orders.create", factory=factory, request_type=CreateOrder
        )

    @pytest.mark.parametrize(
        ("prototype", "factory"),
        [
            (None, make_factory()),
            (CreateOrder, None),
            (CreateOrder, "not-callable"),
            ("orders.create", make_factory()),
            (object(), make_factory()),
            (int, make_factory()),
        ],
    )
    def test_invalid_arguments(self, prototype: object, factory: object) -> None:
        with pytest.raises(InvalidArgumentError):
            HandlerRegistry().register(prototype, factory)  # type: ignore[arg-type]

    def test_invalid_argument_names_the_argument(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            HandlerRegistry().register(CreateOrder, None)
        assert exc_info.value.argument == "factory"


class TestLookup:
    def test_missing_key_raises(self) -> None:
        with pytest.raises(HandlerNotFoundError) as exc_info:
            HandlerRegistry().lookup("nope")
        assert exc_info.value.key == "nope"

    def test_contains_and_iter(self) -> None:
        registry = HandlerRegistry()
        registry.register(CreateOrder, make_factory())
        assert "orders.create" in registry
        assert "other" not in registry
        assert list(registry) == ["orders.create"]


class TestStrictTypes:
    def test_conflicting_type_rejected(self) -> None:
        registry = HandlerRegistry(strict_types=True)
        registry.register(CreateOrder, make_factory())
        with pytest.raises(InvalidArgumentError) as exc_info:
            registry.register(CreateOrderV2, make_factory())
        assert exc_info.value.detail == {"key": "orders.create"}

    def test_lenient_registry_overwrites(self) -> None:
        registry = HandlerRegistry()
        registry.register(CreateOrder, make_factory())
        registry.register(CreateOrderV2, make_factory())
        assert registry.binding("orders.create").request_type is CreateOrderV2


class TestFreeze:
    def test_frozen_registry_rejects_registration(self) -> None:
        registry = HandlerRegistry()
        registry.register(CreateOrder, make_factory())
        registry.freeze()
        assert registry.frozen
        with pytest.raises(InvalidArgumentError):
            registry.register(Unnamed, make_factory())
        assert registry.keys() == ["orders.create"]

    def test_frozen_registry_still_looks_up(self) -> None:
        registry = HandlerRegistry()
        factory = make_factory()
        registry.register(CreateOrder, factory)
        registry.freeze()
        assert registry.lookup("orders.create") is factory

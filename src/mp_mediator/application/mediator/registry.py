"""Application mediator – HandlerRegistry."""
from __future__ import annotations

import dataclasses
from typing import Iterator

from mp_mediator.application.mediator.handler import HandlerFactory
from mp_mediator.kernel.errors import HandlerNotFoundError, InvalidArgumentError
from mp_mediator.kernel.messaging import Request, request_key


@dataclasses.dataclass(frozen=True)
class HandlerBinding:
    """A key bound to its handler factory and the prototype's request type."""
    key: str
    factory: HandlerFactory
    request_type: type[Request]


class HandlerRegistry:
    """Map request keys to handler factories.

    Registering an existing key overwrites the previous binding (last one
    wins). With *strict_types* the overwrite is only allowed for the same
    request type. Once :meth:`freeze` is called the registry is read-only.
    """

    def __init__(self, *, strict_types: bool = False) -> None:
        self._bindings: dict[str, HandlerBinding] = {}
        self._strict_types = strict_types
        self._frozen = False

    @property
    def strict_types(self) -> bool:
        return self._strict_types

    def register(self, prototype: Request | type[Request] | None, factory: HandlerFactory | None) -> str:
        """Bind *prototype*'s key to *factory* and return the key."""
        if self._frozen:
            raise InvalidArgumentError("Registry is frozen", argument="registry")
        if prototype is None:
            raise InvalidArgumentError("Request prototype is required", argument="prototype")
        request_type = prototype if isinstance(prototype, type) else type(prototype)
        if not issubclass(request_type, Request):
            raise InvalidArgumentError(
                f"Prototype {request_type.__qualname__} is not a Request", argument="prototype"
            )
        if factory is None or not callable(factory):
            raise InvalidArgumentError("Handler factory must be callable", argument="factory")

        key = request_key(prototype)
        existing = self._bindings.get(key)
        if self._strict_types and existing is not None and existing.request_type is not request_type:
            raise InvalidArgumentError(
                f"Key {key!r} is already bound to {existing.request_type.__qualname__}",
                argument="prototype",
                detail={"key": key},
            )
        self._bindings[key] = HandlerBinding(key=key, factory=factory, request_type=request_type)
        return key

    def binding(self, key: str) -> HandlerBinding:
        try:
            return self._bindings[key]
        except KeyError:
            raise HandlerNotFoundError(key) from None

    def lookup(self, key: str) -> HandlerFactory:
        """Return the factory bound to *key* or raise :class:`HandlerNotFoundError`."""
        return self.binding(key).factory

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def keys(self) -> list[str]:
        return list(self._bindings)

    def __contains__(self, key: object) -> bool:
        return key in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._bindings))


__all__ = ["HandlerBinding", "HandlerRegistry"]

"""Kernel messaging – Request."""
from __future__ import annotations

import abc
from typing import ClassVar


class Request(abc.ABC):
    """Base for every value sent through the mediator.

    The only capability a request needs is a stable :meth:`key`, used to find
    its handler. By default the key is ``key_name`` when a subclass sets it,
    otherwise the class ``__qualname__``. Override :meth:`key` to derive it
    from instance state instead.

    Usage::

        @dataclasses.dataclass
        class PlaceOrder(Request):
            key_name = "orders.place"
            sku: str
    """

    key_name: ClassVar[str | None] = None

    @classmethod
    def class_key(cls) -> str:
        """Key shared by every instance that does not override :meth:`key`."""
        return cls.key_name or cls.__qualname__

    def key(self) -> str:
        return type(self).class_key()


def request_key(prototype: "Request | type[Request]") -> str:
    """Return the key for a registration prototype (instance or subclass)."""
    if isinstance(prototype, type):
        return prototype.class_key()
    return prototype.key()


__all__ = ["Request", "request_key"]

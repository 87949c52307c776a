"""BaseError: the common ancestor of every error the mediator raises.

Each error carries a stable ``code`` slug so callers and log pipelines can
branch on it without matching message text. ``str(err)`` is one JSON line,
which keeps structured logs parseable when an error is logged as a value.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code else self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            # chains the traceback even when raised without ``from``
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """``code``, ``message`` and ``detail``, plus ``cause`` as a repr when set."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]

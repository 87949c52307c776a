"""Config settings – MediatorSettings."""
from __future__ import annotations

import dataclasses
from typing import Mapping

from mp_mediator.config.settings.base import Settings
from mp_mediator.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class MediatorSettings(Settings):
    """Knobs for :class:`~mp_mediator.application.mediator.Mediator`.

    Read from ``MEDIATOR_*`` environment variables by :meth:`from_env`.

    Attributes:
        strict_request_types: Bind each key to its prototype's type. Registering
            the same key with a different type fails, and dispatching a request
            of another type fails with ``RequestTypeMismatchError``.
        log_dispatch: Emit a debug log line for every ``send``.
        log_level: Root level applied by ``JsonLoggerFactory.from_settings``.
        log_json: Render logs as JSON (otherwise the structlog console renderer).
    """

    _prefix = "MEDIATOR"

    strict_request_types: bool = False
    log_dispatch: bool = False
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "MediatorSettings":
        from mp_mediator.config.settings.loaders import EnvSettingsLoader

        return EnvSettingsLoader(environ).load(cls)


__all__ = ["MediatorSettings"]

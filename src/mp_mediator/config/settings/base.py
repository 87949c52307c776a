"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from prefixed environment variables.

    Subclasses set ``_prefix`` (for example ``"MEDIATOR"``) and declare their
    fields; :class:`~mp_mediator.config.settings.loaders.EnvSettingsLoader`
    maps ``MEDIATOR_LOG_LEVEL`` onto ``log_level``. ``_prefix`` is class
    metadata, never a constructor argument.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Hook for cross-field checks; raise a ConfigError subclass on failure."""


__all__ = ["Settings"]

"""Client settings resolved from arguments and environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from .client.http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS

BASE_URL_ENV_NAME = "GPTZATOR_BASE_URL"
TIMEOUT_ENV_NAME = "GPTZATOR_TIMEOUT_MS"


class ConfigError(RuntimeError):
    """Raised when client settings cannot be parsed or validated."""


class ClientSettings(BaseModel):
    """Connection defaults for one :class:`~gptzator.sdk.GptzatorClient`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: StrictStr = Field(default=DEFAULT_BASE_URL, min_length=1)
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ClientSettings:
        """Build settings from ``GPTZATOR_*`` variables, falling back to defaults."""
        source = os.environ if env is None else env
        values: dict[str, object] = {}

        base_url = _optional_nonempty_str(source.get(BASE_URL_ENV_NAME))
        if base_url is not None:
            values["base_url"] = base_url

        timeout = _optional_nonempty_str(source.get(TIMEOUT_ENV_NAME))
        if timeout is not None:
            try:
                values["timeout_ms"] = int(timeout)
            except ValueError as exc:
                raise ConfigError(
                    f"{TIMEOUT_ENV_NAME} must be an integer number of milliseconds, got {timeout!r}",
                ) from exc

        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(f"invalid client settings: {exc}") from exc


def _optional_nonempty_str(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None

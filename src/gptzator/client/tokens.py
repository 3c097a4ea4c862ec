"""Credential pair and pluggable token storage backends."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Awaitable, Callable, MutableMapping
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_KEY = "gptz_sdk_tokens"
_TOKEN_FILE_NAME = "tokens.json"


class Tokens(BaseModel):
    """Immutable access/refresh token pair."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    access_token: str = Field(alias="accessToken", min_length=1)
    refresh_token: str | None = Field(default=None, alias="refreshToken")

    def to_json(self) -> str:
        """Serialize using the wire field names."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


RefreshFn = Callable[[str], Awaitable[Tokens]]
AuthFailedHook = Callable[[], Awaitable[None] | None]


@runtime_checkable
class TokenStorage(Protocol):
    """Synchronous get/set store for the current token pair."""

    def get(self) -> Tokens | None: ...

    def set(self, tokens: Tokens | None) -> None: ...


class InMemoryTokenStorage:
    """Process-memory storage; tokens vanish with the client."""

    def __init__(self, tokens: Tokens | None = None) -> None:
        self._tokens = tokens

    def get(self) -> Tokens | None:
        return self._tokens

    def set(self, tokens: Tokens | None) -> None:
        self._tokens = tokens


class KeyValueTokenStorage:
    """Store the JSON token pair under one key of a string mapping."""

    def __init__(
        self,
        store: MutableMapping[str, str],
        key: str = DEFAULT_TOKEN_KEY,
    ) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def get(self) -> Tokens | None:
        raw = self._store.get(self._key)
        if not raw:
            return None
        return _parse_tokens(raw, source=f"key {self._key!r}")

    def set(self, tokens: Tokens | None) -> None:
        if tokens is None:
            self._store.pop(self._key, None)
            return
        self._store[self._key] = tokens.to_json()


class FileTokenStorage:
    """Persist the token pair as a JSON file readable only by its owner."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path).expanduser() if path is not None else default_token_path()

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> Tokens | None:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("unable to read token file %s: %s", self._path, exc)
            return None
        return _parse_tokens(raw, source=str(self._path))

    def set(self, tokens: Tokens | None) -> None:
        if tokens is None:
            self._path.unlink(missing_ok=True)
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._path.with_name(f"{self._path.name}.tmp")
        temp_path.write_text(tokens.to_json() + "\n", encoding="utf-8")
        os.chmod(temp_path, 0o600)
        temp_path.replace(self._path)


def default_token_path() -> Path:
    """Resolve the token file under ``GPTZATOR_HOME`` (default ``~/.gptzator``)."""
    override = os.environ.get("GPTZATOR_HOME")
    base_dir = Path(override).expanduser() if override else Path.home() / ".gptzator"
    return base_dir / _TOKEN_FILE_NAME


def _parse_tokens(raw: str, *, source: str) -> Tokens | None:
    try:
        return Tokens.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.warning("ignoring unreadable tokens in %s: %s", source, exc)
        return None

"""Bracket-style query encoding for nested filter parameters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode


def flatten_params(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten nested mappings and lists into ``where[id][in][0]=...`` pairs.

    ``None`` values are dropped and booleans are written as ``true``/``false``.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        _flatten_into(pairs, str(key), value)
    return pairs


def encode_query(params: Mapping[str, Any] | None) -> str:
    """Return the encoded query string, without a leading ``?``."""
    if not params:
        return ""
    return urlencode(flatten_params(params))


def _flatten_into(pairs: list[tuple[str, str]], prefix: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, nested in value.items():
            _flatten_into(pairs, f"{prefix}[{key}]", nested)
        return
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten_into(pairs, f"{prefix}[{index}]", item)
        return
    if isinstance(value, bool):
        pairs.append((prefix, "true" if value else "false"))
        return
    pairs.append((prefix, str(value)))

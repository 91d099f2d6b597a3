# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Serialize a response view and its API accumulator into the host result payload."""

from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def _as_mapping(obj: Any) -> dict[str, Any]:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        try:
            data = to_dict()
            if isinstance(data, dict):
                return data
        except Exception as exc:  # noqa: BLE001
            logger.debug("to_dict() failed on %s: %s", type(obj).__name__, exc)
    if isinstance(obj, dict):
        return dict(obj)
    try:
        return {key: value for key, value in vars(obj).items() if not key.startswith("_")}
    except TypeError:
        return {}


def _response_section(response: Any) -> dict[str, Any]:
    data = _as_mapping(response)
    headers = data.get("headers", getattr(response, "headers", None))
    data["headers"] = _as_mapping(headers) if headers is not None else {}
    return data


def _default(obj: Any) -> str:
    try:
        return str(obj)
    except Exception:  # noqa: BLE001
        return f"<{type(obj).__name__}>"


def _safe_repr(obj: Any) -> str:
    try:
        return repr(obj)
    except Exception:  # noqa: BLE001
        return f"<{type(obj).__name__}>"


def _dumps(payload: Any) -> str:
    return json.dumps(payload, default=_default, ensure_ascii=False)


def _encodable(value: Any) -> bool:
    try:
        _dumps(value)
    except Exception:  # noqa: BLE001
        return False
    return True


def _degrade(value: Any, depth: int = 0) -> Any:
    """Keep the encodable parts of `value`; entries that cannot be encoded become strings."""
    if _encodable(value):
        return value
    if isinstance(value, dict) and depth < 2:
        degraded: dict[Any, Any] = {}
        for key, item in value.items():
            if not (key is None or isinstance(key, (str, int, float, bool))):
                key = _safe_repr(key)
            degraded[key] = _degrade(item, depth + 1)
        return degraded
    return _safe_repr(value)


def get_result(response: Any, api: Any) -> str:
    """
    Build the JSON result payload:

        {"response": {..., "headers": {...}}, "api": {"values", "is_failed", "error_message"}}

    Never raises. Entries that cannot be encoded are replaced by their repr, so
    `response`, `api` and `api.values` keep their mapping shape.
    """
    payload = {"response": _response_section(response), "api": _as_mapping(api)}
    try:
        return _dumps(payload)
    except Exception as exc:  # noqa: BLE001
        logger.warning("result payload could not be encoded in full: %s", _default(exc))

    partial = {name: _degrade(section) for name, section in payload.items()}
    try:
        return _dumps(partial)
    except Exception as exc:  # noqa: BLE001
        logger.warning("result payload fell back to an empty document: %s", _default(exc))
        return _dumps({"response": {"headers": {}}, "api": {}})


getResult = get_result

__all__ = ["get_result", "getResult"]

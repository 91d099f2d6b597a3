# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclasses for the post-script result payload read back by the host."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional

from ..errors import ResultDecodeError


def _mapping(value: Any) -> Dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _render(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (list, dict)):
        return json.dumps(value, default=str, ensure_ascii=False)
    return str(value)


@dataclass
class ScriptResponseContent:
    """Response section of the payload."""

    status_code: Optional[int] = None
    headers: Dict[str, Any] = field(default_factory=dict)
    body: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": self.headers,
            "body": self.body,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ScriptResponseContent":
        status = data.get("statusCode")
        return cls(
            status_code=status if isinstance(status, int) and not isinstance(status, bool) else None,
            headers=_mapping(data.get("headers")),
            body=_text(data.get("body")),
        )


@dataclass
class ScriptAPIContent:
    """API section of the payload: observations and verdict."""

    values: Dict[str, Any] = field(default_factory=dict)
    is_failed: bool = False
    error_message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "values": self.values,
            "is_failed": self.is_failed,
            "error_message": self.error_message,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ScriptAPIContent":
        return cls(
            values=_mapping(data.get("values")),
            is_failed=bool(data.get("is_failed")),
            error_message=_text(data.get("error_message")),
        )


@dataclass
class ScriptResult:
    """Decoded post-script result."""

    response: ScriptResponseContent = field(default_factory=ScriptResponseContent)
    api: ScriptAPIContent = field(default_factory=ScriptAPIContent)

    @property
    def passed(self) -> bool:
        return not self.api.is_failed

    def extracted_values(self, names: Iterable[str]) -> Dict[str, str]:
        """
        Return observations for the requested names rendered as strings.

        Multi-step tasks use this to hand extracted variables to later steps; names the
        script never set are left out.
        """
        values = self.api.values
        return {name: _render(values[name]) for name in names if name in values}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "response": self.response.to_dict(),
            "api": self.api.to_dict(),
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ScriptResult":
        response = data.get("response")
        api = data.get("api")
        return cls(
            response=ScriptResponseContent.from_mapping(response if isinstance(response, Mapping) else {}),
            api=ScriptAPIContent.from_mapping(api if isinstance(api, Mapping) else {}),
        )

    @classmethod
    def from_json(cls, payload: str | bytes) -> "ScriptResult":
        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as exc:
            raise ResultDecodeError(f"result payload is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ResultDecodeError(f"result payload must be a JSON object, got {type(data).__name__}")
        return cls.from_mapping(data)

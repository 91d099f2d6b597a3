# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Immutable snapshot of one HTTP probe result, as seen by post scripts."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from .headers import HeaderView


@dataclass(frozen=True, init=False, eq=False)
class ResponseView:
    """
    Probe result exposed to a post script.

    The script-facing names follow the host contract (`statusCode`, `getStatusCode()`),
    with snake_case equivalents for Python callers.
    """

    statusCode: int
    headers: HeaderView
    body: str
    extra: dict[str, Any] = field(default_factory=dict)

    def __init__(
        self,
        status_code: int,
        headers: str | bytes | None = "",
        body: str = "",
        **extra: Any,
    ) -> None:
        object.__setattr__(self, "statusCode", status_code)
        object.__setattr__(self, "headers", HeaderView(headers))
        object.__setattr__(self, "body", body)
        object.__setattr__(self, "extra", dict(extra))

    def get_status_code(self) -> int:
        return self.statusCode

    def get_headers(self) -> HeaderView:
        return self.headers

    def get_response_body(self) -> str:
        return self.body

    getStatusCode = get_status_code
    getHeaders = get_headers
    getResponseBody = get_response_body

    def to_dict(self) -> dict[str, Any]:
        """Flatten own data fields; `headers` is always written last as a plain mapping."""
        data: dict[str, Any] = dict(self.extra)
        for item in fields(self):
            if item.name in {"extra", "headers"}:
                continue
            data[item.name] = getattr(self, item.name)
        data["headers"] = self.headers.to_dict()
        return data


__all__ = ["ResponseView"]

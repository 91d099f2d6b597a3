# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Read-only header lookup handed to post scripts.

Header names keep whatever casing the host serialized; lookups are exact. Values are
kept as decoded, so a host that serializes multi-valued headers gets lists back.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from typing import Any

HeaderValue = str | list[str]


def _decode_headers(header_string: Any) -> dict[str, HeaderValue]:
    if not isinstance(header_string, (str, bytes, bytearray)) or not header_string:
        return {}
    try:
        decoded = json.loads(header_string)
    except (TypeError, ValueError):
        return {}
    if not isinstance(decoded, dict):
        return {}
    return {str(key): value for key, value in decoded.items()}


class HeaderView(Mapping[str, HeaderValue]):
    """Immutable header mapping parsed from a JSON header string."""

    __slots__ = ("_headers",)

    def __init__(self, header_string: str | bytes | None = "") -> None:
        self._headers = _decode_headers(header_string)

    def get(self, name: str, default: Any = None) -> Any:
        return self._headers.get(name, default)

    def has(self, name: str) -> bool:
        return name in self._headers

    def to_dict(self) -> dict[str, HeaderValue]:
        return dict(self._headers)

    def __getitem__(self, name: str) -> HeaderValue:
        return self._headers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"HeaderView({self._headers!r})"


__all__ = ["HeaderValue", "HeaderView"]

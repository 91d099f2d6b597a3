# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Adapters from httpx probe responses to script-facing views."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import ScriptSettings, load_script_settings
from ..script.response import ResponseView


def _header_pairs(headers: Any) -> list[tuple[str, str]]:
    """
    Best-effort flattening of a header container into (name, value) pairs.

    Accepts httpx.Headers (original casing via `.raw`), plain mappings whose values may
    be lists, and iterables of pairs.
    """
    if not headers:
        return []
    if isinstance(headers, httpx.Headers):
        encoding = headers.encoding
        return [(key.decode(encoding), value.decode(encoding)) for key, value in headers.raw]

    pairs: list[tuple[str, str]] = []
    items = headers.items() if isinstance(headers, Mapping) else headers
    for key, value in items:
        if key is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((str(key), "" if item is None else str(item)) for item in value)
        else:
            pairs.append((str(key), "" if value is None else str(value)))
    return pairs


def encode_headers(headers: Any) -> str:
    """Serialize headers as a JSON object of name -> list of values."""
    grouped: dict[str, list[str]] = {}
    for key, value in _header_pairs(headers):
        grouped.setdefault(key, []).append(value)
    return json.dumps(grouped, ensure_ascii=False)


def _decode_body(content: bytes, encoding: str | None) -> str:
    try:
        return content.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        return content.decode("utf-8", errors="replace")


def response_view_from_httpx(
    response: httpx.Response,
    body: bytes | None = None,
    settings: ScriptSettings | None = None,
) -> ResponseView:
    """Build a ResponseView from a completed httpx response."""
    settings = settings or load_script_settings()
    content = response.content if body is None else body
    content = bytes(content[: settings.max_body_bytes])
    return ResponseView(
        response.status_code,
        encode_headers(response.headers),
        _decode_body(content, response.encoding),
    )


__all__ = ["encode_headers", "response_view_from_httpx"]

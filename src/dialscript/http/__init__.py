# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP adapter exports."""

from .adapters import encode_headers, response_view_from_httpx

__all__ = ["encode_headers", "response_view_from_httpx"]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Result models."""

from .result import ScriptAPIContent, ScriptResponseContent, ScriptResult

__all__ = ["ScriptAPIContent", "ScriptResponseContent", "ScriptResult"]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
dialscript package entrypoint.

Object model for post scripts in HTTP dial testing: a read-only response view, an
API accumulator the script reports through, and the result payload the host reads
back after the run.
"""

from .config import ScriptSettings, load_script_settings
from .errors import (
    DialScriptError,
    ErrorCategory,
    ResultDecodeError,
    ScriptCompileError,
)
from .http import encode_headers, response_view_from_httpx
from .log import setup_logging
from .models import ScriptAPIContent, ScriptResponseContent, ScriptResult
from .runtime import ScriptHost, compile_post_script, run_post_script
from .script import API, HeaderView, ObservationValue, ResponseView, getResult, get_result
from .version import __version__

__all__ = [
    "API",
    "DialScriptError",
    "ErrorCategory",
    "HeaderView",
    "ObservationValue",
    "ResponseView",
    "ResultDecodeError",
    "ScriptAPIContent",
    "ScriptCompileError",
    "ScriptHost",
    "ScriptResponseContent",
    "ScriptResult",
    "ScriptSettings",
    "__version__",
    "compile_post_script",
    "encode_headers",
    "getResult",
    "get_result",
    "load_script_settings",
    "response_view_from_httpx",
    "run_post_script",
    "setup_logging",
]

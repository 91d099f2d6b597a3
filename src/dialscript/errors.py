# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from enum import Enum
from typing import Optional


class ErrorCategory(str, Enum):
    SCRIPT_COMPILE = "SCRIPT_COMPILE"
    SCRIPT_RUNTIME = "SCRIPT_RUNTIME"
    RESULT_DECODE = "RESULT_DECODE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class DialScriptError(Exception):
    """Base class for errors surfaced by the script host."""

    category = ErrorCategory.UNKNOWN_ERROR


class ScriptCompileError(DialScriptError):
    """The post-script source could not be compiled."""

    category = ErrorCategory.SCRIPT_COMPILE


class ResultDecodeError(DialScriptError):
    """The result payload could not be decoded."""

    category = ErrorCategory.RESULT_DECODE


def categorize_exception(exc: Exception) -> ErrorCategory:
    """
    Map host and script exceptions to ErrorCategory.
    """
    if isinstance(exc, DialScriptError):
        return exc.category

    if isinstance(exc, SyntaxError):
        return ErrorCategory.SCRIPT_COMPILE

    if isinstance(exc, (ValueError, TypeError)) and "JSON" in type(exc).__name__:
        return ErrorCategory.RESULT_DECODE

    return ErrorCategory.SCRIPT_RUNTIME


def error_category_to_reason(category: Optional[ErrorCategory]) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.SCRIPT_COMPILE: "Post script could not be compiled",
        ErrorCategory.SCRIPT_RUNTIME: "Post script raised an error",
        ErrorCategory.RESULT_DECODE: "Post script result could not be decoded",
        ErrorCategory.UNKNOWN_ERROR: "Post script failed",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Post script failed")

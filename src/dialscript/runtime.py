# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Post-script host: runs a user script against one probe result.

Every run builds a fresh API accumulator and a namespace holding only `response` and
`api`. The script body is wrapped in a function so a bare `return` ends it early.
This is not a sandbox; isolating untrusted code is the execution environment's job.
"""

from __future__ import annotations

import ast
import logging
from typing import Optional

import httpx

from .config import DEFAULT_SCRIPT_FILENAME, ScriptSettings, load_script_settings
from .errors import ScriptCompileError, categorize_exception, error_category_to_reason
from .http.adapters import response_view_from_httpx
from .models import ScriptResult
from .script import API, ResponseView, get_result

logger = logging.getLogger(__name__)

_ENTRYPOINT = "__post_script__"
_WRAPPER = f"def {_ENTRYPOINT}(response, api):\n    pass\n"


_SUSPENDING_NODES = (ast.Yield, ast.YieldFrom, ast.Await)
_NESTED_SCOPES = (ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda, ast.ClassDef)


def _find_suspension(nodes: list[ast.stmt]) -> Optional[ast.AST]:
    """Return the first yield/await that would turn the wrapped body into a generator or coroutine."""
    pending: list[ast.AST] = list(nodes)
    while pending:
        node = pending.pop(0)
        if isinstance(node, _SUSPENDING_NODES):
            return node
        if isinstance(node, _NESTED_SCOPES):
            continue
        pending.extend(ast.iter_child_nodes(node))
    return None


def compile_post_script(script: str, filename: str = DEFAULT_SCRIPT_FILENAME):
    """Compile script source into a code object defining the wrapped entrypoint."""
    try:
        body = ast.parse(script, filename=filename, mode="exec").body
    except SyntaxError as exc:
        raise ScriptCompileError(f"post script failed to compile: {exc}") from exc

    suspension = _find_suspension(body)
    if suspension is not None:
        raise ScriptCompileError(
            f"post script failed to compile: '{type(suspension).__name__.lower()}' is not allowed "
            f"at top level (line {getattr(suspension, 'lineno', '?')})"
        )

    try:
        module = ast.parse(_WRAPPER, filename=filename, mode="exec")
        module.body[0].body = body or [ast.Pass()]
        ast.fix_missing_locations(module)
        return compile(module, filename, "exec")
    except SyntaxError as exc:
        raise ScriptCompileError(f"post script failed to compile: {exc}") from exc


class ScriptHost:
    """Runs post scripts with shared settings and logger."""

    def __init__(self, settings: Optional[ScriptSettings] = None, log: Optional[logging.Logger] = None):
        self.settings = settings or load_script_settings()
        self.log = log or logger

    def new_api(self) -> API:
        return API(first_failure_wins=self.settings.first_failure_wins, log=self.log)

    def run(self, script: str, response: Optional[ResponseView]) -> Optional[ScriptResult]:
        if not script or response is None:
            return None

        code = compile_post_script(script, self.settings.script_filename)
        api = self.new_api()
        namespace = {"response": response, "api": api}
        exec(code, namespace)  # noqa: S102
        try:
            namespace[_ENTRYPOINT](response, api)
        except (Exception, SystemExit) as exc:  # noqa: BLE001
            self.log.debug("%s (%s): %s", error_category_to_reason(categorize_exception(exc)), type(exc).__name__, exc)
            api.fail(str(exc))

        return ScriptResult.from_json(get_result(response, api))

    def run_httpx(
        self,
        script: str,
        response: Optional[httpx.Response],
        body: Optional[bytes] = None,
    ) -> Optional[ScriptResult]:
        if not script or response is None:
            return None
        view = response_view_from_httpx(response, body=body, settings=self.settings)
        return self.run(script, view)


def run_post_script(
    script: str,
    response: Optional[ResponseView],
    *,
    settings: Optional[ScriptSettings] = None,
) -> Optional[ScriptResult]:
    """Run `script` against `response` and decode the result payload."""
    return ScriptHost(settings).run(script, response)


__all__ = ["ScriptHost", "compile_post_script", "run_post_script"]

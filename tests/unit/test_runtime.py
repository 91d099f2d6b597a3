# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import textwrap

import httpx
import pytest

from dialscript.config import ScriptSettings
from dialscript.errors import ScriptCompileError
from dialscript.runtime import ScriptHost, compile_post_script, run_post_script
from dialscript.script import ResponseView


def _response():
    return ResponseView(301, '{"custom-header": ["value1", "value2"]}', "1")


def test_run_post_script_returns_response_object():
    result = run_post_script("1", _response(), settings=ScriptSettings())
    assert result is not None
    assert result.response.status_code == 301
    assert result.response.body == "1"
    assert result.response.headers == {"custom-header": ["value1", "value2"]}
    assert result.api.values == {}
    assert result.api.is_failed is False


def test_run_post_script_records_script_exception_as_failure():
    result = run_post_script("response.xxxxxx = xxxxxx", _response(), settings=ScriptSettings())
    assert result.api.is_failed is True
    assert "xxxxxx" in result.api.error_message


def test_run_post_script_header_checks_and_early_return():
    script = textwrap.dedent(
        """
        headers = response.getHeaders()
        if headers.get("header1") != ["value1"]:
            api.fail("header1 not equal")
            return
        api.setValue("checked", True)
        """
    )
    ok = run_post_script(script, ResponseView(200, '{"header1": ["value1"]}', ""), settings=ScriptSettings())
    assert ok.passed is True
    assert ok.api.values == {"checked": True}

    bad = run_post_script(script, ResponseView(200, '{"header1": ["other"]}', ""), settings=ScriptSettings())
    assert bad.api.is_failed is True
    assert bad.api.error_message == "header1 not equal"
    assert bad.api.values == {}


def test_run_post_script_records_values_and_failure():
    script = 'api.setValue("latency_ms", 42)\napi.fail("status mismatch")'
    result = run_post_script(script, _response(), settings=ScriptSettings())
    assert result.api.values["latency_ms"] == 42
    assert result.api.is_failed is True
    assert result.api.error_message == "status mismatch"


def test_run_post_script_skips_empty_script_or_missing_response():
    assert run_post_script("", _response(), settings=ScriptSettings()) is None
    assert run_post_script("api.fail('x')", None, settings=ScriptSettings()) is None


def test_compile_error_raises():
    with pytest.raises(ScriptCompileError):
        compile_post_script("if True print('x')")
    with pytest.raises(ScriptCompileError):
        run_post_script("def (", _response(), settings=ScriptSettings())


def test_runs_do_not_share_api_state():
    host = ScriptHost(ScriptSettings())
    first = host.run("api.setValue('a', 1)\napi.fail('first run')", _response())
    second = host.run("api.setValue('b', 2)", _response())
    assert first.api.values == {"a": 1}
    assert second.api.values == {"b": 2}
    assert second.api.is_failed is False


def test_host_honors_first_failure_policy():
    host = ScriptHost(ScriptSettings(first_failure_wins=True))
    result = host.run("api.fail('first')\napi.fail('second')", _response())
    assert result.api.error_message == "first"


def test_run_httpx():
    host = ScriptHost(ScriptSettings())
    response = httpx.Response(200, headers={"Content-Type": "application/json"}, content=b'{"ok": true}')
    script = textwrap.dedent(
        """
        import json
        if response.getStatusCode() != 200:
            api.fail("unexpected status")
        api.setValue("ok", json.loads(response.getResponseBody())["ok"])
        """
    )
    result = host.run_httpx(script, response)
    assert result.passed is True
    assert result.api.values == {"ok": True}
    assert result.response.headers["Content-Type"] == ["application/json"]
    assert host.run_httpx("", response) is None


@pytest.mark.parametrize(
    "script",
    [
        "api.setValue('m', {(1, 2): 1})\napi.setValue('n', 1)",
        "loop = []\nloop.append(loop)\napi.setValue('m', loop)\napi.setValue('n', 1)",
    ],
)
def test_run_post_script_keeps_result_when_a_value_cannot_be_encoded(script):
    result = run_post_script(script, _response(), settings=ScriptSettings())
    assert result is not None
    assert result.api.values["n"] == 1
    assert isinstance(result.api.values["m"], str)
    assert result.passed is True


@pytest.mark.parametrize(
    "script",
    [
        "api.fail('never')\nyield 1",
        "x = yield from []",
        "await something()",
        "if True:\n    for i in range(3):\n        yield i",
    ],
)
def test_compile_rejects_top_level_yield_and_await(script):
    with pytest.raises(ScriptCompileError):
        run_post_script(script, _response(), settings=ScriptSettings())


def test_compile_allows_yield_inside_nested_functions():
    script = textwrap.dedent(
        """
        def numbers():
            yield 1
            yield 2
        api.setValue("total", sum(numbers()))
        """
    )
    result = run_post_script(script, _response(), settings=ScriptSettings())
    assert result.api.values == {"total": 3}


@pytest.mark.parametrize("script, message", [("exit(3)", "3"), ("import sys\nsys.exit('bye')", "bye"), ("raise SystemExit", "")])
def test_run_post_script_records_exit_as_failure(script, message):
    result = run_post_script(script, _response(), settings=ScriptSettings())
    assert result.api.is_failed is True
    assert result.api.error_message == message


def test_compile_post_script_default_filename():
    from dialscript.config import DEFAULT_SCRIPT_FILENAME

    code = compile_post_script("api.setValue('a', 1)")
    assert code.co_filename == DEFAULT_SCRIPT_FILENAME

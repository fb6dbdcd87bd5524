"""
Test suite for PistonClient.

Uses httpx.MockTransport to stand in for the Piston API.
"""

import json

import httpx
import pytest

from talentiq.boundary.execution import PistonClient


def _client(handler) -> PistonClient:
    http = httpx.AsyncClient(
        base_url="https://piston.test/api/v2/piston",
        transport=httpx.MockTransport(handler),
    )
    return PistonClient(http_client=http)


async def test_execute_posts_runtime_and_returns_output():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"run": {"output": "hello\n", "stderr": ""}})

    client = _client(handler)
    result = await client.execute("python", "print('hello')")
    await client.aclose()

    assert result.success is True
    assert result.output == "hello\n"
    assert result.error is None
    assert seen["path"] == "/api/v2/piston/execute"
    assert seen["body"] == {
        "language": "python3",
        "version": "3.9.1",
        "files": [{"name": "main.py", "content": "print('hello')"}],
    }


@pytest.mark.parametrize(
    "language,runtime,filename",
    [("javascript", "javascript", "main.js"), ("java", "java", "main.java")],
)
async def test_execute_maps_languages(language, runtime, filename):
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"run": {"output": "", "stderr": ""}})

    await _client(handler).execute(language, "code")

    assert bodies[0]["language"] == runtime
    assert bodies[0]["files"][0]["name"] == filename


async def test_execute_reports_stderr_as_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={"run": {"output": "Traceback...\n", "stderr": "NameError: x"}},
        )

    result = await _client(handler).execute("python", "x")

    assert result.success is False
    assert result.output == "Traceback...\n"
    assert result.error == "NameError: x"


async def test_execute_unsupported_language_makes_no_request():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    result = await _client(handler).execute("ruby", "puts 1")

    assert result.success is False
    assert result.error == "Unsupported language - ruby"


async def test_execute_http_error_status():
    result = await _client(lambda request: httpx.Response(503)).execute("python", "1")

    assert result.success is False
    assert result.error == "HTTP error - status 503"


async def test_execute_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = await _client(handler).execute("python", "1")

    assert result.success is False
    assert result.error == "Error executing code - connection refused"

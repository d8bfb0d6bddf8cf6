"""Shared fixtures: a recording fake of the API client and an httpx mock server."""
import httpx
import pytest

from clinic_client.config import Settings

API_URL = "http://clinic.test/api"


class FakeApi:
    """Records verb calls and raises queued errors per (verb, path)."""

    def __init__(self):
        self.calls = []
        self.failures = {}

    def fail(self, verb: str, path: str, *errors):
        self.failures.setdefault((verb, path), []).extend(errors)

    async def _call(self, verb, path, body=None, options=None):
        self.calls.append((verb, path, body))
        pending = self.failures.get((verb, path))
        if pending:
            raise pending.pop(0)
        return {"verb": verb, "path": path}

    async def get(self, path, options=None):
        return await self._call("get", path, None, options)

    async def post(self, path, body=None, options=None):
        return await self._call("post", path, body, options)

    async def put(self, path, body=None, options=None):
        return await self._call("put", path, body, options)

    async def patch(self, path, body=None, options=None):
        return await self._call("patch", path, body, options)

    async def delete(self, path, options=None):
        return await self._call("delete", path, None, options)


class MockServer:
    """httpx.MockTransport handler that can be switched off to simulate no connectivity."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.reachable = True
        self.routes = {}

    def route(self, method: str, path: str, status: int = 200, json=None):
        self.routes[(method, path)] = (status, json)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if not self.reachable:
            raise httpx.ConnectError("Connection refused", request=request)
        self.requests.append(request)
        status, body = self.routes.get((request.method, request.url.path), (200, {"success": True}))
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def server() -> MockServer:
    return MockServer()


@pytest.fixture
def settings() -> Settings:
    return Settings(api_url=API_URL, timeout=5.0, token=None, probe_interval=0)

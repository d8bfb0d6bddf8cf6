"""ApiClient against an httpx.MockTransport server."""
import asyncio
import json

import httpx
import pytest

from clinic_client.api import ApiClient
from clinic_client.errors import ApiConnectionError, ApiError
from clinic_client.storage import AUTH_TOKEN, REMEMBER_ME, USER_DATA, TokenStore


def run(coro):
    return asyncio.run(coro)


async def call(settings, server, store, method, *args):
    async with ApiClient(settings, store, transport=server.transport) as api:
        return await getattr(api, method)(*args)


def test_paths_are_relative_to_base_url_and_token_is_injected(settings, server):
    store = TokenStore("secret-token")

    response = run(call(settings, server, store, "get", "/pacientes", {"params": {"page": 2}}))

    assert response.status_code == 200
    request = server.requests[0]
    assert request.url.path == "/api/pacientes"
    assert request.url.params["page"] == "2"
    assert request.headers["Authorization"] == "Bearer secret-token"
    assert request.headers["Accept"] == "application/json"


def test_no_authorization_header_without_token(settings, server):
    run(call(settings, server, TokenStore(), "get", "/dashboard/resumen"))

    assert "Authorization" not in server.requests[0].headers


def test_body_is_sent_as_json(settings, server):
    run(call(settings, server, TokenStore(), "patch", "/citas/4/estado", {"estado": "completada"}))

    request = server.requests[0]
    assert request.method == "PATCH"
    assert json.loads(request.read()) == {"estado": "completada"}


def test_error_status_raises_api_error_with_server_message(settings, server):
    server.route("GET", "/api/pacientes/99", status=404, json={"success": False, "message": "Paciente no encontrado"})

    with pytest.raises(ApiError) as exc_info:
        run(call(settings, server, TokenStore(), "get", "/pacientes/99"))

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Paciente no encontrado"
    assert exc_info.value.payload["success"] is False


def test_unauthorized_clears_stored_auth(settings, server):
    server.route("GET", "/api/auth/perfil", status=401, json={"message": "Token inválido"})
    store = TokenStore("expired")
    store.set(USER_DATA, {"id": 1})
    store.set(REMEMBER_ME, True)

    with pytest.raises(ApiError):
        run(call(settings, server, store, "get", "/auth/perfil"))

    assert store.get(AUTH_TOKEN) is None
    assert store.get(USER_DATA) is None
    assert store.get(REMEMBER_ME) is None


def test_no_response_raises_connection_error(settings, server):
    server.reachable = False

    with pytest.raises(ApiConnectionError) as exc_info:
        run(call(settings, server, TokenStore(), "post", "/movimientos", {"monto": 10}))

    error = exc_info.value
    assert error.code == "CONNECTION_ERROR"
    assert isinstance(error.original_error, httpx.ConnectError)
    assert settings.api_url in str(error)

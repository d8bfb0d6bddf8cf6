import httpx
import logging
from typing import Any

from clinic_client.config import Settings
from clinic_client.errors import ApiError, ApiConnectionError
from clinic_client.storage import TokenStore

logger = logging.getLogger(__name__)


class ApiClient:
    """Cliente HTTP asíncrono para la API de la clínica.

    Todas las rutas son relativas a ``settings.api_url``. El token Bearer se
    toma del ``TokenStore`` en cada petición, así un login o un 401 se reflejan
    de inmediato sin recrear el cliente.

    Errores:
    - ``ApiConnectionError`` si no hubo respuesta (``httpx.RequestError``).
    - ``ApiError`` si el servidor respondió con un estado no 2xx.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        token_store: TokenStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or Settings()
        self.token_store = token_store or TokenStore(self.settings.token)
        self._client = httpx.AsyncClient(
            base_url=self.settings.api_url,
            timeout=self.settings.timeout,
            headers=self.settings.headers,
            transport=transport,
            event_hooks={"request": [self._inject_auth]},
        )

    async def _inject_auth(self, request: httpx.Request):
        token = self.token_store.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def request(self, method: str, path: str, body: Any = None, options: dict | None = None) -> httpx.Response:
        options = options or {}
        kwargs: dict[str, Any] = {}
        if options.get("params"):
            kwargs["params"] = options["params"]
        if options.get("headers"):
            kwargs["headers"] = options["headers"]
        if "timeout" in options:
            kwargs["timeout"] = options["timeout"]
        if body is not None:
            if isinstance(body, (bytes, str)):
                kwargs["content"] = body
            else:
                kwargs["json"] = body

        try:
            response = await self._client.request(method.upper(), path, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            raise self._application_error(e.response) from e
        except httpx.RequestError as e:
            logger.error(f"Connection error on {method.upper()} {path}: backend unreachable at {self.settings.api_url} ({type(e).__name__}: {e})")
            raise ApiConnectionError(
                f"Error de conexión. Verifica que el backend esté ejecutándose en {self.settings.api_url}",
                original_error=e,
            ) from e

    def _application_error(self, response: httpx.Response) -> ApiError:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        message = response.reason_phrase or "Error"
        if isinstance(payload, dict) and payload.get("message"):
            message = str(payload["message"])

        if response.status_code == 401:
            # Token expirado o inválido
            logger.info("Received 401, clearing stored authentication data")
            self.token_store.clear_auth()
        logger.error(f"HTTP error {response.status_code} on {response.request.method} {response.request.url}: {message}")
        return ApiError(response.status_code, message, payload)

    async def get(self, path: str, options: dict | None = None) -> httpx.Response:
        return await self.request("GET", path, options=options)

    async def post(self, path: str, body: Any = None, options: dict | None = None) -> httpx.Response:
        return await self.request("POST", path, body, options)

    async def put(self, path: str, body: Any = None, options: dict | None = None) -> httpx.Response:
        return await self.request("PUT", path, body, options)

    async def patch(self, path: str, body: Any = None, options: dict | None = None) -> httpx.Response:
        return await self.request("PATCH", path, body, options)

    async def delete(self, path: str, options: dict | None = None) -> httpx.Response:
        return await self.request("DELETE", path, options=options)

    async def close(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

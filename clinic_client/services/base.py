from clinic_client.dates import MX_TZ


def _json(response):
    # 204 y demás respuestas sin cuerpo
    if not response.content:
        return None
    return response.json()


class BaseService:
    """Servicio de dominio sobre ``ApiClient``: devuelve siempre el JSON de la respuesta.

    ``tz`` es la zona horaria con la que se convierten las fechas de las rutas.
    """

    resource = ""

    def __init__(self, api, tz: str = MX_TZ):
        self.api = api
        self.tz = tz

    def _path(self, *parts) -> str:
        return "/".join([self.resource, *(str(p) for p in parts)])

    async def _get(self, path: str, params: dict | None = None):
        options = {"params": params} if params else None
        response = await self.api.get(path, options)
        return _json(response)

    async def _send(self, method: str, path: str, body=None):
        response = await getattr(self.api, method)(path, body)
        return _json(response)

    async def _delete(self, path: str):
        response = await self.api.delete(path)
        return _json(response)


class CrudService(BaseService):
    async def list(self, params: dict | None = None):
        return await self._get(self.resource, params)

    async def get(self, item_id):
        return await self._get(self._path(item_id))

    async def create(self, data: dict):
        return await self._send("post", self.resource, data)

    async def update(self, item_id, data: dict):
        return await self._send("put", self._path(item_id), data)

    async def delete(self, item_id):
        return await self._delete(self._path(item_id))

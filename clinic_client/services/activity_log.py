from clinic_client.services.base import BaseService


class ActivityLogService(BaseService):
    """Bitácora de acciones de los usuarios."""

    resource = "/bitacora"

    async def list(self, page: int = 1, limit: int = 20, accion: str | None = None, entidad: str | None = None):
        params = {"page": page, "limit": limit}
        if accion:
            params["accion"] = accion
        if entidad:
            params["entidad"] = entidad
        return await self._get(self.resource, params)

    async def create(self, entry: dict):
        return await self._send("post", self.resource, entry)

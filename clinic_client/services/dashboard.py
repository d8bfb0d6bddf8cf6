from clinic_client.services.base import BaseService


class DashboardService(BaseService):
    resource = "/dashboard"

    async def summary(self):
        return await self._get(self._path("resumen"))

    async def statistics(self, period: str):
        return await self._get(self._path("estadisticas"), {"periodo": period})

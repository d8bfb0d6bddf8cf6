from clinic_client.dates import api_date
from clinic_client.services.base import BaseService


class ReportService(BaseService):
    resource = "/reportes"

    async def generate_daily(self, day):
        # El PDF lo genera el servidor; aquí sólo se dispara y se recibe el registro
        return await self._send("post", self._path("generar", api_date(day, self.tz)))

    async def list(self, params: dict | None = None):
        return await self._get(self.resource, params)

    async def get(self, report_id):
        return await self._get(self._path(report_id))

from clinic_client.dates import api_date
from clinic_client.services.base import CrudService

MOVEMENT_TYPES = ("ingreso", "egreso")
PAYMENT_METHODS = ("efectivo", "tarjeta", "transferencia", "cheque", "deposito")


class FinancialService(CrudService):
    """Movimientos financieros (ingresos / egresos)."""

    resource = "/movimientos"

    async def daily_balance(self, day):
        return await self._get(self._path("balance", api_date(day, self.tz)))

    async def history(self, params: dict | None = None):
        return await self._get(self._path("historial"), params)

from clinic_client.dates import api_date
from clinic_client.services.base import CrudService

APPOINTMENT_TYPES = ("terapia_individual", "terapia_grupal", "evento_especial", "consulta", "visita_familiar")
STATUSES = ("programada", "en_proceso", "completada", "cancelada", "no_asistio")


class AppointmentService(CrudService):
    resource = "/citas"

    async def change_status(self, appointment_id, status: str, notes: str | None = None):
        if status not in STATUSES:
            raise ValueError(f"Estado de cita no válido: {status}")
        body = {"estado": status}
        if notes is not None:
            body["notas"] = notes
        return await self._send("patch", self._path(appointment_id, "estado"), body)

    async def by_date(self, day):
        return await self._get(self._path("dia", api_date(day, self.tz)))

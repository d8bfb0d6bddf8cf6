from clinic_client.services.base import CrudService


class PatientService(CrudService):
    resource = "/pacientes"

    async def search(self, query: str):
        return await self._get(self._path("buscar"), {"q": query})

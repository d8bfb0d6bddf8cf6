import logging

from clinic_client.errors import ApiConnectionError
from clinic_client.services.base import BaseService
from clinic_client.storage import USER_DATA, REMEMBER_ME, AUTH_TOKEN

logger = logging.getLogger(__name__)


class AuthService(BaseService):
    resource = "/auth"

    async def login(self, email: str, password: str, remember_me: bool = False) -> dict:
        try:
            data = await self._send("post", self._path("login"), {"email": email, "password": password})
        except ApiConnectionError as e:
            logger.error(f"Login failed, backend unreachable: {e}")
            raise ApiConnectionError("Error de conexión. Verifica que el backend esté ejecutándose.", e.original_error) from e

        payload = (data.get("data") or {}) if isinstance(data, dict) else {}
        token = payload.get("token")
        if token:
            store = self.api.token_store
            store.set(AUTH_TOKEN, token)
            store.set(USER_DATA, payload.get("usuario"))
            store.set(REMEMBER_ME, remember_me)
            logger.info(f"Logged in as {email}")
        else:
            logger.warning(f"Login response for {email} did not include a token")
        return data

    def logout(self):
        self.api.token_store.clear_auth()

    async def get_profile(self) -> dict:
        return await self._get(self._path("perfil"))

    async def update_profile(self, profile_data: dict) -> dict:
        return await self._send("put", self._path("perfil"), profile_data)

    async def change_password(self, current_password: str, new_password: str) -> dict:
        return await self._send("put", self._path("cambiar-password"), {
            "passwordActual": current_password,
            "passwordNueva": new_password,
        })

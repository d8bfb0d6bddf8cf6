import logging
from typing import Any

logger = logging.getLogger(__name__)

AUTH_TOKEN = "auth_token"
USER_DATA = "user_data"
REMEMBER_ME = "remember_me"

AUTH_KEYS = (AUTH_TOKEN, USER_DATA, REMEMBER_ME)


class TokenStore:
    """Almacén en memoria para el token y los datos de sesión del usuario."""

    def __init__(self, token: str | None = None):
        self._data: dict[str, Any] = {}
        if token:
            self._data[AUTH_TOKEN] = token

    def get(self, key: str, default=None):
        return self._data.get(key, default)

    def set(self, key: str, value: Any):
        self._data[key] = value

    def remove(self, key: str):
        self._data.pop(key, None)

    @property
    def token(self) -> str | None:
        return self._data.get(AUTH_TOKEN)

    def clear_auth(self):
        """Elimina token, datos de usuario y la preferencia "recordarme"."""
        for key in AUTH_KEYS:
            self._data.pop(key, None)
        logger.info("Authentication data cleared")

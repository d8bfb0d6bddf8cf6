"""Jerarquía de errores del cliente de la API de la clínica."""


class ClinicClientError(Exception):
    """Base de todos los errores del cliente."""


class ApiError(ClinicClientError):
    """El servidor respondió con un estado no 2xx (error de aplicación)."""

    def __init__(self, status_code: int, message: str, payload=None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.payload = payload

    def __str__(self):
        return f"{self.status_code}: {self.message}"


class ApiConnectionError(ClinicClientError):
    """No se recibió ninguna respuesta (timeout, DNS, TLS, conexión rechazada...)."""

    code = "CONNECTION_ERROR"

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class QueuedForLaterError(ClinicClientError):
    """La petición no se ejecutó ahora y quedó en la cola de sincronización."""

    OFFLINE = "offline"
    CONNECTION_ERROR = "connection_error"

    MESSAGES = {
        OFFLINE: "Sin conexión. Petición guardada para sincronización posterior.",
        CONNECTION_ERROR: "Petición agregada a la cola de sincronización",
    }

    def __init__(self, request, reason: str):
        super().__init__(self.MESSAGES.get(reason, self.MESSAGES[self.CONNECTION_ERROR]))
        self.request = request
        self.reason = reason

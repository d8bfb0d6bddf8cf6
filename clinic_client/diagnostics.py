import logging

from clinic_client.errors import ApiConnectionError, ApiError

logger = logging.getLogger(__name__)


async def check_backend(session) -> tuple[bool, str]:
    """Prueba de conexión: pide un paciente y devuelve (ok, mensaje para el usuario)."""
    logger.info("Testing backend connection...")
    try:
        response = await session.patients.list({"limit": 1})
    except ApiConnectionError as e:
        logger.error(f"Connection test failed: {e}")
        return False, f"No se pudo conectar con el backend. Detalles: {e}"
    except ApiError as e:
        logger.error(f"Connection test got an error response: {e}")
        return False, f"Backend respondió pero con error: {e.message}"

    if isinstance(response, dict) and response.get("success"):
        return True, "Conexión con el backend exitosa"
    message = response.get("message") if isinstance(response, dict) else None
    return False, f"Backend respondió pero con error: {message or 'Desconocido'}"

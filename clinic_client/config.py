import os
import logging
from dataclasses import dataclass, field

# --- Configuración desde variables de entorno ---
API_URL = os.getenv("CLINIC_API_URL", "https://asocrista.onrender.com/api")
API_TIMEOUT = float(os.getenv("CLINIC_API_TIMEOUT", "30.0"))  # 30 s para conexiones móviles
API_TOKEN = os.getenv("CLINIC_API_TOKEN")
PROBE_URL = os.getenv("CLINIC_PROBE_URL")
PROBE_INTERVAL = float(os.getenv("CLINIC_PROBE_INTERVAL", "15.0"))
TIMEZONE = os.getenv("CLINIC_TIMEZONE", "America/Mexico_City")

LOG_FILE = os.getenv("CLINIC_LOG_FILE", "clinic_client.log")
LOG_LEVEL = os.getenv("CLINIC_LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "Cache-Control": "no-cache",
}


def default_probe_url(api_url: str) -> str:
    """URL raíz del servidor (la API responde en "/" con un mensaje de estado)."""
    base = api_url.rstrip("/")
    if base.endswith("/api"):
        base = base[: -len("/api")]
    return base + "/"


@dataclass
class Settings:
    api_url: str = API_URL
    timeout: float = API_TIMEOUT
    token: str | None = API_TOKEN
    probe_url: str | None = PROBE_URL
    probe_interval: float = PROBE_INTERVAL
    timezone: str = TIMEZONE
    headers: dict = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    def __post_init__(self):
        self.api_url = self.api_url.rstrip("/")
        if not self.probe_url:
            self.probe_url = default_probe_url(self.api_url)

    @classmethod
    def from_env(cls) -> "Settings":
        """Vuelve a leer el entorno (útil si cambió después de importar el módulo)."""
        return cls(
            api_url=os.getenv("CLINIC_API_URL", API_URL),
            timeout=float(os.getenv("CLINIC_API_TIMEOUT", str(API_TIMEOUT))),
            token=os.getenv("CLINIC_API_TOKEN", API_TOKEN),
            probe_url=os.getenv("CLINIC_PROBE_URL", PROBE_URL),
            probe_interval=float(os.getenv("CLINIC_PROBE_INTERVAL", str(PROBE_INTERVAL))),
            timezone=os.getenv("CLINIC_TIMEZONE", TIMEZONE),
        )


def configure_logging(log_file: str | None = LOG_FILE, level: str = LOG_LEVEL):
    """Configura el logging básico: archivo + consola."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )

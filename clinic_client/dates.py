from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from clinic_client.config import TIMEZONE

MX_TZ = TIMEZONE

MONTHS_ES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)


def to_iso_date(value: date | datetime | None = None, tz: str = MX_TZ) -> str:
    """Fecha YYYY-MM-DD en la zona horaria de la clínica."""
    if value is None:
        value = datetime.now(ZoneInfo(tz))
    elif isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(ZoneInfo(tz))
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def today_iso(tz: str = MX_TZ) -> str:
    return to_iso_date(None, tz)


def yesterday_iso(tz: str = MX_TZ) -> str:
    return to_iso_date(datetime.now(ZoneInfo(tz)) - timedelta(days=1), tz)


def tomorrow_iso(tz: str = MX_TZ) -> str:
    return to_iso_date(datetime.now(ZoneInfo(tz)) + timedelta(days=1), tz)


def parse_iso_date(iso_date: str | None, noon: bool = True) -> datetime | None:
    # A mediodía para que un cambio de zona no lo mueva al día anterior
    if not iso_date:
        return None
    d = date.fromisoformat(iso_date)
    return datetime.combine(d, time(12, 0) if noon else time(0, 0))


def format_date_es(value: date | datetime | str | None) -> str:
    """Ej.: 5 de marzo de 2025."""
    if not value:
        return ""
    if isinstance(value, str):
        value = parse_iso_date(value[:10])
    return f"{value.day} de {MONTHS_ES[value.month - 1]} de {value.year}"


def api_date(value: date | datetime | str, tz: str = MX_TZ) -> str:
    """Normaliza una fecha recibida por los servicios al formato de la API."""
    if isinstance(value, str):
        return value
    return to_iso_date(value, tz)

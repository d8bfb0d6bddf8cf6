"""Reglas de validación de formularios (pacientes, citas, movimientos financieros).

Cada regla recibe el valor del campo y devuelve ``None`` si es válido o el
mensaje de error para mostrar al usuario.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Callable

from clinic_client import dates
from clinic_client.services.appointments import APPOINTMENT_TYPES
from clinic_client.services.financial import MOVEMENT_TYPES, PAYMENT_METHODS

NAME_RE = re.compile(r"^[a-zA-ZáéíóúÁÉÍÓÚñÑüÜ\s]+$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE = re.compile(r"^\+?[1-9]\d{0,15}$")
TIME_RE = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")

PASSWORD_MIN_LENGTH = 6
NAME_MIN_LENGTH = 2

Rule = Callable[[object], str | None]


def _text(value) -> str:
    if value is None:
        return ""
    return str(value)


def _blank(value) -> bool:
    return _text(value).strip() == ""


def _parse_date(value) -> date | None:
    if isinstance(value, str):
        text = value.strip()
        # fromisoformat no acepta el sufijo "Z" antes de Python 3.11
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            return None
    if isinstance(value, datetime):
        # Las fechas con zona se comparan en la zona de la clínica
        return date.fromisoformat(dates.to_iso_date(value))
    if isinstance(value, date):
        return value
    return None


def _today() -> date:
    return date.fromisoformat(dates.today_iso())


def _parse_time(value) -> time | None:
    if not TIME_RE.match(_text(value)):
        return None
    hours, minutes = _text(value).split(":")
    return time(int(hours), int(minutes))


def name(value):
    if _blank(value):
        return "Este campo es requerido"
    text = _text(value)
    if len(text.strip()) < NAME_MIN_LENGTH:
        return "Debe tener al menos 2 caracteres"
    if not NAME_RE.match(text):
        return "Solo se permiten letras y espacios"
    if len(text.strip()) > 50:
        return "No puede exceder 50 caracteres"
    return None


def email(value):
    if _blank(value):
        return "El email es requerido"
    if not EMAIL_RE.match(_text(value)):
        return "El email no es válido"
    return None


def phone(value):
    if _blank(value):
        return None  # opcional
    if not PHONE_RE.match(re.sub(r"\s", "", _text(value))):
        return "El teléfono no es válido"
    return None


def password(value):
    text = _text(value)
    if not text:
        return "La contraseña es requerida"
    if len(text) < PASSWORD_MIN_LENGTH:
        return "Debe tener al menos 6 caracteres"
    if len(text) > 50:
        return "No puede exceder 50 caracteres"
    return None


def age(value):
    if _blank(value):
        return None  # opcional
    try:
        years = int(_text(value).strip())
    except ValueError:
        return "La edad debe ser un número"
    if years < 0:
        return "La edad no puede ser negativa"
    if years > 150:
        return "La edad no puede ser mayor a 150 años"
    return None


def past_date(value):
    """Fecha opcional que no puede ser futura (nacimiento, movimientos)."""
    if _blank(value):
        return None
    parsed = _parse_date(value)
    if parsed is None:
        return "La fecha no es válida"
    if parsed > _today():
        return "La fecha no puede ser futura"
    return None


def future_date(value):
    """Fecha requerida de hoy en adelante (citas)."""
    if _blank(value):
        return "La fecha es requerida"
    parsed = _parse_date(value)
    if parsed is None:
        return "La fecha no es válida"
    if parsed < _today():
        return "La fecha no puede ser pasada"
    return None


def time_of_day(value):
    if _blank(value):
        return "La hora es requerida"
    if not TIME_RE.match(_text(value)):
        return "La hora debe estar en formato HH:MM"
    return None


def amount(value):
    if _blank(value):
        return "El monto es requerido"
    return None


def description(value):
    if _blank(value):
        return "La descripción es requerida"
    return None


def title(value):
    if _blank(value):
        return "El título es requerido"
    length = len(_text(value).strip())
    if length < 3:
        return "Debe tener al menos 3 caracteres"
    if length > 200:
        return "No puede exceder 200 caracteres"
    return None


def _max_length(limit: int, minimum: int = 0) -> Rule:
    def rule(value):
        if _blank(value):
            return None  # opcional
        length = len(_text(value).strip())
        if minimum and length < minimum:
            return f"Debe tener al menos {minimum} caracteres"
        if length > limit:
            return f"No puede exceder {limit} caracteres"
        return None
    return rule


address = _max_length(300, minimum=5)
notes = _max_length(1000)
medical_history = _max_length(2000)


def required(message: str) -> Rule:
    return lambda value: message if _blank(value) else None


def one_of(choices, message: str) -> Rule:
    def rule(value):
        if _blank(value):
            return message
        if value not in choices:
            return f"Valor no permitido: {value}"
        return None
    return rule


@dataclass
class ValidationResult:
    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)


def validate_form(form_data: dict, rules: dict) -> ValidationResult:
    """Aplica ``rules`` (campo -> regla o {"validator": regla}) sobre ``form_data``."""
    errors = {}
    for field_name, rule in rules.items():
        if isinstance(rule, dict):
            rule = rule.get("validator")
        if not callable(rule):
            continue
        error = rule(form_data.get(field_name))
        if error:
            errors[field_name] = error
    return ValidationResult(is_valid=not errors, errors=errors)


# --- Formularios ---

def patient_rules(form_data: dict) -> dict:
    rules = {
        "nombre": name,
        "apellido": name,
        "telefono": phone,
        "telefono_emergencia": phone,
        "contacto_emergencia": name,
        "direccion": address,
        "historial_medico": medical_history,
    }
    # La edad sólo se valida si no se calcula a partir de la fecha de nacimiento
    if form_data.get("fecha_nacimiento"):
        rules["fecha_nacimiento"] = past_date
    else:
        rules["edad"] = age
    return rules


def appointment_rules(form_data: dict) -> dict:
    def end_time(value):
        error = time_of_day(value)
        if error:
            return error
        start = _parse_time(form_data.get("hora_inicio"))
        end = _parse_time(value)
        if start and end and end <= start:
            return "La hora de fin debe ser posterior a la hora de inicio"
        return None

    return {
        "paciente_id": required("Debe seleccionar un paciente"),
        "tipo": one_of(APPOINTMENT_TYPES, "Debe seleccionar un tipo"),
        "titulo": title,
        "descripcion": description,
        "fecha": future_date,
        "hora_inicio": time_of_day,
        "hora_fin": end_time,
        "notas": notes,
    }


def financial_rules(form_data: dict | None = None) -> dict:
    return {
        "tipo": one_of(MOVEMENT_TYPES, "Debe seleccionar un tipo"),
        "categoria": required("La categoría es requerida"),
        "descripcion": description,
        "monto": amount,
        "fecha": past_date,
        "metodo_pago": one_of(PAYMENT_METHODS, "El método de pago es requerido"),
    }


def validate_patient(form_data: dict) -> ValidationResult:
    return validate_form(form_data, patient_rules(form_data))


def validate_appointment(form_data: dict) -> ValidationResult:
    return validate_form(form_data, appointment_rules(form_data))


def validate_financial(form_data: dict) -> ValidationResult:
    return validate_form(form_data, financial_rules(form_data))


# --- Formateo ---

def clean_text(text) -> str:
    if not text:
        return ""
    return re.sub(r"\s+", " ", str(text).strip())


def format_name(value) -> str:
    if not value:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in str(value).lower().split(" "))


def format_phone(value) -> str:
    if not value:
        return ""
    return re.sub(r"\D", "", str(value))


def format_amount(value) -> str:
    if not value:
        return "0.00"
    try:
        return f"{float(value):.2f}"
    except (TypeError, ValueError):
        return "0.00"

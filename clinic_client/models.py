# Registros de la cola offline descritos con Pydantic.

import time
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class QueuedRequest(BaseModel):
    """Una llamada de red diferida."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str
    body: Any = None
    options: dict[str, Any] | None = None
    enqueued_at: float = Field(default_factory=time.time)
    attempts: int = 0

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, value):
        if isinstance(value, HttpMethod):
            return value
        try:
            return HttpMethod(str(value).upper())
        except ValueError:
            raise ValueError(f"Método HTTP no soportado: {value}") from None

    @field_validator("path")
    @classmethod
    def _non_empty_path(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("La ruta de la petición no puede estar vacía")
        return value

    def describe(self) -> str:
        return f"{self.method.value} {self.path}"


class SyncResult(BaseModel):
    synced: int = 0
    requeued: int = 0
    discarded: int = 0  # descartadas por clear_pending_requests() durante la pasada

"""Ciclo de vida de una invocación HTTP.

Por qué en el dominio:
- El controlador del catálogo decide qué mostrar a partir de estos estados;
  no necesita saber nada de httpx.
- `RequestLifecycle` es inmutable: el ejecutor lo reemplaza entero, nunca lo
  modifica por partes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from core.errors import TransportError


class LifecycleStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SETTLED = "settled"


@dataclass(frozen=True)
class ApiResponse:
    """Respuesta estructurada de la API (sobre JSON `{success, ...}`).

    `superseded` indica que, al completarse, ya existía una invocación más
    reciente en el mismo ejecutor.
    """

    status_code: int
    data: dict[str, Any] = field(default_factory=dict)
    superseded: bool = False

    @property
    def success(self) -> bool:
        return bool(self.data.get("success"))

    @property
    def message(self) -> str | None:
        message = self.data.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
        return None


@dataclass(frozen=True)
class RequestLifecycle:
    status: LifecycleStatus = LifecycleStatus.IDLE
    response: ApiResponse | None = None
    error: TransportError | None = None

    @property
    def is_pending(self) -> bool:
        return self.status is LifecycleStatus.PENDING

    @property
    def succeeded(self) -> bool:
        return self.status is LifecycleStatus.SETTLED and self.response is not None

    @property
    def failed(self) -> bool:
        return self.status is LifecycleStatus.SETTLED and self.error is not None

    @classmethod
    def pending(cls) -> "RequestLifecycle":
        return cls(status=LifecycleStatus.PENDING)

    @classmethod
    def settled(cls, response: ApiResponse) -> "RequestLifecycle":
        return cls(status=LifecycleStatus.SETTLED, response=response)

    @classmethod
    def errored(cls, error: TransportError) -> "RequestLifecycle":
        return cls(status=LifecycleStatus.SETTLED, error=error)

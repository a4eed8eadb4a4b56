"""Contrato del ejecutor de peticiones.

Por qué Protocol:
- El controlador del catálogo y los formularios dependen de este contrato, no
  del adaptador httpx concreto.
- Permite sustituir el ejecutor en tests sin herencia rígida.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from pydantic import BaseModel

from core.domain.requests import ApiResponse, RequestLifecycle


@runtime_checkable
class RequestRunner(Protocol):
    """Una pareja endpoint/método con ciclo de vida observable.

    Reglas de diseño:
    - `execute` es asíncrono y hace exactamente una llamada por invocación.
    - Un fallo de transporte deja el ciclo en Settled-error y lanza
      `core.errors.TransportError`.
    """

    @property
    def lifecycle(self) -> RequestLifecycle:
        ...

    async def execute(
        self,
        *,
        body: Mapping[str, Any] | BaseModel | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        ...

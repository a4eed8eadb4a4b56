"""Ejecutor genérico de peticiones (un endpoint/método, N invocaciones).

Qué hace:
- Recibe el descriptor del endpoint al construirse y los argumentos tipados
  (body/query) en cada invocación.
- Expone el ciclo de vida de la última invocación emitida: Idle, Pending,
  Settled (éxito con respuesta, o error con detalle).

Qué NO hace:
- No reintenta, no cachea, no cancela invocaciones en vuelo.

Invocaciones solapadas: cada una recibe un ticket creciente. Solo la última
emitida puede asentar el ciclo de vida; una anterior que termina después
devuelve su respuesta marcada como `superseded` y no toca el estado.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

import httpx
from pydantic import BaseModel

from core.domain.requests import ApiResponse, RequestLifecycle
from core.errors import TransportError

logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Endpoint:
    """Descriptor inmutable: ruta relativa a la base URL + método HTTP."""

    path: str
    method: HttpMethod = HttpMethod.GET

    def __str__(self) -> str:
        return f"{self.method.value} {self.path}"


class RequestExecutor:
    """Implementación httpx de `core.interfaces.RequestRunner`."""

    def __init__(self, endpoint: Endpoint, *, client: httpx.AsyncClient, name: str | None = None) -> None:
        self._endpoint = endpoint
        self._client = client
        self._name = name or str(endpoint)
        self._lifecycle = RequestLifecycle()
        self._issued = 0

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    @property
    def name(self) -> str:
        return self._name

    @property
    def lifecycle(self) -> RequestLifecycle:
        return self._lifecycle

    async def execute(
        self,
        *,
        body: Mapping[str, Any] | BaseModel | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        self._issued += 1
        ticket = self._issued
        self._lifecycle = RequestLifecycle.pending()
        logger.debug("%s #%d params=%s", self._name, ticket, dict(params or {}))

        try:
            response = await self._client.request(
                self._endpoint.method.value,
                self._endpoint.path,
                params=dict(params) if params else None,
                json=_encode_body(body),
            )
            result = self._parse(response)
        except TransportError as exc:
            self._settle(ticket, RequestLifecycle.errored(exc))
            raise
        except httpx.HTTPError as exc:
            error = TransportError(str(exc) or exc.__class__.__name__, endpoint=str(self._endpoint))
            self._settle(ticket, RequestLifecycle.errored(error))
            raise error from exc
        except BaseException as exc:
            # Cancelación u otro fallo inesperado: el ciclo no puede quedar en Pending.
            error = TransportError(f"request aborted: {exc.__class__.__name__}", endpoint=str(self._endpoint))
            self._settle(ticket, RequestLifecycle.errored(error))
            raise

        if ticket != self._issued:
            logger.debug("%s #%d superseded by #%d, response discarded", self._name, ticket, self._issued)
            return ApiResponse(status_code=result.status_code, data=result.data, superseded=True)

        self._lifecycle = RequestLifecycle.settled(result)
        return result

    def _settle(self, ticket: int, lifecycle: RequestLifecycle) -> None:
        if ticket != self._issued:
            logger.debug("%s #%d failed after being superseded: %s", self._name, ticket, lifecycle.error)
            return
        logger.warning("%s failed: %s", self._name, lifecycle.error)
        self._lifecycle = lifecycle

    def _parse(self, response: httpx.Response) -> ApiResponse:
        try:
            data = response.json()
        except ValueError:
            data = None

        if not isinstance(data, dict):
            detail = "response is not a JSON object"
            if response.is_error:
                detail = f"HTTP {response.status_code}"
            raise TransportError(detail, endpoint=str(self._endpoint), status_code=response.status_code)

        # Un 4xx/5xx con sobre `{success: false, ...}` es un fallo de dominio, no de transporte.
        if response.is_error and "success" not in data:
            raise TransportError(
                f"HTTP {response.status_code}",
                endpoint=str(self._endpoint),
                status_code=response.status_code,
            )

        return ApiResponse(status_code=response.status_code, data=data)


def _encode_body(body: Mapping[str, Any] | BaseModel | None) -> Any:
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    return dict(body)

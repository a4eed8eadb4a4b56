"""Errores del Core.

Solo el ejecutor de peticiones lanza `TransportError`; controlador y servicios
de formularios lo capturan y lo convierten en un mensaje de estado.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base de los errores de coursedeck."""


class TransportError(CatalogError):
    """Fallo de red/transporte o respuesta que no es un sobre JSON de la API."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        status = f"HTTP {self.status_code}" if self.status_code else None
        if status and status in base:
            status = None
        parts = [p for p in (self.endpoint, status) if p]
        if parts:
            return f"{base} ({', '.join(parts)})"
        return base

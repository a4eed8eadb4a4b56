"""Utilidades compartidas por los comandos de la CLI."""

from __future__ import annotations

from pydantic import ValidationError
from rich.console import Console

from core.config import AppSettings

console = Console()
err_console = Console(stderr=True)


def first_error_message(exc: ValidationError) -> str:
    """Mensaje legible del primer error de validación (sin el prefijo de pydantic)."""

    errors = exc.errors()
    if not errors:
        return str(exc)
    err = errors[0]
    message = str(err.get("msg", ""))
    message = message.removeprefix("Value error, ")
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {message}" if loc else message


def load_settings() -> AppSettings:
    return AppSettings()

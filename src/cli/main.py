"""Entry point de la CLI (Typer).

Por qué un módulo propio:
- Agrupa los sub-comandos (`courses`, `auth`, `doctor`) y la configuración de
  logging en un único sitio.
- `run()` es el script declarado en pyproject (`coursedeck`).
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from cli import auth, courses, doctor
from cli.common import err_console, load_settings

app = typer.Typer(no_args_is_help=True, help="coursedeck: terminal client for the course catalog API.")
app.add_typer(courses.app, name="courses")
app.add_typer(auth.app, name="auth")
app.add_typer(doctor.app, name="doctor")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    level = "DEBUG" if verbose else load_settings().log_level
    configure_logging(level)


def run() -> None:
    app()

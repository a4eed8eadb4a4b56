"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.table import Table

from adapters.catalog_api import CatalogApi
from adapters.http_client import build_async_client
from cli.common import console, load_settings
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.errors import TransportError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Pide la primera página del listado: valida red + formato del sobre."""

    async with build_async_client(settings) as client:
        executor = CatalogApi.from_client(client).list_courses
        try:
            response = await executor.execute(params={"page": 0, "size": settings.default_page_size})
        except TransportError as exc:
            return False, str(exc)
    if not response.success:
        return False, response.message or f"HTTP {response.status_code}, success=false"
    return True, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = load_settings()

    table = Table(title="coursedeck Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    if settings.auth_token:
        table.add_row("Auth token", "OK", "Bearer token configured")
    else:
        table.add_row("Auth token", "OPTIONAL", "Not signed in (coursedeck auth login --save)")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    # Connectivity (best-effort)
    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row("API /courses", "OK" if ok_api else "FAIL", detail_api)

    console.print(table)

    if not ok_api:
        console.print(
            "\n[yellow]Note:[/yellow] set COURSEDECK_API_BASE_URL or run `coursedeck doctor configure`."
        )
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive API setup (stores config in the user config .env)."""

    settings = load_settings()
    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()
    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base URL must start with http:// or https://")

    env_path = write_user_env_vars({"COURSEDECK_API_BASE_URL": base_url.rstrip("/")})
    console.print(f"[green]Saved API config to:[/green] {env_path}")

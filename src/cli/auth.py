"""Comandos de autenticación (login y registro)."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import typer
from pydantic import BaseModel, ValidationError

from adapters.catalog_api import CatalogApi
from adapters.http_client import build_async_client
from cli.common import console, err_console, first_error_message, load_settings
from core.config import AppSettings, write_user_env_vars
from core.domain.models import Credentials, LoginResponse, Registration
from core.interfaces.executor import RequestRunner
from core.services.forms import FormOutcome, login, register

app = typer.Typer(no_args_is_help=True, help="Sign in and create accounts.")


def _mask(token: str) -> str:
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}…{token[-4:]}"


def _validate(model: type[BaseModel], **values: str) -> BaseModel:
    try:
        return model(**values)
    except ValidationError as exc:
        raise typer.BadParameter(first_error_message(exc)) from exc


def _run(
    settings: AppSettings,
    action: Callable[[RequestRunner, Any], Awaitable[FormOutcome]],
    pick: Callable[[CatalogApi], RequestRunner],
    payload: BaseModel,
) -> FormOutcome:
    async def _go() -> FormOutcome:
        async with build_async_client(settings) as client:
            return await action(pick(CatalogApi.from_client(client)), payload)

    return asyncio.run(_go())


@app.command("login")
def login_cmd(
    username: str = typer.Option(..., "--username", "-u", prompt=True),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
    save: bool = typer.Option(False, "--save", help="Store the token in the user config .env."),
) -> None:
    """Sign in and obtain a session token."""

    credentials = _validate(Credentials, username=username, password=password)
    settings = load_settings()
    outcome = _run(settings, login, lambda api: api.login, credentials)
    if not outcome.ok:
        err_console.print(f"[bold red]{outcome.message}[/bold red]")
        raise typer.Exit(code=1)

    session: LoginResponse = outcome.entity
    name = (session.user or {}).get("username") or username
    console.print(f"[green]Welcome back, {name}![/green]")
    if not session.token:
        return
    if save:
        env_path = write_user_env_vars({"COURSEDECK_AUTH_TOKEN": session.token})
        console.print(f"[green]Saved token to:[/green] {env_path}")
    else:
        console.print(f"Token: {_mask(session.token)} (use --save to store it)", style="dim")


@app.command("register")
def register_cmd(
    username: str = typer.Option(..., "--username", "-u", prompt=True),
    email: str = typer.Option(..., "--email", "-e", prompt=True),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True, confirmation_prompt=True),
) -> None:
    """Create a new account."""

    registration = _validate(Registration, username=username, email=email, password=password)
    settings = load_settings()
    outcome = _run(settings, register, lambda api: api.register, registration)
    if not outcome.ok:
        err_console.print(f"[bold red]{outcome.message}[/bold red]")
        raise typer.Exit(code=1)
    console.print(f"[green]{outcome.message or 'Registration successful! You can now sign in.'}[/green]")

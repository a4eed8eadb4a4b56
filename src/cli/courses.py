"""Comandos del catálogo: listar, buscar, crear y sesión interactiva."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.prompt import Prompt

from adapters.catalog_api import CatalogApi
from adapters.http_client import build_async_client
from adapters.json_exporter import courses_to_json, export_courses_json
from cli.browse import BrowseSession, HELP_TEXT
from cli.common import console, err_console, first_error_message, load_settings
from cli.ui_components import build_course_panel, print_banner, render_display
from core.config import AppSettings
from core.domain.models import CourseDraft
from core.domain.query import QueryState, SortSpec
from core.services.catalog_controller import CatalogController, DisplayedResult
from core.services.forms import submit_course

app = typer.Typer(no_args_is_help=True, help="Browse, search and create courses.")


def _build_state(settings: AppSettings, page: int, size: int | None, sort: str | None) -> QueryState:
    try:
        return QueryState(
            page=page - 1,
            size=size or settings.default_page_size,
            sort=sort or settings.default_sort,
        )
    except ValidationError as exc:
        raise typer.BadParameter(first_error_message(exc)) from exc


async def _load(settings: AppSettings, state: QueryState, query: str | None = None) -> DisplayedResult:
    async with build_async_client(settings) as client:
        api = CatalogApi.from_client(client)
        controller = CatalogController(
            list_executor=api.list_courses,
            search_executor=api.search_courses,
            state=state,
        )
        if query is None:
            await controller.refresh()
        else:
            await controller.submit_search(query)
        return controller.display


def _emit(display: DisplayedResult, *, json_output: bool, output: Path | None) -> None:
    if display.error:
        err_console.print(f"[bold red]{display.error}[/bold red]")
        raise typer.Exit(code=1)

    if output is not None:
        path = export_courses_json(courses=display.records, output_path=output)
        console.print(f"[green]Saved {len(display.records)} courses to:[/green] {path}")
        return
    if json_output:
        typer.echo(courses_to_json(display.records), nl=False)
        return
    render_display(console, display)


@app.command("list")
def list_courses(
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number (1-based)."),
    size: int | None = typer.Option(None, "--size", "-s", help="Page size: 6, 10, 12 or 24."),
    sort: str | None = typer.Option(None, "--sort", help="field,direction (e.g. rating,desc)."),
    json_output: bool = typer.Option(False, "--json", help="Print courses as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write courses as JSON to a file."),
) -> None:
    """List one page of the catalog."""

    settings = load_settings()
    state = _build_state(settings, page, size, sort)
    display = asyncio.run(_load(settings, state))
    _emit(display, json_output=json_output, output=output)


@app.command("search")
def search_courses(
    query: str = typer.Argument(..., help="Text matched against title, description and tags."),
    json_output: bool = typer.Option(False, "--json", help="Print courses as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write courses as JSON to a file."),
) -> None:
    """Full-text search (an empty query lists the catalog instead)."""

    settings = load_settings()
    state = _build_state(settings, 1, None, None)
    display = asyncio.run(_load(settings, state, query=query))
    _emit(display, json_output=json_output, output=output)


@app.command("sorts")
def list_sorts() -> None:
    """Show accepted sort values."""

    for spec in SortSpec.choices():
        console.print(f"{spec.as_param():<18} {spec.label()}")


@app.command("create")
def create_course(
    title: str = typer.Option(..., "--title", help="Course title."),
    description: str = typer.Option("", "--description", help="Course description."),
    instructor: str = typer.Option("", "--instructor", help="Instructor name."),
    tag: list[str] | None = typer.Option(None, "--tag", "-t", help="Tag (repeatable)."),
) -> None:
    """Create a new course."""

    try:
        draft = CourseDraft(title=title, description=description, instructor=instructor, tags=tag or [])
    except ValidationError as exc:
        raise typer.BadParameter(first_error_message(exc)) from exc

    settings = load_settings()

    async def _create():
        async with build_async_client(settings) as client:
            return await submit_course(CatalogApi.from_client(client).create_course, draft)

    outcome = asyncio.run(_create())
    if not outcome.ok:
        err_console.print(f"[bold red]{outcome.message}[/bold red]")
        raise typer.Exit(code=1)
    if outcome.entity is not None:
        console.print(build_course_panel(outcome.entity))
    else:
        console.print("[green]Course created successfully![/green]")


@app.command("browse")
def browse(
    page: int = typer.Option(1, "--page", "-p", min=1, help="Initial page (1-based)."),
    size: int | None = typer.Option(None, "--size", "-s", help="Initial page size."),
    sort: str | None = typer.Option(None, "--sort", help="Initial sort."),
) -> None:
    """Interactive catalog session (pagination, sort, search)."""

    settings = load_settings()
    state = _build_state(settings, page, size, sort)
    print_banner(console)
    console.print(HELP_TEXT, style="dim")

    async def _session() -> None:
        async with build_async_client(settings) as client:
            api = CatalogApi.from_client(client)
            session = BrowseSession(
                CatalogController(
                    list_executor=api.list_courses,
                    search_executor=api.search_courses,
                    state=state,
                )
            )
            await session.controller.refresh()
            while True:
                render_display(console, session.controller.display)
                if session.notice:
                    console.print(session.notice, style="yellow")
                raw = await asyncio.to_thread(Prompt.ask, "[cyan]catalog[/cyan]", console=console)
                if not await session.handle(raw):
                    break

    asyncio.run(_session())

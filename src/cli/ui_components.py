"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles entre `courses list`, `search` y `browse`.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Course
from core.domain.query import Mode
from core.services.catalog_controller import DisplayedResult, EmptyState


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> comandos).
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("Course Catalog", style="bold cyan")
    subtitle = Text("Browse and discover courses", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _stars(rating: float) -> str:
    # Media estrella de precisión, como el widget original.
    halves = round(rating * 2)
    full, half = divmod(halves, 2)
    return "★" * full + ("½" if half else "") + "☆" * (5 - full - half)


def build_courses_table(courses: Sequence[Course], *, title: str = "Courses") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold cyan")
    table.add_column("Instructor", style="white")
    table.add_column("Rating", style="yellow", no_wrap=True)
    table.add_column("Visits", style="green", justify="right")
    table.add_column("Tags", style="magenta")
    table.add_column("Description", style="dim", overflow="ellipsis", max_width=48)

    for course in courses:
        table.add_row(
            str(course.id),
            course.title,
            course.instructor or "Unknown Instructor",
            f"{_stars(course.rating)} ({course.total_ratings})",
            str(course.total_visits),
            ", ".join(course.tags),
            course.description or "No description available",
        )
    return table


def build_empty_panel(empty: EmptyState) -> Panel:
    body = Text()
    body.append(empty.title + "\n", style="bold")
    body.append(empty.message, style="dim")
    if empty.action:
        body.append(f"\n\n[{empty.action}] → clear", style="cyan")
    return Panel(body, border_style="dim")


def build_status_line(display: DisplayedResult) -> Text:
    """Línea inferior: 'Showing X of Y courses' + página/orden o aviso de carga."""

    text = Text()
    if display.loading:
        text.append("Loading… ", style="bold yellow")
    text.append(f"Showing {len(display.records)} of {display.total} courses", style="dim")
    if display.pagination_enabled:
        pages = max(display.total_pages, 1)
        text.append(
            f"  •  page {display.page + 1}/{pages}  •  {display.size} per page  •  {display.sort.label()}",
            style="dim",
        )
    return text


def render_display(console: Console, display: DisplayedResult) -> None:
    """Pinta el estado completo de la vista de catálogo."""

    parts: list[object] = []
    if display.mode is Mode.SEARCH:
        parts.append(Text.assemble("Search results for: ", (display.search_text, "bold")))
    if display.error:
        parts.append(Text(display.error, style="bold red"))

    if display.empty_state is not None:
        parts.append(build_empty_panel(display.empty_state))
    elif display.records:
        parts.append(build_courses_table(display.records))

    parts.append(build_status_line(display))
    console.print(Group(*parts))


def build_course_panel(course: Course) -> Panel:
    """Detalle del curso recién creado."""

    body = Text()
    body.append(course.title + "\n", style="bold cyan")
    body.append(f"Instructor: {course.instructor or 'Unknown Instructor'}\n")
    body.append(f"Description: {course.description or 'No description available'}\n")
    if course.tags:
        body.append("Tags: " + ", ".join(course.tags))
    else:
        body.append("No tags added", style="dim")
    return Panel(body, title="Course created successfully!", border_style="green")

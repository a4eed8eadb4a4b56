"""Sesión interactiva del catálogo.

Traduce comandos de una línea (`n`, `p`, `s 12`, `f python`, `c`, ...) en
intenciones del `CatalogController`. No pinta nada: el bucle de `courses
browse` renderiza `controller.display` después de cada comando.
"""

from __future__ import annotations

from pydantic import ValidationError

from cli.common import first_error_message
from core.domain.query import Mode
from core.services.catalog_controller import CatalogController

HELP_TEXT = (
    "Commands: n(ext) | p(rev) | g <page> | s <size> | o <field,dir> | "
    "f <text> (search) | c (clear search) | r (refresh) | h (help) | q (quit)"
)

_PAGINATION_COMMANDS = {"n", "next", "p", "prev", "g", "goto", "s", "size", "o", "sort"}


class BrowseSession:
    def __init__(self, controller: CatalogController) -> None:
        self.controller = controller
        self.notice: str | None = None

    async def handle(self, raw: str) -> bool:
        """Ejecuta un comando. Devuelve `False` cuando el usuario sale."""

        self.notice = None
        command, _, arg = raw.strip().partition(" ")
        command = command.lower()
        arg = arg.strip()

        if command in ("q", "quit", "exit"):
            return False
        if command in ("", "h", "help", "?"):
            self.notice = HELP_TEXT
            return True

        display = self.controller.display
        if command in _PAGINATION_COMMANDS and display.mode is Mode.SEARCH:
            self.notice = "Pagination and sorting are disabled while searching (c to clear)."
            return True

        try:
            if command in ("n", "next"):
                if display.total_pages and display.page + 1 >= display.total_pages:
                    self.notice = "Already on the last page."
                else:
                    await self.controller.change_page(display.page + 1)
            elif command in ("p", "prev"):
                if display.page == 0:
                    self.notice = "Already on the first page."
                else:
                    await self.controller.change_page(display.page - 1)
            elif command in ("g", "goto"):
                await self.controller.change_page(int(arg) - 1)
            elif command in ("s", "size"):
                await self.controller.change_size(int(arg))
            elif command in ("o", "sort"):
                await self.controller.change_sort(arg)
            elif command in ("f", "find", "search", "/"):
                await self.controller.submit_search(arg)
            elif command in ("c", "clear"):
                await self.controller.clear_search()
            elif command in ("r", "refresh"):
                if display.mode is Mode.SEARCH:
                    await self.controller.submit_search()
                else:
                    await self.controller.refresh()
            else:
                self.notice = f"Unknown command {command!r}. {HELP_TEXT}"
        except ValidationError as exc:
            self.notice = first_error_message(exc)
        except ValueError as exc:
            self.notice = str(exc) or "Invalid value."
        return True

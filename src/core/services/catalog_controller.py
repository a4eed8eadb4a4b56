"""Controlador de la vista de catálogo (listado paginado vs. búsqueda).

Este módulo decide, en cada momento, qué petición es la autoridad sobre lo
que se muestra. Mantiene el `QueryState`, dispara el ejecutor de listado o el
de búsqueda según la intención del usuario y deriva el resultado visible con
una función pura (`derive_display`) en vez de guardarlo como estado propio.

Política de orden: cada invocación se etiqueta con un número de secuencia del
canal y con los parámetros con los que salió. Una respuesta solo se acepta si
sigue siendo la última del canal y su etiqueta coincide con el estado actual;
el resto se descarta sin tocar lo que se muestra.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from pydantic import ValidationError

from core.domain.models import Course, CourseListResponse, SearchResponse
from core.domain.query import Mode, QueryState, SortSpec
from core.domain.requests import RequestLifecycle
from core.errors import TransportError
from core.interfaces.executor import RequestRunner

logger = logging.getLogger(__name__)

BROWSE_TRANSPORT_ERROR = "Could not load courses. Please try again."
BROWSE_DOMAIN_ERROR = "Failed to load courses."
SEARCH_TRANSPORT_ERROR = "Search failed. Please try again."
SEARCH_DOMAIN_ERROR = "Search failed."

EMPTY_TITLE = "No courses found"
EMPTY_SEARCH_MESSAGE = "Try adjusting your search terms or clear the search to see all courses."
EMPTY_CATALOG_MESSAGE = "There are no courses available yet. Be the first to create one!"
CLEAR_SEARCH_ACTION = "View All Courses"


@dataclass(frozen=True)
class Listing:
    """Registros aceptados de un canal y su total."""

    records: tuple[Course, ...] = ()
    total: int = 0


@dataclass(frozen=True)
class ChannelView:
    """Lo que el controlador sabe de un canal: ciclo del ejecutor + último listado aceptado."""

    lifecycle: RequestLifecycle
    listing: Listing | None = None


@dataclass(frozen=True)
class EmptyState:
    title: str
    message: str
    action: str | None = None


@dataclass(frozen=True)
class DisplayedResult:
    mode: Mode
    records: tuple[Course, ...]
    total: int
    total_pages: int
    page: int
    size: int
    sort: SortSpec
    search_text: str
    loading: bool
    error: str | None
    empty_state: EmptyState | None
    pagination_enabled: bool


def derive_display(
    state: QueryState,
    browse: ChannelView,
    search: ChannelView,
    *,
    error: str | None = None,
) -> DisplayedResult:
    """Calcula el resultado visible a partir del modo y de ambos canales."""

    active = search if state.mode is Mode.SEARCH else browse
    listing = active.listing or Listing()
    loading = active.lifecycle.is_pending

    total_pages = 0
    if state.mode is Mode.BROWSE and listing.total:
        total_pages = math.ceil(listing.total / state.size)

    empty_state = None
    if not listing.records and not loading:
        if state.mode is Mode.SEARCH:
            empty_state = EmptyState(EMPTY_TITLE, EMPTY_SEARCH_MESSAGE, CLEAR_SEARCH_ACTION)
        else:
            empty_state = EmptyState(EMPTY_TITLE, EMPTY_CATALOG_MESSAGE)

    return DisplayedResult(
        mode=state.mode,
        records=listing.records,
        total=listing.total,
        total_pages=total_pages,
        page=state.page,
        size=state.size,
        sort=state.sort,
        search_text=state.search_text,
        loading=loading,
        error=error,
        empty_state=empty_state,
        pagination_enabled=state.mode is Mode.BROWSE,
    )


class CatalogController:
    """Máquina de estados Browse/Search sobre dos ejecutores independientes.

    Todas las intenciones son corrutinas; el estado se actualiza antes del
    primer `await`, así que el controlador sigue aceptando intenciones mientras
    hay una petición pendiente.
    """

    def __init__(
        self,
        *,
        list_executor: RequestRunner,
        search_executor: RequestRunner,
        state: QueryState | None = None,
    ) -> None:
        self._list = list_executor
        self._search = search_executor
        self._state = state or QueryState()
        self._browse_listing: Listing | None = None
        self._search_listing: Listing | None = None
        self._browse_seq = 0
        self._search_seq = 0
        self._submitted_query = ""
        self._error: str | None = None

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def display(self) -> DisplayedResult:
        return derive_display(
            self._state,
            ChannelView(self._list.lifecycle, self._browse_listing),
            ChannelView(self._search.lifecycle, self._search_listing),
            error=self._error,
        )

    # Intenciones del usuario

    async def refresh(self) -> None:
        await self._run_browse()

    async def change_page(self, page: int) -> None:
        await self._apply_browse_change(page=page)

    async def change_size(self, size: int) -> None:
        await self._apply_browse_change(size=size, page=0)

    async def change_sort(self, sort: str | SortSpec) -> None:
        await self._apply_browse_change(sort=SortSpec.parse(sort))

    def set_search_text(self, text: str) -> None:
        """Actualiza el texto sin enviarlo (equivale a escribir en la caja)."""

        self._state = self._state.evolve(search_text=text)

    async def submit_search(self, text: str | None = None) -> None:
        if text is not None:
            self._state = self._state.evolve(search_text=text)

        if not self._state.search_text.strip():
            logger.debug("empty search submitted, refreshing listing")
            self._state = self._state.evolve(mode=Mode.BROWSE)
            await self._run_browse()
            return

        self._state = self._state.evolve(mode=Mode.SEARCH)
        await self._run_search()

    async def clear_search(self) -> None:
        self._state = self._state.evolve(search_text="", mode=Mode.BROWSE)
        await self._run_browse()

    # Canales

    async def _apply_browse_change(self, **changes: object) -> None:
        self._state = self._state.evolve(**changes)
        if self._state.mode is Mode.SEARCH:
            # Controles deshabilitados en búsqueda: se conservan para cuando se limpie.
            logger.debug("pagination change kept for later, search mode active: %s", changes)
            return
        await self._run_browse()

    def _is_current_browse(self, seq: int, tag: tuple[int, int, str]) -> bool:
        return seq == self._browse_seq and tag == self._state.browse_key()

    def _is_current_search(self, seq: int, query: str) -> bool:
        return (
            seq == self._search_seq
            and self._state.mode is Mode.SEARCH
            and self._submitted_query == query
        )

    def _browse_may_report(self) -> bool:
        # La vista de búsqueda no muestra errores del canal de listado.
        return self._state.mode is Mode.BROWSE

    async def _run_browse(self) -> None:
        self._error = None
        self._browse_seq += 1
        seq = self._browse_seq
        tag = self._state.browse_key()
        logger.debug("browse #%d page=%d size=%d sort=%s", seq, *tag)

        try:
            response = await self._list.execute(params=self._state.browse_params())
        except TransportError:
            if self._is_current_browse(seq, tag) and self._browse_may_report():
                self._error = BROWSE_TRANSPORT_ERROR
            return

        if response.superseded or not self._is_current_browse(seq, tag):
            logger.debug("browse #%d discarded (stale)", seq)
            return
        if not response.success:
            if self._browse_may_report():
                self._error = response.message or BROWSE_DOMAIN_ERROR
            return

        try:
            payload = CourseListResponse.model_validate(response.data)
        except ValidationError as exc:
            logger.warning("malformed course listing: %s", exc)
            if self._browse_may_report():
                self._error = BROWSE_TRANSPORT_ERROR
            return

        total = payload.total if payload.total is not None else len(payload.courses)
        self._browse_listing = Listing(records=tuple(payload.courses), total=total)

    async def _run_search(self) -> None:
        self._error = None
        self._search_seq += 1
        seq = self._search_seq
        query = self._state.search_text.strip()
        self._submitted_query = query
        logger.debug("search #%d query=%r", seq, query)

        try:
            response = await self._search.execute(params={"query": query})
        except TransportError:
            if self._is_current_search(seq, query):
                self._error = SEARCH_TRANSPORT_ERROR
            return

        if response.superseded or not self._is_current_search(seq, query):
            logger.debug("search #%d discarded (stale)", seq)
            return
        if not response.success:
            self._error = response.message or SEARCH_DOMAIN_ERROR
            return

        try:
            payload = SearchResponse.model_validate(response.data)
        except ValidationError as exc:
            logger.warning("malformed search results: %s", exc)
            self._error = SEARCH_TRANSPORT_ERROR
            return

        self._search_listing = Listing(records=tuple(payload.results), total=len(payload.results))

"""Estado de consulta del catálogo (página, tamaño, orden, búsqueda, modo).

Por qué un value object inmutable:
- El controlador reemplaza el estado completo en cada intención del usuario;
  así cada petición puede etiquetarse con el estado exacto con el que salió.
- La validación (página >= 0, tamaño enumerado, orden permitido) vive en el
  borde del dominio y no en la CLI.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

PAGE_SIZES: tuple[int, ...] = (6, 10, 12, 24)
DEFAULT_PAGE_SIZE = 10


class Mode(str, Enum):
    """Origen del listado visible."""

    BROWSE = "browse"
    SEARCH = "search"


class SortField(str, Enum):
    TITLE = "title"
    CREATED_AT = "createdAt"
    RATING = "rating"
    TOTAL_VISITS = "totalVisits"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


_SORT_LABELS: dict[tuple[SortField, SortDirection], str] = {
    (SortField.TITLE, SortDirection.ASC): "Title (A-Z)",
    (SortField.TITLE, SortDirection.DESC): "Title (Z-A)",
    (SortField.CREATED_AT, SortDirection.DESC): "Newest First",
    (SortField.CREATED_AT, SortDirection.ASC): "Oldest First",
    (SortField.RATING, SortDirection.DESC): "Highest Rated",
    (SortField.RATING, SortDirection.ASC): "Lowest Rated",
    (SortField.TOTAL_VISITS, SortDirection.DESC): "Most Popular",
    (SortField.TOTAL_VISITS, SortDirection.ASC): "Least Popular",
}


class SortSpec(BaseModel):
    """Campo + dirección, serializado en la API como `campo,dirección`."""

    model_config = ConfigDict(frozen=True)

    field: SortField = SortField.TITLE
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, value: "str | SortSpec") -> "SortSpec":
        """Parsea `title,asc` (la dirección por defecto es `asc`).

        Lanza `ValueError` si el campo o la dirección no pertenecen a la enumeración.
        """

        if isinstance(value, SortSpec):
            return value
        raw = str(value).strip()
        name, _, direction = raw.partition(",")
        try:
            sort_field = SortField(name.strip())
        except ValueError:
            allowed = ", ".join(f.value for f in SortField)
            raise ValueError(f"unknown sort field {name.strip()!r} (allowed: {allowed})") from None
        try:
            sort_direction = SortDirection(direction.strip().lower() or SortDirection.ASC.value)
        except ValueError:
            raise ValueError(f"unknown sort direction {direction.strip()!r} (allowed: asc, desc)") from None
        return cls(field=sort_field, direction=sort_direction)

    def as_param(self) -> str:
        return f"{self.field.value},{self.direction.value}"

    def label(self) -> str:
        return _SORT_LABELS[(self.field, self.direction)]

    @classmethod
    def choices(cls) -> list["SortSpec"]:
        return [cls(field=f, direction=d) for (f, d) in _SORT_LABELS]

    def __str__(self) -> str:
        return self.as_param()


class QueryState(BaseModel):
    """Parámetros de la vista de catálogo.

    Invariante: `mode == SEARCH` si y solo si la última acción del usuario fue
    una búsqueda no vacía que no se ha limpiado desde entonces.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0, description="Índice de página (base 0).")
    size: int = Field(default=DEFAULT_PAGE_SIZE, description="Tamaño de página (enumerado).")
    sort: SortSpec = Field(default_factory=SortSpec)
    search_text: str = Field(default="", description="Texto de búsqueda (puede estar vacío).")
    mode: Mode = Field(default=Mode.BROWSE)

    @field_validator("size")
    @classmethod
    def _size_in_enumeration(cls, value: int) -> int:
        if value not in PAGE_SIZES:
            allowed = ", ".join(str(s) for s in PAGE_SIZES)
            raise ValueError(f"page size must be one of: {allowed}")
        return value

    @field_validator("sort", mode="before")
    @classmethod
    def _parse_sort(cls, value: Any) -> Any:
        if isinstance(value, str):
            return SortSpec.parse(value)
        return value

    def evolve(self, **changes: Any) -> "QueryState":
        """Devuelve una copia validada con `changes` aplicados."""

        data = {
            "page": self.page,
            "size": self.size,
            "sort": self.sort,
            "search_text": self.search_text,
            "mode": self.mode,
        }
        data.update(changes)
        return type(self).model_validate(data)

    def browse_params(self) -> dict[str, Any]:
        return {"page": self.page, "size": self.size, "sort": self.sort.as_param()}

    def browse_key(self) -> tuple[int, int, str]:
        return (self.page, self.size, self.sort.as_param())

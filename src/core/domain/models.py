"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- La API habla camelCase (`createdAt`, `totalVisits`); los alias aíslan ese
  detalle del resto del código.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic.config import ConfigDict

_EMAIL_RE = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)


class Course(BaseModel):
    """Curso tal como lo ve el cliente: snapshot inmutable de una respuesta."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: int | str = Field(
        ...,
        description="Identificador opaco y único del curso.",
    )
    title: str = Field(
        ...,
        description="Título del curso.",
    )
    description: str | None = Field(
        default=None,
        description="Descripción libre (opcional).",
    )
    instructor: str | None = Field(
        default=None,
        description="Nombre del instructor (opcional).",
    )
    created_at: datetime | None = Field(
        default=None,
        alias="createdAt",
    )
    updated_at: datetime | None = Field(
        default=None,
        alias="updatedAt",
    )
    rating: float = Field(
        default=0.0,
        ge=0.0,
        le=5.0,
        description="Valoración media (0..5, admite fracciones).",
    )
    total_ratings: int = Field(
        default=0,
        ge=0,
        alias="totalRatings",
    )
    total_visits: int = Field(
        default=0,
        ge=0,
        alias="totalVisits",
    )
    tags: tuple[str, ...] = Field(
        default=(),
        description="Etiquetas en orden (puede estar vacío).",
    )

    @field_validator("rating", "total_ratings", "total_visits", mode="before")
    @classmethod
    def _null_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value: Any) -> Any:
        return () if value is None else value


class CourseListResponse(BaseModel):
    """`GET /courses` → `{success, courses}` (el total es opcional)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    success: bool = False
    courses: list[Course] = Field(default_factory=list)
    total: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("total", "totalElements", "totalCourses"),
    )
    message: str | None = None

    @field_validator("courses", mode="before")
    @classmethod
    def _null_courses(cls, value: Any) -> Any:
        return [] if value is None else value


class SearchResponse(BaseModel):
    """`GET /courses/search` → `{success, results}`."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    results: list[Course] = Field(default_factory=list)
    message: str | None = None

    @field_validator("results", mode="before")
    @classmethod
    def _null_results(cls, value: Any) -> Any:
        return [] if value is None else value


class CourseDraft(BaseModel):
    """Cuerpo de `POST /courses`.

    Reglas del formulario de alta:
    - título obligatorio;
    - etiquetas sin vacíos ni duplicados (se conserva el orden de entrada).
    """

    title: str = Field(..., min_length=1, description="Course title is required")
    description: str = ""
    instructor: str = ""
    tags: list[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Course title is required")
        return value

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, value: list[str]) -> list[str]:
        out: list[str] = []
        for tag in value:
            tag = tag.strip()
            if tag and tag not in out:
                out.append(tag)
        return out


class CreateCourseResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool = False
    course: Course | None = None
    message: str | None = None


class Credentials(BaseModel):
    """Cuerpo de `POST /auth/login`."""

    username: str = Field(..., min_length=1, description="Username is required")
    password: str = Field(..., min_length=1, description="Password is required")


class Registration(BaseModel):
    """Cuerpo de `POST /auth/register` (reglas del formulario de registro)."""

    username: str = Field(..., min_length=3, description="Username must be at least 3 characters long")
    email: str = Field(...)
    password: str = Field(..., min_length=6, description="Password must be at least 6 characters long")

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        value = value.strip()
        if not _EMAIL_RE.match(value):
            raise ValueError("Invalid email address")
        return value


class LoginResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool = False
    token: str | None = None
    user: dict[str, Any] | None = None
    message: str | None = None


class RegisterResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool = False
    message: str | None = None

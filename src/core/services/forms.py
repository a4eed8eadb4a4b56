"""Envío de formularios (alta de curso, login, registro).

La validación de campos ya ocurrió al construir el modelo (`CourseDraft`,
`Credentials`, `Registration`). Aquí solo se ejecuta la llamada y se traduce
el resultado a un `FormOutcome`: ningún error sale de estas funciones.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from core.domain.models import (
    CourseDraft,
    CreateCourseResponse,
    Credentials,
    LoginResponse,
    RegisterResponse,
    Registration,
)
from core.domain.requests import ApiResponse
from core.errors import TransportError
from core.interfaces.executor import RequestRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormOutcome:
    ok: bool
    message: str | None = None
    entity: Any = None


async def _submit(
    executor: RequestRunner,
    body: BaseModel,
    *,
    parse: Callable[[ApiResponse], Any],
    domain_fallback: str,
    transport_fallback: str,
) -> FormOutcome:
    try:
        response = await executor.execute(body=body)
    except TransportError as exc:
        logger.warning("form submission failed: %s", exc)
        return FormOutcome(ok=False, message=transport_fallback)

    if not response.success:
        return FormOutcome(ok=False, message=response.message or domain_fallback)

    try:
        entity = parse(response)
    except ValidationError as exc:
        logger.warning("malformed form response: %s", exc)
        return FormOutcome(ok=False, message=transport_fallback)
    return FormOutcome(ok=True, message=response.message, entity=entity)


async def submit_course(executor: RequestRunner, draft: CourseDraft) -> FormOutcome:
    """`POST /courses`. En éxito, `entity` es el `Course` creado (si vino)."""

    return await _submit(
        executor,
        draft,
        parse=lambda r: CreateCourseResponse.model_validate(r.data).course,
        domain_fallback="Failed to create course. Please try again.",
        transport_fallback="An error occurred while creating the course. Please try again.",
    )


async def login(executor: RequestRunner, credentials: Credentials) -> FormOutcome:
    """`POST /auth/login`. En éxito, `entity` es el `LoginResponse` (token + user)."""

    return await _submit(
        executor,
        credentials,
        parse=lambda r: LoginResponse.model_validate(r.data),
        domain_fallback="Login failed. Please check your credentials.",
        transport_fallback="An error occurred during login. Please try again.",
    )


async def register(executor: RequestRunner, registration: Registration) -> FormOutcome:
    return await _submit(
        executor,
        registration,
        parse=lambda r: RegisterResponse.model_validate(r.data),
        domain_fallback="Registration failed. Please try again.",
        transport_fallback="An error occurred during registration. Please try again.",
    )

"""Exportación JSON de listados de cursos.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (`jq`, hojas de cálculo).
- Mismo formato (camelCase) que entrega la API.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.models import Course


def courses_to_json(courses: Iterable[Course]) -> str:
    """Serializa cursos a JSON UTF-8 con formato estable."""

    payload = [course.model_dump(mode="json", by_alias=True) for course in courses]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_courses_json(*, courses: Iterable[Course], output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(courses_to_json(courses), encoding="utf-8")
    return output_path

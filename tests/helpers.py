"""Datos de ejemplo para los tests."""

from __future__ import annotations

from typing import Any


def course_payload(course_id: int, title: str, **extra: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": course_id,
        "title": title,
        "description": f"About {title}",
        "instructor": "Ada",
        "createdAt": "2024-01-01T10:00:00Z",
        "updatedAt": "2024-01-02T10:00:00Z",
        "rating": 4.5,
        "totalRatings": 12,
        "totalVisits": 300,
        "tags": ["cs"],
    }
    data.update(extra)
    return data


def titles(display) -> list[str]:
    return [course.title for course in display.records]

"""Tabla de endpoints de la API del catálogo.

Por qué aquí:
- Es el único sitio que conoce rutas y métodos; servicios y CLI piden
  ejecutores ya configurados.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from adapters.request_executor import Endpoint, HttpMethod, RequestExecutor

LIST_COURSES = Endpoint("/courses", HttpMethod.GET)
SEARCH_COURSES = Endpoint("/courses/search", HttpMethod.GET)
CREATE_COURSE = Endpoint("/courses", HttpMethod.POST)
LOGIN = Endpoint("/auth/login", HttpMethod.POST)
REGISTER = Endpoint("/auth/register", HttpMethod.POST)


@dataclass
class CatalogApi:
    """Un ejecutor por endpoint, todos sobre el mismo cliente."""

    list_courses: RequestExecutor
    search_courses: RequestExecutor
    create_course: RequestExecutor
    login: RequestExecutor
    register: RequestExecutor

    @classmethod
    def from_client(cls, client: httpx.AsyncClient) -> "CatalogApi":
        return cls(
            list_courses=RequestExecutor(LIST_COURSES, client=client, name="list-courses"),
            search_courses=RequestExecutor(SEARCH_COURSES, client=client, name="search-courses"),
            create_course=RequestExecutor(CREATE_COURSE, client=client, name="create-course"),
            login=RequestExecutor(LOGIN, client=client, name="login"),
            register=RequestExecutor(REGISTER, client=client, name="register"),
        )

import asyncio

import httpx

from adapters.catalog_api import CatalogApi
from core.domain.models import CourseDraft, Credentials, Registration
from core.services.forms import login, register, submit_course
from tests.helpers import course_payload


def submit(make_client, handler, pick, action, payload):
    async def scenario():
        async with make_client(handler) as client:
            return await action(pick(CatalogApi.from_client(client)), payload)

    return asyncio.run(scenario())


def test_create_course_returns_created_entity(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/courses"
        return httpx.Response(201, json={"success": True, "course": course_payload(9, "Graphs", tags=[])})

    outcome = submit(make_client, handler, lambda api: api.create_course, submit_course, CourseDraft(title="Graphs"))
    assert outcome.ok
    assert outcome.entity.title == "Graphs"
    assert outcome.entity.tags == ()


def test_create_course_domain_failure_fallback(make_client):
    outcome = submit(
        make_client,
        lambda request: httpx.Response(200, json={"success": False}),
        lambda api: api.create_course,
        submit_course,
        CourseDraft(title="Graphs"),
    )
    assert not outcome.ok
    assert outcome.message == "Failed to create course. Please try again."


def test_create_course_transport_failure(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    outcome = submit(make_client, handler, lambda api: api.create_course, submit_course, CourseDraft(title="Graphs"))
    assert not outcome.ok
    assert outcome.message == "An error occurred while creating the course. Please try again."


def test_login_success_exposes_token(make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/auth/login"
        return httpx.Response(200, json={"success": True, "token": "t0k3n", "user": {"username": "ada"}})

    outcome = submit(make_client, handler, lambda api: api.login, login, Credentials(username="ada", password="pw"))
    assert outcome.ok
    assert outcome.entity.token == "t0k3n"
    assert outcome.entity.user == {"username": "ada"}


def test_login_rejected_uses_server_message(make_client):
    outcome = submit(
        make_client,
        lambda request: httpx.Response(401, json={"success": False, "message": "Bad credentials"}),
        lambda api: api.login,
        login,
        Credentials(username="ada", password="nope"),
    )
    assert not outcome.ok
    assert outcome.message == "Bad credentials"


def test_register_failure_messages(make_client):
    registration = Registration(username="ada", email="ada@example.com", password="secret1")

    domain = submit(
        make_client,
        lambda request: httpx.Response(409, json={"success": False}),
        lambda api: api.register,
        register,
        registration,
    )
    transport = submit(
        make_client,
        lambda request: httpx.Response(500, text="boom"),
        lambda api: api.register,
        register,
        registration,
    )
    assert domain.message == "Registration failed. Please try again."
    assert transport.message == "An error occurred during registration. Please try again."

import asyncio

import pytest

from app.core.middleware import is_dashboard_path, resolve_dashboard_redirect


@pytest.mark.parametrize(
    "path,role,expected",
    [
        ("/admin/dashboard", "admin", None),
        ("/admin/dashboard", "employee", "/employee/dashboard"),
        ("/admin/reports", None, "/employee/dashboard"),
        ("/employee/dashboard", "employee", None),
        ("/employee/dashboard", "admin", "/admin/dashboard"),
        ("/api/v1/recruitment/candidates", "employee", None),
    ],
)
def test_resolve_dashboard_redirect(path, role, expected):
    assert resolve_dashboard_redirect(path, role) == expected


def test_is_dashboard_path():
    assert is_dashboard_path("/admin/dashboard")
    assert is_dashboard_path("/employee")
    assert not is_dashboard_path("/api/v1/auth/me")


def test_anonymous_dashboard_request_goes_to_sign_in(api_client):
    async def scenario():
        async with api_client(role=None) as client:
            response = await client.get("/admin/dashboard")
            assert response.status_code == 307
            assert response.headers["location"] == "/auth/signin"

    asyncio.run(scenario())


def test_employee_is_sent_to_own_dashboard(api_client):
    async def scenario():
        async with api_client(role="employee") as client:
            response = await client.get("/admin/dashboard")
            assert response.status_code == 307
            assert response.headers["location"] == "/employee/dashboard"

            response = await client.get("/employee/dashboard")
            assert response.status_code == 200
            assert response.json()["user"]["email"] == "employee@example.com"

    asyncio.run(scenario())


def test_admin_dashboard(api_client):
    async def scenario():
        async with api_client(role="admin") as client:
            response = await client.get("/employee/dashboard")
            assert response.status_code == 307
            assert response.headers["location"] == "/admin/dashboard"

            response = await client.get("/admin/dashboard")
            assert response.status_code == 200
            body = response.json()
            assert body["openJobs"] == 0
            assert body["candidates"] == 0
            assert body["usersByRole"] == {"admin": 1, "employee": 0}
            assert body["pipeline"]["bottleneck"] == "applied"

    asyncio.run(scenario())


def test_token_in_cookie_is_honored(api_client):
    async def scenario():
        async with api_client(role="admin") as client:
            token = client.headers.pop("Authorization").split(" ", 1)[1]
            client.cookies.set("access_token", token)

            response = await client.get("/employee/dashboard")
            assert response.status_code == 307
            assert response.headers["location"] == "/admin/dashboard"

            response = await client.get("/admin/dashboard")
            assert response.status_code == 200
            assert response.json()["usersByRole"]["admin"] == 1

            response = await client.get("/api/v1/recruitment/candidates")
            assert response.status_code == 200

    asyncio.run(scenario())

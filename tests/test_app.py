import asyncio
import base64

RESUME = "/api/v1/recruitment/resume/parse"


def test_health(api_client):
    async def scenario():
        async with api_client(role=None) as client:
            response = await client.get("/health")
            assert response.status_code == 200
            assert response.json()["status"] == "healthy"

            response = await client.get("/")
            assert response.json()["status"] == "operational"

    asyncio.run(scenario())


def test_request_validation_errors_are_400(api_client):
    async def scenario():
        async with api_client() as client:
            response = await client.get("/api/v1/recruitment/candidates/not-a-number")
            assert response.status_code == 400
            assert "detail" in response.json()

            response = await client.post(
                "/api/v1/recruitment/candidates",
                content="{broken",
                headers={"Content-Type": "application/json"},
            )
            assert response.status_code == 400

    asyncio.run(scenario())


def test_unhandled_errors_are_500(api_client):
    async def scenario():
        async with api_client(raise_app_exceptions=False) as client:
            @client.app.get("/boom")
            async def boom():
                raise RuntimeError("kaboom")

            response = await client.get("/boom")
            assert response.status_code == 500
            assert response.json() == {"detail": "Internal server error", "message": "An error occurred"}

    asyncio.run(scenario())


def test_resume_parse_from_text(api_client):
    async def scenario():
        async with api_client() as client:
            response = await client.post(RESUME, json={
                "text": "Sam Lee sam@lee.dev, 4 years of Python and AWS",
            })
            assert response.status_code == 200
            body = response.json()
            assert body["skills"] == ["python", "aws"]
            assert body["yearsOfExperience"] == 4
            assert body["email"] == "sam@lee.dev"
            assert body["phone"] is None

    asyncio.run(scenario())


def test_resume_parse_from_base64(api_client):
    async def scenario():
        async with api_client() as client:
            encoded = base64.b64encode(b"Django developer").decode("ascii")
            response = await client.post(RESUME, json={"base64": encoded})
            assert response.status_code == 200
            assert response.json()["skills"] == ["django"]
            assert response.json()["summary"] == "Django developer"

    asyncio.run(scenario())


def test_resume_parse_needs_input(api_client):
    async def scenario():
        async with api_client() as client:
            for body in ({}, {"text": ""}, {"base64": "@@@"}):
                response = await client.post(RESUME, json=body)
                assert response.status_code == 400
                assert response.json()["detail"] == "Provide text or base64"

    asyncio.run(scenario())


def test_notifications_are_capped(api_client, monkeypatch):
    async def scenario():
        from app.api.v1.endpoints import notifications as notifications_endpoint

        monkeypatch.setattr(notifications_endpoint.settings, "NOTIFICATIONS_PAGE_SIZE", 2)
        async with api_client() as client:
            for title in ("A", "B", "C"):
                await client.post("/api/v1/recruitment/jobs", json={"title": title, "externalPost": True})

            notifications = (await client.get("/api/v1/recruitment/notifications")).json()
            assert len(notifications) == 2
            assert notifications[0]["payload"]["jobId"] > notifications[1]["payload"]["jobId"]

    asyncio.run(scenario())

import asyncio

BASE = "/api/v1/recruitment/applications"
JOBS = "/api/v1/recruitment/jobs"
CANDIDATES = "/api/v1/recruitment/candidates"
NOTIFICATIONS = "/api/v1/recruitment/notifications"

SCREENING_TEST = {
    "enabled": True,
    "passingPercent": 50,
    "questions": [
        {"id": "q1", "text": "2 + 2", "options": ["3", "4"], "correctAnswers": ["4"]},
        {"id": "q2", "text": "Compiled languages", "correctAnswers": ["go", "rust"]},
    ],
}


async def _job(client, **fields):
    body = {"title": "Backend Engineer", **fields}
    response = await client.post(JOBS, json=body)
    assert response.status_code == 201, response.text
    return response.json()


async def _candidate(client, name="Ada"):
    response = await client.post(CANDIDATES, json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


async def _apply(client, job, candidate, **fields):
    return await client.post(BASE, json={"jobId": job["id"], "candidateId": candidate["id"], **fields})


def test_create_defaults_to_applied(api_client):
    async def scenario():
        async with api_client() as client:
            job = await _job(client)
            candidate = await _candidate(client)

            response = await _apply(client, job, candidate, notes="Referred by Grace")
            assert response.status_code == 201
            body = response.json()
            assert body["stage"] == "applied"
            assert body["jobId"] == job["id"]
            assert body["candidateId"] == candidate["id"]
            assert body["scorePercent"] is None

    asyncio.run(scenario())


def test_create_validates_references(api_client):
    async def scenario():
        async with api_client() as client:
            job = await _job(client)
            candidate = await _candidate(client)

            response = await client.post(BASE, json={"jobId": job["id"]})
            assert response.status_code == 400
            assert response.json()["detail"] == "jobId and candidateId are required"

            response = await client.post(BASE, json={"jobId": 999, "candidateId": candidate["id"]})
            assert response.status_code == 404

            response = await client.post(BASE, json={"jobId": job["id"], "candidateId": 999})
            assert response.status_code == 404

            response = await _apply(client, job, candidate, stage="promoted")
            assert response.status_code == 400

            response = await _apply(client, job, candidate, stage="Offer")
            assert response.status_code == 201
            assert response.json()["stage"] == "offer"

    asyncio.run(scenario())


def test_closed_and_expired_jobs_refuse_applications(api_client):
    async def scenario():
        async with api_client() as client:
            candidate = await _candidate(client)
            closed = await _job(client, status="closed")
            expired = await _job(client, expiresAt="2000-01-01T00:00:00Z")

            response = await _apply(client, closed, candidate)
            assert response.status_code == 400
            assert "closed" in response.json()["detail"]

            response = await _apply(client, expired, candidate)
            assert response.status_code == 400
            assert "expired" in response.json()["detail"]

            assert (await client.get(BASE)).json() == []

    asyncio.run(scenario())


def test_screening_test_is_scored(api_client):
    async def scenario():
        async with api_client() as client:
            job = await _job(client, test=SCREENING_TEST)
            candidate = await _candidate(client)

            response = await _apply(client, job, candidate, answers=[
                {"questionId": "q1", "answer": "4"},
                {"questionId": "q2", "answer": ["rust", "go"]},
            ])
            body = response.json()
            assert body["scorePercent"] == 100
            assert body["passed"] is True
            assert body["stage"] == "applied"

            response = await _apply(client, job, candidate, answers=[
                {"questionId": "q1", "answer": "4"},
            ])
            body = response.json()
            assert body["scorePercent"] == 50
            assert body["passed"] is True

    asyncio.run(scenario())


def test_failed_screening_test_rejects(api_client):
    async def scenario():
        async with api_client() as client:
            job = await _job(client, test=SCREENING_TEST)
            candidate = await _candidate(client)

            response = await _apply(client, job, candidate, stage="interview", answers=[
                {"questionId": "q1", "answer": "3"},
                {"questionId": "q2", "answer": ["go"]},
            ])
            body = response.json()
            assert body["scorePercent"] == 0
            assert body["passed"] is False
            assert body["stage"] == "rejected"

    asyncio.run(scenario())


def test_list_filters(api_client):
    async def scenario():
        async with api_client() as client:
            job_a = await _job(client, title="A")
            job_b = await _job(client, title="B")
            ada = await _candidate(client, "Ada")
            bo = await _candidate(client, "Bo")
            await _apply(client, job_a, ada, notes="strong referral")
            await _apply(client, job_b, ada, stage="interview")
            await _apply(client, job_b, bo)

            assert len((await client.get(BASE)).json()) == 3
            assert len((await client.get(BASE, params={"jobId": job_b["id"]})).json()) == 2
            assert len((await client.get(BASE, params={"candidateId": bo["id"]})).json()) == 1
            assert len((await client.get(BASE, params={"stage": "INTERVIEW"})).json()) == 1
            assert len((await client.get(BASE, params={"q": "referral"})).json()) == 1

    asyncio.run(scenario())


def test_stage_endpoint_emits_one_notification(api_client):
    async def scenario():
        async with api_client() as client:
            application = (await _apply(client, await _job(client), await _candidate(client))).json()

            response = await client.patch(f"{BASE}/{application['id']}/stage", json={"stage": "Interview"})
            assert response.status_code == 200
            assert response.json()["stage"] == "interview"

            notifications = (await client.get(NOTIFICATIONS)).json()
            assert len(notifications) == 1
            assert notifications[0]["type"] == "application.stageChanged"
            assert notifications[0]["payload"] == {"applicationId": application["id"], "stage": "interview"}

    asyncio.run(scenario())


def test_stage_endpoint_rejects_unknown_stage(api_client):
    async def scenario():
        async with api_client() as client:
            application = (await _apply(client, await _job(client), await _candidate(client))).json()

            response = await client.patch(f"{BASE}/{application['id']}/stage", json={"stage": "promoted"})
            assert response.status_code == 400
            assert response.json()["detail"] == "Invalid stage"

            response = await client.patch(f"{BASE}/{application['id']}/stage", json={})
            assert response.status_code == 400

            assert (await client.get(f"{BASE}/{application['id']}")).json()["stage"] == "applied"
            assert (await client.get(NOTIFICATIONS)).json() == []

            response = await client.patch(f"{BASE}/999/stage", json={"stage": "offer"})
            assert response.status_code == 404

    asyncio.run(scenario())


def test_general_patch_ignores_unknown_stage(api_client):
    async def scenario():
        async with api_client() as client:
            application = (await _apply(client, await _job(client), await _candidate(client))).json()
            url = f"{BASE}/{application['id']}"

            response = await client.patch(url, json={"stage": "promoted", "notes": "phone screen booked"})
            assert response.status_code == 200
            assert response.json()["stage"] == "applied"
            assert response.json()["notes"] == "phone screen booked"

            response = await client.patch(url, json={"stage": "Screening"})
            assert response.json()["stage"] == "screening"

            # Only the stage endpoint records notifications
            assert (await client.get(NOTIFICATIONS)).json() == []

    asyncio.run(scenario())


def test_patch_to_missing_job_conflicts(api_client):
    async def scenario():
        async with api_client() as client:
            application = (await _apply(client, await _job(client), await _candidate(client))).json()

            response = await client.patch(f"{BASE}/{application['id']}", json={"jobId": 999})
            assert response.status_code == 409

    asyncio.run(scenario())


def test_delete_application(api_client):
    async def scenario():
        async with api_client() as client:
            application = (await _apply(client, await _job(client), await _candidate(client))).json()

            response = await client.delete(f"{BASE}/{application['id']}")
            assert response.json() == {"ok": True}
            assert (await client.delete(f"{BASE}/{application['id']}")).status_code == 404

    asyncio.run(scenario())


def test_analytics_reflects_pipeline(api_client):
    async def scenario():
        async with api_client() as client:
            job = await _job(client)
            candidate = await _candidate(client)
            for stage in ["offer"] * 4 + ["hired"] * 3 + ["applied"]:
                assert (await _apply(client, job, candidate, stage=stage)).status_code == 201

            snapshot = (await client.get("/api/v1/recruitment/analytics")).json()
            assert snapshot["total"] == 8
            assert snapshot["byStage"] == {
                "applied": 1,
                "screening": 0,
                "interview": 0,
                "offer": 4,
                "hired": 3,
                "rejected": 0,
            }
            assert snapshot["offers"] == 4
            assert snapshot["hires"] == 3
            assert snapshot["offerToHireRatio"] == 75.0
            assert snapshot["bottleneck"] == "offer"

    asyncio.run(scenario())


def test_analytics_on_empty_pipeline(api_client):
    async def scenario():
        async with api_client() as client:
            snapshot = (await client.get("/api/v1/recruitment/analytics")).json()
            assert snapshot["total"] == 0
            assert snapshot["offerToHireRatio"] == 0
            assert snapshot["bottleneck"] == "applied"

    asyncio.run(scenario())


def test_notes_search_treats_wildcard_characters_literally(api_client):
    async def scenario():
        async with api_client() as client:
            job = await _job(client)
            candidate = await _candidate(client)
            await _apply(client, job, candidate, notes="asked for 20% more")
            await _apply(client, job, candidate, notes="plain note")

            response = await client.get(BASE, params={"q": "%"})
            assert [a["notes"] for a in response.json()] == ["asked for 20% more"]
            assert (await client.get(BASE, params={"q": "_"})).json() == []

    asyncio.run(scenario())

import asyncio

import pytest
from sqlalchemy import func, select

from app.core.exceptions import NotFoundError
from app.models.application import Application
from app.models.candidate import Candidate
from app.models.job import Job
from app.models.notification import Notification
from app.services.stage_policy import (
    ALL_STAGES,
    PRE_TERMINAL_STAGES,
    STAGE_CHANGED,
    InvalidStageError,
    Stage,
    coerce_stage,
    transition_stage,
    validate_stage,
)


def test_allow_list_is_the_six_pipeline_stages():
    assert ALL_STAGES == ("applied", "screening", "interview", "offer", "hired", "rejected")
    assert PRE_TERMINAL_STAGES == ("applied", "screening", "interview", "offer")


@pytest.mark.parametrize("value", ALL_STAGES)
def test_validate_stage_accepts_every_canonical_stage(value):
    assert validate_stage(value).value == value


def test_coerce_stage_normalizes_case_and_whitespace():
    assert coerce_stage("  Interview ") is Stage.INTERVIEW
    assert coerce_stage("OFFER") is Stage.OFFER


@pytest.mark.parametrize("value", [None, "", "promoted", "hire", 42])
def test_coerce_stage_returns_none_for_unknown_values(value):
    assert coerce_stage(value) is None


def test_validate_stage_rejects_unknown_values_with_400():
    with pytest.raises(InvalidStageError, match="Invalid stage") as exc_info:
        validate_stage("promoted")
    assert exc_info.value.status_code == 400
    assert exc_info.value.value == "promoted"


async def _seed_application(session, stage="applied"):
    job = Job(title="Backend Engineer")
    candidate = Candidate(name="Ada", skills=[])
    session.add_all([job, candidate])
    await session.flush()
    application = Application(job_id=job.id, candidate_id=candidate.id, stage=stage)
    session.add(application)
    await session.commit()
    return application


async def _notification_count(session):
    return await session.scalar(select(func.count()).select_from(Notification))


def test_transition_updates_stage_and_emits_one_notification(db_session):
    async def scenario():
        async with db_session() as session:
            application = await _seed_application(session)

            updated = await transition_stage(session, application.id, "Interview")
            await session.commit()

            assert updated.stage == "interview"
            assert await _notification_count(session) == 1
            notification = (await session.execute(select(Notification))).scalar_one()
            assert notification.type == STAGE_CHANGED
            assert notification.payload == {"applicationId": application.id, "stage": "interview"}

    asyncio.run(scenario())


def test_transition_allows_moving_out_of_a_terminal_stage(db_session):
    async def scenario():
        async with db_session() as session:
            application = await _seed_application(session, stage="hired")

            updated = await transition_stage(session, application.id, "rejected")

            assert updated.stage == "rejected"

    asyncio.run(scenario())


def test_invalid_transition_writes_nothing(db_session):
    async def scenario():
        async with db_session() as session:
            application = await _seed_application(session, stage="screening")

            with pytest.raises(InvalidStageError):
                await transition_stage(session, application.id, "promoted")
            await session.rollback()

            refreshed = await session.get(Application, application.id)
            assert refreshed.stage == "screening"
            assert await _notification_count(session) == 0

    asyncio.run(scenario())


def test_invalid_stage_is_reported_before_a_missing_application(db_session):
    async def scenario():
        async with db_session() as session:
            with pytest.raises(InvalidStageError):
                await transition_stage(session, 999, "promoted")
            with pytest.raises(NotFoundError, match="Application not found"):
                await transition_stage(session, 999, "offer")
            assert await _notification_count(session) == 0

    asyncio.run(scenario())

"""
Feedback API - interview notes scored for sentiment on write
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.feedback import FeedbackCreate, FeedbackResponse
from app.services import feedback as feedback_service

router = APIRouter()


@router.get("", response_model=List[FeedbackResponse])
async def list_feedback(db: AsyncSession = Depends(get_db)):
    return await feedback_service.list_feedback(db)


@router.post("", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
async def create_feedback(feedback_in: FeedbackCreate, db: AsyncSession = Depends(get_db)):
    feedback = await feedback_service.create_feedback(db, feedback_in)
    await db.commit()
    return feedback

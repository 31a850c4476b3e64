import logging
import uuid
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.dependencies import parse_payload, read_payload
from app.models.exercise import Exercise
from app.models.user import User
from app.schemas.exercise import ExerciseCreate, ExerciseResponse, LogEntry, LogResponse
from app.services.log_query import build_log_filter, build_log_query
from app.utils.dates import format_calendar_date
from app.utils.exceptions import UserNotFound

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["exercises"])


async def _get_user(db: AsyncSession, user_id: str) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise UserNotFound()
    return user


@router.post("/{user_id}/exercises")
async def add_exercise(
    user_id: str,
    payload: dict = Depends(read_payload),
    db: AsyncSession = Depends(get_db),
):
    request = parse_payload(ExerciseCreate, payload)
    user = await _get_user(db, user_id)

    exercise = Exercise(
        id=str(uuid.uuid4()),
        username=user.username,
        description=request.description,
        duration=request.duration,
        date=request.date or date.today(),
    )
    db.add(exercise)
    await db.commit()
    logger.info("Added exercise %s for user %s on %s", exercise.id, user.id, exercise.date)

    return ExerciseResponse(
        id=user.id,
        username=user.username,
        description=exercise.description,
        duration=exercise.duration,
        date=format_calendar_date(exercise.date),
    ).model_dump()


@router.get("/{user_id}/logs")
async def get_logs(
    user_id: str,
    date_from: str | None = Query(default=None, alias="from"),
    date_to: str | None = Query(default=None, alias="to"),
    limit: str | None = Query(default=None),
    db: AsyncSession = Depends(get_db),
):
    logger.debug("Log query for user %s: from=%s to=%s limit=%s", user_id, date_from, date_to, limit)
    user = await _get_user(db, user_id)

    log_filter = build_log_filter(
        user.username, date_from, date_to, limit, default_limit=settings.default_log_limit
    )
    result = await db.execute(build_log_query(log_filter))
    exercises = result.scalars().all()

    return LogResponse(
        id=user.id,
        username=user.username,
        count=len(exercises),
        log=[
            LogEntry(
                description=e.description,
                duration=e.duration,
                date=format_calendar_date(e.date),
            )
            for e in exercises
        ],
    ).model_dump()

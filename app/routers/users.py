import logging
import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies import parse_payload, read_payload
from app.models.user import User
from app.schemas.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("")
async def create_user(payload: dict = Depends(read_payload), db: AsyncSession = Depends(get_db)):
    request = parse_payload(UserCreate, payload)

    user = User(id=str(uuid.uuid4()), username=request.username)
    db.add(user)
    await db.commit()
    logger.info("Created user %s (%s)", user.id, user.username)

    return UserResponse.model_validate(user).model_dump()


@router.get("")
async def list_users(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(User))
    users = result.scalars().all()
    return [UserResponse.model_validate(u).model_dump() for u in users]

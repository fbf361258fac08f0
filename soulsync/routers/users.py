import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from soulsync.auth.session import get_current_user_id
from soulsync.core.exceptions import ConflictError, NotFoundError
from soulsync.db.session import db_session
from soulsync.schemas.users import UserCreate, UserRead
from soulsync.services import storage

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/users", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(request: UserCreate, session: AsyncSession = Depends(db_session)):
    """Registers a user. Usernames and emails are unique."""
    if await storage.get_user_by_username(session, request.username) is not None:
        raise ConflictError("Username already exists")
    if await storage.get_user_by_email(session, request.email) is not None:
        raise ConflictError("Email already registered")
    return await storage.create_user(session, request.username, request.email, request.name)


@router.get("/users/{user_id}", response_model=UserRead)
async def get_user(
    user_id: int,
    current_user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    # Other users' records are reported as missing
    user = await storage.get_user(session, user_id) if user_id == current_user_id else None
    if user is None:
        raise NotFoundError("User", user_id)
    return user

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from services.assessment_engine.definitions import CHAKRA_DETAILS
from services.assessment_engine.insights import recommend_coach
from services.assessment_engine.models import ChakraProfile
from soulsync.auth.session import get_current_user_id
from soulsync.db.session import db_session
from soulsync.schemas.profile import ChakraProfileResponse, ChakraReference
from soulsync.services import storage

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/chakra-profile", response_model=ChakraProfileResponse)
async def get_chakra_profile(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    """
    The user's stored profile with focus-chakra insights. Users who have not
    taken an assessment get a neutral profile, which is not saved.
    """
    record = await storage.get_profile_record(session, user_id)
    if record is None:
        profile = ChakraProfile.neutral()
        return ChakraProfileResponse(
            user_id=user_id,
            profile=profile,
            is_default=True,
            insights=recommend_coach(profile),
        )

    profile = await storage.load_profile(session, user_id)
    return ChakraProfileResponse(
        user_id=user_id,
        profile=profile,
        is_default=False,
        assessment_mode=record.assessment_mode,
        updated_at=record.updated_at,
        insights=recommend_coach(profile),
    )


@router.get("/chakras", response_model=List[ChakraReference])
async def list_chakras():
    """Reference data for the seven chakras, root to crown."""
    return [ChakraReference(key=key, details=details) for key, details in CHAKRA_DETAILS.items()]

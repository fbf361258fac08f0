import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from services.assessment_engine.insights import coaching_context
from soulsync.auth.session import get_current_user_id
from soulsync.core.exceptions import NotFoundError, ValidationError
from soulsync.db.session import db_session
from soulsync.schemas.coach import CoachChatRequest, CoachChatResponse, CoachConversationRead
from soulsync.services import storage
from soulsync.text_analysis.client import TextAnalysisClient, get_text_analysis_client
from soulsync.text_analysis.prompts import CoachType, coach_system_prompt

router = APIRouter()
logger = logging.getLogger(__name__)

# Non-system messages carried over from the user's previous conversation with the same coach
HISTORY_CONTEXT_MESSAGES = 10


def _without_system(messages: List[Dict[str, str]]) -> List[Dict[str, str]]:
    return [m for m in messages or [] if m.get("role") != "system"]


@router.post("/coach-chat", response_model=CoachChatResponse)
async def coach_chat(
    request: CoachChatRequest,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
    client: TextAnalysisClient = Depends(get_text_analysis_client),
):
    """
    Starts a conversation with a coach, or continues one when a
    conversation id is given. The coach type must match the conversation's.
    """
    coach_type = request.coach_type.value
    user_message = {"role": "user", "content": request.message}

    if request.conversation_id is not None:
        conversation = await storage.get_coach_conversation(session, request.conversation_id, user_id)
        if conversation is None:
            raise NotFoundError("Conversation", request.conversation_id)
        if conversation.coach_type != coach_type:
            raise ValidationError(
                "Coach type mismatch. The conversation belongs to a different coach type.",
                field="coachType",
            )
        stored = list(conversation.messages or [])
        if not any(m.get("role") == "system" for m in stored):
            stored.insert(0, {"role": "system", "content": coach_system_prompt(coach_type)})
        prompt_messages = stored + [user_message]
        await storage.append_coach_messages(session, conversation, [user_message])
    else:
        system_content = coach_system_prompt(coach_type)
        profile = await storage.load_profile(session, user_id)
        if profile is not None:
            system_content = f"{system_content}\n\n{coaching_context(profile)}"

        previous = await storage.list_coach_conversations(session, user_id, coach_type)
        history = _without_system(previous[0].messages)[-HISTORY_CONTEXT_MESSAGES:] if previous else []

        system_message = {"role": "system", "content": system_content}
        prompt_messages = [system_message] + history + [user_message]
        conversation = await storage.create_coach_conversation(
            session, user_id, coach_type, [system_message, user_message]
        )

    reply = await client.chat(prompt_messages, coach_type)
    await storage.append_coach_messages(session, conversation, [{"role": "assistant", "content": reply}])
    logger.info(f"Coach {coach_type} replied in conversation {conversation.id} for user {user_id}")
    return CoachChatResponse(conversation=conversation, message=reply)


@router.get("/coach-conversations", response_model=List[CoachConversationRead])
async def list_coach_conversations(
    coach_type: CoachType = Query(..., alias="coachType"),
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    return await storage.list_coach_conversations(session, user_id, coach_type.value)


@router.delete("/coach-conversations/{conversation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_coach_conversation(
    conversation_id: int,
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
):
    deleted = await storage.delete_coach_conversation(session, conversation_id, user_id)
    if not deleted:
        raise NotFoundError("Conversation", conversation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from soulsync.schemas.base import CamelModel
from soulsync.text_analysis.prompts import CoachType


class ChatMessage(CamelModel):
    role: str
    content: str


class CoachChatRequest(CamelModel):
    coach_type: CoachType
    message: str = Field(..., min_length=1)
    conversation_id: Optional[int] = None


class CoachConversationRead(CamelModel):
    id: int
    user_id: int
    coach_type: CoachType
    messages: List[ChatMessage]
    created_at: datetime
    updated_at: datetime


class CoachChatResponse(CamelModel):
    conversation: CoachConversationRead
    message: str

from datetime import datetime
from typing import Optional

from pydantic import Field

from soulsync.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    name: Optional[str] = Field(None, max_length=255)


class UserRead(CamelModel):
    id: int
    username: str
    email: str
    name: Optional[str] = None
    created_at: datetime

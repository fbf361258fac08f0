import logging
import time
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from services.assessment_engine.loader import get_question_bank
from services.assessment_engine.models import AssessmentMode
from services.assessment_engine.session import AssessmentSession
from soulsync.core.config import get_session_settings

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60 * 2
DEFAULT_MAX_PER_USER = 3


@dataclass
class _Entry:
    user_id: int
    session: AssessmentSession
    expires_at: float


class SessionRegistry:
    """
    Process-local store of in-progress assessment sessions, keyed by a random id.

    A session is only visible to the user who started it. Each lookup pushes
    its expiry back by ``ttl_seconds``; expired sessions are swept on every
    create and get. Starting a session beyond ``max_per_user`` drops that
    user's least recently used one.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_per_user: int = DEFAULT_MAX_PER_USER,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_per_user = max(1, max_per_user)
        self._clock = clock
        self._sessions: Dict[str, _Entry] = {}

    def _sweep(self) -> None:
        now = self._clock()
        expired = [sid for sid, entry in self._sessions.items() if entry.expires_at <= now]
        for session_id in expired:
            del self._sessions[session_id]
        if expired:
            logger.info(f"Expired {len(expired)} abandoned assessment session(s)")

    def _enforce_user_limit(self, user_id: int) -> None:
        owned = sorted(
            (entry.expires_at, sid) for sid, entry in self._sessions.items() if entry.user_id == user_id
        )
        while len(owned) >= self.max_per_user:
            _, oldest = owned.pop(0)
            del self._sessions[oldest]
            logger.info(f"Dropped assessment session {oldest}; user {user_id} reached {self.max_per_user} open sessions")

    def create(self, user_id: int, mode: AssessmentMode) -> Tuple[str, AssessmentSession]:
        self._sweep()
        self._enforce_user_limit(user_id)
        session_id = uuid.uuid4().hex
        session = AssessmentSession(get_question_bank(mode))
        self._sessions[session_id] = _Entry(user_id, session, self._clock() + self.ttl_seconds)
        logger.info(f"Started {AssessmentMode(mode).value} assessment session {session_id} for user {user_id}")
        return session_id, session

    def get(self, session_id: str, user_id: int) -> Optional[AssessmentSession]:
        self._sweep()
        entry = self._sessions.get(session_id)
        if entry is None or entry.user_id != user_id:
            return None
        entry.expires_at = self._clock() + self.ttl_seconds
        return entry.session

    def discard(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)


_settings = get_session_settings()
_registry = SessionRegistry(
    ttl_seconds=_settings.assessment_ttl_seconds,
    max_per_user=_settings.max_assessments_per_user,
)


def get_session_registry() -> SessionRegistry:
    """FastAPI dependency returning the process-wide registry."""
    return _registry

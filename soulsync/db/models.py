from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Text,
    func,
)
from sqlalchemy.orm import declarative_base, relationship

# Define naming conventions for constraints and indexes
# https://alembic.sqlalchemy.org/en/latest/naming.html
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)
Base = declarative_base(metadata=metadata)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, server_default=func.now())

    chakra_profile = relationship("ChakraProfileRecord", back_populates="user", uselist=False, cascade="all, delete-orphan")
    journal_entries = relationship("JournalEntry", back_populates="user", cascade="all, delete-orphan")
    emotion_trackings = relationship("EmotionTracking", back_populates="user", cascade="all, delete-orphan")
    coach_conversations = relationship("CoachConversation", back_populates="user", cascade="all, delete-orphan")
    recommendations = relationship("UserRecommendation", back_populates="user", cascade="all, delete-orphan")


class ChakraProfileRecord(Base):
    """Latest assessment result for a user. One row per user, replaced on re-assessment."""
    __tablename__ = "chakra_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    root = Column(Float, nullable=False)
    sacral = Column(Float, nullable=False)
    solar_plexus = Column(Float, nullable=False)
    heart = Column(Float, nullable=False)
    throat = Column(Float, nullable=False)
    third_eye = Column(Float, nullable=False)
    crown = Column(Float, nullable=False)
    assessment_mode = Column(String(20), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow, server_default=func.now())

    user = relationship("User", back_populates="chakra_profile")


class JournalEntry(Base):
    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    content = Column(Text, nullable=False)
    sentiment_score = Column(Integer, nullable=True)
    emotion_tags = Column(JSON, nullable=False, default=list)
    chakra_tags = Column(JSON, nullable=False, default=list)
    summary = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, server_default=func.now())

    user = relationship("User", back_populates="journal_entries")

    __table_args__ = (
        Index("ix_journal_entries_user_id_created_at", "user_id", "created_at"),
    )


class EmotionTracking(Base):
    __tablename__ = "emotion_trackings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    emotion = Column(String(64), nullable=False)
    intensity = Column(Integer, nullable=False)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, server_default=func.now())

    user = relationship("User", back_populates="emotion_trackings")

    __table_args__ = (
        Index("ix_emotion_trackings_user_id_created_at", "user_id", "created_at"),
    )


class CoachConversation(Base):
    __tablename__ = "coach_conversations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    coach_type = Column(String(32), nullable=False)
    messages = Column(JSON, nullable=False, default=list) # [{"role": ..., "content": ...}]
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow, server_default=func.now())

    user = relationship("User", back_populates="coach_conversations")

    __table_args__ = (
        Index("ix_coach_conversations_user_id_coach_type", "user_id", "coach_type"),
    )


class HealingRitual(Base):
    __tablename__ = "healing_rituals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=False)
    type = Column(String(64), nullable=False)
    target_chakra = Column(String(32), nullable=True)
    target_emotion = Column(String(64), nullable=True)
    instructions = Column(Text, nullable=False)


class UserRecommendation(Base):
    __tablename__ = "user_recommendations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    ritual_id = Column(Integer, ForeignKey("healing_rituals.id", ondelete="CASCADE"), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, server_default=func.now())

    user = relationship("User", back_populates="recommendations")
    ritual = relationship("HealingRitual", lazy="joined")

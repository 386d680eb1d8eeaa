"""Database tables / schema"""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, DateTime, ForeignKey, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.core.models import utc_now


class Base(DeclarativeBase):
    pass


class DBUser(Base):
    __tablename__ = "users"
    id: Mapped[str] = mapped_column(String, primary_key=True)
    username: Mapped[str]  # unique by caller discipline, not by constraint
    email: Mapped[str]
    password: Mapped[str]
    full_name: Mapped[str]
    age_group: Mapped[str]
    total_score: Mapped[int] = mapped_column(default=0)
    level: Mapped[int] = mapped_column(default=1)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)


# games, categories and leaderboard entries get a surrogate integer key so reads can keep insertion order
class DBGame(Base):
    __tablename__ = "games"
    seq: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String, unique=True, index=True)
    title: Mapped[str]
    description: Mapped[str]
    category: Mapped[str] = mapped_column(index=True)
    icon: Mapped[str]
    difficulty: Mapped[str]
    age_group: Mapped[str]
    learning_benefits: Mapped[list[str]] = mapped_column(JSON, default=list)
    instructions: Mapped[list[str]] = mapped_column(JSON, default=list)
    play_count: Mapped[int] = mapped_column(default=0)


class DBCategory(Base):
    __tablename__ = "categories"
    seq: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String, unique=True, index=True)
    name: Mapped[str]
    description: Mapped[str]
    icon: Mapped[str]
    game_count: Mapped[int] = mapped_column(default=0)
    color: Mapped[str]


class DBLeaderboardEntry(Base):
    __tablename__ = "leaderboard_entries"
    seq: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String, unique=True, index=True)
    # weak references: no constraint enforcement on the application side
    user_id: Mapped[Optional[str]] = mapped_column(ForeignKey("users.id"))
    game_id: Mapped[Optional[str]] = mapped_column(ForeignKey("games.id"))
    category: Mapped[Optional[str]]
    score: Mapped[int]
    rank: Mapped[int] = mapped_column(default=0)
    period: Mapped[str] = mapped_column(index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)


class DBContactMessage(Base):
    __tablename__ = "contact_messages"
    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str]
    email: Mapped[str]
    subject: Mapped[str]
    message: Mapped[str]
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

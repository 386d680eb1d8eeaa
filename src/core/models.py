"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
Both the API layer (higher) and the db layer (lower) send/receive the records defined here,
which decouples the storage representation and the wire representation from each other.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from src.core.shared_types import Period


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# --- STORED RECORDS ---
@dataclass
class User:
    id: str
    username: str
    email: str
    password: str
    full_name: str
    age_group: str
    total_score: int = 0
    level: int = 1
    created_at: datetime = field(default_factory=utc_now)


@dataclass
class Game:
    id: str
    title: str
    description: str
    category: str
    icon: str
    difficulty: str
    age_group: str
    learning_benefits: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    play_count: int = 0


@dataclass
class Category:
    id: str
    name: str
    description: str
    icon: str
    color: str
    game_count: int = 0  # informational only, never recomputed from games


@dataclass
class LeaderboardEntry:
    id: str
    user_id: Optional[str]
    game_id: Optional[str]
    category: Optional[str]
    score: int
    period: Period
    rank: int = 0  # stored as given, display rank is derived at read time
    created_at: datetime = field(default_factory=utc_now)


@dataclass
class ContactMessage:
    id: str
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime = field(default_factory=utc_now)


# --- INSERT INPUTS ---
@dataclass
class NewUser:
    username: str
    email: str
    password: str
    full_name: str
    age_group: str


@dataclass
class NewGame:
    """Game ids are chosen by the caller (slug-like keys such as 'math-master')."""

    id: str
    title: str
    description: str
    category: str
    icon: str
    difficulty: str
    age_group: str
    learning_benefits: Optional[list[str]] = None
    instructions: Optional[list[str]] = None


@dataclass
class NewCategory:
    id: str
    name: str
    description: str
    icon: str
    color: str


@dataclass
class NewLeaderboardEntry:
    score: int
    period: Period = Period.ALL_TIME
    user_id: Optional[str] = None
    game_id: Optional[str] = None
    category: Optional[str] = None


@dataclass
class NewContactMessage:
    name: str
    email: str
    subject: str
    message: str


# --- SERVICE OUTPUTS ---
@dataclass
class UserSummary:
    """Public subset of a User shown next to leaderboard entries."""

    id: str
    username: str
    full_name: str
    level: int


@dataclass
class RankedEntry:
    entry: LeaderboardEntry
    display_rank: int
    user: Optional[UserSummary]

"""Requests and Response models"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.core.models import NewContactMessage, RankedEntry
from src.core.shared_types import Period


class CamelModel(BaseModel):
    """Fields are snake_case in Python and camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


# --- REQUEST MODELS ---
class ContactRequest(CamelModel):
    """All four fields are required strings, their content is not checked further."""

    name: str
    email: str
    subject: str
    message: str

    def to_model(self) -> NewContactMessage:
        return NewContactMessage(
            name=self.name,
            email=self.email,
            subject=self.subject,
            message=self.message,
        )


# --- RESPONSE MODELS ---
class MessageResponse(BaseModel):
    message: str


class ContactCreatedResponse(BaseModel):
    message: str
    id: str


class GameResponse(CamelModel):
    id: str
    title: str
    description: str
    category: str
    icon: str
    difficulty: str
    age_group: str
    learning_benefits: list[str]
    instructions: list[str]
    play_count: int


class CategoryResponse(CamelModel):
    id: str
    name: str
    description: str
    icon: str
    game_count: int
    color: str


class UserSummaryResponse(CamelModel):
    id: str
    username: str
    full_name: str
    level: int


class LeaderboardEntryResponse(CamelModel):
    id: str
    user_id: Optional[str]
    game_id: Optional[str]
    category: Optional[str]
    score: int
    rank: int
    display_rank: int
    period: Period
    created_at: datetime
    user: Optional[UserSummaryResponse]

    @classmethod
    def from_ranked(cls, ranked: RankedEntry) -> "LeaderboardEntryResponse":
        entry = ranked.entry
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            game_id=entry.game_id,
            category=entry.category,
            score=entry.score,
            rank=entry.rank,
            display_rank=ranked.display_rank,
            period=entry.period,
            created_at=entry.created_at,
            user=(
                UserSummaryResponse.model_validate(ranked.user)
                if ranked.user is not None
                else None
            ),
        )

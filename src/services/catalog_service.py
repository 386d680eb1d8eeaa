"""Orchestration of communication from API router to the catalog store (and the reverse direction)."""

from typing import Optional

from src.core.exceptions import NotFoundError, NotImplementedFeatureError
from src.core.logs import get_logger
from src.core.models import (
    Category,
    ContactMessage,
    Game,
    NewContactMessage,
    RankedEntry,
    User,
    UserSummary,
)
from src.core.shared_types import Period
from src.db.repository import CatalogRepository

log = get_logger("service")


class CatalogService:
    """Orchestration of layers for the games catalog."""

    def __init__(self, repository: CatalogRepository) -> None:
        self.repo = repository

    # -- Games --
    def list_games(
        self, search: Optional[str] = None, category: Optional[str] = None
    ) -> list[Game]:
        """All games, narrowed by a search query or else by category (search wins when both are given)."""
        if search:
            return self.repo.search_games(search)
        if category:
            return self.repo.get_games_by_category(category)
        return self.repo.get_games()

    def get_game(self, game_id: str) -> Game:
        game = self.repo.get_game(game_id)
        if game is None:
            raise NotFoundError("Game", game_id)
        return game

    def record_play(self, game_id: str) -> None:
        """Count one play of a game. An unknown id is accepted without error, matching the store contract."""
        # TODO confirm with the frontend team whether an unknown game should become a 404 here.
        self.repo.increment_game_play_count(game_id)

    # -- Categories --
    def list_categories(self) -> list[Category]:
        return self.repo.get_categories()

    def get_category(self, category_id: str) -> Category:
        category = self.repo.get_category(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category

    # -- Leaderboard --
    def leaderboard(
        self, category: Optional[str] = None, period: Period | str = Period.ALL_TIME
    ) -> list[RankedEntry]:
        """
        Board for one period, global when no category is given.
        ----
        Display rank comes from the sort position, the stored rank field is never trusted.
        """
        entries = self.repo.get_leaderboard(category or None, period or Period.ALL_TIME)
        users: dict[str, Optional[UserSummary]] = {}
        ranked = []
        for position, entry in enumerate(entries, start=1):
            summary = None
            if entry.user_id is not None:
                if entry.user_id not in users:
                    users[entry.user_id] = self._summarise(self.repo.get_user(entry.user_id))
                summary = users[entry.user_id]
            ranked.append(RankedEntry(entry=entry, display_rank=position, user=summary))
        return ranked

    # -- Contact --
    def submit_contact(self, message: NewContactMessage) -> ContactMessage:
        stored = self.repo.create_contact_message(message)
        log.info("Contact message stored id=%s", stored.id)
        return stored

    # -- Auth (placeholders) --
    def register(self) -> User:
        raise NotImplementedFeatureError("Registration")

    def login(self) -> User:
        raise NotImplementedFeatureError("Login")

    # -- Internal helpers --
    @staticmethod
    def _summarise(user: User | None) -> UserSummary | None:
        if user is None:
            return None
        return UserSummary(
            id=user.id,
            username=user.username,
            full_name=user.full_name,
            level=user.level,
        )

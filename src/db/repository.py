"""Protocol repository: the catalog store contract (implemented in memory and with SQLAlchemy)."""

from typing import Optional, Protocol

from src.core.models import (
    Category,
    ContactMessage,
    Game,
    LeaderboardEntry,
    NewCategory,
    NewContactMessage,
    NewGame,
    NewLeaderboardEntry,
    NewUser,
    User,
)
from src.core.shared_types import Period


class CatalogRepository(Protocol):
    """Persistence layer orchestration.

    Absence is never an error at this level: lookups return None and filters return empty lists.
    Every mutating call is atomic with respect to concurrent callers.
    """

    # -- Users --
    def get_user(self, user_id: str) -> User | None:
        """Exact key lookup."""
        ...

    def get_user_by_username(self, username: str) -> User | None:
        """First user whose username matches exactly (case-sensitive)."""
        ...

    def get_user_by_email(self, email: str) -> User | None:
        """First user whose email matches exactly (case-sensitive)."""
        ...

    def create_user(self, user: NewUser) -> User:
        """Store a new user with a generated id, total_score=0 and level=1.

        Username/email uniqueness is NOT checked here, that is the caller's job.
        """
        ...

    # -- Games --
    def get_games(self) -> list[Game]:
        """All games, in insertion order."""
        ...

    def get_game(self, game_id: str) -> Game | None:
        ...

    def get_games_by_category(self, category: str) -> list[Game]:
        """Games whose category equals `category` exactly."""
        ...

    def search_games(self, query: str) -> list[Game]:
        """Case-insensitive substring match on title, description or category. Empty query matches all."""
        ...

    def create_game(self, game: NewGame) -> Game:
        """Store under the caller-chosen id with play_count=0 (last write wins on id collision)."""
        ...

    def increment_game_play_count(self, game_id: str) -> None:
        """Add one play. Unknown ids are a silent no-op."""
        ...

    # -- Categories --
    def get_categories(self) -> list[Category]:
        ...

    def get_category(self, category_id: str) -> Category | None:
        ...

    def create_category(self, category: NewCategory) -> Category:
        """Store with game_count=0 regardless of input."""
        ...

    # -- Leaderboard --
    def get_leaderboard(
        self, category: Optional[str] = None, period: Period = Period.ALL_TIME
    ) -> list[LeaderboardEntry]:
        """Entries of the given period, sorted by score descending (ties keep insertion order).

        Without a category only global entries (category is None) are returned.
        """
        ...

    def create_leaderboard_entry(self, entry: NewLeaderboardEntry) -> LeaderboardEntry:
        """Store with a generated id and rank=0."""
        ...

    # -- Contact --
    def create_contact_message(self, message: NewContactMessage) -> ContactMessage:
        ...

    # -- Loading complete records (sample data, fixtures) --
    def put_user(self, user: User) -> User:
        """Store a complete record as given, ids and counters included."""
        ...

    def put_game(self, game: Game) -> Game:
        ...

    def put_category(self, category: Category) -> Category:
        ...

    def put_leaderboard_entry(self, entry: LeaderboardEntry) -> LeaderboardEntry:
        ...

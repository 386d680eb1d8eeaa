"""Implementation of (Catalog)Repository keeping every collection in process memory"""

import threading
from copy import deepcopy
from typing import Optional
from uuid import uuid4

from src.core.logs import get_logger
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
    utc_now,
)
from src.core.shared_types import Period

log = get_logger("store.memory")


class MemCatalogRepository:
    """Data stored in dicts keyed by id (dicts keep insertion order).

    A single lock guards all collections, so concurrent increments never lose updates.
    Records are copied on the way in and out: callers cannot mutate stored state.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        self._games: dict[str, Game] = {}
        self._categories: dict[str, Category] = {}
        self._leaderboard: dict[str, LeaderboardEntry] = {}
        self._contact_messages: dict[str, ContactMessage] = {}

    # -- Users --
    def get_user(self, user_id: str) -> User | None:
        with self._lock:
            return deepcopy(self._users.get(user_id))

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            found = next((u for u in self._users.values() if u.username == username), None)
            return deepcopy(found)

    def get_user_by_email(self, email: str) -> User | None:
        with self._lock:
            found = next((u for u in self._users.values() if u.email == email), None)
            return deepcopy(found)

    def create_user(self, user: NewUser) -> User:
        new = User(
            id=str(uuid4()),
            username=user.username,
            email=user.email,
            password=user.password,
            full_name=user.full_name,
            age_group=user.age_group,
            total_score=0,
            level=1,
            created_at=utc_now(),
        )
        return self.put_user(new)

    def put_user(self, user: User) -> User:
        with self._lock:
            self._users[user.id] = deepcopy(user)
        return deepcopy(user)

    # -- Games --
    def get_games(self) -> list[Game]:
        with self._lock:
            return deepcopy(list(self._games.values()))

    def get_game(self, game_id: str) -> Game | None:
        with self._lock:
            return deepcopy(self._games.get(game_id))

    def get_games_by_category(self, category: str) -> list[Game]:
        with self._lock:
            return deepcopy([g for g in self._games.values() if g.category == category])

    def search_games(self, query: str) -> list[Game]:
        needle = query.lower()
        with self._lock:
            return deepcopy(
                [
                    g
                    for g in self._games.values()
                    if needle in g.title.lower()
                    or needle in g.description.lower()
                    or needle in g.category.lower()
                ]
            )

    def create_game(self, game: NewGame) -> Game:
        new = Game(
            id=game.id,
            title=game.title,
            description=game.description,
            category=game.category,
            icon=game.icon,
            difficulty=game.difficulty,
            age_group=game.age_group,
            learning_benefits=list(game.learning_benefits or []),
            instructions=list(game.instructions or []),
            play_count=0,
        )
        return self.put_game(new)

    def put_game(self, game: Game) -> Game:
        with self._lock:
            self._games[game.id] = deepcopy(game)
        return deepcopy(game)

    def increment_game_play_count(self, game_id: str) -> None:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                log.info("Play count increment ignored, no game with id=%r", game_id)
                return
            game.play_count += 1

    # -- Categories --
    def get_categories(self) -> list[Category]:
        with self._lock:
            return deepcopy(list(self._categories.values()))

    def get_category(self, category_id: str) -> Category | None:
        with self._lock:
            return deepcopy(self._categories.get(category_id))

    def create_category(self, category: NewCategory) -> Category:
        new = Category(
            id=category.id,
            name=category.name,
            description=category.description,
            icon=category.icon,
            color=category.color,
            game_count=0,
        )
        return self.put_category(new)

    def put_category(self, category: Category) -> Category:
        with self._lock:
            self._categories[category.id] = deepcopy(category)
        return deepcopy(category)

    # -- Leaderboard --
    def get_leaderboard(
        self, category: Optional[str] = None, period: Period = Period.ALL_TIME
    ) -> list[LeaderboardEntry]:
        with self._lock:
            entries = [e for e in self._leaderboard.values() if e.period == period]
            if category:
                entries = [e for e in entries if e.category == category]
            else:
                entries = [e for e in entries if not e.category]
            # sorted() is stable: equal scores keep insertion order
            return deepcopy(sorted(entries, key=lambda e: e.score, reverse=True))

    def create_leaderboard_entry(self, entry: NewLeaderboardEntry) -> LeaderboardEntry:
        new = LeaderboardEntry(
            id=str(uuid4()),
            user_id=entry.user_id,
            game_id=entry.game_id,
            category=entry.category or None,
            score=entry.score,
            period=Period(entry.period),
            rank=0,
            created_at=utc_now(),
        )
        return self.put_leaderboard_entry(new)

    def put_leaderboard_entry(self, entry: LeaderboardEntry) -> LeaderboardEntry:
        with self._lock:
            self._leaderboard[entry.id] = deepcopy(entry)
        return deepcopy(entry)

    # -- Contact --
    def create_contact_message(self, message: NewContactMessage) -> ContactMessage:
        new = ContactMessage(
            id=str(uuid4()),
            name=message.name,
            email=message.email,
            subject=message.subject,
            message=message.message,
            created_at=utc_now(),
        )
        with self._lock:
            self._contact_messages[new.id] = new
        return deepcopy(new)

"""Implementation of (Catalog)Repository using SQLAlchemy"""

from contextlib import nullcontext
from datetime import datetime, timezone
from functools import wraps
from typing import Callable, Optional, TypeVar
from uuid import uuid4

from sqlalchemy import or_, select, update
from sqlalchemy.orm import Session

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
from src.db.database import SESSION_LOCK_KEY
from src.db.schema import (
    DBCategory,
    DBContactMessage,
    DBGame,
    DBLeaderboardEntry,
    DBUser,
)

log = get_logger("store.sql")

T = TypeVar("T")


def _as_utc(moment: datetime) -> datetime:
    """SQLite hands back naive datetimes, everything stored here is UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def _one_transaction(method: Callable[..., T]) -> Callable[..., T]:
    """Run a repository method as one transaction, ended before returning (reads included).

    Sessions that share a single connection serialise on the lock found in the session info.
    """

    @wraps(method)
    def wrapper(self: "SQLCatalogRepository", *args, **kwargs) -> T:
        with self._lock:
            try:
                result = method(self, *args, **kwargs)
            except Exception:
                self.db.rollback()
                raise
            self.db.commit()
            # other sessions may have written meanwhile, reload on next access
            self.db.expire_all()
            return result

    return wrapper


class SQLCatalogRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy.

    Every public method is one transaction, committed before returning.
    """

    def __init__(self, db_session: Session) -> None:
        self.db = db_session
        self._lock = db_session.info.get(SESSION_LOCK_KEY) or nullcontext()

    # -- Users --
    @_one_transaction
    def get_user(self, user_id: str) -> User | None:
        user_db = self.db.get(DBUser, user_id)
        if user_db:
            return self._user_to_model(user_db)
        return None

    @_one_transaction
    def get_user_by_username(self, username: str) -> User | None:
        query = select(DBUser).where(DBUser.username == username).limit(1)
        user_db = self.db.scalar(query)
        return self._user_to_model(user_db) if user_db else None

    @_one_transaction
    def get_user_by_email(self, email: str) -> User | None:
        query = select(DBUser).where(DBUser.email == email).limit(1)
        user_db = self.db.scalar(query)
        return self._user_to_model(user_db) if user_db else None

    @_one_transaction
    def create_user(self, user: NewUser) -> User:
        return self.put_user(
            User(
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
        )

    @_one_transaction
    def put_user(self, user: User) -> User:
        user_db = self.db.merge(
            DBUser(
                id=user.id,
                username=user.username,
                email=user.email,
                password=user.password,
                full_name=user.full_name,
                age_group=user.age_group,
                total_score=user.total_score,
                level=user.level,
                created_at=user.created_at,
            )
        )
        self.db.commit()
        self.db.refresh(user_db)
        return self._user_to_model(user_db)

    # -- Games --
    @_one_transaction
    def get_games(self) -> list[Game]:
        query = select(DBGame).order_by(DBGame.seq)
        return [self._game_to_model(g) for g in self.db.scalars(query)]

    @_one_transaction
    def get_game(self, game_id: str) -> Game | None:
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._game_to_model(game_db)
        return None

    @_one_transaction
    def get_games_by_category(self, category: str) -> list[Game]:
        query = select(DBGame).where(DBGame.category == category).order_by(DBGame.seq)
        return [self._game_to_model(g) for g in self.db.scalars(query)]

    @_one_transaction
    def search_games(self, query: str) -> list[Game]:
        statement = (
            select(DBGame)
            .where(
                or_(
                    DBGame.title.icontains(query, autoescape=True),
                    DBGame.description.icontains(query, autoescape=True),
                    DBGame.category.icontains(query, autoescape=True),
                )
            )
            .order_by(DBGame.seq)
        )
        return [self._game_to_model(g) for g in self.db.scalars(statement)]

    @_one_transaction
    def create_game(self, game: NewGame) -> Game:
        return self.put_game(
            Game(
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
        )

    @_one_transaction
    def put_game(self, game: Game) -> Game:
        game_db = self._fetch_game(game.id)
        if game_db is None:
            game_db = DBGame(id=game.id)
            self.db.add(game_db)
        game_db.title = game.title
        game_db.description = game.description
        game_db.category = game.category
        game_db.icon = game.icon
        game_db.difficulty = game.difficulty
        game_db.age_group = game.age_group
        game_db.learning_benefits = list(game.learning_benefits)
        game_db.instructions = list(game.instructions)
        game_db.play_count = game.play_count
        self.db.commit()
        self.db.refresh(game_db)
        return self._game_to_model(game_db)

    @_one_transaction
    def increment_game_play_count(self, game_id: str) -> None:
        # Single UPDATE statement, the database serialises concurrent increments
        statement = (
            update(DBGame)
            .where(DBGame.id == game_id)
            .values(play_count=DBGame.play_count + 1)
        )
        result = self.db.execute(statement)
        self.db.commit()
        if result.rowcount == 0:
            log.info("Play count increment ignored, no game with id=%r", game_id)

    # -- Categories --
    @_one_transaction
    def get_categories(self) -> list[Category]:
        query = select(DBCategory).order_by(DBCategory.seq)
        return [self._category_to_model(c) for c in self.db.scalars(query)]

    @_one_transaction
    def get_category(self, category_id: str) -> Category | None:
        category_db = self._fetch_category(category_id)
        return self._category_to_model(category_db) if category_db else None

    @_one_transaction
    def create_category(self, category: NewCategory) -> Category:
        return self.put_category(
            Category(
                id=category.id,
                name=category.name,
                description=category.description,
                icon=category.icon,
                color=category.color,
                game_count=0,
            )
        )

    @_one_transaction
    def put_category(self, category: Category) -> Category:
        category_db = self._fetch_category(category.id)
        if category_db is None:
            category_db = DBCategory(id=category.id)
            self.db.add(category_db)
        category_db.name = category.name
        category_db.description = category.description
        category_db.icon = category.icon
        category_db.color = category.color
        category_db.game_count = category.game_count
        self.db.commit()
        self.db.refresh(category_db)
        return self._category_to_model(category_db)

    # -- Leaderboard --
    @_one_transaction
    def get_leaderboard(
        self, category: Optional[str] = None, period: Period = Period.ALL_TIME
    ) -> list[LeaderboardEntry]:
        query = select(DBLeaderboardEntry).where(DBLeaderboardEntry.period == str(period))
        if category:
            query = query.where(DBLeaderboardEntry.category == category)
        else:
            query = query.where(
                or_(DBLeaderboardEntry.category.is_(None), DBLeaderboardEntry.category == "")
            )
        query = query.order_by(DBLeaderboardEntry.score.desc(), DBLeaderboardEntry.seq)
        return [self._entry_to_model(e) for e in self.db.scalars(query)]

    @_one_transaction
    def create_leaderboard_entry(self, entry: NewLeaderboardEntry) -> LeaderboardEntry:
        return self.put_leaderboard_entry(
            LeaderboardEntry(
                id=str(uuid4()),
                user_id=entry.user_id,
                game_id=entry.game_id,
                category=entry.category or None,
                score=entry.score,
                period=Period(entry.period),
                rank=0,
                created_at=utc_now(),
            )
        )

    @_one_transaction
    def put_leaderboard_entry(self, entry: LeaderboardEntry) -> LeaderboardEntry:
        query = select(DBLeaderboardEntry).where(DBLeaderboardEntry.id == entry.id)
        entry_db = self.db.scalar(query)
        if entry_db is None:
            entry_db = DBLeaderboardEntry(id=entry.id)
            self.db.add(entry_db)
        entry_db.user_id = entry.user_id
        entry_db.game_id = entry.game_id
        entry_db.category = entry.category
        entry_db.score = entry.score
        entry_db.rank = entry.rank
        entry_db.period = str(entry.period)
        entry_db.created_at = entry.created_at
        self.db.commit()
        self.db.refresh(entry_db)
        return self._entry_to_model(entry_db)

    # -- Contact --
    @_one_transaction
    def create_contact_message(self, message: NewContactMessage) -> ContactMessage:
        message_db = DBContactMessage(
            id=str(uuid4()),
            name=message.name,
            email=message.email,
            subject=message.subject,
            message=message.message,
            created_at=utc_now(),
        )
        self.db.add(message_db)
        self.db.commit()
        self.db.refresh(message_db)
        return ContactMessage(
            id=message_db.id,
            name=message_db.name,
            email=message_db.email,
            subject=message_db.subject,
            message=message_db.message,
            created_at=_as_utc(message_db.created_at),
        )

    # -- Internal helpers --
    def _fetch_game(self, game_id: str) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _fetch_category(self, category_id: str) -> DBCategory | None:
        query = select(DBCategory).where(DBCategory.id == category_id)
        return self.db.scalar(query)

    def _user_to_model(self, user_db: DBUser) -> User:
        """Convert SQLAlchemy model to data transfer model."""
        return User(
            id=user_db.id,
            username=user_db.username,
            email=user_db.email,
            password=user_db.password,
            full_name=user_db.full_name,
            age_group=user_db.age_group,
            total_score=user_db.total_score,
            level=user_db.level,
            created_at=_as_utc(user_db.created_at),
        )

    def _game_to_model(self, game_db: DBGame) -> Game:
        return Game(
            id=game_db.id,
            title=game_db.title,
            description=game_db.description,
            category=game_db.category,
            icon=game_db.icon,
            difficulty=game_db.difficulty,
            age_group=game_db.age_group,
            learning_benefits=list(game_db.learning_benefits or []),
            instructions=list(game_db.instructions or []),
            play_count=game_db.play_count,
        )

    def _category_to_model(self, category_db: DBCategory) -> Category:
        return Category(
            id=category_db.id,
            name=category_db.name,
            description=category_db.description,
            icon=category_db.icon,
            color=category_db.color,
            game_count=category_db.game_count,
        )

    def _entry_to_model(self, entry_db: DBLeaderboardEntry) -> LeaderboardEntry:
        return LeaderboardEntry(
            id=entry_db.id,
            user_id=entry_db.user_id,
            game_id=entry_db.game_id,
            category=entry_db.category,
            score=entry_db.score,
            period=Period(entry_db.period),
            rank=entry_db.rank,
            created_at=_as_utc(entry_db.created_at),
        )

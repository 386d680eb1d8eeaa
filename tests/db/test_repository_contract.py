"""Behaviour every CatalogRepository must share (runs against the in-memory and the SQL store)."""

import pytest

from src.core.models import (
    Game,
    NewCategory,
    NewContactMessage,
    NewLeaderboardEntry,
    NewUser,
)
from src.core.shared_types import Period
from src.db.repository import CatalogRepository


def _new_user(username: str = "ada", email: str = "ada@example.com") -> NewUser:
    return NewUser(
        username=username,
        email=email,
        password="not-hashed",
        full_name="Ada Lovelace",
        age_group="College (18+)",
    )


# --- USERS ---
def test_create_user_sets_defaults(repository: CatalogRepository) -> None:
    """New users start at score 0 / level 1 with a generated id and a timestamp."""
    user = repository.create_user(_new_user())
    assert user.id
    assert user.total_score == 0
    assert user.level == 1
    assert user.created_at.tzinfo is not None

    assert repository.get_user(user.id) == user


def test_create_user_generates_unique_ids(repository: CatalogRepository) -> None:
    first = repository.create_user(_new_user("one", "one@example.com"))
    second = repository.create_user(_new_user("two", "two@example.com"))
    assert first.id != second.id


def test_lookup_by_username_and_email(repository: CatalogRepository) -> None:
    user = repository.create_user(_new_user())
    assert repository.get_user_by_username("ada") == user
    assert repository.get_user_by_email("ada@example.com") == user


def test_lookups_are_case_sensitive(repository: CatalogRepository) -> None:
    repository.create_user(_new_user())
    assert repository.get_user_by_username("ADA") is None
    assert repository.get_user_by_email("Ada@Example.com") is None


def test_unknown_user_is_none(repository: CatalogRepository) -> None:
    assert repository.get_user("nobody") is None
    assert repository.get_user_by_username("nobody") is None
    assert repository.get_user_by_email("nobody@example.com") is None


def test_store_does_not_enforce_username_uniqueness(repository: CatalogRepository) -> None:
    """Uniqueness is the caller's job: the store happily keeps duplicates."""
    first = repository.create_user(_new_user())
    second = repository.create_user(_new_user())
    assert first.id != second.id
    assert repository.get_user(first.id) is not None
    assert repository.get_user(second.id) is not None


# --- GAMES ---
def test_create_then_get_game(repository: CatalogRepository, make_new_game) -> None:
    """Fetched record equals the input plus play_count=0."""
    new = make_new_game()
    repository.create_game(new)

    found = repository.get_game(new.id)
    assert found == Game(
        id=new.id,
        title=new.title,
        description=new.description,
        category=new.category,
        icon=new.icon,
        difficulty=new.difficulty,
        age_group=new.age_group,
        learning_benefits=new.learning_benefits,
        instructions=new.instructions,
        play_count=0,
    )


def test_missing_benefits_and_instructions_are_empty_lists(
    repository: CatalogRepository, make_new_game
) -> None:
    game = repository.create_game(
        make_new_game(learning_benefits=None, instructions=None)
    )
    assert game.learning_benefits == []
    assert game.instructions == []
    assert repository.get_game(game.id).learning_benefits == []


def test_create_game_with_existing_id_overwrites(
    repository: CatalogRepository, make_new_game
) -> None:
    """Last write wins on id collision, no error raised."""
    repository.create_game(make_new_game(title="First"))
    repository.create_game(make_new_game(title="Second"))

    games = repository.get_games()
    assert len(games) == 1
    assert games[0].title == "Second"


def test_get_games_keeps_insertion_order(repository: CatalogRepository, make_new_game) -> None:
    for game_id in ["c-game", "a-game", "b-game"]:
        repository.create_game(make_new_game(game_id))
    assert [g.id for g in repository.get_games()] == ["c-game", "a-game", "b-game"]


def test_unknown_game_is_none(repository: CatalogRepository) -> None:
    assert repository.get_game("does-not-exist") is None


def test_games_by_category(repository: CatalogRepository, make_new_game) -> None:
    repository.create_game(make_new_game("sums", category="math"))
    repository.create_game(make_new_game("spelling", category="vocabulary"))
    repository.create_game(make_new_game("times-tables", category="math"))

    assert [g.id for g in repository.get_games_by_category("math")] == ["sums", "times-tables"]
    # exact, case-sensitive match
    assert repository.get_games_by_category("Math") == []
    assert repository.get_games_by_category("history") == []


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("planet", ["solar"]),  # title
        ("PLANET", ["solar"]),  # case-insensitive
        ("orbit", ["solar"]),  # description
        ("scien", ["solar"]),  # category
        ("a", ["solar", "abacus"]),
        ("100%", []),  # LIKE wildcards are matched literally
        ("nothing like this", []),
    ],
)
def test_search_games(
    repository: CatalogRepository, make_new_game, query: str, expected: list[str]
) -> None:
    repository.create_game(
        make_new_game(
            "solar",
            title="Planet Hopper",
            description="Follow each orbit around the sun.",
            category="science",
        )
    )
    repository.create_game(
        make_new_game(
            "abacus",
            title="Abacus",
            description="Count beads quickly.",
            category="math",
        )
    )
    assert [g.id for g in repository.search_games(query)] == expected


def test_empty_search_returns_all_games(repository: CatalogRepository, make_new_game) -> None:
    repository.create_game(make_new_game("one"))
    repository.create_game(make_new_game("two"))
    assert [g.id for g in repository.search_games("")] == ["one", "two"]


def test_increment_play_count(repository: CatalogRepository, make_new_game) -> None:
    """N sequential increments add exactly N."""
    game = repository.create_game(make_new_game())
    for _ in range(5):
        repository.increment_game_play_count(game.id)
    assert repository.get_game(game.id).play_count == 5


def test_increment_unknown_game_is_silent(repository: CatalogRepository, make_new_game) -> None:
    repository.create_game(make_new_game())
    repository.increment_game_play_count("does-not-exist")
    assert repository.get_game("does-not-exist") is None
    assert repository.get_game("fraction-frenzy").play_count == 0


def test_returned_game_is_a_copy(repository: CatalogRepository, make_new_game) -> None:
    """Mutating a returned record never changes stored state."""
    game = repository.create_game(make_new_game())
    game.play_count = 999
    game.learning_benefits.append("tampered")

    stored = repository.get_game(game.id)
    assert stored.play_count == 0
    assert "tampered" not in stored.learning_benefits


# --- CATEGORIES ---
def test_create_category_resets_game_count(repository: CatalogRepository) -> None:
    category = repository.create_category(
        NewCategory(id="history", name="History", description="Past events", icon="scroll", color="accent")
    )
    assert category.game_count == 0
    assert repository.get_category("history") == category


def test_categories_keep_insertion_order(repository: CatalogRepository) -> None:
    for category_id in ["zoology", "art"]:
        repository.create_category(
            NewCategory(id=category_id, name=category_id.title(), description="", icon="x", color="primary")
        )
    assert [c.id for c in repository.get_categories()] == ["zoology", "art"]


def test_unknown_category_is_none(repository: CatalogRepository) -> None:
    assert repository.get_category("nope") is None


# --- LEADERBOARD ---
def test_create_leaderboard_entry_defaults(repository: CatalogRepository) -> None:
    entry = repository.create_leaderboard_entry(NewLeaderboardEntry(score=120, category=""))
    assert entry.id
    assert entry.rank == 0
    assert entry.category is None  # empty category means global
    assert entry.period == Period.ALL_TIME
    assert entry.user_id is None
    assert entry.game_id is None


def test_global_board_sorted_by_score(repository: CatalogRepository) -> None:
    """Without a category only global entries appear, highest score first."""
    repository.create_leaderboard_entry(NewLeaderboardEntry(score=21650))
    repository.create_leaderboard_entry(NewLeaderboardEntry(score=25840))
    repository.create_leaderboard_entry(NewLeaderboardEntry(score=999_999, category="math"))
    repository.create_leaderboard_entry(NewLeaderboardEntry(score=23210))

    board = repository.get_leaderboard()
    assert [e.score for e in board] == [25840, 23210, 21650]
    assert all(e.category is None for e in board)


def test_category_and_period_filter(repository: CatalogRepository) -> None:
    repository.create_leaderboard_entry(NewLeaderboardEntry(score=10, category="math", period=Period.WEEKLY))
    repository.create_leaderboard_entry(NewLeaderboardEntry(score=30, category="math", period=Period.WEEKLY))
    repository.create_leaderboard_entry(NewLeaderboardEntry(score=20, category="math", period=Period.DAILY))
    repository.create_leaderboard_entry(NewLeaderboardEntry(score=40, category="logic", period=Period.WEEKLY))
    repository.create_leaderboard_entry(NewLeaderboardEntry(score=50, period=Period.WEEKLY))

    board = repository.get_leaderboard(category="math", period=Period.WEEKLY)
    assert [e.score for e in board] == [30, 10]
    assert all(e.category == "math" and e.period == Period.WEEKLY for e in board)


def test_equal_scores_keep_insertion_order(repository: CatalogRepository) -> None:
    ids = [
        repository.create_leaderboard_entry(NewLeaderboardEntry(score=score, user_id=None)).id
        for score in [50, 70, 50, 50]
    ]
    board = repository.get_leaderboard()
    assert [e.id for e in board] == [ids[1], ids[0], ids[2], ids[3]]


def test_unknown_period_matches_nothing(repository: CatalogRepository) -> None:
    repository.create_leaderboard_entry(NewLeaderboardEntry(score=10))
    assert repository.get_leaderboard(period="monthly") == []


# --- CONTACT ---
def test_create_contact_message(repository: CatalogRepository) -> None:
    message = repository.create_contact_message(
        NewContactMessage(
            name="Grace",
            email="grace@example.com",
            subject="Bug Report",
            message="The abacus beads are stuck.",
        )
    )
    assert message.id
    assert message.subject == "Bug Report"
    assert message.created_at.tzinfo is not None

"""Sample catalog loaded on startup (categories, games, users and the global all-time board)."""

from src.core.logs import get_logger
from src.core.models import Category, Game, LeaderboardEntry, User
from src.core.shared_types import Period
from src.db.repository import CatalogRepository

log = get_logger("store.seed")

SAMPLE_CATEGORIES: list[Category] = [
    Category(
        id="math",
        name="Mathematics",
        description="Arithmetic, algebra, geometry, and problem-solving games",
        icon="calculator",
        game_count=25,
        color="primary",
    ),
    Category(
        id="vocabulary",
        name="Vocabulary",
        description="Word games, spelling challenges, and language skills",
        icon="book-open",
        game_count=30,
        color="secondary",
    ),
    Category(
        id="memory",
        name="Memory",
        description="Pattern recognition, recall exercises, and brain training",
        icon="brain",
        game_count=20,
        color="accent",
    ),
    Category(
        id="logic",
        name="Logic",
        description="Critical thinking, reasoning, and problem-solving puzzles",
        icon="puzzle",
        game_count=35,
        color="primary",
    ),
    Category(
        id="language",
        name="Language",
        description="Foreign language learning and communication skills",
        icon="globe",
        game_count=40,
        color="secondary",
    ),
    Category(
        id="science",
        name="Science",
        description="Physics, chemistry, biology, and scientific method games",
        icon="atom",
        game_count=15,
        color="accent",
    ),
]

SAMPLE_GAMES: list[Game] = [
    Game(
        id="math-master",
        title="Math Master",
        description=(
            "Challenge your arithmetic skills with fun number puzzles and equations. "
            "This game helps improve calculation speed and mental math abilities through engaging gameplay."
        ),
        category="math",
        icon="calculator",
        difficulty="Beginner",
        age_group="Ages 8+",
        learning_benefits=[
            "Improves arithmetic calculation speed",
            "Enhances mental math abilities",
            "Builds number sense and pattern recognition",
        ],
        instructions=[
            "Choose your difficulty level (Easy, Medium, or Hard)",
            "Solve the math problems as quickly as possible",
            "Use the number pad or keyboard to enter answers",
            "Earn points for correct answers and speed",
            "Try to beat your high score!",
        ],
        play_count=15420,
    ),
    Game(
        id="word-wizard",
        title="Word Wizard",
        description="Expand your vocabulary with engaging word games and spelling challenges.",
        category="vocabulary",
        icon="book-open",
        difficulty="Intermediate",
        age_group="Ages 10+",
        learning_benefits=[
            "Expands vocabulary knowledge",
            "Improves spelling accuracy",
            "Enhances reading comprehension",
        ],
        instructions=[
            "Read the definition or context clue",
            "Choose the correct word from multiple options",
            "Complete word puzzles and anagrams",
            "Progress through increasing difficulty levels",
        ],
        play_count=12890,
    ),
    Game(
        id="memory-quest",
        title="Memory Quest",
        description="Boost your memory with pattern recognition and recall exercises.",
        category="memory",
        icon="brain",
        difficulty="Beginner",
        age_group="Ages 6+",
        learning_benefits=[
            "Strengthens working memory",
            "Improves pattern recognition",
            "Enhances concentration skills",
        ],
        instructions=[
            "Watch the sequence of patterns or colors",
            "Repeat the sequence in the correct order",
            "Sequences become longer as you progress",
            "Stay focused and remember the patterns",
        ],
        play_count=9650,
    ),
    Game(
        id="logic-puzzle",
        title="Logic Puzzle",
        description="Test your logical thinking with mind-bending puzzles.",
        category="logic",
        icon="puzzle",
        difficulty="Advanced",
        age_group="Ages 12+",
        learning_benefits=[
            "Develops critical thinking",
            "Improves problem-solving skills",
            "Enhances logical reasoning",
        ],
        instructions=[
            "Analyze the given puzzle or riddle",
            "Use logical deduction to find the solution",
            "Consider all possible outcomes",
            "Work step by step through complex problems",
        ],
        play_count=8730,
    ),
    Game(
        id="language-builder",
        title="Language Builder",
        description="Learn new languages through interactive exercises.",
        category="language",
        icon="globe",
        difficulty="Beginner",
        age_group="Ages 8+",
        learning_benefits=[
            "Builds foreign language vocabulary",
            "Improves pronunciation",
            "Develops cultural awareness",
        ],
        instructions=[
            "Listen to native speaker pronunciations",
            "Practice speaking with voice recognition",
            "Complete translation exercises",
            "Learn common phrases and expressions",
        ],
        play_count=11250,
    ),
    Game(
        id="speed-math",
        title="Speed Math",
        description="Race against time in rapid math challenges.",
        category="math",
        icon="zap",
        difficulty="Intermediate",
        age_group="Ages 10+",
        learning_benefits=[
            "Increases calculation speed",
            "Builds mental math confidence",
            "Improves number fluency",
        ],
        instructions=[
            "Solve as many problems as possible before time runs out",
            "Use mental math strategies for speed",
            "Compete against your previous best times",
            "Unlock new difficulty levels",
        ],
        play_count=7890,
    ),
]

SAMPLE_USERS: list[User] = [
    User(
        id="user1",
        username="alexchen",
        email="alex@example.com",
        password="hashed_password",
        full_name="Alex Chen",
        age_group="High School (15-18)",
        total_score=25840,
        level=45,
    ),
    User(
        id="user2",
        username="sarahjohnson",
        email="sarah@example.com",
        password="hashed_password",
        full_name="Sarah Johnson",
        age_group="College (18+)",
        total_score=23210,
        level=42,
    ),
    User(
        id="user3",
        username="michaelkim",
        email="michael@example.com",
        password="hashed_password",
        full_name="Michael Kim",
        age_group="Middle School (12-14)",
        total_score=21650,
        level=40,
    ),
]

SAMPLE_LEADERBOARD: list[LeaderboardEntry] = [
    LeaderboardEntry(
        id="entry1", user_id="user1", game_id=None, category=None,
        score=25840, rank=1, period=Period.ALL_TIME,
    ),
    LeaderboardEntry(
        id="entry2", user_id="user2", game_id=None, category=None,
        score=23210, rank=2, period=Period.ALL_TIME,
    ),
    LeaderboardEntry(
        id="entry3", user_id="user3", game_id=None, category=None,
        score=21650, rank=3, period=Period.ALL_TIME,
    ),
]


def seed_sample_data(repo: CatalogRepository) -> None:
    """Load the sample catalog into `repo`. Re-running overwrites the same ids."""
    for category in SAMPLE_CATEGORIES:
        repo.put_category(category)
    for game in SAMPLE_GAMES:
        repo.put_game(game)
    for user in SAMPLE_USERS:
        repo.put_user(user)
    for entry in SAMPLE_LEADERBOARD:
        repo.put_leaderboard_entry(entry)
    log.info(
        "Seeded %d categories, %d games, %d users, %d leaderboard entries",
        len(SAMPLE_CATEGORIES),
        len(SAMPLE_GAMES),
        len(SAMPLE_USERS),
        len(SAMPLE_LEADERBOARD),
    )

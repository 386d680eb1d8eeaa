"""REST routes consumed by the catalog frontend"""

from contextlib import contextmanager
from typing import Generator, Iterator, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from src.api.models import (
    CategoryResponse,
    ContactCreatedResponse,
    ContactRequest,
    GameResponse,
    LeaderboardEntryResponse,
    MessageResponse,
)
from src.core.exceptions import CatalogError
from src.core.logs import get_logger
from src.core.shared_types import Period
from src.services.catalog_service import CatalogService

log = get_logger("api")

router = APIRouter(prefix="/api")


def get_catalog_service(request: Request) -> Generator[CatalogService, None, None]:
    """One service per request, bound to whatever store the application was built with."""
    with request.app.state.repository_provider() as repository:
        yield CatalogService(repository)


@contextmanager
def failure_message(message: str) -> Iterator[None]:
    """Turn unexpected exceptions into a 500 carrying only `message`. Domain errors pass through."""
    try:
        yield
    except CatalogError:
        raise
    except Exception as exc:
        log.exception(message)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message) from exc


# -- Games --
@router.get("/games", response_model=list[GameResponse])
def list_games(
    category: Optional[str] = None,
    search: Optional[str] = None,
    service: CatalogService = Depends(get_catalog_service),
) -> list[GameResponse]:
    with failure_message("Failed to fetch games"):
        games = service.list_games(search=search, category=category)
    return [GameResponse.model_validate(g) for g in games]


@router.get("/games/{game_id}", response_model=GameResponse)
def get_game(
    game_id: str, service: CatalogService = Depends(get_catalog_service)
) -> GameResponse:
    with failure_message("Failed to fetch game"):
        game = service.get_game(game_id)
    return GameResponse.model_validate(game)


@router.post("/games/{game_id}/play", response_model=MessageResponse)
def play_game(
    game_id: str, service: CatalogService = Depends(get_catalog_service)
) -> MessageResponse:
    with failure_message("Failed to increment play count"):
        service.record_play(game_id)
    return MessageResponse(message="Play count incremented")


# -- Categories --
@router.get("/categories", response_model=list[CategoryResponse])
def list_categories(
    service: CatalogService = Depends(get_catalog_service),
) -> list[CategoryResponse]:
    with failure_message("Failed to fetch categories"):
        categories = service.list_categories()
    return [CategoryResponse.model_validate(c) for c in categories]


@router.get("/categories/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: str, service: CatalogService = Depends(get_catalog_service)
) -> CategoryResponse:
    with failure_message("Failed to fetch category"):
        category = service.get_category(category_id)
    return CategoryResponse.model_validate(category)


# -- Leaderboard --
@router.get("/leaderboard", response_model=list[LeaderboardEntryResponse])
def leaderboard(
    category: Optional[str] = None,
    period: str = Period.ALL_TIME.value,
    service: CatalogService = Depends(get_catalog_service),
) -> list[LeaderboardEntryResponse]:
    # an unknown period is just a filter value that matches nothing
    with failure_message("Failed to fetch leaderboard"):
        ranked = service.leaderboard(category=category, period=period)
    return [LeaderboardEntryResponse.from_ranked(r) for r in ranked]


# -- Contact --
@router.post(
    "/contact",
    response_model=ContactCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def contact(
    body: ContactRequest, service: CatalogService = Depends(get_catalog_service)
) -> ContactCreatedResponse:
    with failure_message("Failed to send message"):
        stored = service.submit_contact(body.to_model())
    return ContactCreatedResponse(message="Message sent successfully", id=stored.id)


# -- Auth placeholders --
@router.post("/auth/register", status_code=status.HTTP_501_NOT_IMPLEMENTED)
def register(service: CatalogService = Depends(get_catalog_service)) -> None:
    service.register()


@router.post("/auth/login", status_code=status.HTTP_501_NOT_IMPLEMENTED)
def login(service: CatalogService = Depends(get_catalog_service)) -> None:
    service.login()

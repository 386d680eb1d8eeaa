"""Application factory: wires settings, logging, the catalog store and the HTTP routes together."""

from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Callable, ContextManager, Iterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, sessionmaker
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.routes import router
from src.core.config import Settings
from src.core.exceptions import NotFoundError, NotImplementedFeatureError
from src.core.logs import get_logger, setup_logging
from src.core.shared_types import StoreKind
from src.db.database import build_engine, build_session_factory, get_db
from src.db.memory_repository import MemCatalogRepository
from src.db.repository import CatalogRepository
from src.db.seed import seed_sample_data
from src.db.sql_repository import SQLCatalogRepository

log = get_logger("app")

RepositoryProvider = Callable[[], ContextManager[CatalogRepository]]

# Validation failures per route; anything else gets the generic message
VALIDATION_MESSAGES = {"/api/contact": "Invalid contact form data"}


def create_app(
    settings: Settings | None = None, repository: CatalogRepository | None = None
) -> FastAPI:
    """
    Build the API.
    ----
    With `repository` given, that store is served as-is (tests build isolated stores this way).
    Otherwise the store is chosen by `settings.store`.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    engine = None
    if repository is not None:
        provider = _single_store(repository)
    elif settings.store == StoreKind.SQL:
        engine = build_engine(settings.database_url)
        provider = _session_store(build_session_factory(engine))
    else:
        provider = _single_store(MemCatalogRepository())

    if settings.seed_sample_data:
        with provider() as store:
            seed_sample_data(store)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        if engine is not None:
            engine.dispose()

    app = FastAPI(title="Learning Games Catalog API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.repository_provider = provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_exception_handlers(app)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"message": "Catalog API running"}

    app.include_router(router)

    log.info(
        "Catalog API ready (store=%s, seeded=%s)",
        "injected" if repository is not None else settings.store,
        settings.seed_sample_data,
    )
    return app


def _single_store(repository: CatalogRepository) -> RepositoryProvider:
    """Every request shares one store instance (the in-memory store is thread-safe)."""

    @contextmanager
    def provide() -> Iterator[CatalogRepository]:
        yield repository

    return provide


def _session_store(session_factory: sessionmaker[Session]) -> RepositoryProvider:
    """Every request gets its own session."""

    @contextmanager
    def provide() -> Iterator[CatalogRepository]:
        with contextmanager(get_db)(session_factory) as session:
            yield SQLCatalogRepository(session)

    return provide


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": f"{exc.entity} not found"},
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        log.debug("Rejected request to %s: %s", request.url.path, exc.errors())
        return _bad_request(request)

    @app.exception_handler(NotImplementedFeatureError)
    async def not_implemented(_: Request, exc: NotImplementedFeatureError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_501_NOT_IMPLEMENTED,
            content={"message": str(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    @app.exception_handler(Exception)
    async def unexpected(request: Request, exc: Exception) -> JSONResponse:
        log.error("Unhandled error on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def _bad_request(request: Request) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": VALIDATION_MESSAGES.get(request.url.path, "Invalid request")},
    )

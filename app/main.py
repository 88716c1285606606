import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.api.books import router as books_router
from app.config import Settings, get_settings
from app.db.books import BookStore
from app.db.engine import get_engine
from app.services.catalog import CatalogService

logger = logging.getLogger(__name__)


def _internal_error() -> JSONResponse:
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Book Catalog API",
        version="0.1.0",
    )

    # engine -> store -> service, wired once per app
    engine = engine or get_engine(settings.database_url)
    app.state.catalog = CatalogService(BookStore(engine))

    # Registered before CORS so that CORS wraps it, 500s included
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error on %s %s", request.method, request.url.path
            )
            response = _internal_error()
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(request: Request, exc: SQLAlchemyError):
        logger.exception("Store error on %s %s", request.method, request.url.path)
        return _internal_error()

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(books_router)

    logger.info(
        "Catalog API ready (cors origins: %s)", ", ".join(settings.cors_origins)
    )
    return app


app = create_app()

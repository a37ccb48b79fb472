import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from nc_news.api.api import api_router
from nc_news.api.errors import register_error_handlers, unexpected_error_response
from nc_news.core.config import Settings, settings as default_settings
from nc_news.db.base import Base
from nc_news.db.data.test_data import test_data
from nc_news.db.seed import seed_if_empty
from nc_news.db.session import create_db_engine, create_session_factory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Application is starting up")
    engine = create_db_engine(settings.DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")

    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    if settings.SEED_ON_STARTUP:
        with app.state.session_factory() as db:
            if seed_if_empty(db, test_data):
                logger.info("Test dataset seeded successfully")
    try:
        yield
    finally:
        engine.dispose()
        logger.info("Application is shutting down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title=settings.PROJECT_NAME,
        # Docs are opt-in; otherwise every unknown path is "Invalid endpoint."
        openapi_url="/openapi.json" if settings.ENABLE_DOCS else None,
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(api_router, prefix="/api")
    logger.info("API router included")

    register_error_handlers(app)

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.BACKEND_CORS_ORIGINS,
            allow_methods=["GET", "PATCH"],
            allow_headers=["*"],
        )
        logger.info(f"CORS middleware added with origins: {settings.BACKEND_CORS_ORIGINS}")

    @app.middleware("http")
    async def add_request_id_header(request: Request, call_next):
        request_id = str(uuid.uuid4())
        logger.info(f"Request {request_id}: {request.method} {request.url.path}")
        try:
            response = await call_next(request)
        except Exception as exc:
            # Unclassified errors bypass the exception middleware; answer here so the id is kept.
            response = unexpected_error_response(request, exc)
        response.headers["X-Request-ID"] = request_id
        logger.info(f"Response {request_id}: Status {response.status_code}")
        return response

    return app


logging.basicConfig(level=default_settings.LOG_LEVEL)

app = create_app()


def run_server():
    environment = default_settings.ENVIRONMENT
    logger.info(f"Running server in {environment} environment")

    if environment == "development":
        uvicorn.run("nc_news.main:app", host="0.0.0.0", port=default_settings.PORT, reload=True)
    else:
        uvicorn.run(app, host="0.0.0.0", port=default_settings.PORT)


if __name__ == "__main__":
    run_server()

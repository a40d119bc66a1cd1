"""Module: main.

Run with ``uvicorn petclinic.main:create_app --factory``.
"""

from fastapi import FastAPI
from sqlalchemy import Engine
from starlette.middleware.sessions import SessionMiddleware

from petclinic import __version__
from petclinic.api.api import api_router
from petclinic.cache import VetCache
from petclinic.core.config import Settings, get_settings
from petclinic.core.error_handlers import register_exception_handlers
from petclinic.core.logging import configure_logging, get_logger
from petclinic.db.init_db import init_db
from petclinic.db.session import build_engine, build_session_factory

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    engine = engine or build_engine(settings.database_url)
    init_db(engine)

    app = FastAPI(title="Pet Clinic", version=__version__)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.vet_cache = VetCache()

    # Carries flash messages across the post/redirect/get cycle.
    app.add_middleware(SessionMiddleware, secret_key=settings.secret_key)
    app.include_router(api_router)
    register_exception_handlers(app)

    logger.info("app_created", database=engine.dialect.name, environment=settings.environment)
    return app
